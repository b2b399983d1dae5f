"""Entry point for git-prompt (`python -m git_prompt`)."""

import sys

from .app import main


if __name__ == "__main__":
    sys.exit(main())
