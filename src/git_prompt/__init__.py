"""Git status for the zsh prompt."""

from .app import main

__version__ = "0.1.0"

__all__ = ["main", "__version__"]
