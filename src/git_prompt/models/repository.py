"""Repository data models for git-prompt."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class RepositoryState(Enum):
    """Operation a repository is in the middle of, as recorded by Git."""

    CLEAN = "clean"
    MERGE = "merge"
    REVERT = "revert"
    REVERT_SEQUENCE = "revert_sequence"
    CHERRY_PICK = "cherry_pick"
    CHERRY_PICK_SEQUENCE = "cherry_pick_sequence"
    BISECT = "bisect"
    REBASE = "rebase"
    REBASE_INTERACTIVE = "rebase_interactive"
    REBASE_MERGE = "rebase_merge"
    APPLY_MAILBOX = "apply_mailbox"
    APPLY_MAILBOX_OR_REBASE = "apply_mailbox_or_rebase"


@dataclass(frozen=True)
class RepositoryHandle:
    """
    A discovered Git repository.

    Attributes:
        git_dir: Absolute path of the metadata directory (``.git``)
        workdir: Absolute path of the top-level working directory, or None for
            bare repositories and when discovery started inside ``git_dir``
    """

    git_dir: Path
    workdir: Path | None = None

    @property
    def is_bare(self) -> bool:
        """Check whether the repository has no working directory."""
        return self.workdir is None


@dataclass
class DirectoryContext:
    """
    The directory the prompt is rendered for.

    Attributes:
        path: Absolute current working directory
        repository: Repository enclosing ``path``, if any
    """

    path: Path
    repository: RepositoryHandle | None = None

    def attach_repository(self, repository: RepositoryHandle | None) -> None:
        """Record the result of repository discovery."""
        self.repository = repository

    @property
    def in_repository(self) -> bool:
        return self.repository is not None

    @property
    def at_repository_root(self) -> bool:
        """Check whether ``path`` is the repository's top-level directory."""
        if self.repository is None or self.repository.workdir is None:
            return False
        return self.repository.workdir == self.path
