"""Base interfaces and abstract classes for services."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..models.repository import RepositoryHandle, RepositoryState


class CommandResult:
    """Result of a command execution."""

    def __init__(
        self, success: bool, output: str = "", error: str = "", exit_code: int = 0
    ):
        self.success = success
        self.output = output
        self.error = error
        self.exit_code = exit_code


class HeadInfo:
    """Where HEAD points in a repository with at least one commit."""

    def __init__(self, commit_id: str, branch: str | None = None):
        self.commit_id = commit_id
        self.branch = branch

    @property
    def is_branch(self) -> bool:
        return self.branch is not None


class BaseService(ABC):
    """Base class for all services."""

    def __init__(self):
        self._initialized = False

    def initialize(self) -> None:
        """Initialize the service."""
        if not self._initialized:
            self._do_initialize()
            self._initialized = True

    @abstractmethod
    def _do_initialize(self) -> None:
        """Perform service-specific initialization."""
        pass

    def is_initialized(self) -> bool:
        """Check if the service is initialized."""
        return self._initialized


class GitServiceInterface(BaseService):
    """Interface for the read-only Git queries the prompt needs."""

    @abstractmethod
    def discover_repository(self, path: Path) -> RepositoryHandle:
        """Find the repository enclosing a path."""
        pass

    @abstractmethod
    def get_repository_state(self, repository: RepositoryHandle) -> RepositoryState:
        """Get the operation the repository is in the middle of."""
        pass

    @abstractmethod
    def get_head(self, repository: RepositoryHandle) -> HeadInfo | None:
        """Resolve HEAD, or None when there are no commits yet."""
        pass

    @abstractmethod
    def count_changed_files(self, repository: RepositoryHandle) -> int:
        """Count files that differ between the index and the working tree."""
        pass

    @abstractmethod
    def has_untracked_files(self, repository: RepositoryHandle) -> bool:
        """Check for new files that are not tracked."""
        pass
