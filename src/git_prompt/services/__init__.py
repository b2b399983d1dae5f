"""Service layer for repository queries and prompt rendering."""

from .git_service import GitService
from .prompt_formatter import PromptFormatter
from .repository_locator import RepositoryLocator
from .status_service import StatusService

__all__ = [
    "GitService",
    "PromptFormatter",
    "RepositoryLocator",
    "StatusService",
]
