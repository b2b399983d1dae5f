"""Data models for git-prompt."""

from .config import PromptConfig
from .repository import DirectoryContext, RepositoryHandle, RepositoryState
from .status_label import StatusLabel

__all__ = [
    "DirectoryContext",
    "PromptConfig",
    "RepositoryHandle",
    "RepositoryState",
    "StatusLabel",
]
