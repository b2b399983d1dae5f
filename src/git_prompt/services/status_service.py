"""Repository status summarization for the prompt."""

import logging

from ..models.repository import RepositoryHandle, RepositoryState
from ..models.status_label import StatusLabel
from ..utils.error_handler import fallback_on_error
from ..utils.path_manager import PathManager
from .base import GitServiceInterface, HeadInfo

logger = logging.getLogger(__name__)

IN_PROGRESS_COLOR = "magenta"
NO_COMMITS_COLOR = "yellow"
DIRTY_COLOR = "red"
CLEAN_COLOR = "blue"

DIRTY_MARKER = "*"
UNKNOWN_BRANCH = "(unknown branch)"

NOT_A_REPOSITORY = StatusLabel("(not repo)").with_color(CLEAN_COLOR).bold()
NO_COMMITS_YET = StatusLabel("(no commits yet)").with_color(NO_COMMITS_COLOR)

STATE_LABELS: dict[RepositoryState, str] = {
    RepositoryState.MERGE: "(merging)",
    RepositoryState.REVERT: "(reverting)",
    RepositoryState.REVERT_SEQUENCE: "(reverting)",
    RepositoryState.CHERRY_PICK: "(cherry-picking)",
    RepositoryState.CHERRY_PICK_SEQUENCE: "(cherry-picking)",
    RepositoryState.BISECT: "(bisecting)",
    RepositoryState.REBASE: "(rebasing)",
    RepositoryState.REBASE_INTERACTIVE: "(rebasing)",
    RepositoryState.REBASE_MERGE: "(rebasing)",
    RepositoryState.APPLY_MAILBOX: "(mailbox-applying)",
    RepositoryState.APPLY_MAILBOX_OR_REBASE: "(mailbox-applying)",
}


def state_label(state: RepositoryState) -> StatusLabel | None:
    """
    Get the fixed label for an in-progress operation.

    Returns:
        The label, or None for a clean repository
    """
    text = STATE_LABELS.get(state)
    if text is None:
        return None
    return StatusLabel(text, color=IN_PROGRESS_COLOR)


def branch_label(head: HeadInfo) -> str:
    """
    Branch name when on a branch, otherwise the full commit id.

    Branch names that are not valid UTF-8 cannot be shown and render as
    UNKNOWN_BRANCH.
    """
    if head.is_branch:
        return PathManager.as_text(head.branch) or UNKNOWN_BRANCH
    return head.commit_id


class StatusService:
    """
    Summarizes a repository into a single status label.

    Each Git query is wrapped so a failure degrades to a neutral value
    (clean state, no commits, no changes) instead of aborting the prompt.
    """

    def __init__(self, git_service: GitServiceInterface):
        self.git_service = git_service

    def not_a_repository(self) -> StatusLabel:
        return NOT_A_REPOSITORY

    def summarize(self, repository: RepositoryHandle) -> StatusLabel:
        """
        Summarize repository state, branch and dirtiness.

        Args:
            repository: Repository to summarize

        Returns:
            StatusLabel: Label for the prompt
        """
        state = self._read_state(repository)
        in_progress = state_label(state)
        if in_progress is not None:
            logger.debug(f"Repository is in state {state.value}")
            return in_progress

        head = self._read_head(repository)
        if head is None:
            return NO_COMMITS_YET

        name = branch_label(head)
        if self.is_dirty(repository):
            return StatusLabel(f"{name}{DIRTY_MARKER}", color=DIRTY_COLOR)
        return StatusLabel(name, color=CLEAN_COLOR)

    def is_dirty(self, repository: RepositoryHandle) -> bool:
        """Check for changed or untracked files in the working tree."""
        return (
            self._count_changed_files(repository) > 0
            or self._has_untracked_files(repository)
        )

    @fallback_on_error(RepositoryState.CLEAN)
    def _read_state(self, repository: RepositoryHandle) -> RepositoryState:
        return self.git_service.get_repository_state(repository)

    @fallback_on_error(None)
    def _read_head(self, repository: RepositoryHandle) -> HeadInfo | None:
        return self.git_service.get_head(repository)

    @fallback_on_error(0)
    def _count_changed_files(self, repository: RepositoryHandle) -> int:
        return self.git_service.count_changed_files(repository)

    @fallback_on_error(False)
    def _has_untracked_files(self, repository: RepositoryHandle) -> bool:
        return self.git_service.has_untracked_files(repository)
