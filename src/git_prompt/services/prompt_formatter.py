"""Prompt line formatting."""

import logging

from ..models.repository import DirectoryContext
from ..models.status_label import StatusLabel
from ..utils.exceptions import PathError
from ..utils.path_manager import PathManager

logger = logging.getLogger(__name__)


class PromptFormatter:
    """Renders the directory label and status label as one prompt line."""

    def directory_label(self, context: DirectoryContext) -> str:
        """
        Get the directory part of the prompt.

        Inside a repository the label starts at the repository's top-level
        directory (``repo`` or ``repo/sub/dir``); elsewhere it is the name of
        the current directory.

        Args:
            context: Directory being rendered

        Returns:
            str: The label, empty when no name can be shown
        """
        repository = context.repository

        if repository is None or context.at_repository_root:
            return PathManager.short_name(context.path) or ""

        if repository.workdir is None:
            return ""

        root_name = PathManager.short_name(repository.workdir)
        if root_name is None:
            return ""

        try:
            relative = PathManager.relative_path(context.path, repository.workdir)
        except PathError as e:
            logger.debug(f"Omitting relative path: {e}")
            relative = ""

        return f"{root_name}/{relative}"

    def format_line(self, context: DirectoryContext, status: StatusLabel) -> str:
        """
        Build the full prompt line, without the trailing newline.

        Returns:
            str: ``"<directory-label> <status-markup> "``
        """
        return f"{self.directory_label(context)} {status.render()} "
