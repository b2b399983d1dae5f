"""OS-specific path management utilities."""

import sys
from pathlib import Path

from ..utils.exceptions import PathError


class PathManager:
    """Manages OS-specific log paths and prompt-friendly directory names."""

    APP_NAME = "GitPrompt"

    @staticmethod
    def get_log_dir() -> Path:
        """
        Get OS-appropriate log directory.

        Returns:
            Path to log directory
        """
        if sys.platform == "darwin":  # macOS
            base_dir = Path.home() / "Library" / "Logs"
        elif sys.platform == "win32":  # Windows
            base_dir = Path.home() / "AppData" / "Local" / PathManager.APP_NAME / "Logs"
        else:  # Linux and other Unix-like systems
            base_dir = Path.home() / ".local" / "state" / "git-prompt" / "logs"

        return base_dir / PathManager.APP_NAME if sys.platform == "darwin" else base_dir

    @staticmethod
    def get_log_file(filename: str) -> Path:
        """
        Get path to a log file.

        Args:
            filename: Name of the log file

        Returns:
            Path to the log file
        """
        return PathManager.get_log_dir() / filename

    @staticmethod
    def ensure_log_dir() -> Path:
        """
        Create the log directory if it doesn't exist.

        Raises:
            PathError: If the directory cannot be created
        """
        directory = PathManager.get_log_dir()
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PathError(
                f"Failed to create directory {directory}: {e}", path=str(directory)
            ) from e
        return directory

    @staticmethod
    def as_text(value: str) -> str | None:
        """
        Return ``value`` if it is valid Unicode text.

        ``os.getcwd()`` smuggles undecodable bytes through as lone surrogates;
        those names cannot be printed, so they count as missing.
        """
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            return None
        return value

    @staticmethod
    def short_name(path: Path) -> str | None:
        """
        Get the last segment of an existing directory path.

        Args:
            path: Directory path

        Returns:
            The directory name, or None when the path is not a directory,
            has no name (filesystem root) or the name is not valid text
        """
        try:
            if not path.is_dir():
                return None
        except OSError:
            return None

        if not path.name:
            return None
        return PathManager.as_text(path.name)

    @staticmethod
    def relative_path(path: Path, base: Path) -> str:
        """
        Get ``path`` relative to ``base`` as text.

        Raises:
            PathError: If ``path`` is not inside ``base`` or the result is not
                valid text
        """
        try:
            relative = path.relative_to(base)
        except ValueError as e:
            raise PathError(f"{path} is not inside {base}", path=str(path)) from e

        text = PathManager.as_text(str(relative))
        if text is None:
            raise PathError(f"Relative path is not valid text: {relative!r}")
        return text
