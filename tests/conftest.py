"""Shared fixtures: throwaway Git repositories built with the git executable."""

import logging
import shutil
import subprocess
from pathlib import Path

import pytest

requires_git = pytest.mark.skipif(
    shutil.which("git") is None, reason="git executable not available"
)


def git(cwd: Path, *args: str) -> str:
    """Run git in ``cwd`` and return its stripped standard output."""
    result = subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        check=True,
        capture_output=True,
        encoding="utf-8",
        errors="surrogateescape",
    )
    return result.stdout.strip()


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """
    Resolved temporary directory with an isolated Git environment.

    Repository discovery is not allowed to climb above the workspace.
    """
    root = tmp_path.resolve()
    home = root / "home"
    home.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(root))
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Prompt Tester")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "tester@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Prompt Tester")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "tester@example.com")
    for variable in ("GIT_DIR", "GIT_WORK_TREE", "GIT_INDEX_FILE"):
        monkeypatch.delenv(variable, raising=False)
    for variable in (
        "GIT_PROMPT_GIT",
        "GIT_PROMPT_TIMEOUT",
        "GIT_PROMPT_LOG_LEVEL",
        "GIT_PROMPT_LOG_STDERR",
    ):
        monkeypatch.delenv(variable, raising=False)
    monkeypatch.setenv("GIT_PROMPT_LOG_FILE", "0")

    return root


@pytest.fixture
def empty_repo(workspace):
    """Freshly initialized repository named ``repo`` on branch main."""
    repo = workspace / "repo"
    repo.mkdir()
    git(repo, "init", "-q")
    git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    return repo


@pytest.fixture
def repo(empty_repo):
    """Repository with one commit and a clean working tree."""
    (empty_repo / "README.md").write_text("hello\n")
    git(empty_repo, "add", "README.md")
    git(empty_repo, "commit", "-q", "-m", "Initial commit")
    return empty_repo


def _is_pytest_handler(handler: logging.Handler) -> bool:
    return type(handler).__module__.startswith("_pytest")


@pytest.fixture
def restore_logging():
    """
    Undo setup_logging() after a test.

    pytest attaches its own capture handlers for each test phase, so only the
    application's handlers are snapshotted; the current phase's capture
    handlers are kept.
    """
    root_logger = logging.getLogger()
    git_logger = logging.getLogger("git_prompt.services.git_service")
    handlers = [h for h in root_logger.handlers if not _is_pytest_handler(h)]
    level = root_logger.level
    yield
    for logger in (root_logger, git_logger):
        for handler in logger.handlers:
            if handler not in handlers and not _is_pytest_handler(handler):
                handler.close()
    current = [h for h in root_logger.handlers if _is_pytest_handler(h)]
    root_logger.handlers[:] = handlers + current
    root_logger.setLevel(level)
    git_logger.handlers.clear()
