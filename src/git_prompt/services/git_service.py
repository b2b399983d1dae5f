"""Git query service for git-prompt."""

import logging
import shutil
import subprocess
from pathlib import Path

from ..models.repository import RepositoryHandle, RepositoryState
from ..utils.exceptions import ErrorSeverity, GitError, PathError
from .base import CommandResult, GitServiceInterface, HeadInfo

logger = logging.getLogger(__name__)

BRANCH_REF_PREFIX = "refs/heads/"

# Marker files Git leaves in the metadata directory while an operation is in
# progress, checked in order. The first match wins.
STATE_MARKERS: list[tuple[str, RepositoryState]] = [
    ("rebase-merge/interactive", RepositoryState.REBASE_INTERACTIVE),
    ("rebase-merge", RepositoryState.REBASE_MERGE),
    ("rebase-apply/rebasing", RepositoryState.REBASE),
    ("rebase-apply/applying", RepositoryState.APPLY_MAILBOX),
    ("rebase-apply", RepositoryState.APPLY_MAILBOX_OR_REBASE),
    ("MERGE_HEAD", RepositoryState.MERGE),
    ("REVERT_HEAD", RepositoryState.REVERT),
    ("CHERRY_PICK_HEAD", RepositoryState.CHERRY_PICK),
    ("BISECT_LOG", RepositoryState.BISECT),
]

SEQUENCE_STATES = {
    RepositoryState.REVERT: RepositoryState.REVERT_SEQUENCE,
    RepositoryState.CHERRY_PICK: RepositoryState.CHERRY_PICK_SEQUENCE,
}

SEQUENCER_TODO = "sequencer/todo"


class GitService(GitServiceInterface):
    """
    Service for the read-only Git queries behind the prompt.

    Every query runs the ``git`` executable once. Nothing here modifies a
    repository, and diff and status queries pass ``--no-optional-locks`` so
    the index is never rewritten as a side effect.
    """

    def __init__(self, timeout: float = 5, git_executable: str = "git"):
        """
        Initialize the Git service.

        Args:
            timeout: Timeout for each Git query in seconds
            git_executable: Name or path of the git binary
        """
        super().__init__()
        self.timeout = timeout
        self._git_executable = git_executable

    def _do_initialize(self) -> None:
        """Initialize the Git service by checking that git can be found."""
        resolved = shutil.which(self._git_executable)
        if resolved is None:
            raise GitError(
                f"Git executable not found: {self._git_executable}",
                severity=ErrorSeverity.WARNING,
            )
        logger.debug(f"Git service initialized: {resolved}")

    def _run_git_command(
        self,
        args: list[str],
        cwd: Path,
        timeout: float | None = None,
    ) -> CommandResult:
        """
        Execute a Git command.

        Args:
            args: Git command arguments (without 'git')
            cwd: Working directory for the command
            timeout: Command timeout in seconds

        Returns:
            CommandResult: Result of the command execution

        Raises:
            GitError: If the command could not be run or timed out
        """
        if timeout is None:
            timeout = self.timeout

        command = [self._git_executable] + args
        command_text = " ".join(command)

        try:
            logger.debug(f"Executing Git command: {command_text} in {cwd}")

            result = subprocess.run(
                command,
                cwd=str(cwd),
                capture_output=True,
                encoding="utf-8",
                errors="surrogateescape",
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise GitError(
                f"Git command timed out after {timeout} seconds: {command_text}",
                command=command_text,
                severity=ErrorSeverity.WARNING,
            ) from e
        except (OSError, subprocess.SubprocessError) as e:
            raise GitError(
                f"Failed to execute Git command: {e}", command=command_text
            ) from e

        success = result.returncode == 0
        output = result.stdout.rstrip("\n") if result.stdout else ""
        error = result.stderr.strip() if result.stderr else ""

        if not success:
            logger.debug(
                f"Git command failed: {command_text}, "
                f"exit code: {result.returncode}, error: {error}"
            )

        return CommandResult(
            success=success, output=output, error=error, exit_code=result.returncode
        )

    def _require_success(self, result: CommandResult, what: str) -> CommandResult:
        if not result.success:
            raise GitError(
                f"Failed to {what}: {result.error}",
                exit_code=result.exit_code,
                stderr=result.error,
                severity=ErrorSeverity.WARNING,
            )
        return result

    def _query_root(self, repository: RepositoryHandle) -> Path:
        return repository.workdir or repository.git_dir

    def discover_repository(self, path: Path) -> RepositoryHandle:
        """
        Find the repository enclosing a path, searching parent directories.

        Args:
            path: Directory to start from

        Returns:
            RepositoryHandle: The discovered repository

        Raises:
            GitError: If no repository encloses the path
        """
        result = self._run_git_command(["rev-parse", "--absolute-git-dir"], cwd=path)
        if not result.success or not result.output:
            raise GitError(
                f"No Git repository found for path: {path}",
                exit_code=result.exit_code,
                stderr=result.error,
                severity=ErrorSeverity.INFO,
            )

        git_dir = Path(result.output)

        # Fails for bare repositories and inside the metadata directory
        toplevel = self._run_git_command(["rev-parse", "--show-toplevel"], cwd=path)
        if toplevel.success and toplevel.output:
            workdir = Path(toplevel.output)
        else:
            workdir = self._find_metadata_workdir(git_dir, path)

        return RepositoryHandle(git_dir=git_dir, workdir=workdir)

    def _find_metadata_workdir(self, git_dir: Path, path: Path) -> Path | None:
        """
        Get the working directory of a non-bare repository from inside its
        metadata directory.

        Uses ``core.worktree`` when set, otherwise the directory containing
        the metadata directory. Bare repositories have none.
        """
        bare = self._run_git_command(["rev-parse", "--is-bare-repository"], cwd=path)
        if not bare.success or bare.output != "false":
            return None

        configured = self._run_git_command(
            ["config", "--get", "core.worktree"], cwd=path
        )
        if configured.success and configured.output:
            # Relative values are relative to the metadata directory
            return (git_dir / configured.output).resolve()

        return git_dir.parent

    def get_repository_state(self, repository: RepositoryHandle) -> RepositoryState:
        """
        Get the operation the repository is in the middle of.

        Args:
            repository: Repository to inspect

        Returns:
            RepositoryState: CLEAN when no operation is in progress

        Raises:
            PathError: If the metadata directory cannot be read
        """
        git_dir = repository.git_dir
        try:
            for marker, state in STATE_MARKERS:
                if not (git_dir / marker).exists():
                    continue
                if state in SEQUENCE_STATES and (git_dir / SEQUENCER_TODO).is_file():
                    return SEQUENCE_STATES[state]
                return state
        except OSError as e:
            raise PathError(
                f"Failed to read repository state: {e}", path=str(git_dir)
            ) from e

        return RepositoryState.CLEAN

    def get_head(self, repository: RepositoryHandle) -> HeadInfo | None:
        """
        Resolve HEAD.

        Args:
            repository: Repository to inspect

        Returns:
            HeadInfo with the branch name when HEAD is on a local branch, or
            None when the current branch has no commits yet
        """
        cwd = self._query_root(repository)

        commit = self._run_git_command(
            ["rev-parse", "--verify", "--quiet", "HEAD"], cwd=cwd
        )
        if not commit.success or not commit.output:
            return None

        symbolic = self._run_git_command(["symbolic-ref", "--quiet", "HEAD"], cwd=cwd)
        branch = None
        if symbolic.success and symbolic.output.startswith(BRANCH_REF_PREFIX):
            branch = symbolic.output[len(BRANCH_REF_PREFIX) :]

        return HeadInfo(commit_id=commit.output, branch=branch)

    def count_changed_files(self, repository: RepositoryHandle) -> int:
        """
        Count files that differ between the index and the working tree.

        Raises:
            GitError: If the diff cannot be computed
        """
        result = self._require_success(
            self._run_git_command(
                ["--no-optional-locks", "diff", "--name-only", "--no-ext-diff", "-z"],
                cwd=self._query_root(repository),
            ),
            "compute working tree diff",
        )
        return len([name for name in result.output.split("\0") if name])

    def has_untracked_files(self, repository: RepositoryHandle) -> bool:
        """
        Check for new files that are not tracked.

        Raises:
            GitError: If the status cannot be computed
        """
        result = self._require_success(
            self._run_git_command(
                [
                    "--no-optional-locks",
                    "status",
                    "--porcelain",
                    "--untracked-files=normal",
                ],
                cwd=self._query_root(repository),
            ),
            "list working tree status",
        )
        return any(line.startswith("??") for line in result.output.splitlines())
