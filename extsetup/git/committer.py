"""Working-tree inspection and commit helpers."""

from __future__ import annotations

from pathlib import Path

from ..config import DEFAULT_COMMIT_MESSAGE
from ..logging import get_logger
from ..shell import CommandRunner, run_command


class GitCommitter:
    """Checks for local changes and commits the customized boilerplate."""

    def __init__(self, runner: CommandRunner | None = None) -> None:
        self._runner = runner or run_command
        self.logger = get_logger("git.committer")

    def has_uncommitted_changes(self, repo_path: Path) -> bool:
        status = self._runner(["git", "status", "--porcelain"], cwd=repo_path, capture_output=True)
        return bool(status.strip())

    def commit_all(self, repo_path: Path, *, message: str = DEFAULT_COMMIT_MESSAGE) -> None:
        """Stage every change in the working tree and commit it."""
        self._runner(["git", "add", "-A"], cwd=repo_path)
        self._runner(["git", "commit", "-m", message], cwd=repo_path)
        self.logger.info("Committed setup changes: %s", message)


__all__ = ["GitCommitter"]
