"""Dependency install and upgrade steps."""

from __future__ import annotations

from pathlib import Path

from .config import DEFAULT_INSTALL_COMMAND, DEFAULT_UPGRADE_COMMAND
from .logging import get_logger
from .shell import CommandRunner, run_command, split_command


class DependencyManager:
    """Runs the package manager commands configured for the repository."""

    def __init__(
        self,
        root: Path,
        runner: CommandRunner | None = None,
        *,
        install_command: str = DEFAULT_INSTALL_COMMAND,
        upgrade_command: str = DEFAULT_UPGRADE_COMMAND,
    ) -> None:
        self.root = root
        self.install_command = install_command
        self.upgrade_command = upgrade_command
        self._runner = runner or run_command
        self.logger = get_logger("dependencies")

    def installed(self) -> bool:
        """Whether dependencies appear to be installed already."""
        return (self.root / "node_modules").is_dir()

    def install(self) -> None:
        self.logger.info("Installing dependencies with %s", self.install_command)
        self._runner(split_command(self.install_command), cwd=self.root)

    def upgrade(self) -> None:
        self.logger.info("Upgrading dependencies with %s", self.upgrade_command)
        self._runner(split_command(self.upgrade_command), cwd=self.root)


__all__ = ["DependencyManager"]
