"""Exception types raised by setup steps."""

from __future__ import annotations

from typing import Sequence


class SetupError(RuntimeError):
    """Base class for failures that abort a setup run."""


class ConfigError(SetupError):
    """Raised when .extsetup.yml cannot be parsed."""


class CommandError(SetupError):
    """Raised when an external command exits non-zero or cannot be started."""

    def __init__(self, args: Sequence[str], returncode: int | None, stderr: str = "") -> None:
        self.command = list(args)
        self.returncode = returncode
        self.stderr = stderr
        rendered = " ".join(self.command)
        if returncode is None:
            message = f"Could not run `{rendered}`"
        else:
            message = f"`{rendered}` exited with status {returncode}"
        detail = stderr.strip()
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class RemoteURLError(SetupError):
    """Raised when remote.origin.url is missing or not in SSH form."""


class ManifestError(SetupError):
    """Raised when package.json cannot be loaded."""


class UncommittedChangesError(SetupError):
    """Raised when the working tree is dirty and blocking is enabled."""


__all__ = [
    "CommandError",
    "ConfigError",
    "ManifestError",
    "RemoteURLError",
    "SetupError",
    "UncommittedChangesError",
]
