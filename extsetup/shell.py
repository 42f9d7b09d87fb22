"""Synchronous external command execution."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Iterable, Protocol

from .errors import CommandError
from .logging import get_logger

_LOGGER = get_logger("shell")


class CommandRunner(Protocol):
    """Runs a command to completion and returns captured stdout."""

    def __call__(
        self,
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
    ) -> str: ...


def run_command(
    args: Iterable[str],
    *,
    cwd: Path,
    capture_output: bool = False,
) -> str:
    """Run ``args`` in ``cwd``; raise :class:`CommandError` on failure."""
    argv = list(args)
    _LOGGER.debug("Running %s in %s", " ".join(argv), cwd)
    try:
        completed = subprocess.run(
            argv,
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=capture_output,
        )
    except FileNotFoundError as exc:
        raise CommandError(argv, None, str(exc)) from exc
    except subprocess.CalledProcessError as exc:
        raise CommandError(argv, exc.returncode, exc.stderr or "") from exc
    if capture_output:
        return completed.stdout
    return ""


def split_command(command: str) -> list[str]:
    """Split a configured command string on whitespace."""
    return command.split()


__all__ = ["CommandRunner", "run_command", "split_command"]
