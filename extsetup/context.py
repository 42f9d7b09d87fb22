"""Per-run state threaded through the setup steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .config import SetupConfig
from .manifest import ManifestDocument
from .models import RepositoryInfo
from .shell import CommandRunner, run_command


@dataclass
class SetupContext:
    """Everything a step needs, built once by the orchestrator."""

    root: Path
    config: SetupConfig
    repository: RepositoryInfo
    manifest: ManifestDocument
    installed: bool
    runner: CommandRunner = field(default=run_command)

    @property
    def bugs_url(self) -> str:
        bugs = self.manifest.get("bugs")
        if isinstance(bugs, dict) and isinstance(bugs.get("url"), str):
            return bugs["url"]
        return f"{self.repository.repo_url}/issues"


__all__ = ["SetupContext"]
