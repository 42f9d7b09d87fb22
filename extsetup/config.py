"""Configuration loading for extsetup (.extsetup.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".extsetup.yml"

DEFAULT_COMMIT_MESSAGE = "chore: setup boilerplate"
DEFAULT_ENGINE_DEPENDENCY = "@types/vscode"
DEFAULT_INSTALL_COMMAND = "pnpm install"
DEFAULT_UPGRADE_COMMAND = "npx --yes taze"


@dataclass
class CommandsConfig:
    """Package manager commands used for dependency steps."""

    install: str = DEFAULT_INSTALL_COMMAND
    upgrade: str = DEFAULT_UPGRADE_COMMAND


@dataclass
class FilesConfig:
    """Repository-relative paths of the files rewritten during setup."""

    manifest: str = "package.json"
    changelog: str = "CHANGELOG.md"
    license: str = "LICENSE"


@dataclass
class SetupConfig:
    """Represents the settings defined in .extsetup.yml."""

    root: Path
    block_on_uncommitted: bool = False
    commit_message: str = DEFAULT_COMMIT_MESSAGE
    engine_dependency: str = DEFAULT_ENGINE_DEPENDENCY
    commands: CommandsConfig = field(default_factory=CommandsConfig)
    files: FilesConfig = field(default_factory=FilesConfig)

    @property
    def manifest_path(self) -> Path:
        return self.root / self.files.manifest

    @property
    def changelog_path(self) -> Path:
        return self.root / self.files.changelog

    @property
    def license_path(self) -> Path:
        return self.root / self.files.license


def load_config(config_path: Path) -> SetupConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return SetupConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = SetupConfig(root=root)

    block = _as_bool(data.get("block_on_uncommitted"))
    if block is not None:
        config.block_on_uncommitted = block
    commit_message = _as_str(data.get("commit_message"))
    if commit_message:
        config.commit_message = commit_message
    engine_dependency = _as_str(data.get("engine_dependency"))
    if engine_dependency:
        config.engine_dependency = engine_dependency

    commands_data = _as_dict(data.get("commands"))
    install = _as_str(commands_data.get("install"))
    upgrade = _as_str(commands_data.get("upgrade"))
    config.commands = CommandsConfig(
        install=install or DEFAULT_INSTALL_COMMAND,
        upgrade=upgrade or DEFAULT_UPGRADE_COMMAND,
    )

    files_data = _as_dict(data.get("files"))
    defaults = FilesConfig()
    config.files = FilesConfig(
        manifest=_as_str(files_data.get("manifest")) or defaults.manifest,
        changelog=_as_str(files_data.get("changelog")) or defaults.changelog,
        license=_as_str(files_data.get("license")) or defaults.license,
    )
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "CONFIG_FILENAME",
    "CommandsConfig",
    "FilesConfig",
    "SetupConfig",
    "load_config",
]
