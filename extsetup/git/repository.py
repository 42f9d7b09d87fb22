"""Resolve author and repository identity from git configuration."""

from __future__ import annotations

import re
from pathlib import Path

from ..errors import CommandError, RemoteURLError
from ..logging import get_logger
from ..models import RepositoryInfo
from ..shell import CommandRunner, run_command

SSH_URL_PATTERN = re.compile(r"git@([\w\-.]+):(\w+)/([\w\-]+)\.git")

_LOGGER = get_logger("git.repository")


def parse_remote_url(url: str) -> tuple[str, str, str]:
    """Return ``(hostname, user, repo)`` for an SSH-style remote URL."""
    match = SSH_URL_PATTERN.search(url)
    if match is None:
        raise RemoteURLError("You must set a remote named origin with ssh format")
    hostname, user_name, repo_name = match.groups()
    return hostname, user_name, repo_name


def resolve_repository_info(root: Path, runner: CommandRunner = run_command) -> RepositoryInfo:
    """Read remote.origin.url, user.name and user.email into a RepositoryInfo."""
    try:
        remote = _git_config(root, runner, "remote.origin.url")
    except CommandError as exc:
        raise RemoteURLError("You must set a remote named origin with ssh format") from exc
    hostname, user_name, repo_name = parse_remote_url(remote)

    author_name = _git_config(root, runner, "user.name")
    author_email = _git_config(root, runner, "user.email")
    info = RepositoryInfo(
        hostname=hostname,
        author_name=author_name,
        author_email=author_email,
        author_url=f"https://{hostname}/{user_name}",
        user_name=user_name,
        repo_name=repo_name,
        repo_url=f"https://{hostname}/{user_name}/{repo_name}",
    )
    _LOGGER.debug("Resolved repository %s for %s", info.repo_url, info.author_name)
    return info


def _git_config(root: Path, runner: CommandRunner, key: str) -> str:
    output = runner(["git", "config", "--get", key], cwd=root, capture_output=True)
    return output.strip()


__all__ = ["SSH_URL_PATTERN", "parse_remote_url", "resolve_repository_info"]
