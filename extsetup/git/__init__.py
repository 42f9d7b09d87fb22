"""Git helpers for repository identity and commits."""

from .committer import GitCommitter
from .repository import parse_remote_url, resolve_repository_info

__all__ = ["GitCommitter", "parse_remote_url", "resolve_repository_info"]
