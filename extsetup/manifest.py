"""Loading, rewriting and persisting the extension manifest (package.json)."""

from __future__ import annotations

import copy
import json
import re
from pathlib import Path
from typing import Any, Dict, MutableMapping, Optional

from .errors import ManifestError
from .logging import get_logger
from .models import PromptAnswers, RepositoryInfo

ManifestDocument = Dict[str, Any]

PR_WELCOME_BADGE = "PRs Welcome"

_REPOSITORY_URL_PATTERN = re.compile(r"https://[\w\-.]+/\w+/[\w\-]+")

_LOGGER = get_logger("manifest")


def load_manifest(path: Path) -> ManifestDocument:
    """Read ``path`` as a JSON object, preserving key order."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ManifestError(f"Manifest not found at {path}") from exc
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Failed to parse {path.name}: {exc}") from exc
    if not isinstance(document, dict):
        raise ManifestError(f"{path.name} must contain a JSON object at the root")
    return document


def write_manifest(path: Path, document: ManifestDocument) -> None:
    """Overwrite ``path`` with 4-space indented JSON and a trailing newline."""
    path.write_text(
        json.dumps(document, indent=4, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )


def replace_repository_url(value: str, repo_url: str) -> str:
    """Swap the first ``https://host/user/repo`` substring of ``value`` for ``repo_url``."""
    return _REPOSITORY_URL_PATTERN.sub(repo_url, value, count=1)


def rewrite_manifest(
    document: ManifestDocument,
    answers: PromptAnswers,
    info: RepositoryInfo,
) -> ManifestDocument:
    """Return a copy of ``document`` carrying the collected answers.

    Identity fields are overwritten from ``answers``; links that point at the
    boilerplate repository are repointed to ``info.repo_url``. Fields the
    setup does not manage are copied unchanged.
    """
    updated = copy.deepcopy(document)
    updated["name"] = answers.name
    updated["displayName"] = answers.display_name
    updated["description"] = answers.description
    updated["author"] = {
        "name": answers.author_name,
        "email": answers.author_email,
        "url": answers.author_url,
    }
    updated["keywords"] = list(answers.keywords)
    updated["categories"] = list(answers.categories)

    homepage = updated.get("homepage")
    if isinstance(homepage, str):
        updated["homepage"] = replace_repository_url(homepage, info.repo_url)

    repository = updated.get("repository")
    if isinstance(repository, MutableMapping):
        url = repository.get("url")
        if isinstance(url, str) and _REPOSITORY_URL_PATTERN.search(url):
            repository["url"] = replace_repository_url(url, info.repo_url)
        else:
            repository["url"] = info.repo_url
    else:
        updated["repository"] = {"type": "git", "url": info.repo_url}

    bugs = updated.get("bugs")
    if not isinstance(bugs, MutableMapping):
        bugs = {"url": bugs} if isinstance(bugs, str) else {}
        updated["bugs"] = bugs
    if isinstance(bugs.get("url"), str):
        bugs["url"] = replace_repository_url(bugs["url"], info.repo_url)
    bugs["email"] = info.author_email

    badge = _find_badge(updated, PR_WELCOME_BADGE)
    if badge is not None and isinstance(badge.get("href"), str):
        badge["href"] = replace_repository_url(badge["href"], info.repo_url)

    return updated


def sync_engine_version(document: ManifestDocument, dependency: str) -> bool:
    """Mirror the resolved ``dependency`` version into ``engines.vscode``.

    Returns ``True`` when the document changed.
    """
    dev_dependencies = document.get("devDependencies")
    version = dev_dependencies.get(dependency) if isinstance(dev_dependencies, dict) else None
    if not isinstance(version, str):
        _LOGGER.warning("devDependencies has no %s entry; engines.vscode left unchanged", dependency)
        return False

    engines = document.get("engines")
    if not isinstance(engines, MutableMapping):
        engines = {}
        document["engines"] = engines
    if engines.get("vscode") == version:
        return False
    engines["vscode"] = version
    return True


def _find_badge(document: ManifestDocument, description: str) -> Optional[MutableMapping[str, Any]]:
    badges = document.get("badges")
    if not isinstance(badges, list):
        return None
    for badge in badges:
        if isinstance(badge, MutableMapping) and badge.get("description") == description:
            return badge
    return None


__all__ = [
    "ManifestDocument",
    "PR_WELCOME_BADGE",
    "load_manifest",
    "replace_repository_url",
    "rewrite_manifest",
    "sync_engine_version",
    "write_manifest",
]
