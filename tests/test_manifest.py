"""Tests for package.json rewriting."""

from __future__ import annotations

import copy
import json
from pathlib import Path

import pytest

from extsetup.errors import ManifestError
from extsetup.manifest import (
    load_manifest,
    replace_repository_url,
    rewrite_manifest,
    sync_engine_version,
    write_manifest,
)
from extsetup.models import PromptAnswers, RepositoryInfo
from tests._fixtures.boilerplate import SAMPLE_MANIFEST

INFO = RepositoryInfo(
    hostname="github.com",
    author_name="Octo Cat",
    author_email="octo@example.com",
    author_url="https://github.com/octocat",
    user_name="octocat",
    repo_name="hello-ext",
    repo_url="https://github.com/octocat/hello-ext",
)

ANSWERS = PromptAnswers(
    name="hello-ext",
    display_name="Hello Ext",
    description="Says hello",
    author_name="Octo",
    author_email="octo@users.example.com",
    author_url="https://octo.example.com",
    keywords=["hello"],
    categories=["Other", "Themes"],
)


def test_rewrite_manifest_overwrites_identity_fields() -> None:
    updated = rewrite_manifest(SAMPLE_MANIFEST, ANSWERS, INFO)

    assert updated["name"] == "hello-ext"
    assert updated["displayName"] == "Hello Ext"
    assert updated["description"] == "Says hello"
    assert updated["author"] == {
        "name": "Octo",
        "email": "octo@users.example.com",
        "url": "https://octo.example.com",
    }
    assert updated["keywords"] == ["hello"]
    assert updated["categories"] == ["Other", "Themes"]


def test_rewrite_manifest_repoints_repository_links() -> None:
    updated = rewrite_manifest(SAMPLE_MANIFEST, ANSWERS, INFO)

    assert updated["homepage"] == "https://github.com/octocat/hello-ext/blob/master/README.md"
    assert updated["repository"] == {"type": "git", "url": "https://github.com/octocat/hello-ext"}
    assert updated["bugs"] == {
        "url": "https://github.com/octocat/hello-ext/issues",
        "email": "octo@example.com",
    }
    assert updated["badges"][0]["href"] == "https://github.com/octocat/hello-ext/fork"


def test_rewrite_manifest_preserves_untouched_fields_and_input() -> None:
    original = copy.deepcopy(SAMPLE_MANIFEST)

    updated = rewrite_manifest(SAMPLE_MANIFEST, ANSWERS, INFO)

    assert SAMPLE_MANIFEST == original
    for key in ("publisher", "version", "private", "license", "main", "engines", "devDependencies"):
        assert updated[key] == original[key]
    assert list(updated)[: len(original)] == list(original)


def test_rewrite_manifest_only_touches_pr_welcome_badge() -> None:
    manifest = copy.deepcopy(SAMPLE_MANIFEST)
    manifest["badges"].insert(
        0,
        {
            "url": "https://img.shields.io/badge/other.svg",
            "description": "Other badge",
            "href": "https://github.com/tjx666/awesome-vscode-extension-boilerplate",
        },
    )

    updated = rewrite_manifest(manifest, ANSWERS, INFO)

    assert updated["badges"][0]["href"] == "https://github.com/tjx666/awesome-vscode-extension-boilerplate"
    assert updated["badges"][1]["href"] == "https://github.com/octocat/hello-ext/fork"


def test_rewrite_manifest_normalises_string_repository() -> None:
    manifest = {"name": "x", "repository": "github:someone/else"}

    updated = rewrite_manifest(manifest, ANSWERS, INFO)

    assert updated["repository"] == {"type": "git", "url": "https://github.com/octocat/hello-ext"}
    assert updated["bugs"] == {"email": "octo@example.com"}


def test_replace_repository_url_leaves_other_text() -> None:
    assert (
        replace_repository_url("see https://gitlab.com/a/b-c#readme", "https://github.com/o/r")
        == "see https://github.com/o/r#readme"
    )
    assert replace_repository_url("no link here", "https://github.com/o/r") == "no link here"


def test_write_manifest_uses_four_space_indent_and_trailing_newline(tmp_path: Path) -> None:
    path = tmp_path / "package.json"

    write_manifest(path, {"name": "hello-ext", "displayName": "Héllo", "keywords": ["a"]})

    text = path.read_text(encoding="utf-8")
    assert text.endswith("}\n")
    assert '\n    "name": "hello-ext"' in text
    assert "Héllo" in text
    assert load_manifest(path) == {"name": "hello-ext", "displayName": "Héllo", "keywords": ["a"]}


def test_load_manifest_errors(tmp_path: Path) -> None:
    with pytest.raises(ManifestError, match="not found"):
        load_manifest(tmp_path / "package.json")

    (tmp_path / "package.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ManifestError, match="Failed to parse"):
        load_manifest(tmp_path / "package.json")

    (tmp_path / "package.json").write_text(json.dumps(["a"]), encoding="utf-8")
    with pytest.raises(ManifestError, match="JSON object"):
        load_manifest(tmp_path / "package.json")


def test_sync_engine_version_mirrors_types_dependency() -> None:
    manifest = {"engines": {"vscode": "^1.75.0"}, "devDependencies": {"@types/vscode": "^1.84.0"}}

    assert sync_engine_version(manifest, "@types/vscode") is True
    assert manifest["engines"]["vscode"] == "^1.84.0"
    assert sync_engine_version(manifest, "@types/vscode") is False


def test_sync_engine_version_ignores_missing_dependency() -> None:
    manifest = {"engines": {"vscode": "^1.75.0"}, "devDependencies": {}}

    assert sync_engine_version(manifest, "@types/vscode") is False
    assert manifest["engines"] == {"vscode": "^1.75.0"}


def test_rewrite_manifest_keeps_repository_url_prefix_and_suffix() -> None:
    manifest = copy.deepcopy(SAMPLE_MANIFEST)
    manifest["repository"] = {"type": "git", "url": "git+https://github.com/old/repo.git"}

    updated = rewrite_manifest(manifest, ANSWERS, INFO)

    assert updated["repository"]["url"] == "git+https://github.com/octocat/hello-ext.git"


def test_rewrite_manifest_sets_repository_url_when_not_https() -> None:
    manifest = copy.deepcopy(SAMPLE_MANIFEST)
    manifest["repository"] = {"type": "git", "url": "git@github.com:old/repo.git"}
    missing = copy.deepcopy(SAMPLE_MANIFEST)
    missing["repository"] = {"type": "git"}

    assert rewrite_manifest(manifest, ANSWERS, INFO)["repository"]["url"] == INFO.repo_url
    assert rewrite_manifest(missing, ANSWERS, INFO)["repository"]["url"] == INFO.repo_url
