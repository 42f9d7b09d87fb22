"""Core data structures shared across setup steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Tuple

# Marketplace categories accepted in the manifest "categories" field.
EXTENSION_CATEGORIES: Tuple[str, ...] = (
    "Azure",
    "Data Science",
    "Debuggers",
    "Education",
    "Extension Packs",
    "Formatters",
    "Keymaps",
    "Language Packs",
    "Linters",
    "Machine Learning",
    "Notebooks",
    "Other",
    "Programming Languages",
    "SCM Providers",
    "Snippets",
    "Testing",
    "Themes",
    "Visualization",
)

VALID_CATEGORIES: FrozenSet[str] = frozenset(EXTENSION_CATEGORIES)


@dataclass(frozen=True)
class RepositoryInfo:
    """Identity and location facts resolved from the local git configuration."""

    hostname: str
    author_name: str
    author_email: str
    author_url: str
    user_name: str
    repo_name: str
    repo_url: str


@dataclass
class PromptAnswers:
    """Values collected by the interactive prompt flow."""

    name: str
    display_name: str
    description: str
    author_name: str
    author_email: str
    author_url: str
    keywords: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)
    install_deps: bool = False
    update_deps: bool = False
    commit: bool = False


__all__ = ["EXTENSION_CATEGORIES", "PromptAnswers", "RepositoryInfo", "VALID_CATEGORIES"]
