"""Validation and parsing rules for prompt answers."""

from __future__ import annotations

import re
from typing import Callable, List, Optional

from ..models import EXTENSION_CATEGORIES, VALID_CATEGORIES

Validator = Callable[[str], Optional[str]]

MAX_KEYWORDS = 5

_NAME_PATTERN = re.compile(r"^[a-z\-]+$")
_SEPARATOR_PATTERN = re.compile(r"\s*,\s*")
_WORD_SPLITS = (
    re.compile(r"([a-z0-9])([A-Z])"),
    re.compile(r"([A-Z])([A-Z][a-z])"),
)
_NON_WORD = re.compile(r"[^A-Za-z0-9]+")


def capital_case(value: str) -> str:
    """Return ``value`` as space separated words with a leading capital each.

    >>> capital_case("awesome-vscode-extension")
    'Awesome Vscode Extension'
    >>> capital_case("myXMLParser")
    'My Xml Parser'
    """
    spaced = value
    for pattern in _WORD_SPLITS:
        spaced = pattern.sub(r"\1 \2", spaced)
    words = [word for word in _NON_WORD.split(spaced) if word]
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def split_list(value: str) -> List[str]:
    """Split comma separated input, ignoring whitespace around separators."""
    return [item for item in _SEPARATOR_PATTERN.split(value.strip()) if item]


def required(message: str) -> Validator:
    def _validate(value: str) -> Optional[str]:
        if not value:
            return message
        return None

    return _validate


def validate_name(value: str) -> Optional[str]:
    if not _NAME_PATTERN.match(value):
        return "must be kebab-case"
    return None


def validate_display_name(value: str) -> Optional[str]:
    if not value:
        return "display name can't be empty"
    capitalized = capital_case(value)
    if capitalized != value:
        return f"recommend use capital case: {capitalized}"
    return None


def validate_keywords(value: str) -> Optional[str]:
    if not value or not split_list(value):
        return "keywords can't be empty"
    if len(split_list(value)) > MAX_KEYWORDS:
        return f"this list is currently limited to {MAX_KEYWORDS} keywords"
    return None


def invalid_categories(value: str) -> List[str]:
    """Return entries of ``value`` that are not marketplace categories, in input order."""
    return [category for category in split_list(value) if category not in VALID_CATEGORIES]


def validate_categories(value: str) -> Optional[str]:
    if not value or not split_list(value):
        return "categories can't be empty"
    invalid = invalid_categories(value)
    if invalid:
        return (
            f"these categories not valid: {', '.join(invalid)}, "
            f"valid categories: {', '.join(EXTENSION_CATEGORIES)}"
        )
    return None


def parse_categories(value: str) -> List[str]:
    seen: List[str] = []
    for category in split_list(value):
        if category not in seen:
            seen.append(category)
    return seen


__all__ = [
    "MAX_KEYWORDS",
    "Validator",
    "capital_case",
    "invalid_categories",
    "parse_categories",
    "required",
    "split_list",
    "validate_categories",
    "validate_display_name",
    "validate_keywords",
    "validate_name",
]
