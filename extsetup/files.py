"""Updaters for CHANGELOG.md and LICENSE."""

from __future__ import annotations

import re
from datetime import date
from pathlib import Path
from typing import List, Optional

from .logging import get_logger

COMMENT_PREFIX = "<!--"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
# owner: space separated words; trailing email, punctuation or suffix stays
_COPYRIGHT_PATTERN = re.compile(r"Copyright \(c\) \d+ [\w\-]+(?: [\w\-]+)*")

_LOGGER = get_logger("files")


def _read_raw(path: Path) -> str:
    # newline="" preserves CRLF endings
    with path.open(encoding="utf-8", newline="") as handle:
        return handle.read()


def changelog_comment_lines(text: str) -> List[str]:
    return [line for line in _LINE_BREAK.split(text) if line.startswith(COMMENT_PREFIX)]


def reset_changelog(path: Path) -> None:
    """Keep only the comment lines of the changelog, in their original order."""
    text = _read_raw(path)
    lines = changelog_comment_lines(text)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8", newline="")
    _LOGGER.debug("Reset %s to %d comment lines", path.name, len(lines))


def update_license(path: Path, author_name: str, *, year: Optional[int] = None) -> bool:
    """Point the first copyright line at ``author_name`` for ``year`` (default: this year).

    Returns ``False`` when the file has no copyright line to update.
    """
    text = _read_raw(path)
    replacement = f"Copyright (c) {year or date.today().year} {author_name}"
    updated, count = _COPYRIGHT_PATTERN.subn(lambda _: replacement, text, count=1)
    if not count:
        _LOGGER.warning("No copyright line found in %s", path.name)
        return False
    path.write_text(updated, encoding="utf-8", newline="")
    return True


__all__ = ["COMMENT_PREFIX", "changelog_comment_lines", "reset_changelog", "update_license"]
