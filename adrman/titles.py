"""Filename conventions for Markdown architectural decision records."""

from __future__ import annotations

import re
from typing import Callable, Optional, Pattern

TitlePredicate = Callable[[str], bool]

MADR_TITLE_PATTERN = re.compile(r"^\d{4}-[a-z0-9]+(?:-[a-z0-9]+)*\.md$")


def matches_madr_title_format(name: str) -> bool:
    """Return True when ``name`` looks like ``0001-short-title.md``."""
    return MADR_TITLE_PATTERN.match(name) is not None


def title_predicate(pattern: Optional[Pattern[str]] = None) -> TitlePredicate:
    """Return the predicate for ``pattern``, defaulting to the MADR convention."""
    if pattern is None:
        return matches_madr_title_format

    def _matches(name: str) -> bool:
        return pattern.fullmatch(name) is not None

    return _matches


__all__ = [
    "MADR_TITLE_PATTERN",
    "TitlePredicate",
    "matches_madr_title_format",
    "title_predicate",
]
