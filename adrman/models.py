"""Core data models shared across adrman components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List


@dataclass(frozen=True)
class Root:
    """Top-level project directory registered with the workspace."""

    name: str
    path: Path

    @classmethod
    def from_path(cls, path: Path | str) -> "Root":
        resolved = Path(path).expanduser().resolve()
        return cls(name=resolved.name or str(resolved), path=resolved)


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True)
class DirectoryEntry:
    """Name and kind of a single item returned by a directory listing."""

    name: str
    kind: EntryKind


@dataclass(frozen=True)
class AdrDocument:
    """Decoded contents of an ADR file, together with where it was found."""

    root: Root
    name: str
    path: Path
    content: str


class InitializationOutcome(Enum):
    """Result of initializing the ADR directory of a root."""

    CREATED = "created"
    ALREADY_EXISTS_USER_DECLINED = "declined"
    ALREADY_EXISTS_REFILLED = "refilled"

    @property
    def message(self) -> str:
        return _OUTCOME_MESSAGES[self]


_OUTCOME_MESSAGES = {
    InitializationOutcome.CREATED: "ADR directory created and filled with boilerplate files",
    InitializationOutcome.ALREADY_EXISTS_USER_DECLINED: "ADR directory already exists; nothing was changed",
    InitializationOutcome.ALREADY_EXISTS_REFILLED: "ADR directory already exists; boilerplate files were rewritten",
}


def contents(documents: Iterable[AdrDocument]) -> List[str]:
    """Flatten documents to their raw text, preserving order and duplicates."""
    return [document.content for document in documents]


__all__ = [
    "AdrDocument",
    "DirectoryEntry",
    "EntryKind",
    "InitializationOutcome",
    "Root",
    "contents",
]
