"""Filesystem boundary used by the ADR checker, initializer and collector."""

from __future__ import annotations

from pathlib import Path
from typing import List, Protocol

from .models import DirectoryEntry, EntryKind


class FileSystem(Protocol):
    """Minimal set of storage primitives adrman relies on."""

    def list_directory(self, path: Path) -> List[DirectoryEntry]:
        """Return the entries of ``path``.

        Raises ``FileNotFoundError`` when the location is missing and
        ``NotADirectoryError`` when it is not a directory.
        """

    def create_directory(self, path: Path) -> None:
        """Create ``path`` along with any missing parents."""

    def read_file(self, path: Path) -> bytes:
        """Return the raw bytes stored at ``path``."""

    def write_file(self, path: Path, data: bytes) -> None:
        """Create or overwrite ``path`` with ``data``."""


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def list_directory(self, path: Path) -> List[DirectoryEntry]:
        entries = [
            DirectoryEntry(name=child.name, kind=_entry_kind(child))
            for child in path.iterdir()
        ]
        entries.sort(key=lambda entry: entry.name)
        return entries

    def create_directory(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def read_file(self, path: Path) -> bytes:
        return path.read_bytes()

    def write_file(self, path: Path, data: bytes) -> None:
        path.write_bytes(data)


def _entry_kind(path: Path) -> EntryKind:
    # Symlinks are reported as-is rather than followed.
    if path.is_symlink():
        return EntryKind.OTHER
    if path.is_dir():
        return EntryKind.DIRECTORY
    if path.is_file():
        return EntryKind.FILE
    return EntryKind.OTHER


__all__ = ["FileSystem", "LocalFileSystem"]
