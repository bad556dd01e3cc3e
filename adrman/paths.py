"""Segment-by-segment verification that the ADR directory exists under a root."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from .config import RelativePath
from .filesystem import FileSystem, LocalFileSystem
from .logging import get_logger
from .models import EntryKind, Root


class PathExistenceChecker:
    """Checks a relative path against a root one directory listing at a time.

    Each segment costs exactly one listing of its parent. The walk stops at the
    first segment that is not present as a directory, so a check never lists
    more directories than the path has segments. Files and symlinks sharing a
    segment's name never count as a match.
    """

    def __init__(self, fs: FileSystem | None = None) -> None:
        self.fs = fs or LocalFileSystem()
        self.logger = get_logger("paths")

    def exists(self, root: Root | Path, relative_path: RelativePath) -> bool:
        current = root.path if isinstance(root, Root) else root
        last_index = len(relative_path.segments) - 1

        for index, segment in enumerate(relative_path.segments):
            try:
                entries = self.fs.list_directory(current)
            except (FileNotFoundError, NotADirectoryError):
                self.logger.debug("Cannot list %s; treating %s as missing", current, relative_path)
                return False

            if not any(
                entry.name == segment and entry.kind is EntryKind.DIRECTORY
                for entry in entries
            ):
                self.logger.debug("Segment %r not found in %s", segment, current)
                return False
            if index == last_index:
                return True
            current = current / segment

        return False


def adr_directory_exists(
    roots: Sequence[Root],
    root: Root | Path,
    relative_path: RelativePath,
    checker: PathExistenceChecker | None = None,
) -> bool:
    """Return False straight away when no roots are open, otherwise run the check."""
    if not roots:
        return False
    return (checker or PathExistenceChecker()).exists(root, relative_path)


__all__ = ["PathExistenceChecker", "adr_directory_exists"]
