"""Exception types raised by adrman operations."""

from __future__ import annotations

from pathlib import Path


class AdrError(RuntimeError):
    """Base class for adrman failures surfaced to callers."""


class NoWorkspaceError(AdrError):
    """Raised when an operation needs a root but none is open."""


class AmbiguousRootError(AdrError):
    """Raised when several roots are open and none was chosen."""


class InitializationError(AdrError):
    """Raised when the ADR directory cannot be created or filled."""

    def __init__(self, action: str, path: Path) -> None:
        super().__init__(f"{action}: {path}")
        self.action = action
        self.path = path


__all__ = ["AdrError", "AmbiguousRootError", "InitializationError", "NoWorkspaceError"]
