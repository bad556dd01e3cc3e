"""The set of project roots adrman operates on."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from .models import Root


class Workspace:
    """Ordered, read-only collection of open roots."""

    def __init__(self, roots: Iterable[Root] = ()) -> None:
        self._roots: Tuple[Root, ...] = tuple(roots)

    @classmethod
    def from_paths(cls, paths: Iterable[Path | str]) -> "Workspace":
        roots: List[Root] = []
        for raw in paths:
            root = Root.from_path(raw)
            if not root.path.exists():
                raise FileNotFoundError(f"Root path not found: {raw}")
            if not root.path.is_dir():
                raise NotADirectoryError(f"Root path is not a directory: {raw}")
            roots.append(root)
        return cls(roots)

    @property
    def roots(self) -> Sequence[Root]:
        return self._roots

    def is_opened(self) -> bool:
        return len(self._roots) > 0

    def is_single_root(self) -> bool:
        return len(self._roots) == 1

    def folder_names(self) -> List[str]:
        return [root.name for root in self._roots]

    def find(self, name: str) -> Optional[Root]:
        for root in self._roots:
            if root.name == name:
                return root
        return None

    def __len__(self) -> int:
        return len(self._roots)


__all__ = ["Workspace"]
