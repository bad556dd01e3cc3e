"""Aggregation of ADR documents across workspace roots."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from .config import AdrConfig
from .filesystem import FileSystem, LocalFileSystem
from .logging import get_logger
from .models import AdrDocument, EntryKind, Root, contents
from .paths import PathExistenceChecker
from .titles import TitlePredicate, title_predicate


class DocumentAggregator:
    """Collects ADR-shaped files from the ADR directory of every root.

    Roots are visited in the order given and files in listing order. Only the
    top level of each ADR directory is scanned. Collection is best effort: a
    root whose directory disappears mid-run contributes nothing and an
    unreadable file is skipped with a warning.
    """

    def __init__(
        self,
        config: AdrConfig,
        fs: FileSystem | None = None,
        checker: PathExistenceChecker | None = None,
        matches_title: TitlePredicate | None = None,
    ) -> None:
        self.config = config
        self.fs = fs or LocalFileSystem()
        self.checker = checker or PathExistenceChecker(self.fs)
        self.matches_title = matches_title or title_predicate(config.title_pattern)
        self.logger = get_logger("collector")

    def collect_all(self, roots: Sequence[Root]) -> List[AdrDocument]:
        documents: List[AdrDocument] = []
        if not roots:
            return documents

        for root in roots:
            try:
                if not self.checker.exists(root, self.config.adr_directory):
                    self.logger.debug("No ADR directory in %s; skipping", root.path)
                    continue
                folder = self.config.adr_directory.join(root.path)
                documents.extend(self.collect_from_folder(folder, root=root))
            except OSError as exc:
                self.logger.warning("Skipping root %s: %s", root.path, exc)
                continue

        self.logger.debug("Collected %d ADRs from %d roots", len(documents), len(roots))
        return documents

    def collect_all_contents(self, roots: Sequence[Root]) -> List[str]:
        return contents(self.collect_all(roots))

    def collect_from_folder(self, folder: Path, *, root: Root | None = None) -> List[AdrDocument]:
        """Return matching documents directly inside ``folder``."""
        owner = root or Root.from_path(folder)
        try:
            entries = self.fs.list_directory(folder)
        except (FileNotFoundError, NotADirectoryError):
            self.logger.debug("ADR directory %s vanished before listing", folder)
            return []
        except OSError as exc:
            self.logger.warning("Cannot list ADR directory %s: %s", folder, exc)
            return []

        documents: List[AdrDocument] = []
        for entry in entries:
            if entry.kind is not EntryKind.FILE or not self.matches_title(entry.name):
                continue
            path = folder / entry.name
            try:
                raw = self.fs.read_file(path)
            except OSError as exc:
                self.logger.warning("Skipping unreadable ADR %s: %s", path, exc)
                continue
            documents.append(
                AdrDocument(
                    root=owner,
                    name=entry.name,
                    path=path,
                    content=raw.decode("utf-8", errors="replace"),
                )
            )
        return documents


__all__ = ["DocumentAggregator"]
