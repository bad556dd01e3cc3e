"""Entry point tying configuration, workspace and ADR operations together."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .collector import DocumentAggregator
from .config import AdrConfig, ConfigError, load_config
from .errors import AmbiguousRootError, NoWorkspaceError
from .filesystem import FileSystem, LocalFileSystem
from .initializer import Confirm, DirectoryInitializer
from .logging import get_logger
from .models import AdrDocument, InitializationOutcome, Root, contents
from .paths import PathExistenceChecker, adr_directory_exists
from .workspace import Workspace


class AdrManager:
    """Runs ADR operations against the roots of a workspace with one config."""

    def __init__(
        self,
        workspace: Workspace,
        config: AdrConfig | None = None,
        fs: FileSystem | None = None,
    ) -> None:
        self.workspace = workspace
        self.config = config or AdrConfig()
        self.fs = fs or LocalFileSystem()
        self.checker = PathExistenceChecker(self.fs)
        self.initializer = DirectoryInitializer(self.config, self.fs, self.checker)
        self.aggregator = DocumentAggregator(self.config, self.fs, self.checker)
        self.logger = get_logger("manager")

    @classmethod
    def from_paths(
        cls,
        paths: List[Path | str],
        *,
        adr_directory: Optional[str] = None,
    ) -> "AdrManager":
        """Open ``paths`` as roots, reading .adrman.yml from the first one."""
        workspace = Workspace.from_paths(paths)
        config = cls._load_config(workspace)
        if adr_directory:
            config = config.with_adr_directory(adr_directory)
        return cls(workspace, config)

    @staticmethod
    def _load_config(workspace: Workspace) -> AdrConfig:
        if not workspace.is_opened():
            return AdrConfig()
        first = workspace.roots[0]
        try:
            return load_config(first.path)
        except ConfigError as exc:
            get_logger("manager").warning("Ignoring invalid configuration in %s: %s", first.path, exc)
            return AdrConfig(root=first.path)

    def adr_directory_for(self, root: Root) -> Path:
        return self.config.adr_directory.join(root.path)

    def adr_directory_exists(self, root: Root) -> bool:
        return adr_directory_exists(
            self.workspace.roots, root, self.config.adr_directory, self.checker
        )

    def initialize(
        self, root: Root | None = None, confirm: Optional[Confirm] = None
    ) -> InitializationOutcome:
        """Initialize the ADR directory of ``root`` (default: the only open root)."""
        target = root or self._single_root()
        outcome = self.initializer.initialize(target, confirm)
        self.logger.info("%s: %s", target.name, outcome.message)
        return outcome

    def collect_all(self) -> List[AdrDocument]:
        return self.aggregator.collect_all(self.workspace.roots)

    def collect_all_contents(self) -> List[str]:
        return contents(self.collect_all())

    def _single_root(self) -> Root:
        if not self.workspace.is_opened():
            raise NoWorkspaceError("No root is open; nothing to initialize")
        if not self.workspace.is_single_root():
            names = ", ".join(self.workspace.folder_names())
            raise AmbiguousRootError(f"Several roots are open ({names}); choose one to initialize")
        return self.workspace.roots[0]


__all__ = ["AdrManager"]
