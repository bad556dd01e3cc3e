"""Locate, scaffold and collect Markdown architectural decision records."""

from .collector import DocumentAggregator
from .config import AdrConfig, ConfigError, RelativePath, load_config
from .errors import AdrError, AmbiguousRootError, InitializationError, NoWorkspaceError
from .filesystem import FileSystem, LocalFileSystem
from .initializer import DirectoryInitializer
from .manager import AdrManager
from .models import AdrDocument, DirectoryEntry, EntryKind, InitializationOutcome, Root, contents
from .paths import PathExistenceChecker, adr_directory_exists
from .titles import matches_madr_title_format
from .workspace import Workspace

__all__ = [
    "AdrConfig",
    "AdrDocument",
    "AdrError",
    "AdrManager",
    "AmbiguousRootError",
    "ConfigError",
    "DirectoryEntry",
    "DirectoryInitializer",
    "DocumentAggregator",
    "EntryKind",
    "FileSystem",
    "InitializationError",
    "InitializationOutcome",
    "LocalFileSystem",
    "NoWorkspaceError",
    "PathExistenceChecker",
    "RelativePath",
    "Root",
    "Workspace",
    "adr_directory_exists",
    "contents",
    "load_config",
    "matches_madr_title_format",
]
