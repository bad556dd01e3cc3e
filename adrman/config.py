"""Configuration loading for adrman (.adrman.yml)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .errors import AdrError

CONFIG_FILENAME = ".adrman.yml"
DEFAULT_ADR_DIRECTORY = "docs/decisions"


class ConfigError(AdrError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class RelativePath:
    """ADR directory location relative to a root, split into path segments."""

    raw: str
    segments: Tuple[str, ...]

    @classmethod
    def parse(cls, value: str) -> "RelativePath":
        """Normalise ``\\`` and ``/`` separators and drop empty segments."""
        normalised = value.replace("\\", "/")
        segments = tuple(part for part in normalised.split("/") if part)
        if not segments:
            raise ConfigError(f"ADR directory must name at least one folder: {value!r}")
        return cls(raw=value, segments=segments)

    def join(self, base: Path) -> Path:
        return base.joinpath(*self.segments)

    def as_posix(self) -> str:
        return "/".join(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return self.as_posix()


@dataclass
class AdrConfig:
    """Represents the settings defined in .adrman.yml."""

    root: Optional[Path] = None
    adr_directory: RelativePath = field(
        default_factory=lambda: RelativePath.parse(DEFAULT_ADR_DIRECTORY)
    )
    title_pattern: Optional[re.Pattern[str]] = None
    templates_dir: Optional[Path] = None

    def with_adr_directory(self, value: str) -> "AdrConfig":
        """Return a copy pointing at a different ADR directory."""
        return AdrConfig(
            root=self.root,
            adr_directory=RelativePath.parse(value),
            title_pattern=self.title_pattern,
            templates_dir=self.templates_dir,
        )


def load_config(config_path: Path) -> AdrConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return AdrConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    adr_directory_str = _as_str(data.get("adr_directory"))
    adr_directory = RelativePath.parse(
        adr_directory_str if adr_directory_str is not None else DEFAULT_ADR_DIRECTORY
    )

    title_pattern = None
    pattern_str = _as_str(data.get("title_pattern"))
    if pattern_str:
        try:
            title_pattern = re.compile(pattern_str)
        except re.error as exc:
            raise ConfigError(f"Invalid title_pattern {pattern_str!r}: {exc}") from exc

    templates_dir_str = _as_str(data.get("templates_dir"))
    templates_dir = root / templates_dir_str if templates_dir_str else None

    return AdrConfig(
        root=root,
        adr_directory=adr_directory,
        title_pattern=title_pattern,
        templates_dir=templates_dir,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


__all__ = [
    "AdrConfig",
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_ADR_DIRECTORY",
    "RelativePath",
    "load_config",
]
