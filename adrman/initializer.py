"""Creation and boilerplate population of ADR directories."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from jinja2 import TemplateError

from .boilerplate import BoilerplateRenderer
from .config import AdrConfig
from .errors import InitializationError
from .filesystem import FileSystem, LocalFileSystem
from .logging import get_logger
from .models import InitializationOutcome, Root
from .paths import PathExistenceChecker

Confirm = Callable[[str], bool]

REFILL_PROMPT = (
    "The ADR directory already exists. "
    "Do you want to fill the directory with boilerplate Markdown files?"
)


class DirectoryInitializer:
    """Creates the ADR directory of a root, or refills it after confirmation."""

    def __init__(
        self,
        config: AdrConfig,
        fs: FileSystem | None = None,
        checker: PathExistenceChecker | None = None,
        renderer: BoilerplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.fs = fs or LocalFileSystem()
        self.checker = checker or PathExistenceChecker(self.fs)
        self.renderer = renderer or BoilerplateRenderer(config.templates_dir)
        self.logger = get_logger("initializer")

    def initialize(self, root: Root, confirm: Optional[Confirm] = None) -> InitializationOutcome:
        """Initialize the ADR directory under ``root``.

        When the directory is missing it is created (parents included) and
        filled. When it already exists ``confirm`` decides whether the
        boilerplate files are rewritten; without a ``confirm`` callback the
        existing directory is left untouched.
        """
        adr_location = self.config.adr_directory.join(root.path)

        if not self.checker.exists(root, self.config.adr_directory):
            self.logger.info("Creating ADR directory at %s", adr_location)
            try:
                self.fs.create_directory(adr_location)
            except OSError as exc:
                raise InitializationError("could not create ADR directory", adr_location) from exc
            self.fill_adr_directory(adr_location, project_name=root.name)
            return InitializationOutcome.CREATED

        if confirm is None or not confirm(REFILL_PROMPT):
            self.logger.info("ADR directory already exists at %s; leaving it unchanged", adr_location)
            return InitializationOutcome.ALREADY_EXISTS_USER_DECLINED

        self.fill_adr_directory(adr_location, project_name=root.name)
        return InitializationOutcome.ALREADY_EXISTS_REFILLED

    def fill_adr_directory(self, directory: Path, *, project_name: str | None = None) -> None:
        """Write the README, the ADR template and a sample ADR into ``directory``."""
        try:
            files = self.renderer.render(
                adr_directory=self.config.adr_directory,
                project_name=project_name or directory.name,
            )
        except TemplateError as exc:
            raise InitializationError("could not render boilerplate templates", directory) from exc
        self.logger.info("Writing %d boilerplate files into %s", len(files), directory)
        for name, content in files.items():
            self.create_markdown_file(directory, name, content)

    def create_markdown_file(self, directory: Path, name: str, content: str) -> Path:
        target = directory / name
        try:
            self.fs.write_file(target, content.encode("utf-8"))
        except OSError as exc:
            raise InitializationError(f"could not write boilerplate file {name}", target) from exc
        self.logger.debug("Wrote %s", target)
        return target


__all__ = ["Confirm", "DirectoryInitializer", "REFILL_PROMPT"]
