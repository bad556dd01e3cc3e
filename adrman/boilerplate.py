"""Renders the boilerplate Markdown files written into a new ADR directory."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple

from jinja2 import Environment, FileSystemLoader

from .config import RelativePath

# (file written into the ADR directory, template used to render it)
BOILERPLATE_FILES: Tuple[Tuple[str, str], ...] = (
    ("0000-use-markdown-architectural-decision-records.md", "initial.md.j2"),
    ("README.md", "readme.md.j2"),
    ("adr-template.md", "adr_template.md.j2"),
)


class BoilerplateRenderer:
    """Loads boilerplate templates, letting a project directory override them."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)

    def render(self, *, adr_directory: RelativePath, project_name: str) -> Dict[str, str]:
        """Return an ordered mapping of file name to rendered content."""
        context = {
            "adr_directory": adr_directory.as_posix(),
            "project_name": project_name,
        }
        rendered: Dict[str, str] = {}
        for file_name, template_name in BOILERPLATE_FILES:
            template = self._env.get_template(template_name)
            rendered[file_name] = template.render(**context).rstrip() + "\n"
        return rendered

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        loader = FileSystemLoader(directories)
        return Environment(loader=loader, autoescape=False, keep_trailing_newline=True)


__all__ = ["BOILERPLATE_FILES", "BoilerplateRenderer"]
