"""
generator.py

Responsibility: One end-to-end generation run.

High-level flow:
1) Build the variable context from the (conformed) domain and target names
2) Render the project structure template with that context -> JSON text
3) Parse the JSON -> `Folder` tree
4) Materialize the tree into the output directory
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from cppnew.context import CMAKE_MINIMUM_VERSION, build_context
from cppnew.materializer import (
    FileEvent,
    MissingTemplate,
    PathEvent,
    PathEventSink,
    PathStatus,
    materialize,
)
from cppnew.provider import STRUCTURE_TEMPLATE, TemplateProvider
from cppnew.renderer import render_text
from cppnew.schema import Folder, parse_schema

logger = logging.getLogger(__name__)

_STATUS_LABELS = {
    PathStatus.CREATED: "Created",
    PathStatus.EXISTS: "Exists",
    PathStatus.SKIPPED: "Skipped",
    PathStatus.PLANNED: "Planned",
}


def log_path_event(event: PathEvent) -> None:
    """Path event sink that reports progress through `logging`."""
    logger.info("%s: %s", _STATUS_LABELS[event.status], event.path)
    if isinstance(event, FileEvent) and event.status is PathStatus.SKIPPED:
        logger.debug("No template declared for %s", event.path)


@dataclass
class ProjectGenerator:
    domain_name: str
    target_name: str = "my_target"
    out_dir: Path | None = None
    templates: TemplateProvider | None = None
    with_test_app: bool = True
    missing_template: MissingTemplate = MissingTemplate.SKIP
    cmake_minimum_version: str = CMAKE_MINIMUM_VERSION
    variables: dict[str, Any] = field(default_factory=dict)
    year: int | None = None
    context: dict[str, str] = field(init=False)

    def __post_init__(self) -> None:
        if self.templates is None:
            self.templates = TemplateProvider.from_package()
        self.context = build_context(
            self.domain_name,
            self.target_name,
            cmake_minimum_version=self.cmake_minimum_version,
            year=self.year,
            extra=self.variables,
        )

    @property
    def options(self) -> dict[str, Any]:
        return {"with_test_app": self.with_test_app}

    def load_structure(self) -> Folder:
        """Render the structure template and parse it into a tree."""
        text = self.templates.get(STRUCTURE_TEMPLATE)
        rendered = render_text(text, self.context, options=self.options, name=STRUCTURE_TEMPLATE)
        return parse_schema(rendered)

    def generate(self, on_path: PathEventSink | None = log_path_event, *, dry_run: bool = False) -> Path:
        """Generate the project and return the path of its root folder."""
        out_dir = self.out_dir if self.out_dir is not None else Path.cwd()
        root = self.load_structure()
        logger.debug("Project structure: %s", root)
        return materialize(
            root,
            out_dir,
            self.context,
            self.templates,
            on_path,
            missing_template=self.missing_template,
            options=self.options,
            dry_run=dry_run,
        )
