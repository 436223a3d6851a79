"""
materializer.py

Responsibility: Turn a parsed `Folder` tree into directories and files.

Rules:
- Pre-order walk: a folder is handled before its children; sub-folders are
  visited in declaration order, then files in declaration order.
- Existing paths are never overwritten or removed; they are reported as
  `EXISTS`, so re-running into a partially generated tree is safe.
- Every node produces exactly one event for the caller's sink, emitted after
  the create-or-skip decision for that node (and before a folder's children).
- The first filesystem failure aborts the walk; nothing is rolled back.

This module intentionally does NOT log or print; observers get events.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Mapping, Protocol

from cppnew.provider import TemplateProvider
from cppnew.renderer import render_text
from cppnew.schema import File, Folder


class MaterializeIOError(RuntimeError):
    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class PathStatus(str, Enum):
    CREATED = "created"
    EXISTS = "exists"
    SKIPPED = "skipped"
    PLANNED = "planned"


class MissingTemplate(str, Enum):
    """What to do with a file entry that names no template."""

    SKIP = "skip"
    EMPTY = "empty"


@dataclass(frozen=True)
class FolderEvent:
    path: Path
    status: PathStatus


@dataclass(frozen=True)
class FileEvent:
    path: Path
    status: PathStatus
    content: str | None = None
    template: str | None = None


PathEvent = FolderEvent | FileEvent


class PathEventSink(Protocol):
    def __call__(self, event: PathEvent) -> None: ...


def _ignore(event: PathEvent) -> None:
    pass


@dataclass
class _Walk:
    context: Mapping[str, str]
    templates: TemplateProvider
    on_path: Callable[[PathEvent], None]
    missing_template: MissingTemplate
    options: Mapping[str, Any]
    dry_run: bool

    def folder(self, node: Folder, out_dir: Path) -> Path:
        path = out_dir / node.name
        if path.exists():
            status = PathStatus.EXISTS
        elif self.dry_run:
            status = PathStatus.PLANNED
        else:
            try:
                path.mkdir(parents=True, exist_ok=True)
            except (OSError, ValueError) as e:
                raise MaterializeIOError(f"Could not create directory {path}: {e}", path) from e
            status = PathStatus.CREATED
        self.on_path(FolderEvent(path=path, status=status))

        for child in node.folders:
            self.folder(child, path)
        for file in node.files:
            self.file(file, path)
        return path

    def file(self, node: File, out_dir: Path) -> Path:
        path = out_dir / node.name

        if node.template is None:
            if self.missing_template is MissingTemplate.SKIP:
                self.on_path(FileEvent(path=path, status=PathStatus.SKIPPED))
                return path
            content = ""
        else:
            content = render_text(
                self.templates.get(node.template),
                self.context,
                options=self.options,
                name=node.template,
            )

        if path.exists():
            status = PathStatus.EXISTS
        elif self.dry_run:
            status = PathStatus.PLANNED
        else:
            try:
                path.write_text(content, encoding="utf-8", newline="\n")
            except (OSError, ValueError) as e:
                raise MaterializeIOError(f"Could not write file {path}: {e}", path) from e
            status = PathStatus.CREATED
        self.on_path(FileEvent(path=path, status=status, content=content, template=node.template))
        return path


def materialize(
    root: Folder,
    out_dir: str | Path,
    context: Mapping[str, str],
    templates: TemplateProvider,
    on_path: PathEventSink | None = None,
    *,
    missing_template: MissingTemplate = MissingTemplate.SKIP,
    options: Mapping[str, Any] | None = None,
    dry_run: bool = False,
) -> Path:
    """
    Create `root` (recursively) inside `out_dir` and return the root's path.

    Raises `TemplateNotFound` when a file names an unknown template (before
    that file is written), `RenderError` for an invalid template and
    `MaterializeIOError` for filesystem failures.
    """
    walk = _Walk(
        context=context,
        templates=templates,
        on_path=on_path or _ignore,
        missing_template=missing_template,
        options=options or {},
        dry_run=dry_run,
    )
    return walk.folder(root, Path(out_dir))
