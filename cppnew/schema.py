"""
schema.py

Responsibility: Typed model of a project skeleton (folders and files) and the
parser that turns rendered structure JSON into that model.

Expected document shape (recursive):

    {
      "name": "root",
      "folders": [ { "name": "include", ... } ],
      "files": [ { "name": "CMakeLists.txt", "template": "CMakeLists.txt.in" } ]
    }

Unknown keys are ignored. `folders`, `files` and `template` are optional.
This module never touches the filesystem.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


class SchemaParseError(ValueError):
    pass


@dataclass(frozen=True)
class File:
    """A file entry. Without a template it is declared but carries no content."""

    name: str
    template: str | None = None


@dataclass(frozen=True)
class Folder:
    """A folder entry owning its child folders and files, in declaration order."""

    name: str
    folders: tuple[Folder, ...] = ()
    files: tuple[File, ...] = ()


def _check_name(raw: dict[str, Any], where: str) -> str:
    name = raw.get("name")
    if not isinstance(name, str) or not name:
        raise SchemaParseError(f"{where}: `name` must be a non-empty string.")
    if "/" in name or "\\" in name or "\x00" in name or name in (".", ".."):
        raise SchemaParseError(f"{where}: `name` must be a single path segment, got {name!r}.")
    return name


def _list_field(raw: dict[str, Any], key: str, where: str) -> list[Any]:
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise SchemaParseError(f"{where}: `{key}` must be a list when provided.")
    return value


def _parse_file(raw: Any, where: str) -> File:
    if not isinstance(raw, dict):
        raise SchemaParseError(f"{where}: file entry must be an object.")
    name = _check_name(raw, where)
    template = raw.get("template")
    if template is not None and not isinstance(template, str):
        raise SchemaParseError(f"{where}/{name}: `template` must be a string when provided.")
    return File(name=name, template=template or None)


def _parse_folder(raw: Any, where: str) -> Folder:
    if not isinstance(raw, dict):
        raise SchemaParseError(f"{where}: folder entry must be an object.")
    name = _check_name(raw, where)
    here = f"{where}/{name}"
    folders = tuple(_parse_folder(child, here) for child in _list_field(raw, "folders", here))
    files = tuple(_parse_file(child, here) for child in _list_field(raw, "files", here))
    return Folder(name=name, folders=folders, files=files)


def parse_schema(text: str) -> Folder:
    """
    Parse rendered structure JSON into the root `Folder`.

    Raises `SchemaParseError` for malformed JSON or a document that does not
    follow the folder/file shape.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaParseError(f"Project structure is not valid JSON: {e}") from e
    return _parse_folder(data, "<root>")
