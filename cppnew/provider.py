"""
provider.py

Responsibility: Read-only lookup of raw template text by key.

The bundled template set ships inside the package (`cppnew/templates/`) and is
read once into memory. Keys are POSIX-style paths relative to the template
root, e.g. `CMakeLists.txt.in`. A template set on disk can be used instead.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from types import MappingProxyType

STRUCTURE_TEMPLATE = "project_structure.json"


class TemplateNotFound(LookupError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Cannot find template for {key!r}")
        self.key = key


# Python package files that may sit next to the bundled templates.
_PACKAGE_NOISE = frozenset({"__init__.py", "__pycache__"})


def _walk(node: Traversable, prefix: str = "", skip: frozenset[str] = frozenset()) -> Iterator[tuple[str, str]]:
    for child in sorted(node.iterdir(), key=lambda c: c.name):
        if child.name in skip:
            continue
        key = f"{prefix}{child.name}"
        if child.is_dir():
            yield from _walk(child, f"{key}/", skip)
        else:
            yield key, child.read_text(encoding="utf-8")


class TemplateProvider:
    def __init__(self, templates: Mapping[str, str]) -> None:
        self._templates = MappingProxyType(dict(templates))

    @classmethod
    def from_package(cls, package: str = "cppnew", directory: str = "templates") -> TemplateProvider:
        """Load the template set bundled with `package`."""
        return cls(dict(_walk(files(package).joinpath(directory), skip=_PACKAGE_NOISE)))

    @classmethod
    def from_directory(cls, path: str | Path) -> TemplateProvider:
        root = Path(path)
        if not root.is_dir():
            raise FileNotFoundError(f"Template directory not found: {root}")
        return cls(dict(_walk(root)))

    def get(self, key: str) -> str:
        try:
            return self._templates[key]
        except KeyError:
            raise TemplateNotFound(key) from None

    def keys(self) -> list[str]:
        return sorted(self._templates)

    def __contains__(self, key: object) -> bool:
        return key in self._templates

    def __len__(self) -> int:
        return len(self._templates)
