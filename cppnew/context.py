"""
context.py

Responsibility: Normalize user-supplied names and build the variable context
that templates (and the project structure) are rendered with.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping

CMAKE_MINIMUM_VERSION = "3.19.0"

_WHITESPACE = re.compile(r"\s")

# Keys derived from the user's names; extra variables may not replace them.
DERIVED_KEYS = ("domain_name", "target_name", "project_name")


class RootDir(str, Enum):
    """Standard top-level directories of a generated project."""

    EXTERNAL = "external"
    INCLUDE = "include"
    SOURCE = "source"
    TEST = "test"


def conform(name: str) -> str:
    """
    Replace every whitespace character with `_` and lower-case the result.

    Leading/trailing whitespace is not trimmed: `" a"` becomes `"_a"`.
    """
    return _WHITESPACE.sub("_", name).lower()


def build_context(
    domain_name: str,
    target_name: str,
    *,
    cmake_minimum_version: str = CMAKE_MINIMUM_VERSION,
    year: int | None = None,
    extra: Mapping[str, Any] | None = None,
) -> dict[str, str]:
    """
    Build the variable context for one generation run.

    `domain_name` and `target_name` are conformed here, once, before
    `project_name` is derived from them.
    """
    domain = conform(domain_name)
    target = conform(target_name)
    if year is None:
        year = datetime.now(timezone.utc).year

    context: dict[str, str] = {
        "domain_name": domain,
        "target_name": target,
        "project_name": f"{domain}-{target}",
        "cmake_minimum_version": cmake_minimum_version,
        "year": str(year),
        "external_dir_name": RootDir.EXTERNAL.value,
        "include_dir_name": RootDir.INCLUDE.value,
        "source_dir_name": RootDir.SOURCE.value,
        "test_dir_name": RootDir.TEST.value,
    }
    for key, value in sorted((extra or {}).items(), key=lambda kv: str(kv[0])):
        if key in DERIVED_KEYS:
            raise ValueError(f"Variable `{key}` is derived from the project names and cannot be set.")
        context[str(key)] = str(value)
    return context
