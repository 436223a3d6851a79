"""Shared pytest fixtures for the cpp-new test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cppnew.context import build_context
from cppnew.provider import STRUCTURE_TEMPLATE, TemplateProvider


# ---------------------------------------------------------------------------
# Context & templates
# ---------------------------------------------------------------------------


@pytest.fixture
def context() -> dict[str, str]:
    """Context for domain "Acme Corp", target "Widget", pinned year."""
    return build_context("Acme Corp", "Widget", year=2024)


@pytest.fixture
def small_structure() -> str:
    return json.dumps(
        {
            "name": "root",
            "folders": [{"name": "include"}],
            "files": [{"name": "CMakeLists.txt", "template": "cmake"}],
        }
    )


@pytest.fixture
def fake_templates(small_structure: str) -> TemplateProvider:
    """Small in-memory template set."""
    return TemplateProvider(
        {
            STRUCTURE_TEMPLATE: small_structure,
            "cmake": "project({{ project_name }})\n",
            "header": "// {{ target_name }} {{ unknown_var }}\n",
        }
    )


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Empty output directory (auto-cleanup)."""
    d = tmp_path / "out"
    d.mkdir()
    return d


def _tree(root: Path) -> list[str]:
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*"))


@pytest.fixture
def tree():
    """Sorted POSIX paths of everything under a directory, relative to it."""
    return _tree
