"""Tests for the template provider and the bundled template set."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cppnew.provider import STRUCTURE_TEMPLATE, TemplateNotFound, TemplateProvider
from cppnew.renderer import render_text
from cppnew.schema import Folder, parse_schema


def test_get_and_missing_key() -> None:
    provider = TemplateProvider({"a": "A"})
    assert provider.get("a") == "A"
    with pytest.raises(TemplateNotFound) as exc:
        provider.get("b")
    assert exc.value.key == "b"
    assert isinstance(exc.value, LookupError)


def test_provider_is_a_snapshot() -> None:
    source = {"a": "A"}
    provider = TemplateProvider(source)
    source["a"] = "changed"
    source["b"] = "B"
    assert provider.get("a") == "A"
    assert "b" not in provider


def test_from_directory_uses_posix_relative_keys(tmp_path: Path) -> None:
    (tmp_path / "sub").mkdir()
    (tmp_path / "top.in").write_text("top", encoding="utf-8")
    (tmp_path / "sub" / "inner.in").write_text("inner", encoding="utf-8")

    provider = TemplateProvider.from_directory(tmp_path)

    assert provider.keys() == ["sub/inner.in", "top.in"]
    assert provider.get("sub/inner.in") == "inner"
    assert len(provider) == 2


def test_from_directory_keeps_dunder_named_files(tmp_path: Path) -> None:
    (tmp_path / "__private.in").write_text("x", encoding="utf-8")
    (tmp_path / "__init__.py").write_text("", encoding="utf-8")

    provider = TemplateProvider.from_directory(tmp_path)

    assert provider.keys() == ["__init__.py", "__private.in"]


def test_from_directory_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        TemplateProvider.from_directory(tmp_path / "nope")


# ---------------------------------------------------------------------------
# Bundled set
# ---------------------------------------------------------------------------


@pytest.fixture(scope="module")
def bundled() -> TemplateProvider:
    return TemplateProvider.from_package()


def _template_keys(folder: Folder) -> set[str]:
    keys = {f.template for f in folder.files if f.template}
    for child in folder.folders:
        keys |= _template_keys(child)
    return keys


@pytest.mark.parametrize("with_test_app", [True, False])
def test_bundled_structure_references_only_bundled_templates(
    bundled: TemplateProvider, context: dict[str, str], with_test_app: bool
) -> None:
    rendered = render_text(bundled.get(STRUCTURE_TEMPLATE), context, options={"with_test_app": with_test_app})
    json.loads(rendered)
    root = parse_schema(rendered)

    assert root.name == "acme_corp-widget"
    for key in _template_keys(root):
        assert key in bundled


def test_bundled_templates_render_without_leftover_placeholders(
    bundled: TemplateProvider, context: dict[str, str]
) -> None:
    for key in bundled.keys():
        out = render_text(bundled.get(key), context, options={"with_test_app": True}, name=key)
        assert "{{" not in out, key
        assert "{%" not in out, key


def test_bundled_set_holds_only_templates(bundled: TemplateProvider) -> None:
    assert STRUCTURE_TEMPLATE in bundled
    assert not any(key.endswith(".py") or "__pycache__" in key for key in bundled.keys())
