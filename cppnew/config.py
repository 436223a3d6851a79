"""
config.py

Responsibility: Load generator defaults from a YAML file.

Recognized keys (all optional):
- domain_name: str
- target_name: str
- output_dir: str
- with_test_app: bool
- missing_template: "skip" | "empty"
- cmake_minimum_version: str
- templates_dir: str (use a template set on disk instead of the bundled one)
- variables: dict (extra values for templates)

Command-line flags take precedence over anything loaded here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from cppnew.context import CMAKE_MINIMUM_VERSION
from cppnew.materializer import MissingTemplate


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class GeneratorConfig:
    domain_name: str | None = None
    target_name: str = "my_target"
    output_dir: Path | None = None
    with_test_app: bool = True
    missing_template: MissingTemplate = MissingTemplate.SKIP
    cmake_minimum_version: str = CMAKE_MINIMUM_VERSION
    templates_dir: Path | None = None
    variables: dict[str, Any] = field(default_factory=dict)


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        # YAML reads 3.10 as the float 3.1; only quoted values keep their spelling.
        raise ConfigError(f"`{key}` must be a quoted string, got {value!r}.")
    return value.strip() or None


def parse_config(data: dict[str, Any]) -> GeneratorConfig:
    if not isinstance(data, dict):
        raise ConfigError("Config must be a mapping/object at the top level.")

    output_dir = _optional_str(data, "output_dir")
    templates_dir = _optional_str(data, "templates_dir")

    with_test_app = data.get("with_test_app", True)
    if not isinstance(with_test_app, bool):
        raise ConfigError("`with_test_app` must be true or false.")

    raw_policy = _optional_str(data, "missing_template") or MissingTemplate.SKIP.value
    try:
        missing_template = MissingTemplate(raw_policy.lower())
    except ValueError:
        choices = ", ".join(m.value for m in MissingTemplate)
        raise ConfigError(f"`missing_template` must be one of: {choices}.") from None

    vars_raw = data.get("variables") or {}
    if not isinstance(vars_raw, dict):
        raise ConfigError("`variables` must be an object/mapping when provided.")

    return GeneratorConfig(
        domain_name=_optional_str(data, "domain_name"),
        target_name=_optional_str(data, "target_name") or "my_target",
        output_dir=Path(output_dir) if output_dir else None,
        with_test_app=with_test_app,
        missing_template=missing_template,
        cmake_minimum_version=_optional_str(data, "cmake_minimum_version") or CMAKE_MINIMUM_VERSION,
        templates_dir=Path(templates_dir) if templates_dir else None,
        variables=dict(sorted(vars_raw.items(), key=lambda kv: str(kv[0]))),
    )


def load_config(path: str | Path) -> GeneratorConfig:
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file does not exist: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file is not valid YAML: {path}") from e
    return parse_config(data or {})
