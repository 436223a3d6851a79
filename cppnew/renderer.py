"""
renderer.py

Responsibility: Substitute context variables into template text.

Rules:
- Templates use Jinja2 syntax (`{{ target_name }}`, `{% if with_test_app %}`).
- Every context key is available as a top-level variable; values are inserted
  as-is (no escaping).
- A bare placeholder with no matching variable (`{{name}}`, `{{ name }}`) is
  left in the output exactly as written. Other unresolved expressions render
  in Jinja2's debug form.
- Text that is not a valid Jinja2 template raises `RenderError`.

This module intentionally does NOT know about the filesystem or the schema.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from jinja2 import DebugUndefined, Environment, TemplateError


class RenderError(RuntimeError):
    pass


_ENV = Environment(
    autoescape=False,
    undefined=DebugUndefined,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)

# Raw blocks are matched first so placeholders inside them are never rewritten.
_RAW_OR_PLACEHOLDER = re.compile(
    r"(?P<raw>\{%-?\s*raw\s*-?%\}.*?\{%-?\s*endraw\s*-?%\})"
    r"|\{\{\s*(?P<name>[A-Za-z_][A-Za-z0-9_]*)\s*\}\}",
    re.DOTALL,
)


def _keep_unresolved(text: str, namespace: Mapping[str, Any]) -> tuple[str, dict[str, str]]:
    """
    Point every unresolved bare placeholder at a generated variable whose
    value is the placeholder's original text.
    """
    kept: dict[str, str] = {}

    def _sub(m: re.Match[str]) -> str:
        name = m.group("name")
        if name is None or name in namespace or name in _ENV.globals:
            return m.group(0)
        key = f"_unresolved_{len(kept)}"
        kept[key] = m.group(0)
        return "{{ " + key + " }}"

    return _RAW_OR_PLACEHOLDER.sub(_sub, text), kept


def render_text(
    text: str,
    context: Mapping[str, str],
    *,
    options: Mapping[str, Any] | None = None,
    name: str = "<string>",
) -> str:
    """
    Render `text` with `context`.

    `options` are extra render-time values (flags such as `with_test_app`)
    which templates may test but which are not substitution variables.
    """
    namespace: dict[str, Any] = dict(options or {})
    namespace.update(context)
    source, kept = _keep_unresolved(text, namespace)
    namespace.update(kept)
    try:
        return _ENV.from_string(source).render(namespace)
    except TemplateError as e:
        raise RenderError(f"Failed rendering template: {name}: {e}") from e
