"""
cppnew package

This package implements cpp-new, a CLI that generates C++/CMake project
skeletons from a bundled template set.

Key responsibilities are split across modules:
- `schema.py`: folder/file tree model and the structure JSON parser
- `provider.py`: read-only template lookup (bundled set or a directory)
- `context.py`: name conforming and the variable context
- `renderer.py`: Jinja2 substitution of variables into template text
- `materializer.py`: recursive, idempotent creation of the tree on disk
- `generator.py`: one generation run (render structure -> parse -> materialize)
- `config.py`: YAML defaults
- `cli.py`: CLI entrypoint
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
