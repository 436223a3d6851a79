"""
cli.py

Responsibility: CLI entrypoint for cpp-new.

Commands:
- `new`: generate a C++/CMake project skeleton
  1) Load defaults from `--config` (optional YAML)
  2) Apply CLI overrides
  3) Render and materialize the project structure, logging every path
- `templates`: list the keys of the bundled template set

This module should orchestrate behavior but keep concerns isolated:
- Configuration: `config.py`
- Generation: `generator.py`
- Tree walking and file writing: `materializer.py`
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from cppnew import __version__
from cppnew.config import ConfigError, GeneratorConfig, load_config
from cppnew.generator import ProjectGenerator, log_path_event
from cppnew.materializer import MaterializeIOError, MissingTemplate
from cppnew.provider import TemplateNotFound, TemplateProvider
from cppnew.renderer import RenderError
from cppnew.schema import SchemaParseError

logger = logging.getLogger(__name__)


class CLIError(RuntimeError):
    pass


def _configure_logging(verbosity: int) -> None:
    level = {-1: logging.WARNING, 0: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")


def _template_provider(templates_dir: Path | None) -> TemplateProvider:
    if templates_dir is None:
        return TemplateProvider.from_package()
    try:
        return TemplateProvider.from_directory(templates_dir)
    except FileNotFoundError as e:
        raise CLIError(str(e)) from e


def new_cmd(args: argparse.Namespace) -> int:
    config = load_config(args.config) if args.config else GeneratorConfig()

    # CLI overrides
    domain_name = args.domain_name or config.domain_name
    if not domain_name:
        raise CLIError("--domain-name is required unless the config file sets `domain_name`")
    target_name = args.target_name or config.target_name
    output_dir = Path(args.output_dir or config.output_dir or Path.cwd()).resolve()
    templates_dir = args.templates_dir or config.templates_dir
    with_test_app = config.with_test_app if args.with_test_app is None else bool(args.with_test_app)
    missing_template = MissingTemplate.EMPTY if args.empty_files else config.missing_template

    logger.info("Domain: %r", domain_name)
    logger.info("Target: %r", target_name)
    logger.info("Output: %s", output_dir)

    generator = ProjectGenerator(
        domain_name=domain_name,
        target_name=target_name,
        out_dir=output_dir,
        templates=_template_provider(Path(templates_dir) if templates_dir else None),
        with_test_app=with_test_app,
        missing_template=missing_template,
        cmake_minimum_version=config.cmake_minimum_version,
        variables=config.variables,
    )
    root = generator.generate(log_path_event, dry_run=bool(args.dry_run))
    logger.info("Project %s ready at %s", generator.context["project_name"], root)
    return 0


def templates_cmd(args: argparse.Namespace) -> int:
    provider = _template_provider(Path(args.templates_dir) if args.templates_dir else None)
    for key in provider.keys():
        print(key)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="cpp-new", description="Generate a new C++/CMake project skeleton")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", dest="verbosity", action="store_const", const=1, default=0, help="Debug output")
    p.add_argument("-q", "--quiet", dest="verbosity", action="store_const", const=-1, help="Only warnings and errors")
    sub = p.add_subparsers(dest="command", required=True)

    n = sub.add_parser("new", help="Generate a new project")
    n.add_argument("-d", "--domain-name", default=None, help="e.g. my_company_name")
    n.add_argument("-t", "--target-name", default=None, help="Target name (default: my_target)")
    n.add_argument("-o", "--output-dir", default=None, help="Directory to generate into (default: cwd)")
    n.add_argument("--config", default=None, help="YAML file with generator defaults")
    n.add_argument("--templates-dir", default=None, help="Use templates from this directory instead of the bundled set")
    n.add_argument("--with-test-app", dest="with_test_app", action="store_true", default=None, help="Generate the test app")
    n.add_argument("--no-test-app", dest="with_test_app", action="store_false", default=None, help="Omit the test app")
    n.add_argument(
        "--empty-files",
        action="store_true",
        help="Create files declared without a template as empty files (default: skip them)",
    )
    n.add_argument("--dry-run", action="store_true", help="Report what would be created without writing")
    n.set_defaults(func=new_cmd)

    t = sub.add_parser("templates", help="List available template keys")
    t.add_argument("--templates-dir", default=None, help="List this directory instead of the bundled set")
    t.set_defaults(func=templates_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbosity)
    try:
        return int(args.func(args))
    except (
        CLIError,
        ConfigError,
        TemplateNotFound,
        SchemaParseError,
        RenderError,
        MaterializeIOError,
        ValueError,
    ) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
