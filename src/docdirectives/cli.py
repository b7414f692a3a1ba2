#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/cli.py
"""Command-line interface for docdirectives.

The CLI reads a document tree serialized as JSON (see
:func:`docdirectives.ast.json_to_ast`), runs the directive transforms over
it and writes the transformed tree back as JSON.

Examples
--------
Transform a tree with every built-in transform::

    $ docdirectives document.json -o document.out.json

Read from stdin and run selected transforms::

    $ cat document.json | docdirectives - -t callout -t heading-ids

Skip link previews for some domains and keep going on bad URLs::

    $ docdirectives document.json --exclude-domain example.com --skip-invalid-urls

Pretty-print the result with rich::

    $ docdirectives document.json --rich

Exit codes: 0 on success, 1 when a transform or file operation fails,
2 for invalid input, options or configuration.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Optional

from docdirectives.ast.serialization import ast_to_json, json_to_ast
from docdirectives.config import load_pipeline_options
from docdirectives.exceptions import ConfigError, DirectiveError, InvalidUrlError, ValidationError
from docdirectives.logging_utils import configure_logging
from docdirectives.options.pipeline import PipelineOptions
from docdirectives.transforms.pipeline import Pipeline
from docdirectives.transforms.registry import transform_registry

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 2


def _get_version() -> str:
    try:
        return version("docdirectives")
    except PackageNotFoundError:
        return "unknown"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="docdirectives",
        description="Transform directive nodes in a JSON document tree into render hints.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs="?", help="Input JSON tree, or '-' for stdin")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file (.toml, .yaml, .json or pyproject.toml)")
    parser.add_argument(
        "-t",
        "--transform",
        dest="transforms",
        action="append",
        metavar="NAME",
        help="Transform to run; repeat to run several in order (default: all built-ins)",
    )
    parser.add_argument(
        "--exclude-domain",
        dest="exclude_domains",
        action="append",
        metavar="DOMAIN",
        help="Leave link previews whose host contains DOMAIN untouched; repeatable",
    )
    parser.add_argument(
        "--skip-invalid-urls",
        action="store_true",
        help="Leave link previews with malformed URLs untouched instead of failing",
    )
    parser.add_argument("--id-prefix", help="Prefix for generated heading identifiers")
    parser.add_argument("--validate", action="store_true", help="Check that the transformed tree is well formed")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    parser.add_argument("--list-transforms", action="store_true", help="List registered transforms and exit")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--rich", action="store_true", help="Pretty-print output and diagnostics with rich")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_get_version()}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def build_options(parsed_args: argparse.Namespace) -> PipelineOptions:
    """Load configuration and apply command-line overrides.

    Raises
    ------
    ConfigError
        If the configuration cannot be loaded
    ValidationError
        If an override is invalid

    """
    options = load_pipeline_options(parsed_args.config)

    if parsed_args.transforms:
        options = options.create_updated(transforms=tuple(parsed_args.transforms))

    link_preview = options.link_preview
    if parsed_args.exclude_domains:
        link_preview = link_preview.create_updated(
            exclude_domains=link_preview.exclude_domains + tuple(parsed_args.exclude_domains)
        )
    if parsed_args.skip_invalid_urls:
        link_preview = link_preview.create_updated(fail_on_invalid_url=False)
    if link_preview is not options.link_preview:
        options = options.create_updated(link_preview=link_preview)

    if parsed_args.id_prefix is not None:
        heading_ids = options.heading_ids.create_updated(id_prefix=parsed_args.id_prefix)
        options = options.create_updated(heading_ids=heading_ids)

    return options


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _write_output(text: str, parsed_args: argparse.Namespace) -> None:
    if parsed_args.output:
        with open(parsed_args.output, "w", encoding="utf-8") as f:
            f.write(text)
            f.write("\n")
        return

    if parsed_args.rich:
        from rich.console import Console
        from rich.syntax import Syntax

        Console().print(Syntax(text, "json", word_wrap=True))
    else:
        print(text)


def _report_diagnostics(diagnostics: list[DirectiveError], use_rich: bool) -> None:
    if not diagnostics:
        return

    if use_rich:
        from rich.console import Console
        from rich.table import Table

        table = Table(title=f"Skipped directives ({len(diagnostics)})")
        table.add_column("Error", style="yellow", no_wrap=True)
        table.add_column("Message", style="white")
        for diagnostic in diagnostics:
            table.add_row(type(diagnostic).__name__, diagnostic.message)
        Console(stderr=True).print(table)
    else:
        for diagnostic in diagnostics:
            print(f"Warning: {diagnostic.message}", file=sys.stderr)


def list_transforms(use_rich: bool = False) -> int:
    """Print the registered transforms."""
    names = transform_registry.list_transforms()

    if use_rich:
        from rich.console import Console
        from rich.table import Table

        table = Table(title=f"Registered transforms ({len(names)})")
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Description", style="white")
        table.add_column("Parameters", style="magenta")
        for name in names:
            metadata = transform_registry.get_metadata(name)
            table.add_row(name, metadata.description, ", ".join(metadata.get_parameter_names()) or "-")
        Console().print(table)
    else:
        for name in names:
            print(f"{name}: {transform_registry.get_metadata(name).description}")

    return EXIT_SUCCESS


def main(args: Optional[list[str]] = None) -> int:
    """Execute the CLI and return an exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    if parsed_args.list_transforms:
        return list_transforms(parsed_args.rich)

    if not parsed_args.input:
        print("Error: Input file is required", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        options = build_options(parsed_args)
    except (ConfigError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        source = _read_input(parsed_args.input)
    except OSError as e:
        print(f"Error: cannot read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        document = json_to_ast(source)
    except (json.JSONDecodeError, ValueError, KeyError, TypeError) as e:
        print(f"Error: invalid document tree: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    pipeline = Pipeline(options=options, validate=parsed_args.validate)
    try:
        result = pipeline.execute(document)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except InvalidUrlError as e:
        print(f"Error: {e} (use --skip-invalid-urls to leave such previews untouched)", file=sys.stderr)
        return EXIT_ERROR
    except DirectiveError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    _report_diagnostics(pipeline.diagnostics, parsed_args.rich)

    try:
        _write_output(ast_to_json(result, indent=parsed_args.indent), parsed_args)
    except OSError as e:
        print(f"Error: cannot write {parsed_args.output}: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
