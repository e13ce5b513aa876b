"""Command line entry point for printing scene trees."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from scenetree import config
from scenetree.exceptions import SceneTreeError
from scenetree.file_utils import read_scenes_async
from scenetree.inspection import inspect_scene
from scenetree.renderer import RenderOptions

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scenetree",
        description="Print the node tree of Godot text scene (.tscn) files.",
    )
    parser.add_argument("files", nargs="+", help="Scene files to print")
    parser.add_argument(
        "--types",
        action=argparse.BooleanOptionalAction,
        default=config.SCENETREE_SHOW_TYPES,
        help="Append node types in parentheses",
    )
    parser.add_argument(
        "--properties",
        action=argparse.BooleanOptionalAction,
        default=config.SCENETREE_SHOW_PROPERTIES,
        help="List node properties",
    )
    parser.add_argument(
        "--connections",
        action=argparse.BooleanOptionalAction,
        default=config.SCENETREE_SHOW_CONNECTIONS,
        help="List signal connections under their source node",
    )
    parser.add_argument(
        "--instances",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show the scene each instanced node comes from",
    )
    parser.add_argument(
        "--raw-values",
        action="store_true",
        help="Print resource references literally instead of resolving them",
    )
    parser.add_argument(
        "--depth",
        type=_non_negative_int,
        default=config.SCENETREE_MAX_DEPTH,
        help="Maximum depth to display (root is 0)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default=config.SCENETREE_LOG_LEVEL if config.SCENETREE_LOG_LEVEL in _LOG_LEVELS else "WARNING",
        help="Logging verbosity (default: %(default)s)",
    )
    return parser


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError(f"depth must be >= 0, got {number}")
    return number


def options_from_args(args: argparse.Namespace) -> RenderOptions:
    """Map parsed command line flags onto render options."""
    return RenderOptions(
        show_type_suffix=args.types,
        show_properties=args.properties,
        show_connections=args.connections,
        max_depth=args.depth,
        show_instances=args.instances,
        resolve_resources=not args.raw_values,
    )


def main(argv: list[str] | None = None) -> int:
    """Print each scene tree; return 1 if any file could not be printed."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    options = options_from_args(args)

    paths = [Path(name) for name in args.files]
    contents = asyncio.run(read_scenes_async(paths))
    show_headers = len(paths) > 1

    status = 0
    printed = 0
    for path, content in zip(paths, contents):
        if isinstance(content, (OSError, UnicodeDecodeError)):
            reason = content.strerror if isinstance(content, OSError) and content.strerror else content
            print(f"scenetree: {path}: {reason}", file=sys.stderr)
            status = 1
            continue
        if isinstance(content, BaseException):
            raise content

        try:
            result = inspect_scene(content, options)
        except SceneTreeError as exc:
            logger.debug("Failed to inspect %s", path, exc_info=True)
            print(f"scenetree: {path}: {exc}", file=sys.stderr)
            status = 1
            continue

        if show_headers:
            if printed:
                sys.stdout.write("\n")
            sys.stdout.write(f"==> {path} <==\n")
        sys.stdout.write(result.tree)
        printed += 1
        if result.report:
            sys.stderr.write(f"{path}:\n{result.report}")

    return status
