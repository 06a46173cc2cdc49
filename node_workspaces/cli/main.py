"""CLI for ``nw`` -- argparse configuration and dispatch."""

from __future__ import annotations

import argparse
from pathlib import Path

from ..infer_root import MARKER_FILE


def generate_parser() -> argparse.ArgumentParser:
    """Build and return the top-level parser."""
    parser = argparse.ArgumentParser(
        prog="nw",
        description="Inspect Node.js monorepos: root, package manager and workspaces.",
    )
    configure_parser(parser)
    return parser


def _add_directory(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Directory inside the project (default: current directory).",
    )
    parser.add_argument(
        "--marker",
        default=MARKER_FILE,
        help=f"File marking the project root (default: {MARKER_FILE}).",
    )


def configure_parser(parser: argparse.ArgumentParser) -> None:
    """Set up ``nw`` CLI with subcommands."""
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Emit JSON instead of text.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (repeatable).",
    )

    sub = parser.add_subparsers(dest="subcmd")

    root_parser = sub.add_parser(
        "root",
        help="Show the inferred project root and package mode.",
    )
    _add_directory(root_parser)

    detect_parser = sub.add_parser(
        "detect",
        help="Show the package manager governing the project.",
    )
    _add_directory(detect_parser)

    ws_parser = sub.add_parser(
        "workspaces",
        help="List the package.json of every workspace.",
    )
    _add_directory(ws_parser)
    ws_parser.add_argument(
        "--relative",
        action="store_true",
        default=False,
        help="Print paths relative to the project root.",
    )

    ignores_parser = sub.add_parser(
        "ignores",
        help="List the globs excluded from workspace discovery.",
    )
    _add_directory(ignores_parser)

    prune_parser = sub.add_parser(
        "prune-patches",
        help="Print package.json with unused patch references removed.",
    )
    _add_directory(prune_parser)
    prune_parser.add_argument(
        "--keep",
        action="append",
        default=[],
        metavar="PATCH",
        help="Patch file to keep (repeatable).",
    )


def execute(args: argparse.Namespace) -> int:
    """Dispatch to the selected subcommand."""
    subcmd = args.subcmd

    if subcmd is None:
        generate_parser().print_help()
        return 0

    if subcmd == "root":
        from .root import execute_root

        return execute_root(args)
    elif subcmd == "detect":
        from .detect import execute_detect

        return execute_detect(args)
    elif subcmd == "workspaces":
        from .workspaces import execute_workspaces

        return execute_workspaces(args)
    elif subcmd == "ignores":
        from .workspaces import execute_ignores

        return execute_ignores(args)
    elif subcmd == "prune-patches":
        from .prune import execute_prune_patches

        return execute_prune_patches(args)
    else:
        generate_parser().print_help()
        return 0
