"""Standalone CLI entry point for ``nw``.

::

    nw root
    nw detect apps/web
    nw workspaces --relative
    nw prune-patches --keep patches/is-odd@3.0.1.patch
"""

from __future__ import annotations

import logging
import sys

from .exceptions import NodeWorkspacesError


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(args: list[str] | None = None) -> None:
    """Entry point for the ``nw`` console script."""
    from .cli.main import execute, generate_parser

    parser = generate_parser()
    parsed = parser.parse_args(args)
    _configure_logging(getattr(parsed, "verbose", 0))

    try:
        code = execute(parsed)
    except NodeWorkspacesError as exc:
        print(f"error: {exc}", file=sys.stderr)
        code = 1
    raise SystemExit(code)


if __name__ == "__main__":
    main()
