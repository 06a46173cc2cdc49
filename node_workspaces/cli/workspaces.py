"""``nw workspaces`` and ``nw ignores`` — workspace discovery output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..infer_root import infer_root
from ..managers import get_package_manager

if TYPE_CHECKING:
    import argparse


def execute_workspaces(args: argparse.Namespace) -> int:
    """List the ``package.json`` of every workspace."""
    root = infer_root(args.directory, marker=args.marker).root
    pm = get_package_manager(root)
    paths = [str(p) for p in pm.get_workspaces(root, relative=args.relative)]

    if getattr(args, "json", False):
        print(json.dumps(paths, indent=2))
    else:
        for path in paths:
            print(path)
    return 0


def execute_ignores(args: argparse.Namespace) -> int:
    """List the globs excluded from workspace discovery."""
    root = infer_root(args.directory, marker=args.marker).root
    pm = get_package_manager(root)
    ignores = pm.get_workspace_ignores(root)

    if getattr(args, "json", False):
        print(json.dumps(ignores, indent=2))
    else:
        for glob in ignores:
            print(glob)
    return 0
