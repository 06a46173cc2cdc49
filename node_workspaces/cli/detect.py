"""``nw detect`` — show the governing package manager."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..infer_root import infer_root
from ..managers import get_package_manager

if TYPE_CHECKING:
    import argparse


def execute_detect(args: argparse.Namespace) -> int:
    """Print the identity fields of the detected package manager."""
    root = infer_root(args.directory, marker=args.marker).root
    pm = get_package_manager(root)
    info = pm.describe()

    if getattr(args, "json", False):
        print(json.dumps(info, indent=2))
    else:
        print(f"Name:          {info['name']}")
        print(f"Command:       {info['command']}")
        print(f"Lockfile:      {info['lockfile']}")
        if info["workspace_configuration_path"]:
            print(f"Workspace file: {info['workspace_configuration_path']}")
        separator = " ".join(info["arg_separator"]) or "(none)"
        print(f"Arg separator: {separator}")
    return 0
