"""``nw prune-patches`` — print package.json without unused patches.

The manifest on disk is never modified.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..infer_root import infer_root
from ..managers import get_package_manager
from ..parsers import read_package_json

if TYPE_CHECKING:
    import argparse


def execute_prune_patches(args: argparse.Namespace) -> int:
    root = infer_root(args.directory, marker=args.marker).root
    pkg = read_package_json(root / "package.json")
    pm = get_package_manager(root, pkg)

    pm.prune_patched_packages(pkg, list(args.keep))
    print(json.dumps(pkg.to_dict(), indent=2))
    return 0
