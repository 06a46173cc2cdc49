"""``nw root`` — show the inferred root and package mode."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..infer_root import infer_root

if TYPE_CHECKING:
    import argparse


def execute_root(args: argparse.Namespace) -> int:
    """Print the project root and whether it is single or multi package."""
    inferred = infer_root(args.directory, marker=args.marker)

    if getattr(args, "json", False):
        info = {"root": str(inferred.root), "mode": str(inferred.mode)}
        print(json.dumps(info, indent=2))
    else:
        print(f"Root: {inferred.root}")
        print(f"Mode: {inferred.mode}")
    return 0
