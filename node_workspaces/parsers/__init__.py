"""Project file parsers and parser registry.

Known files
-----------
1. ``package.json``        – the project manifest
2. ``pnpm-workspace.yaml`` – pnpm's dedicated workspace configuration
3. ``.yarnrc.yml``         – Yarn berry's settings (linker mode)

Every call reads the file again; nothing is cached.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from ..exceptions import ManifestParseError
from .package_json import PackageJsonParser, package_json_from_data
from .pnpm_workspace import PnpmWorkspaceParser
from .yarnrc import YarnRcParser

if TYPE_CHECKING:
    from ..models import PackageJSON, PnpmWorkspace, YarnRC
    from .base import ManifestParser

__all__ = [
    "find_parser",
    "find_up",
    "package_json_from_data",
    "read_package_json",
    "read_pnpm_workspace",
    "read_yarnrc",
]

# Parser instances, looked up by file name
_PARSERS: list[ManifestParser] = [
    PackageJsonParser(),
    PnpmWorkspaceParser(),
    YarnRcParser(),
]


def find_parser(path: Path) -> ManifestParser:
    """Return the parser that can handle *path*.

    Raises ``ManifestParseError`` if no parser matches.
    """
    for parser in _PARSERS:
        if parser.can_handle(path):
            return parser
    raise ManifestParseError(path, f"No parser available for '{path.name}'")


def read_package_json(path: str | Path) -> PackageJSON:
    """Read and decode a ``package.json``."""
    return PackageJsonParser().parse(Path(path))


def read_pnpm_workspace(path: str | Path) -> PnpmWorkspace:
    """Read and decode a ``pnpm-workspace.yaml``."""
    return PnpmWorkspaceParser().parse(Path(path))


def read_yarnrc(path: str | Path) -> YarnRC:
    """Read and decode a ``.yarnrc.yml``."""
    return YarnRcParser().parse(Path(path))


def find_up(name: str, start_dir: str | Path) -> Path | None:
    """Walk up from *start_dir* looking for a file called *name*.

    Returns the path of the first match, or ``None`` once the
    filesystem root has been checked.
    """
    current = Path(os.path.abspath(start_dir))
    while True:
        candidate = current / name
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent
