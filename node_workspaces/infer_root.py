"""Inference of the project root and single/multi package mode.

Starting from an arbitrary directory:

* If a marker file (``turbo.json`` by default) exists in the directory
  or any ancestor, its directory is trusted as the root.  The mode is
  ``multi`` when that directory declares workspaces and ``single``
  otherwise; a marker without a readable ``package.json`` beside it
  leaves the starting directory as root in ``multi`` mode.
* Without a marker the starting directory stays the root.  The mode
  is ``multi`` when there is no ``package.json`` at all or when the
  nearest one declares workspaces.  Otherwise the ancestors holding a
  ``package.json`` are searched for the nearest workspace root, and
  the mode is ``multi`` only if the nearest package is one of its
  workspaces.

A top-level ``packages`` key in ``package.json`` is never read as a
workspace declaration.
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .exceptions import ManifestParseError
from .parsers import find_parser, find_up, read_package_json
from .workspaces import match_path

log = logging.getLogger(__name__)

MARKER_FILE = "turbo.json"

# Files that can declare workspaces, in lookup order
WORKSPACE_FILES = ("package.json", "pnpm-workspace.yaml")


class PackageType(str, enum.Enum):
    """Whether a project is run as one package or as a workspace."""

    SINGLE = "single"
    MULTI = "multi"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class InferredRoot:
    """The operative root directory and the mode to run it in."""

    root: Path
    mode: PackageType


def candidate_workspace_globs(directory: Path) -> list[str]:
    """Return the workspace globs declared in *directory*, if any.

    ``package.json`` ``workspaces`` are tried first, then
    ``pnpm-workspace.yaml``.
    """
    for name in WORKSPACE_FILES:
        path = directory / name
        parser = find_parser(path)
        if parser.has_workspace(path):
            return parser.workspace_globs(path)
    return []


def is_one_of_the_workspaces(
    globs: list[str], package_dir: Path, workspace_root: Path
) -> bool:
    """Return True if *package_dir* matches a glob relative to *workspace_root*."""
    relative = package_dir.relative_to(workspace_root)
    return any(match_path(relative, glob) for glob in globs)


def infer_root(directory: str | Path, marker: str = MARKER_FILE) -> InferredRoot:
    """Decide which directory is the root and which mode applies there."""
    directory = Path(os.path.abspath(directory))

    marker_path = find_up(marker, directory)
    if marker_path is not None:
        marker_dir = marker_path.parent
        try:
            read_package_json(marker_dir / "package.json")
        except ManifestParseError:
            log.debug("%s has no readable package.json", marker_dir)
            return InferredRoot(directory, PackageType.MULTI)

        if candidate_workspace_globs(marker_dir):
            return InferredRoot(marker_dir, PackageType.MULTI)
        return InferredRoot(marker_dir, PackageType.SINGLE)

    nearest = find_up("package.json", directory)
    if nearest is None:
        log.debug("No package.json found above %s", directory)
        return InferredRoot(directory, PackageType.MULTI)

    nearest_dir = nearest.parent
    if candidate_workspace_globs(nearest_dir):
        return InferredRoot(directory, PackageType.MULTI)

    current = nearest_dir
    while current.parent != current:
        found = find_up("package.json", current.parent)
        if found is None:
            break
        current = found.parent
        globs = candidate_workspace_globs(current)
        if globs:
            if is_one_of_the_workspaces(globs, nearest_dir, current):
                log.debug("%s is a workspace of %s", nearest_dir, current)
                return InferredRoot(directory, PackageType.MULTI)
            return InferredRoot(directory, PackageType.SINGLE)

    return InferredRoot(directory, PackageType.SINGLE)
