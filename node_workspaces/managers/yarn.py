"""Classic Yarn (v1) descriptor.

Classic Yarn and berry share the ``yarn`` slug, lockfile name and
command; they are told apart by version.  Everything below
``2.0.0-0`` is classic Yarn.
"""

from __future__ import annotations

import posixpath
from typing import TYPE_CHECKING

from .. import process
from ..versions import version_satisfies
from .base import (
    PackageManager,
    always_prunable,
    package_json_workspace_globs,
    specfile_and_lockfile_exist,
)

if TYPE_CHECKING:
    from pathlib import Path

BERRY_MIN_VERSION = "2.0.0-0"


def _workspace_globs(root: Path) -> list[str]:
    return package_json_workspace_globs(root, "Yarn")


def _workspace_ignores(pm: PackageManager, root: Path) -> list[str]:
    # Yarn v1 only globs for manifests inside each workspace, so the
    # node_modules exclusion is scoped per workspace glob.
    return [
        posixpath.normpath(posixpath.join(glob, "node_modules", "**"))
        for glob in pm.get_workspace_globs(root)
    ]


def _matches(manager: str, version: str) -> bool:
    if manager != "yarn":
        return False
    return version_satisfies("yarn", version, below=BERRY_MIN_VERSION)


def _detect(project_directory: Path, pm: PackageManager) -> bool:
    if not specfile_and_lockfile_exist(project_directory, pm):
        return False

    version = process.get_command_version(pm.command, project_directory)
    return pm.matches(pm.slug, version)


YARN = PackageManager(
    name="nodejs-yarn",
    slug="yarn",
    command="yarn",
    lockfile="yarn.lock",
    arg_separator=("--",),
    workspace_globs_fn=_workspace_globs,
    workspace_ignores_fn=_workspace_ignores,
    matches_fn=_matches,
    detect_fn=_detect,
    can_prune_fn=always_prunable,
)
