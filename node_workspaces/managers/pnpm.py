"""pnpm descriptors.

pnpm 7 changed how ``--`` is handled when forwarding arguments to
scripts, so pnpm is modelled as two variants split at ``7.0.0``:
``nodejs-pnpm`` (7 and later) and ``nodejs-pnpm6`` (everything
before).  Both read workspaces from ``pnpm-workspace.yaml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..exceptions import WorkspacesNotDefinedError
from ..parsers import read_pnpm_workspace
from ..patches import prune_pnpm_patches
from ..versions import version_satisfies
from .base import PackageManager, always_prunable, specfile_and_lockfile_exist

if TYPE_CHECKING:
    from pathlib import Path

WORKSPACE_FILE = "pnpm-workspace.yaml"
PNPM7_VERSION = "7.0.0"


def _workspace_globs(root: Path) -> list[str]:
    path = root / WORKSPACE_FILE
    globs = read_pnpm_workspace(path).includes
    if not globs:
        raise WorkspacesNotDefinedError(path, "pnpm", WORKSPACE_FILE)
    return globs


def _workspace_ignores(pm: PackageManager, root: Path) -> list[str]:
    # pnpm's find-packages defaults, plus the `!` entries of the workspace file.
    ignores = [
        "**/node_modules/**",
        "**/bower_components/**",
    ]
    ignores.extend(read_pnpm_workspace(root / WORKSPACE_FILE).excludes)
    return ignores


def _detect(project_directory: Path, pm: PackageManager) -> bool:
    return specfile_and_lockfile_exist(project_directory, pm)


def _matches_pnpm(manager: str, version: str) -> bool:
    if manager != "pnpm":
        return False
    return version_satisfies("pnpm", version, minimum=PNPM7_VERSION)


def _matches_pnpm6(manager: str, version: str) -> bool:
    if manager != "pnpm":
        return False
    return version_satisfies("pnpm", version, below=PNPM7_VERSION)


PNPM = PackageManager(
    name="nodejs-pnpm",
    slug="pnpm",
    command="pnpm",
    lockfile="pnpm-lock.yaml",
    workspace_configuration_path=WORKSPACE_FILE,
    workspace_globs_fn=_workspace_globs,
    workspace_ignores_fn=_workspace_ignores,
    matches_fn=_matches_pnpm,
    detect_fn=_detect,
    can_prune_fn=always_prunable,
    prune_patches_fn=prune_pnpm_patches,
)

PNPM6 = PackageManager(
    name="nodejs-pnpm6",
    slug="pnpm",
    command="pnpm",
    lockfile="pnpm-lock.yaml",
    workspace_configuration_path=WORKSPACE_FILE,
    arg_separator=("--",),
    workspace_globs_fn=_workspace_globs,
    workspace_ignores_fn=_workspace_ignores,
    matches_fn=_matches_pnpm6,
    detect_fn=_detect,
    can_prune_fn=always_prunable,
)
