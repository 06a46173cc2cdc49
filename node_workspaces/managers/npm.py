"""npm descriptor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import (
    PackageManager,
    always_prunable,
    package_json_workspace_globs,
    specfile_and_lockfile_exist,
)

if TYPE_CHECKING:
    from pathlib import Path


def _workspace_globs(root: Path) -> list[str]:
    return package_json_workspace_globs(root, "npm")


def _workspace_ignores(pm: PackageManager, root: Path) -> list[str]:
    # Mirrors npm's @npmcli/map-workspaces, which always skips node_modules.
    return ["**/node_modules/**"]


def _matches(manager: str, version: str) -> bool:
    return manager == "npm"


def _detect(project_directory: Path, pm: PackageManager) -> bool:
    return specfile_and_lockfile_exist(project_directory, pm)


NPM = PackageManager(
    name="nodejs-npm",
    slug="npm",
    command="npm",
    lockfile="package-lock.json",
    arg_separator=("--",),
    workspace_globs_fn=_workspace_globs,
    workspace_ignores_fn=_workspace_ignores,
    matches_fn=_matches,
    detect_fn=_detect,
    can_prune_fn=always_prunable,
)
