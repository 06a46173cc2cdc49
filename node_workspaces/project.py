"""One-call project inspection for build orchestrators.

Runs root inference, package manager identification and workspace
resolution in that order.  Every call re-reads the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .infer_root import MARKER_FILE, PackageType, infer_root
from .managers import get_package_manager

if TYPE_CHECKING:
    from pathlib import Path

    from .managers import PackageManager


@dataclass(frozen=True)
class ProjectInfo:
    """Everything an orchestrator needs before planning tasks.

    *workspaces* holds absolute ``package.json`` paths and is empty for
    single-package projects.
    """

    root: Path
    mode: PackageType
    package_manager: PackageManager
    workspaces: list[Path] = field(default_factory=list)

    @property
    def is_monorepo(self) -> bool:
        return self.mode is PackageType.MULTI


def inspect_project(directory: str | Path, marker: str = MARKER_FILE) -> ProjectInfo:
    """Inspect the project containing *directory*."""
    inferred = infer_root(directory, marker=marker)

    pm = get_package_manager(inferred.root)

    workspaces: list[Path] = []
    if inferred.mode is PackageType.MULTI:
        workspaces = pm.get_workspaces(inferred.root)

    return ProjectInfo(
        root=inferred.root,
        mode=inferred.mode,
        package_manager=pm,
        workspaces=workspaces,
    )
