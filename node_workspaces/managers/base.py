"""The package manager descriptor type and helpers shared by descriptors.

A :class:`PackageManager` is a frozen bundle of identifying data and
capability functions.  The five supported variants are plain
instances defined in the sibling modules; behaviour is selected by
data, never by subclassing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from ..exceptions import LockfileUnsupportedError, WorkspacesNotDefinedError
from ..parsers import read_package_json

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..models import PackageJSON

SPECFILE = "package.json"
PACKAGE_DIR = "node_modules"


@dataclass(frozen=True)
class PackageManager:
    """Identity and capabilities of one package manager variant.

    *slug* is the token used in ``packageManager`` declarations and is
    shared between variants (both pnpm descriptors use ``pnpm``);
    *name* is unique.

    *workspace_configuration_path* is empty when workspaces are
    declared in ``package.json`` itself.
    """

    name: str
    slug: str
    command: str
    lockfile: str

    workspace_globs_fn: Callable[[Path], list[str]] = field(repr=False, compare=False)
    workspace_ignores_fn: Callable[[PackageManager, Path], list[str]] = field(
        repr=False, compare=False
    )
    matches_fn: Callable[[str, str], bool] = field(repr=False, compare=False)
    detect_fn: Callable[[Path, PackageManager], bool] = field(
        repr=False, compare=False
    )
    can_prune_fn: Callable[[Path], bool] | None = field(
        default=None, repr=False, compare=False
    )
    prune_patches_fn: Callable[[PackageJSON, list[str]], None] | None = field(
        default=None, repr=False, compare=False
    )

    specfile: str = SPECFILE
    package_dir: str = PACKAGE_DIR
    workspace_configuration_path: str = ""
    arg_separator: tuple[str, ...] = ()

    def matches(self, manager: str, version: str) -> bool:
        """Return True if ``manager@version`` is handled by this variant."""
        return self.matches_fn(manager, version)

    def detect(self, project_directory: str | Path) -> bool:
        """Probe *project_directory* for signs of this package manager.

        Returns False when the project is definitely not using it and
        raises when it is, but in a state that cannot be supported.
        """
        return self.detect_fn(Path(project_directory), self)

    def get_workspace_globs(self, root: str | Path) -> list[str]:
        """Return the declared workspace globs (without exclusions)."""
        return self.workspace_globs_fn(Path(root))

    def get_workspace_ignores(self, root: str | Path) -> list[str]:
        """Return the globs of paths never considered workspaces."""
        return self.workspace_ignores_fn(self, Path(root))

    def get_workspaces(self, root: str | Path, relative: bool = False) -> list[Path]:
        """Return the ``package.json`` path of every workspace under *root*."""
        from ..workspaces import get_workspaces

        return get_workspaces(self, root, relative=relative)

    def can_prune(self, project_directory: str | Path) -> bool:
        """Return True if a pruned workspace can be produced for the project."""
        if self.can_prune_fn is None:
            return False
        return self.can_prune_fn(Path(project_directory))

    def prune_patched_packages(self, pkg: PackageJSON, patches: list[str]) -> None:
        """Drop unused patch references from *pkg* in place.

        A no-op for package managers without patch support.
        """
        if self.prune_patches_fn is not None:
            self.prune_patches_fn(pkg, patches)

    def read_lockfile(self, project_directory: str | Path) -> None:
        """Read the lockfile of *project_directory*.

        Lockfile decoding is not implemented for any package manager.
        """
        raise LockfileUnsupportedError(self.name, self.lockfile)

    def describe(self) -> dict[str, str | list[str]]:
        """Return the public identity fields as plain data."""
        return {
            "name": self.name,
            "slug": self.slug,
            "command": self.command,
            "specfile": self.specfile,
            "lockfile": self.lockfile,
            "package_dir": self.package_dir,
            "workspace_configuration_path": self.workspace_configuration_path,
            "arg_separator": list(self.arg_separator),
        }


def specfile_and_lockfile_exist(
    project_directory: Path, pm: PackageManager
) -> bool:
    """Cheap presence check shared by every detection predicate."""
    return (project_directory / pm.specfile).is_file() and (
        project_directory / pm.lockfile
    ).is_file()


def package_json_workspace_globs(root: Path, label: str) -> list[str]:
    """Return the ``workspaces`` globs of ``root/package.json``.

    *label* names the package manager in the error raised when no
    workspaces are declared.
    """
    path = root / SPECFILE
    pkg = read_package_json(path)
    if not pkg.workspaces:
        raise WorkspacesNotDefinedError(path, label, SPECFILE)
    return pkg.workspaces


def always_prunable(project_directory: Path) -> bool:
    return True
