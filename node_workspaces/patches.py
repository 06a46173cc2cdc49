"""Pruning of patch references in ``package.json``.

Two manifest shapes carry patch declarations:

* Yarn berry: the top-level ``resolutions`` mapping, where patched
  entries point at ``patch:...#./patches/x.patch`` style references;
* pnpm: ``pnpm.patchedDependencies``, mapping a dependency to a
  patch file path.

Only references to ``.patch`` files are ever removed.  An entry is
kept when its reference ends with one of the retained patch
identifiers; any other kind of reference is left alone.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .exceptions import PatchStructureError

if TYPE_CHECKING:
    from typing import Any

    from .models import PackageJSON

log = logging.getLogger(__name__)

PATCH_SUFFIX = ".patch"


def _prune_mapping(
    mapping: dict[str, Any], patches: list[str], section: str
) -> list[str]:
    """Remove unused patch entries from *mapping*; return removed keys."""
    to_delete: list[str] = []
    for dependency, patch in mapping.items():
        if not isinstance(patch, str):
            raise PatchStructureError(
                section, f"expected value of {dependency} to be a string, got {patch!r}"
            )
        if not patch.endswith(PATCH_SUFFIX):
            continue
        if any(patch.endswith(wanted) for wanted in patches):
            continue
        to_delete.append(dependency)

    for dependency in to_delete:
        log.debug("Pruning unused patch %s from %s", mapping[dependency], section)
        del mapping[dependency]
    return to_delete


def prune_resolution_patches(pkg: PackageJSON, patches: list[str]) -> None:
    """Prune the ``resolutions`` field (Yarn berry)."""
    with pkg.lock:
        if not isinstance(pkg.resolutions, dict):
            raise PatchStructureError("resolutions", "expected an object")
        _prune_mapping(pkg.resolutions, patches, "resolutions")


def prune_pnpm_patches(pkg: PackageJSON, patches: list[str]) -> None:
    """Prune ``pnpm.patchedDependencies`` (pnpm 7+)."""
    with pkg.lock:
        if not isinstance(pkg.pnpm, dict):
            raise PatchStructureError("pnpm", "expected an object")
        patched = pkg.pnpm.get("patchedDependencies")
        if not isinstance(patched, dict):
            raise PatchStructureError("patchedDependencies", "expected an object")
        _prune_mapping(patched, patches, "patchedDependencies")
