"""Yarn berry (v2+) descriptor.

Berry can be configured in ways this layer cannot support, so its
detection goes further than a file check: once the installed Yarn is
known to be berry, ``.yarnrc.yml`` must select the ``node-modules``
linker or detection fails outright instead of falling through to
another package manager.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .. import process
from ..exceptions import (
    ManifestParseError,
    UnsupportedConfigurationError,
    VersionParseError,
)
from ..parsers import read_yarnrc
from ..patches import prune_resolution_patches
from ..versions import version_satisfies
from .base import (
    PackageManager,
    package_json_workspace_globs,
    specfile_and_lockfile_exist,
)
from .yarn import BERRY_MIN_VERSION

if TYPE_CHECKING:
    from pathlib import Path

log = logging.getLogger(__name__)

YARNRC = ".yarnrc.yml"


def check_node_modules_linker(project_directory: Path) -> None:
    """Raise unless ``.yarnrc.yml`` selects the ``node-modules`` linker."""
    try:
        yarnrc = read_yarnrc(project_directory / YARNRC)
    except ManifestParseError as exc:
        raise UnsupportedConfigurationError(
            "yarn",
            f"could not determine if yarn is using `nodeLinker: node-modules`: {exc}",
        ) from exc

    if not yarnrc.uses_node_modules:
        raise UnsupportedConfigurationError(
            "yarn",
            "only yarn v2/v3 with `nodeLinker: node-modules` is supported at this time",
        )


def _workspace_globs(root: Path) -> list[str]:
    return package_json_workspace_globs(root, "Yarn")


def _workspace_ignores(pm: PackageManager, root: Path) -> list[str]:
    # Same defaults as berry's own Workspace globbing.
    return [
        "**/node_modules",
        "**/.git",
        "**/.yarn",
    ]


def _can_prune(project_directory: Path) -> bool:
    check_node_modules_linker(project_directory)
    return True


def _matches(manager: str, version: str) -> bool:
    if manager != "yarn":
        return False
    return version_satisfies("yarn", version, minimum=BERRY_MIN_VERSION)


def _detect(project_directory: Path, pm: PackageManager) -> bool:
    if not specfile_and_lockfile_exist(project_directory, pm):
        return False

    version = process.get_command_version(pm.command, project_directory)
    try:
        is_berry = pm.matches(pm.slug, version)
    except VersionParseError:
        is_berry = False
    if not is_berry:
        log.debug("yarn %s is not berry", version)
        return False

    # Definitely berry from here on; an unsupported setup is an error.
    check_node_modules_linker(project_directory)
    return True


BERRY = PackageManager(
    name="nodejs-berry",
    slug="yarn",
    command="yarn",
    lockfile="yarn.lock",
    workspace_globs_fn=_workspace_globs,
    workspace_ignores_fn=_workspace_ignores,
    matches_fn=_matches,
    detect_fn=_detect,
    can_prune_fn=_can_prune,
    prune_patches_fn=prune_resolution_patches,
)
