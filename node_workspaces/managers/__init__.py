"""Package manager registry and detection.

Registry order
--------------
1. ``nodejs-yarn``   – classic Yarn (< 2.0.0)
2. ``nodejs-berry``  – Yarn berry (>= 2.0.0, pre-releases included)
3. ``nodejs-npm``    – npm
4. ``nodejs-pnpm``   – pnpm >= 7.0.0
5. ``nodejs-pnpm6``  – pnpm < 7.0.0

The order is significant.  Probing tries classic Yarn before berry and
relies on each Yarn probe rejecting the other's versions; the explicit
``packageManager`` lookup takes the first variant whose version range
accepts the declaration.

A probe has three outcomes: it matches (stop, this is the manager), it
does not match (try the next one), or it raises (stop, and propagate
the error).  The last case is how a project that clearly uses a
manager in an unsupported way is reported instead of being attributed
to another manager.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..exceptions import (
    ManifestNotFoundError,
    NodeWorkspacesError,
    PackageManagerNotFoundError,
    VersionParseError,
)
from ..parsers import read_package_json
from ..versions import parse_package_manager_string
from .base import PackageManager
from .berry import BERRY
from .npm import NPM
from .pnpm import PNPM, PNPM6
from .yarn import YARN

if TYPE_CHECKING:
    from ..models import PackageJSON

__all__ = [
    "PACKAGE_MANAGERS",
    "PackageManager",
    "detect_package_manager",
    "get_package_manager",
    "get_package_manager_by_name",
    "get_package_manager_from_string",
]

log = logging.getLogger(__name__)

PACKAGE_MANAGERS: tuple[PackageManager, ...] = (
    YARN,
    BERRY,
    NPM,
    PNPM,
    PNPM6,
)


def get_package_manager_by_name(name: str) -> PackageManager:
    """Return the registered variant called *name* (e.g. ``nodejs-pnpm``)."""
    for pm in PACKAGE_MANAGERS:
        if pm.name == name:
            return pm
    names = ", ".join(pm.name for pm in PACKAGE_MANAGERS)
    raise PackageManagerNotFoundError(
        f"Unknown package manager '{name}'. Known package managers: {names}"
    )


def get_package_manager_from_string(value: str) -> PackageManager:
    """Resolve a ``packageManager`` declaration such as ``pnpm@8.6.0``.

    Returns the first registered variant whose version range accepts
    the declaration.
    """
    if not value:
        raise PackageManagerNotFoundError("No package manager specified.")

    manager, version = parse_package_manager_string(value)
    for pm in PACKAGE_MANAGERS:
        try:
            if pm.matches(manager, version):
                return pm
        except VersionParseError as exc:
            log.debug("%s rejected %s: %s", pm.name, value, exc)
    raise PackageManagerNotFoundError(
        f"We didn't find a matching package manager for '{value}'."
    )


def detect_package_manager(project_directory: str | Path) -> PackageManager:
    """Detect the package manager by inspecting *project_directory*.

    Errors raised by a probe abort detection and are propagated as-is.
    """
    project_directory = Path(project_directory)
    for pm in PACKAGE_MANAGERS:
        log.debug("Probing %s in %s", pm.name, project_directory)
        if pm.detect(project_directory):
            log.debug("Detected %s", pm.name)
            return pm

    raise PackageManagerNotFoundError(
        "We did not detect an in-use package manager for your project. "
        'Please set the "packageManager" property in your root package.json '
        "(https://nodejs.org/api/packages.html#packagemanager)."
    )


def get_package_manager(
    project_directory: str | Path,
    pkg: PackageJSON | None = None,
) -> PackageManager:
    """Identify the package manager of *project_directory*.

    The ``packageManager`` field of *pkg* (read from the project's
    ``package.json`` when not given) is tried first; if it is missing,
    unparseable or unmatched, the project directory is probed.
    """
    project_directory = Path(project_directory)
    if pkg is None:
        try:
            pkg = read_package_json(project_directory / "package.json")
        except ManifestNotFoundError:
            pkg = None

    if pkg is not None and pkg.package_manager:
        try:
            return get_package_manager_from_string(pkg.package_manager)
        except NodeWorkspacesError as exc:
            log.debug("Falling back to detection: %s", exc)

    return detect_package_manager(project_directory)
