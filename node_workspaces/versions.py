"""Parsing of ``packageManager`` declarations and version ranges.

A declaration looks like ``pnpm@8.6.0`` (optionally with a
pre-release label and trailing data such as a ``+sha...`` hash).
Ranges are evaluated with :mod:`semantic_version` so pre-release
ordering follows SemVer 2.0 precedence.
"""

from __future__ import annotations

import re

import semantic_version

from .exceptions import PackageManagerParseError, VersionParseError

PACKAGE_MANAGER_PATTERN = r"(npm|pnpm|yarn)@(\d+)\.\d+\.\d+(-.+)?"
_PACKAGE_MANAGER_RE = re.compile(PACKAGE_MANAGER_PATTERN)


def parse_package_manager_string(value: str) -> tuple[str, str]:
    """Split a ``packageManager`` declaration into ``(manager, version)``.

    Only the first match inside *value* is used.  Tags such as
    ``latest`` and versions with fewer than three components are
    rejected.
    """
    match = _PACKAGE_MANAGER_RE.search(value)
    if match is None:
        raise PackageManagerParseError(value, PACKAGE_MANAGER_PATTERN)

    manager, version = match.group(0).split("@")[:2]
    return manager, version


def parse_version(manager: str, version: str) -> semantic_version.Version:
    """Parse *version* reported by or declared for *manager*."""
    try:
        return semantic_version.Version(version.strip())
    except ValueError as exc:
        raise VersionParseError(manager, version) from exc


def version_satisfies(
    manager: str,
    version: str,
    minimum: str | None = None,
    below: str | None = None,
) -> bool:
    """Return True if ``minimum <= version < below``.

    Either bound may be omitted.  Bounds written with a ``-0``
    pre-release (e.g. ``2.0.0-0``) sort before every other pre-release
    of that version, which is how pre-releases are pulled into or kept
    out of a range.
    """
    parsed = parse_version(manager, version)
    if minimum is not None and parsed < semantic_version.Version(minimum):
        return False
    if below is not None and parsed >= semantic_version.Version(below):
        return False
    return True
