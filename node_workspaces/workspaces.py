"""Workspace resolution: expand workspace globs into member manifests.

Resolution happens in two passes that mirror how the package managers
themselves behave:

1. every workspace glob, suffixed with ``package.json``, is expanded
   against the project root and all matches are collected in order;
2. every collected path that matches one of the package manager's
   ignore globs is removed.

Ignore globs use "doublestar" semantics: ``**`` matches zero or more
whole path segments, while ``*``, ``?`` and ``[...]`` never cross a
``/``.  A pattern must match the entire root-relative path.
"""

from __future__ import annotations

import logging
import os
import posixpath
from fnmatch import fnmatchcase
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from .exceptions import WorkspaceGlobError

if TYPE_CHECKING:
    from .managers.base import PackageManager

log = logging.getLogger(__name__)


def normalize_glob(pattern: str) -> str:
    """Strip leading ``./`` segments and redundant separators."""
    pattern = pattern.replace("\\", "/")
    while pattern.startswith("./"):
        pattern = pattern[2:]
    return posixpath.normpath(pattern) if pattern else pattern


def _match_segments(pattern: list[str], parts: list[str]) -> bool:
    if not pattern:
        return not parts
    head, rest = pattern[0], pattern[1:]
    if head == "**":
        # Zero segments, or consume one and try again
        return _match_segments(rest, parts) or (
            bool(parts) and _match_segments(pattern, parts[1:])
        )
    if not parts:
        return False
    return fnmatchcase(parts[0], head) and _match_segments(rest, parts[1:])


def match_path(path: str | Path, pattern: str) -> bool:
    """Return True if the relative *path* matches the doublestar *pattern*."""
    path_str = path.as_posix() if isinstance(path, Path) else path
    parts = [p for p in path_str.split("/") if p and p != "."]
    segments = [s for s in normalize_glob(pattern).split("/") if s and s != "."]
    return _match_segments(segments, parts)


def is_ignored(path: str | Path, ignores: list[str]) -> bool:
    """Return True if *path* or one of its parent directories matches an ignore.

    An ignore naming a directory (``packages/skip``, ``**/node_modules``)
    excludes everything below it.
    """
    candidate = PurePosixPath(path.as_posix() if isinstance(path, Path) else path)
    for current in (candidate, *candidate.parents):
        if str(current) == ".":
            break
        if any(match_path(str(current), ignore) for ignore in ignores):
            return True
    return False


def glob_files(root: str | Path, patterns: list[str]) -> list[Path]:
    """Expand *patterns* under *root*, returning root-relative paths.

    Matches of each pattern are sorted; patterns are expanded in the
    order given and duplicates are kept.
    """
    root = Path(root)
    found: list[Path] = []
    for pattern in patterns:
        normalized = normalize_glob(pattern)
        if (
            not normalized
            or os.path.isabs(normalized)
            or normalized == ".."
            or normalized.startswith("../")
        ):
            raise WorkspaceGlobError(pattern, "must be relative to the project root")
        try:
            matches = sorted(
                p.relative_to(root) for p in root.glob(normalized) if p.is_file()
            )
        except (ValueError, NotImplementedError) as exc:
            raise WorkspaceGlobError(pattern, str(exc)) from exc
        log.debug("Glob %r matched %d file(s)", pattern, len(matches))
        found.extend(matches)
    return found


def get_workspaces(
    pm: PackageManager,
    root: str | Path,
    relative: bool = False,
) -> list[Path]:
    """Return the ``package.json`` paths of every workspace under *root*.

    Paths are root-relative when *relative* is true, absolute otherwise.
    """
    root = Path(os.path.abspath(root))
    globs = pm.get_workspace_globs(root)
    manifests = [normalize_glob(posixpath.join(g, pm.specfile)) for g in globs]

    ignores = pm.get_workspace_ignores(root)

    found = glob_files(root, manifests)
    kept = [path for path in found if not is_ignored(path, ignores)]
    if len(kept) != len(found):
        log.debug("Ignored %d workspace manifest(s)", len(found) - len(kept))

    if relative:
        return kept
    return [root / path for path in kept]
