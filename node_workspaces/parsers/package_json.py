"""Parser for ``package.json`` manifests.

Reads the fields the package manager layer cares about:
``name``, ``version``, ``packageManager``, ``workspaces``,
``resolutions`` and ``pnpm``.  Everything else is kept verbatim on
:attr:`PackageJSON.raw`.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..exceptions import ManifestNotFoundError, ManifestParseError
from ..models import PackageJSON
from .base import ManifestParser

if TYPE_CHECKING:
    from pathlib import Path
    from typing import Any


def _parse_workspaces(value: Any, path: str | Path) -> list[str]:
    """Normalise the ``workspaces`` field to a list of globs.

    Classic Yarn also accepts ``{"packages": [...], "nohoist": [...]}``.
    """
    if value is None:
        return []
    if isinstance(value, dict):
        value = value.get("packages") or []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ManifestParseError(
            path, "'workspaces' must be a list of strings or an object with 'packages'"
        )
    return list(value)


def package_json_from_data(data: Any, path: str | Path = "") -> PackageJSON:
    """Build a :class:`PackageJSON` from an already decoded document."""
    if not isinstance(data, dict):
        raise ManifestParseError(path, "top-level value must be an object")

    package_manager = data.get("packageManager", "")
    if not isinstance(package_manager, str):
        raise ManifestParseError(path, "'packageManager' must be a string")

    return PackageJSON(
        name=data.get("name"),
        version=data.get("version"),
        package_manager=package_manager,
        workspaces=_parse_workspaces(data.get("workspaces"), path),
        resolutions=data.get("resolutions"),
        pnpm=data.get("pnpm"),
        raw=data,
        path=str(path),
    )


class PackageJsonParser(ManifestParser):
    """Parse ``package.json`` files."""

    filenames = ("package.json",)

    def workspace_globs(self, path: Path) -> list[str]:
        return self.parse(path).workspaces

    def parse(self, path: Path) -> PackageJSON:
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ManifestNotFoundError(path) from exc
        except OSError as exc:
            raise ManifestParseError(path, str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise ManifestParseError(path, f"not valid UTF-8: {exc}") from exc

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ManifestParseError(path, str(exc)) from exc

        return package_json_from_data(data, path)
