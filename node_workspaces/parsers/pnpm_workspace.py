"""Parser for ``pnpm-workspace.yaml``.

Only the ``packages`` sequence is read.  Entries prefixed with ``!``
are exclusion globs and are kept in place; see
:class:`~node_workspaces.models.PnpmWorkspace`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import yaml

from ..exceptions import ManifestNotFoundError, ManifestParseError
from ..models import PnpmWorkspace
from .base import ManifestParser

if TYPE_CHECKING:
    from pathlib import Path


class PnpmWorkspaceParser(ManifestParser):
    """Parse ``pnpm-workspace.yaml`` files."""

    filenames = ("pnpm-workspace.yaml",)

    def workspace_globs(self, path: Path) -> list[str]:
        return self.parse(path).includes

    def parse(self, path: Path) -> PnpmWorkspace:
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ManifestNotFoundError(path) from exc
        except OSError as exc:
            raise ManifestParseError(path, str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise ManifestParseError(path, f"not valid UTF-8: {exc}") from exc

        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ManifestParseError(path, str(exc)) from exc

        if not isinstance(data, dict):
            raise ManifestParseError(path, "top-level value must be a mapping")

        packages = data.get("packages") or []
        if not isinstance(packages, list) or not all(
            isinstance(p, str) for p in packages
        ):
            raise ManifestParseError(path, "'packages' must be a list of strings")

        return PnpmWorkspace(packages=list(packages), path=str(path))
