"""Parser for Yarn berry's ``.yarnrc.yml``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import yaml

from ..exceptions import ManifestNotFoundError, ManifestParseError
from ..models import YarnRC
from .base import ManifestParser

if TYPE_CHECKING:
    from pathlib import Path


class YarnRcParser(ManifestParser):
    """Parse ``.yarnrc.yml`` files."""

    filenames = (".yarnrc.yml",)

    def parse(self, path: Path) -> YarnRC:
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

        node_linker = data.get("nodeLinker")
        return YarnRC(node_linker=str(node_linker) if node_linker is not None else None)
