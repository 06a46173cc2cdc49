"""Abstract base class for project file parsers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..exceptions import ManifestParseError

if TYPE_CHECKING:
    from pathlib import Path
    from typing import Any, ClassVar


class ManifestParser(ABC):
    """Interface that every project file parser must implement.

    Subclasses declare which files they can handle via *filenames*
    (exact names).  The registry in ``parsers/__init__.py`` uses these
    to pick the right parser for a given path.
    """

    filenames: ClassVar[tuple[str, ...]] = ()

    def can_handle(self, path: Path) -> bool:
        """Return True if this parser can read *path*."""
        return path.name in self.filenames

    @abstractmethod
    def parse(self, path: Path) -> Any:
        """Parse *path* and return the matching model."""

    def workspace_globs(self, path: Path) -> list[str]:
        """Return the workspace globs declared in *path* (exclusions omitted)."""
        return []

    def has_workspace(self, path: Path) -> bool:
        """Return True if *path* declares at least one workspace glob.

        A missing or undecodable file declares nothing.
        """
        try:
            return bool(self.workspace_globs(path))
        except ManifestParseError:
            return False
