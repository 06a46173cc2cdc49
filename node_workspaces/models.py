"""Data models for Node.js project files.

These dataclasses represent the decoded ``package.json``,
``pnpm-workspace.yaml`` and ``.yarnrc.yml`` files.  Parsers convert
the raw JSON/YAML documents into these models; the package manager
descriptors only work with these types.
"""

from __future__ import annotations

import copy
import threading
from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass
class PackageJSON:
    """A decoded ``package.json``.

    *workspaces* is normalised to a list of globs regardless of whether
    the manifest uses the array form or classic Yarn's object form
    (``{"packages": [...], "nohoist": [...]}``).

    *resolutions* and *pnpm* keep their raw decoded values: patch
    pruning mutates them in place and validates their shape itself.
    *lock* serialises such mutations.
    """

    name: str | None = None
    version: str | None = None
    package_manager: str = ""
    workspaces: list[str] = field(default_factory=list)
    resolutions: Any = None
    pnpm: Any = None

    # The whole decoded document, including keys not modelled above
    raw: dict[str, Any] = field(default_factory=dict)

    # Path to the file that was parsed (empty for in-memory manifests)
    path: str = ""

    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def to_dict(self) -> dict[str, Any]:
        """Return the manifest as a JSON-serialisable dict.

        The modelled patch sections are written back over the raw
        document so pruning results are reflected.
        """
        with self.lock:
            data = copy.deepcopy(self.raw)
            if self.resolutions is not None:
                data["resolutions"] = copy.deepcopy(self.resolutions)
            if self.pnpm is not None:
                data["pnpm"] = copy.deepcopy(self.pnpm)
        return data


@dataclass
class PnpmWorkspace:
    """A decoded ``pnpm-workspace.yaml``.

    Entries starting with ``!`` are exclusions.  :attr:`includes` and
    :attr:`excludes` split them into inclusion and exclusion globs.
    """

    packages: list[str] = field(default_factory=list)
    path: str = ""

    @property
    def includes(self) -> list[str]:
        return [glob for glob in self.packages if not glob.startswith("!")]

    @property
    def excludes(self) -> list[str]:
        return [glob[1:] for glob in self.packages if glob.startswith("!")]


@dataclass(frozen=True)
class YarnRC:
    """The subset of ``.yarnrc.yml`` needed to judge berry support."""

    NODE_MODULES_LINKER: ClassVar[str] = "node-modules"

    node_linker: str | None = None

    @property
    def uses_node_modules(self) -> bool:
        return self.node_linker == self.NODE_MODULES_LINKER
