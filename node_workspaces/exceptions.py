"""Exception hierarchy for node-workspaces."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class NodeWorkspacesError(Exception):
    """Base exception for all node-workspaces errors."""


class PackageManagerParseError(NodeWorkspacesError):
    """The ``packageManager`` declaration could not be parsed."""

    def __init__(self, value: str, pattern: str) -> None:
        self.value = value
        self.pattern = pattern
        super().__init__(
            "Could not parse packageManager field in package.json, "
            f"expected: {pattern}, received: {value}"
        )


class VersionParseError(NodeWorkspacesError):
    """A package manager version is not a valid semantic version."""

    def __init__(self, manager: str, version: str) -> None:
        self.manager = manager
        self.version = version
        super().__init__(f"Could not parse {manager} version '{version}'.")


class PackageManagerNotFoundError(NodeWorkspacesError):
    """No package manager matched the declaration or the project state."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class UnsupportedConfigurationError(NodeWorkspacesError):
    """A package manager was identified but is configured in an unsupported way."""

    def __init__(self, manager: str, reason: str) -> None:
        self.manager = manager
        self.reason = reason
        super().__init__(f"Unsupported {manager} configuration: {reason}")


class PatchStructureError(NodeWorkspacesError):
    """A patch declaration section of package.json has an unexpected shape."""

    def __init__(self, section: str, reason: str) -> None:
        self.section = section
        self.reason = reason
        super().__init__(f"Invalid structure for {section} in package.json: {reason}")


class ManifestParseError(NodeWorkspacesError):
    """A manifest or configuration file could not be read or decoded."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read '{path}': {reason}")


class ManifestNotFoundError(ManifestParseError):
    """A manifest or configuration file does not exist."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, "no such file")


class WorkspacesNotDefinedError(NodeWorkspacesError):
    """A monorepo package manager found no workspace globs."""

    def __init__(self, path: str | Path, manager: str, location: str) -> None:
        self.path = path
        self.manager = manager
        self.location = location
        super().__init__(
            f"{path}: no workspaces found. node-workspaces requires {manager} "
            f"workspaces to be defined in the root {location}."
        )


class WorkspaceGlobError(NodeWorkspacesError):
    """A workspace glob could not be evaluated against the filesystem."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid workspace glob '{pattern}': {reason}")


class PackageManagerCommandError(NodeWorkspacesError):
    """Running a package manager executable failed."""

    def __init__(self, command: list[str], reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"Could not run '{' '.join(command)}': {reason}")


class LockfileUnsupportedError(NodeWorkspacesError):
    """Reading lockfiles is not supported for this package manager."""

    def __init__(self, manager: str, lockfile: str) -> None:
        self.manager = manager
        self.lockfile = lockfile
        super().__init__(
            f"Reading {lockfile} is not supported for {manager} at this time."
        )
