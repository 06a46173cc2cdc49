"""Shared test fixtures for node-workspaces."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

WORKSPACE_PACKAGES = [
    "apps/docs",
    "apps/web",
    "packages/eslint-config-custom",
    "packages/tsconfig",
    "packages/ui",
]


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create *files* (relative path -> content) under *root*."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def _package(name: str) -> str:
    return json.dumps({"name": name, "version": "0.0.0"})


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Return a helper writing a file tree under tmp_path."""

    def _make(files: dict[str, str]) -> Path:
        return write_tree(tmp_path, files)

    return _make


@pytest.fixture
def yarn_monorepo(tmp_path: Path) -> Path:
    """A monorepo declaring ``workspaces`` in package.json."""
    files = {
        "package.json": json.dumps(
            {"name": "with-yarn", "workspaces": ["apps/*", "packages/*"]}
        ),
        "yarn.lock": "",
        # Not a workspace: only one level below packages/
        "packages/ui/node_modules/dep/package.json": _package("dep"),
    }
    for pkg in WORKSPACE_PACKAGES:
        files[f"{pkg}/package.json"] = _package(pkg.rsplit("/", 1)[-1])
    return write_tree(tmp_path, files)


@pytest.fixture
def pnpm_monorepo(tmp_path: Path) -> Path:
    """A pnpm monorepo with an excluded package."""
    files = {
        "package.json": json.dumps({"name": "basic"}),
        "pnpm-lock.yaml": "lockfileVersion: 5.4\n",
        "pnpm-workspace.yaml": (
            "packages:\n"
            "  - 'apps/*'\n"
            "  - 'packages/*'\n"
            "  - '!packages/skip'\n"
        ),
        "packages/skip/package.json": _package("skip"),
    }
    for pkg in WORKSPACE_PACKAGES:
        files[f"{pkg}/package.json"] = _package(pkg.rsplit("/", 1)[-1])
    return write_tree(tmp_path, files)


@pytest.fixture
def fake_version(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], list[tuple]]:
    """Replace the ``--version`` subprocess with a canned answer.

    Returns a setter; the list it returns records every call.
    """
    calls: list[tuple] = []

    def _set(version: str) -> list[tuple]:
        def _fake(command, cwd):
            calls.append((command, cwd))
            return version

        monkeypatch.setattr("node_workspaces.process.get_command_version", _fake)
        return calls

    return _set
