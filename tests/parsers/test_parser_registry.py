"""Tests for the parser registry in node_workspaces.parsers."""

from __future__ import annotations

from pathlib import Path

import pytest

from node_workspaces.exceptions import ManifestParseError
from node_workspaces.parsers import find_parser, find_up
from node_workspaces.parsers.package_json import PackageJsonParser
from node_workspaces.parsers.pnpm_workspace import PnpmWorkspaceParser
from node_workspaces.parsers.yarnrc import YarnRcParser


@pytest.mark.parametrize(
    "filename, parser_type",
    [
        ("package.json", PackageJsonParser),
        ("pnpm-workspace.yaml", PnpmWorkspaceParser),
        (".yarnrc.yml", YarnRcParser),
    ],
    ids=["package-json", "pnpm-workspace", "yarnrc"],
)
def test_find_parser(filename, parser_type):
    parser = find_parser(Path("some/dir") / filename)
    assert isinstance(parser, parser_type)


def test_find_parser_unknown():
    with pytest.raises(ManifestParseError, match="No parser"):
        find_parser(Path("yarn.lock"))


def test_find_up_current_dir(make_tree):
    root = make_tree({"turbo.json": "{}"})
    assert find_up("turbo.json", root) == root / "turbo.json"


def test_find_up_walks_up(make_tree):
    root = make_tree({"turbo.json": "{}", "a/b/c/.keep": ""})
    assert find_up("turbo.json", root / "a" / "b" / "c") == root / "turbo.json"


def test_find_up_prefers_nearest(make_tree):
    root = make_tree({"package.json": "{}", "a/package.json": "{}", "a/b/.keep": ""})
    assert find_up("package.json", root / "a" / "b") == root / "a" / "package.json"


def test_find_up_ignores_directories(make_tree):
    root = make_tree({"a/turbo.json/.keep": ""})
    assert find_up("turbo.json", root / "a") != root / "a" / "turbo.json"


def test_find_up_not_found(tmp_path):
    assert find_up("no-such-marker-file.json", tmp_path) is None


@pytest.mark.parametrize(
    "filename", ["package.json", "pnpm-workspace.yaml", ".yarnrc.yml"]
)
def test_invalid_utf8_is_a_parse_error(tmp_path, filename):
    path = tmp_path / filename
    path.write_bytes(b'{"name": "\xff"}')
    parser = find_parser(path)
    with pytest.raises(ManifestParseError, match="not valid UTF-8"):
        parser.parse(path)
    assert not parser.has_workspace(path)


@pytest.mark.parametrize(
    "filename, content, expected",
    [
        ("package.json", '{"workspaces": ["apps/*"]}', ["apps/*"]),
        ("pnpm-workspace.yaml", "packages:\n  - a/*\n  - '!a/x'\n", ["a/*"]),
        (".yarnrc.yml", "nodeLinker: node-modules\n", []),
    ],
    ids=["package-json", "pnpm-workspace", "yarnrc"],
)
def test_workspace_globs(tmp_path, filename, content, expected):
    path = tmp_path / filename
    path.write_text(content, encoding="utf-8")
    parser = find_parser(path)
    assert parser.workspace_globs(path) == expected
    assert parser.has_workspace(path) is bool(expected)
