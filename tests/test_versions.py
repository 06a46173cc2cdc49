"""Tests for node_workspaces.versions."""

from __future__ import annotations

import pytest

from node_workspaces.exceptions import PackageManagerParseError, VersionParseError
from node_workspaces.versions import (
    parse_package_manager_string,
    parse_version,
    version_satisfies,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("npm@1.2.3-alpha.1", ("npm", "1.2.3-alpha.1")),
        ("npm@0.0.1", ("npm", "0.0.1")),
        ("pnpm@0.0.1", ("pnpm", "0.0.1")),
        ("yarn@111.0.1", ("yarn", "111.0.1")),
        ("yarn@3.2.1+sha224.953c8233f7a92884eee2de69a1b92d1f2ec1655e", ("yarn", "3.2.1")),
        ("  pnpm@8.6.0 ", ("pnpm", "8.6.0")),
    ],
    ids=["custom-label", "npm", "pnpm", "yarn", "hash-suffix", "surrounding-space"],
)
def test_parse_package_manager_string(value, expected):
    assert parse_package_manager_string(value) == expected


@pytest.mark.parametrize(
    "value",
    ["npm@latest", "npm", "npm@1", "npm@1.2", "pip@1.2.3", ""],
    ids=["tag", "no-version", "one-digit", "two-digits", "unknown-manager", "empty"],
)
def test_parse_package_manager_string_errors(value):
    with pytest.raises(PackageManagerParseError) as exc_info:
        parse_package_manager_string(value)
    assert exc_info.value.value == value


def test_parse_version_strips_whitespace():
    assert str(parse_version("yarn", "1.22.19\n")) == "1.22.19"


def test_parse_version_invalid():
    with pytest.raises(VersionParseError, match="yarn"):
        parse_version("yarn", "not-a-version")


@pytest.mark.parametrize(
    "version, minimum, below, expected",
    [
        ("2.0.0", "2.0.0-0", None, True),
        ("2.0.0-rc.1", "2.0.0-0", None, True),
        ("1.22.19", "2.0.0-0", None, False),
        ("1.22.19", None, "2.0.0-0", True),
        ("2.0.0-rc.1", None, "2.0.0-0", False),
        ("7.0.0", "7.0.0", None, True),
        ("7.0.0", None, "7.0.0", False),
        ("6.32.2", None, "7.0.0", True),
        ("1.0.0", None, None, True),
    ],
)
def test_version_satisfies(version, minimum, below, expected):
    assert version_satisfies("x", version, minimum=minimum, below=below) is expected
