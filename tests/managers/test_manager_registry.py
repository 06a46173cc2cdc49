"""Tests for the package manager registry and explicit lookup."""

from __future__ import annotations

import json

import pytest

from node_workspaces.exceptions import (
    PackageManagerNotFoundError,
    PackageManagerParseError,
)
from node_workspaces.managers import (
    PACKAGE_MANAGERS,
    get_package_manager,
    get_package_manager_by_name,
    get_package_manager_from_string,
)
from node_workspaces.models import PackageJSON


def test_registry_order():
    assert [pm.name for pm in PACKAGE_MANAGERS] == [
        "nodejs-yarn",
        "nodejs-berry",
        "nodejs-npm",
        "nodejs-pnpm",
        "nodejs-pnpm6",
    ]


def test_names_are_unique():
    names = [pm.name for pm in PACKAGE_MANAGERS]
    assert len(names) == len(set(names))


@pytest.mark.parametrize(
    "declaration, expected",
    [
        ("npm@1.2.3", "nodejs-npm"),
        ("pnpm@1.2.3", "nodejs-pnpm6"),
        ("pnpm@6.35.1", "nodejs-pnpm6"),
        ("pnpm@7.0.0", "nodejs-pnpm"),
        ("pnpm@7.8.9", "nodejs-pnpm"),
        ("yarn@1.2.3", "nodejs-yarn"),
        ("yarn@1.22.19", "nodejs-yarn"),
        ("yarn@2.0.0-rc.1", "nodejs-berry"),
        ("yarn@2.3.4", "nodejs-berry"),
        ("yarn@3.2.1+sha224.953c8233f7a92884eee2de69a1b92d1f2ec1655e", "nodejs-berry"),
    ],
)
def test_get_package_manager_from_string(declaration, expected):
    assert get_package_manager_from_string(declaration).name == expected


@pytest.mark.parametrize(
    "version",
    [
        "0.0.1",
        "1.22.19",
        "2.0.0-0",
        "2.0.0-rc.1",
        "2.0.0",
        "6.35.1",
        "7.0.0-rc.1",
        "7.0.0",
        "7.0.1",
        "8.6.0",
    ],
)
@pytest.mark.parametrize("slug", ["npm", "pnpm", "yarn"])
def test_at_most_one_variant_matches(slug, version):
    matching = [pm.name for pm in PACKAGE_MANAGERS if pm.matches(slug, version)]
    assert len(matching) == 1


def test_pnpm_ranges_split_at_seven():
    pnpm = get_package_manager_by_name("nodejs-pnpm")
    pnpm6 = get_package_manager_by_name("nodejs-pnpm6")
    assert pnpm.matches("pnpm", "7.0.0")
    assert not pnpm6.matches("pnpm", "7.0.0")
    assert pnpm6.matches("pnpm", "6.99.99")
    assert not pnpm.matches("pnpm", "6.99.99")


def test_matches_other_slug():
    for pm in PACKAGE_MANAGERS:
        assert not pm.matches("bun", "1.0.0")


def test_get_package_manager_from_string_empty():
    with pytest.raises(PackageManagerNotFoundError, match="No package manager"):
        get_package_manager_from_string("")


def test_get_package_manager_from_string_unparseable():
    with pytest.raises(PackageManagerParseError):
        get_package_manager_from_string("npm@latest")


def test_get_package_manager_from_string_bad_version():
    # Parses, but no variant can read the version.
    with pytest.raises(PackageManagerNotFoundError, match="matching"):
        get_package_manager_from_string("yarn@1.2.3-!!")


def test_get_package_manager_by_name_unknown():
    with pytest.raises(PackageManagerNotFoundError, match="nodejs-bun"):
        get_package_manager_by_name("nodejs-bun")


@pytest.mark.parametrize(
    "declaration, expected",
    [
        ("npm@1.2.3", "nodejs-npm"),
        ("pnpm@1.2.3", "nodejs-pnpm6"),
        ("pnpm@7.8.9", "nodejs-pnpm"),
        ("yarn@1.2.3", "nodejs-yarn"),
        ("yarn@2.3.4", "nodejs-berry"),
    ],
)
def test_get_package_manager_uses_declaration(tmp_path, declaration, expected):
    pkg = PackageJSON(package_manager=declaration)
    assert get_package_manager(tmp_path, pkg).name == expected


def test_get_package_manager_reads_root_manifest(tmp_path):
    (tmp_path / "package.json").write_text(
        json.dumps({"packageManager": "pnpm@8.6.0"}), encoding="utf-8"
    )
    assert get_package_manager(tmp_path).name == "nodejs-pnpm"


def test_get_package_manager_falls_back_to_detection(tmp_path):
    (tmp_path / "package.json").write_text(
        json.dumps({"packageManager": "npm@latest"}), encoding="utf-8"
    )
    (tmp_path / "package-lock.json").write_text("{}", encoding="utf-8")
    assert get_package_manager(tmp_path).name == "nodejs-npm"


def test_get_package_manager_nothing_found(tmp_path):
    with pytest.raises(PackageManagerNotFoundError, match="did not detect"):
        get_package_manager(tmp_path)
