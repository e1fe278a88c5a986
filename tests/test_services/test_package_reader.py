"""Tests for nearest package descriptor lookup."""

import json
from pathlib import Path

import pytest

from yo_cli.services.package_reader import (
    DescriptorLookupError,
    find_package_up,
    read_package_up,
)


def test_reads_descriptor_from_ancestor_directory(tmp_path: Path):
    package_dir = tmp_path / "generator-webapp"
    nested = package_dir / "generators" / "app"
    nested.mkdir(parents=True)
    (package_dir / "package.json").write_text(
        json.dumps({"name": " generator-webapp ", "version": 4}), encoding="utf-8"
    )

    lookup = read_package_up(nested)

    assert lookup.path == package_dir / "package.json"
    assert lookup.package["name"] == "generator-webapp"
    assert lookup.package["version"] == "4"


def test_nearest_descriptor_wins(tmp_path: Path):
    (tmp_path / "package.json").write_text(json.dumps({"name": "outer"}), encoding="utf-8")
    inner = tmp_path / "inner"
    inner.mkdir()
    (inner / "package.json").write_text(json.dumps({"name": "inner"}), encoding="utf-8")

    assert find_package_up(inner) == inner / "package.json"
    assert read_package_up(inner).package == {"name": "inner", "version": ""}


def test_unreadable_descriptor_raises(tmp_path: Path):
    (tmp_path / "package.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(DescriptorLookupError) as exc_info:
        read_package_up(tmp_path)

    assert exc_info.value.path == tmp_path / "package.json"
    assert "invalid JSON" in exc_info.value.reason


@pytest.mark.parametrize(
    "content",
    [json.dumps({"type": "module"}), json.dumps({"name": 3}), "[1, 2]"],
)
def test_descriptor_without_name_loads_unnamed(tmp_path: Path, content):
    (tmp_path / "package.json").write_text(content, encoding="utf-8")

    lookup = read_package_up(tmp_path)

    assert lookup.path == tmp_path / "package.json"
    assert lookup.name is None
    assert lookup.package["name"] == ""


def test_search_without_descriptor_stops_at_boundary(tmp_path: Path):
    nested = tmp_path / "project" / "generators" / "app"
    nested.mkdir(parents=True)

    assert find_package_up(nested, stop_at=tmp_path) is None
    assert read_package_up(nested, stop_at=tmp_path) is None


def test_descriptor_at_boundary_is_found(tmp_path: Path):
    nested = tmp_path / "generators" / "app"
    nested.mkdir(parents=True)
    (tmp_path / "package.json").write_text(json.dumps({"name": "root"}), encoding="utf-8")

    assert read_package_up(nested, stop_at=tmp_path).name == "root"
