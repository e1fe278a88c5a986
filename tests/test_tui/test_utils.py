"""Tests for generator display-name helpers."""

import pytest

from yo_cli.tui.utils import humanize_string, namespace_to_name, pretty_name, titleize


@pytest.mark.parametrize(
    ("namespace", "expected"),
    [
        ("angular-fullstack:app", "Angular Fullstack"),
        ("fooBar:all", "Foo Bar"),
        ("node_module:app", "Node Module"),
        ("webapp:app", "Webapp"),
    ],
)
def test_pretty_name(namespace, expected):
    assert pretty_name(namespace) == expected


def test_namespace_to_name_drops_subgenerator():
    assert namespace_to_name("angular:controller") == "angular"


def test_humanize_string_only_capitalizes_first_word():
    assert humanize_string("chrome-extension") == "Chrome extension"
    assert humanize_string("XMLParser") == "Xml parser"


def test_titleize_capitalizes_each_word():
    assert titleize("chrome extension") == "Chrome Extension"
