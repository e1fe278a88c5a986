"""
Pytest configuration and fixtures for yo CLI core tests.
"""

import json
import os
import tempfile
from pathlib import Path
from types import SimpleNamespace

import pytest

_SANDBOX = Path(tempfile.mkdtemp(prefix="yo-cli-tests-"))
os.environ.setdefault("LOG_FILE_PATH", str(_SANDBOX / "logs" / "router-events.log"))
os.environ.setdefault("CONFIGSTORE_DIRECTORY", str(_SANDBOX / "configstore"))
os.environ.setdefault("ENVIRONMENT", "test")
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_FORMAT"] = "json"

from yo_cli.services.config_store import ConfigStore  # noqa: E402
from yo_cli.services.update_notifier import UpdateInfo  # noqa: E402


class FakeUpdateChecker:
    """Reports a fixed latest version per package name."""

    def __init__(self, latest_versions=None):
        self.latest_versions = dict(latest_versions or {})
        self.checked = []

    def check(self, package):
        self.checked.append(package["name"])
        latest = self.latest_versions.get(package["name"])
        if latest is None:
            return None
        return UpdateInfo(name=package["name"], current=package["version"], latest=latest)


@pytest.fixture
def write_generator(tmp_path):
    """Create ``<root>/<dirname>/package.json`` and return the generator entry path."""

    def _write(dirname, package, subgenerator="app"):
        package_dir = tmp_path / "node_modules" / dirname
        entry_dir = package_dir / "generators" / subgenerator
        entry_dir.mkdir(parents=True, exist_ok=True)
        (package_dir / "package.json").write_text(json.dumps(package), encoding="utf-8")
        entry = entry_dir / "index.js"
        entry.write_text("module.exports = {};\n", encoding="utf-8")
        return str(entry)

    return _write


@pytest.fixture
def make_env():
    """Build a discovery environment whose snapshot can be swapped between calls."""

    def _make(meta=None):
        env = SimpleNamespace(meta=dict(meta or {}))
        env.get_generators_meta = lambda: env.meta
        return env

    return _make


@pytest.fixture
def update_checker():
    return FakeUpdateChecker()


@pytest.fixture
def conf_store(tmp_path):
    return ConfigStore("yo-cli-test", {"generatorRunCount": {}}, config_dir=tmp_path / "conf")
