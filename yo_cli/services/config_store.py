"""Atomic JSON key-value persistence for CLI settings."""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import structlog

from ..config.settings import settings

logger = structlog.get_logger(__name__)

_MISSING = object()


class ConfigStore:
    """Read/write a named JSON store with defaults and atomic replacement.

    Values are addressed by key; dotted keys (``"generatorRunCount.foo"``)
    reach into nested objects. Every read goes back to disk so several
    stores pointing at the same file stay consistent.
    """

    def __init__(
        self,
        name: str,
        defaults: Optional[Mapping[str, Any]] = None,
        *,
        config_dir: Optional[Union[str, Path]] = None,
    ) -> None:
        directory = config_dir if config_dir is not None else settings.config_store.directory
        self.name = name
        self.path = Path(directory).expanduser() / f"{name}.json"
        if defaults:
            merged = copy.deepcopy(dict(defaults))
            merged.update(self.all)
            self._save(merged)

    @property
    def all(self) -> Dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        if not raw.strip():
            return {}
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("config_store.corrupt", path=str(self.path), error=str(e))
            return {}
        return payload if isinstance(payload, dict) else {}

    @all.setter
    def all(self, value: Mapping[str, Any]) -> None:
        self._save(dict(value))

    @property
    def size(self) -> int:
        return len(self.all)

    def get(self, key: str, default: Any = None) -> Any:
        node: Any = self.all
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def has(self, key: str) -> bool:
        return self.get(key, _MISSING) is not _MISSING

    def set(self, key: Union[str, Mapping[str, Any]], value: Any = None) -> None:
        data = self.all
        if isinstance(key, Mapping):
            for item_key, item_value in key.items():
                _assign(data, item_key, item_value)
        else:
            _assign(data, key, value)
        self._save(data)

    def delete(self, key: str) -> None:
        data = self.all
        parts = key.split(".")
        node: Any = data
        for part in parts[:-1]:
            if not isinstance(node, dict) or part not in node:
                return
            node = node[part]
        if isinstance(node, dict) and parts[-1] in node:
            del node[parts[-1]]
            self._save(data)

    def clear(self) -> None:
        self._save({})

    def _save(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(data, indent="\t") + "\n"

        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        fd = os.open(str(temp_path), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(payload)
        os.replace(temp_path, self.path)


def _assign(data: Dict[str, Any], key: str, value: Any) -> None:
    parts = key.split(".")
    node = data
    for part in parts[:-1]:
        child = node.get(part)
        if not isinstance(child, dict):
            child = {}
            node[part] = child
        node = child
    node[parts[-1]] = value
