"""Typed collaborator contracts for router dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol


@dataclass(frozen=True)
class GeneratorMeta:
    """One discovered generator: its namespace and resolved entry path."""

    namespace: str
    resolved: str


class GeneratorEnvironment(Protocol):
    """Plugin-discovery dependency enumerating installed generators."""

    def get_generators_meta(self) -> Mapping[str, Any]: ...


class SettingsStore(Protocol):
    """Key-value persistence dependency used by route handlers."""

    @property
    def all(self) -> Mapping[str, Any]: ...

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: Any, value: Any = None) -> None: ...


class UpdateChecker(Protocol):
    """Version comparison dependency used during catalog rebuilds."""

    def check(self, package: Mapping[str, Any]) -> Optional[Any]: ...
