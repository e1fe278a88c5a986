"""Catalog of top-level generators enriched with package metadata."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import structlog
from pydantic import BaseModel, ConfigDict

from ..tui.contracts import UpdateChecker
from ..tui.logging import log_router_event
from ..tui.utils import pretty_name
from .package_reader import PackageLookup, read_package_up
from .update_notifier import UpdateInfo, UpdateNotifier

logger = structlog.get_logger(__name__)

APP_NAMESPACE_PATTERN = re.compile(r":(app|all)$")

PackageReader = Callable[[Path], Optional[PackageLookup]]


class GeneratorRecord(BaseModel):
    """Package descriptor of an app generator plus display/update fields.

    Descriptor fields beyond the declared ones (``description``,
    ``keywords``, ...) are kept as extras.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    version: str = ""
    namespace: str
    app_generator: bool = True
    pretty_name: str
    update: Optional[UpdateInfo] = None
    update_available: bool = False


def _meta_field(meta: Any, key: str) -> Any:
    if isinstance(meta, Mapping):
        return meta.get(key)
    return getattr(meta, key, None)


def is_app_namespace(namespace: str) -> bool:
    return bool(APP_NAMESPACE_PATTERN.search(namespace))


class GeneratorCatalog:
    """Derives package name -> :class:`GeneratorRecord` from discovery metadata."""

    def __init__(
        self,
        update_checker: Optional[UpdateChecker] = None,
        *,
        read_package: PackageReader = read_package_up,
    ):
        self.update_checker = update_checker if update_checker is not None else UpdateNotifier()
        self.read_package = read_package
        self.generators: Dict[str, GeneratorRecord] = {}

    def rebuild(self, generators_meta: Mapping[str, Any]) -> Dict[str, GeneratorRecord]:
        """Replace the catalog with records for every app generator in the snapshot.

        Records are collected into a fresh mapping and only published once
        every entry has been processed; an exception leaves the previous
        catalog in place.
        """
        rebuilt: Dict[str, GeneratorRecord] = {}
        for meta in generators_meta.values():
            record = self.resolve(meta)
            if record is None:
                continue
            previous = rebuilt.get(record.name)
            if previous is not None:
                logger.warning(
                    "catalog.duplicate_package",
                    package=record.name,
                    replaced=previous.namespace,
                    namespace=record.namespace,
                )
            rebuilt[record.name] = record

        self.generators = rebuilt
        log_router_event(
            "catalog.rebuilt",
            discovered=len(generators_meta),
            generators=len(rebuilt),
            updates=sum(1 for record in rebuilt.values() if record.update_available),
        )
        return rebuilt

    def resolve(self, meta: Any) -> Optional[GeneratorRecord]:
        """Build the record for one discovered generator, or ``None`` to skip it."""
        namespace = _meta_field(meta, "namespace")
        if not isinstance(namespace, str) or not is_app_namespace(namespace):
            return None

        resolved = _meta_field(meta, "resolved")
        if not isinstance(resolved, (str, Path)) or not str(resolved).strip():
            logger.warning("catalog.unresolved_generator", namespace=namespace)
            return None

        lookup = self.read_package(Path(resolved).parent)
        if lookup is None:
            return None
        if not lookup.name:
            logger.warning(
                "catalog.descriptor_unnamed", namespace=namespace, path=str(lookup.path)
            )
            return None

        package = {
            key: value for key, value in lookup.package.items() if not key.startswith("_")
        }
        update = self.update_checker.check(package)
        package.update(
            namespace=namespace,
            app_generator=True,
            pretty_name=pretty_name(namespace),
            update=update,
            update_available=bool(update and package.get("version") != update.latest),
        )
        return GeneratorRecord.model_validate(package)
