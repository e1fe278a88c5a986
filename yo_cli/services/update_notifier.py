"""Published-version lookup for installed generator packages."""

import os
import re
import threading
import time
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import quote

import httpx
import structlog
from pydantic import BaseModel

from ..config.settings import settings
from .config_store import ConfigStore

logger = structlog.get_logger(__name__)

_VERSION_PATTERN = re.compile(r"^v?(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:-([0-9A-Za-z.-]+))?")


class UpdateInfo(BaseModel):
    """Installed vs. published version of one package."""

    name: str
    current: str
    latest: str
    type: str = "latest"


def diff_type(current: str, latest: str) -> str:
    """Classify the version change between ``current`` and ``latest``."""
    if current == latest:
        return "latest"
    old = _VERSION_PATTERN.match(current.strip())
    new = _VERSION_PATTERN.match(latest.strip())
    if not old or not new:
        return "unknown"
    for label, index in (("major", 1), ("minor", 2), ("patch", 3)):
        if (old.group(index) or "0") != (new.group(index) or "0"):
            return label
    return "prerelease"


class UpdateNotifier:
    """Compare installed package versions against the package registry.

    :meth:`check` only reads the cache kept in a :class:`ConfigStore`, so a
    catalog rebuild never waits on the network. A missing or expired cache
    entry (older than ``interval_seconds``) schedules :meth:`refresh` on a
    daemon thread; the result shows up on a later check. With
    ``background=False`` the refresh runs inline instead. Network and
    payload failures are logged and reported as "no update information".
    """

    def __init__(
        self,
        store: Optional[ConfigStore] = None,
        client: Optional[httpx.Client] = None,
        *,
        registry_url: Optional[str] = None,
        interval_seconds: Optional[int] = None,
        timeout: Optional[float] = None,
        enabled: Optional[bool] = None,
        background: Optional[bool] = None,
    ):
        config = settings.update_check
        self.registry_url = (registry_url or config.registry_url).rstrip("/")
        self.interval_seconds = (
            config.interval_seconds if interval_seconds is None else interval_seconds
        )
        self.timeout = config.timeout if timeout is None else timeout
        self.enabled = config.enabled if enabled is None else enabled
        self.background = config.background if background is None else background
        self._store = store
        self._client = client
        self._lock = threading.Lock()
        self._pending: Dict[str, threading.Thread] = {}

    @property
    def store(self) -> ConfigStore:
        if self._store is None:
            self._store = ConfigStore(f"update-notifier-{settings.app_name}")
        return self._store

    def is_disabled(self) -> bool:
        return not self.enabled or bool(os.environ.get("NO_UPDATE_NOTIFIER"))

    def check(self, package: Mapping[str, Any]) -> Optional[UpdateInfo]:
        """Return cached update info for a descriptor, or ``None`` when unknown."""
        if self.is_disabled():
            return None
        name = package.get("name")
        current = package.get("version")
        if not name or not current:
            return None

        latest, fresh = self._cached_latest(name)
        if not fresh:
            if self.background:
                self._schedule_refresh(name)
            else:
                latest = self.refresh(name) or latest
        if latest is None:
            return None

        return UpdateInfo(
            name=name,
            current=current,
            latest=latest,
            type=diff_type(current, latest),
        )

    def refresh(self, name: str) -> Optional[str]:
        """Fetch the published version of ``name`` and cache it."""
        latest = self.fetch_latest_version(name)
        if latest is not None:
            with self._lock:
                self.store.set(
                    self._cache_key(name),
                    {"latest": latest, "lastUpdateCheck": int(time.time() * 1000)},
                )
        return latest

    def join(self, timeout: Optional[float] = None) -> None:
        """Wait for scheduled background refreshes to finish."""
        with self._lock:
            threads = list(self._pending.values())
        for thread in threads:
            thread.join(timeout)

    def _schedule_refresh(self, name: str) -> None:
        with self._lock:
            running = self._pending.get(name)
            if running is not None and running.is_alive():
                return
            thread = threading.Thread(
                target=self.refresh,
                args=(name,),
                name=f"update-check-{name}",
                daemon=True,
            )
            self._pending[name] = thread
        thread.start()

    def _cached_latest(self, name: str) -> Tuple[Optional[str], bool]:
        cached = self.store.get(self._cache_key(name))
        if not isinstance(cached, dict):
            return None, False
        checked_at = cached.get("lastUpdateCheck")
        latest = cached.get("latest")
        if not isinstance(checked_at, (int, float)) or not isinstance(latest, str):
            return None, False
        age_seconds = time.time() - checked_at / 1000
        return latest, age_seconds < self.interval_seconds

    def fetch_latest_version(self, name: str) -> Optional[str]:
        url = f"{self.registry_url}/{quote(name, safe='@')}/latest"
        try:
            if self._client is not None:
                resp = self._client.get(url)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    resp = client.get(url)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            logger.warning("update_check.failed", package=name, error=str(e))
            return None
        except ValueError as e:
            logger.warning("update_check.bad_payload", package=name, error=str(e))
            return None

        version = data.get("version") if isinstance(data, dict) else None
        if not isinstance(version, str) or not version:
            logger.warning("update_check.bad_payload", package=name, error="missing version")
            return None
        return version

    @staticmethod
    def _cache_key(name: str) -> str:
        # Dots in scoped names would split the dotted key path.
        return "packages." + name.replace(".", "%2E")
