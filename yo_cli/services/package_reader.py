"""Locate and load the package descriptor nearest to a directory."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

PACKAGE_DESCRIPTOR = "package.json"


class DescriptorLookupError(Exception):
    """Raised when a package descriptor exists but cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Unreadable package descriptor {path}: {reason}")


@dataclass(frozen=True)
class PackageLookup:
    """A loaded descriptor and the file it came from."""

    package: Dict[str, Any]
    path: Path

    @property
    def name(self) -> Optional[str]:
        return self.package.get("name") or None


def find_package_up(
    cwd: Union[str, Path], *, stop_at: Optional[Union[str, Path]] = None
) -> Optional[Path]:
    """Return the first descriptor found in ``cwd`` or any parent.

    The search ends after ``stop_at`` when given, else at the filesystem root.
    """
    start = Path(cwd).expanduser().resolve()
    stop = Path(stop_at).expanduser().resolve() if stop_at is not None else None
    for directory in (start, *start.parents):
        candidate = directory / PACKAGE_DESCRIPTOR
        if candidate.is_file():
            return candidate
        if directory == stop:
            break
    return None


def read_package_up(
    cwd: Union[str, Path], *, stop_at: Optional[Union[str, Path]] = None
) -> Optional[PackageLookup]:
    """Load the nearest descriptor above ``cwd``.

    Returns ``None`` when no descriptor exists anywhere up the tree. A
    descriptor that is found but cannot be read or is not valid JSON raises
    :class:`DescriptorLookupError`. Valid JSON that is not an object loads as
    an empty descriptor; ``name`` and ``version`` are normalized to strings
    (``name`` is ``""`` when absent).
    """
    path = find_package_up(cwd, stop_at=stop_at)
    if path is None:
        return None

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise DescriptorLookupError(path, str(e)) from e
    except json.JSONDecodeError as e:
        raise DescriptorLookupError(path, f"invalid JSON ({e.msg})") from e

    if not isinstance(payload, dict):
        payload = {}
    name = payload.get("name")
    payload["name"] = name.strip() if isinstance(name, str) else ""
    version = payload.get("version")
    payload["version"] = str(version).strip() if version is not None else ""
    return PackageLookup(package=payload, path=path)
