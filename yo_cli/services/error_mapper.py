"""Centralized exception mapping for consistent user-facing errors."""

import errno
from dataclasses import dataclass
from typing import Any

import httpx

from .package_reader import DescriptorLookupError

# sysexits.h
EX_SOFTWARE = 70
EX_DATAERR = 65
EX_UNAVAILABLE = 69
EX_CANTCREAT = 73


@dataclass(frozen=True)
class ErrorMapping:
    """Normalized user-facing error payload for the CLI shell."""

    code: str
    message: str
    exit_code: int
    hint: str = ""
    retryable: bool = False


def map_exception(error: Any) -> ErrorMapping:
    """Map raw exceptions into stable user-facing error semantics."""
    # Local import: navigation depends on the services package.
    from ..tui.navigation import RouteNotFoundError

    if isinstance(error, RouteNotFoundError):
        return ErrorMapping(
            code="route_not_found",
            message=f"There is no screen named '{error.route_name}'.",
            exit_code=EX_SOFTWARE,
            hint="Register a handler for this route before navigating to it.",
        )

    if isinstance(error, DescriptorLookupError):
        return ErrorMapping(
            code="descriptor_unreadable",
            message=f"Could not read generator package descriptor at {error.path}.",
            exit_code=EX_DATAERR,
            hint="Reinstall the generator or fix its package.json.",
        )

    if isinstance(error, httpx.HTTPError):
        return ErrorMapping(
            code="update_check_unavailable",
            message="Could not reach the package registry to check for updates.",
            exit_code=EX_UNAVAILABLE,
            hint="Check your network connection or set NO_UPDATE_NOTIFIER=1.",
            retryable=True,
        )

    if isinstance(error, PermissionError) or (
        isinstance(error, OSError) and error.errno in (errno.EACCES, errno.EROFS)
    ):
        return ErrorMapping(
            code="config_store_unwritable",
            message="Settings could not be saved.",
            exit_code=EX_CANTCREAT,
            hint="Check permissions on the configuration directory (CONFIGSTORE_DIRECTORY).",
        )

    return ErrorMapping(
        code="internal_error",
        message=str(error) or "Unexpected error",
        exit_code=1,
    )
