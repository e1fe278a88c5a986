"""Structured router event logging."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict

import structlog

from ..config.settings import settings

LOG_FILE_NAME = "router-events.log"
MAX_LOG_BYTES = 5 * 1024 * 1024
BACKUP_LOG_FILES = 5
_LOGGER_NAME = "yo_cli.events"


def _resolve_log_path() -> Path:
    configured_path = settings.logging.file_path
    if configured_path:
        return Path(configured_path).expanduser()
    state_home = os.environ.get("XDG_STATE_HOME")
    base = Path(state_home) if state_home else Path.home() / ".local" / "state"
    return base / settings.app_name / LOG_FILE_NAME


def _configure_rotating_handler() -> logging.Logger:
    # Children such as "yo_cli.events.route" propagate into this handler.
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    log_path = _resolve_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=BACKUP_LOG_FILES,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, settings.logging.level, logging.INFO))
    logger.propagate = False
    return logger


def _renderer():
    if settings.logging.format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


_configure_rotating_handler()
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        _renderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)
_event_loggers: Dict[str, Any] = {}


def _event_logger(event: str):
    component = event.split(".", 1)[0] or "misc"
    if component not in _event_loggers:
        _event_loggers[component] = structlog.get_logger(f"{_LOGGER_NAME}.{component}")
    return _event_loggers[component]


def log_router_event(event: str, **payload: Any) -> None:
    """Emit a structured event on the ``yo_cli.events.<component>`` logger.

    ``route.navigate`` goes to ``yo_cli.events.route``, ``catalog.rebuilt``
    to ``yo_cli.events.catalog``.
    """
    _event_logger(event).info(event, **payload)
