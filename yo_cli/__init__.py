"""Screen router and generator catalog for the yo command-line tool."""

from .services.generator_catalog import GeneratorCatalog, GeneratorRecord
from .tui.navigation import RouteNotFoundError, Router

__version__ = "1.0.0"

__all__ = [
    "GeneratorCatalog",
    "GeneratorRecord",
    "RouteNotFoundError",
    "Router",
]
