"""Screen router for the interactive generator runner."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, Optional

from ..config.settings import settings
from ..services.config_store import ConfigStore
from ..services.generator_catalog import GeneratorCatalog, GeneratorRecord
from .contracts import GeneratorEnvironment, SettingsStore
from .logging import log_router_event

RouteHandler = Callable[["Router", Any], Awaitable[Any]]


class RouteNotFoundError(LookupError):
    """Raised when navigating to a name with no callable handler."""

    def __init__(self, route_name: str) -> None:
        self.route_name = route_name
        super().__init__(f"No routes called: {route_name}")


def default_conf_payload() -> Dict[str, Any]:
    return {"generatorRunCount": {}}


class Router:
    """Dispatches named screens to async handlers.

    Handlers receive ``(router, arg)`` and may navigate again to chain
    screens. The router also owns the generator catalog that handlers read
    through :attr:`generators` after :meth:`update_available_generators`.
    """

    def __init__(
        self,
        env: GeneratorEnvironment,
        conf: Optional[SettingsStore] = None,
        *,
        catalog: Optional[GeneratorCatalog] = None,
    ) -> None:
        self.routes: Dict[str, RouteHandler] = {}
        self.env = env
        self.conf = conf if conf is not None else ConfigStore(
            settings.app_name, default_conf_payload()
        )
        self.catalog = catalog if catalog is not None else GeneratorCatalog()
        self.generators: Dict[str, GeneratorRecord] = {}

    def register_route(self, name: str, handler: RouteHandler) -> "Router":
        self.routes[name] = handler
        log_router_event("route.registered", route=name)
        return self

    async def navigate(self, name: str, arg: Any = None) -> "Router":
        """Run the handler registered under ``name`` and return the router."""
        handler = self.routes.get(name)
        if not callable(handler):
            raise RouteNotFoundError(name)

        log_router_event("route.navigate", route=name)
        await handler(self, arg)
        return self

    def update_available_generators(self) -> None:
        """Rebuild :attr:`generators` from the environment's current snapshot."""
        self.generators = self.catalog.rebuild(self.env.get_generators_meta())
