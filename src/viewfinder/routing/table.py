from __future__ import annotations
"""In-memory route table implementing the route collaborator contract."""

from typing import Iterable, List, Optional, Tuple

from viewfinder.core.interfaces.logging import LoggerLikeProtocol
from viewfinder.core.interfaces.routes import RouteResolverProtocol
from viewfinder.core.models import Route
from viewfinder.logging.helpers import get_logger

ROUTE_SUFFIXES: tuple[str, ...] = ('', '_path', '_url')


def controller_path_to_view_path(controller: str, action: str) -> str:
    return f'{controller}/{action}'


def match_route(route: Route, route_input: str, *, namespace: Optional[str] = None) -> bool:
    """Return True if *route_input* names *route* (bare, ``_path`` or ``_url``)."""
    if not route.path:
        return False
    if namespace and route.controller:
        if route.controller.split('/')[0] != str(namespace):
            return False
    if not route.name:
        return False
    return any(route_input == f'{route.name}{suffix}' for suffix in ROUTE_SUFFIXES)


class RouteTable(RouteResolverProtocol):
    """Ordered list of routes; the first matching entry wins."""

    def __init__(self, routes: Iterable[Route] = (), *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._routes: List[Route] = list(routes)
        self._log = logger or get_logger('routes')

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self):
        return iter(self._routes)

    def find_route(self, route_input: str, *, namespace: Optional[str] = None) -> Optional[Route]:
        for route in self._routes:
            if match_route(route, route_input, namespace=namespace):
                self._log.debug('matched route %s → %s#%s', route.name, route.controller, route.action)
                return route
        return None

    def find_controller_action(  # type: ignore[override]
            self,
            route_input: str,
            *,
            namespace: Optional[str] = None,
    ) -> Optional[Tuple[str, str]]:
        route = self.find_route(route_input, namespace=namespace)
        return (route.controller, route.action) if route else None
