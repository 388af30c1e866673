from __future__ import annotations

from typing import Optional, Protocol, Tuple, runtime_checkable


@runtime_checkable
class RouteResolverProtocol(Protocol):
    """Maps a route name (optionally suffixed _path/_url) to (controller, action)."""

    def find_controller_action(
            self,
            route_input: str,
            *,
            namespace: Optional[str] = None,
    ) -> Optional[Tuple[str, str]]:
        ...
