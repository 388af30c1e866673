from __future__ import annotations
"""
Route table loaders.

Three sources are supported:

- a JSON file: a list (or ``{"routes": [...]}``) of objects carrying
  ``name``, ``path`` and either ``controller``/``action`` or
  ``reqs: "controller#action"``;
- the plain-text output of ``rails routes`` saved to a file;
- the live application, by running ``bin/rails routes`` in the app root.

:class:`LazyRouteTable` defers the live call until a route is first looked up,
since booting the host application is slow.
"""

import json
import re
import subprocess
from pathlib import Path
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Tuple

from viewfinder.core.errors import RouteTableError
from viewfinder.core.interfaces.logging import LoggerLikeProtocol
from viewfinder.core.interfaces.routes import RouteResolverProtocol
from viewfinder.core.models import Route
from viewfinder.logging.helpers import get_logger
from viewfinder.routing.table import RouteTable

RAILS_ROUTES_CMD: tuple[str, ...] = ('bin/rails', 'routes')

_ROUTE_LINE = re.compile(
    r'^\s*(?:(?P<name>[a-z_]\w*)\s+)?'
    r'(?:(?P<verb>[A-Z]+(?:\|[A-Z]+)*)\s+)?'
    r'(?P<path>/\S*)\s+'
    r'(?P<reqs>[\w/]+#\w+)'
)


def _split_reqs(reqs: str) -> Tuple[str, str]:
    controller, _, action = reqs.partition('#')
    return controller.strip(), action.strip()


def parse_rails_routes(text: str) -> List[Route]:
    """Parse the tabular output of ``rails routes``.

    Lines that carry no ``controller#action`` column (headers, mounted
    engines, blank lines) are ignored. Rows printed without a name are kept
    as unnamed routes.
    """
    routes: List[Route] = []
    for line in text.splitlines():
        m = _ROUTE_LINE.match(line)
        if not m:
            continue
        controller, action = _split_reqs(m.group('reqs'))
        routes.append(Route(
            name=m.group('name') or '',
            path=m.group('path'),
            controller=controller,
            action=action,
        ))
    return routes


def _route_from_mapping(entry: Mapping[str, Any]) -> Route:
    controller = entry.get('controller')
    action = entry.get('action')
    if (not controller or not action) and entry.get('reqs'):
        controller, action = _split_reqs(str(entry['reqs']))
    if not controller or not action:
        raise ValueError(f'route entry needs controller and action: {dict(entry)!r}')
    return Route(
        name=str(entry.get('name') or ''),
        path=str(entry.get('path') or ''),
        controller=str(controller),
        action=str(action),
    )


def load_routes_json(path: Path) -> List[Route]:
    data = json.loads(Path(path).read_text(encoding='utf-8'))
    if isinstance(data, Mapping):
        data = data.get('routes', [])
    if not isinstance(data, list):
        raise RouteTableError(f'{path}: expected a list of routes')
    for index, entry in enumerate(data):
        if not isinstance(entry, Mapping):
            raise RouteTableError(f'{path}: route #{index} is not an object: {entry!r}')
    try:
        return [_route_from_mapping(entry) for entry in data]
    except (TypeError, ValueError) as exc:
        raise RouteTableError(f'{path}: {exc}') from exc


def load_routes_file(path: Path, *, logger: Optional[LoggerLikeProtocol] = None) -> RouteTable:
    """Load a route table from a JSON file or saved ``rails routes`` output."""
    path = Path(path)
    log = logger or get_logger('routes')
    try:
        if path.suffix.lower() == '.json':
            routes = load_routes_json(path)
        else:
            routes = parse_rails_routes(path.read_text(encoding='utf-8'))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise RouteTableError(f'could not load routes from {path}: {exc}') from exc
    log.debug('loaded %d routes from %s', len(routes), path)
    return RouteTable(routes, logger=log)


class RailsRoutesLoader:
    """Ask the host application for its routes via ``bin/rails routes``."""

    def __init__(
        self,
        app_root: Path,
        *,
        command: Sequence[str] = RAILS_ROUTES_CMD,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._app_root = Path(app_root)
        self._command = list(command)
        self._run = runner
        self._log = logger or get_logger('routes')

    def load(self) -> RouteTable:
        self._log.info('loading routes: %s (cwd=%s)', ' '.join(self._command), self._app_root)
        try:
            proc = self._run(
                self._command,
                cwd=str(self._app_root),
                capture_output=True,
                text=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise RouteTableError(f'could not load Rails routes: {exc}') from exc
        return RouteTable(parse_rails_routes(proc.stdout or ''), logger=self._log)


class LazyRouteTable(RouteResolverProtocol):
    """Route resolver that loads its table on first use."""

    def __init__(self, load: Callable[[], RouteTable]) -> None:
        self._load = load
        self._table: Optional[RouteTable] = None

    @property
    def table(self) -> RouteTable:
        if self._table is None:
            self._table = self._load()
        return self._table

    def find_controller_action(  # type: ignore[override]
            self,
            route_input: str,
            *,
            namespace: Optional[str] = None,
    ) -> Optional[Tuple[str, str]]:
        return self.table.find_controller_action(route_input, namespace=namespace)


def routes_from_entries(entries: Iterable[Mapping[str, Any]]) -> RouteTable:
    """Build a table from already-decoded mappings (e.g. test fixtures)."""
    return RouteTable(_route_from_mapping(e) for e in entries)
