from viewfinder.routing.loader import (
    LazyRouteTable,
    RailsRoutesLoader,
    load_routes_file,
    parse_rails_routes,
    routes_from_entries,
)
from viewfinder.routing.table import RouteTable, controller_path_to_view_path, match_route

__all__ = [
    'LazyRouteTable',
    'RailsRoutesLoader',
    'RouteTable',
    'controller_path_to_view_path',
    'load_routes_file',
    'match_route',
    'parse_rails_routes',
    'routes_from_entries',
]
