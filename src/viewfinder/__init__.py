from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

from viewfinder.constants import TEMPLATE_EXTENSIONS, VIEWS_DIR
from viewfinder.cli import ViewFinderCLI
from viewfinder.core.errors import (
    AppRootNotFoundError,
    RecursionLimitError,
    RouteTableError,
    ViewFinderError,
)
from viewfinder.core.interfaces.routes import RouteResolverProtocol
from viewfinder.core.models import FinderOptions
from viewfinder.core.report import ResolutionReport
from viewfinder.finder import ViewFinder, find_app_root
from viewfinder.logging.helpers import get_logger
from viewfinder.parsing.scanner import RegexReferenceScanner
from viewfinder.rendering.flat import FlatCollector
from viewfinder.rendering.formatter import ProvenanceFormatter, prettify
from viewfinder.rendering.inline import InlineAssembler
from viewfinder.rendering.path_resolver import ViewPathResolver
from viewfinder.routing import RouteTable
from viewfinder.runtime.container import FinderBuilder, FinderConfig

__version__ = '0.3.0'


def find(
    view_path_or_route: str,
    options: Optional[Mapping[str, Any]] = None,
    *,
    app_root: Optional[str | Path] = None,
    routes: Optional[RouteResolverProtocol] = None,
) -> str:
    """Resolve a template path or route name and return the composed text.

    *options* accepts the keys ``partials``, ``embed``, ``namespace`` and
    ``max_depth``. Without *routes*, route names are resolved by asking the
    application (``bin/rails routes``) on first use.
    """
    root = Path(app_root).resolve() if app_root else find_app_root()
    cfg = FinderConfig(
        app_root=root,
        options=FinderOptions.from_mapping(options),
        route_resolver=routes,
    )
    return FinderBuilder.from_config(cfg).build().find(view_path_or_route)


__all__ = [
    'find',
    'find_app_root',
    'get_logger',
    'prettify',
    'AppRootNotFoundError',
    'FinderBuilder',
    'FinderConfig',
    'FinderOptions',
    'FlatCollector',
    'InlineAssembler',
    'ProvenanceFormatter',
    'RecursionLimitError',
    'RegexReferenceScanner',
    'ResolutionReport',
    'RouteTable',
    'RouteTableError',
    'TEMPLATE_EXTENSIONS',
    'VIEWS_DIR',
    'ViewFinder',
    'ViewFinderCLI',
    'ViewFinderError',
    'ViewPathResolver',
]
