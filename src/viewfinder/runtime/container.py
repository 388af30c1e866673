from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Sequence

from viewfinder.constants import TEMPLATE_EXTENSIONS, VIEWS_DIR
from viewfinder.core.interfaces.fs import PathResolverProtocol
from viewfinder.core.interfaces.logging import LoggerLikeProtocol
from viewfinder.core.interfaces.render import FormatterProtocol
from viewfinder.core.interfaces.routes import RouteResolverProtocol
from viewfinder.core.interfaces.scanning import ReferenceScannerProtocol
from viewfinder.core.models import FinderOptions
from viewfinder.core.report import ResolutionReport
from viewfinder.finder import ViewFinder
from viewfinder.parsing.scanner import RegexReferenceScanner
from viewfinder.rendering.flat import FlatCollector
from viewfinder.rendering.formatter import ProvenanceFormatter
from viewfinder.rendering.inline import InlineAssembler
from viewfinder.rendering.path_resolver import ViewPathResolver
from viewfinder.routing.loader import LazyRouteTable, RailsRoutesLoader, load_routes_file


@dataclass(frozen=True)
class FinderConfig:
    """Immutable configuration blob used to seed the FinderBuilder."""
    app_root: Path
    options: FinderOptions = field(default_factory=FinderOptions)
    views_root: Optional[Path] = None
    extensions: Sequence[str] = TEMPLATE_EXTENSIONS
    routes_file: Optional[Path] = None
    live_routes: bool = True
    reindent: bool = True
    logger: Optional[LoggerLikeProtocol] = None

    # Optional component overrides
    resolver: Optional[PathResolverProtocol] = None
    scanner: Optional[ReferenceScannerProtocol] = None
    formatter: Optional[FormatterProtocol] = None
    route_resolver: Optional[RouteResolverProtocol] = None

    @property
    def effective_views_root(self) -> Path:
        return Path(self.views_root) if self.views_root else Path(self.app_root) / VIEWS_DIR


@dataclass
class FinderBuilder:
    """Composable builder that wires default components into a ViewFinder."""
    cfg: FinderConfig
    formatter_factory: Optional[Callable[[PathResolverProtocol], FormatterProtocol]] = None

    @classmethod
    def from_config(cls, cfg: FinderConfig) -> 'FinderBuilder':
        return cls(cfg=cfg)

    def _route_resolver(self, log: Optional[LoggerLikeProtocol]) -> Optional[RouteResolverProtocol]:
        cfg = self.cfg
        if cfg.route_resolver is not None:
            return cfg.route_resolver
        if cfg.routes_file is not None:
            routes_file = Path(cfg.routes_file)
            return LazyRouteTable(lambda: load_routes_file(routes_file, logger=log))
        if cfg.live_routes:
            loader = RailsRoutesLoader(cfg.app_root, logger=log)
            return LazyRouteTable(loader.load)
        return None

    def build(self) -> ViewFinder:
        """Materialize a ViewFinder with its own report and visited state."""
        cfg = self.cfg
        log = cfg.logger
        report = ResolutionReport()

        resolver = cfg.resolver or ViewPathResolver(
            cfg.app_root,
            views_root=cfg.effective_views_root,
            extensions=cfg.extensions,
            logger=log,
        )
        scanner = cfg.scanner or RegexReferenceScanner()
        if cfg.formatter is not None:
            formatter = cfg.formatter
        elif self.formatter_factory is not None:
            formatter = self.formatter_factory(resolver)
        else:
            formatter = ProvenanceFormatter(resolver.relative, reindent=cfg.reindent)

        inline = InlineAssembler(
            resolver=resolver,
            scanner=scanner,
            formatter=formatter,
            report=report,
            max_depth=cfg.options.max_depth,
            logger=log,
        )
        flat = FlatCollector(
            resolver=resolver,
            scanner=scanner,
            report=report,
            max_depth=cfg.options.max_depth,
            logger=log,
        )
        return ViewFinder(
            resolver=resolver,
            formatter=formatter,
            inline=inline,
            flat=flat,
            app_root=cfg.app_root,
            route_resolver=self._route_resolver(log),
            options=cfg.options,
            report=report,
            logger=log,
        )
