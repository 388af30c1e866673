from __future__ import annotations
"""
ViewFinder – resolve a view (or a route's view) to its expanded template text.

The engine owns one :class:`ResolutionReport` and one top-level visited set.
``find_partials`` returns nothing for an identifier it has already handled;
each call gets a fresh per-call visited set for the partial recursion.
"""

from pathlib import Path
from typing import List, Optional, Set

from viewfinder.constants import APP_MARKER
from viewfinder.core.errors import AppRootNotFoundError, RouteTableError
from viewfinder.core.interfaces.fs import PathResolverProtocol
from viewfinder.core.interfaces.logging import LoggerLikeProtocol
from viewfinder.core.interfaces.render import FormatterProtocol
from viewfinder.core.interfaces.routes import RouteResolverProtocol
from viewfinder.core.models import FinderOptions, ResolvedTemplate
from viewfinder.core.report import ResolutionReport, StageTimer
from viewfinder.logging.helpers import get_logger
from viewfinder.rendering.flat import FlatCollector
from viewfinder.rendering.inline import InlineAssembler
from viewfinder.routing.table import controller_path_to_view_path


def find_app_root(start: Optional[Path] = None) -> Path:
    """Walk upward from *start* (default: CWD) to the first app root."""
    current = Path(start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / APP_MARKER).is_file():
            return candidate
    raise AppRootNotFoundError(str(current))


class ViewFinder:
    def __init__(
        self,
        *,
        resolver: PathResolverProtocol,
        formatter: FormatterProtocol,
        inline: InlineAssembler,
        flat: FlatCollector,
        app_root: Path,
        route_resolver: Optional[RouteResolverProtocol] = None,
        options: Optional[FinderOptions] = None,
        report: Optional[ResolutionReport] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._resolver = resolver
        self._formatter = formatter
        self._inline = inline
        self._flat = flat
        self._app_root = Path(app_root)
        self._routes = route_resolver
        self._options = options or FinderOptions()
        self._report = report if report is not None else ResolutionReport()
        self._log = logger or get_logger('finder')
        self._processed: Set[str] = set()

    @property
    def report(self) -> ResolutionReport:
        return self._report

    @property
    def options(self) -> FinderOptions:
        return self._options

    def find_partials(self, view_path: str | Path) -> List[str]:
        """Resolve *view_path* and return the formatted output pieces."""
        key = str(view_path)
        if key in self._processed:
            return []
        self._processed.add(key)

        with StageTimer(self._report, 'lookup'):
            full_path = self._resolver.resolve_template(view_path)
        if full_path is None:
            self._log.warning('Could not find template: %s', key)
            self._report.add_diagnostic('unresolved_reference', f'Could not find template: {key}')
            return []

        rel = self._resolver.relative(full_path)
        try:
            content = full_path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            self._log.error('Error processing %s: %s', key, exc)
            self._report.add_diagnostic('read_failure', f'{rel}: {exc}')
            return []
        self._report.add_template(rel)

        if not self._options.partials:
            with StageTimer(self._report, 'format'):
                return [self._formatter.format_template(full_path, content)]

        visited: Set[Path] = {full_path.resolve()}
        if self._options.embed:
            with StageTimer(self._report, 'expand'):
                expanded = self._inline.expand(content, full_path, visited=visited)
            with StageTimer(self._report, 'format'):
                return [self._formatter.format_template(full_path, expanded)]

        with StageTimer(self._report, 'expand'):
            collected = self._flat.collect(ResolvedTemplate(key, full_path, content), visited=visited)
        with StageTimer(self._report, 'format'):
            return [self._formatter.format_template(t.path, t.content) for t in collected]

    def find_partials_from_route(self, route_input: str, *, namespace: Optional[str] = None) -> List[str]:
        if self._routes is None:
            self._log.warning('No route table available to resolve %r', route_input)
            self._report.add_diagnostic('unresolved_route', f'no route table for {route_input}')
            return []
        try:
            match = self._routes.find_controller_action(route_input, namespace=namespace)
        except RouteTableError as exc:
            self._log.error('%s', exc)
            self._report.add_diagnostic('environment_failure', str(exc))
            return []
        if not match:
            where = f' in namespace {namespace!r}' if namespace else ''
            self._log.warning('No route matches %r%s', route_input, where)
            self._report.add_diagnostic('unresolved_route', f'No route matches {route_input}{where}')
            return []

        controller, action = match
        return self.find_partials(controller_path_to_view_path(controller, action))

    def find(self, target: str) -> str:
        """Treat *target* as a file under the app root if one exists, else as a route name."""
        candidate = self._app_root / target
        if candidate.is_file():
            results = self.find_partials(candidate)
        else:
            results = self.find_partials_from_route(target, namespace=self._options.namespace)
        self._report.finish()
        return ''.join(results)
