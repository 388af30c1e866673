from __future__ import annotations
"""
FlatCollector – gather a template and every partial it reaches, in order.

The result is the root template followed by each referenced partial in
depth-first discovery order: a partial's own partials come before its next
sibling. Nothing is substituted; contents are returned as read.
"""

from pathlib import Path
from typing import List, Optional, Set

from viewfinder.constants import DEFAULT_MAX_DEPTH
from viewfinder.core.errors import RecursionLimitError
from viewfinder.core.interfaces.fs import PathResolverProtocol
from viewfinder.core.interfaces.logging import LoggerLikeProtocol
from viewfinder.core.interfaces.scanning import ReferenceScannerProtocol
from viewfinder.core.models import PartialReference, ResolvedTemplate
from viewfinder.core.report import ResolutionReport
from viewfinder.logging.helpers import get_logger, trace_io
from viewfinder.rendering.path_resolver import normalize_partial_name


class FlatCollector:
    def __init__(
        self,
        *,
        resolver: PathResolverProtocol,
        scanner: ReferenceScannerProtocol,
        report: Optional[ResolutionReport] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._resolver = resolver
        self._scanner = scanner
        self._report = report if report is not None else ResolutionReport()
        self._max_depth = max_depth
        self._log = logger or get_logger('flat')

    def collect(
        self,
        root: ResolvedTemplate,
        *,
        visited: Optional[Set[Path]] = None,
    ) -> List[ResolvedTemplate]:
        seen = visited if visited is not None else set()
        seen.add(root.path.resolve())
        results: List[ResolvedTemplate] = [root]
        for ref in self._scanner.scan(root.content):
            self._process(ref, root.path, results, seen, depth=1)
        return results

    def _process(
        self,
        ref: PartialReference,
        source: Path,
        results: List[ResolvedTemplate],
        visited: Set[Path],
        *,
        depth: int,
    ) -> None:
        src_label = self._resolver.relative(source)
        normalized = normalize_partial_name(ref.target)
        partial = self._resolver.resolve_partial(ref.target, self._resolver.context_of(source))
        if partial is None:
            self._log.warning('Could not find partial: %s', normalized)
            self._report.add_diagnostic(
                'unresolved_reference', f'Could not find partial: {normalized}', source=src_label
            )
            return

        key = partial.resolve()
        rel = self._resolver.relative(partial)
        if key in visited:
            self._log.debug('partial %s already collected – skipped', rel)
            self._report.add_diagnostic(
                'repeated_reference', f'{rel} already included', source=src_label
            )
            return
        if depth > self._max_depth:
            raise RecursionLimitError(rel, self._max_depth)

        try:
            content = partial.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            self._log.error('Error reading partial %s: %s', rel, exc)
            self._report.add_diagnostic('read_failure', f'{rel}: {exc}', source=src_label)
            return

        trace_io(self._log, 'collect partial', path=rel, depth=depth)
        visited.add(key)
        self._report.add_template(rel)
        results.append(ResolvedTemplate(normalized, partial, content))
        for nested in self._scanner.scan(content):
            self._process(nested, partial, results, visited, depth=depth + 1)
