from __future__ import annotations
"""
InlineAssembler – expand partial references in place.

Every complete ``render`` tag is replaced by the referenced partial's own
expansion wrapped in ``BEGIN/END PARTIAL`` comments. A tag whose target
cannot be located (or read) is kept verbatim so the output still shows where
the broken reference was.

A visited set of resolved partial paths is threaded through the recursion;
a partial is expanded at most once per top-level call and later references
to it (including cyclic ones) expand to nothing.
"""

from pathlib import Path
from typing import Optional, Set

from viewfinder.constants import DEFAULT_MAX_DEPTH
from viewfinder.core.errors import RecursionLimitError
from viewfinder.core.interfaces.fs import PathResolverProtocol
from viewfinder.core.interfaces.logging import LoggerLikeProtocol
from viewfinder.core.interfaces.render import FormatterProtocol
from viewfinder.core.interfaces.scanning import ReferenceScannerProtocol
from viewfinder.core.models import PartialReference
from viewfinder.core.report import ResolutionReport
from viewfinder.logging.helpers import get_logger, trace_io
from viewfinder.rendering.path_resolver import normalize_partial_name


class InlineAssembler:
    def __init__(
        self,
        *,
        resolver: PathResolverProtocol,
        scanner: ReferenceScannerProtocol,
        formatter: FormatterProtocol,
        report: Optional[ResolutionReport] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._resolver = resolver
        self._scanner = scanner
        self._formatter = formatter
        self._report = report if report is not None else ResolutionReport()
        self._max_depth = max_depth
        self._log = logger or get_logger('inline')

    def expand(
        self,
        text: str,
        source: Path,
        context: Optional[str] = None,
        *,
        visited: Optional[Set[Path]] = None,
        depth: int = 0,
    ) -> str:
        """Return *text* with every resolvable partial reference inlined.

        *source* is the file *text* came from; *context* defaults to its
        directory relative to the views root.
        """
        seen = visited if visited is not None else set()
        ctx = context if context is not None else self._resolver.context_of(source)
        return self._scanner.substitute(
            text,
            lambda ref: self._replace(ref, source, ctx, seen, depth),
        )

    def _replace(
        self,
        ref: PartialReference,
        source: Path,
        context: str,
        visited: Set[Path],
        depth: int,
    ) -> str:
        src_label = self._resolver.relative(source)
        partial = self._resolver.resolve_partial(ref.target, context)
        if partial is None:
            normalized = normalize_partial_name(ref.target)
            self._log.warning('Could not find partial: %s', normalized)
            self._report.add_diagnostic(
                'unresolved_reference', f'Could not find partial: {normalized}', source=src_label
            )
            return ref.tag

        key = partial.resolve()
        rel = self._resolver.relative(partial)
        if key in visited:
            self._log.debug('partial %s already expanded – skipped', rel)
            self._report.add_diagnostic(
                'repeated_reference', f'{rel} already included', source=src_label
            )
            return ''
        if depth + 1 > self._max_depth:
            raise RecursionLimitError(rel, self._max_depth)

        try:
            content = partial.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            self._log.error('Error reading partial %s: %s', rel, exc)
            self._report.add_diagnostic('read_failure', f'{rel}: {exc}', source=src_label)
            return ref.tag

        trace_io(self._log, 'inline partial', path=rel, depth=depth + 1)
        visited.add(key)
        self._report.add_template(rel)
        body = self.expand(content, partial, visited=visited, depth=depth + 1)
        return self._formatter.format_partial(partial, body, ref.locals_suffix)
