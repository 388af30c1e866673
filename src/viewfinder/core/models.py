from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from viewfinder.constants import DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class ResolvedTemplate:
    """A template located on disk together with its raw text."""
    identifier: str
    path: Path
    content: str


@dataclass(frozen=True)
class PartialReference:
    """One ``render`` call found in template text.

    ``options`` is the raw text following the target up to the closing
    delimiter; ``locals`` is the inner text of a ``locals: { ... }`` fragment
    when one is present. Neither is ever evaluated.
    """
    target: str
    options: str = ''
    locals: Optional[str] = None
    tag: str = ''

    @property
    def locals_suffix(self) -> str:
        if self.locals is None:
            return ''
        return f', locals: {{ {self.locals} }}'


@dataclass(frozen=True)
class Route:
    name: str
    path: str
    controller: str
    action: str

    @property
    def view_path(self) -> str:
        return f'{self.controller}/{self.action}'


@dataclass(frozen=True)
class FinderOptions:
    """Per-session switches.

    partials:  when False only the root template is returned.
    embed:     True inlines partials in place, False collects them flat.
    namespace: forwarded to the route resolver.
    max_depth: nesting ceiling before RecursionLimitError is raised.
    """
    partials: bool = True
    embed: bool = True
    namespace: Optional[str] = None
    max_depth: int = DEFAULT_MAX_DEPTH

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]] = None) -> 'FinderOptions':
        opts = dict(options or {})
        ns = opts.get('namespace')
        return cls(
            partials=opts.get('partials') is not False,
            embed=opts.get('embed') is not False,
            namespace=str(ns) if ns else None,
            max_depth=int(opts.get('max_depth') or DEFAULT_MAX_DEPTH),
        )
