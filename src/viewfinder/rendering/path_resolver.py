from __future__ import annotations
"""
Template and partial path resolution.

Lookups are anchored at a views root (``<app>/app/views``). Two flavours:

- ``resolve_template`` finds a top-level view by its logical path; the base
  name is used as written.
- ``resolve_partial`` finds a partial; the base name is normalized to exactly
  one leading underscore, and the lookup is either relative to the directory
  of the referencing template or, when the name contains a ``/``, rooted at
  the views root.

In both cases extensions are tried in ``TEMPLATE_EXTENSIONS`` order and the
first existing file wins. A miss returns ``None``.
"""

import posixpath
import re
from pathlib import Path
from typing import Optional, Sequence

from viewfinder.constants import TEMPLATE_EXTENSIONS, VIEWS_DIR
from viewfinder.core.interfaces.fs import PathResolverProtocol
from viewfinder.core.interfaces.logging import LoggerLikeProtocol
from viewfinder.logging.helpers import get_logger, trace_io

_LEADING_UNDERSCORES = re.compile(r'^_+')


def normalize_partial_name(name: str) -> str:
    """Strip surrounding quotes/space, a leading slash and leading underscores."""
    clean = name.strip().strip('\'"')
    if clean.startswith('/'):
        clean = clean[1:]
    return _LEADING_UNDERSCORES.sub('', clean)


def partial_file_stem(name: str) -> str:
    """Return the on-disk stem of a partial: ``foo``, ``_foo`` and ``__foo`` → ``_foo``."""
    return '_' + _LEADING_UNDERSCORES.sub('', posixpath.basename(name))


def is_absolute_reference(name: str) -> bool:
    """True when *name* is looked up from the views root: it starts with or contains a ``/``."""
    clean = name.strip().strip('\'"')
    return clean.startswith('/') or '/' in clean


class ViewPathResolver(PathResolverProtocol):
    """Resolve logical template names to files under a views root."""

    def __init__(
        self,
        app_root: Path,
        *,
        views_root: Optional[Path] = None,
        extensions: Sequence[str] = TEMPLATE_EXTENSIONS,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._app_root = Path(app_root).resolve()
        self._views_root = Path(views_root).resolve() if views_root else self._app_root / VIEWS_DIR
        self._extensions = tuple(extensions)
        self._log = logger or get_logger('resolver')

    @property
    def app_root(self) -> Path:
        return self._app_root

    @property
    def views_root(self) -> Path:
        return self._views_root

    @property
    def extensions(self) -> tuple[str, ...]:
        return self._extensions

    def _first_existing(self, stem: Path) -> Optional[Path]:
        for ext in self._extensions:
            candidate = stem.with_name(stem.name + ext)
            trace_io(self._log, 'candidate', path=str(candidate))
            if candidate.is_file():
                return candidate
        return None

    def resolve_partial(self, name: str, context: Optional[str] = None) -> Optional[Path]:
        """Locate the partial *name* referenced from directory *context*.

        *context* is the referencing template's directory relative to the
        views root; it is ignored for names that start with or contain a ``/``.
        """
        normalized = normalize_partial_name(name)
        if not normalized:
            return None
        if is_absolute_reference(name):
            rel_dir = posixpath.dirname(normalized)
        else:
            rel_dir = context or '.'
        return self._first_existing(self._views_root / rel_dir / partial_file_stem(normalized))

    def resolve_template(self, view_path: str | Path) -> Optional[Path]:
        """Locate a top-level template by path or logical name."""
        direct = Path(view_path)
        if direct.is_absolute():
            return direct if direct.is_file() else None

        under_app = self._app_root / direct
        if under_app.is_file():
            return under_app

        verbatim = self._views_root / direct
        if verbatim.is_file():
            return verbatim
        return self._first_existing(verbatim)

    def context_of(self, path: Path) -> str:
        """Directory of *path* relative to the views root (``'.'`` at the top)."""
        try:
            rel = Path(path).resolve().relative_to(self._views_root)
        except ValueError:
            return '.'
        return rel.parent.as_posix()

    def relative(self, path: Path) -> str:
        """Provenance label: relative to the views root, else the app root."""
        resolved = Path(path).resolve()
        for anchor in (self._views_root, self._app_root):
            try:
                return resolved.relative_to(anchor).as_posix()
            except ValueError:
                continue
        return resolved.as_posix()
