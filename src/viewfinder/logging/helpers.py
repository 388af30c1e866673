from __future__ import annotations

"""Logger plumbing for the ``viewfinder`` namespace.

Components log under ``viewfinder.<component>`` (``inline``, ``flat``,
``resolver``, ``routes``, ``finder``). Warnings carry the user-facing
diagnostics ("Could not find partial: ...", "Could not find route: ...").
With ``VIEWFINDER_TRACE_IO=1`` the assemblers also emit one debug record per
partial they descend into, and the path resolver one per candidate file it
checks; those records carry their fields (``path``, ``depth``) as structured
context so ``--json-logs`` output can be filtered by them.
"""

import logging
import os
from typing import Optional, TextIO

from viewfinder.core.interfaces.logging import LoggerLikeProtocol


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record.

    ``ts`` (UTC, milliseconds), ``level``, ``module`` (logger name such as
    ``viewfinder.inline``), ``msg`` and ``version`` are always present.
    ``ctx`` appears only for trace records, e.g.
    ``{"path": "users/_details.html.erb", "depth": 1}`` from the inline
    assembler or ``{"path": ".../users/_details.html.erb"}`` from a
    candidate lookup.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            from viewfinder import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv("VIEWFINDER_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Attach the single stderr handler to ``viewfinder`` (first call only).

    Later calls just adjust the level, so the CLI can run repeatedly in one
    process without stacking handlers.
    """
    base = logging.getLogger("viewfinder")
    if base.handlers:
        base.setLevel(level)
        return base

    import sys as _sys

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'viewfinder'."""
    if not name or name == "viewfinder":
        return logging.getLogger("viewfinder")
    if name.startswith("viewfinder"):
        return logging.getLogger(name)
    return logging.getLogger(f"viewfinder.{name}")


def is_trace_io_enabled() -> bool:
    """Check if IO tracing is enabled via env flag."""
    return os.getenv("VIEWFINDER_TRACE_IO") == "1"


def trace_io(logger: LoggerLikeProtocol, message: str, **ctx) -> None:
    """Debug record for one filesystem step, dropped unless VIEWFINDER_TRACE_IO=1.

    *ctx* (``path``, ``depth``) is attached as ``record.context`` for
    :class:`JsonLogFormatter`.
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
