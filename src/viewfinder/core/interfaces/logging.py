from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """What resolvers, assemblers and route tables log through.

    A stdlib :class:`logging.Logger` satisfies it, and so does any object
    exposing these four methods. Unresolved partials and routes go to
    ``warning``, environment failures to ``error``, IO traces to ``debug``.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    def get_logger(self, name: str) -> LoggerLikeProtocol:
        """Return the component logger for *name* (e.g. ``'inline'``)."""
        ...
