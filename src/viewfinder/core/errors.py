from __future__ import annotations

"""Exception hierarchy for viewfinder.

Only conditions that stop a top-level call are raised. Unresolved references,
unresolved routes and read failures are logged and recorded on the
:class:`~viewfinder.core.report.ResolutionReport` instead.
"""


class ViewFinderError(Exception):
    """Base class for every error raised by viewfinder."""


class AppRootNotFoundError(ViewFinderError, FileNotFoundError):
    """No directory containing the application marker was found."""

    def __init__(self, start: str) -> None:
        super().__init__(f'Not in a Rails application: no config/application.rb above {start}')
        self.start = start


class RouteTableError(ViewFinderError, RuntimeError):
    """The route table could not be loaded from the host application."""


class RecursionLimitError(ViewFinderError, RecursionError):
    """Partial nesting went deeper than the configured maximum."""

    def __init__(self, path: str, max_depth: int) -> None:
        super().__init__(f'partial nesting exceeded {max_depth} levels at {path}')
        self.path = path
        self.max_depth = max_depth
