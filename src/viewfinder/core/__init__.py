from __future__ import annotations

"""Public surface for viewfinder.core.

Protocols, value types, errors and the run report live here so callers can
import them from one stable location:

    from viewfinder.core import FinderOptions, ResolutionReport, ...
"""

from viewfinder.core.errors import (
    AppRootNotFoundError,
    RecursionLimitError,
    RouteTableError,
    ViewFinderError,
)
from viewfinder.core.interfaces import (
    FormatterProtocol,
    PathResolverProtocol,
    ReferenceScannerProtocol,
    RouteResolverProtocol,
)
from viewfinder.core.models import FinderOptions, PartialReference, ResolvedTemplate, Route
from viewfinder.core.report import Diagnostic, ResolutionReport, StageTimer

__all__ = [
    # Protocols
    "FormatterProtocol",
    "PathResolverProtocol",
    "ReferenceScannerProtocol",
    "RouteResolverProtocol",
    # Models
    "FinderOptions",
    "PartialReference",
    "ResolvedTemplate",
    "Route",
    # Errors
    "AppRootNotFoundError",
    "RecursionLimitError",
    "RouteTableError",
    "ViewFinderError",
    # Report
    "Diagnostic",
    "ResolutionReport",
    "StageTimer",
]
