from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class PathResolverProtocol(Protocol):
    def resolve_partial(self, name: str, context: Optional[str] = None) -> Optional[Path]:
        ...

    def resolve_template(self, view_path: str | Path) -> Optional[Path]:
        ...

    def context_of(self, path: Path) -> str:
        ...

    def relative(self, path: Path) -> str:
        ...
