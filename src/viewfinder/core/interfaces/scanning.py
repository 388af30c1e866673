from __future__ import annotations

from typing import Callable, List, Protocol, runtime_checkable

from viewfinder.core.models import PartialReference


@runtime_checkable
class ReferenceScannerProtocol(Protocol):
    """Finds partial references in template text."""

    def scan(self, text: str) -> List[PartialReference]:
        ...

    def substitute(self, text: str, replace: Callable[[PartialReference], str]) -> str:
        ...
