from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FormatterProtocol(Protocol):
    def format_template(self, path: Path, content: str) -> str:
        ...

    def format_partial(self, path: Path, content: str, locals_suffix: str = '') -> str:
        ...
