from __future__ import annotations
"""
Partial-reference scanning for ERB-style templates.

Recognized markers::

    <%= render "TARGET" OPTIONS %>
    <%= render partial: 'TARGET', OPTIONS %>

``scan`` reports every reference in order of appearance (duplicates kept).
``substitute`` rewrites only complete tags, i.e. ones whose option text
reaches a closing ``%>`` without crossing another ``%``; the replacement
callback receives the parsed reference and returns the new text.

This is a regex-based recognizer, not an ERB parser. Option text, including
any ``locals: { ... }`` fragment, is carried as raw text and never evaluated.
"""

import re
from typing import Callable, List, Optional

from viewfinder.core.interfaces.scanning import ReferenceScannerProtocol
from viewfinder.core.models import PartialReference

_HEAD = r"""<%=\s*render\s+(?:partial:\s*)?['"]([^'"]+)['"]"""

# Loose form: target only, the tag may be left open (used for discovery).
PARTIAL_PATTERN = re.compile(_HEAD + r"""(?:([^%]*?)\s*%>)?""", re.S)

# Strict form: the whole tag up to the first closing delimiter.
TAG_PATTERN = re.compile(_HEAD + r"""([^%]*?)\s*%>""", re.S)

LOCALS_PATTERN = re.compile(r'locals:\s*{(.*?)}', re.S)


def extract_locals(options: str) -> Optional[str]:
    """Return the stripped inner text of ``locals: { ... }`` or None."""
    m = LOCALS_PATTERN.search(options or '')
    return m.group(1).strip() if m else None


def _reference(m: re.Match) -> PartialReference:
    options = (m.group(2) or '').strip()
    return PartialReference(
        target=m.group(1).strip(),
        options=options,
        locals=extract_locals(options),
        tag=m.group(0),
    )


class RegexReferenceScanner(ReferenceScannerProtocol):
    """Default scanner backed by :data:`PARTIAL_PATTERN` / :data:`TAG_PATTERN`."""

    def __init__(
        self,
        *,
        partial_pattern: re.Pattern = PARTIAL_PATTERN,
        tag_pattern: re.Pattern = TAG_PATTERN,
    ) -> None:
        self._partial = partial_pattern
        self._tag = tag_pattern

    def scan(self, text: str) -> List[PartialReference]:  # type: ignore[override]
        return [_reference(m) for m in self._partial.finditer(text)]

    def substitute(self, text: str, replace: Callable[[PartialReference], str]) -> str:  # type: ignore[override]
        return self._tag.sub(lambda m: replace(_reference(m)), text)
