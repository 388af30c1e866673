from __future__ import annotations
"""
Provenance wrapping and best-effort reindentation.

Wrapping emits ``<!-- BEGIN TEMPLATE: path -->`` / ``<!-- END TEMPLATE: path -->``
around a template body and ``BEGIN PARTIAL`` / ``END PARTIAL`` around an
inlined partial. Reindentation only rewrites leading whitespace; the text of
every line after its indentation is left untouched.
"""

import re
from pathlib import Path
from typing import Callable, List, Optional

from viewfinder.core.interfaces.render import FormatterProtocol

INDENT = '  '

VOID_ELEMENTS = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'source', 'track', 'wbr', '!doctype',
})

_CLOSE_TAG = re.compile(r'^</')
_ERB_CLOSE = re.compile(r'^<%-?\s*(?:(?:end|else|elsif|when|rescue|ensure)\b|})')
_RUBY_CLOSE = re.compile(r'^(?:end|})$')
_OPEN_TAG = re.compile(r'<(!?[A-Za-z][\w:.-]*)[^<>]*?(/?)>$')
_ERB_BLOCK = re.compile(r'\bdo\s*(?:\|[^|]*\|)?\s*-?%>$')
_ERB_OPEN = re.compile(r'^<%-?\s*(?:if|unless|case|while|until|for|begin|else|elsif|when|rescue|ensure)\b.*%>$')


def _closes(stripped: str) -> bool:
    return bool(
        _CLOSE_TAG.match(stripped)
        or _ERB_CLOSE.match(stripped)
        or _RUBY_CLOSE.match(stripped)
    )


def _opens(stripped: str) -> bool:
    if _ERB_BLOCK.search(stripped) or _ERB_OPEN.match(stripped):
        return True
    m = _OPEN_TAG.search(stripped)
    if not m or m.group(2):
        return False
    name = m.group(1).lower()
    if name in VOID_ELEMENTS:
        return False
    return f'</{name}' not in stripped.lower()


def prettify(content: str) -> str:
    """Reindent *content* by tag/block nesting; blank lines stay blank."""
    out: List[str] = []
    level = 0
    for line in content.split('\n'):
        stripped = line.strip()
        if not stripped:
            out.append(line.lstrip())
            continue
        if _closes(stripped):
            level = max(0, level - 1)
        out.append(INDENT * level + line.lstrip())
        if _opens(stripped):
            level += 1
    return '\n'.join(out)


class ProvenanceFormatter(FormatterProtocol):
    """Wrap template and partial bodies in provenance comments."""

    def __init__(
        self,
        relative: Callable[[Path], str],
        *,
        reindent: bool = True,
        prettifier: Optional[Callable[[str], str]] = None,
    ) -> None:
        self._relative = relative
        self._reindent = reindent
        self._prettify = prettifier or prettify

    def format_template(self, path: Path, content: str) -> str:  # type: ignore[override]
        rel = self._relative(path)
        body = self._prettify(content) if self._reindent else content
        return (
            f"\n<!-- BEGIN TEMPLATE: {rel} -->\n"
            f"{body}"
            f"\n<!-- END TEMPLATE: {rel} -->\n"
        )

    def format_partial(self, path: Path, content: str, locals_suffix: str = '') -> str:  # type: ignore[override]
        rel = self._relative(path)
        return (
            f"\n<!-- BEGIN PARTIAL: {rel}{locals_suffix} -->\n"
            f"{content}"
            f"\n<!-- END PARTIAL: {rel} -->\n"
        )
