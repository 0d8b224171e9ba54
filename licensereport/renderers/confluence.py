"""Confluence wiki markup target language.

Header cells are delimited with ``||`` and data cells with ``|``.  Links
use the ``[text|url]`` form; both parts are trimmed and ``None`` counts
as empty.
"""

from __future__ import annotations

from typing import Optional

from .base import TargetLanguage, renderer_registry, text, trim
from .html import escape_notes
from .markdown import MARKDOWN_SPECIAL, markdown_encode

WIKI_SPECIAL = MARKDOWN_SPECIAL | {"|"}


def wiki_encode(s: Optional[str]) -> str:
    """Backslash-escape wiki markup characters, including the cell pipe."""
    return markdown_encode(s, WIKI_SPECIAL)


@renderer_registry.register("confluence")
class ConfluenceRenderer(TargetLanguage):
    """Render the report as Confluence wiki markup."""

    __slots__ = ()

    ext = "confluence.mu"

    def document_start(self, title: str, style_rules: Optional[str] = None) -> str:
        return ""

    def document_end(self) -> str:
        return ""

    def create_hyperlink(self, link: Optional[str], content: Optional[str]) -> str:
        url = trim(link)
        if not url:
            return trim(content)
        return f"[{trim(content)}|{url}]"

    def blank_line(self) -> str:
        return "\n"

    def header1(self, msg: str) -> str:
        return f"h1.{text(msg)}\n"

    def table_header(self, notes: str, *columns: str) -> str:
        return "|| " + " || ".join(text(f) for f in (*columns, notes)) + " ||\n"

    def table_row(self, notes: Optional[str], *columns: str) -> str:
        return "| " + " | ".join(text(f) for f in (*columns, notes)) + " |\n"

    def table_end(self) -> str:
        return "\n"

    markdown_encode = staticmethod(wiki_encode)
    escape_html = staticmethod(escape_notes)
