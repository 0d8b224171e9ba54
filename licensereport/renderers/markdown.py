"""Markdown target language.

Tables use the pipe syntax understood by GitHub and most Markdown
engines.  Notes are wrapped in ``<notextile>`` so that free text is not
interpreted as markup, and are HTML-escaped with pipes encoded as
``&#124;`` so they cannot split a cell.
"""

from __future__ import annotations

from typing import Optional

from .base import TargetLanguage, has_link, renderer_registry, text
from .html import escape_notes

MARKDOWN_SPECIAL = frozenset("*`[]#")


def markdown_encode(s: Optional[str], special: frozenset = MARKDOWN_SPECIAL) -> str:
    """Backslash-escape the characters in ``special``.

    Intended for raw text placed outside table cells.
    """
    return "".join("\\" + c if c in special else c for c in text(s))


@renderer_registry.register("markdown")
class MarkdownRenderer(TargetLanguage):
    """Render the report as Markdown."""

    __slots__ = ()

    ext = "md"

    def document_start(self, title: str, style_rules: Optional[str] = None) -> str:
        return ""

    def document_end(self) -> str:
        return ""

    def create_hyperlink(self, link: Optional[str], content: Optional[str]) -> str:
        if not has_link(link):
            return text(content)
        return f"[{text(content)}]({link})"

    def blank_line(self) -> str:
        return "\n"

    def header1(self, msg: str) -> str:
        return f"# {text(msg)}\n"

    def table_header(self, notes: str, *columns: str) -> str:
        labels = [text(c) for c in (*columns, notes)]
        first_row = " | ".join(labels)
        second_row = " | ".join(["---"] * len(labels))
        return f"\n{first_row}\n{second_row}\n"

    def table_row(self, notes: Optional[str], *columns: str) -> str:
        main = "".join(f"{text(c)} | " for c in columns)
        return f"{main}<notextile>{escape_notes(notes)}</notextile>\n"

    def table_end(self) -> str:
        return "\n"

    markdown_encode = staticmethod(markdown_encode)
    escape_html = staticmethod(escape_notes)
