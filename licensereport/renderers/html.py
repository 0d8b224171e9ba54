"""HTML target language.

Renders the report as a plain HTML page with a borderless table.  The
page prologue is produced from a Jinja2 template; the notes cells are
entity-escaped with MarkupSafe, and characters outside ASCII that have
an HTML 4 entity name (``©``, ``é``, ...) are written as that entity.
"""

from __future__ import annotations

from html.entities import codepoint2name
from typing import Optional

from jinja2 import Environment
from markupsafe import escape

from .base import TargetLanguage, has_link, renderer_registry, text

_env = Environment(autoescape=False)

DOCUMENT_START = _env.from_string(
    "<html><head><title>{{ title }}</title>"
    "{% if style_rules is not none %}"
    '<style media="screen" type="text/css">{{ style_rules }}</style>'
    "{% endif %}"
    "</head><body>"
)

# ASCII markup characters are left to MarkupSafe
_NAMED_ENTITIES = {cp: f"&{name};" for cp, name in codepoint2name.items() if cp > 127}


def html_encode(s: Optional[str]) -> str:
    """Escape ``s`` for HTML.

    ``&``, ``<``, ``>``, ``"`` and ``'`` become entities, as do non-ASCII
    characters with an HTML 4 entity name.
    """
    return str(escape(text(s))).translate(_NAMED_ENTITIES)


def escape_notes(s: Optional[str]) -> str:
    """HTML-escape ``s`` and encode pipes, which would break table markup."""
    return html_encode(s).replace("|", "&#124;")


@renderer_registry.register("html")
class HtmlRenderer(TargetLanguage):
    """Render the report as an HTML document."""

    __slots__ = ()

    ext = "html"

    def document_start(self, title: str, style_rules: Optional[str] = None) -> str:
        return DOCUMENT_START.render(title=text(title), style_rules=style_rules)

    def document_end(self) -> str:
        return "</body></html>"

    def create_hyperlink(self, link: Optional[str], content: Optional[str]) -> str:
        if not has_link(link):
            return text(content)
        return f'<a href="{html_encode(link)}">{text(content)}</a>'

    def blank_line(self) -> str:
        # An empty paragraph collapses in browsers
        return "<p>&nbsp;</p>"

    def header1(self, msg: str) -> str:
        return f"<h1>{text(msg)}</h1>"

    def table_header(self, notes: str, *columns: str) -> str:
        th = "".join(f"<th>{text(c)}</th>" for c in (*columns, notes))
        return (
            '<table border="0" cellspacing="0" cellpadding="1">'
            f"<thead><tr>{th}</tr></thead><tbody>"
        )

    def table_row(self, notes: Optional[str], *columns: str) -> str:
        # &nbsp; keeps empty cells from collapsing
        cells = "".join(f"<td>{text(c)}&nbsp;</td>" for c in columns)
        return f"<tr>{cells}<td>{escape_notes(notes)}</td></tr>"

    def table_end(self) -> str:
        return "</tbody></table>"

    html_encode = staticmethod(html_encode)
