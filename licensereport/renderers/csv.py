"""CSV target language.

CSV has no notion of a document, heading or spacer, so those operations
render nothing and only the table rows reach the output.  Field quoting
follows the standard library ``csv`` writer: fields containing a comma,
a double quote, CR or LF are quoted and embedded quotes are doubled.
"""

from __future__ import annotations

import csv
import io
from typing import Optional

from .base import TargetLanguage, has_link, renderer_registry, text


def csv_encode(s: Optional[str]) -> str:
    """Escape a single CSV field."""
    value = text(s)
    if not value:
        # the writer would emit "" for a lone empty field
        return ""
    output = io.StringIO()
    # The default "\r\n" terminator makes the writer quote both CR and LF
    writer = csv.writer(output)
    writer.writerow([value])
    return output.getvalue().rstrip("\r\n")


@renderer_registry.register("csv")
class CsvRenderer(TargetLanguage):
    """Render the report table as comma separated values.

    Example output::

        Library,Version,Notes
        libfoo,1.0,MIT
        "lib,bar",2.0,"said ""hi"" twice"
    """

    __slots__ = ()

    ext = "csv"

    def document_start(self, title: str, style_rules: Optional[str] = None) -> str:
        return ""

    def document_end(self) -> str:
        return ""

    def create_hyperlink(self, link: Optional[str], content: Optional[str]) -> str:
        if has_link(link):
            return f"{text(content)} ({link})"
        return text(content)

    def blank_line(self) -> str:
        return ""

    def header1(self, msg: str) -> str:
        return ""

    def table_header(self, notes: str, *columns: str) -> str:
        return self.table_row(notes, *columns)

    def table_row(self, notes: Optional[str], *columns: str) -> str:
        return ",".join(csv_encode(f) for f in (*columns, notes)) + "\n"

    def table_end(self) -> str:
        return ""

    csv_encode = staticmethod(csv_encode)
