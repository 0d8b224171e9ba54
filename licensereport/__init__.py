"""Render tabular reports, such as dependency license reports, as text.

Key concepts:

* **Model** describes one report: title, table columns, notes label and
  rows.  See :mod:`licensereport.model`.
* **Target languages** turn the document structure into Markdown, HTML,
  CSV or Confluence wiki markup.  See :mod:`licensereport.renderers`.
* **Registry** enables decorator-based format registration.
  See :mod:`licensereport.registry`.
* **Report** helpers drive a renderer over a document.
  See :mod:`licensereport.report`.
"""

import logging

from .registry import Registry
from .model import ColumnCountError, Document, Row
from .renderers import (
    CONFLUENCE,
    CSV,
    HTML,
    MARKDOWN,
    RENDERERS,
    TargetLanguage,
    get_renderer,
    renderer_for_ext,
    renderer_registry,
)
from .config import ReportConfig
from .report import iter_document, render_document, render_formats, write_document

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Registry",
    "ColumnCountError",
    "Document",
    "Row",
    "TargetLanguage",
    "renderer_registry",
    "RENDERERS",
    "get_renderer",
    "renderer_for_ext",
    "MARKDOWN",
    "HTML",
    "CSV",
    "CONFLUENCE",
    "ReportConfig",
    "iter_document",
    "render_document",
    "render_formats",
    "write_document",
]
