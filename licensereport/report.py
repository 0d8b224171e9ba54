"""Assemble a document with a target language.

These helpers drive a renderer through the fixed call sequence of a
report and either join the pieces or stream them to a text file object.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, TextIO

from .model import ColumnCountError, Document
from .renderers import TargetLanguage, get_renderer

logger = logging.getLogger(__name__)


def iter_document(renderer: TargetLanguage, document: Document) -> Iterator[str]:
    """Yield the rendered pieces of ``document`` in output order.

    The document is validated before the first piece is produced, so a
    malformed document yields nothing.

    Raises:
        ColumnCountError: If a row does not match the header.
    """
    try:
        document.validate()
    except ColumnCountError as exc:
        logger.error("Cannot render %r as %s: %s", document.title, renderer.ext, exc)
        raise

    logger.debug(
        "Rendering %r as %s (%d column(s), %d row(s))",
        document.title, renderer.ext, len(document.columns), len(document.rows),
    )
    return _pieces(renderer, document)


def _pieces(renderer: TargetLanguage, document: Document) -> Iterator[str]:
    yield renderer.document_start(document.title, document.style_rules)
    yield renderer.header1(document.title)
    yield renderer.table_header(document.notes_label, *document.columns)
    for row in document.rows:
        yield renderer.table_row(row.notes, *row.columns)
    yield renderer.table_end()
    yield renderer.document_end()


def render_document(renderer: TargetLanguage, document: Document) -> str:
    """Render ``document`` to a single string."""
    return "".join(iter_document(renderer, document))


def write_document(renderer: TargetLanguage, document: Document, stream: TextIO) -> int:
    """Write ``document`` to an open text stream.

    Returns:
        The number of characters written.
    """
    written = 0
    for piece in iter_document(renderer, document):
        if piece:
            stream.write(piece)
            written += len(piece)
    return written


def render_formats(document: Document, formats: Iterable[str]) -> Dict[str, str]:
    """Render ``document`` once per format key.

    Returns:
        Mapping of file extension to rendered text, in ``formats`` order.
    """
    outputs: Dict[str, str] = {}
    for key in formats:
        renderer = get_renderer(key)
        outputs[renderer.ext] = render_document(renderer, document)
    return outputs
