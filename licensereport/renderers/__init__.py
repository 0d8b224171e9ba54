"""Target language implementations for report output.

This package contains the available output formats:

- markdown: pipe tables with ``<notextile>`` notes
- html: a plain HTML page with a borderless table
- csv: comma separated values, rows only
- confluence: Confluence wiki markup

Every format is registered in ``renderer_registry``.  The built-in
formats are exposed as one shared, stateless instance each; formats
registered later are instantiated on lookup.
"""

from types import MappingProxyType
from typing import Mapping

from .base import TargetLanguage, renderer_registry
from .markdown import MarkdownRenderer
from .html import HtmlRenderer
from .csv import CsvRenderer
from .confluence import ConfluenceRenderer

RENDERERS: Mapping[str, TargetLanguage] = MappingProxyType(
    {key: renderer_registry.create(key) for key in renderer_registry.keys()}
)

MARKDOWN = RENDERERS["markdown"]
HTML = RENDERERS["html"]
CSV = RENDERERS["csv"]
CONFLUENCE = RENDERERS["confluence"]


def get_renderer(key: str) -> TargetLanguage:
    """Return the renderer registered under ``key``.

    Raises:
        KeyError: If no format is registered under ``key``.
    """
    if key in RENDERERS:
        return RENDERERS[key]
    return renderer_registry.create(key)


def renderer_for_ext(ext: str) -> TargetLanguage:
    """Return the renderer producing files with extension ``ext``.

    A leading dot is ignored, so ``".md"`` and ``"md"`` are equivalent.
    """
    wanted = ext[1:] if ext.startswith(".") else ext
    for key, cls in renderer_registry.items():
        if cls.ext == wanted:
            return get_renderer(key)
    available = ", ".join(sorted(cls.ext for _, cls in renderer_registry.items()))
    raise KeyError(f"renderer: unknown extension '{ext}'. Available: {available}")


__all__ = [
    "TargetLanguage",
    "renderer_registry",
    "RENDERERS",
    "get_renderer",
    "renderer_for_ext",
    "MarkdownRenderer",
    "HtmlRenderer",
    "CsvRenderer",
    "ConfluenceRenderer",
    "MARKDOWN",
    "HTML",
    "CSV",
    "CONFLUENCE",
]
