"""Base target language and renderer registry.

This module defines the abstract :class:`TargetLanguage` contract that
every report format implements, the ``renderer_registry`` used for
plugin-style registration of the concrete formats, and a couple of
null-safe text helpers shared by the implementations.

A report is produced by calling the operations in a fixed order::

    document_start -> header1 -> table_header -> table_row* -> table_end
    -> document_end

and concatenating the returned strings.  Renderers hold no state, so a
single instance per format can be shared freely between threads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from ..registry import Registry

# Registry for target language implementations
renderer_registry = Registry("renderer")


def text(value: Optional[str]) -> str:
    """Return ``value`` or the empty string when it is ``None``."""
    return "" if value is None else value


def trim(value: Optional[str]) -> str:
    """Strip surrounding whitespace, treating ``None`` as empty."""
    return text(value).strip()


def has_link(link: Optional[str]) -> bool:
    """True if ``link`` is neither ``None`` nor blank."""
    return bool(trim(link))


class TargetLanguage(ABC):
    """Abstract base class for the output formats of a report.

    Column values are inserted verbatim by the markup formats because
    callers may already have passed them through :meth:`create_hyperlink`.
    The notes field is free text and is always escaped for the format.
    """

    __slots__ = ()

    #: File extension for this style of report, without the leading dot.
    ext: ClassVar[str]

    @abstractmethod
    def document_start(self, title: str, style_rules: Optional[str] = None) -> str:
        """Return the prologue of the document.

        Args:
            title: Document title.
            style_rules: Optional CSS rules.  Formats that cannot embed
                styling ignore them.
        """
        raise NotImplementedError

    @abstractmethod
    def document_end(self) -> str:
        """Return the epilogue of the document."""
        raise NotImplementedError

    @abstractmethod
    def create_hyperlink(self, link: Optional[str], content: Optional[str]) -> str:
        """Render ``content`` as a link to ``link``.

        A ``None`` or blank link renders the content alone.
        """
        raise NotImplementedError

    @abstractmethod
    def blank_line(self) -> str:
        """Return a visual spacer.  For HTML this is not an empty string."""
        raise NotImplementedError

    @abstractmethod
    def header1(self, msg: str) -> str:
        """Return the equivalent of an html ``<h1>`` heading."""
        raise NotImplementedError

    @abstractmethod
    def table_header(self, notes: str, *columns: str) -> str:
        """Return the header row of a table.

        Args:
            notes: Label of the notes column, rendered last.
            *columns: Column labels in order.
        """
        raise NotImplementedError

    @abstractmethod
    def table_row(self, notes: Optional[str], *columns: str) -> str:
        """Return one data row; ``notes`` is always the last cell."""
        raise NotImplementedError

    @abstractmethod
    def table_end(self) -> str:
        """Return the markup closing a table."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(ext={self.ext!r})"
