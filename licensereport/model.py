"""Data model for a tabular report.

A :class:`Document` is the complete input of one report: a title, the
column labels of its single table, the label of the trailing notes
column and the data rows.  The renderers never look at these classes;
they only receive strings.  Keeping the row shape consistent is the
caller's job, and :meth:`Document.validate` is how the assembly helpers
in :mod:`licensereport.report` do it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence


class ColumnCountError(ValueError):
    """A row does not have as many columns as the table header."""

    def __init__(self, index: int, expected: int, actual: int) -> None:
        super().__init__(
            f"row {index} has {actual} column(s), header has {expected}"
        )
        self.index = index
        self.expected = expected
        self.actual = actual


@dataclass(frozen=True)
class Row:
    """One data row: column values in header order plus free-text notes."""

    columns: Sequence[str]
    notes: Optional[str] = None


@dataclass
class Document:
    """A titled report holding one table."""

    title: str
    columns: Sequence[str]
    rows: List[Row] = field(default_factory=list)
    notes_label: str = "Notes"
    style_rules: Optional[str] = None

    def add_row(self, notes: Optional[str], *columns: str) -> Row:
        row = Row(columns=tuple(columns), notes=notes)
        self.rows.append(row)
        return row

    def validate(self) -> None:
        """Check that every row matches the header column count.

        Raises:
            ColumnCountError: For the first row that does not.
        """
        expected = len(self.columns)
        for index, row in enumerate(self.rows):
            if len(row.columns) != expected:
                raise ColumnCountError(index, expected, len(row.columns))
