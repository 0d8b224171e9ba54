"""Report settings.

:class:`ReportConfig` collects the knobs a caller may expose to users:
the title, optional HTML style rules, the label of the notes column and
the list of output formats to produce.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from .model import Document, Row
from .renderers import TargetLanguage, get_renderer, renderer_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportConfig:
    """Settings shared by every format of one report."""

    title: str = "Licenses"
    style_rules: Optional[str] = None
    notes_label: str = "Notes"
    formats: Tuple[str, ...] = ("markdown",)

    def __post_init__(self) -> None:
        if isinstance(self.formats, str):
            object.__setattr__(self, "formats", _split_formats(self.formats))
        else:
            object.__setattr__(self, "formats", tuple(self.formats))
        for key in self.formats:
            if key not in renderer_registry:
                raise KeyError(renderer_registry.unknown_key_message(key))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ReportConfig":
        """Build a config from a plain mapping, e.g. a parsed settings file.

        Unknown keys are ignored with a warning.  ``formats`` may be a
        sequence or a comma separated string.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            logger.warning("Ignoring unknown report settings: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in mapping.items() if k in known})

    def renderers(self) -> List[TargetLanguage]:
        """Return the renderers for :attr:`formats`, in order."""
        return [get_renderer(key) for key in self.formats]

    def document(self, columns: Sequence[str], rows: Iterable[Row] = ()) -> Document:
        """Create a :class:`Document` carrying this config's settings."""
        return Document(
            title=self.title,
            columns=tuple(columns),
            rows=list(rows),
            notes_label=self.notes_label,
            style_rules=self.style_rules,
        )


def _split_formats(value: str) -> Tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())
