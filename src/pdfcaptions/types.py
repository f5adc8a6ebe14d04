"""Public data structures for the caption scanner."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List

if TYPE_CHECKING:  # pragma: no cover
    from .layout.model import TextWord


# Positive for figures, negated for tables. Figure 0 and Table 0 share id 0.
FigureId = int


class FigureType(str, Enum):
    FIGURE = "Figure"
    TABLE = "Table"


@dataclass(slots=True)
class CaptionStart:
    """Anchor word of an accepted caption.

    ``word`` is a reference into the caller's layout tree, not a copy.
    """

    page: int
    number: int
    figure_type: FigureType
    word: "TextWord"


@dataclass(slots=True)
class FilterApplication:
    """One successful filter application during disambiguation."""

    name: str
    remaining: int


@dataclass(slots=True)
class ScanStats:
    candidates: int = 0
    identities: int = 0
    accepted: int = 0
    dropped: int = 0

    def _asdict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(slots=True)
class CaptionScanResult:
    """Aggregate output from :func:`extract_captions_from_text`."""

    captions: Dict[int, List[CaptionStart]]
    diagnostics: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    trace: List[FilterApplication] = field(default_factory=list)
    stats: ScanStats = field(default_factory=ScanStats)

    def iter_captions(self):
        for page in sorted(self.captions):
            yield from self.captions[page]
