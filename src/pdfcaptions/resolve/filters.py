"""Heuristic filters used to disambiguate duplicate caption candidates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Tuple

from ..layout.model import word_is_bold, word_is_italic
from ..parsing.cues import CaptionCandidate
from ..types import FigureType


@dataclass(frozen=True, slots=True)
class CandidateFilter:
    """Named predicate over a candidate.

    When ``as_group`` is set the filter only applies if every group keeps at
    least one candidate passing ``predicate``.
    """

    name: str
    as_group: bool
    predicate: Callable[[CaptionCandidate], bool]

    def check(self, candidate: CaptionCandidate) -> bool:
        return bool(self.predicate(candidate))


def _has_next_word(candidate: CaptionCandidate) -> bool:
    following = candidate.word.next
    return following is not None and following.next is not None


COLON_ONLY = CandidateFilter("Colon Only", True, lambda cc: cc.colon_match)
PERIOD_ONLY = CandidateFilter("Period Only", True, lambda cc: cc.period_match)
BOLD_ONLY = CandidateFilter("Bold Only", True, lambda cc: word_is_bold(cc.word))
ITALIC_ONLY = CandidateFilter("Italic Only", True, lambda cc: word_is_italic(cc.word))
ALL_CAPS_FIGURES_ONLY = CandidateFilter(
    "Only All Caps Figures", True, lambda cc: cc.figure_type is FigureType.TABLE or cc.caps
)
ABBREVIATED_FIGURES_ONLY = CandidateFilter(
    "Only Abbreviated Figures", True, lambda cc: cc.figure_type is FigureType.TABLE or cc.abbreviated
)
NO_NEXT_WORD = CandidateFilter("No Next Word", True, lambda cc: not _has_next_word(cc))
BLOCK_START_ONLY = CandidateFilter("Block Start Only", False, lambda cc: cc.block_start)
LINE_START_ONLY = CandidateFilter("Line Start Only", False, lambda cc: cc.line_start)
NEXT_WORD_ONLY = CandidateFilter("Next Word Only", False, _has_next_word)

DEFAULT_FILTERS: Tuple[CandidateFilter, ...] = (
    COLON_ONLY,
    PERIOD_ONLY,
    BOLD_ONLY,
    ITALIC_ONLY,
    ALL_CAPS_FIGURES_ONLY,
    ABBREVIATED_FIGURES_ONLY,
    NO_NEXT_WORD,
    BLOCK_START_ONLY,
    LINE_START_ONLY,
    NEXT_WORD_ONLY,
)

FILTERS_BY_NAME: Dict[str, CandidateFilter] = {flt.name: flt for flt in DEFAULT_FILTERS}


def filters_from_names(names: Iterable[str]) -> Tuple[CandidateFilter, ...]:
    """Resolve configured filter names, keeping their order."""

    resolved = []
    for name in names:
        try:
            resolved.append(FILTERS_BY_NAME[name])
        except KeyError:
            raise ValueError(f"Unknown caption filter: {name!r}") from None
    return tuple(resolved)
