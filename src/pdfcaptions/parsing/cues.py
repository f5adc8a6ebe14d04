"""Recognise caption openers such as ``Figure 3.`` or ``Tableau 2:``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional, Pattern, Tuple

from ..config import DEFAULT_TRANSLATIONS, ENGLISH_CUES, LanguageCues
from ..layout.model import TextWord
from ..types import FigureId, FigureType

_NUMBER_PATTERN = re.compile(r"([1-9][.\-]|[A-H][.\-]?)?([0-9IVX]+)(:|\.)?")
_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10}


@dataclass(slots=True)
class CaptionCandidate:
    """One sighting of a possible caption opener.

    ``word`` points into the caller's layout tree, which must outlive the
    candidate.
    """

    word: TextWord
    line_start: bool
    block_start: bool
    figure_type: FigureType
    number: int
    page: int
    period_match: bool
    colon_match: bool
    caps: bool
    abbreviated: bool
    order: int = 0

    @property
    def figure_id(self) -> FigureId:
        return self.number if self.figure_type is FigureType.FIGURE else -self.number

    @property
    def label(self) -> str:
        return f"{self.figure_type.value}{self.number}"


@dataclass(frozen=True, slots=True)
class _CuePatterns:
    cue: Pattern[str]
    abbreviations: Tuple[Pattern[str], ...]
    table_initial: str


def roman_to_int(text: str) -> int:
    """Convert an ``I``/``V``/``X`` numeral, reading right to left."""

    total = 0
    previous = 0
    for char in reversed(text):
        value = _ROMAN_VALUES[char]
        if value < previous:
            total -= value
        else:
            total += value
        previous = value
    return total


def parse_caption_number(core: str) -> Optional[int]:
    """Parse the numeric core of a caption label; ``None`` if it is neither decimal nor roman."""

    if core.isdigit():
        return int(core)
    if core and all(char in _ROMAN_VALUES for char in core):
        return roman_to_int(core)
    return None


@lru_cache(maxsize=64)
def _compile(cues: LanguageCues, tables_only: bool) -> _CuePatterns:
    alternation = cues.table if tables_only else f"{cues.figure}|{cues.table}"
    abbreviations = tuple(
        re.compile(entry) for entry in cues.figure.split("|") + cues.table.split("|") if r"\." in entry
    )
    return _CuePatterns(
        cue=re.compile(f"({alternation})"),
        abbreviations=abbreviations,
        table_initial=cues.table_initial,
    )


def cues_for(language: str, translations: Mapping[str, LanguageCues] = DEFAULT_TRANSLATIONS) -> LanguageCues:
    return translations.get(language, ENGLISH_CUES)


def match_candidate(
    word: TextWord,
    page: int,
    line_start: bool,
    block_start: bool,
    tables_only: bool = False,
    language: str = "en",
    translations: Mapping[str, LanguageCues] = DEFAULT_TRANSLATIONS,
) -> Optional[CaptionCandidate]:
    """Return a candidate when ``word`` and its successor form a caption opener."""

    following = word.next
    if following is None:
        return None

    patterns = _compile(cues_for(language, translations), tables_only)
    cue_match = patterns.cue.fullmatch(word.text)
    if cue_match is None:
        return None

    number_match = _NUMBER_PATTERN.fullmatch(following.text)
    if number_match is None:
        return None
    number = parse_caption_number(number_match.group(2))
    if number is None:
        return None

    cue_text = cue_match.group(1)
    terminator = number_match.group(3)
    figure_type = FigureType.TABLE if cue_text[0] == patterns.table_initial else FigureType.FIGURE
    return CaptionCandidate(
        word=word,
        line_start=line_start,
        block_start=block_start,
        figure_type=figure_type,
        number=number,
        page=page,
        period_match=terminator == ".",
        colon_match=terminator == ":",
        caps=any(char.isalpha() for char in cue_text) and cue_text.isupper(),
        abbreviated=any(pattern.fullmatch(cue_text) for pattern in patterns.abbreviations),
    )
