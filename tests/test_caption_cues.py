from __future__ import annotations

import pytest

from pdfcaptions.layout.model import TextLine, TextWord
from pdfcaptions.parsing.cues import match_candidate, parse_caption_number, roman_to_int
from pdfcaptions.types import FigureType


def make_line(*texts: str) -> TextLine:
    return TextLine([TextWord(text) for text in texts])


def match(*texts: str, **kwargs):
    line = make_line(*texts)
    return match_candidate(line.words[0], 0, True, True, **kwargs)


@pytest.mark.parametrize("numeral, value", [("III", 3), ("IX", 9), ("XIV", 14), ("I", 1)])
def test_roman_to_int(numeral, value):
    assert roman_to_int(numeral) == value


def test_parse_caption_number_rejects_mixed_core():
    assert parse_caption_number("12") == 12
    assert parse_caption_number("XII") == 12
    assert parse_caption_number("1V") is None


def test_figure_with_period():
    candidate = match("Figure", "1.", "Results")
    assert candidate is not None
    assert candidate.figure_type is FigureType.FIGURE
    assert candidate.number == 1
    assert candidate.period_match and not candidate.colon_match
    assert not candidate.caps and not candidate.abbreviated
    assert candidate.figure_id == 1


def test_table_with_colon_has_negative_id():
    candidate = match("Table", "4:")
    assert candidate.figure_type is FigureType.TABLE
    assert candidate.colon_match and not candidate.period_match
    assert candidate.figure_id == -4


def test_abbreviated_and_caps_forms():
    abbreviated = match("Fig.", "3")
    assert abbreviated.abbreviated and not abbreviated.caps
    assert not abbreviated.period_match and not abbreviated.colon_match

    caps = match("FIGURE", "IV.")
    assert caps.caps and not caps.abbreviated
    assert caps.number == 4

    both = match("FIG", "2")
    assert both.caps and both.abbreviated


def test_prefixed_numbers():
    assert match("Figure", "A.2:").number == 2
    assert match("Figure", "3-7").number == 7
    assert match("Table", "B5").number == 5


def test_rejects_non_captions():
    assert match("Figure") is None
    assert match("Figure", "one") is None
    assert match("Figure", "1V") is None
    assert match("Figures", "1") is None
    assert match("figure", "1") is None
    assert match("Figure", "-1") is None


def test_tables_only_skips_figures():
    assert match("Figure", "1", tables_only=True) is None
    assert match("Table", "1", tables_only=True).figure_type is FigureType.TABLE


def test_german_cues():
    candidate = match("Abbildung", "4.", language="de")
    assert candidate.figure_type is FigureType.FIGURE
    assert candidate.number == 4
    assert candidate.period_match

    abbreviated = match("Abb.", "5", language="de")
    assert abbreviated.abbreviated

    table = match("Tabelle", "II:", language="de")
    assert table.figure_type is FigureType.TABLE
    assert table.number == 2


def test_french_table_form_only():
    assert match("Tableau", "2:", language="fr").figure_type is FigureType.TABLE
    assert match("Table", "2:", language="fr") is None


def test_unknown_language_falls_back_to_english():
    assert match("Table", "2", language="xx").figure_type is FigureType.TABLE
    assert match("Tabelle", "2", language="xx") is None


def test_figure_zero_and_table_zero_share_an_id():
    assert match("Figure", "0").figure_id == 0
    assert match("Table", "0").figure_id == 0


def test_trailing_newline_is_not_a_match():
    assert match("Figure", "3\n") is None
    assert match("Figure\n", "3") is None
    assert match("Fig.", "3").abbreviated
