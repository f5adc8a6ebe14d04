from __future__ import annotations

from pdfcaptions.config import LanguageCues, translations_with
from pdfcaptions.layout.model import page_from_words
from pdfcaptions.parsing.collector import collect_candidates, count_candidates
from pdfcaptions.types import FigureType


def test_groups_sightings_by_figure_id():
    first = page_from_words(
        [
            [["Figure", "1.", "Results"], ["see", "Figure", "1", "above"]],
            [["Table", "2:", "Data"]],
        ]
    )
    second = page_from_words([[["Figure", "3.", "More"]]], index=1)

    collection = collect_candidates([first, second])

    assert list(collection) == [1, -2, 3]
    assert count_candidates(collection) == 4

    lead, inline = collection[1]
    assert lead.line_start and lead.block_start
    assert not inline.line_start and not inline.block_start
    assert [lead.order, inline.order] == [0, 1]

    (table,) = collection[-2]
    assert table.figure_type is FigureType.TABLE
    assert table.line_start and table.block_start
    assert collection[3][0].page == 1


def test_block_start_covers_whole_first_line():
    page = page_from_words([[["In", "Figure", "2", "we"], ["Table", "1", "lists"]]])
    collection = collect_candidates([page])
    (figure,) = collection[2]
    (table,) = collection[-1]
    assert figure.block_start and not figure.line_start
    assert not table.block_start and table.line_start


def test_word_at_line_end_has_no_successor():
    page = page_from_words([[["see", "Figure"], ["1", "for"]]])
    assert collect_candidates([page]) == {}


def test_figure_and_table_zero_collide():
    page = page_from_words([[["Figure", "0."]], [["Table", "0:"]]])
    collection = collect_candidates([page])
    assert list(collection) == [0]
    assert [cc.figure_type for cc in collection[0]] == [FigureType.FIGURE, FigureType.TABLE]


def test_substituted_translation_table():
    translations = translations_with({"pl": LanguageCues(figure=r"Rysunek|RYS\.?|Rys\.?", table=r"Tabela|TABELA")})
    page = page_from_words([[["Rys.", "2.", "Schemat"]], [["Tabela", "1:", "Dane"]]])
    collection = collect_candidates([page], language="pl", translations=translations)
    assert collection[2][0].abbreviated
    assert collection[-1][0].figure_type is FigureType.TABLE
