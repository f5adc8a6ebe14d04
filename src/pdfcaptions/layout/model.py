"""Minimal text layout tree: pages, flows, blocks, lines and words."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence


@dataclass(eq=False, slots=True)
class TextWord:
    """A single word. ``next`` is the following word on the same line."""

    text: str
    bold: bool = False
    italic: bool = False
    next: Optional["TextWord"] = field(default=None, repr=False)


@dataclass(eq=False, slots=True)
class TextLine:
    words: List[TextWord]

    def __post_init__(self) -> None:
        link_words(self.words)


@dataclass(eq=False, slots=True)
class TextBlock:
    lines: List[TextLine]


@dataclass(eq=False, slots=True)
class TextFlow:
    blocks: List[TextBlock]


@dataclass(eq=False, slots=True)
class TextPage:
    flows: List[TextFlow]
    index: int = 0


def link_words(words: Sequence[TextWord]) -> None:
    """Chain ``words`` so each points at its successor; the last has none."""

    for current, following in zip(words, words[1:]):
        current.next = following
    if words:
        words[-1].next = None


def word_is_bold(word: TextWord) -> bool:
    return bool(word.bold)


def word_is_italic(word: TextWord) -> bool:
    return bool(word.italic)


def page_from_words(blocks: Iterable[Iterable[Iterable[str | TextWord]]], index: int = 0) -> TextPage:
    """Build a single-flow page from ``blocks -> lines -> words``.

    Plain strings become unstyled words; :class:`TextWord` values are used as is.
    """

    built: List[TextBlock] = []
    for block in blocks:
        lines = []
        for line in block:
            words = [item if isinstance(item, TextWord) else TextWord(item) for item in line]
            lines.append(TextLine(words))
        built.append(TextBlock(lines))
    return TextPage(flows=[TextFlow(built)], index=index)
