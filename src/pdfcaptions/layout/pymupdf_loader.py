"""Build layout trees from PyMuPDF text dictionaries."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List

try:  # pragma: no cover - PyMuPDF is optional during unit tests.
    import fitz  # type: ignore
except Exception:  # pragma: no cover
    fitz = None  # type: ignore

from .model import TextBlock, TextFlow, TextLine, TextPage, TextWord

LOGGER = logging.getLogger(__name__)

_FLAG_ITALIC = 2
_FLAG_BOLD = 16
_BOLD_FONT = re.compile(r"bold|black|heavy", re.IGNORECASE)
_ITALIC_FONT = re.compile(r"italic|oblique", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


def _span_style(span: Dict[str, Any]) -> tuple[bool, bool]:
    flags = int(span.get("flags", 0) or 0)
    font = str(span.get("font", "") or "")
    bold = bool(flags & _FLAG_BOLD) or bool(_BOLD_FONT.search(font))
    italic = bool(flags & _FLAG_ITALIC) or bool(_ITALIC_FONT.search(font))
    return bold, italic


def _line_words(line: Dict[str, Any]) -> List[TextWord]:
    words: List[TextWord] = []
    glued = False
    for span in line.get("spans", []):
        text = span.get("text", "") or ""
        if not text:
            continue
        bold, italic = _span_style(span)
        pieces = _WHITESPACE.split(text)
        for idx, piece in enumerate(pieces):
            if not piece:
                continue
            if idx == 0 and glued and words:
                # fragment continues the previous span's word
                previous = words[-1]
                previous.text += piece
                previous.bold = previous.bold and bold
                previous.italic = previous.italic and italic
                continue
            words.append(TextWord(piece, bold=bold, italic=italic))
        glued = not text[-1].isspace()
    return words


def page_from_dict(page_dict: Dict[str, Any], index: int) -> TextPage:
    """Convert ``page.get_text("dict")`` output into a single-flow :class:`TextPage`."""

    blocks: List[TextBlock] = []
    for raw_block in page_dict.get("blocks", []):
        if raw_block.get("type", 0) != 0:
            continue
        lines = []
        for raw_line in raw_block.get("lines", []):
            words = _line_words(raw_line)
            if words:
                lines.append(TextLine(words))
        if lines:
            blocks.append(TextBlock(lines))
    return TextPage(flows=[TextFlow(blocks)], index=index)


def load_pages(document: "fitz.Document") -> List[TextPage]:
    if fitz is None:  # pragma: no cover - handled in CLI/runtime.
        raise RuntimeError("PyMuPDF is required to load PDF layouts.")

    pages: List[TextPage] = []
    for page_index in range(document.page_count):
        page = document.load_page(page_index)
        pages.append(page_from_dict(page.get_text("dict"), page_index))
    LOGGER.debug("Loaded %d pages", len(pages))
    return pages
