"""Gather caption candidates from a layout tree, grouped by figure id."""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Sequence

from ..config import DEFAULT_TRANSLATIONS, LanguageCues
from ..layout.model import TextPage
from ..types import FigureId
from .cues import CaptionCandidate, match_candidate

LOGGER = logging.getLogger(__name__)

# Maps ids -> every candidate sharing that id, in document order.
CandidateCollection = Dict[FigureId, List[CaptionCandidate]]


def collect_candidates(
    pages: Sequence[TextPage],
    tables_only: bool = False,
    language: str = "en",
    translations: Mapping[str, LanguageCues] = DEFAULT_TRANSLATIONS,
) -> CandidateCollection:
    """Walk every word of ``pages`` once and group the caption candidates found."""

    collection: CandidateCollection = {}
    order = 0
    for page_index, page in enumerate(pages):
        for flow in page.flows:
            for block in flow.blocks:
                block_start = True
                for line in block.lines:
                    line_start = True
                    for word in line.words:
                        candidate = match_candidate(
                            word,
                            page_index,
                            line_start,
                            block_start,
                            tables_only=tables_only,
                            language=language,
                            translations=translations,
                        )
                        if candidate is not None:
                            candidate.order = order
                            order += 1
                            collection.setdefault(candidate.figure_id, []).append(candidate)
                        line_start = False
                    block_start = False
    LOGGER.debug("Collected %d ids from %d pages", len(collection), len(pages))
    return collection


def count_candidates(collection: CandidateCollection) -> int:
    return sum(len(group) for group in collection.values())
