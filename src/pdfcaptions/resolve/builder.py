"""Turn resolved candidate groups into per-page caption starts."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List

from ..parsing.cues import CaptionCandidate
from ..parsing.collector import CandidateCollection
from ..types import CaptionStart, FigureType


@dataclass(slots=True)
class CaptionBuildResult:
    captions: Dict[int, List[CaptionStart]]
    diagnostics: List[str] = field(default_factory=list)
    accepted: int = 0
    dropped: int = 0


def build_caption_starts(collection: CandidateCollection, max_kept: int = 2) -> CaptionBuildResult:
    """Drain ``collection`` into ``{page: [CaptionStart, ...]}``.

    Groups with more than ``max_kept`` survivors are discarded as noise. Each
    page lists its captions in document order.
    """

    per_page: Dict[int, List[CaptionCandidate]] = defaultdict(list)
    diagnostics: List[str] = []
    accepted = dropped = 0
    for figure_id in list(collection):
        group = collection.pop(figure_id)
        if not group:
            continue
        label = group[0].label
        if len(group) <= max_kept:
            if len(group) > 1:
                # possibly a continued figure; later stages can reject the wrong one
                kept = "both" if len(group) == 2 else "all"
                diagnostics.append(f"{len(group)} candidates for {label}, keeping {kept}")
            for candidate in group:
                per_page[candidate.page].append(candidate)
            accepted += 1
        else:
            diagnostics.append(f"{len(group)} candidates for {label}, excluding them")
            dropped += 1

    captions: Dict[int, List[CaptionStart]] = {}
    for page in sorted(per_page):
        ordered = sorted(per_page[page], key=lambda candidate: candidate.order)
        captions[page] = [
            CaptionStart(page=cc.page, number=cc.number, figure_type=cc.figure_type, word=cc.word) for cc in ordered
        ]
    return CaptionBuildResult(captions=captions, diagnostics=diagnostics, accepted=accepted, dropped=dropped)


def numbering_warnings(collection: CandidateCollection, max_kept: int = 2) -> List[str]:
    """Flag figure/table sequences whose highest number disagrees with the accepted count."""

    highest = {FigureType.FIGURE: 0, FigureType.TABLE: 0}
    counts = {FigureType.FIGURE: 0, FigureType.TABLE: 0}
    for group in collection.values():
        if not group:
            continue
        figure_type = group[0].figure_type
        highest[figure_type] = max(highest[figure_type], group[0].number)
        if len(group) <= max_kept:
            counts[figure_type] += 1

    warnings: List[str] = []
    for figure_type in (FigureType.TABLE, FigureType.FIGURE):
        if highest[figure_type] != counts[figure_type]:
            name = figure_type.value.lower()
            warnings.append(
                f"Max {name} number found was {highest[figure_type]}, "
                f"but only found {counts[figure_type]} {name} captions"
            )
    return warnings
