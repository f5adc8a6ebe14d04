"""Lightweight telemetry helpers for caption scans."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict

from ..types import CaptionScanResult, FigureType


@dataclass(slots=True)
class CaptionMetrics:
    """Simple container for scan metrics."""

    figures: int
    tables: int
    pages: int
    dropped: int
    filters_applied: Dict[str, int]


def compute_metrics(result: CaptionScanResult) -> CaptionMetrics:
    type_counter: Counter[FigureType] = Counter(caption.figure_type for caption in result.iter_captions())
    filter_counter: Counter[str] = Counter(step.name for step in result.trace)
    return CaptionMetrics(
        figures=type_counter[FigureType.FIGURE],
        tables=type_counter[FigureType.TABLE],
        pages=len(result.captions),
        dropped=result.stats.dropped,
        filters_applied=dict(filter_counter),
    )
