"""High-level orchestration for caption anchor extraction."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .audit.guards import check_collection
from .config import CaptionConfig
from .layout.model import TextPage
from .logging_utils import log_event
from .parsing.collector import collect_candidates, count_candidates
from .resolve.builder import build_caption_starts, numbering_warnings
from .resolve.engine import resolve
from .resolve.filters import filters_from_names
from .types import CaptionScanResult, FilterApplication, ScanStats

LOGGER = logging.getLogger(__name__)


def extract_captions_from_text(
    pages: Sequence[TextPage],
    verbose: bool = False,
    tables_only: Optional[bool] = None,
    language: Optional[str] = None,
    *,
    config: CaptionConfig | None = None,
) -> CaptionScanResult:
    """Find one anchor word per figure/table caption in ``pages``.

    ``tables_only`` and ``language`` override the configured values when given.
    The returned captions hold references into ``pages``.
    """

    cfg = config or CaptionConfig()
    verbose = verbose or cfg.report.verbose
    tables_only = cfg.scan.tables_only if tables_only is None else tables_only
    language = language or cfg.scan.language
    filters = filters_from_names(cfg.resolve.filters)
    emit_events = verbose and cfg.report.log_events
    report = LOGGER.info if verbose else LOGGER.debug

    report("Scanning for captions...")
    candidates = collect_candidates(pages, tables_only=tables_only, language=language, translations=cfg.scan.translations)
    stats = ScanStats(candidates=count_candidates(candidates), identities=len(candidates))
    report("Collected %d candidates for %d detected captions", stats.candidates, stats.identities)
    if emit_events:
        log_event("captions_collected", candidates=stats.candidates, identities=stats.identities, language=language)

    def _on_apply(step: FilterApplication) -> None:
        report("Applied filter %s (%d remain)", step.name, step.remaining)
        if emit_events:
            log_event("caption_filter_applied", filter=step.name, remaining=step.remaining)

    trace = resolve(candidates, filters, on_apply=_on_apply)
    check_collection(candidates)

    warnings = numbering_warnings(candidates, cfg.report.max_kept)
    if verbose:
        for message in warnings:
            LOGGER.warning("Warning: %s!", message)

    built = build_caption_starts(candidates, max_kept=cfg.report.max_kept)
    stats.accepted = built.accepted
    stats.dropped = built.dropped
    for message in built.diagnostics:
        report(message)
    if emit_events:
        log_event("captions_built", **stats._asdict(), pages=sorted(built.captions))
    report("Done parsing captions.")

    return CaptionScanResult(
        captions=built.captions,
        diagnostics=built.diagnostics,
        warnings=warnings,
        trace=trace,
        stats=stats,
    )
