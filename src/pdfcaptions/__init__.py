"""pdfcaptions: figure and table caption anchors from text layouts."""

from .config import (
    CaptionConfig,
    LanguageCues,
    ReportConfig,
    ResolveConfig,
    ScanConfig,
    load_config,
)
from .driver import extract_captions_from_text
from .types import CaptionScanResult, CaptionStart, FigureType

__all__ = [
    "CaptionConfig",
    "CaptionScanResult",
    "CaptionStart",
    "FigureType",
    "LanguageCues",
    "ReportConfig",
    "ResolveConfig",
    "ScanConfig",
    "extract_captions_from_text",
    "load_config",
]
