"""Command-line entrypoint for caption anchor extraction."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import orjson

from .config import load_config
from .driver import extract_captions_from_text
from .layout.pymupdf_loader import fitz, load_pages
from .telemetry.metrics import compute_metrics
from .types import CaptionScanResult

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Locate figure and table caption anchors in a PDF")
    parser.add_argument("pdf", type=Path, help="Path to the PDF document")
    parser.add_argument("--config", type=Path, default=None, help="Optional configuration YAML")
    parser.add_argument("--lang", default=None, help="Caption language code (default from config, 'en')")
    parser.add_argument("--tables-only", action="store_true", default=None, help="Only look for table captions")
    parser.add_argument("--json", action="store_true", help="Emit JSON with captions and diagnostics")
    parser.add_argument("--verbose", action="store_true", help="Log the filter trace and numbering warnings")
    parser.add_argument("--log-level", default="INFO", help="Python logging level (default: INFO)")
    return parser.parse_args(argv)


def result_to_dict(result: CaptionScanResult) -> Dict[str, Any]:
    captions: Dict[str, List[Dict[str, Any]]] = {}
    for page, starts in result.captions.items():
        captions[str(page)] = [
            {"type": start.figure_type.value, "number": start.number, "text": start.word.text} for start in starts
        ]
    return {
        "captions": captions,
        "diagnostics": list(result.diagnostics),
        "warnings": list(result.warnings),
        "stats": result.stats._asdict(),
    }


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    config = load_config(args.config) if args.config else load_config()
    if fitz is None:
        raise SystemExit("PyMuPDF is required to read PDF files.")

    with fitz.open(args.pdf) as document:
        pages = load_pages(document)
    result = extract_captions_from_text(
        pages,
        verbose=args.verbose,
        tables_only=args.tables_only,
        language=args.lang,
        config=config,
    )

    if args.json:
        print(orjson.dumps(result_to_dict(result), option=orjson.OPT_INDENT_2).decode("utf-8"))
    else:
        metrics = compute_metrics(result)
        LOGGER.info(
            "Processed %s | figures=%s | tables=%s | pages=%s | dropped=%s",
            args.pdf.name,
            metrics.figures,
            metrics.tables,
            metrics.pages,
            metrics.dropped,
        )


if __name__ == "__main__":  # pragma: no cover
    main()
