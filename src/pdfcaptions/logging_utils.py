"""Structured logging helpers for the caption scanner."""
from __future__ import annotations

import logging
from typing import Any, Dict

import orjson


def configure_logger() -> logging.Logger:
    logger = logging.getLogger("pdfcaptions.events")
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger


def log_event(event: str, **payload: Any) -> None:
    logger = configure_logger()
    data: Dict[str, Any] = {"event": event, **payload}
    logger.info(orjson.dumps(data, option=orjson.OPT_NON_STR_KEYS).decode("utf-8"))
