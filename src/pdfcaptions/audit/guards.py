"""Guardrail assertions for resolved candidate collections."""

from __future__ import annotations

import logging

from ..parsing.collector import CandidateCollection

LOGGER = logging.getLogger(__name__)


def check_collection(collection: CandidateCollection) -> None:
    _assert_no_empty_groups(collection)
    _assert_ids_consistent(collection)
    _log_group_sizes(collection)


def _assert_no_empty_groups(collection: CandidateCollection) -> None:
    for figure_id, group in collection.items():
        if not group:
            raise AssertionError(f"Candidate group {figure_id} was emptied during resolution")


def _assert_ids_consistent(collection: CandidateCollection) -> None:
    for figure_id, group in collection.items():
        for candidate in group:
            if candidate.figure_id != figure_id:
                raise AssertionError(f"{candidate.label} filed under id {figure_id}")


def _log_group_sizes(collection: CandidateCollection) -> None:
    sizes = {figure_id: len(group) for figure_id, group in collection.items() if len(group) > 1}
    if sizes:
        LOGGER.debug("unresolved group sizes: %s", sizes)
