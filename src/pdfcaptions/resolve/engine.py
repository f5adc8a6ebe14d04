"""Greedy fixed-point disambiguation of caption candidate groups.

Filters are tried in priority order. The first one that prunes something
without emptying any group is applied, and the search restarts from the top.
Resolution stops once no group holds more than one candidate or a full pass
over the filters changes nothing.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from ..parsing.collector import CandidateCollection, count_candidates
from ..types import FilterApplication
from .filters import DEFAULT_FILTERS, CandidateFilter

LOGGER = logging.getLogger(__name__)


def has_effect(candidate_filter: CandidateFilter, collection: CandidateCollection) -> bool:
    """Whether applying ``candidate_filter`` would prune anything."""

    removes_anything = False
    for group in collection.values():
        passing = sum(1 for candidate in group if candidate_filter.check(candidate))
        if passing == 0 and candidate_filter.as_group:
            return False
        if 1 <= passing < len(group):
            removes_anything = True
    return removes_anything


def apply_filter(candidate_filter: CandidateFilter, collection: CandidateCollection) -> bool:
    """Prune every duplicate group with ``candidate_filter``; return whether it applied."""

    if not has_effect(candidate_filter, collection):
        return False
    for figure_id, group in collection.items():
        if len(group) <= 1:
            continue
        survivors = [candidate for candidate in group if candidate_filter.check(candidate)]
        # a group is never emptied; in-order removal stops at its final member
        collection[figure_id] = survivors or group[-1:]
    return True


def any_duplicates(collection: CandidateCollection) -> bool:
    return any(len(group) > 1 for group in collection.values())


def resolve(
    collection: CandidateCollection,
    filters: Sequence[CandidateFilter] = DEFAULT_FILTERS,
    on_apply: Optional[Callable[[FilterApplication], None]] = None,
) -> List[FilterApplication]:
    """Disambiguate ``collection`` in place and return the applied filters."""

    trace: List[FilterApplication] = []
    tried_all = False
    while any_duplicates(collection) and not tried_all:
        tried_all = True
        for candidate_filter in filters:
            if apply_filter(candidate_filter, collection):
                step = FilterApplication(name=candidate_filter.name, remaining=count_candidates(collection))
                trace.append(step)
                LOGGER.debug("Applied filter %s (%d remain)", step.name, step.remaining)
                if on_apply is not None:
                    on_apply(step)
                tried_all = False
                break
    return trace
