"""
Layout Engine — side-by-side placement of day plan items.

compute_overlap folds every item's overlap group through the slot packer,
threading one placement table through the whole list. add_placing turns the
finished table into renderer geometry for each item.

Each call is a pure function of its input list: nothing is cached between
calls, and calls for different lists can run concurrently.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import replace

from planlayout.config import get_config
from planlayout.contracts.invariants import enforce_invariants, enforce_invariants_strict
from planlayout.models import HorizontalPlacing, Overlap, PlanItem, TimeBlock
from planlayout.overlap.clustering import get_items_overlapping_item_and_each_other
from planlayout.overlap.horizontal_placing import get_horizontal_placing
from planlayout.overlap.packer import compute_overlap_for_group
from planlayout.task_utils import get_end_minutes

logger = logging.getLogger(__name__)

EndGetter = Callable[[TimeBlock], int]
PlacingGetter = Callable[[Overlap | None], HorizontalPlacing]


def compute_overlap(
    items: Sequence[TimeBlock],
    get_end: EndGetter = get_end_minutes,
    strict: bool = True,
) -> dict[str, Overlap]:
    """
    Slot record for every item.

    Args:
        items: Items in input order. The order matters: it decides
            which items are grouped and who gets the leftmost slots.
        get_end: End-time collaborator.
        strict: Passed to the packer. When False, groups whose placed
            members do not fit the new column grid are realigned with a
            warning instead of raising.

    Returns:
        Placement table {item id: Overlap}.

    Raises:
        InvariantViolation: In strict mode, if the packer cannot place a
            group consistently.
    """
    overlap_lookup: dict[str, Overlap] = {}

    for item in items:
        overlap_group = get_items_overlapping_item_and_each_other(item, items, get_end)
        overlap_lookup = compute_overlap_for_group(overlap_group, overlap_lookup, strict)

    logger.debug(f"Computed slot records for {len(overlap_lookup)} items")

    return overlap_lookup


def add_placing(
    plan_items: Sequence[PlanItem],
    get_end: EndGetter = get_end_minutes,
    get_placing: PlacingGetter | None = None,
    strict: bool | None = None,
) -> list[PlanItem]:
    """
    Copy of each item with its renderer geometry in `placing`.

    The finished table is always re-checked. By default each violation is
    logged as a warning and the layout is returned. The greedy grouping can
    leave two overlapping items from different groups in the same
    horizontal range, so warnings happen on ordinary calendars.

    Args:
        plan_items: Items in input order. Not modified.
        get_end: End-time collaborator.
        get_placing: Geometry collaborator. Defaults to get_horizontal_placing.
        strict: Raise instead of warning. Defaults to configuration
            (validation.strict_invariants).

    Returns:
        New PlanItem objects, same order as the input.

    Raises:
        InvariantViolation: In strict mode, if the layout is inconsistent.
    """
    if get_placing is None:
        get_placing = get_horizontal_placing
    if strict is None:
        strict = get_config().strict_invariants

    overlap_lookup = compute_overlap(plan_items, get_end, strict)

    if strict:
        enforce_invariants_strict(plan_items, overlap_lookup, get_end)
    else:
        for violation in enforce_invariants(plan_items, overlap_lookup, get_end):
            logger.warning(violation)

    return [
        replace(plan_item, placing=get_placing(overlap_lookup.get(plan_item.id)))
        for plan_item in plan_items
    ]
