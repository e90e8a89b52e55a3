"""
Overlap clustering.

Groups an item with the other items that overlap it AND each other. The scan
is a single greedy pass over the input in its given order: a candidate is
admitted only if it overlaps every item admitted so far. This is not a full
transitive closure; two items that each overlap a third one but not each
other never end up in the same group.
"""

from collections.abc import Callable, Sequence

from planlayout.models import TimeBlock
from planlayout.task_utils import get_end_minutes

EndGetter = Callable[[TimeBlock], int]


def overlaps(a: TimeBlock, b: TimeBlock, get_end: EndGetter = get_end_minutes) -> bool:
    """
    True when two items share time.

    Touching items (one ends exactly when the other starts) do not overlap.
    """
    early, late = (a, b) if a.start_minutes < b.start_minutes else (b, a)

    return get_end(early) > late.start_minutes


def get_items_overlapping_item_and_each_other(
    item: TimeBlock,
    items: Sequence[TimeBlock],
    get_end: EndGetter = get_end_minutes,
) -> list[TimeBlock]:
    """
    Overlap group of `item`, sorted by start (stable for ties).

    Args:
        item: The item the group is built around. Always the first member
            before sorting.
        items: All items, scanned in input order. `item` itself is
            skipped by identity.
        get_end: End-time collaborator.

    Returns:
        List of TimeBlock objects, `item` included.
    """
    group = [item]

    for candidate in items:
        if candidate is item:
            continue

        if all(overlaps(member, candidate, get_end) for member in group):
            group.append(candidate)

    return sorted(group, key=lambda block: block.start_minutes)
