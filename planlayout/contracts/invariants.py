"""
Invariants Module — Semantic Correctness Checks for Finished Layouts.

Shape checks (bounds) and meaning checks (no two items of one overlap group
share horizontal space) over a placement table and the items it was built
from.

- Invariants run in PRODUCTION (add_placing), not just tests
- add_placing logs violations as warnings unless strict mode is on
- Items grouped in different greedy passes can legitimately share a range,
  so check_clusters_disjoint can fail on ordinary calendars
"""

from collections.abc import Callable, Mapping, Sequence

from planlayout.errors import InvariantViolation
from planlayout.models import Overlap, TimeBlock
from planlayout.overlap.clustering import get_items_overlapping_item_and_each_other
from planlayout.task_utils import get_end_minutes

EndGetter = Callable[[TimeBlock], int]


# =============================================================================
# INVARIANT FUNCTIONS
# =============================================================================


def check_table_covers_items(
    items: Sequence[TimeBlock],
    table: Mapping[str, Overlap],
    get_end: EndGetter = get_end_minutes,
) -> None:
    """
    INVARIANT: Every item has a slot record.

    Raises:
        InvariantViolation: If any item id is missing from the table
    """
    missing = [item.id for item in items if item.id not in table]

    if missing:
        raise InvariantViolation(
            f"Items without a slot record: {missing}. Count: {len(missing)}"
        )


def check_placement_bounds(
    items: Sequence[TimeBlock],
    table: Mapping[str, Overlap],
    get_end: EndGetter = get_end_minutes,
) -> None:
    """
    INVARIANT: 0 <= start, 1 <= span, start + span <= columns.

    Raises:
        InvariantViolation: If any record falls outside its own track
    """
    out_of_bounds = []
    for item_id, overlap in table.items():
        if (
            overlap.columns < 1
            or overlap.span < 1
            or overlap.start < 0
            or overlap.start + overlap.span > overlap.columns
        ):
            out_of_bounds.append(
                f"{item_id}=({overlap.start}, {overlap.span}, {overlap.columns})"
            )

    if out_of_bounds:
        raise InvariantViolation(f"Slot records out of bounds: {out_of_bounds}")


def check_clusters_disjoint(
    items: Sequence[TimeBlock],
    table: Mapping[str, Overlap],
    get_end: EndGetter = get_end_minutes,
) -> None:
    """
    INVARIANT: Members of one overlap group never share horizontal space.

    Ranges [start/columns, (start+span)/columns) are compared as exact
    fractions, so records with different column counts are comparable.

    Raises:
        InvariantViolation: If two group members' ranges intersect
    """
    collisions = set()

    for item in items:
        group = get_items_overlapping_item_and_each_other(item, items, get_end)
        # zero-column records are reported by check_placement_bounds
        placed = [
            member
            for member in group
            if member.id in table and table[member.id].columns >= 1
        ]

        for i, a in enumerate(placed):
            for b in placed[i + 1 :]:
                if a.id == b.id:
                    continue
                first, second = table[a.id], table[b.id]
                if first.offset < second.end_offset and second.offset < first.end_offset:
                    collisions.add(tuple(sorted((a.id, b.id))))

    if collisions:
        raise InvariantViolation(
            f"Overlapping items share horizontal space: {sorted(collisions)}"
        )


# =============================================================================
# ENFORCEMENT
# =============================================================================

ALL_INVARIANTS = [
    check_table_covers_items,
    check_placement_bounds,
    check_clusters_disjoint,
]


def enforce_invariants(
    items: Sequence[TimeBlock],
    table: Mapping[str, Overlap],
    get_end: EndGetter = get_end_minutes,
) -> list[str]:
    """
    Run all invariants. Returns list of violations.

    Args:
        items: The items the table was computed from
        table: The finished placement table

    Returns:
        List of violation messages. Empty = pass.
    """
    violations = []

    for invariant in ALL_INVARIANTS:
        try:
            invariant(items, table, get_end)
        except InvariantViolation as e:
            violations.append(f"INVARIANT_VIOLATION: {str(e)}")

    return violations


def enforce_invariants_strict(
    items: Sequence[TimeBlock],
    table: Mapping[str, Overlap],
    get_end: EndGetter = get_end_minutes,
) -> None:
    """
    Strict enforcement — raises on first violation.

    Raises:
        InvariantViolation: If any invariant fails
    """
    for invariant in ALL_INVARIANTS:
        invariant(items, table, get_end)
