"""
Fractional slot packer.

Places the not-yet-placed members of an overlap group next to the members
that already have a slot record. Widths are exact fractions of the track:
whatever the placed members do not claim is split evenly among the new ones.

Invariants:
- Records already in the table are never changed or rescaled
- A new item never extends into a slot taken by another group member
- A new item never gets more than its fair share of the free width
"""

import logging
import math
from collections.abc import Mapping, Sequence
from enum import Enum
from fractions import Fraction
from typing import NoReturn

from planlayout.errors import InvariantViolation
from planlayout.models import Overlap, TimeBlock

logger = logging.getLogger(__name__)


class SlotState(Enum):
    EMPTY = "empty"
    TAKEN = "taken"


def _fail(message: str) -> NoReturn:
    logger.error(message)
    raise InvariantViolation(message)


def _first_index(slots: list[SlotState], state: SlotState, after: int = -1) -> int | None:
    for i in range(after + 1, len(slots)):
        if slots[i] is state:
            return i
    return None


def _fill(slots: list[SlotState], start: int, end: int) -> None:
    for i in range(start, min(end, len(slots))):
        slots[i] = SlotState.TAKEN


def compute_overlap_for_group(
    overlap_group: Sequence[TimeBlock],
    previous_lookup: Mapping[str, Overlap],
    strict: bool = True,
) -> dict[str, Overlap]:
    """
    Extend a placement table with records for the unplaced group members.

    Args:
        overlap_group: Items of one overlap group, sorted by start.
        previous_lookup: Placement table so far. Not modified.
        strict: Raise when the placed members do not fit the new column grid.
            Otherwise log a warning and place the new members anyway: on a
            grid every placed record divides evenly, or on a fresh track when
            the placed members leave no room at all.

    Returns:
        New table: every record of previous_lookup plus one record per
        member that had none.

    Raises:
        InvariantViolation: In strict mode, if the placed members leave no
            room or their records cannot be laid out on the new column grid.
    """
    new_lookup = dict(previous_lookup)

    placed_previously = [item for item in overlap_group if item.id in new_lookup]
    to_be_placed = [item for item in overlap_group if item.id not in new_lookup]

    if not to_be_placed:
        return new_lookup

    occupying = placed_previously
    fraction_of_placed = sum(
        (new_lookup[item.id].fraction for item in occupying), Fraction(0)
    )

    if fraction_of_placed >= 1:
        message = (
            f"Group already fills {fraction_of_placed} of the track, "
            f"no room for {[item.id for item in to_be_placed]}"
        )
        if strict:
            _fail(message)
        logger.warning(f"{message}; placing them on a fresh track")
        occupying = []
        fraction_of_placed = Fraction(0)

    fraction_for_new_items = Fraction(1) - fraction_of_placed
    fraction_for_each_new_item = fraction_for_new_items / len(to_be_placed)

    columns_for_new_group = fraction_for_each_new_item.denominator
    new_item_inherent_span = fraction_for_each_new_item.numerator

    misaligned = [
        item
        for item in occupying
        if columns_for_new_group % new_lookup[item.id].columns
    ]
    if misaligned:
        first = misaligned[0]
        message = (
            f"Cannot rescale {first.id} from {new_lookup[first.id].columns} to "
            f"{columns_for_new_group} columns"
        )
        if strict:
            _fail(message)
        grid = math.lcm(
            columns_for_new_group, *(new_lookup[item.id].columns for item in occupying)
        )
        logger.warning(f"{message}; using {grid} columns")
        new_item_inherent_span *= grid // columns_for_new_group
        columns_for_new_group = grid

    slots = [SlotState.EMPTY] * columns_for_new_group

    for item in occupying:
        previous = new_lookup[item.id]

        scale = columns_for_new_group // previous.columns
        scaled_start = scale * previous.start
        scaled_span = scale * previous.span
        _fill(slots, scaled_start, scaled_start + scaled_span)

    for item in to_be_placed:
        first_free = _first_index(slots, SlotState.EMPTY)
        if first_free is None:
            _fail(f"No free slot left for {item.id} in {columns_for_new_group} columns")

        next_taken = _first_index(slots, SlotState.TAKEN, after=first_free)

        if next_taken is None:
            span = new_item_inherent_span
        else:
            span = min(new_item_inherent_span, next_taken - first_free)

        _fill(slots, first_free, first_free + span)

        new_lookup[item.id] = Overlap(
            start=first_free, span=span, columns=columns_for_new_group
        )

    logger.debug(
        f"Packed group of {len(overlap_group)}: {len(placed_previously)} placed, "
        f"{len(to_be_placed)} new at {new_item_inherent_span}/{columns_for_new_group}"
    )

    return new_lookup
