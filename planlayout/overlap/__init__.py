"""
Overlap Module

Side-by-side layout of day plan items that share time.

Pieces:
- clustering.py: overlap groups (greedy scan, not a transitive closure)
- packer.py: exact-fraction slot records for one group
- horizontal_placing.py: slot record -> renderer width/offset

Invariants:
- Items in one group never share horizontal space
- Each packer pass splits the whole track among its group
- Slot records, once assigned, never change
"""

from .clustering import get_items_overlapping_item_and_each_other, overlaps
from .horizontal_placing import get_horizontal_placing
from .packer import SlotState, compute_overlap_for_group

__all__ = [
    "overlaps",
    "get_items_overlapping_item_and_each_other",
    "compute_overlap_for_group",
    "SlotState",
    "get_horizontal_placing",
]
