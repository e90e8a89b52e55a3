# Day Planner Layout - Core Library
"""
Exports for cli/main.py and other consumers.
"""

from .config import LayoutConfig, get_config, load_config, reset_config
from .contracts import InvariantViolation, enforce_invariants, enforce_invariants_strict
from .layout_engine import add_placing, compute_overlap
from .loader import load_items, parse_items
from .models import HorizontalPlacing, Overlap, PlanItem, TimeBlock
from .overlap import (
    compute_overlap_for_group,
    get_horizontal_placing,
    get_items_overlapping_item_and_each_other,
    overlaps,
)
from .task_utils import get_end_minutes

__all__ = [
    "TimeBlock",
    "PlanItem",
    "Overlap",
    "HorizontalPlacing",
    "compute_overlap",
    "add_placing",
    "overlaps",
    "get_items_overlapping_item_and_each_other",
    "compute_overlap_for_group",
    "get_horizontal_placing",
    "get_end_minutes",
    "enforce_invariants",
    "enforce_invariants_strict",
    "InvariantViolation",
    "load_items",
    "parse_items",
    "LayoutConfig",
    "get_config",
    "load_config",
    "reset_config",
]
