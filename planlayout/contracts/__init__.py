"""
Contracts Module — Validation for Layout Input and Output.

This module provides:
- schema.py: Pydantic models for item documents and placement records
- invariants.py: Semantic correctness checks for finished layouts

Invariants are checked BOTH in tests AND in production (add_placing warns,
or raises in strict mode).
"""

from planlayout.errors import InvariantViolation

from .invariants import (
    ALL_INVARIANTS,
    check_clusters_disjoint,
    check_placement_bounds,
    check_table_covers_items,
    enforce_invariants,
    enforce_invariants_strict,
)
from .schema import ItemDocument, PlacementRecord, PlanItemRecord

__all__ = [
    # Schema
    "ItemDocument",
    "PlanItemRecord",
    "PlacementRecord",
    # Invariants
    "ALL_INVARIANTS",
    "check_table_covers_items",
    "check_placement_bounds",
    "check_clusters_disjoint",
    "enforce_invariants",
    "enforce_invariants_strict",
    "InvariantViolation",
]
