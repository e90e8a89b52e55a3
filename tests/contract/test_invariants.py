"""
Invariant Tests — Validate semantic correctness checks on finished layouts.

- Invariants run in PRODUCTION (add_placing), not just tests
- Cross-check: records with different column counts compare as fractions
"""

import pytest

from planlayout.contracts.invariants import (
    InvariantViolation,
    check_clusters_disjoint,
    check_placement_bounds,
    check_table_covers_items,
    enforce_invariants,
    enforce_invariants_strict,
)
from planlayout.layout_engine import compute_overlap
from planlayout.models import Overlap, PlanItem


def item(item_id, start, end):
    return PlanItem(id=item_id, start_minutes=start, end_minutes=end)


class TestTableCoversItems:
    """Test every item has a slot record."""

    def test_passes_when_all_present(self):
        items = [item("a", 0, 30)]

        check_table_covers_items(items, {"a": Overlap(0, 1, 1)})

    def test_fails_on_missing_item(self):
        items = [item("a", 0, 30), item("b", 60, 90)]

        with pytest.raises(InvariantViolation, match="without a slot record"):
            check_table_covers_items(items, {"a": Overlap(0, 1, 1)})


class TestPlacementBounds:
    """Test slot records stay inside their own track."""

    def test_passes_for_valid_records(self):
        check_placement_bounds([], {"a": Overlap(0, 1, 1), "b": Overlap(4, 3, 8)})

    @pytest.mark.parametrize(
        "overlap",
        [
            Overlap(start=-1, span=1, columns=2),
            Overlap(start=0, span=0, columns=2),
            Overlap(start=1, span=2, columns=2),
            Overlap(start=0, span=1, columns=0),
        ],
    )
    def test_fails_out_of_bounds(self, overlap):
        with pytest.raises(InvariantViolation, match="out of bounds"):
            check_placement_bounds([], {"a": overlap})


class TestClustersDisjoint:
    """Test overlapping items never share horizontal space."""

    def test_passes_for_side_by_side(self):
        items = [item("a", 0, 60), item("b", 30, 90)]

        check_clusters_disjoint(items, {"a": Overlap(0, 1, 2), "b": Overlap(1, 1, 2)})

    def test_passes_across_column_counts(self):
        """Half and quarter records compare by fraction, not by slot index."""
        items = [item("a", 0, 60), item("b", 30, 90)]

        check_clusters_disjoint(items, {"a": Overlap(0, 1, 2), "b": Overlap(2, 1, 4)})

    def test_fails_when_sharing_space(self):
        items = [item("a", 0, 60), item("b", 30, 90)]

        with pytest.raises(InvariantViolation, match=r"\('a', 'b'\)"):
            check_clusters_disjoint(
                items, {"a": Overlap(0, 1, 2), "b": Overlap(1, 1, 4)}
            )

    def test_non_overlapping_items_may_share_space(self):
        items = [item("a", 0, 30), item("b", 30, 60)]

        check_clusters_disjoint(items, {"a": Overlap(0, 1, 1), "b": Overlap(0, 1, 1)})


class TestEnforcement:
    """Test running all invariants."""

    def test_computed_layout_passes(self):
        items = [
            item("1", 0, 30),
            item("2", 20, 50),
            item("3", 40, 70),
            item("4", 100, 110),
        ]

        table = compute_overlap(items)

        assert enforce_invariants(items, table) == []
        enforce_invariants_strict(items, table)

    def test_collects_every_violation(self):
        items = [item("a", 0, 60), item("b", 30, 90), item("c", 200, 230)]
        table = {"a": Overlap(0, 1, 1), "b": Overlap(0, 2, 1)}

        violations = enforce_invariants(items, table)

        assert len(violations) == 3
        assert all(v.startswith("INVARIANT_VIOLATION: ") for v in violations)

    def test_strict_raises_first(self):
        items = [item("a", 0, 60)]

        with pytest.raises(InvariantViolation, match="without a slot record"):
            enforce_invariants_strict(items, {})
