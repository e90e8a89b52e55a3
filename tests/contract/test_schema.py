"""
Schema Tests — Validate pydantic models for item documents and placements.
"""

import pytest
from pydantic import ValidationError

from planlayout.contracts.schema import ItemDocument, PlacementRecord, PlanItemRecord
from planlayout.models import HorizontalPlacing, Overlap, PlanItem


class TestPlanItemRecord:
    def test_minimal(self):
        record = PlanItemRecord(id="a", start_minutes=0)

        assert record.duration_minutes is None
        assert record.end_minutes is None
        assert record.text == ""

    def test_zero_length_allowed(self):
        """end == start is the collaborator's business, not a schema error."""
        PlanItemRecord(id="a", start_minutes=60, end_minutes=60)

    def test_to_plan_item(self):
        record = PlanItemRecord(id="a", start_minutes=60, duration_minutes=30, text="Focus")

        assert record.to_plan_item() == PlanItem(
            id="a", start_minutes=60, duration_minutes=30, text="Focus"
        )

    def test_bool_id_not_coerced(self):
        with pytest.raises(ValidationError):
            PlanItemRecord(id=True, start_minutes=0)


class TestItemDocument:
    def test_unique_ids(self):
        document = ItemDocument(
            items=[
                PlanItemRecord(id="a", start_minutes=0),
                PlanItemRecord(id="b", start_minutes=0),
            ]
        )

        assert [item.id for item in document.to_plan_items()] == ["a", "b"]

    def test_duplicates_listed_once(self):
        with pytest.raises(ValidationError, match=r"\['a'\]"):
            ItemDocument.model_validate(
                {"items": [{"id": "a", "start_minutes": i} for i in range(3)]}
            )


class TestPlacementRecord:
    def test_from_overlap(self):
        record = PlacementRecord.from_overlap(
            "a", Overlap(start=1, span=1, columns=2), HorizontalPlacing(50.0, 50.0)
        )

        assert record.model_dump() == {
            "id": "a",
            "start": 1,
            "span": 1,
            "columns": 2,
            "width_percent": 50.0,
            "x_offset_percent": 50.0,
        }

    def test_span_past_track_rejected(self):
        with pytest.raises(ValidationError, match="exceeds"):
            PlacementRecord(
                id="a", start=1, span=2, columns=2, width_percent=100, x_offset_percent=50
            )

    @pytest.mark.parametrize(
        "field, value", [("start", -1), ("span", 0), ("columns", 0)]
    )
    def test_field_bounds(self, field, value):
        data = {
            "id": "a",
            "start": 0,
            "span": 1,
            "columns": 1,
            "width_percent": 100,
            "x_offset_percent": 0,
        }
        data[field] = value

        with pytest.raises(ValidationError):
            PlacementRecord(**data)
