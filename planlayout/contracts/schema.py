"""
Schema Module — Pydantic Models for Item Documents and Placement Output.

Item documents come from the data source (files, other tools). The layout
core trusts its input, so all shape checks happen here:
- ids present and unique
- explicit end never before start
- durations never negative

PlacementRecord is the serialized form of one placed item.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from planlayout.models import HorizontalPlacing, Overlap, PlanItem

# =============================================================================
# INPUT
# =============================================================================


class PlanItemRecord(BaseModel):
    """Single day plan item as supplied by the data source."""

    id: str = Field(min_length=1)
    start_minutes: int
    duration_minutes: int | None = Field(default=None, ge=0)
    end_minutes: int | None = None
    text: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        # YAML turns bare numeric ids into ints
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @model_validator(mode="after")
    def end_not_before_start(self):
        if self.end_minutes is not None and self.end_minutes < self.start_minutes:
            raise ValueError(
                f"item {self.id}: end_minutes {self.end_minutes} is before "
                f"start_minutes {self.start_minutes}"
            )
        return self

    def to_plan_item(self) -> PlanItem:
        return PlanItem(
            id=self.id,
            start_minutes=self.start_minutes,
            duration_minutes=self.duration_minutes,
            end_minutes=self.end_minutes,
            text=self.text,
        )


class ItemDocument(BaseModel):
    """
    A list of day plan items.

    Ids must be unique: the placement table is keyed by id.
    """

    items: list[PlanItemRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def ids_unique(self):
        seen = set()
        duplicates = []
        for item in self.items:
            if item.id in seen:
                duplicates.append(item.id)
            seen.add(item.id)
        if duplicates:
            raise ValueError(f"duplicate item ids: {sorted(set(duplicates))}")
        return self

    def to_plan_items(self) -> list[PlanItem]:
        return [item.to_plan_item() for item in self.items]


# =============================================================================
# OUTPUT
# =============================================================================


class PlacementRecord(BaseModel):
    """Slot record plus renderer geometry for one item."""

    id: str
    start: int = Field(ge=0)
    span: int = Field(ge=1)
    columns: int = Field(ge=1)
    width_percent: float
    x_offset_percent: float

    @model_validator(mode="after")
    def span_inside_track(self):
        if self.start + self.span > self.columns:
            raise ValueError(
                f"item {self.id}: start {self.start} + span {self.span} "
                f"exceeds {self.columns} columns"
            )
        return self

    @classmethod
    def from_overlap(
        cls, item_id: str, overlap: Overlap, placing: HorizontalPlacing
    ) -> "PlacementRecord":
        return cls(
            id=item_id,
            start=overlap.start,
            span=overlap.span,
            columns=overlap.columns,
            width_percent=placing.width_percent,
            x_offset_percent=placing.x_offset_percent,
        )
