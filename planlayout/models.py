"""
Layout models.

Objects:
- TimeBlock (an interval with identity; end derived by task_utils)
- PlanItem (a TimeBlock as it appears in a day plan, optionally placed)
- Overlap (horizontal slot record: start, span, columns)
- HorizontalPlacing (renderer-facing width/offset)

Times are integer minutes from a caller-chosen origin, usually midnight.
"""

from dataclasses import dataclass
from fractions import Fraction


@dataclass(frozen=True)
class HorizontalPlacing:
    width_percent: float
    x_offset_percent: float

    def to_dict(self) -> dict:
        return {
            "width_percent": self.width_percent,
            "x_offset_percent": self.x_offset_percent,
        }


@dataclass
class TimeBlock:
    id: str
    start_minutes: int
    duration_minutes: int | None = None
    end_minutes: int | None = None


@dataclass
class PlanItem(TimeBlock):
    text: str = ""
    placing: HorizontalPlacing | None = None


@dataclass(frozen=True)
class Overlap:
    """
    Horizontal slot record for one item.

    The item occupies slots [start, start + span) of a track split into
    `columns` equal parts. Records placed in different packer passes may use
    different `columns`, so compare them through `offset` and `fraction`.
    """

    start: int
    span: int
    columns: int

    @property
    def fraction(self) -> Fraction:
        """Share of the track width."""
        return Fraction(self.span, self.columns)

    @property
    def offset(self) -> Fraction:
        """Left edge as a share of the track width."""
        return Fraction(self.start, self.columns)

    @property
    def end_offset(self) -> Fraction:
        return Fraction(self.start + self.span, self.columns)
