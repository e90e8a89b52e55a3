"""
Renderer-facing geometry for slot records.
"""

from planlayout.config import get_config
from planlayout.models import HorizontalPlacing, Overlap


def get_horizontal_placing(
    overlap: Overlap | None, scale: int | None = None
) -> HorizontalPlacing:
    """
    Width and left offset of an item on a track `scale` units wide.

    Items without a slot record take the full width.
    """
    if scale is None:
        scale = get_config().placing_scale

    if overlap is None:
        return HorizontalPlacing(width_percent=float(scale), x_offset_percent=0.0)

    return HorizontalPlacing(
        width_percent=float(overlap.fraction * scale),
        x_offset_percent=float(overlap.offset * scale),
    )
