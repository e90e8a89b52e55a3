"""
Item time helpers.
"""

import logging

from planlayout.config import get_config
from planlayout.models import TimeBlock

logger = logging.getLogger(__name__)


def get_end_minutes(item: TimeBlock, default_duration_minutes: int | None = None) -> int:
    """
    End of an item in minutes.

    Precedence:
      1) explicit end_minutes
      2) start_minutes + duration_minutes
      3) start_minutes + default duration (argument, else configuration)

    The result is not validated against start_minutes. A zero-length item
    still overlaps any item that strictly contains its start.
    """
    if item.end_minutes is not None:
        return item.end_minutes

    if item.duration_minutes is not None:
        return item.start_minutes + item.duration_minutes

    if default_duration_minutes is None:
        default_duration_minutes = get_config().default_duration_minutes
    logger.debug(
        f"Item {item.id} has no end or duration, using default {default_duration_minutes}min"
    )
    return item.start_minutes + default_duration_minutes
