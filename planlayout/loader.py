"""
Item document loader.

Reads day plan items from JSON or YAML files:

    items:
      - id: standup
        start_minutes: 540
        duration_minutes: 15
      - id: review
        start_minutes: 545
        end_minutes: 600
        text: Design review

A bare list of items is accepted as well.

Usage:
    from planlayout.loader import load_items

    items = load_items("today.yaml")
"""

import json
import logging
from pathlib import Path

import yaml

from planlayout.contracts.schema import ItemDocument
from planlayout.models import PlanItem

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")


def parse_items(data) -> list[PlanItem]:
    """
    Validate already-decoded document data.

    Raises:
        pydantic.ValidationError if the document is malformed.
    """
    if isinstance(data, list):
        data = {"items": data}
    elif data is None:
        data = {}

    return ItemDocument.model_validate(data).to_plan_items()


def load_items(path: str | Path) -> list[PlanItem]:
    """
    Load and validate items from a .json, .yaml or .yml file.

    Raises:
        FileNotFoundError if the file doesn't exist.
        ValueError for unsupported file types.
        pydantic.ValidationError if the document is malformed.
    """
    item_path = Path(path)
    suffix = item_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(
            f"Unsupported item file type '{suffix}', expected one of {SUPPORTED_SUFFIXES}"
        )
    if not item_path.exists():
        raise FileNotFoundError(f"Item file not found: {item_path}")

    with open(item_path) as f:
        if suffix == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    items = parse_items(data)
    logger.info(f"Loaded {len(items)} items from {item_path}")
    return items
