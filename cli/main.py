#!/usr/bin/env python3
"""
Day Planner Layout CLI - side-by-side layout for a file of plan items.

Usage:
    python -m cli.main layout <file>    # Table of slot records
    python -m cli.main json <file>      # Slot records as JSON
    python -m cli.main check <file>     # Invariant report
    python -m cli.main help
"""

import json
import logging
import sys

from planlayout.config import get_config
from planlayout.contracts import PlacementRecord, enforce_invariants
from planlayout.errors import InvariantViolation
from planlayout.layout_engine import compute_overlap
from planlayout.loader import load_items
from planlayout.overlap import get_horizontal_placing
from planlayout.task_utils import get_end_minutes


def print_header(text: str):
    """Print a section header."""
    print(f"\n{'═' * 50}")
    print(f"  {text}")
    print(f"{'═' * 50}")


def print_table(headers: list, rows: list, widths: list = None):
    """Print a simple table."""
    if not widths:
        widths = [
            max(len(str(row[i])) for row in [headers] + rows)
            for i in range(len(headers))
        ]

    header_str = " │ ".join(str(h).ljust(w) for h, w in zip(headers, widths))
    print(header_str)
    print("─" * len(header_str))

    for row in rows:
        print(" │ ".join(str(c)[:w].ljust(w) for c, w in zip(row, widths)))


def format_minutes(minutes: int) -> str:
    """540 -> '09:00'."""
    sign = "-" if minutes < 0 else ""
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


def _load(args) -> list | None:
    if not args:
        print("Missing item file. Run 'help' for usage.")
        return None
    try:
        return load_items(args[0])
    except (FileNotFoundError, ValueError) as e:
        # ValidationError is a ValueError
        print(f"Cannot load {args[0]}: {e}")
        return None


def _compute(items, strict: bool) -> dict | None:
    try:
        return compute_overlap(items, strict=strict)
    except InvariantViolation as e:
        print(f"✗ Packing failed: {e}")
        return None


def cmd_layout(args) -> int:
    """Show slot records as a table."""
    items = _load(args)
    if items is None:
        return 1

    config = get_config()
    table = _compute(items, config.strict_invariants)
    if table is None:
        return 1
    scale = config.placing_scale

    print_header(f"Layout - {len(items)} items")
    rows = []
    for item in items:
        overlap = table[item.id]
        placing = get_horizontal_placing(overlap, scale)
        rows.append(
            [
                item.id,
                format_minutes(item.start_minutes),
                format_minutes(get_end_minutes(item)),
                f"{overlap.start}/{overlap.span}/{overlap.columns}",
                f"{placing.width_percent:.2f}",
                f"{placing.x_offset_percent:.2f}",
                item.text,
            ]
        )
    print_table(["ID", "Start", "End", "Slot", "Width", "Offset", "Text"], rows)
    return 0


def cmd_json(args) -> int:
    """Dump slot records as JSON."""
    items = _load(args)
    if items is None:
        return 1

    config = get_config()
    table = _compute(items, config.strict_invariants)
    if table is None:
        return 1
    scale = config.placing_scale
    records = [
        PlacementRecord.from_overlap(
            item.id, table[item.id], get_horizontal_placing(table[item.id], scale)
        ).model_dump()
        for item in items
    ]
    print(json.dumps(records, indent=2))
    return 0


def cmd_check(args) -> int:
    """Report invariant violations."""
    items = _load(args)
    if items is None:
        return 1

    table = _compute(items, strict=True)
    if table is None:
        return 1

    violations = enforce_invariants(items, table)
    if violations:
        print(f"✗ {len(violations)} invariant violation(s):")
        for violation in violations:
            print(f"  {violation}")
        return 1

    print(f"✓ {len(items)} items, layout consistent")
    return 0


def cmd_help(args) -> int:
    """Show help."""
    print("""
DAY PLANNER LAYOUT

COMMANDS:
  layout <file>      Table of slot records (start/span/columns)
  json <file>        Slot records as JSON
  check <file>       Check layout invariants (exit 1 on violation)
  help               Show this help

OPTIONS:
  --verbose          Debug logging

Item files are JSON or YAML:
  items:
    - {id: standup, start_minutes: 540, duration_minutes: 15}
""")
    return 0


COMMANDS = {
    "layout": cmd_layout,
    "l": cmd_layout,
    "json": cmd_json,
    "j": cmd_json,
    "check": cmd_check,
    "c": cmd_check,
    "help": cmd_help,
    "h": cmd_help,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    argv = list(sys.argv[1:] if argv is None else argv)

    verbose = "--verbose" in argv
    argv = [a for a in argv if a != "--verbose"]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not argv:
        return cmd_help([])

    cmd = argv[0]
    args = argv[1:]

    if cmd in COMMANDS:
        return COMMANDS[cmd](args)

    print(f"Unknown command: {cmd}")
    print("Run 'help' for available commands.")
    return 2


if __name__ == "__main__":
    sys.exit(main())
