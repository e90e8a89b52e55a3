class InvariantViolation(Exception):
    """Raised when a layout invariant is violated."""

    pass
