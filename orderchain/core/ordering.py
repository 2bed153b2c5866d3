"""Ordering — the three-way comparison result and the natural-order primitive.

Invariants:
    - Ordering has exactly three members: LESS_THAN (-1), EQUAL (0), GREATER_THAN (1)
    - compare() uses only `<`, so any key type implementing __lt__ is orderable
    - to_ordering() is the single gate for results coming from caller comparators

Design Decisions:
    - int-backed Enum: members work directly with functools.cmp_to_key and `< 0` tests
    - Unordered values (NaN) compare EQUAL: neither `a < b` nor `b < a` holds
"""

from enum import Enum
from typing import Any

from orderchain.core.errors import (
    ErrorContext,
    IncomparableKeysError,
    InvalidOrderingError,
)


class Ordering(int, Enum):
    """Result of comparing two values."""
    LESS_THAN = -1
    EQUAL = 0
    GREATER_THAN = 1

    @classmethod
    def from_int(cls, value: int) -> "Ordering":
        """Sign of a cmp-style integer."""
        return cls((value > 0) - (value < 0))


def compare(a: Any, b: Any) -> Ordering:
    """Natural three-way comparison of two keys."""
    try:
        if a < b:
            return Ordering.LESS_THAN
        if b < a:
            return Ordering.GREATER_THAN
    except TypeError as exc:
        raise IncomparableKeysError(
            a, b, ErrorContext(debug_info={"reason": str(exc)}),
        ) from exc
    return Ordering.EQUAL


def to_ordering(value: Any, accept_int: bool = True, step: str | None = None) -> Ordering:
    """Normalize a caller comparator's result. Raises InvalidOrderingError."""
    if isinstance(value, Ordering):
        return value
    if accept_int and isinstance(value, int) and not isinstance(value, bool):
        return Ordering.from_int(value)
    raise InvalidOrderingError(value, ErrorContext(step=step))
