"""Domain Types — the function shapes a chain is built from.

Invariants:
    - A Comparator takes two values of the same type and returns an Ordering
    - A KeyExtractor maps a value to something orderable with `<`
    - A Continuation hands the accumulated comparator to whatever comes next

Design Decisions:
    - Plain Callable aliases over wrapper classes: any function of the right shape is accepted
    - Protocol for keys: structural, satisfied by int, str, tuples and user types with __lt__
"""

from typing import TYPE_CHECKING, Any, Callable, Protocol, TypeVar

if TYPE_CHECKING:
    from orderchain.core.ordering import Ordering


T = TypeVar("T")
R = TypeVar("R")
T_contra = TypeVar("T_contra", contravariant=True)


class SupportsLessThan(Protocol[T_contra]):
    def __lt__(self, other: T_contra, /) -> bool: ...


# ─── Function Shapes ─────────────────────────────────────────────

Comparator = Callable[[T, T], "Ordering"]
KeyExtractor = Callable[[T], SupportsLessThan[Any]]
Continuation = Callable[[Callable[[Comparator[T]], R]], R]
