"""Sort Adapters — hand a finished comparator to the host's key-based routines.

Invariants:
    - No sorting algorithm lives here: sorted/min/max do the work via cmp_to_key
    - sort_with is stable (ties keep input order), as sorted() is
    - Only terminated comparators are accepted; a Chain or an unapplied Step
      raises UnterminatedChainError before any comparison runs
"""

from functools import cmp_to_key
from typing import Any, Callable, Iterable

from orderchain.core.chain import Chain
from orderchain.core.combinators import Step
from orderchain.core.domain_types import Comparator, T
from orderchain.core.errors import ErrorContext, UnterminatedChainError


def as_key(comparator: Comparator[T]) -> Callable[[T], Any]:
    """Key function for sorted()/min()/max() from a three-way comparator."""
    if isinstance(comparator, (Chain, Step)):
        raise UnterminatedChainError(ErrorContext(step="as_key"))
    return cmp_to_key(comparator)


def sort_with(items: Iterable[T], comparator: Comparator[T]) -> list[T]:
    return sorted(items, key=as_key(comparator))


def min_with(items: Iterable[T], comparator: Comparator[T]) -> T:
    """Smallest item; the first one wins among ties. Empty input raises ValueError."""
    return min(items, key=as_key(comparator))


def max_with(items: Iterable[T], comparator: Comparator[T]) -> T:
    """Largest item; the first one wins among ties. Empty input raises ValueError."""
    return max(items, key=as_key(comparator))
