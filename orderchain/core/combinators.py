"""Comparator Combinators — build comparators as a left-to-right chain of steps.

Every starting or tie-break step returns a continuation: a one-argument
function that hands the accumulated comparator to whatever is applied next.
A chain therefore reads without nesting:

    rank = by(attrgetter("last"))(then_by_reverse)(attrgetter("age"))(ascending)
    rank(alice, bob)  # -> Ordering

Invariants:
    - The accumulated comparator consults criteria strictly left to right
    - A later criterion runs only when every earlier one returned EQUAL
    - Reverse tie-breakers flip only their own criterion; descending flips the whole chain
    - ascending / descending are the only terminators; anything else is still a continuation

Design Decisions:
    - Tie-breakers are curried on the criterion: then_by(order) awaits the key, which is
      what lets `(...)(then_by)(key)` chain without a builder object
    - Caller comparator results are normalized once per call via to_ordering()
"""

import logging
from dataclasses import dataclass
from functools import partial, wraps
from typing import Any, Callable

from orderchain.config import get_comparator_settings
from orderchain.core.domain_types import Comparator, Continuation, KeyExtractor
from orderchain.core.ordering import Ordering, compare, to_ordering

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Step:
    """An accumulated comparator awaiting a tie-breaker or a direction.

    Calling a Step with the next step hands it the comparator. A Step is not
    itself a comparator.
    """
    comparator: Comparator

    def __call__(self, rest: Callable[[Comparator], Any]) -> Any:
        return rest(self.comparator)


def _by_key(key: KeyExtractor) -> Comparator:
    def by_key(x: Any, y: Any) -> Ordering:
        return compare(key(x), key(y))
    return by_key


def _normalized(comparator: Callable[[Any, Any], Any], step: str) -> Comparator:
    """Caller comparator whose results are forced to Ordering."""
    accept_int = get_comparator_settings().accept_int_results

    def normalized(x: Any, y: Any) -> Ordering:
        return to_ordering(comparator(x, y), accept_int=accept_int, step=step)
    return normalized


def _tie_break(order: Comparator, criterion: Comparator, reverse: bool) -> Comparator:
    if reverse:
        def tie_break(x: Any, y: Any) -> Ordering:
            result = order(x, y)
            return result if result != Ordering.EQUAL else criterion(y, x)
    else:
        def tie_break(x: Any, y: Any) -> Ordering:
            result = order(x, y)
            return result if result != Ordering.EQUAL else criterion(x, y)
    return tie_break


def _curried(step: Callable[[Comparator, Any], Continuation]):
    """Allow step(order) to return a function awaiting the criterion."""
    @wraps(step)
    def curried(order: Comparator, criterion: Any = None):
        if criterion is None:
            return partial(curried, order)
        return step(order, criterion)
    return curried


# ─── Primary Constructors ────────────────────────────────────────

def by(key: KeyExtractor) -> Continuation:
    """Start a chain ordering values by the natural order of key(value)."""
    logger.debug("Chain started", extra={"step": "by", "criterion": _name(key)})
    return Step(_by_key(key))


def with_(comparator: Callable[[Any, Any], Any]) -> Continuation:
    """Start a chain from an arbitrary two-argument comparator."""
    logger.debug("Chain started", extra={"step": "with", "criterion": _name(comparator)})
    return Step(_normalized(comparator, "with"))


# ─── Tie-breakers ────────────────────────────────────────────────

@_curried
def then_by(order: Comparator, key: KeyExtractor) -> Continuation:
    """Break ties of order by the natural order of key(value)."""
    logger.debug("Tie-breaker added", extra={"step": "then_by", "criterion": _name(key)})
    return Step(_tie_break(order, _by_key(key), reverse=False))


@_curried
def then_with(order: Comparator, comparator: Callable[[Any, Any], Any]) -> Continuation:
    """Break ties of order with an arbitrary comparator."""
    logger.debug(
        "Tie-breaker added", extra={"step": "then_with", "criterion": _name(comparator)},
    )
    return Step(
        _tie_break(order, _normalized(comparator, "then_with"), reverse=False),
    )


@_curried
def then_by_reverse(order: Comparator, key: KeyExtractor) -> Continuation:
    """Break ties of order by key(value), largest first."""
    logger.debug(
        "Tie-breaker added", extra={"step": "then_by_reverse", "criterion": _name(key)},
    )
    return Step(_tie_break(order, _by_key(key), reverse=True))


@_curried
def then_with_reverse(
    order: Comparator, comparator: Callable[[Any, Any], Any],
) -> Continuation:
    """Break ties of order with comparator applied to swapped arguments."""
    logger.debug(
        "Tie-breaker added",
        extra={"step": "then_with_reverse", "criterion": _name(comparator)},
    )
    return Step(
        _tie_break(order, _normalized(comparator, "then_with_reverse"), reverse=True),
    )


# ─── Direction Selectors ─────────────────────────────────────────

def ascending(comparator: Comparator) -> Comparator:
    """Terminate a chain in its natural direction."""
    def ascending_order(a: Any, b: Any) -> Ordering:
        return comparator(a, b)
    return ascending_order


def descending(comparator: Comparator) -> Comparator:
    """Terminate a chain with every criterion inverted."""
    def descending_order(a: Any, b: Any) -> Ordering:
        return comparator(b, a)
    return descending_order


def _name(fn: Any) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)
