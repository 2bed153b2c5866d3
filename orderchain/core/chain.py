"""Chain Builder — fluent wrapper over the continuation-passing combinators.

    rank = Chain.by(attrgetter("last")).then_by_reverse(attrgetter("age")).ascending()

Invariants:
    - Chain is immutable: every then_* returns a new Chain
    - Chain is a continuation target: by(key)(Chain) and Chain.by(key) are equivalent
    - A Chain is not a comparator; calling it raises UnterminatedChainError
    - Builder steps never curry: a None criterion raises MissingCriterionError

Design Decisions:
    - Builder delegates every step to combinators.py so both styles share one implementation
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic

from orderchain.core import combinators
from orderchain.core.domain_types import Comparator, KeyExtractor, T
from orderchain.core.errors import (
    ErrorContext,
    MissingCriterionError,
    UnterminatedChainError,
)


def _required(criterion: Any, step: str) -> Any:
    if criterion is None:
        raise MissingCriterionError(ErrorContext(step=step))
    return criterion


@dataclass(frozen=True)
class Chain(Generic[T]):
    """An accumulated comparator awaiting more tie-breakers or a direction."""
    comparator: Comparator[T]

    @classmethod
    def by(cls, key: KeyExtractor[T]) -> "Chain[T]":
        return combinators.by(_required(key, "by"))(cls)

    @classmethod
    def with_(cls, comparator: Callable[[T, T], Any]) -> "Chain[T]":
        return combinators.with_(_required(comparator, "with"))(cls)

    def then_by(self, key: KeyExtractor[T]) -> "Chain[T]":
        return combinators.then_by(self.comparator, _required(key, "then_by"))(Chain)

    def then_with(self, comparator: Callable[[T, T], Any]) -> "Chain[T]":
        return combinators.then_with(
            self.comparator, _required(comparator, "then_with"),
        )(Chain)

    def then_by_reverse(self, key: KeyExtractor[T]) -> "Chain[T]":
        return combinators.then_by_reverse(
            self.comparator, _required(key, "then_by_reverse"),
        )(Chain)

    def then_with_reverse(self, comparator: Callable[[T, T], Any]) -> "Chain[T]":
        return combinators.then_with_reverse(
            self.comparator, _required(comparator, "then_with_reverse"),
        )(Chain)

    def ascending(self) -> Comparator[T]:
        return combinators.ascending(self.comparator)

    def descending(self) -> Comparator[T]:
        return combinators.descending(self.comparator)

    def __call__(self, a: T, b: T):
        raise UnterminatedChainError(ErrorContext(step="chain"))
