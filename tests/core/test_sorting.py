"""Sort Adapters — tests for handing comparators to sorted/min/max.

Tests cover:
    - sort_with is stable and honors the chain's precedence
    - ascending-then-reversed equals descending (exact without ties, per criteria with ties)
    - min_with / max_with pick the first extreme, raise on empty input
    - as_key rejects an unterminated Chain or an unapplied continuation
"""

import random
from operator import itemgetter

import pytest

from orderchain.core.chain import Chain
from orderchain.core.combinators import (
    ascending,
    by,
    descending,
    then_by,
    then_by_reverse,
)
from orderchain.core.errors import UnterminatedChainError
from orderchain.core.sorting import as_key, max_with, min_with, sort_with


def random_records(rng: random.Random, n: int = 50) -> list[dict]:
    return [
        {"hello": rng.randint(0, 4), "world": rng.randint(0, 4), "bang": rng.choice("!?.")}
        for _ in range(n)
    ]


def criteria(record: dict) -> tuple:
    return record["hello"], record["world"], record["bang"]


# ─── sort_with ───────────────────────────────────────────────────

def test_sort_with_orders_by_precedence():
    people = [("smith", 30), ("jones", 40), ("smith", 50), ("adams", 40)]
    cmp = by(itemgetter(0))(then_by_reverse)(itemgetter(1))(ascending)
    assert sort_with(people, cmp) == [
        ("adams", 40), ("jones", 40), ("smith", 50), ("smith", 30),
    ]


def test_sort_with_is_stable():
    words = ["bb", "a", "cc", "d", "aa"]
    assert sort_with(words, by(len)(ascending)) == ["a", "d", "bb", "cc", "aa"]


def test_sort_with_accepts_any_iterable():
    assert sort_with(iter([3, 1, 2]), by(abs)(descending)) == [3, 2, 1]


def test_sort_with_empty():
    assert sort_with([], by(len)(ascending)) == []


# ─── List-level inversion ────────────────────────────────────────

@pytest.mark.parametrize("seed", range(10))
def test_reversed_ascending_equals_descending_without_ties(seed):
    rng = random.Random(seed)
    records = [{"id": i, "score": rng.random()} for i in rng.sample(range(1000), 60)]
    chain = by(itemgetter("score"))(then_by)(itemgetter("id"))
    asc = sort_with(records, chain(ascending))
    desc = sort_with(records, chain(descending))
    assert list(reversed(asc)) == desc


@pytest.mark.parametrize("seed", range(10))
def test_reversed_ascending_matches_descending_per_tie_group(seed):
    rng = random.Random(seed)
    records = random_records(rng)
    chain = by(itemgetter("hello"))(then_by_reverse)(itemgetter("world"))(then_by)(
        itemgetter("bang"),
    )
    asc = sort_with(records, chain(ascending))
    desc = sort_with(records, chain(descending))
    assert [criteria(r) for r in reversed(asc)] == [criteria(r) for r in desc]
    assert sorted(map(criteria, asc)) == sorted(map(criteria, records))


# ─── min_with / max_with ─────────────────────────────────────────

def test_min_and_max_with():
    words = ["pear", "fig", "banana", "kiwi"]
    cmp = by(len)(ascending)
    assert min_with(words, cmp) == "fig"
    assert max_with(words, cmp) == "banana"


def test_min_with_returns_first_among_ties():
    assert min_with(["pear", "kiwi", "plum"], by(len)(ascending)) == "pear"


def test_min_with_empty_raises():
    with pytest.raises(ValueError):
        min_with([], by(len)(ascending))


# ─── as_key ──────────────────────────────────────────────────────

def test_as_key_rejects_unterminated_chain():
    with pytest.raises(UnterminatedChainError):
        as_key(Chain.by(len))


def test_as_key_works_with_builtin_sort():
    values = [5, -7, 2]
    values.sort(key=as_key(Chain.by(abs).descending()))
    assert values == [-7, 5, 2]


def test_sort_with_rejects_unapplied_continuation():
    with pytest.raises(UnterminatedChainError):
        sort_with(["bb", "a"], by(len))


def test_min_with_rejects_unapplied_tie_breaker():
    pending = by(len)(then_by)(str.lower)
    with pytest.raises(UnterminatedChainError):
        min_with(["b", "a"], pending)
