"""Tests for deck construction and pile ordering."""

import random
from collections import Counter

from scipy import stats

from warsim.simulation.cards import (
    DECK_SIZE,
    build_deck,
    shuffle,
    sort_descending,
)


def test_deck_has_52_cards() -> None:
    """Test deck holds four of every rank from 2 to Ace."""
    deck = build_deck()
    assert len(deck) == DECK_SIZE == 52
    counts = Counter(deck)
    assert set(counts) == set(range(2, 15))
    assert all(count == 4 for count in counts.values())
    assert sum(deck) == 416


def test_deck_base_order() -> None:
    """Test deck is unshuffled: 2..14 repeated per suit."""
    assert list(build_deck()) == list(range(2, 15)) * 4


def test_deck_is_fresh_each_call() -> None:
    """Test decks are independent buffers."""
    first = build_deck()
    second = build_deck()
    first[0] = 14
    assert second[0] == 2


def test_shuffle_is_permutation() -> None:
    """Test shuffling keeps the same multiset of cards."""
    deck = build_deck()
    shuffle(deck, random.Random(42))
    assert sorted(deck) == sorted(build_deck())
    assert list(deck) != list(build_deck())


def test_shuffle_trivial_lengths() -> None:
    """Test empty and single-card piles are left alone."""
    rng = random.Random(0)
    empty: list = []
    shuffle(empty, rng)
    assert empty == []

    single = [9]
    shuffle(single, rng)
    assert single == [9]


def test_shuffle_works_on_memoryview() -> None:
    """Test shuffling a view permutes the underlying buffer in place."""
    buf = bytearray([2, 3, 4, 5, 6, 7])
    view = memoryview(buf)[:4]
    shuffle(view, random.Random(3))
    assert sorted(buf[:4]) == [2, 3, 4, 5]
    assert buf[4:] == bytearray([6, 7])


def test_shuffle_same_seed_same_order() -> None:
    """Test shuffle is reproducible for a given random state."""
    a, b = build_deck(), build_deck()
    shuffle(a, random.Random(99))
    shuffle(b, random.Random(99))
    assert a == b


def test_shuffle_positions_uniform() -> None:
    """Test each card lands in each position about equally often."""
    rng = random.Random(1234)
    size, trials = 5, 5000
    positions = Counter()
    for _ in range(trials):
        values = list(range(size))
        shuffle(values, rng)
        positions[values.index(0)] += 1

    observed = [positions[i] for i in range(size)]
    result = stats.chisquare(observed)
    assert result.pvalue > 0.001


def test_sort_descending_orders_cards() -> None:
    """Test piles are sorted highest first."""
    pile = [5, 14, 2, 9, 9, 3]
    sort_descending(pile)
    assert pile == [14, 9, 9, 5, 3, 2]


def test_sort_descending_keeps_multiset() -> None:
    """Test sorting a shuffled deck keeps every card."""
    deck = build_deck()
    shuffle(deck, random.Random(5))
    sort_descending(deck)
    assert list(deck) == sorted(build_deck(), reverse=True)


def test_sort_descending_idempotent() -> None:
    """Test sorting twice equals sorting once."""
    pile = [3, 7, 7, 0, 12]
    sort_descending(pile)
    once = list(pile)
    sort_descending(pile)
    assert pile == once


def test_sort_descending_empty() -> None:
    """Test sorting an empty pile is a no-op."""
    pile: list = []
    sort_descending(pile)
    assert pile == []
