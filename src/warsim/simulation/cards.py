"""Deck construction and the two in-place pile orderings used by War."""

import random
from typing import MutableSequence

# Rank only matters for War: 11=J, 12=Q, 13=K, 14=A (aces high)
MIN_RANK = 2
MAX_RANK = 14
SUITS = 4
DECK_SIZE = (MAX_RANK - MIN_RANK + 1) * SUITS  # 52

# Drawn from an empty hand; loses to every real card
SENTINEL = 0


def build_deck() -> bytearray:
    """Create an unshuffled 52-card deck.

    Values run 2..14 once per suit, so the base order is
    ``2, 3, ..., 14`` repeated four times.

    Returns:
        New bytearray holding the deck
    """
    deck = bytearray(DECK_SIZE)
    idx = 0
    for _ in range(SUITS):
        for rank in range(MIN_RANK, MAX_RANK + 1):
            deck[idx] = rank
            idx += 1
    return deck


def shuffle(values: MutableSequence[int], rng: random.Random) -> None:
    """Fisher-Yates shuffle of ``values`` in place.

    Walks n from len(values) down to 1, swapping slot n-1 with a
    uniformly drawn slot in [0, n).

    Args:
        values: Cards to permute (list, bytearray or memoryview)
        rng: Random source owned by the calling worker
    """
    for n in range(len(values), 0, -1):
        j = rng.randrange(n)
        values[n - 1], values[j] = values[j], values[n - 1]


def sort_descending(values: MutableSequence[int]) -> None:
    """Stable insertion sort, largest card first, in place.

    Piles never exceed a hand's capacity, which keeps the quadratic
    worst case small.
    """
    for i in range(1, len(values)):
        j = i
        while j > 0 and values[j] > values[j - 1]:
            values[j], values[j - 1] = values[j - 1], values[j]
            j -= 1
