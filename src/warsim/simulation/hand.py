"""Fixed-capacity circular queue holding one player's cards."""

from typing import List, Sequence

from warsim.simulation.cards import SENTINEL

# Slots per hand. A full deck is 52 cards, so this leaves room for the
# sentinel entries a final war can push into the winner's pile.
HAND_CAPACITY = 64


class HandOverflowError(Exception):
    """Hand would hold more cards than its buffer can represent."""

    pass


class Hand:
    """A player's cards as a circular buffer with read/write cursors.

    The buffer is allocated once and reused for every game the owning
    worker plays. Cards are drawn from the read cursor and winnings are
    appended at the write cursor, both wrapping at ``HAND_CAPACITY``.

    Usage:
        hand = Hand()
        hand.reset(deck[:26])
        while hand.alive:
            card = hand.draw_card()
    """

    def __init__(self) -> None:
        self._cards = bytearray(HAND_CAPACITY)
        self._read = 0
        self._write = 0

    def __len__(self) -> int:
        return (self._write - self._read) % HAND_CAPACITY

    def __repr__(self) -> str:
        return f"Hand({self.held()!r})"

    @property
    def alive(self) -> bool:
        """True while the hand has at least one card to draw."""
        return self._read != self._write

    def reset(self, cards: Sequence[int]) -> None:
        """Drop whatever is held and load ``cards`` for a new game.

        Args:
            cards: Starting cards, drawn in the given order

        Raises:
            HandOverflowError: If ``cards`` holds HAND_CAPACITY or more cards;
                at most HAND_CAPACITY - 1 fit, since a full buffer
                would look empty
        """
        count = len(cards)
        if count >= HAND_CAPACITY:
            raise HandOverflowError(
                f"Cannot load {count} cards into a {HAND_CAPACITY}-slot hand"
            )
        self._cards[:count] = bytes(cards)
        self._read = 0
        self._write = count

    def draw_card(self) -> int:
        """Take the next card, or ``SENTINEL`` if the hand is empty."""
        if self._read == self._write:
            return SENTINEL
        card = self._cards[self._read]
        self._read = (self._read + 1) % HAND_CAPACITY
        return card

    def accept(self, winnings: Sequence[int]) -> None:
        """Append a trick's cards to the bottom of the hand.

        Args:
            winnings: Cards in the order they will later be drawn

        Raises:
            HandOverflowError: If the hand would hold HAND_CAPACITY or more
                cards; accepting K while holding M needs M + K < HAND_CAPACITY
        """
        count = len(winnings)
        if len(self) + count >= HAND_CAPACITY:
            raise HandOverflowError(
                f"Accepting {count} cards would overflow a hand holding {len(self)}"
            )
        first = min(count, HAND_CAPACITY - self._write)
        self._cards[self._write:self._write + first] = bytes(winnings[:first])
        if first < count:
            self._cards[:count - first] = bytes(winnings[first:])
        self._write = (self._write + count) % HAND_CAPACITY

    def held(self) -> List[int]:
        """Snapshot of the held cards in draw order."""
        return [
            self._cards[(self._read + i) % HAND_CAPACITY]
            for i in range(len(self))
        ]
