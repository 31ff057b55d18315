"""War game engine.

Player 1 shuffles the cards it wins before tucking them under its hand;
player 2 sorts its winnings highest first. Ties fall to player 2 whenever
player 1 cannot continue a war, so the two sides are deliberately unequal.
"""

import random

from warsim.simulation.cards import shuffle, sort_descending
from warsim.simulation.hand import HAND_CAPACITY, Hand


class WarGame:
    """One game of War between two already-dealt hands.

    The trick pile is a fixed buffer reused for every trick, so playing a
    game allocates nothing beyond small views into it.
    """

    def __init__(self, player1: Hand, player2: Hand, rng: random.Random) -> None:
        """Bind the game to its hands and random source.

        Args:
            player1: Hand that shuffles its winnings
            player2: Hand that sorts its winnings and wins exhausted ties
            rng: Random source owned by the calling worker
        """
        self.player1 = player1
        self.player2 = player2
        self.rng = rng
        self.tricks = 0
        self._pile = bytearray(HAND_CAPACITY)
        self._view = memoryview(self._pile)

    def play_trick(self) -> int:
        """Play one trick, including any chain of wars.

        Returns:
            1 if player 1 took the pile, 2 if player 2 did
        """
        p1, p2 = self.player1, self.player2
        pile = self._pile

        c1, c2 = p1.draw_card(), p2.draw_card()
        pile[0], pile[1] = c1, c2
        size = 2
        while c1 == c2 and p1.alive:
            # one face-down card each, then a fresh pair to compare
            pile[size], pile[size + 1] = p1.draw_card(), p2.draw_card()
            c1, c2 = p1.draw_card(), p2.draw_card()
            pile[size + 2], pile[size + 3] = c1, c2
            size += 4

        winnings = self._view[:size]
        self.tricks += 1
        if c1 > c2:
            shuffle(winnings, self.rng)
            p1.accept(winnings)
            return 1
        sort_descending(winnings)
        p2.accept(winnings)
        return 2

    def play(self) -> int:
        """Play tricks until one hand runs out.

        The hands must have been reset by the caller; a worker reuses the
        same game object for every deal.

        Returns:
            1 if player 2 won the game, 0 otherwise
        """
        self.tricks = 0
        while self.player1.alive and self.player2.alive:
            self.play_trick()
        return 1 if self.player2.alive else 0


def play_game(player1: Hand, player2: Hand, rng: random.Random) -> int:
    """Play a complete game of War.

    Returns:
        1 if player 2 won, 0 otherwise
    """
    return WarGame(player1, player2, rng).play()
