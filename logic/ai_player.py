"""
Opponent player for the cursor TicTacToe game.
Picks a random free cell, no strategy.
"""

from typing import Optional

import numpy as np

from .game_state import BoardGame


class RandomOpponent:
    """
    An opponent that plays a uniformly random free cell.

    The random source is passed into every commit, so a seeded
    generator gives a fully repeatable game.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        verbose: bool = False
    ):
        """
        Initialize the opponent.

        Args:
            seed: Seed for a fresh numpy generator (None = unpredictable).
            rng: Use this generator instead of creating one.
            verbose: Print every choice (for debugging).
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.verbose = verbose

        # How many marks we've placed this game
        self.moves_played = 0

    def play(self, game: BoardGame) -> Optional[int]:
        """
        Take the opponent's turn.

        Args:
            game: The game to play on.

        Returns:
            Index of the placed mark, or None if the board was full.
        """
        options = len(game.empty_cells())
        index = game.commit_opponent_mark(self.rng)

        if index is None:
            return None

        self.moves_played += 1

        if self.verbose:
            print(f"Opponent picked cell {index} out of {options} free "
                  f"(move {self.moves_played})")

        return index

    def reset(self):
        """Start counting again for a new game."""
        self.moves_played = 0
