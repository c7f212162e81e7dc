"""
random_player.py - Uniform random computer opponent
"""

import random
from typing import Optional

from connect_four.debug import debug


class RandomPlayer:
    """Picks uniformly among the columns that are not full."""

    name = "Computer"

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source; a fresh unseeded one is used if omitted
        """
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game) -> int:
        valid_moves = game.get_valid_moves()
        if not valid_moves:
            raise ValueError("No valid moves.")

        column = self.rng.choice(valid_moves)
        debug.debug(f"Random move {column} from {valid_moves}", "ai")
        return column
