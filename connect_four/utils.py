"""
utils.py - Constants, enumerations and rendering helpers for Connect Four

This module holds the values shared by the board, the rules and the console:
default board dimensions, the player marks, game outcomes, the four line
directions checked for a win, and the ASCII board renderer.
"""

from enum import Enum, auto
from typing import Dict, Tuple

import numpy as np

# Game constants
DEFAULT_ROWS = 6
DEFAULT_COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player, moves first
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    @property
    def symbol(self) -> str:
        """The mark printed for this player's pieces."""
        return _SYMBOLS[self]

    def __str__(self):
        return self.symbol


_SYMBOLS = {
    Player.EMPTY: " ",
    Player.ONE: "X",
    Player.TWO: "O",
}


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    @classmethod
    def win_for(cls, player: Player) -> 'GameResult':
        """Get the winning result for a player."""
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        elif player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"{player!r} cannot win a game")


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()    # Towards higher rows and higher columns
    DIAGONAL_DOWN = auto()  # Towards lower rows and higher columns


# Direction vectors (row, col) for each direction. Row 0 is the bottom row.
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (1, 1),
    Direction.DIAGONAL_DOWN: (-1, 1)
}


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as text with row 0 printed at the bottom.

    Each cell is printed as its mark (or a space) followed by a space, and
    the column indices are printed underneath.

    Args:
        grid: 2D array of Player values, indexed [row, col]

    Returns:
        ASCII representation of the board
    """
    rows, cols = grid.shape
    lines = []

    for row in range(rows - 1, -1, -1):
        lines.append("".join(f"{Player(int(grid[row, col])).symbol} "
                             for col in range(cols)))

    lines.append("".join(f"{col} " for col in range(cols)))

    return "\n".join(lines)
