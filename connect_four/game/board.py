"""
board.py - Board representation for Connect Four

This module implements the Board class, the only owner of the grid of player
marks. Row 0 is the bottom row, so pieces settle towards lower row indices.
The board does not judge moves: legality and gravity are handled in rules.py.
"""

import numpy as np

from connect_four.debug import debug
from connect_four.utils import DEFAULT_ROWS, DEFAULT_COLS, Player, render_board_ascii


class Board:
    """
    Represents a Connect Four game board of configurable size.

    The grid is a dense integer array holding Player values, indexed
    [row, col] with row 0 at the bottom.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS):
        """
        Initialize an empty board.

        Args:
            rows: Number of rows (positive)
            cols: Number of columns (positive)

        Raises:
            ValueError: If either dimension is not a positive integer
        """
        for name, value in (("rows", rows), ("cols", cols)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"Board {name} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"Board {name} must be positive, got {value}")

        self.rows = int(rows)
        self.cols = int(cols)
        debug.debug(f"Initializing new {self.rows}x{self.cols} Board", "board")
        self.reset()

    def reset(self):
        """Reset the board to an empty state."""
        self.grid = np.full((self.rows, self.cols), Player.EMPTY.value, dtype=np.int8)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if a position lies on the board."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_empty(self, row: int, col: int) -> bool:
        """Check if a cell holds no piece."""
        return bool(self.grid[row, col] == Player.EMPTY.value)

    def get(self, row: int, col: int) -> Player:
        """Get the mark held by a cell."""
        return Player(int(self.grid[row, col]))

    def holds(self, row: int, col: int, player: Player) -> bool:
        """Check if a cell holds the given player's mark."""
        return bool(self.grid[row, col] == player.value)

    def place(self, row: int, col: int, player: Player):
        """
        Overwrite a cell with a player's mark.

        No legality check is made; callers decide where a piece may go.
        """
        debug.trace(f"Placing {player} at ({row}, {col})", "board")
        self.grid[row, col] = player.value

    def is_column_full(self, col: int) -> bool:
        """A column is full once its top cell is taken."""
        return not self.is_empty(self.rows - 1, col)

    def is_full(self) -> bool:
        """Check if no empty cell remains."""
        return not np.any(self.grid == Player.EMPTY.value)

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the grid.

        Returns:
            2D numpy array of Player values, row 0 at the bottom
        """
        return self.grid.copy()

    def render(self) -> str:
        """Render the board as text, row 0 at the bottom."""
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, cols={self.cols})"
