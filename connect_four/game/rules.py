"""
rules.py - Move execution, win detection and turn management for Connect Four

This module provides:
1. drop_piece: gravity placement of a mark into a column
2. find_winning_line / check_win / evaluate: outcome detection from the grid
3. ConnectFourGame: the turn state machine over a single Board
4. play_game: the loop that alternates move strategies until the game ends
"""

from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple

from connect_four.debug import debug
from connect_four.utils import (DEFAULT_ROWS, DEFAULT_COLS, CONNECT_N, DIRECTION_VECTORS,
                                Player, GameResult)
from connect_four.game.board import Board

if TYPE_CHECKING:
    from connect_four.ai.base import MoveStrategy

Coord = Tuple[int, int]  # (row, col)


def drop_piece(board: Board, column: int, player: Player) -> bool:
    """
    Drop a mark into a column, landing in its lowest empty cell.

    The column index must already be within range.

    Args:
        board: The board to play on
        column: Column to drop into (0-indexed)
        player: The mark to place

    Returns:
        True if the piece was placed, False if the column is full
    """
    for row in range(board.rows):
        if board.is_empty(row, column):
            board.place(row, column, player)
            return True

    debug.debug(f"Column {column} is full", "rules")
    return False


def find_winning_line(board: Board, player: Player) -> List[Coord]:
    """
    Find the first four-in-a-row of a player's marks.

    Every window of CONNECT_N cells that fits on the board is checked in all
    four directions.

    Returns:
        The (row, col) cells of the winning window, or an empty list
    """
    for direction, (dr, dc) in DIRECTION_VECTORS.items():
        reach_r = dr * (CONNECT_N - 1)
        reach_c = dc * (CONNECT_N - 1)

        for row in range(board.rows):
            for col in range(board.cols):
                if not board.in_bounds(row + reach_r, col + reach_c):
                    continue

                window = [(row + dr * i, col + dc * i) for i in range(CONNECT_N)]
                if all(board.holds(r, c, player) for r, c in window):
                    debug.trace(f"{direction.name} line for {player} at {window}", "rules")
                    return window

    return []


def check_win(board: Board, player: Player) -> bool:
    """Check if a player has four in a row anywhere on the board."""
    return bool(find_winning_line(board, player))


def evaluate(board: Board) -> GameResult:
    """Derive the game outcome from the grid alone."""
    for player in (Player.ONE, Player.TWO):
        if check_win(board, player):
            return GameResult.win_for(player)

    if board.is_full():
        return GameResult.DRAW

    return GameResult.IN_PROGRESS


class ConnectFourGame:
    """
    Connect Four turn state machine.

    Player ONE moves first. A successful move either ends the game (win or
    full board) or passes the turn; a rejected move changes nothing, so the
    same player is asked again.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS):
        debug.debug(f"Initializing {rows}x{cols} ConnectFourGame", "game")
        self.board = Board(rows, cols)
        self.current_player = Player.ONE
        self.moves_made: List[int] = []

    def reset(self) -> None:
        """Reset the game to initial state."""
        debug.debug("Resetting game", "game")
        self.board.reset()
        self.current_player = Player.ONE
        self.moves_made = []

    @property
    def rows(self) -> int:
        """Number of rows on the board."""
        return self.board.rows

    @property
    def cols(self) -> int:
        """Number of columns on the board."""
        return self.board.cols

    @property
    def result(self) -> GameResult:
        """The outcome, recomputed from the board on every read."""
        return evaluate(self.board)

    def is_game_over(self) -> bool:
        """Check if the game has been won or drawn."""
        return self.result.is_game_over()

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            The winning player, or None if the game is running or drawn
        """
        result = self.result
        if result == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        elif result == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    def is_valid_move(self, column: int) -> bool:
        """
        Check if a move is valid.

        Args:
            column: The column to place a piece (0-indexed)

        Returns:
            True if the column is in range and not full and the game is running
        """
        if not (0 <= column < self.cols):
            debug.debug(f"Invalid move: column {column} out of bounds", "game")
            return False

        if self.board.is_column_full(column):
            debug.debug(f"Invalid move: column {column} is full", "game")
            return False

        if self.is_game_over():
            debug.debug("Invalid move: game is over", "game")
            return False

        return True

    def get_valid_moves(self) -> List[int]:
        """
        Get the columns that can still take a piece.

        Returns:
            List of column indices, empty once the game is over
        """
        if self.is_game_over():
            return []
        return [col for col in range(self.cols) if not self.board.is_column_full(col)]

    def make_move(self, column: int) -> bool:
        """
        Play the current player's piece in a column.

        Args:
            column: The column to place a piece (0-indexed)

        Returns:
            True if the move was applied, False if it was rejected
        """
        if not self.is_valid_move(column):
            return False

        player = self.current_player
        if not drop_piece(self.board, column, player):
            return False
        self.moves_made.append(column)
        debug.debug(f"Player {player} played column {column}", "game")

        if check_win(self.board, player):
            debug.info(f"Player {player} wins after {len(self.moves_made)} moves", "game")
            return True

        if self.board.is_full():
            debug.info("Game ends in a draw", "game")
            return True

        self.current_player = player.other()
        return True

    def render(self) -> str:
        """Render the game board as a string."""
        return self.board.render()


MoveCallback = Callable[[ConnectFourGame, Player, int], None]


def play_game(game: ConnectFourGame,
              players: Dict[Player, 'MoveStrategy'],
              on_move: Optional[MoveCallback] = None) -> GameResult:
    """
    Run a game to completion.

    The player to move is asked for a column until one is accepted; the
    turn never passes on a rejected column.

    Args:
        game: The game to drive
        players: Move strategy for Player.ONE and Player.TWO
        on_move: Called with (game, player, column) after each applied move

    Returns:
        The final result, PLAYER_ONE_WIN, PLAYER_TWO_WIN or DRAW
    """
    while not game.is_game_over():
        player = game.current_player
        column = players[player].get_move(game)

        if not game.make_move(column):
            debug.debug(f"Rejected column {column} from {player}, asking again", "game")
            continue

        if on_move is not None:
            on_move(game, player, column)

    result = game.result
    debug.info(f"Game over: {result.name}", "game")
    return result


if __name__ == "__main__":
    import random

    game = ConnectFourGame()
    while not game.is_game_over():
        game.make_move(random.choice(game.get_valid_moves()))
    print(game.render())
    print(f"Result: {game.result.name}")
