"""
base.py - Move strategy interface

Anything with a ``name`` and a ``get_move(game)`` method can take a seat in
play_game: the console's HumanPlayer and the RandomPlayer both qualify.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from connect_four.game.rules import ConnectFourGame


@runtime_checkable
class MoveStrategy(Protocol):
    name: str

    def get_move(self, game: 'ConnectFourGame') -> int:
        """Choose a column for game.current_player."""
        ...
