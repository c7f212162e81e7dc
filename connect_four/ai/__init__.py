"""
connect_four.ai - Computer move selection for Connect Four

Move strategies pick a column for the player whose turn it is. Only the
uniform random player is provided.
"""

from connect_four.ai.base import MoveStrategy
from connect_four.ai.random_player import RandomPlayer

__all__ = ['MoveStrategy', 'RandomPlayer']
