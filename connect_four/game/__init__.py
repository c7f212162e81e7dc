"""
connect_four.game - Core game mechanics for Connect Four

This package contains the board representation, the move and win rules,
and the turn state machine.
"""

from connect_four.game.board import Board
from connect_four.game.rules import (ConnectFourGame, check_win, drop_piece, evaluate,
                                     find_winning_line, play_game)

__all__ = ['Board', 'ConnectFourGame', 'check_win', 'drop_piece', 'evaluate',
           'find_winning_line', 'play_game']
