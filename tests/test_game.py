"""
Tests for the ConnectFourGame turn state machine and the play_game loop.
"""

import random

import pytest

from connect_four.ai.random_player import RandomPlayer
from connect_four.game.rules import ConnectFourGame, play_game
from connect_four.utils import Player, GameResult


class ScriptedPlayer:
    """Returns columns from a fixed list, recording how often it was asked."""

    name = "Scripted"

    def __init__(self, columns):
        self.columns = list(columns)
        self.calls = 0

    def get_move(self, game):
        self.calls += 1
        return self.columns.pop(0)


def play_columns(game, columns):
    for column in columns:
        assert game.make_move(column), f"column {column} was rejected"


class TestTurnOrder:

    def test_initial_state(self):
        game = ConnectFourGame(6, 7)
        assert game.current_player == Player.ONE
        assert game.result == GameResult.IN_PROGRESS
        assert not game.is_game_over()
        assert game.get_winner() is None
        assert game.get_valid_moves() == list(range(7))

    def test_players_alternate(self):
        game = ConnectFourGame(6, 7)
        game.make_move(3)
        assert game.current_player == Player.TWO
        game.make_move(3)
        assert game.current_player == Player.ONE
        assert game.board.get(0, 3) == Player.ONE
        assert game.board.get(1, 3) == Player.TWO
        assert game.moves_made == [3, 3]

    @pytest.mark.parametrize("column", [-1, 7, 100])
    def test_out_of_range_column_rejected(self, column):
        game = ConnectFourGame(6, 7)
        assert not game.is_valid_move(column)
        assert not game.make_move(column)
        assert game.current_player == Player.ONE
        assert game.moves_made == []

    def test_full_column_rejected_without_switching(self):
        game = ConnectFourGame(2, 5)
        play_columns(game, [0, 0])
        assert not game.make_move(0)
        assert game.current_player == Player.ONE
        assert 0 not in game.get_valid_moves()

    def test_reset(self):
        game = ConnectFourGame(4, 4)
        play_columns(game, [0, 1, 2])
        game.reset()
        assert game.current_player == Player.ONE
        assert game.moves_made == []
        assert game.board.get_state().sum() == 0


class TestGameOutcomes:

    def test_horizontal_win_on_row_zero(self):
        game = ConnectFourGame(6, 7)
        play_columns(game, [0, 6, 1, 6, 2, 6])
        assert not game.is_game_over()

        play_columns(game, [3])
        assert game.result == GameResult.PLAYER_ONE_WIN
        assert game.get_winner() == Player.ONE
        assert game.current_player == Player.ONE
        assert len(game.moves_made) == 7

    def test_vertical_win(self):
        game = ConnectFourGame(6, 7)
        play_columns(game, [3, 4, 3, 4, 3, 4])
        assert not game.is_game_over()
        play_columns(game, [3])
        assert game.get_winner() == Player.ONE

    def test_second_player_can_win(self):
        game = ConnectFourGame(6, 7)
        play_columns(game, [0, 1, 0, 1, 2, 1, 0, 1])
        assert game.result == GameResult.PLAYER_TWO_WIN
        assert game.get_winner() == Player.TWO

    def test_diagonal_win(self):
        game = ConnectFourGame(6, 7)
        play_columns(game, [0, 1, 1, 2, 2, 3, 2, 3, 3, 6])
        assert not game.is_game_over()
        play_columns(game, [3])
        assert game.get_winner() == Player.ONE

    def test_no_moves_after_win(self):
        game = ConnectFourGame(6, 7)
        play_columns(game, [0, 6, 1, 6, 2, 6, 3])
        assert game.get_valid_moves() == []
        assert not game.make_move(4)
        assert game.board.is_empty(0, 4)

    def test_draw_on_full_board(self):
        game = ConnectFourGame(2, 7)
        play_columns(game, list(range(7)) + list(range(7)))
        assert game.board.is_full()
        assert game.result == GameResult.DRAW
        assert game.get_winner() is None
        assert not game.make_move(0)

    def test_tiny_board_always_draws(self):
        game = ConnectFourGame(3, 3)
        play_columns(game, [0, 1, 2] * 3)
        assert game.result == GameResult.DRAW

    def test_win_on_last_cell_is_not_a_draw(self):
        game = ConnectFourGame(1, 4)
        game.board.place(0, 1, Player.ONE)
        game.board.place(0, 2, Player.ONE)
        game.board.place(0, 3, Player.ONE)
        play_columns(game, [0])
        assert game.board.is_full()
        assert game.result == GameResult.PLAYER_ONE_WIN


class TestPlayGame:

    def test_scripted_game_retries_rejected_columns(self):
        one = ScriptedPlayer([9, 0, 1, 2, 3])
        two = ScriptedPlayer([6, -1, 6, 6])
        moves = []

        game = ConnectFourGame(6, 7)
        result = play_game(game, {Player.ONE: one, Player.TWO: two},
                           on_move=lambda g, p, c: moves.append((p, c)))

        assert result == GameResult.PLAYER_ONE_WIN
        assert one.calls == 5
        assert two.calls == 4
        assert moves == [(Player.ONE, 0), (Player.TWO, 6), (Player.ONE, 1),
                         (Player.TWO, 6), (Player.ONE, 2), (Player.TWO, 6),
                         (Player.ONE, 3)]

    @pytest.mark.parametrize("seed", range(5))
    def test_random_games_always_terminate(self, seed):
        bot = RandomPlayer(random.Random(seed))
        game = ConnectFourGame(6, 7)
        result = play_game(game, {Player.ONE: bot, Player.TWO: bot})
        assert result.is_game_over()
        assert result == game.result
        assert len(game.moves_made) <= 42

    def test_finished_game_returns_immediately(self):
        game = ConnectFourGame(6, 7)
        play_columns(game, [0, 6, 1, 6, 2, 6, 3])
        idle = ScriptedPlayer([])
        assert play_game(game, {Player.ONE: idle, Player.TWO: idle}) == GameResult.PLAYER_ONE_WIN
        assert idle.calls == 0
