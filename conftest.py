import pytest

from connect_four.game.board import Board
from connect_four.utils import Player


class ScriptedInput:
    """Stands in for input(): replays answers and records every prompt."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def scripted_input():
    return ScriptedInput


@pytest.fixture
def board_from_rows():
    """Build a board from strings written top row first, e.g. ["X   ", "XO  "]."""
    marks = {" ": Player.EMPTY, ".": Player.EMPTY, "X": Player.ONE, "O": Player.TWO}

    def build(lines):
        rows = len(lines)
        cols = len(lines[0])
        board = Board(rows, cols)
        for i, line in enumerate(lines):
            row = rows - 1 - i
            for col, ch in enumerate(line):
                if marks[ch] != Player.EMPTY:
                    board.place(row, col, marks[ch])
        return board

    return build
