import os

# widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from tictactoe.game_logic import Mark, empty_board


def make_board(layout):
    """
    build a board from a 9-char string: 'X', 'O', or '.' for empty
    """
    marks = {'X': Mark.X, 'O': Mark.O, '.': None}
    cells = tuple(marks[c] for c in layout.replace(" ", ""))
    assert len(cells) == 9
    return cells


@pytest.fixture
def board_from():
    return make_board


@pytest.fixture
def blank():
    return empty_board()
