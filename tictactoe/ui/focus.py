from enum import Enum

from ..game_logic import BOARD_SIZE, CELL_COUNT, cell_to_index, index_to_cell


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


def first_empty(board):
    """
    index of the first unoccupied cell, 0 on a full board
    """
    for i, cell in enumerate(board):
        if cell is None:
            return i
    return 0


class RovingFocus:
    """
    tracks the one keyboard-focusable cell out of nine.
    arrow moves wrap around within the row or column
    """
    def __init__(self, index=0):
        self.index = index

    def move(self, direction):
        row, col = index_to_cell(self.index)
        d_row, d_col = direction.value
        row = (row + d_row) % BOARD_SIZE
        col = (col + d_col) % BOARD_SIZE
        self.index = cell_to_index(row, col)
        return self.index

    def set(self, index):
        if not 0 <= index < CELL_COUNT:
            raise ValueError(f"focus index out of range: {index}")
        self.index = index

    def sync(self, board):
        """
        keep focus on an empty cell: jump to the first free one
        when the current target got filled or the board was cleared
        """
        if board[self.index] is not None or all(cell is None for cell in board):
            self.index = first_empty(board)
        return self.index
