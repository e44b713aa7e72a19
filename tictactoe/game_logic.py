from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Mark(Enum):
    """
    the two player symbols
    """
    X = 'X'
    O = 'O'

    def __str__(self):
        return self.value


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


class GameError(Exception):
    """base class for game rule errors"""


class IllegalMove(GameError):
    """
    raised when placing on an occupied cell or after the game has ended
    """
    def __init__(self, index, reason):
        super().__init__(f"illegal move at {index}: {reason}")
        self.index = index
        self.reason = reason


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE
FIRST_MARK = Mark.X

# scan order matters: rows, then columns, then diagonals
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),   # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),   # cols
    (0, 4, 8), (2, 4, 6),              # diags
)

Board = Tuple[Optional[Mark], ...]


@dataclass(frozen=True)
class Outcome:
    """
    derived game status: in progress, win(mark) or draw
    """
    status: Status
    winner: Optional[Mark] = None

    @property
    def is_over(self):
        return self.status is not Status.IN_PROGRESS

    @classmethod
    def in_progress(cls):
        return cls(Status.IN_PROGRESS)

    @classmethod
    def win(cls, mark):
        return cls(Status.WIN, mark)

    @classmethod
    def draw(cls):
        return cls(Status.DRAW)


IN_PROGRESS = Outcome.in_progress()
DRAW = Outcome.draw()


def empty_board() -> Board:
    return (None,) * CELL_COUNT


def index_to_cell(index):
    """row-major index -> (row, col)"""
    return divmod(index, BOARD_SIZE)


def cell_to_index(row, col):
    return row * BOARD_SIZE + col


def _check_index(index):
    if not 0 <= index < CELL_COUNT:
        raise ValueError(f"cell index must be in [0, {CELL_COUNT - 1}], got {index}")


def winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """
    first line held entirely by one mark, in WINNING_LINES order
    """
    for a, b, c in WINNING_LINES:
        if board[a] is not None and board[a] == board[b] == board[c]:
            return (a, b, c)
    return None


def outcome(board: Board) -> Outcome:
    """
    win if some line is uniform, draw if the board is full, else in progress.
    total over every 9-cell board, reachable or not
    """
    line = winning_line(board)
    if line is not None:
        return Outcome.win(board[line[0]])
    if all(cell is not None for cell in board):
        return DRAW
    return IN_PROGRESS


def next_turn(turn: Mark) -> Mark:
    return Mark.O if turn is Mark.X else Mark.X


def place(board: Board, turn: Mark, index: int) -> Board:
    """
    return a new board with `turn` at `index`.
    raises IllegalMove if the cell is taken or the game is over
    """
    _check_index(index)
    if outcome(board).is_over:
        raise IllegalMove(index, "game is over")
    if board[index] is not None:
        raise IllegalMove(index, f"cell holds {board[index]}")
    cells = list(board)
    cells[index] = turn
    return tuple(cells)


@dataclass(frozen=True)
class GameState:
    """
    board plus the mark to move; everything else is derived
    """
    board: Board = empty_board()
    turn: Mark = FIRST_MARK

    @property
    def outcome(self):
        return outcome(self.board)

    @property
    def is_over(self):
        return self.outcome.is_over

    @property
    def move_count(self):
        return sum(1 for cell in self.board if cell is not None)

    def is_empty(self, index):
        _check_index(index)
        return self.board[index] is None

    def cell(self, row, col):
        return self.board[cell_to_index(row, col)]


def restart() -> GameState:
    """fresh board, first mark to move"""
    return GameState(empty_board(), FIRST_MARK)


def current_turn(state: GameState) -> Mark:
    return state.turn
