import itertools

import pytest

from tictactoe.game_logic import (
    DRAW, IN_PROGRESS, WINNING_LINES, GameState, IllegalMove, Mark, Outcome,
    Status, cell_to_index, current_turn, index_to_cell, next_turn, outcome,
    place, restart, winning_line,
)


def play(indices):
    state = restart()
    for i in indices:
        state = GameState(place(state.board, state.turn, i), next_turn(state.turn))
    return state


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("mark", [Mark.X, Mark.O])
def test_full_line_wins(line, mark):
    cells = [None] * 9
    for i in line:
        cells[i] = mark
    board = tuple(cells)
    assert outcome(board) == Outcome.win(mark)
    assert winning_line(board) == line


def test_empty_board_in_progress(blank):
    assert outcome(blank) == IN_PROGRESS
    assert winning_line(blank) is None


def test_partial_board_in_progress(board_from):
    assert outcome(board_from("XO. .X. O..")) == IN_PROGRESS


def test_mixed_line_is_not_a_win(board_from):
    assert outcome(board_from("XXO ... ...")) == IN_PROGRESS


def test_full_board_without_line_is_draw(board_from):
    board = board_from("XOX XOO OXX")
    assert outcome(board) == DRAW
    assert outcome(board).winner is None
    assert outcome(board).is_over


def test_win_on_full_board_beats_draw(board_from):
    assert outcome(board_from("XXX OOX OXO")) == Outcome.win(Mark.X)


def test_rows_checked_before_columns(board_from):
    # boards with two complete lines: the first one listed wins
    board = board_from("OOO XXX ...")
    assert outcome(board).winner is Mark.O
    board = board_from("XOO XOO XOO")
    assert winning_line(board) == (0, 3, 6)


def test_columns_checked_before_diagonals(board_from):
    board = board_from("..X .XX X.X")
    assert outcome(board).winner is Mark.X
    assert winning_line(board) == (2, 5, 8)


def test_outcome_is_total():
    values = (None, Mark.X, Mark.O)
    seen = set()
    for board in itertools.product(values, repeat=9):
        seen.add(outcome(board).status)
    assert seen == {Status.IN_PROGRESS, Status.WIN, Status.DRAW}


def test_place_changes_exactly_one_cell(blank):
    board = place(blank, Mark.X, 4)
    assert board[4] is Mark.X
    assert [c for i, c in enumerate(board) if i != 4] == [None] * 8
    assert blank == (None,) * 9


def test_place_on_occupied_cell(board_from):
    board = board_from("X.. ... ...")
    with pytest.raises(IllegalMove) as exc:
        place(board, Mark.O, 0)
    assert exc.value.index == 0
    assert board[0] is Mark.X


def test_place_after_win(board_from):
    board = board_from("XXX OO. ...")
    for i in (5, 6, 7, 8):
        with pytest.raises(IllegalMove):
            place(board, Mark.O, i)


@pytest.mark.parametrize("index", [-1, 9, 42])
def test_place_out_of_range(blank, index):
    with pytest.raises(ValueError):
        place(blank, Mark.X, index)


def test_next_turn_alternates():
    assert next_turn(Mark.X) is Mark.O
    assert next_turn(Mark.O) is Mark.X
    assert next_turn(next_turn(Mark.X)) is Mark.X


@pytest.mark.parametrize("n", range(8))
def test_turn_parity(n):
    state = play([0, 1, 2, 4, 3, 5, 7, 6][:n])
    assert state.move_count == n
    assert current_turn(state) is (Mark.X if n % 2 == 0 else Mark.O)


def test_restart_is_initial_state():
    state = restart()
    assert state.board == (None,) * 9
    assert state.turn is Mark.X
    assert state == GameState()


def test_row_win_scenario():
    state = play([0, 3, 1, 4, 2])
    assert state.outcome == Outcome.win(Mark.X)


def test_draw_scenario():
    state = play([0, 1, 2, 4, 3, 5, 7, 6, 8])
    assert state.move_count == 9
    assert state.outcome == DRAW


def test_last_move_completing_two_lines_reports_column():
    # X ends on 0, 2, 4, 5 and 8: column 2-5-8 and diagonal 0-4-8 close together
    state = play([0, 1, 2, 3, 4, 6, 5, 7, 8])
    assert state.outcome == Outcome.win(Mark.X)
    assert winning_line(state.board) == (2, 5, 8)


def test_index_cell_mapping():
    assert index_to_cell(0) == (0, 0)
    assert index_to_cell(5) == (1, 2)
    assert index_to_cell(7) == (2, 1)
    for i in range(9):
        assert cell_to_index(*index_to_cell(i)) == i

def test_state_views(board_from):
    state = GameState(board_from("X.. .O. ..."), Mark.X)
    assert state.cell(0, 0) is Mark.X
    assert state.cell(1, 1) is Mark.O
    assert state.is_empty(8)
    assert not state.is_empty(4)
    assert not state.is_over
