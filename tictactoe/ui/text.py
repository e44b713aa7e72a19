"""
user-facing strings for status, announcements and cell labels.
no qt here so the wording can be checked without a display.
"""
from ..game_logic import Status


def status_parts(state):
    """
    (headline, detail) shown in the status bar
    """
    result = state.outcome
    if result.status is Status.WIN:
        return "Winner:", f"Player {result.winner}"
    if result.status is Status.DRAW:
        return "Draw", "No more moves"
    return "Turn:", f"Player {state.turn}"


def status_text(state):
    result = state.outcome
    if result.status is Status.DRAW:
        return "Draw"
    return " ".join(status_parts(state))


def announcement(state):
    """sentence for screen readers"""
    result = state.outcome
    if result.status is Status.WIN:
        return f"Game over. Player {result.winner} wins."
    if result.status is Status.DRAW:
        return "Game over. Draw."
    return f"Player {state.turn}'s turn."


def cell_label(index, mark):
    # squares are numbered from 1 for people
    content = f"contains {mark}" if mark is not None else "empty"
    return f"Square {index + 1}, {content}"


def board_description(board):
    """all nine cell labels, read out by assistive tools without moving focus"""
    return "; ".join(cell_label(i, mark) for i, mark in enumerate(board))
