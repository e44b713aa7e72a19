"""
input handling: turns cell activations and restarts into state transitions.

the pure functions `on_activate` / `on_restart` hold the rules; `GameSession`
owns the live state for one window and tells subscribers when it changes.
"""
from typing import Callable, List

from .game_logic import GameState, IllegalMove, next_turn, place, restart
from .log_config import get_logger

logger = get_logger(__name__)

Listener = Callable[[GameState], None]


def on_activate(state: GameState, index: int) -> GameState:
    """
    place the current mark at index and pass the turn.
    illegal moves leave the state untouched
    """
    try:
        board = place(state.board, state.turn, index)
    except IllegalMove as e:
        logger.debug("rejected: %s", e)
        return state
    return GameState(board, next_turn(state.turn))


def on_restart(state: GameState) -> GameState:
    # always allowed, whatever the outcome
    return restart()


class GameSession:
    """
    the single game state of a running window
    """
    def __init__(self, state=None):
        self._state = state if state is not None else restart()
        self._listeners: List[Listener] = []

    @property
    def state(self):
        return self._state

    @property
    def outcome(self):
        return self._state.outcome

    @property
    def current_turn(self):
        return self._state.turn

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        call listener(state) after every accepted change.
        returns a function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def activate(self, index: int) -> bool:
        """
        handle a cell activation; True if the move was accepted
        """
        mover = self._state.turn
        new_state = on_activate(self._state, index)
        if new_state is self._state:
            return False
        logger.info("player %s -> cell %d", mover, index)
        self._set_state(new_state)
        result = new_state.outcome
        if result.winner is not None:
            logger.info("game over: player %s wins", result.winner)
        elif result.is_over:
            logger.info("game over: draw")
        return True

    def restart(self):
        self._set_state(on_restart(self._state))
        logger.info("game restarted")

    def _set_state(self, state):
        self._state = state
        # copy: listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(state)
