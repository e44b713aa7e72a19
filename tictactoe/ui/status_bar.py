from PySide6.QtWidgets import QLabel, QSizePolicy
from PySide6.QtGui import QFont
from PySide6.QtCore import Qt

from ..config import UIConfig
from ..game_logic import Status
from .text import announcement, status_parts


class StatusBar(QLabel):
    """
    one-line game status: whose turn, the winner, or draw
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        f = QFont(); f.setPointSize(UIConfig.STATUS_FONT_SIZE); self.setFont(f)
        self.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.setTextFormat(Qt.RichText)

    def show_state(self, state):
        status = state.outcome.status
        headline, detail = status_parts(state)
        if status is Status.WIN:   style = UIConfig.STATUS_WIN_STYLE
        elif status is Status.DRAW: style = UIConfig.STATUS_DRAW_STYLE
        else:                      style = UIConfig.STATUS_TURN_STYLE
        self.setStyleSheet(style)
        self.setText(f"<b>{headline}</b>&nbsp;{detail}")
        # screen readers pick this up as the live description
        self.setAccessibleName(f"{headline} {detail}")
        self.setAccessibleDescription(announcement(state))
