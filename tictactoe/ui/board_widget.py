from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import UIConfig
from ..game_logic import BOARD_SIZE, Mark, cell_to_index, index_to_cell, winning_line
from .focus import Direction, RovingFocus
from .text import board_description, cell_label

ARROW_KEYS = {
    Qt.Key_Up: Direction.UP,
    Qt.Key_Down: Direction.DOWN,
    Qt.Key_Left: Direction.LEFT,
    Qt.Key_Right: Direction.RIGHT,
}
# enter is the primary gesture, space the secondary one
ACTIVATE_KEYS = (Qt.Key_Return, Qt.Key_Enter, Qt.Key_Space)


class BoardWidget(QWidget):
    """
    custom widget to draw the board and pick cells by mouse or keyboard
    """
    cell_activated = Signal(int)  # emits cell index 0-8

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session          # read-only view of game state
        self.focus = RovingFocus()
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(UIConfig.BOARD_MIN_SIZE, UIConfig.BOARD_MIN_SIZE))
        self.setFocusPolicy(Qt.StrongFocus)
        self.refresh()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def is_cell_active(self, index):
        """
        only empty cells of a running game respond
        """
        state = self.session.state
        return not state.is_over and state.board[index] is None

    def refresh(self):
        """
        re-read state: move focus off filled cells, update labels, repaint
        """
        board = self.session.state.board
        self.focus.sync(board)
        self._update_accessible_text()
        self.update()

    def _update_accessible_text(self):
        index = self.focus.index
        label = cell_label(index, self.session.state.board[index])
        if not self.is_cell_active(index):
            label += ", unavailable"
        self.setAccessibleName(label)
        self.setToolTip(label)
        self.setAccessibleDescription(board_description(self.session.state.board))

    def _geometry(self):
        # square area centered in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side / BOARD_SIZE

    def _cell_rect(self, index, ox, oy, cell):
        row, col = index_to_cell(index)
        return QRectF(ox + col * cell, oy + row * cell, cell, cell)

    def paintEvent(self, event):
        """
        draw grid, marks, winning line and the focus ring
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, cell = self._geometry()
            side = cell * BOARD_SIZE
            board = self.session.state.board
            painter.fillRect(self.rect(), QColor(UIConfig.BOARD_BACKGROUND))
            # winning cells underneath everything else
            line = winning_line(board)
            if line:
                for index in line:
                    painter.fillRect(self._cell_rect(index, ox, oy, cell),
                                     QColor(UIConfig.WIN_HIGHLIGHT))
            # grid lines
            painter.setPen(QPen(QColor(UIConfig.GRID_COLOR), UIConfig.GRID_WIDTH))
            for i in range(1, BOARD_SIZE):
                x = ox + i * cell
                painter.drawLine(QPointF(x, oy), QPointF(x, oy + side))
                y = oy + i * cell
                painter.drawLine(QPointF(ox, y), QPointF(ox + side, y))
            for index, mark in enumerate(board):
                if mark is None:
                    continue
                center = self._cell_rect(index, ox, oy, cell).center()
                rad = cell / 2 * UIConfig.MARK_SCALE
                painter.setPen(QPen(QColor(UIConfig.MARK_COLORS[mark.value]), UIConfig.MARK_WIDTH))
                if mark is Mark.X:
                    # two crossing lines
                    painter.drawLine(center + QPointF(-rad, -rad), center + QPointF(rad, rad))
                    painter.drawLine(center + QPointF(rad, -rad), center + QPointF(-rad, rad))
                else:
                    painter.drawEllipse(center, rad, rad)
            if self.hasFocus():
                pen = QPen(QColor(UIConfig.FOCUS_COLOR), 2, Qt.DashLine)
                painter.setPen(pen)
                painter.drawRect(self._cell_rect(self.focus.index, ox, oy, cell).adjusted(3, 3, -3, -3))
        finally:
            painter.end()

    def focusInEvent(self, event):
        super().focusInEvent(event)
        self.update()

    def focusOutEvent(self, event):
        super().focusOutEvent(event)
        self.update()

    def activate(self, index):
        """
        emit cell_activated unless the cell is inert
        """
        if self.is_cell_active(index):
            self.cell_activated.emit(index)

    def keyPressEvent(self, event):
        key = event.key()
        if key in ARROW_KEYS:
            self.focus.move(ARROW_KEYS[key])
            self._update_accessible_text()
            self.update()
        elif key in ACTIVATE_KEYS:
            self.activate(self.focus.index)
        else:
            super().keyPressEvent(event)

    def cell_at(self, x, y):
        """
        widget coords -> cell index, None outside the grid
        """
        ox, oy, cell = self._geometry()
        side = cell * BOARD_SIZE
        if cell <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        col = min(int((x - ox) // cell), BOARD_SIZE - 1)
        row = min(int((y - oy) // cell), BOARD_SIZE - 1)
        return cell_to_index(row, col)

    def mouseReleaseEvent(self, event):
        """
        handle clicks: focus the clicked cell and activate it
        """
        if event.button() != Qt.LeftButton:
            return
        index = self.cell_at(event.position().x(), event.position().y())
        if index is None:
            return
        self.focus.set(index)
        self._update_accessible_text()
        self.update()
        self.activate(index)
