from ..config import UIConfig
from ..controller import GameSession
from ..log_config import get_logger
from ..ui.board_widget import BoardWidget
from ..ui.status_bar import StatusBar

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu
)
from PySide6.QtGui import QAction, QFont, QKeySequence
from PySide6.QtCore import Qt, Slot

logger = get_logger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window: status, board and restart button over one game session
    """
    def __init__(self, session=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.session = session or GameSession()
        self.board_widget = BoardWidget(self.session, parent=self)
        self._setup_ui()
        # every state change re-renders the whole view
        self._unsubscribe = self.session.subscribe(self._render)
        self._render(self.session.state)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(UIConfig.WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QPushButton { padding: 6px 14px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        title = QLabel(UIConfig.WINDOW_TITLE)
        f = QFont(); f.setPointSize(18); f.setBold(True); title.setFont(f)
        title.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(title)
        self.status_bar = StatusBar()
        self.main_layout.addWidget(self.status_bar)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_activated.connect(self._on_cell_activated)

        self._create_bottom_controls()     # restart button
        self.main_layout.addWidget(self.controls_bottom_widget)
        self.board_widget.setFocus()

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.setShortcut(QKeySequence.New)
        new_action.triggered.connect(self.restart_game)
        quit_action = QAction("Quit", self)
        quit_action.setShortcut(QKeySequence.Quit)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.restart_button = QPushButton(UIConfig.RESTART_LABEL)
        self.restart_button.setAccessibleName(UIConfig.RESTART_ACCESSIBLE_NAME)
        self.restart_button.clicked.connect(self.restart_game)
        hl.addStretch(1)
        hl.addWidget(self.restart_button)
        hl.addStretch(1)

    def _render(self, state):
        # projection of state onto the widgets
        self.status_bar.show_state(state)
        self.board_widget.refresh()

    @Slot(int)
    def _on_cell_activated(self, index):
        self.session.activate(index)

    @Slot()
    def restart_game(self):
        self.session.restart()
        self.board_widget.setFocus()

    def closeEvent(self, event):
        # drop the subscription so the session doesn't keep us alive
        self._unsubscribe()
        logger.debug("window closed")
        event.accept()
