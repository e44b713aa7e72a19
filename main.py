import argparse
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QPalette, QColor
from tictactoe.config import UIConfig
from tictactoe.log_config import LOG_LEVEL_ENV, get_logger, setup_logging
from tictactoe.ui.main_window import TicTacToeWindow

logger = get_logger("tictactoe")

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the dark theme palette described in UIConfig.
    """
    palette = QPalette()
    for role_name, color in UIConfig.PALETTE.items():
        palette.setColor(getattr(QPalette, role_name), QColor(color))
    for role_name, color in UIConfig.DISABLED_PALETTE.items():
        palette.setColor(QPalette.Disabled, getattr(QPalette, role_name), QColor(color))
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def parse_args(argv):
    parser = argparse.ArgumentParser(prog="tictactoe", description="Two-player Tic Tac Toe.")
    parser.add_argument("--log-level", default=None,
                        help=f"debug, info, warning... (default: ${LOG_LEVEL_ENV} or INFO)")
    # qt consumes its own flags (-style, -platform, ...)
    args, qt_args = parser.parse_known_args(argv[1:])
    return args, [argv[0]] + qt_args


def main(argv=None):
    args, qt_argv = parse_args(argv if argv is not None else sys.argv)
    setup_logging(args.log_level)

    app = QApplication(qt_argv)
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    window = TicTacToeWindow()
    window.show()
    logger.info("window opened")
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
