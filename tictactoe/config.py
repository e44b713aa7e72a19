"""
Look-and-feel settings for the Tic Tac Toe window.
Change these values to restyle the game.
"""


class UIConfig:
    """
    colors and sizes used by the widgets
    """

    # ==================== WINDOW ====================
    WINDOW_TITLE = "Tic Tac Toe"
    RESTART_LABEL = "Restart"
    RESTART_ACCESSIBLE_NAME = "Restart game"

    # ==================== BOARD ====================
    BOARD_MIN_SIZE = 150          # px, the board stays square
    BOARD_BACKGROUND = "#333"
    GRID_COLOR = "#555"
    GRID_WIDTH = 2
    MARK_WIDTH = 4
    MARK_SCALE = 0.7              # mark radius relative to half a cell
    FOCUS_COLOR = "#f5d76e"
    WIN_HIGHLIGHT = "#3d5a3d"

    MARK_COLORS = {
        'X': "#8acaff",
        'O': "#ff8a8a",
    }

    # ==================== STATUS ====================
    STATUS_TURN_STYLE = "color: #8acaff; font-weight: bold;"
    STATUS_WIN_STYLE = "color: lime; font-weight: bold;"
    STATUS_DRAW_STYLE = "color: #eee; font-weight: bold;"
    STATUS_FONT_SIZE = 12

    # ==================== PALETTE ====================
    # QPalette role name -> color, applied app-wide
    PALETTE = {
        "Window": "#353535",
        "WindowText": "white",
        "Base": "#232323",
        "AlternateBase": "#353535",
        "ToolTipBase": "white",
        "ToolTipText": "black",
        "Text": "white",
        "Button": "#424242",
        "ButtonText": "white",
        "BrightText": "red",
        "Link": "#2a82da",
        "Highlight": "#2a82da",
        "HighlightedText": "white",
        "PlaceholderText": "#a0a0a0",
    }
    DISABLED_PALETTE = {
        "Text": "#7f7f7f",
        "ButtonText": "#7f7f7f",
        "WindowText": "#7f7f7f",
    }
