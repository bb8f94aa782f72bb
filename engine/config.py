"""
Game configuration for TicTacToe.
All the settings for the board, the AI search, logging and the window.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the engine and the front-ends.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells indexed 0-8 row by row
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE

    # Marks shown for each player
    HUMAN_MARK = "X"
    AUTOMATED_MARK = "O"

    # ==================== AI SETTINGS ====================
    # Base score of a won position; depth is subtracted so faster wins
    # (and slower losses) score better
    WIN_SCORE = 10

    # Alpha-beta pruning only skips work, the chosen move stays the same
    ALPHA_BETA = True

    # ==================== LOGGING SETTINGS ====================
    LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
    LOG_LEVEL = "WARNING"

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"

    # Size of the rendered board image (pixels, square)
    BOARD_IMAGE_SIZE = 420
    GRID_LINE_WIDTH = 4
    MARK_LINE_WIDTH = 10
    MARK_PADDING = 0.22  # Fraction of a cell left empty around a mark

    # Colors (RGB)
    BACKGROUND_COLOR = (0, 0, 0)
    GRID_COLOR = (255, 255, 255)
    HUMAN_COLOR = (255, 255, 255)
    AUTOMATED_COLOR = (255, 255, 255)
    WIN_LINE_COLOR = (22, 163, 74)
