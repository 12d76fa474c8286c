"""
Game configuration for TicTacToe.
Settings for who plays which mark, AI pacing, logging and the UI.
"""

from .board import Mark


class GameConfig:
    """
    Configuration class for game settings.
    Command-line flags override some of these (see main.py).
    """

    # ==================== PLAYERS ====================
    # X always moves first; by default the human is X and the AI
    # plays the other mark (--ai-first swaps them)
    HUMAN_MARK = Mark.X

    # ==================== AI PACING ====================
    # Pause before the AI plays, so its move doesn't appear instantly.
    # Only the front ends sleep; the engine itself never waits.
    AI_THINK_DELAY_S = 0.5

    # ==================== LOGGING ====================
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    BACKGROUND = "#171717"
    FOREGROUND = "#F8FAFC"
    HUMAN_COLOR = "#4ADE80"
    AI_COLOR = "#F8FAFC"
    WIN_HIGHLIGHT = "#854d0e"

    RULES = (
        "1. The game is played on a 3x3 grid.\n"
        "2. X always goes first. You play X unless the AI is set to start.\n"
        "3. Players take turns putting their mark in an empty square.\n"
        "4. The first to get 3 marks in a row (across, down or diagonal) wins.\n"
        "5. If all 9 squares are full and nobody has 3 in a row, it's a tie."
    )
