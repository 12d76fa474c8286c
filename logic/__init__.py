"""
Logic module for TicTacToe.
Handles the board, game state, rules, and the minimax AI opponent.
"""

__version__ = "1.0.0"

from .board import Board, Mark
from .game_state import GameEngine, GameStatus, Outcome
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer, best_move, minimax, score_moves
from .config import GameConfig
