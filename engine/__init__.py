"""
Engine for human vs. computer TicTacToe.
Handles board model, game state, rules, and the minimax opponent.
"""

from .config import GameConfig
from .board import Board, Mark, board_from, sequences_from, empty_cells, format_board
from .win_checker import WinChecker
from .game_state import GameState, Player, Outcome, ScoreTally
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, SearchResult
from .game_engine import GameEngine

__version__ = "1.0.0"
