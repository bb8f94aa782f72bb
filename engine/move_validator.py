"""
Move validator for TicTacToe.
Validates that a human move follows the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Someone must have been chosen to move first
    3. Can only place on empty cells of the board
    4. Must be the human's turn
    """

    def validate_human_move(self, game_state: GameState, cell: int) -> ValidationResult:
        """
        Validate a human move.

        Args:
            game_state: Current game state.
            cell: Cell to mark (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if game_state.first_mover is None:
            return ValidationResult(
                is_valid=False,
                error_message="Nobody has been chosen to move first"
            )

        # bool is an int subclass but never a cell
        if isinstance(cell, bool) or not isinstance(cell, int) \
                or not 0 <= cell < GameConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {cell!r}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        if game_state.is_occupied(cell):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {cell} is already occupied"
            )

        if not game_state.is_humans_turn():
            return ValidationResult(
                is_valid=False,
                error_message="It's not the human's turn"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all cells the human could play right now.

        Returns:
            List of cell indices, empty when the human can't move.
        """
        if game_state.is_game_over or not game_state.is_humans_turn():
            return []
        return game_state.empty_cells()
