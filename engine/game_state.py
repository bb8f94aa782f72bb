"""
Game state management for TicTacToe.
Tracks both players' moves, who opened the round, and the result.
"""

from enum import Enum
from typing import List, Optional, Tuple
from dataclasses import dataclass, field

from .board import Board, Mark, board_from, empty_cells


class Player(Enum):
    """The two players in the game."""
    HUMAN = "human"
    AUTOMATED = "automated"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.AUTOMATED if self == Player.HUMAN else Player.HUMAN

    @property
    def mark(self) -> Mark:
        """The mark this player puts on the board."""
        return Mark.HUMAN if self == Player.HUMAN else Mark.AUTOMATED


class Outcome(Enum):
    """Result of a round."""
    IN_PROGRESS = "in_progress"
    HUMAN_WIN = "human_win"
    AUTOMATED_WIN = "automated_win"
    DRAW = "draw"

    @property
    def is_over(self) -> bool:
        return self != Outcome.IN_PROGRESS


@dataclass
class ScoreTally:
    """Wins per player, kept across rounds of one session."""
    human_wins: int = 0
    automated_wins: int = 0

    def record(self, outcome: Outcome):
        """Count a finished round. Draws count for nobody."""
        if outcome == Outcome.HUMAN_WIN:
            self.human_wins += 1
        elif outcome == Outcome.AUTOMATED_WIN:
            self.automated_wins += 1


@dataclass
class GameState:
    """
    The state of one round of TicTacToe.

    Tracks:
    - The cells each player has taken, in the order they were played
    - Who moved first (None until chosen)
    - The round's outcome

    The board itself is not stored; it is rebuilt from the move lists.
    """

    human_moves: List[int] = field(default_factory=list)
    automated_moves: List[int] = field(default_factory=list)

    # Who opened this round - None until chosen
    first_mover: Optional[Player] = None

    outcome: Outcome = Outcome.IN_PROGRESS

    @property
    def board(self) -> Board:
        """The current board, derived from both move lists."""
        return board_from(self.human_moves, self.automated_moves)

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_over

    def is_occupied(self, cell: int) -> bool:
        return cell in self.human_moves or cell in self.automated_moves

    def is_humans_turn(self) -> bool:
        """
        Check if the human is the one to move.

        With the human opening, the human moves whenever both players have
        made the same number of moves. With the automated player opening,
        the human moves only while behind by one.
        """
        if self.first_mover is None:
            return False
        if self.first_mover == Player.HUMAN:
            return len(self.human_moves) == len(self.automated_moves)
        return len(self.human_moves) < len(self.automated_moves)

    @property
    def current_player(self) -> Optional[Player]:
        """Whose turn it is, or None if no round is being played."""
        if self.first_mover is None or self.is_game_over:
            return None
        return Player.HUMAN if self.is_humans_turn() else Player.AUTOMATED

    def moves_of(self, player: Player) -> List[int]:
        return self.human_moves if player == Player.HUMAN else self.automated_moves

    def history(self) -> List[Tuple[Player, int]]:
        """
        Get every move of the round in the order it was played.

        Returns:
            List of (player, cell) tuples.
        """
        if self.first_mover is None:
            return []
        first = self.first_mover
        second = first.opposite()
        first_moves = self.moves_of(first)
        second_moves = self.moves_of(second)

        history = []
        for i, cell in enumerate(first_moves):
            history.append((first, cell))
            if i < len(second_moves):
                history.append((second, second_moves[i]))
        return history

    def empty_cells(self) -> List[int]:
        return empty_cells(self.board)

    def clear(self, keep_first_mover: bool = False):
        """Start the round over. Moves and outcome are always cleared."""
        self.human_moves = []
        self.automated_moves = []
        self.outcome = Outcome.IN_PROGRESS
        if not keep_first_mover:
            self.first_mover = None

    def copy(self) -> "GameState":
        """Create an independent copy of the game state."""
        return GameState(
            human_moves=list(self.human_moves),
            automated_moves=list(self.automated_moves),
            first_mover=self.first_mover,
            outcome=self.outcome,
        )
