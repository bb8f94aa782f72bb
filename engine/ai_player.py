"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the automated player's move.
"""

import logging
import random
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from .board import Board, Mark, empty_cells
from .config import GameConfig
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Best cell found by the search and the score it leads to."""
    score: float
    index: Optional[int] = None


@contextmanager
def placed(board: Board, cell: int, mark: Mark) -> Iterator[Board]:
    """Put a mark on the board for the duration of the block."""
    board[cell] = mark
    try:
        yield board
    finally:
        board[cell] = None


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI always plays the automated mark and always plays optimally - it
    will win if possible, block the opponent if needed, and never lose.
    """

    def __init__(self, prune: bool = GameConfig.ALPHA_BETA, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            prune: Use alpha-beta pruning. The chosen move is the same
                either way, pruning only evaluates fewer positions.
            rng: Random source for the fallback move (default: new Random).
        """
        self.prune = prune
        self.rng = rng or random.Random()
        self.win_checker = WinChecker()

        # Keep track of how many positions the last search visited
        self.positions_evaluated = 0

    def search(self, board: Board) -> SearchResult:
        """
        Run minimax from the automated player's point of view.

        Args:
            board: Board to search. It is not modified.

        Returns:
            SearchResult with the best cell (None if the board is already
            terminal) and its score.
        """
        self.positions_evaluated = 0
        working = list(board)
        result = self._minimax(working, depth=0, is_maximizing=True)
        logger.debug(
            "AI evaluated %d positions. Best move: %s (score: %s)",
            self.positions_evaluated, result.index, result.score,
        )
        return result

    def get_best_move(self, board: Board) -> Optional[int]:
        """
        Get the best move for the current position.

        Returns:
            Cell index of best move, or None if no moves available.
        """
        result = self.search(board)
        if result.index is not None:
            return result.index

        available = empty_cells(board)
        if not available:
            return None
        # Only reachable if the search misses a move on a board with room left
        logger.warning("Search returned no move, picking a random empty cell")
        return self.rng.choice(available)

    def _minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> SearchResult:
        """
        Minimax algorithm with optional alpha-beta pruning.

        Args:
            board: Working board, marks are placed and removed in place.
            depth: Plies already played below the root.
            is_maximizing: True if it's the automated player's ply.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            The score of the position and the cell achieving it.
        """
        self.positions_evaluated += 1

        winner = self.win_checker.winner(board)
        if winner is Mark.AUTOMATED:
            return SearchResult(score=GameConfig.WIN_SCORE - depth)  # Prefer faster wins
        if winner is Mark.HUMAN:
            return SearchResult(score=depth - GameConfig.WIN_SCORE)  # Prefer slower losses
        if self.win_checker.is_full(board):
            return SearchResult(score=0)

        if is_maximizing:
            best = SearchResult(score=float('-inf'))
            for cell in empty_cells(board):
                with placed(board, cell, Mark.AUTOMATED):
                    score = self._minimax(board, depth + 1, False, alpha, beta).score
                # Strictly better only: the lowest cell wins ties
                if score > best.score:
                    best = SearchResult(score=score, index=cell)
                alpha = max(alpha, score)
                if self.prune and beta <= alpha:
                    break  # Prune
            return best
        else:
            best = SearchResult(score=float('inf'))
            for cell in empty_cells(board):
                with placed(board, cell, Mark.HUMAN):
                    score = self._minimax(board, depth + 1, True, alpha, beta).score
                if score < best.score:
                    best = SearchResult(score=score, index=cell)
                beta = min(beta, score)
                if self.prune and beta <= alpha:
                    break  # Prune
            return best
