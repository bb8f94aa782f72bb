"""
Win checker for TicTacToe.
Checks if a player has won or if the board is full.
"""

from typing import Optional, Tuple

from .board import Board, Mark


Line = Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as cell indices)
    WINNING_LINES = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning Mark, or None if no line is complete.
        """
        line = self.winning_line(board)
        return board[line[0]] if line is not None else None

    def winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Returns:
            The first completed line (in WINNING_LINES order), or None.
        """
        for a, b, c in self.WINNING_LINES:
            mark = board[a]
            if mark is not None and mark is board[b] and mark is board[c]:
                return (a, b, c)
        return None

    def is_full(self, board: Board) -> bool:
        """True if every cell is occupied."""
        return all(cell is not None for cell in board)

    def is_terminal(self, board: Board) -> bool:
        """True if someone has won or no cell is left."""
        return self.winner(board) is not None or self.is_full(board)
