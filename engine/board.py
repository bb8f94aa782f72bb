"""
Board model for TicTacToe.

The board is never stored. It is rebuilt from the two move sequences
whenever it is needed:

    0 | 1 | 2
    3 | 4 | 5
    6 | 7 | 8
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .config import GameConfig


class Mark(Enum):
    """What can occupy a cell."""
    HUMAN = GameConfig.HUMAN_MARK
    AUTOMATED = GameConfig.AUTOMATED_MARK


# A board is a list of 9 cells - None means empty
Board = List[Optional[Mark]]

CELLS = range(GameConfig.CELL_COUNT)


def empty_board() -> Board:
    """Create a board with no marks."""
    return [None] * GameConfig.CELL_COUNT


def board_from(human_moves: Iterable[int], automated_moves: Iterable[int]) -> Board:
    """
    Build the board from both players' moves.

    Args:
        human_moves: Cells occupied by the human.
        automated_moves: Cells occupied by the automated player.

    Returns:
        The 9-cell board.
    """
    human_moves = list(human_moves)
    automated_moves = list(automated_moves)
    overlap = set(human_moves) & set(automated_moves)
    assert not overlap, f"Cells claimed by both players: {sorted(overlap)}"

    board = empty_board()
    for cell in human_moves:
        board[cell] = Mark.HUMAN
    for cell in automated_moves:
        board[cell] = Mark.AUTOMATED
    return board


def sequences_from(board: Board) -> Tuple[List[int], List[int]]:
    """Split a board back into (human cells, automated cells), in index order."""
    human = [cell for cell in CELLS if board[cell] is Mark.HUMAN]
    automated = [cell for cell in CELLS if board[cell] is Mark.AUTOMATED]
    return human, automated


def empty_cells(board: Board) -> List[int]:
    """Get all empty cells, lowest index first."""
    return [cell for cell in CELLS if board[cell] is None]


def format_board(board: Board) -> str:
    """Render the board as text. Empty cells show their index."""
    rows = []
    size = GameConfig.BOARD_SIZE
    for row in range(size):
        cells = []
        for col in range(size):
            cell = row * size + col
            mark = board[cell]
            cells.append(mark.value if mark is not None else str(cell))
        rows.append(" " + " | ".join(cells) + " ")
    return "\n---+---+---\n".join(rows)
