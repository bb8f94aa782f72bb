"""Shared strategies and stub opponents for the engine tests."""

from typing import List, Optional, Tuple

from hypothesis import strategies as st

from engine.board import Board, Mark, board_from, empty_cells
from engine.win_checker import WinChecker


def play_out(order: List[int], plies: int) -> Tuple[List[int], List[int]]:
    """
    Play cells from `order` alternately (human first) until `plies` moves
    are made or someone wins.

    Returns:
        (human cells, automated cells) in play order.
    """
    checker = WinChecker()
    human: List[int] = []
    automated: List[int] = []
    for ply, cell in enumerate(order[:plies]):
        if checker.winner(board_from(human, automated)) is not None:
            break
        (human if ply % 2 == 0 else automated).append(cell)
    return human, automated


@st.composite
def reachable_boards(draw, min_plies: int = 0, max_plies: int = 9) -> Board:
    """Boards that can come up in a legal game."""
    order = draw(st.permutations(list(range(9))))
    plies = draw(st.integers(min_value=min_plies, max_value=max_plies))
    human, automated = play_out(order, plies)
    return board_from(human, automated)


class LastEmptyCellAI:
    """Weak opponent: always takes the highest empty cell."""

    def get_best_move(self, board: Board) -> Optional[int]:
        cells = empty_cells(board)
        return cells[-1] if cells else None


class ScriptedAI:
    """Opponent that plays a fixed list of cells, skipping taken ones."""

    def __init__(self, cells: List[int]):
        self.cells = list(cells)

    def get_best_move(self, board: Board) -> Optional[int]:
        while self.cells:
            cell = self.cells.pop(0)
            if board[cell] is None:
                return cell
        return None


def lines_won_by(board: Board, mark: Mark) -> int:
    return sum(
        1 for line in WinChecker.WINNING_LINES
        if all(board[cell] is mark for cell in line)
    )
