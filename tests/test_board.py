import pytest
from hypothesis import given

from engine.board import Mark, board_from, empty_board, empty_cells, format_board, sequences_from
from engine.win_checker import WinChecker
from helpers import lines_won_by, reachable_boards

X, O = Mark.HUMAN, Mark.AUTOMATED


def test_board_from_places_marks():
    board = board_from([0, 4], [8])
    assert board[0] is X
    assert board[4] is X
    assert board[8] is O
    assert empty_cells(board) == [1, 2, 3, 5, 6, 7]


def test_board_from_empty_sequences():
    assert board_from([], []) == empty_board() == [None] * 9


def test_board_from_overlap_fails_loudly():
    with pytest.raises(AssertionError):
        board_from([0, 1], [1])


@given(reachable_boards())
def test_sequences_round_trip(board):
    human, automated = sequences_from(board)
    assert board_from(human, automated) == board
    assert not set(human) & set(automated)


def test_format_board_shows_marks_and_free_indices():
    text = format_board(board_from([0], [4]))
    assert text.splitlines() == [
        " X | 1 | 2 ",
        "---+---+---",
        " 3 | O | 5 ",
        "---+---+---",
        " 6 | 7 | 8 ",
    ]


@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
def test_every_line_wins(line):
    checker = WinChecker()
    blockers = [cell for cell in range(9) if cell not in line][:2]
    board = board_from(list(line), blockers)
    assert checker.winner(board) is X
    assert checker.winning_line(board) == line
    assert checker.is_terminal(board)


def test_no_winner():
    checker = WinChecker()
    board = board_from([0, 4], [1])
    assert checker.winner(board) is None
    assert checker.winning_line(board) is None
    assert not checker.is_full(board)
    assert not checker.is_terminal(board)


def test_full_board_without_line():
    checker = WinChecker()
    # X O X / X O O / O X X
    board = board_from([0, 2, 3, 7, 8], [1, 4, 5, 6])
    assert checker.winner(board) is None
    assert checker.is_full(board)
    assert checker.is_terminal(board)


def test_full_board_with_line_is_a_win():
    checker = WinChecker()
    board = board_from([0, 1, 2, 4, 7], [3, 5, 6, 8])
    assert checker.winner(board) is X
    assert checker.is_full(board)


@given(reachable_boards())
def test_winner_matches_line_enumeration(board):
    winner = WinChecker().winner(board)
    x_lines = lines_won_by(board, X)
    o_lines = lines_won_by(board, O)

    # Never both players
    assert not (x_lines and o_lines)
    if x_lines:
        assert winner is X
    elif o_lines:
        assert winner is O
    else:
        assert winner is None
