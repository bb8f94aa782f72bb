import pytest

from board_view import BoardView
from engine.board import board_from, empty_board
from engine.config import GameConfig


@pytest.fixture
def view():
    return BoardView(size=300)


def pixel(image, point):
    x, y = point
    return image.getpixel((int(x), int(y)))


def test_render_size_and_background(view):
    image = view.render(empty_board())
    assert image.size == (300, 300)
    assert image.mode == "RGB"
    assert pixel(image, view.cell_center(4)) == GameConfig.BACKGROUND_COLOR


def test_grid_lines_are_drawn(view):
    image = view.render(empty_board())
    assert pixel(image, (100, 50)) == GameConfig.GRID_COLOR
    assert pixel(image, (50, 200)) == GameConfig.GRID_COLOR


def test_marks_are_drawn(view):
    image = view.render(board_from([4], [0]))

    # The two strokes of the X cross in the middle of its cell
    assert pixel(image, view.cell_center(4)) == GameConfig.HUMAN_COLOR

    # The O is a ring: its middle stays empty, its top edge is drawn
    cx, _ = view.cell_center(0)
    _, top, _, _ = view.cell_bounds(0)
    ring_top = top + view.cell_size * GameConfig.MARK_PADDING + 2
    assert pixel(image, view.cell_center(0)) == GameConfig.BACKGROUND_COLOR
    assert pixel(image, (cx, ring_top)) == GameConfig.AUTOMATED_COLOR


def test_winning_line_is_struck_through(view):
    image = view.render(board_from([0, 1, 2], [3, 4]), winning_line=(0, 1, 2))
    assert pixel(image, view.cell_center(1)) == GameConfig.WIN_LINE_COLOR


@pytest.mark.parametrize("point, cell", [
    ((0, 0), 0),
    ((150, 150), 4),
    ((299, 0), 2),
    ((0, 299), 6),
    ((299, 299), 8),
    ((300, 10), None),
    ((-1, 10), None),
])
def test_cell_at(view, point, cell):
    assert view.cell_at(*point) == cell
