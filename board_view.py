"""
Board rendering for the TicTacToe window.
Draws the board into a Pillow image and maps clicks back to cells.
"""

from typing import Optional, Sequence

from PIL import Image, ImageDraw

from engine.board import Board, Mark
from engine.config import GameConfig


class BoardView:
    """
    Renders a board as a square image.

    Used by the Tkinter UI, but has no Tk dependency so it can be drawn
    and inspected headless.
    """

    def __init__(self, size: int = GameConfig.BOARD_IMAGE_SIZE):
        """
        Args:
            size: Width and height of the image in pixels.
        """
        self.size = size
        self.cell_size = size / GameConfig.BOARD_SIZE

    def cell_bounds(self, cell: int):
        """Get (left, top, right, bottom) of a cell in pixels."""
        row, col = divmod(cell, GameConfig.BOARD_SIZE)
        left = col * self.cell_size
        top = row * self.cell_size
        return left, top, left + self.cell_size, top + self.cell_size

    def cell_center(self, cell: int):
        left, top, right, bottom = self.cell_bounds(cell)
        return (left + right) / 2, (top + bottom) / 2

    def cell_at(self, x: float, y: float) -> Optional[int]:
        """
        Find the cell under a pixel position.

        Returns:
            Cell index, or None if the point is outside the board.
        """
        if not (0 <= x < self.size and 0 <= y < self.size):
            return None
        col = int(x // self.cell_size)
        row = int(y // self.cell_size)
        return row * GameConfig.BOARD_SIZE + col

    def render(self, board: Board, winning_line: Optional[Sequence[int]] = None) -> Image.Image:
        """
        Draw the board.

        Args:
            board: Board to draw.
            winning_line: Cells to strike through, if the round was won.

        Returns:
            An RGB image of size x size pixels.
        """
        image = Image.new("RGB", (self.size, self.size), GameConfig.BACKGROUND_COLOR)
        draw = ImageDraw.Draw(image)

        # Grid
        for i in range(1, GameConfig.BOARD_SIZE):
            offset = i * self.cell_size
            draw.line([(offset, 0), (offset, self.size)],
                      fill=GameConfig.GRID_COLOR, width=GameConfig.GRID_LINE_WIDTH)
            draw.line([(0, offset), (self.size, offset)],
                      fill=GameConfig.GRID_COLOR, width=GameConfig.GRID_LINE_WIDTH)

        # Marks
        for cell, mark in enumerate(board):
            if mark is Mark.HUMAN:
                self._draw_x(draw, cell)
            elif mark is Mark.AUTOMATED:
                self._draw_o(draw, cell)

        if winning_line:
            start = self.cell_center(winning_line[0])
            end = self.cell_center(winning_line[-1])
            draw.line([start, end], fill=GameConfig.WIN_LINE_COLOR,
                      width=GameConfig.MARK_LINE_WIDTH)

        return image

    def _mark_box(self, cell: int):
        left, top, right, bottom = self.cell_bounds(cell)
        pad = self.cell_size * GameConfig.MARK_PADDING
        return left + pad, top + pad, right - pad, bottom - pad

    def _draw_x(self, draw: ImageDraw.ImageDraw, cell: int):
        left, top, right, bottom = self._mark_box(cell)
        draw.line([(left, top), (right, bottom)],
                  fill=GameConfig.HUMAN_COLOR, width=GameConfig.MARK_LINE_WIDTH)
        draw.line([(left, bottom), (right, top)],
                  fill=GameConfig.HUMAN_COLOR, width=GameConfig.MARK_LINE_WIDTH)

    def _draw_o(self, draw: ImageDraw.ImageDraw, cell: int):
        draw.ellipse(self._mark_box(cell), outline=GameConfig.AUTOMATED_COLOR,
                     width=GameConfig.MARK_LINE_WIDTH)
