# -*- coding: utf-8 -*-
"""
Drawing of the 2048 board on a character surface.

The renderer only needs four primitives from the surface, so the game can be drawn on a real terminal
or on an in-memory grid of characters.
"""

from typing import Protocol

from numpy import ndarray

from console2048.config import Palette

# ##: Header lines, from top to bottom, drawn above the grid.
INSTRUCTIONS = 'Use the arrow keys to move'
CONTROLS = 'Exit: ESC  Restart: ENTER'
SCORE_LABEL = '     Score: '

WIN_BANNER = 'Win!!'
LOSE_BANNER = 'Lose!!'

# ##: Width and height of a grid cell, border included.
CELL_WIDTH = 6
CELL_HEIGHT = 2


class Surface(Protocol):
    """Character surface the renderer draws on."""

    def clear(self, fg: str, bg: str) -> None: ...

    def set_cell(self, x: int, y: int, char: str, fg: str, bg: str) -> None: ...

    def flush(self) -> None: ...

    def size(self) -> tuple[int, int]: ...


def layout_origin(width: int, height: int) -> tuple[int, int]:
    """Return the top-left corner of the grid for a terminal of the given size."""
    return width // 2 - 10, height // 2 - 4


def draw_text(surface: Surface, x: int, y: int, text: str, colors: tuple[str, str]) -> None:
    """Draw ``text`` starting at ``(x, y)``; every newline starts a new line at column ``x``."""
    fg, bg = colors
    for line_number, line in enumerate(text.split('\n')):
        for offset, char in enumerate(line):
            surface.set_cell(x + offset, y + line_number, char, fg, bg)


def draw_board(surface: Surface, board: ndarray, score: int, palette: Palette | None = None) -> None:
    """
    Clear the surface and draw the header, the grid frame and the tiles.

    Parameters
    ----------
    surface : Surface
        Where to draw.
    board : ndarray
        The game board.
    score : int
        The current score, shown in the header.
    palette : Palette, optional
        Colours to use (default is ``Palette()``).
    """
    palette = palette or Palette()
    width, height = surface.size()
    ox, oy = layout_origin(width, height)
    size = len(board)

    surface.clear(*palette.background)

    # ##: Header.
    draw_text(surface, ox, oy - 3, INSTRUCTIONS, palette.header)
    draw_text(surface, ox, oy - 2, CONTROLS, palette.header)
    draw_text(surface, ox, oy - 1, f'{SCORE_LABEL}{score}', palette.header)

    # ##: Frame, one column left of the origin.
    left = ox - 1
    fg, bg = palette.grid
    for i in range(size + 1):
        for x in range(CELL_WIDTH * size + 1):
            if x % CELL_WIDTH != 0:
                surface.set_cell(left + x, oy + i * CELL_HEIGHT, '-', fg, bg)
        for y in range(CELL_HEIGHT * size + 1):
            surface.set_cell(left + i * CELL_WIDTH, oy + y, '+' if y % CELL_HEIGHT == 0 else '|', fg, bg)

    # ##: Tiles, centred in their cell.
    for i, row in enumerate(board.tolist()):
        for j, value in enumerate(row):
            if value > 0:
                text = str(value)
                x = left + j * CELL_WIDTH + CELL_WIDTH // 2 - len(text) // 2
                draw_text(surface, x, oy + i * CELL_HEIGHT + 1, text, palette.tile)

    surface.flush()


def draw_banner(surface: Surface, text: str, colors: tuple[str, str]) -> None:
    """Draw ``text`` centred on the surface and flush it."""
    width, height = surface.size()
    draw_text(surface, width // 2 - len(text) // 2, height // 2, text, colors)
    surface.flush()
