"""
Tests for drawing the board on a character surface.
"""

import numpy as np

from console2048.config import Palette
from console2048.utils.render import draw_banner, draw_board, draw_text, layout_origin


class TestLayout:
    def test_origin(self):
        assert layout_origin(80, 24) == (30, 8)
        assert layout_origin(100, 40) == (40, 16)


class TestDrawBoard:
    """Surface is 80x24, so the grid origin is (30, 8) and the frame starts at column 29."""

    def setup_method(self):
        self.board = np.zeros((4, 4), dtype=np.int64)
        self.board[0, 0] = 2
        self.board[1, 2] = 128
        self.board[3, 3] = 2048

    def test_clears_then_flushes_once(self, surface):
        draw_board(surface, self.board, score=0)
        assert surface.clears == 1
        assert surface.flushes == 1

    def test_header(self, surface):
        draw_board(surface, self.board, score=36)
        assert surface.line(5) == 'Use the arrow keys to move'
        assert surface.line(6) == 'Exit: ESC  Restart: ENTER'
        assert surface.line(7) == '     Score: 36'
        assert surface.cells[(30, 5)][1:] == ('yellow', 'black')

    def test_frame(self, surface):
        draw_board(surface, self.board, score=0)
        assert surface.char(29, 8) == '+'
        assert surface.char(30, 8) == '-'
        assert surface.char(29, 9) == '|'
        assert surface.char(35, 8) == '+'
        assert surface.char(53, 16) == '+'
        assert surface.line(8) == '+-----' * 4 + '+'
        assert surface.cells[(29, 8)][1:] == ('black', 'green')

    def test_tiles_are_centred(self, surface):
        draw_board(surface, self.board, score=0)
        assert surface.char(32, 9) == '2'
        assert [surface.char(x, 11) for x in (43, 44, 45)] == ['1', '2', '8']
        assert [surface.char(x, 15) for x in (48, 49, 50, 51)] == ['2', '0', '4', '8']
        assert surface.cells[(32, 9)][1:] == ('red', 'black')

    def test_empty_cells_are_blank(self, surface):
        draw_board(surface, np.zeros((4, 4), dtype=np.int64), score=0)
        assert surface.line(9) == '|     ' * 4 + '|'

    def test_palette(self, surface):
        palette = Palette(tile=('white', 'blue'))
        draw_board(surface, self.board, score=0, palette=palette)
        assert surface.cells[(32, 9)][1:] == ('white', 'blue')


class TestDrawText:
    def test_banner_is_centred(self, surface):
        draw_banner(surface, 'Lose!!', ('black', 'red'))
        assert surface.line(12) == 'Lose!!'
        assert surface.char(37, 12) == 'L'
        assert surface.flushes == 1

    def test_newlines(self, surface):
        draw_text(surface, 3, 2, 'ab\ncd', ('yellow', 'black'))
        assert surface.line(2) == 'ab'
        assert surface.line(3) == 'cd'
        assert surface.char(3, 3) == 'c'
