"""Shared fixtures: an in-memory character surface."""

import pytest


class FakeSurface:
    """Character surface that records what is drawn."""

    def __init__(self, width: int = 80, height: int = 24):
        self.width = width
        self.height = height
        self.cells: dict[tuple[int, int], tuple[str, str, str]] = {}
        self.clears = 0
        self.flushes = 0

    def clear(self, fg, bg):
        self.cells = {}
        self.clears += 1

    def set_cell(self, x, y, char, fg, bg):
        self.cells[(x, y)] = (char, fg, bg)

    def flush(self):
        self.flushes += 1

    def size(self):
        return self.width, self.height

    def char(self, x, y):
        return self.cells.get((x, y), (' ', None, None))[0]

    def line(self, y):
        """Text of row ``y``, from the leftmost drawn cell to the rightmost."""
        xs = [x for (x, row) in self.cells if row == y]
        if not xs:
            return ''
        return ''.join(self.char(x, y) for x in range(min(xs), max(xs) + 1))


@pytest.fixture
def surface():
    return FakeSurface()
