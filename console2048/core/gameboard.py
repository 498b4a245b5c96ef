"""
Core functionality of the 2048 board: representation, geometric transforms, the canonical collapse
and the spawn-or-terminal check.

Every direction is reduced to a single "collapse upward" by rotating the board, collapsing it and
rotating it back.
"""

from collections.abc import Sequence
from enum import Enum

from numpy import flipud, int64, ndarray, rot90, zeros
from numpy.random import Generator

# ##>: Board geometry and win threshold.
BOARD_SIZE = 4
MAX_TILE = 2048

# ##>: Spawned tiles, each drawn with the same probability.
SPAWN_VALUES: tuple[int, ...] = (2, 4)


class Status(Enum):
    """Outcome of the spawn-or-terminal check."""

    WIN = 'win'
    LOSE = 'lose'
    ADD = 'add'


def new_board(size: int = BOARD_SIZE) -> ndarray:
    """Return an empty board."""
    return zeros((size, size), dtype=int64)


def mirror_vertical(board: ndarray) -> ndarray:
    """Swap row ``i`` with row ``N - 1 - i``."""
    return flipud(board).copy()


def rotate_right(board: ndarray) -> ndarray:
    """Rotate the board 90 degrees clockwise: cell ``(i, j)`` moves to ``(j, N - 1 - i)``."""
    return rot90(board, k=-1).copy()


def rotate_left(board: ndarray) -> ndarray:
    """Rotate the board 90 degrees counter-clockwise: cell ``(i, j)`` moves to ``(N - 1 - j, i)``."""
    return rot90(board, k=1).copy()


def rotate_180(board: ndarray) -> ndarray:
    """Rotate the board half a turn: cell ``(i, j)`` moves to ``(N - 1 - i, N - 1 - j)``."""
    return rot90(board, k=2).copy()


def collapse_column(column: ndarray) -> tuple[ndarray, bool, int]:
    """
    Collapse a single column towards its first cell.

    Parameters
    ----------
    column : ndarray
        A 1D array, read from top to bottom.

    Returns
    -------
    collapsed : ndarray
        The column after compaction, merging and re-compaction.
    changed : bool
        Whether a tile moved during compaction or a pair of tiles merged.
    reward : int
        Sum of the values created by merges.

    Notes
    -----
    - A tile created by a merge does not merge again in the same call.
    - ``[2, 2, 2, 2]`` collapses to ``[4, 4, 0, 0]``, ``[4, 4, 8, 0]`` to ``[8, 8, 0, 0]``.
    """
    tiles = [int(value) for value in column if value != 0]

    # ##: Compaction moves something unless the tiles already fill the head of the column.
    changed = tiles != [int(value) for value in column[: len(tiles)]]

    # ##: Merge adjacent equals, skipping the absorbed tile.
    merged = []
    reward = 0
    index = 0
    while index < len(tiles):
        if index + 1 < len(tiles) and tiles[index] == tiles[index + 1]:
            value = tiles[index] * 2
            merged.append(value)
            reward += value
            changed = True
            index += 2
        else:
            merged.append(tiles[index])
            index += 1

    # ##: Re-compact survivors to the top.
    collapsed = zeros(len(column), dtype=column.dtype)
    collapsed[: len(merged)] = merged
    return collapsed, changed, reward


def collapse(board: ndarray) -> tuple[ndarray, bool, int]:
    """
    Collapse every column of the board upward.

    Parameters
    ----------
    board : ndarray
        The game board. It is not modified.

    Returns
    -------
    collapsed : ndarray
        The board after the collapse.
    changed : bool
        True if any column changed, or if the board had no empty cell before the collapse.
    reward : int
        Sum of the values created by merges over all columns.

    Notes
    -----
    A full board reports ``changed`` even when nothing moved. The game loop relies on it to accept
    the key press and run the terminal check, which then reports the loss.
    """
    was_full = bool(board.all())
    result = zeros(board.shape, dtype=board.dtype)
    changed = False
    reward = 0

    for j in range(board.shape[1]):
        column, column_changed, column_reward = collapse_column(board[:, j])
        result[:, j] = column
        changed = changed or column_changed
        reward += column_reward

    return result, changed or was_full, reward


def merge_up(board: ndarray) -> tuple[ndarray, bool, int]:
    """Merge toward the top row."""
    return collapse(board)


def merge_down(board: ndarray) -> tuple[ndarray, bool, int]:
    """Merge toward the bottom row."""
    collapsed, changed, reward = collapse(rotate_180(board))
    return rotate_180(collapsed), changed, reward


def merge_left(board: ndarray) -> tuple[ndarray, bool, int]:
    """Merge toward the left column."""
    collapsed, changed, reward = collapse(rotate_right(board))
    return rotate_left(collapsed), changed, reward


def merge_right(board: ndarray) -> tuple[ndarray, bool, int]:
    """Merge toward the right column."""
    collapsed, changed, reward = collapse(rotate_left(board))
    return rotate_right(collapsed), changed, reward


def is_full(board: ndarray) -> bool:
    """Check whether the board has no empty cell."""
    return bool(board.all())


def max_tile(board: ndarray) -> int:
    """Return the largest tile on the board (0 for an empty board)."""
    return int(board.max())


def check_win_or_add(
    board: ndarray,
    generator: Generator,
    win_tile: int = MAX_TILE,
    values: Sequence[int] = SPAWN_VALUES,
) -> Status:
    """
    Check for a win, otherwise spawn a new tile into an empty cell.

    Parameters
    ----------
    board : ndarray
        The game board. **Modified in-place** when a tile is spawned.
    generator : Generator
        Random number generator used for the start cell and the tile value.
    win_tile : int, optional
        Tile value that wins the game (default is 2048).
    values : Sequence[int], optional
        Candidate tiles, chosen uniformly (default is ``(2, 4)``).

    Returns
    -------
    Status
        ``WIN`` if a tile reached ``win_tile``, ``ADD`` if a tile was spawned, ``LOSE`` if the
        board is full.

    Notes
    -----
    - The search starts at a random ``(row, column)`` and walks each row from the start column with
      wraparound, then moves to the next row with wraparound.
    - At most one cell is written, and only when ``ADD`` is returned.
    """
    if (board >= win_tile).any():
        return Status.WIN

    rows, cols = board.shape
    start_row = int(generator.integers(rows))
    start_col = int(generator.integers(cols))

    for row_offset in range(rows):
        for col_offset in range(cols):
            cell = ((start_row + row_offset) % rows, (start_col + col_offset) % cols)
            if board[cell] == 0:
                board[cell] = values[int(generator.integers(len(values)))]
                return Status.ADD

    return Status.LOSE
