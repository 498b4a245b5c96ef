"""
Move utilities for the 2048 board: the four directions and their dispatch to the directional merges.
"""

from collections.abc import Callable
from enum import Enum

from numpy import ndarray

from console2048.core.gameboard import merge_down, merge_left, merge_right, merge_up


class Direction(Enum):
    """Direction of a move."""

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3


MERGES: dict[Direction, Callable[[ndarray], tuple[ndarray, bool, int]]] = {
    Direction.LEFT: merge_left,
    Direction.UP: merge_up,
    Direction.RIGHT: merge_right,
    Direction.DOWN: merge_down,
}


def apply_move(board: ndarray, direction: Direction) -> tuple[ndarray, bool, int]:
    """
    Apply a directional merge.

    Parameters
    ----------
    board : ndarray
        The current game board. It is not modified.
    direction : Direction
        The direction to merge towards.

    Returns
    -------
    tuple[ndarray, bool, int]
        The merged board, the ``changed`` flag and the merge reward.
    """
    return MERGES[direction](board)


def can_move(board: ndarray) -> bool:
    """
    Check whether any move can still slide or merge a tile.

    Parameters
    ----------
    board : ndarray
        The game board to check.

    Returns
    -------
    bool
        True if the board has an empty cell or two adjacent equal tiles in a row or column.
    """
    if not board.all():
        return True

    # ##>: Compare adjacent pairs with vectorized operations.
    horizontal = board[:, :-1] == board[:, 1:]
    vertical = board[:-1, :] == board[1:, :]
    return bool(horizontal.any() or vertical.any())
