# -*- coding: utf-8 -*-
"""
Board engine of the 2048 game.

It includes the geometric transforms, the canonical collapse, the directional merges and the
spawn-or-terminal check.
"""

from .gameboard import (
    BOARD_SIZE,
    MAX_TILE,
    Status,
    check_win_or_add,
    collapse,
    collapse_column,
    is_full,
    max_tile,
    merge_down,
    merge_left,
    merge_right,
    merge_up,
    mirror_vertical,
    new_board,
    rotate_180,
    rotate_left,
    rotate_right,
)
from .gamemove import Direction, apply_move, can_move

__all__ = [
    "BOARD_SIZE",
    "MAX_TILE",
    "Status",
    "Direction",
    "new_board",
    "mirror_vertical",
    "rotate_right",
    "rotate_left",
    "rotate_180",
    "collapse_column",
    "collapse",
    "merge_up",
    "merge_down",
    "merge_left",
    "merge_right",
    "apply_move",
    "can_move",
    "is_full",
    "max_tile",
    "check_win_or_add",
]
