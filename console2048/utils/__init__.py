# -*- coding: utf-8 -*-
"""
Terminal utilities: drawing of the board and the ``blessed`` backed surface and input.
"""

from .render import draw_banner, draw_board, layout_origin
from .terminal import TerminalSurface, resize_notifications, key_reader, terminal_session

__all__ = [
    "draw_board",
    "draw_banner",
    "layout_origin",
    "TerminalSurface",
    "key_reader",
    "resize_notifications",
    "terminal_session",
]
