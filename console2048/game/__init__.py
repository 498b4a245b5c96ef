# -*- coding: utf-8 -*-
"""
Game loop of the terminal 2048: session state, input events and the controller.
"""

from .controller import GameController, GameState
from .events import ErrorEvent, EventPump, Key, KeyEvent, ResizeEvent
from .session import GameSession

__all__ = [
    "GameController",
    "GameState",
    "GameSession",
    "EventPump",
    "Key",
    "KeyEvent",
    "ResizeEvent",
    "ErrorEvent",
]
