# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game, played in the terminal.

This package provides the board engine (`console2048.core`), the game loop (`console2048.game`) and the
terminal front-end (`console2048.utils`).
"""

import logging

from .config import GameConfig, Palette
from .errors import FatalInputError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["GameConfig", "Palette", "FatalInputError"]
