# -*- coding: utf-8 -*-
"""
Terminal surface and keyboard input backed by ``blessed``.

This module provides the drawing surface used by the renderer, the translation of keystrokes into game
keys, the resize notification, and the scoped acquisition of the terminal.
"""

import signal
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TextIO

from blessed import Terminal
from blessed.keyboard import Keystroke

from console2048.errors import FatalInputError
from console2048.game.events import Event, Key, KeyEvent, ResizeEvent


class TerminalSurface:
    """
    Buffered character surface on a ``blessed`` terminal.

    Draw calls are buffered and written to the terminal in a single ``flush``. Cells outside the
    terminal are dropped.
    """

    def __init__(self, term: Terminal, stream: TextIO | None = None):
        self._term = term
        self._stream = stream or sys.stdout
        self._buffer: list[str] = []
        self._styles: dict[tuple[str, str], str] = {}

    def _style(self, fg: str, bg: str):
        if (fg, bg) not in self._styles:
            self._styles[(fg, bg)] = getattr(self._term, f'{fg}_on_{bg}')
        return self._styles[(fg, bg)]

    def clear(self, fg: str, bg: str) -> None:
        self._buffer = [self._term.home + self._style(fg, bg) + self._term.clear]

    def set_cell(self, x: int, y: int, char: str, fg: str, bg: str) -> None:
        width, height = self.size()
        if 0 <= x < width and 0 <= y < height:
            self._buffer.append(self._term.move_xy(x, y) + self._style(fg, bg)(char))

    def flush(self) -> None:
        self._stream.write(''.join(self._buffer) + self._term.normal)
        self._stream.flush()
        self._buffer = []

    def size(self) -> tuple[int, int]:
        return self._term.width, self._term.height


def to_key(term: Terminal, keystroke: Keystroke) -> Key:
    """Translate a ``blessed`` keystroke into a game key."""
    codes = {
        term.KEY_UP: Key.UP,
        term.KEY_DOWN: Key.DOWN,
        term.KEY_LEFT: Key.LEFT,
        term.KEY_RIGHT: Key.RIGHT,
        term.KEY_ESCAPE: Key.ESCAPE,
        term.KEY_ENTER: Key.ENTER,
    }
    if keystroke.is_sequence:
        return codes.get(keystroke.code, Key.OTHER)
    if str(keystroke) in ('\r', '\n'):
        return Key.ENTER
    if str(keystroke) == '\x1b':
        return Key.ESCAPE
    return Key.OTHER


def key_reader(term: Terminal) -> Callable[[], Event]:
    """Return a blocking callable producing the next key event from the terminal."""

    def read() -> Event:
        return KeyEvent(to_key(term, term.inkey()))

    return read


@contextmanager
def resize_notifications(term: Terminal, post: Callable[[Event], None]) -> Iterator[bool]:
    """
    Post a ``ResizeEvent`` every time the terminal window changes size, while the context is active.

    The previous ``SIGWINCH`` handler is restored on exit.

    Yields
    ------
    bool
        False on platforms without ``SIGWINCH``, where no handler is installed.
    """
    if not hasattr(signal, 'SIGWINCH'):
        yield False
        return

    def on_resize(signum, frame):
        post(ResizeEvent(term.width, term.height))

    previous = signal.signal(signal.SIGWINCH, on_resize)
    try:
        yield True
    finally:
        signal.signal(signal.SIGWINCH, previous)


@contextmanager
def terminal_session(term: Terminal | None = None) -> Iterator[Terminal]:
    """
    Acquire the terminal for the game and restore it on every exit path.

    Raises
    ------
    FatalInputError
        If standard streams are not attached to a terminal.
    """
    term = term or Terminal()
    if not term.is_a_tty:
        raise FatalInputError('The game needs an interactive terminal')

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        yield term
