"""
Tests for the blessed backed terminal helpers, on a terminal without styling.
"""

import io
import signal

import pytest
from blessed import Terminal
from blessed.keyboard import Keystroke

from console2048.errors import FatalInputError
from console2048.game.events import Key, ResizeEvent
from console2048.utils.terminal import TerminalSurface, resize_notifications, terminal_session, to_key


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def term(stream):
    return Terminal(stream=stream, force_styling=None)


class TestToKey:
    def test_arrows(self, term):
        assert to_key(term, Keystroke('\x1b[A', code=term.KEY_UP, name='KEY_UP')) is Key.UP
        assert to_key(term, Keystroke('\x1b[B', code=term.KEY_DOWN, name='KEY_DOWN')) is Key.DOWN
        assert to_key(term, Keystroke('\x1b[D', code=term.KEY_LEFT, name='KEY_LEFT')) is Key.LEFT
        assert to_key(term, Keystroke('\x1b[C', code=term.KEY_RIGHT, name='KEY_RIGHT')) is Key.RIGHT

    def test_escape_and_enter(self, term):
        assert to_key(term, Keystroke('\x1b', code=term.KEY_ESCAPE, name='KEY_ESCAPE')) is Key.ESCAPE
        assert to_key(term, Keystroke('\n', code=term.KEY_ENTER, name='KEY_ENTER')) is Key.ENTER
        assert to_key(term, Keystroke('\r')) is Key.ENTER

    def test_other_keys(self, term):
        assert to_key(term, Keystroke('q')) is Key.OTHER
        assert to_key(term, Keystroke('\x1bOP', code=term.KEY_F1, name='KEY_F1')) is Key.OTHER


class TestTerminalSurface:
    def test_flush_writes_buffered_cells(self, term, stream):
        surface = TerminalSurface(term, stream=stream)
        surface.clear('yellow', 'black')
        surface.set_cell(0, 0, 'A', 'red', 'black')
        surface.set_cell(1, 0, 'B', 'red', 'black')
        assert 'A' not in stream.getvalue()

        surface.flush()
        assert 'AB' in stream.getvalue()

    def test_cells_outside_are_dropped(self, term, stream):
        surface = TerminalSurface(term, stream=stream)
        width, height = surface.size()
        surface.set_cell(-1, 0, 'X', 'red', 'black')
        surface.set_cell(width, 0, 'Y', 'red', 'black')
        surface.set_cell(0, height, 'Z', 'red', 'black')
        surface.flush()
        assert not {'X', 'Y', 'Z'} & set(stream.getvalue())


def test_terminal_session_requires_a_tty(term):
    with pytest.raises(FatalInputError):
        with terminal_session(term):
            pass


@pytest.mark.skipif(not hasattr(signal, 'SIGWINCH'), reason='no SIGWINCH on this platform')
class TestResizeNotifications:
    def setup_method(self):
        self.original = signal.getsignal(signal.SIGWINCH)

    def teardown_method(self):
        signal.signal(signal.SIGWINCH, self.original)

    def test_posts_resize_events(self, term):
        posted = []
        with resize_notifications(term, posted.append) as installed:
            assert installed
            signal.getsignal(signal.SIGWINCH)(signal.SIGWINCH, None)
        assert posted == [ResizeEvent(term.width, term.height)]

    def test_restores_previous_handler(self, term):
        def previous(signum, frame):
            pass

        signal.signal(signal.SIGWINCH, previous)
        with resize_notifications(term, lambda event: None):
            assert signal.getsignal(signal.SIGWINCH) is not previous
        assert signal.getsignal(signal.SIGWINCH) is previous

    def test_restores_on_error(self, term):
        signal.signal(signal.SIGWINCH, signal.SIG_IGN)
        with pytest.raises(RuntimeError):
            with resize_notifications(term, lambda event: None):
                raise RuntimeError('game failed')
        assert signal.getsignal(signal.SIGWINCH) == signal.SIG_IGN
