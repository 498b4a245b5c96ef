"""
Input events of the terminal game and the producer thread that queues them.

A single reader thread blocks on the terminal and forwards events into an unbounded FIFO queue. The
controller is the only consumer.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from queue import SimpleQueue

logger = logging.getLogger(__name__)


class Key(Enum):
    """Keys the game reacts to. Everything else is ``OTHER``."""

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'
    ESCAPE = 'escape'
    ENTER = 'enter'
    OTHER = 'other'


@dataclass(frozen=True)
class KeyEvent:
    """A key press."""

    key: Key


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal was resized."""

    width: int
    height: int


@dataclass(frozen=True)
class ErrorEvent:
    """The input source failed."""

    error: BaseException


Event = KeyEvent | ResizeEvent | ErrorEvent


class EventPump:
    """
    Run a blocking reader in a daemon thread and queue what it produces.

    Methods
    -------
    start()
        Start the reader thread.
    post(event: Event)
        Queue an event from outside the reader, e.g. a signal handler.
    get()
        Block until the next event is available.

    Notes
    -----
    - Events are delivered in the order they were produced, none is dropped.
    - A reader that raises is reported once as an ``ErrorEvent`` and the thread stops.
    - ``SimpleQueue.put`` is reentrant, so ``post`` is safe to call from a signal handler.
    """

    def __init__(self, read: Callable[[], Event], events: SimpleQueue | None = None):
        """
        Parameters
        ----------
        read : Callable[[], Event]
            Blocking callable returning the next event.
        events : SimpleQueue, optional
            Queue to fill (default is a new queue).
        """
        self._read = read
        self._events = events if events is not None else SimpleQueue()
        self._thread = threading.Thread(target=self._produce, name='input-reader', daemon=True)

    def start(self) -> 'EventPump':
        """Start the reader thread and return the pump."""
        self._thread.start()
        return self

    def post(self, event: Event) -> None:
        """Queue an event behind those already produced."""
        self._events.put(event)

    def get(self) -> Event:
        """Block until the next event is available and return it."""
        return self._events.get()

    def _produce(self) -> None:
        while True:
            try:
                event = self._read()
            except Exception as error:
                logger.error('Input reader failed: %r', error)
                self._events.put(ErrorEvent(error))
                return
            self._events.put(event)
