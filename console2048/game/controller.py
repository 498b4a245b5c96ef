"""
Turn loop of the terminal 2048 game.

Each turn runs the spawn-or-terminal check, draws the board, then waits for a command. Waiting on the
event queue is the only place the controller blocks.
"""

import logging
from enum import Enum
from typing import Protocol

from console2048.config import GameConfig
from console2048.core.gameboard import Status
from console2048.core.gamemove import Direction, can_move
from console2048.errors import FatalInputError
from console2048.game.events import ErrorEvent, Event, Key, ResizeEvent
from console2048.game.session import GameSession
from console2048.utils.render import LOSE_BANNER, WIN_BANNER, Surface, draw_banner, draw_board

logger = logging.getLogger(__name__)

DIRECTIONS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class EventSource(Protocol):
    """Blocking source of input events."""

    def get(self) -> Event: ...


class GameState(Enum):
    """State of the controller."""

    PLAYING = 'playing'
    WON = 'won'
    LOST = 'lost'
    RESTARTING = 'restarting'
    EXITED = 'exited'


_STATES = {Status.WIN: GameState.WON, Status.LOSE: GameState.LOST, Status.ADD: GameState.PLAYING}


class GameController:
    """
    Drive a game session from terminal events.

    Methods
    -------
    run()
        Play until the player presses Esc.
    play_turn()
        Run the spawn-or-terminal check and redraw.
    next_command()
        Consume events until one is actionable.
    restart()
        Start a new game.
    render()
        Draw the board, and the banner once the game is over.
    """

    def __init__(self, surface: Surface, events: EventSource, config: GameConfig | None = None):
        """
        Parameters
        ----------
        surface : Surface
            Where the game is drawn.
        events : EventSource
            Queue of input events.
        config : GameConfig, optional
            Game configuration (default is ``GameConfig()``).
        """
        self._surface = surface
        self._events = events
        self._config = config or GameConfig()

        self.session = GameSession(self._config)
        self.state = GameState.PLAYING

    def run(self) -> int:
        """
        Play until Esc is pressed.

        Returns
        -------
        int
            The process exit code, 0 on a normal exit.

        Raises
        ------
        FatalInputError
            If the input source fails.
        """
        self.restart()
        while True:
            self.play_turn()
            key = self.next_command()

            if key is Key.ESCAPE:
                self.state = GameState.EXITED
                logger.info('Exit with score=%d after %d moves', self.session.score, self.session.step)
                return 0

            if key is Key.ENTER:
                self.restart()

    def play_turn(self) -> GameState:
        """Run the spawn-or-terminal check on the board, update the state and redraw."""
        status = self.session.spawn()
        self.state = _STATES[status]

        if self.state is GameState.WON:
            logger.info('Won with score=%d after %d moves', self.session.score, self.session.step)
        elif self.state is GameState.LOST:
            logger.info('Lost with score=%d after %d moves', self.session.score, self.session.step)
        elif not can_move(self.session.board):
            logger.debug('Board is stuck, the next key ends the game')

        self.render()
        return self.state

    def next_command(self) -> Key:
        """
        Wait for the next command that advances the game.

        Returns
        -------
        Key
            ``ESCAPE``, ``ENTER``, or the direction key of an accepted move.

        Notes
        -----
        - Resize events redraw the screen and are not commands.
        - Unknown keys, and moves that change nothing, are ignored.
        - Once the game is won or lost, only Esc and Enter are accepted.
        """
        while True:
            event = self._events.get()

            if isinstance(event, ErrorEvent):
                raise FatalInputError('Input source failed') from event.error

            if isinstance(event, ResizeEvent):
                self.render()
                continue

            if event.key in (Key.ESCAPE, Key.ENTER):
                return event.key

            direction = DIRECTIONS.get(event.key)
            if direction is not None and self.state is GameState.PLAYING and self.session.move(direction):
                return event.key

    def restart(self) -> None:
        """Clear the board, the score and the move counter."""
        self.state = GameState.RESTARTING
        self.session.reset()
        self.state = GameState.PLAYING
        logger.info('New game')

    def render(self) -> None:
        """Redraw the board, with the win or lose banner when the game is over."""
        palette = self._config.palette
        draw_board(self._surface, self.session.board, self.session.score, palette)

        if self.state is GameState.WON:
            draw_banner(self._surface, WIN_BANNER, palette.win)
        elif self.state is GameState.LOST:
            draw_banner(self._surface, LOSE_BANNER, palette.lose)
