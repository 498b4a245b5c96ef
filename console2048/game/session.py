"""State of one 2048 game: the board, the score and the move counter."""

import logging

from numpy import ndarray
from numpy.random import PCG64DXSM, default_rng

from console2048.config import GameConfig
from console2048.core.gameboard import Status, check_win_or_add, new_board
from console2048.core.gamemove import Direction, apply_move

logger = logging.getLogger(__name__)


class GameSession:
    """
    A running 2048 game.

    The score grows by the value of every merged tile multiplied by ``step``, the number of moves
    played so far, so later merges weigh more than earlier ones.
    """

    def __init__(self, config: GameConfig | None = None):
        """
        Initialize an empty game.

        Parameters
        ----------
        config : GameConfig, optional
            Game configuration (default is ``GameConfig()``).
        """
        self._config = config or GameConfig()
        self._generator = default_rng(PCG64DXSM(self._config.seed))

        self.board: ndarray = new_board(self._config.size)
        self.score = 0
        self.step = 0

    def reset(self) -> None:
        """Clear the board and zero the score and the move counter."""
        self.board = new_board(self._config.size)
        self.score = 0
        self.step = 0
        logger.debug('Session reset')

    def move(self, direction: Direction) -> bool:
        """
        Merge the board towards a direction.

        Parameters
        ----------
        direction : Direction
            The direction of the move.

        Returns
        -------
        bool
            Whether the move was accepted. A rejected move leaves board, score and step untouched.
        """
        board, changed, reward = apply_move(self.board, direction)
        if not changed:
            return False

        self.board = board
        self.score += reward * self.step
        self.step += 1
        logger.debug('Moved %s: score=%d step=%d', direction.name.lower(), self.score, self.step)
        return True

    def spawn(self) -> Status:
        """
        Run the spawn-or-terminal check on the board.

        Returns
        -------
        Status
            ``WIN``, ``LOSE`` or ``ADD``.
        """
        return check_win_or_add(
            self.board, self._generator, win_tile=self._config.win_tile, values=self._config.spawn_values
        )
