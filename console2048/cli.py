# -*- coding: utf-8 -*-
"""
Play 2048 in the terminal.
"""

import logging
from argparse import ArgumentParser, Namespace
from collections.abc import Sequence

from console2048.config import GameConfig
from console2048.errors import FatalInputError
from console2048.game import EventPump, GameController
from console2048.utils import TerminalSurface, resize_notifications, key_reader, terminal_session

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> Namespace:
    parser = ArgumentParser(prog='console2048', description='Play 2048 in the terminal.')
    parser.add_argument('--seed', type=int, default=None, help='seed of the tile spawns')
    parser.add_argument('--log-file', type=str, default=None, help='write logs to this file')
    parser.add_argument(
        '--log-level',
        type=str.upper,
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='level of the log file (default: INFO)',
    )
    return parser.parse_args(argv)


def configure_logging(log_file: str | None, level: str) -> None:
    """
    Send logs to a file. Nothing is logged to the terminal, which belongs to the game.
    """
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def play(config: GameConfig) -> int:
    """
    Acquire the terminal, start the input reader and run the game.

    Parameters
    ----------
    config : GameConfig
        Game configuration.

    Returns
    -------
    int
        Exit code of the game.
    """
    with terminal_session() as term:
        events = EventPump(read=key_reader(term))
        with resize_notifications(term, events.post):
            events.start()
            return GameController(TerminalSurface(term), events, config).run()


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    try:
        return play(GameConfig(seed=args.seed))
    except FatalInputError:
        logger.exception('Terminal input failed')
        return 1
    except KeyboardInterrupt:
        return 130
