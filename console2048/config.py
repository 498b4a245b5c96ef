"""
Configuration of a terminal 2048 game.

Colours are terminal colour names, combined as ``<fg>_on_<bg>`` when drawing.
"""

from dataclasses import dataclass, field

from console2048.core.gameboard import BOARD_SIZE, MAX_TILE, SPAWN_VALUES


def _is_power_of_two(value: int) -> bool:
    return value >= 2 and value & (value - 1) == 0


@dataclass(frozen=True)
class Palette:
    """
    Foreground/background colour pairs used by the renderer.
    """

    background: tuple[str, str] = ('yellow', 'black')
    header: tuple[str, str] = ('yellow', 'black')
    grid: tuple[str, str] = ('black', 'green')
    tile: tuple[str, str] = ('red', 'black')
    win: tuple[str, str] = ('magenta', 'yellow')
    lose: tuple[str, str] = ('black', 'red')


@dataclass
class GameConfig:
    """
    Configuration for a game session.

    Attributes
    ----------
    size : int
        Side of the board. Only 4 is supported.
    win_tile : int
        Tile value that wins the game.
    spawn_values : tuple[int, ...]
        Tiles that can spawn, chosen uniformly.
    seed : int | None
        Seed of the spawn generator. None draws fresh entropy.
    palette : Palette
        Colours of the terminal rendering.
    """

    size: int = BOARD_SIZE
    win_tile: int = MAX_TILE
    spawn_values: tuple[int, ...] = SPAWN_VALUES
    seed: int | None = None
    palette: Palette = field(default_factory=Palette)

    def __post_init__(self):
        if self.size != BOARD_SIZE:
            raise ValueError(f'Only a {BOARD_SIZE}x{BOARD_SIZE} board is supported, got size={self.size}')
        if not _is_power_of_two(self.win_tile):
            raise ValueError(f'win_tile must be a power of two >= 2, got {self.win_tile}')
        if not self.spawn_values or not all(_is_power_of_two(value) for value in self.spawn_values):
            raise ValueError(f'spawn_values must be powers of two >= 2, got {self.spawn_values}')
