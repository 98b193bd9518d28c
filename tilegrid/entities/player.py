import logging
from enum import Enum
from typing import Optional, Tuple

from ..level.playground import Playground

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Cardinal movement directions as (dx, dy) grid offsets."""
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Player:
    """The single player, positioned on the grid in tile units."""

    def __init__(self, column: int, row: int):
        self.column = column
        self.row = row

    @classmethod
    def spawn(cls, position: Tuple[int, int]) -> "Player":
        column, row = position
        return cls(column, row)

    @property
    def position(self) -> Tuple[int, int]:
        return self.column, self.row

    def move(self, direction: Direction, playground: Optional[Playground] = None) -> bool:
        """Step exactly one tile in `direction`.

        With a playground, moves that leave the grid or enter a solid tile
        are rejected and the player stays put. Returns True if the move
        was applied.
        """
        target = (self.column + direction.dx, self.row + direction.dy)
        if playground is not None and not playground.is_passable(*target):
            logger.debug("Move %s from %s blocked", direction.name, self.position)
            return False
        self.column, self.row = target
        return True

    def __repr__(self):
        return f"Player(column={self.column}, row={self.row})"
