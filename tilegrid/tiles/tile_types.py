from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from config import FLOOR_COLOR, WALL_COLOR


class TileType(IntEnum):
    """Enumeration of all tile types in the game."""

    EMPTY = 0
    FLOOR = 1
    WALL = 2

    @property
    def is_solid(self) -> bool:
        """Return True if tile blocks movement completely."""
        return self == TileType.WALL

    @property
    def is_visible(self) -> bool:
        """Return True if tile produces any drawing."""
        return self != TileType.EMPTY


@dataclass(frozen=True)
class Tile:
    """One cell of the grid. Empty tiles carry no color."""
    tile_type: TileType
    color: Optional[int] = None

    def __post_init__(self):
        if self.tile_type == TileType.EMPTY:
            if self.color is not None:
                raise ValueError("Empty tiles have no color")
        elif self.color is None or not 0 <= self.color <= 0xFFFFFF:
            raise ValueError(f"{self.tile_type.name} tile needs a 24-bit color, got {self.color!r}")

    @property
    def is_solid(self) -> bool:
        return self.tile_type.is_solid

    @property
    def is_visible(self) -> bool:
        return self.tile_type.is_visible

    def __repr__(self):
        if self.color is None:
            return f"Tile({self.tile_type.name})"
        return f"Tile({self.tile_type.name}, 0x{self.color:06X})"


EMPTY = Tile(TileType.EMPTY)


def floor(color: int = FLOOR_COLOR) -> Tile:
    return Tile(TileType.FLOOR, color)


def wall(color: int = WALL_COLOR) -> Tile:
    return Tile(TileType.WALL, color)
