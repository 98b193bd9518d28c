"""Playground: the immutable tile grid and its pixel mapping.

Coordinate System:
- Origin: Top-left corner of the grid/screen.
- Column (x): Increases from left to right (0 to width-1).
- Row (y): Increases from top to bottom (0 to height-1).
- Tiles are stored row-major: index = row * width + column.
"""

from typing import Iterable, Iterator, Optional, Sequence, Tuple

from ..tiles.tile_types import EMPTY, Tile


class Playground:
    """Owns the tile grid; answers lookups in grid and pixel space."""

    def __init__(self, width: int, height: int, tiles: Iterable[Tile]):
        tiles = tuple(tiles)
        if width <= 0 or height <= 0:
            raise ValueError(f"Playground needs positive dimensions, got {width}x{height}")
        if len(tiles) != width * height:
            raise ValueError(
                f"Playground {width}x{height} needs {width * height} tiles, got {len(tiles)}"
            )
        self._width = width
        self._height = height
        self._tiles: Sequence[Tile] = tiles

    @classmethod
    def filled(cls, width: int, height: int, tile: Tile = EMPTY) -> "Playground":
        """Build a uniform grid, every cell holding the same tile."""
        return cls(width, height, [tile] * (width * height))

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def tiles(self) -> Sequence[Tile]:
        return self._tiles

    def in_bounds(self, column: int, row: int) -> bool:
        return 0 <= column < self._width and 0 <= row < self._height

    def tile_at(self, column: int, row: int) -> Tile:
        """Return the tile at (column, row); raise IndexError outside the grid."""
        if not self.in_bounds(column, row):
            raise IndexError(
                f"Tile ({column}, {row}) outside playground {self._width}x{self._height}"
            )
        return self._tiles[row * self._width + column]

    def is_passable(self, column: int, row: int) -> bool:
        """True if (column, row) lies inside the grid and is not solid."""
        return self.in_bounds(column, row) and not self.tile_at(column, row).is_solid

    def scale_factor(self, output_width_px: int, output_height_px: int) -> Tuple[int, int]:
        """Pixel size of one tile for the given output size.

        Recomputed on every call. Truncates to 0 when the output has fewer
        pixels than the grid has tiles along an axis.
        """
        return output_width_px // self._width, output_height_px // self._height

    def tile_at_pixel(self, x_px: int, y_px: int, scale: Tuple[int, int]) -> Optional[Tile]:
        """Return the tile under pixel (x_px, y_px) at the given scale, or None."""
        tile_w, tile_h = scale
        if tile_w <= 0 or tile_h <= 0 or x_px < 0 or y_px < 0:
            return None
        column = x_px // tile_w
        row = y_px // tile_h
        if not self.in_bounds(column, row):
            return None
        return self.tile_at(column, row)

    def cells(self) -> Iterator[Tuple[int, int, Tile]]:
        """Yield (column, row, tile) in row-major order."""
        for index, tile in enumerate(self._tiles):
            row, column = divmod(index, self._width)
            yield column, row, tile

    def __iter__(self):
        return self.cells()

    def __len__(self):
        return len(self._tiles)

    def __repr__(self):
        return f"Playground({self._width}x{self._height})"
