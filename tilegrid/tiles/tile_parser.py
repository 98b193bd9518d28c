import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from config import SYMBOL_EMPTY, SYMBOL_FLOOR, SYMBOL_SPAWN, SYMBOL_WALL
from ..level.playground import Playground
from .tile_types import EMPTY, Tile, floor, wall

logger = logging.getLogger(__name__)

GridPos = Tuple[int, int]


class MapError(Exception):
    """Base class for map loading failures."""


class MapLoadError(MapError):
    """The map file could not be read."""


class MapParseError(MapError):
    """The map text does not describe a valid rectangular grid."""

    def __init__(self, issues: List[str]):
        self.issues = list(issues)
        super().__init__("; ".join(self.issues) or "invalid map")


@dataclass
class _Scan:
    rows: List[List[Tile]] = field(default_factory=list)
    spawns: List[GridPos] = field(default_factory=list)


class MapParser:
    """Parses text maps into a Playground and a spawn coordinate."""

    def __init__(self):
        # Default symbol to tile mapping
        self.symbol_map: Dict[str, Tile] = {
            SYMBOL_EMPTY: EMPTY,
            SYMBOL_FLOOR: floor(),
            SYMBOL_WALL: wall(),
            SYMBOL_SPAWN: floor(),
        }
        self.spawn_marker = SYMBOL_SPAWN

    def set_custom_mapping(self, symbol: str, tile: Tile):
        """Set a custom symbol to tile mapping."""
        if len(symbol) != 1 or symbol in "\r\n":
            raise ValueError(f"Map symbols are single non-newline characters, got {symbol!r}")
        self.symbol_map[symbol] = tile

    def _scan(self, text: str) -> _Scan:
        scan = _Scan()
        # Newline is the only row terminator; other control characters are ignored
        lines = text.replace('\r\n', '\n').split('\n')
        # Trailing blank lines are a file artifact, not rows
        while lines and not lines[-1].strip():
            lines.pop()

        for row, line in enumerate(lines):
            tiles: List[Tile] = []
            for char in line:
                tile = self.symbol_map.get(char)
                if tile is None:
                    # Unknown characters contribute no tile
                    continue
                if char == self.spawn_marker:
                    scan.spawns.append((len(tiles), row))
                tiles.append(tile)
            scan.rows.append(tiles)
        return scan

    def _issues(self, scan: _Scan) -> List[str]:
        issues = []
        if not scan.rows:
            issues.append("Map is empty")
            return issues

        width = len(scan.rows[0])
        if width == 0:
            issues.append("First row has no tiles")
        for row, tiles in enumerate(scan.rows[1:], start=1):
            if len(tiles) != width:
                issues.append(f"Row {row} has {len(tiles)} tiles, expected {width}")

        if not scan.spawns:
            issues.append(f"No spawn point '{self.spawn_marker}' found")
        elif len(scan.spawns) > 1:
            issues.append(f"Multiple spawn points '{self.spawn_marker}' at {scan.spawns}")
        return issues

    def validate(self, text: str) -> List[str]:
        """Validate map text and return list of issues found."""
        return self._issues(self._scan(text))

    def parse(self, text: str) -> Tuple[Playground, GridPos]:
        """
        Parse map text into a playground and the player spawn.

        Returns:
            Tuple of (playground, (column, row))

        Raises:
            MapParseError: the text is empty, ragged, or has no single spawn
        """
        scan = self._scan(text)
        issues = self._issues(scan)
        if issues:
            raise MapParseError(issues)

        width = len(scan.rows[0])
        height = len(scan.rows)
        tiles = [tile for row in scan.rows for tile in row]
        playground = Playground(width, height, tiles)
        return playground, scan.spawns[0]

    def format(self, playground: Playground, spawn: Optional[GridPos] = None) -> str:
        """
        Convert a playground back to map text.
        Useful for debugging or inspecting loaded maps.
        """
        # Create reverse mapping; the spawn marker shares its tile with floor
        tile_to_symbol = {}
        for symbol, tile in self.symbol_map.items():
            if symbol != self.spawn_marker:
                tile_to_symbol.setdefault(tile, symbol)

        lines = []
        for row in range(playground.height):
            chars = []
            for column in range(playground.width):
                if spawn == (column, row):
                    chars.append(self.spawn_marker)
                    continue
                tile = playground.tile_at(column, row)
                symbol = tile_to_symbol.get(tile)
                if symbol is None:
                    raise ValueError(f"No map symbol for {tile!r} at ({column}, {row})")
                chars.append(symbol)
            lines.append(''.join(chars))
        return '\n'.join(lines) + '\n'


_default_parser = MapParser()


def parse_map(text: str) -> Tuple[Playground, GridPos]:
    return _default_parser.parse(text)


def validate_map(text: str) -> List[str]:
    return _default_parser.validate(text)


def format_map(playground: Playground, spawn: Optional[GridPos] = None) -> str:
    return _default_parser.format(playground, spawn)


def load_map(path: str) -> Tuple[Playground, GridPos]:
    """
    Read and parse a map file.

    Raises:
        MapLoadError: the file is missing or unreadable
        MapParseError: the file content is not a valid map
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise MapLoadError(f"Unable to read map {path}: {e}") from e

    playground, spawn = parse_map(text)
    logger.info("Loaded map %s: %dx%d tiles, spawn at %s",
                path, playground.width, playground.height, spawn)
    return playground, spawn
