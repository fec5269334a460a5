"""Loading, querying and defaulting the tile map."""

import re
import sys
from dataclasses import dataclass, field

from .constants import DEFAULT_MAP, IS_WALL, MAP_PATH, TILE_SIZE
from .words import split_words

_SEPARATORS = ", \n"
_LEADING_INT = re.compile(r"[ \t\n\r\f\v]*([+-]?[0-9]+)")

_DEFAULT_TILES = (
    (1, 1, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 2, 0, 0, 1),
    (1, 0, 1, 1, 0, 1, 1, 1),
    (1, 0, 1, 0, 0, 0, 1, 1),
    (1, 0, 1, 0, 1, 0, 0, 1),
    (1, 0, 1, 0, 1, 1, 0, 1),
    (1, 3, 0, 0, 0, 0, 3, 1),
    (1, 1, 1, 1, 1, 1, 1, 1),
)


class MapError(Exception):
    """Raised when a map file holds no usable map."""


def _tile_index(coordinate):
    """Tile index of a pixel coordinate, truncating toward zero."""
    value = int(coordinate)
    index = abs(value) // TILE_SIZE
    return -index if value < 0 else index


@dataclass
class GameMap:
    """A grid of tile ids, indexed as ``tiles[row][col]``."""

    tiles: list = field(default_factory=list)

    @property
    def rows(self):
        return len(self.tiles)

    @property
    def cols(self):
        return len(self.tiles[0]) if self.tiles else 0

    def is_wall(self, x, y):
        """Whether pixel position (x, y) lies in a wall or outside the map."""
        tx = _tile_index(x)
        ty = _tile_index(y)
        if tx < 0 or ty < 0 or ty >= self.rows or tx >= len(self.tiles[ty]):
            return True
        return self.tiles[ty][tx] == IS_WALL

    def search_position(self, tile_id):
        """Pixel centre of the first tile holding ``tile_id``, or (-1, -1)."""
        for row, line in enumerate(self.tiles):
            for col, value in enumerate(line):
                if value == tile_id:
                    return (
                        float(col * TILE_SIZE + TILE_SIZE // 2),
                        float(row * TILE_SIZE + TILE_SIZE // 2),
                    )
        return (-1.0, -1.0)

    def tile_type(self, x, y):
        """Tile id at grid position (x, y), or None outside the map."""
        col = int(x)
        row = int(y)
        if row < 0 or row >= self.rows or col < 0 or col >= self.cols:
            return None
        return self.tiles[row][col]


def is_correct_line(line):
    """Whether a map file line holds map data rather than a blank or comment."""
    return bool(line) and line[0] not in "#\n"


def _atoi(word):
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _map_lines(path):
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if is_correct_line(line):
                yield line


def read_map_infos(path):
    """Return (rows, cols) of the map file; cols counts numeric words of the first line."""
    rows = 0
    cols = 0
    for line in _map_lines(path):
        if rows == 0:
            cols = sum(1 for word in split_words(line, _SEPARATORS) if word[0].isdigit())
        rows += 1
    return rows, cols


def open_map(path):
    """Read a map file; raises OSError if it cannot be read and MapError if it is empty."""
    rows, cols = read_map_infos(path)
    if rows <= 0 or cols <= 0:
        raise MapError(f"{path}: no map data")
    tiles = []
    for line in _map_lines(path):
        values = [_atoi(word) for word in split_words(line, _SEPARATORS)[:cols]]
        values.extend([0] * (cols - len(values)))
        tiles.append(values)
        if len(tiles) == rows:
            break
    return GameMap(tiles)


def default_map():
    """The built-in map used when no map file is available."""
    tiles = [list(row) for row in _DEFAULT_TILES]
    assert len(tiles) == DEFAULT_MAP
    return GameMap(tiles)


def load_map(path=MAP_PATH):
    """Load the map file at ``path``, falling back to the built-in map."""
    try:
        return open_map(path)
    except OSError:
        print("Error: unable to open the map file. Using the default map...",
              file=sys.stderr)
    except MapError:
        pass
    return default_map()