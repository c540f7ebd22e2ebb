"""Loading and checking map files.

A map is a rectangle of cells: ``1`` wall, ``0`` floor, ``C`` collectible,
``E`` exit and ``P`` player. It must be closed by walls, hold at least one
collectible, exactly one exit and exactly one player, and must not be square.
"""

from __future__ import annotations

from collections import Counter
from os import PathLike
from typing import Union

from solong.lines import read_lines
from solong.text import split

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"

_CELLS = frozenset({WALL, FLOOR, COLLECTIBLE, EXIT, PLAYER})
_ITEMS = frozenset({COLLECTIBLE, EXIT, PLAYER})

StrPath = Union[str, "PathLike[str]"]


class MapError(ValueError):
    """Raised when a map file cannot be read or describes an invalid map."""


def read_map(path: StrPath) -> list[str]:
    """Read the rows of the map stored at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = list(read_lines(handle))
    except OSError as exc:
        raise MapError("Invalid Map") from exc
    rows = split("".join(lines), "\n")
    if len(rows) != len(lines):
        raise MapError("map contains empty lines")
    return rows


def _is_enclosed(rows: list[str], x: int, y: int) -> bool:
    def cell(r: int, c: int) -> str:
        if 0 <= r < len(rows) and 0 <= c < len(rows[r]):
            return rows[r][c]
        return ""

    return all(
        cell(r, c) == WALL
        for r, c in ((x, y + 1), (x, y - 1), (x + 1, y), (x - 1, y))
    )


def _all_walls(row: str) -> bool:
    return all(char == WALL for char in row)


def validate_map(rows: list[str]) -> None:
    """Raise MapError unless ``rows`` describe a playable map."""
    if len(rows) < 3:
        raise MapError("map needs at least three rows")
    width = len(rows[0])
    if width == len(rows):
        raise MapError("map must not be square")
    if not _all_walls(rows[0]):
        raise MapError("top row must be wall")
    middle = rows[1:-1]
    for x, row in enumerate(middle, start=1):
        if not row or row[0] != WALL or len(row) < width or row[width - 1] != WALL:
            raise MapError(f"row {x} is not closed by walls")
        for y, char in enumerate(row):
            if char not in _CELLS:
                raise MapError(f"unknown cell {char!r} in row {x}")
            if char in _ITEMS and _is_enclosed(rows, x, y):
                raise MapError(f"cell {char!r} at row {x} is walled in")
        if len(row) != width:
            raise MapError(f"row {x} has the wrong length")
    if not _all_walls(rows[-1]):
        raise MapError("bottom row must be wall")
    counts = Counter(char for row in middle for char in row)
    if counts[COLLECTIBLE] < 1:
        raise MapError("map needs at least one collectible")
    if counts[EXIT] != 1:
        raise MapError("map needs exactly one exit")
    if counts[PLAYER] != 1:
        raise MapError("map needs exactly one player")


def load_map(path: StrPath) -> list[str]:
    """Read the map at ``path``, check it, and return its rows."""
    rows = read_map(path)
    validate_map(rows)
    return rows