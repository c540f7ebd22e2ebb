"""Game state and the rules for moving the player around a map."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

from solong.mapfile import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL
from solong.printf import printf

ESC = 65307


class Direction(Enum):
    """A movement direction, valued by the key code that triggers it."""

    UP = 119
    LEFT = 97
    DOWN = 115
    RIGHT = 100

    @property
    def delta(self) -> tuple[int, int]:
        """Row and column offsets of one step in this direction."""
        return _DELTAS[self]

    @property
    def label(self) -> str:
        """Name used when reporting a key press."""
        return _LABELS[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_LABELS = {
    Direction.UP: "TOP",
    Direction.DOWN: "DOWN",
    Direction.LEFT: "LEFT",
    Direction.RIGHT: "RIGHT",
}


@dataclass
class Game:
    """A running game: the grid, where things are and how far the player got."""

    grid: list[list[str]]
    player: tuple[int, int]
    exit: tuple[int, int]
    collectibles: int
    collected: int = 0
    exit_open: bool = False
    won: bool = False
    closed: bool = False
    facing: Direction = Direction.DOWN
    output: TextIO | None = field(default=None, repr=False)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Game":
        """Start a game on the map given by ``rows``."""
        grid = [list(row) for row in rows]
        player = exit_at = None
        collectibles = 0
        for r, row in enumerate(grid):
            for c, cell in enumerate(row):
                if cell == PLAYER:
                    player = (r, c)
                elif cell == EXIT:
                    exit_at = (r, c)
                elif cell == COLLECTIBLE:
                    collectibles += 1
        if player is None:
            raise ValueError("map has no player")
        if exit_at is None:
            raise ValueError("map has no exit")
        return cls(grid=grid, player=player, exit=exit_at, collectibles=collectibles)

    @property
    def rows(self) -> list[str]:
        """The current grid as strings."""
        return ["".join(row) for row in self.grid]

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def _cell(self, row: int, col: int) -> str:
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col]
        return WALL

    def move(self, direction: Direction) -> bool:
        """Step the player one cell; return whether the player moved."""
        dr, dc = direction.delta
        row, col = self.player
        target_row, target_col = row + dr, col + dc
        target = self._cell(target_row, target_col)
        if target == WALL:
            return False
        if target == EXIT and not self.exit_open:
            return False
        self.grid[row][col] = FLOOR
        if target == COLLECTIBLE:
            self.collected += 1
        self.grid[target_row][target_col] = PLAYER
        self.player = (target_row, target_col)
        self.facing = direction
        printf("Key pressed: %s (%d)\n", direction.label, direction.value, stream=self.output)
        return True

    def _update(self) -> None:
        if self.won:
            return
        if self.collected == self.collectibles and not self.exit_open:
            self.exit_open = True
        if self.player == self.exit and self.exit_open:
            self.won = True
            printf("Close game with ESC\n", stream=self.output)

    def press(self, key: int) -> bool:
        """Handle a key code; return False once the game has been closed."""
        if key == ESC:
            self.closed = True
            return False
        if not self.won:
            try:
                direction = Direction(key)
            except ValueError:
                direction = None
            if direction is not None:
                self.move(direction)
        self._update()
        return True