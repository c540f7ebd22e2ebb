"""Turning a game into sprites on a pygame surface."""

from __future__ import annotations

from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from typing import Union

import pygame

from solong.game import Direction, Game
from solong.mapfile import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL

SIZE = 32
IMAGE_DIR = "imgs"
WIN_TEXT = "YOU WIN!"
WIN_COLOR = (0x00, 0x00, 0xFF)
BACKGROUND = (0, 0, 0)

SPRITE_FILES = {
    "player_down": "player_down.xpm",
    "player_top": "player_top.xpm",
    "player_right": "player_right.xpm",
    "player_left": "player_left.xpm",
    "wall": "wall.xpm",
    "empty": "empty.xpm",
    "exit_o": "exit_o.xpm",
    "exit_c": "exit_c.xpm",
    "item_1": "item_1.xpm",
}

_FACING = {
    Direction.DOWN: "down",
    Direction.UP: "top",
    Direction.RIGHT: "right",
    Direction.LEFT: "left",
}

_STATIC = {
    WALL: "wall",
    FLOOR: "empty",
    COLLECTIBLE: "item_1",
    EXIT: "exit_c",
}

Command = tuple[str, str, int, int]


def sprite_name(cell: str, facing: Direction) -> str | None:
    """Name of the sprite for ``cell``, or None if the cell is not drawn."""
    if cell == PLAYER:
        return f"player_{_FACING[facing]}"
    return _STATIC.get(cell)


def draw_commands(game: Game) -> list[Command]:
    """List what to draw for ``game`` as ``(kind, value, x, y)`` tuples.

    ``kind`` is ``"sprite"`` with a sprite name, or ``"text"`` with a message.
    """
    if game.won:
        x = game.width * SIZE // 2 - 25
        y = game.height * SIZE // 2
        return [("text", WIN_TEXT, x, y)]
    commands: list[Command] = []
    for r, row in enumerate(game.grid):
        for c, cell in enumerate(row):
            name = sprite_name(cell, game.facing)
            if cell == EXIT and game.exit_open:
                name = "exit_o"
            if name is not None:
                commands.append(("sprite", name, c * SIZE, r * SIZE))
    return commands


class Renderer:
    """Draws games onto a pygame surface, loading sprites on first use."""

    def __init__(
        self,
        surface: pygame.Surface,
        images: Mapping[str, pygame.Surface] | None = None,
        image_dir: Union[str, "PathLike[str]"] = IMAGE_DIR,
    ) -> None:
        self.surface = surface
        self._images: dict[str, pygame.Surface] = dict(images or {})
        self._image_dir = Path(image_dir)
        self._font: pygame.font.Font | None = None

    def _image(self, name: str) -> pygame.Surface:
        if name not in self._images:
            self._images[name] = pygame.image.load(str(self._image_dir / SPRITE_FILES[name]))
        return self._images[name]

    def _text_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 24)
        return self._font

    def draw(self, game: Game) -> None:
        """Clear the surface and draw the whole of ``game``."""
        self.surface.fill(BACKGROUND)
        for kind, value, x, y in draw_commands(game):
            if kind == "sprite":
                self.surface.blit(self._image(value), (x, y))
            else:
                text = self._text_font().render(value, True, WIN_COLOR, BACKGROUND)
                self.surface.blit(text, (x, y))