import pygame
import pytest

from solong.game import Direction, Game
from solong.render import (
    SIZE,
    SPRITE_FILES,
    WIN_TEXT,
    Renderer,
    draw_commands,
    sprite_name,
)

CORRIDOR = [
    "1111111",
    "1P0C0E1",
    "1111111",
]

COLORS = {
    name: (10 * index + 20, 200 - 10 * index, 5 * index + 1)
    for index, name in enumerate(SPRITE_FILES)
}


def images():
    result = {}
    for name, color in COLORS.items():
        tile = pygame.Surface((SIZE, SIZE))
        tile.fill(color)
        result[name] = tile
    return result


def surface_for(game):
    return pygame.Surface((game.width * SIZE, game.height * SIZE))


def color_at(surface, row, col):
    return tuple(surface.get_at((col * SIZE + 5, row * SIZE + 5)))[:3]


def test_sprite_names():
    assert sprite_name("1", Direction.DOWN) == "wall"
    assert sprite_name("0", Direction.DOWN) == "empty"
    assert sprite_name("P", Direction.UP) == "player_top"
    assert sprite_name("P", Direction.DOWN) == "player_down"
    assert sprite_name("X", Direction.DOWN) is None


def test_every_sprite_has_a_file():
    for cell in "10CE":
        assert sprite_name(cell, Direction.DOWN) in SPRITE_FILES
    for direction in Direction:
        assert sprite_name("P", direction) in SPRITE_FILES


def test_commands_cover_every_cell():
    game = Game.from_rows(CORRIDOR)
    commands = draw_commands(game)
    assert len(commands) == sum(len(row) for row in CORRIDOR)
    r, c = game.player
    assert ("sprite", "player_down", c * SIZE, r * SIZE) in commands


def test_open_exit_sprite():
    game = Game.from_rows(CORRIDOR)
    game.exit_open = True
    r, c = game.exit
    assert ("sprite", "exit_o", c * SIZE, r * SIZE) in draw_commands(game)


def test_won_game_shows_only_text():
    game = Game.from_rows(CORRIDOR)
    game.won = True
    commands = draw_commands(game)
    assert len(commands) == 1
    assert commands[0][:2] == ("text", WIN_TEXT)


def test_draw_places_tiles():
    game = Game.from_rows(CORRIDOR)
    surface = surface_for(game)
    Renderer(surface, images=images()).draw(game)
    for r, row in enumerate(CORRIDOR):
        for c, cell in enumerate(row):
            assert color_at(surface, r, c) == COLORS[sprite_name(cell, Direction.DOWN)]


def test_draw_won_game_clears_and_writes():
    game = Game.from_rows(CORRIDOR)
    game.won = True
    surface = surface_for(game)
    surface.fill((255, 255, 255))
    Renderer(surface, images=images()).draw(game)
    pixels = [
        tuple(surface.get_at((x, y)))[:3]
        for x in range(surface.get_width())
        for y in range(surface.get_height())
    ]
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)
    assert all(p[0] == 0 and p[1] == 0 for p in pixels)
    assert any(p[2] > 0 for p in pixels)


def test_missing_images_raise(tmp_path):
    game = Game.from_rows(CORRIDOR)
    renderer = Renderer(surface_for(game), image_dir=tmp_path)
    with pytest.raises((FileNotFoundError, pygame.error)):
        renderer.draw(game)