"""Command line entry point: check the arguments, load the map and play."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import pygame

from solong.game import ESC, Game
from solong.mapfile import MapError, read_map, validate_map
from solong.printf import printf
from solong.render import SIZE, Renderer

INSERT_MAP = "Insert map"
TOO_MANY = "Too many arguments"
INVALID_MAP = "Invalid Map"
MAP_ERROR = "Map Error"


def check_arguments(argv: Sequence[str]) -> str:
    """Return the map path from ``argv``; raise ValueError unless there is exactly one."""
    if len(argv) < 1:
        raise ValueError(INSERT_MAP)
    if len(argv) > 1:
        raise ValueError(TOO_MANY)
    return argv[0]


def _report(message: str) -> None:
    printf("\033[0;31mError\n%s\n\033[0;37m", message)


def _play(game: Game) -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.width * SIZE, game.height * SIZE))
        pygame.display.set_caption("so_long")
        renderer = Renderer(screen)
        while not game.closed:
            renderer.draw(game)
            pygame.display.flip()
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                game.closed = True
            elif event.type == pygame.KEYDOWN:
                key = ESC if event.key == pygame.K_ESCAPE else event.key
                game.press(key)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_arguments(args)
    except ValueError as exc:
        _report(str(exc))
        return 1
    try:
        rows = read_map(path)
    except MapError as exc:
        _report(INVALID_MAP if isinstance(exc.__cause__, OSError) else MAP_ERROR)
        return 1
    try:
        validate_map(rows)
    except MapError:
        _report(MAP_ERROR)
        return 1
    _play(Game.from_rows(rows))
    return 0


if __name__ == "__main__":
    sys.exit(main())