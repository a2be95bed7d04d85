"""Window, drawing and the command-line entry point."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Optional, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .game import Game, Key, MoveResult  # noqa: E402
from .mapdata import PIXEL, GameMap, MapError, load_map  # noqa: E402
from .validation import validate_args, validate_map  # noqa: E402

WINDOW_TITLE = "so_long"
DEFAULT_IMAGE_DIR = "imgs"
IMAGE_EXTENSION = ".xpm"
IMAGE_NAMES = (
    "land",
    "wall",
    "player_up",
    "player_left",
    "player_down",
    "player_right",
    "slime",
    "slime_monster",
    "chest",
)
TILE_IMAGES = {"1": "wall", "0": "land", "C": "slime", "E": "chest"}


class Renderer:
    """Draws a game's map onto a surface, one image per tile."""

    def __init__(self, surface: pygame.Surface, tiles: Mapping[str, pygame.Surface]) -> None:
        self.surface = surface
        self.tiles = tiles

    def draw(self, game: Game) -> None:
        """Draw every tile; the player faces the way it last tried to move."""
        player_image = f"player_{game.facing.name.lower()}"
        for y, row in enumerate(game.game_map.blocks):
            for x, tile in enumerate(row):
                name = player_image if tile == "P" else TILE_IMAGES.get(tile)
                if name is not None:
                    self.surface.blit(self.tiles[name], (x * PIXEL, y * PIXEL))


def load_tiles(image_dir: Union[str, Path] = DEFAULT_IMAGE_DIR) -> dict[str, pygame.Surface]:
    """Load every tile image from ``image_dir``."""
    directory = Path(image_dir)
    tiles = {}
    for name in IMAGE_NAMES:
        path = directory / f"{name}{IMAGE_EXTENSION}"
        if not path.is_file():
            raise FileNotFoundError(f"missing image: {path}")
        tiles[name] = pygame.image.load(str(path))
    return tiles


def _keycode(key: int) -> int:
    return int(Key.ESC) if key == pygame.K_ESCAPE else key


def run(game_map: GameMap) -> int:
    """Open a window for ``game_map`` and play until it is closed or cleared."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((game_map.width, game_map.height))
        pygame.display.set_caption(WINDOW_TITLE)
        tiles = {name: image.convert_alpha() for name, image in load_tiles().items()}
        game = Game(game_map)
        renderer = Renderer(screen, tiles)
        renderer.draw(game)
        pygame.display.flip()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type != pygame.KEYDOWN:
                continue
            result = game.handle_key(_keycode(event.key))
            if result in (MoveResult.QUIT, MoveResult.CLEARED):
                return 0
            renderer.draw(game)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check the arguments and the map, then play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = validate_args(args)
        game_map = validate_map(load_map(path))
    except MapError as exc:
        print(exc)
        return 0
    return run(game_map)