import io

import pygame
import pytest

from solong.app import IMAGE_NAMES, Renderer, load_tiles, main
from solong.game import Direction, Game
from solong.mapdata import PIXEL, parse_map

COLOURS = {
    name: pygame.Color(10 + 20 * index, 200 - 15 * index, 5 * index)
    for index, name in enumerate(IMAGE_NAMES)
}


def _tiles():
    tiles = {}
    for name, colour in COLOURS.items():
        surface = pygame.Surface((PIXEL, PIXEL))
        surface.fill(colour)
        tiles[name] = surface
    return tiles


def _colour_at(surface, x, y):
    return surface.get_at((x * PIXEL + PIXEL // 2, y * PIXEL + PIXEL // 2))


def test_draw_places_each_tile():
    game_map = parse_map("11111\n1P0C1\n1E001\n11111\n")
    game = Game(game_map, io.StringIO())
    surface = pygame.Surface((game_map.width, game_map.height))
    Renderer(surface, _tiles()).draw(game)
    assert _colour_at(surface, 0, 0) == COLOURS["wall"]
    assert _colour_at(surface, 1, 1) == COLOURS["player_down"]
    assert _colour_at(surface, 2, 1) == COLOURS["land"]
    assert _colour_at(surface, 3, 1) == COLOURS["slime"]
    assert _colour_at(surface, 1, 2) == COLOURS["chest"]


def test_draw_follows_moves_and_facing():
    game_map = parse_map("11111\n1P0C1\n1E001\n11111\n")
    game = Game(game_map, io.StringIO())
    surface = pygame.Surface((game_map.width, game_map.height))
    renderer = Renderer(surface, _tiles())
    game.move(Direction.RIGHT)
    renderer.draw(game)
    assert _colour_at(surface, 1, 1) == COLOURS["land"]
    assert _colour_at(surface, 2, 1) == COLOURS["player_right"]
    game.move(Direction.UP)
    renderer.draw(game)
    assert _colour_at(surface, 2, 1) == COLOURS["player_up"]


def test_load_tiles_reads_every_image(tmp_path):
    for name, colour in COLOURS.items():
        surface = pygame.Surface((3, 2))
        surface.fill(colour)
        bmp = tmp_path / f"{name}.bmp"
        pygame.image.save(surface, str(bmp))
        bmp.rename(tmp_path / f"{name}.xpm")
    tiles = load_tiles(tmp_path)
    assert set(tiles) == set(IMAGE_NAMES)
    assert tiles["wall"].get_size() == (3, 2)
    got = tiles["chest"].get_at((0, 0))
    assert (got.r, got.g, got.b) == (COLOURS["chest"].r, COLOURS["chest"].g, COLOURS["chest"].b)


def test_load_tiles_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_tiles(tmp_path / "absent")


def test_main_wrong_argument_count(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Usage : ./so_long filname.ber\n"


def test_main_not_ber(capsys):
    assert main(["map.txt"]) == 0
    assert capsys.readouterr().out == "Error : not *.ber file\n"


def test_main_missing_file(tmp_path, capsys):
    path = tmp_path / "absent.ber"
    assert main([str(path)]) == 0
    assert str(path) in capsys.readouterr().out


def test_main_rejects_open_border(tmp_path, capsys):
    path = tmp_path / "open.ber"
    path.write_text("11111\n1P0C0\n1E001\n11111\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Error : invalid map (Not surrounded by wall)\n"


def test_main_rejects_unsolvable(tmp_path, capsys):
    path = tmp_path / "stuck.ber"
    path.write_text("111111\n1P1C01\n1E1001\n111111\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Error : invalid map (Unsolvable map)\n"