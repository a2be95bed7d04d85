"""Checks on the command line and on the shape and solvability of a map."""

from __future__ import annotations

from collections.abc import Sequence

from .mapdata import (
    MAX_HEIGHT,
    MAX_WIDTH,
    MSG_SIZE,
    PIXEL,
    GameMap,
    MapError,
    is_composed_of,
)

MSG_USAGE = "Usage : ./so_long filname.ber"
MSG_NOT_BER = "Error : not *.ber file"
MSG_EMPTY = "Error : invalid map (Empty map)"
MSG_ELEMENT = "Error : invalid map (Not a valid map element)"
MSG_RECTANGLE = "Error : invalid map (Map is not a rectangle)"
MSG_WALL = "Error : invalid map (Not surrounded by wall)"
MSG_ITEMS = "Error : invalid map (Invalid number of items)"
MSG_UNSOLVABLE = "Error : invalid map (Unsolvable map)"

VALID_TILES = "01PCE"
_EXTENSION = ".ber"


def is_ber_file(filename: str) -> bool:
    """True for a name ending in '.ber' with something before the dot."""
    dot = filename.rfind(".")
    if dot <= 0:
        return False
    return filename[dot:] == _EXTENSION


def validate_args(argv: Sequence[str]) -> str:
    """Check the arguments after the program name and return the map path."""
    if len(argv) != 1:
        raise MapError(MSG_USAGE)
    filename = argv[0]
    if not is_ber_file(filename):
        raise MapError(MSG_NOT_BER)
    try:
        with open(filename, "rb"):
            pass
    except OSError as exc:
        raise MapError(f"{filename}: {exc.strerror}") from exc
    return filename


def is_valid_field(game_map: GameMap) -> bool:
    """True when every tile is one of the known tile characters."""
    return all(is_composed_of("".join(row), VALID_TILES) for row in game_map.blocks)


def is_rectangle(game_map: GameMap) -> bool:
    """True when every row is as long as the first."""
    return (
        all(len(row) == game_map.x_len for row in game_map.blocks)
        and game_map.y_len == len(game_map.blocks)
    )


def is_surrounded_by_wall(game_map: GameMap) -> bool:
    """True when the outer border consists only of walls."""
    blocks = game_map.blocks
    width, height = game_map.x_len, game_map.y_len
    if height == 0 or width == 0:
        return False
    top, bottom = blocks[0], blocks[height - 1]
    if any(top[x] != "1" or bottom[x] != "1" for x in range(width)):
        return False
    return all(row[0] == "1" and row[width - 1] == "1" for row in blocks[:height])


def has_valid_items(game_map: GameMap) -> bool:
    """One player, one exit and at least one collectible.

    Records the number of collectibles to be reached.
    """
    players, collectibles, exits = game_map.count_items()
    game_map.must_reach_c = collectibles
    return players == 1 and collectibles >= 1 and exits == 1


def is_reachable(game_map: GameMap) -> bool:
    """True when the player can reach every collectible and the exit.

    The exit blocks the way: tiles behind it do not count as reached.
    """
    game_map.reach_c = 0
    game_map.reach_e = 0
    game_map.must_reach_c = game_map.count_items()[1]
    start = game_map.find_player()
    if start is None:
        return False
    blocks = game_map.blocks
    seen: set[tuple[int, int]] = set()
    stack = [start]
    while stack:
        x, y = stack.pop()
        if not (0 <= y < len(blocks) and 0 <= x < len(blocks[y])):
            continue
        tile = blocks[y][x]
        if tile == "1" or (x, y) in seen:
            continue
        seen.add((x, y))
        if tile == "C":
            game_map.reach_c += 1
        elif tile == "E":
            game_map.reach_e += 1
            continue
        stack.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
    return game_map.reach_c == game_map.must_reach_c and game_map.reach_e > 0


def validate_map(game_map: GameMap) -> GameMap:
    """Run every map check in order, raising MapError on the first failure."""
    if not game_map.blocks:
        raise MapError(MSG_EMPTY)
    if game_map.height > PIXEL * MAX_HEIGHT or game_map.width > PIXEL * MAX_WIDTH:
        raise MapError(MSG_SIZE)
    if not is_valid_field(game_map):
        raise MapError(MSG_ELEMENT)
    if not is_rectangle(game_map):
        raise MapError(MSG_RECTANGLE)
    if not is_surrounded_by_wall(game_map):
        raise MapError(MSG_WALL)
    if not has_valid_items(game_map):
        raise MapError(MSG_ITEMS)
    if not is_reachable(game_map):
        raise MapError(MSG_UNSOLVABLE)
    return game_map