"""Map model and loading of map files."""

from __future__ import annotations

import io
from collections import Counter
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

from .linereader import LineReader, read_lines

PIXEL = 100
MAX_WIDTH = 18
MAX_HEIGHT = 10
MAX_LINES = 11

MSG_OPEN_FAILED = "Error : Failed to open the file or the file does not exist."
MSG_SIZE = "Error : invalid map (Size out of range)"

PathType = Union[str, "PathLike[str]"]


class MapError(Exception):
    """A map file, map or command line that cannot be played."""


@dataclass
class GameMap:
    """A grid of tiles together with the state of a game played on it."""

    blocks: list[list[str]] = field(default_factory=list)
    x_len: int = 0
    y_len: int = 0
    width: int = 0
    height: int = 0
    player_x: int = -1
    player_y: int = -1
    must_reach_c: int = 0
    reach_c: int = 0
    reach_e: int = 0
    get_c: int = 0
    cnt_move: int = 0
    escape: bool = False

    def find_player(self) -> tuple[int, int] | None:
        """Locate the first 'P' tile, record it and return its (x, y)."""
        for y, row in enumerate(self.blocks):
            for x, tile in enumerate(row):
                if tile == "P":
                    self.player_x = x
                    self.player_y = y
                    return x, y
        return None

    def count_items(self) -> tuple[int, int, int]:
        """Return the numbers of players, collectibles and exits."""
        counts = Counter(tile for row in self.blocks for tile in row)
        return counts["P"], counts["C"], counts["E"]


def _from_lines(lines: list[str]) -> GameMap:
    rows = [line[:-1] if line.endswith("\n") else line for line in lines]
    x_len = len(rows[0]) if rows else 0
    y_len = len(rows)
    return GameMap(
        blocks=[list(row) for row in rows],
        x_len=x_len,
        y_len=y_len,
        width=x_len * PIXEL,
        height=y_len * PIXEL,
    )


def parse_map(text: str) -> GameMap:
    """Build a map from its text, one row per line."""
    return _from_lines(read_lines(io.StringIO(text, newline="")))


def count_lines(path: PathType) -> int:
    """Number of lines in the file at ``path``; 0 when it cannot be read."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            return sum(1 for _ in LineReader(handle))
    except OSError:
        return 0


def load_map(path: PathType) -> GameMap:
    """Read a map file, rejecting files with more than eleven lines."""
    try:
        handle = open(path, encoding="latin-1", newline="")
    except OSError as exc:
        raise MapError(MSG_OPEN_FAILED) from exc
    with handle:
        if count_lines(path) > MAX_LINES:
            raise MapError(MSG_SIZE)
        lines = read_lines(handle)
    return _from_lines(lines)


def is_composed_of(text: str, allowed: str) -> bool:
    """True when every character of ``text`` appears in ``allowed``."""
    return set(text) <= set(allowed)