"""Game state changes driven by player moves and key presses."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional, TextIO

from .charclass import itoa
from .mapdata import GameMap, MapError
from .output import put_endl

MSG_CLEAR = "clear!!"
MSG_NO_PLAYER = "Error : invalid map (No player)"


class Direction(Enum):
    """A direction the player can move or face, as an (dx, dy) step."""

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Key(IntEnum):
    """Key codes the game reacts to."""

    ESC = 65307
    W = 119
    A = 97
    S = 115
    D = 100


class MoveResult(Enum):
    """What a move or key press did."""

    IGNORED = "ignored"
    BLOCKED = "blocked"
    MOVED = "moved"
    CLEARED = "cleared"
    QUIT = "quit"


KEY_DIRECTIONS = {
    Key.W: Direction.UP,
    Key.D: Direction.RIGHT,
    Key.S: Direction.DOWN,
    Key.A: Direction.LEFT,
}


class Game:
    """A game being played on a validated map.

    Every completed move prints the running move count to ``stream``;
    stepping onto the exit once everything is collected prints the clear
    message and finishes the game.
    """

    def __init__(self, game_map: GameMap, stream: Optional[TextIO] = None) -> None:
        if (game_map.player_x < 0 or game_map.player_y < 0) and game_map.find_player() is None:
            raise MapError(MSG_NO_PLAYER)
        self.game_map = game_map
        self.stream = stream
        self.facing = Direction.DOWN
        self.finished = False

    def _at_edge(self, direction: Direction) -> bool:
        m = self.game_map
        if direction is Direction.UP:
            return m.player_y == 1
        if direction is Direction.RIGHT:
            return m.player_x == m.x_len - 1
        if direction is Direction.DOWN:
            return m.player_y == m.y_len - 1
        return m.player_x == 1

    def move(self, direction: Direction) -> MoveResult:
        """Try to step the player one tile in ``direction``."""
        if self.finished:
            return MoveResult.IGNORED
        self.facing = direction
        if self._at_edge(direction):
            return MoveResult.BLOCKED
        m = self.game_map
        old_x, old_y = m.player_x, m.player_y
        new_x, new_y = old_x + direction.dx, old_y + direction.dy
        target = m.blocks[new_y][new_x]
        if target == "1" or (target == "E" and not m.escape):
            return MoveResult.BLOCKED
        m.player_x, m.player_y = new_x, new_y
        if m.escape and target == "E":
            self.finished = True
            put_endl(MSG_CLEAR, self.stream)
            return MoveResult.CLEARED
        if target == "C":
            m.get_c += 1
        if m.get_c == m.reach_c:
            m.escape = True
        m.blocks[old_y][old_x] = "0"
        m.blocks[new_y][new_x] = "P"
        m.cnt_move += 1
        put_endl(itoa(m.cnt_move), self.stream)
        return MoveResult.MOVED

    def handle_key(self, keycode: int) -> MoveResult:
        """React to a key press: Escape quits, W/A/S/D move."""
        if keycode == Key.ESC:
            self.finished = True
            return MoveResult.QUIT
        direction = KEY_DIRECTIONS.get(keycode)
        if direction is None:
            return MoveResult.IGNORED
        return self.move(direction)