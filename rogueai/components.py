"""Component data shared by the game world and dungeon tools."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List

WALL = "#"
FLOOR = " "


class Actions(IntEnum):
    """Actions an actor may take in a turn."""

    NOP = 0
    MOVE_START = 1
    MOVE_LEFT = 1
    MOVE_RIGHT = 2
    MOVE_DOWN = 3
    MOVE_UP = 4
    MOVE_END = 5
    ATTACK = 5
    HEAL_SELF = 6
    NUM = 7


@dataclass
class MoveSpeed:
    speed: float = 0.0


@dataclass
class Hitpoints:
    hitpoints: float = 10.0


@dataclass
class Team:
    team: int = 0


@dataclass
class NumActions:
    num_actions: int = 1
    cur_actions: int = 0


@dataclass
class MeleeDamage:
    damage: float = 2.0


@dataclass
class PlayerInput:
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


WHITE = Color(255, 255, 255, 255)
BLACK = Color(0, 0, 0, 255)
GRAY = Color(130, 130, 130, 255)
RED = Color(230, 41, 55, 255)
BLUE = Color(0, 121, 241, 255)
GREEN = Color(0, 228, 48, 255)


@dataclass
class DungeonData:
    """A rectangular tile map stored row by row; each tile is WALL or FLOOR."""

    width: int
    height: int
    tiles: List[str]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("dungeon dimensions must not be negative")
        if len(self.tiles) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} tiles, got {len(self.tiles)}"
            )

    def tile(self, x: int, y: int) -> str:
        """Return the tile at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) is outside the dungeon")
        return self.tiles[y * self.width + x]

    def rows(self) -> Iterator[str]:
        """Yield the map one row at a time as strings."""
        for y in range(self.height):
            start = y * self.width
            yield "".join(self.tiles[start:start + self.width])

    def render(self) -> str:
        """Return the whole map as text, one line per row."""
        return "\n".join(self.rows())