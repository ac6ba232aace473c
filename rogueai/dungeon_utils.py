"""Queries over a dungeon tile map: walkable tiles and random spawn points."""

from __future__ import annotations

import random
from typing import List, Optional

from .components import FLOOR, DungeonData
from .vecmath import Vec2


def walkable_tiles(dungeon: DungeonData) -> List[Vec2]:
    """Return the coordinates of every floor tile, row by row."""
    return [
        Vec2(float(x), float(y))
        for y in range(dungeon.height)
        for x in range(dungeon.width)
        if dungeon.tiles[y * dungeon.width + x] == FLOOR
    ]


def find_walkable_tile(
    dungeon: DungeonData, rng: Optional[random.Random] = None
) -> Vec2:
    """Pick a random floor tile; raise ValueError if the map has none."""
    rng = rng or random.Random()
    candidates = walkable_tiles(dungeon)
    if not candidates:
        raise ValueError("dungeon has no walkable tiles")
    return candidates[rng.randint(0, len(candidates) - 1)]


def is_tile_walkable(dungeon: DungeonData, pos: Vec2) -> bool:
    """Tell whether the tile under pos is floor; positions off the map are not."""
    if pos.x < 0 or pos.x >= dungeon.width or pos.y < 0 or pos.y >= dungeon.height:
        return False
    return dungeon.tiles[int(pos.y) * dungeon.width + int(pos.x)] == FLOOR