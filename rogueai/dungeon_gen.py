"""Procedural dungeon generators: drunkard walks, inverse walks and cellular automata."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from .components import FLOOR, WALL, DungeonData
from .vecmath import IVec2, dist_sq

_DIRS4 = ((1, 0), (0, 1), (-1, 0), (0, -1))
_DIRS8 = ((1, 0), (0, 1), (-1, 0), (0, -1), (1, 1), (-1, 1), (1, -1), (-1, -1))

_ROOMS = (
    "#####"
    "#   #"
    "#   #"
    "#   #"
    "#####",
    "     "
    " ### "
    " # # "
    " ### "
    "     ",
    "#####"
    " ### "
    " # # "
    " # # "
    "     ",
    "#   #"
    "## ##"
    "## ##"
    "## ##"
    "#   #",
    "#####"
    "#####"
    "     "
    "#####"
    "#####",
)

_CLAMPED_NUM_ITER = 48
_CLAMPED_MAX_EXCAVATIONS = 50


def _walls(w: int, h: int) -> DungeonData:
    return DungeonData(w, h, [WALL] * (w * h))


def _clamp(v: int, lo: int, hi: int) -> int:
    return min(max(v, lo), hi)


def _carve_line(dungeon: DungeonData, start: IVec2, end: IVec2) -> None:
    """Dig a stair-stepped corridor from start to end, taking the longer axis first."""
    x, y = start.x, start.y
    while (x, y) != (end.x, end.y):
        dx, dy = end.x - x, end.y - y
        if abs(dx) > abs(dy):
            x += 1 if dx > 0 else -1
        else:
            y += 1 if dy > 0 else -1
        dungeon.tiles[y * dungeon.width + x] = FLOOR


def _closest_later(starts: Sequence[IVec2], i: int) -> tuple:
    """Return (closest, previously closest) among the start points after index i."""
    spos = starts[i]
    best = float("inf")
    closest = spos
    last_pop = spos
    for epos in starts[i + 1:]:
        d = dist_sq(spos, epos)
        if d < best:
            best = d
            last_pop = closest
            closest = epos
    return closest, last_pop


def gen_clamped_drunk_dungeon(
    w: int, h: int, rng: Optional[random.Random] = None
) -> DungeonData:
    """Dig 48 drunkard walks of 50 tiles kept off the border, then join their starts."""
    rng = rng or random.Random()
    if w < 3 or h < 3:
        raise ValueError("dungeon must be at least 3x3")
    if _CLAMPED_NUM_ITER * _CLAMPED_MAX_EXCAVATIONS > (w - 2) * (h - 2):
        raise ValueError("dungeon interior is too small for the requested excavations")
    dungeon = _walls(w, h)
    tiles = dungeon.tiles
    starts: List[IVec2] = []
    for _ in range(_CLAMPED_NUM_ITER):
        x = rng.randint(1, w - 2)
        y = rng.randint(1, h - 2)
        starts.append(IVec2(x, y))
        dug = 0
        while dug < _CLAMPED_MAX_EXCAVATIONS:
            if tiles[y * w + x] == WALL:
                dug += 1
                tiles[y * w + x] = FLOOR
            dx, dy = _DIRS4[rng.randint(0, 3)]
            x = _clamp(x + dx, 1, w - 2)
            y = _clamp(y + dy, 1, h - 2)

    for i in range(len(starts) - 1):
        closest, last_pop = _closest_later(starts, i)
        _carve_line(dungeon, starts[i], closest)
        _carve_line(dungeon, starts[i], last_pop)
    return dungeon


def gen_drunk_dungeon(
    w: int,
    h: int,
    num_iter: int,
    max_excavations: int,
    rng: Optional[random.Random] = None,
) -> DungeonData:
    """Dig drunkard walks that wrap around the map edges, then join each start to its nearest successor."""
    rng = rng or random.Random()
    if w < 3 or h < 3:
        raise ValueError("dungeon must be at least 3x3")
    if num_iter * max_excavations > w * h:
        raise ValueError("dungeon is too small for the requested excavations")
    dungeon = _walls(w, h)
    tiles = dungeon.tiles
    starts: List[IVec2] = []
    for _ in range(num_iter):
        x = rng.randint(1, w - 2)
        y = rng.randint(1, h - 2)
        starts.append(IVec2(x, y))
        dug = 0
        while dug < max_excavations:
            if tiles[y * w + x] == WALL:
                dug += 1
                tiles[y * w + x] = FLOOR
            dx, dy = _DIRS4[rng.randint(0, 3)]
            x = (x + dx) % w
            y = (y + dy) % h

    for i in range(len(starts) - 1):
        closest, _ = _closest_later(starts, i)
        _carve_line(dungeon, starts[i], closest)
    return dungeon


def _dig_initial_room(dungeon: DungeonData, init_sz: int, rng: random.Random) -> None:
    w, h = dungeon.width, dungeon.height
    sx = rng.randint(init_sz + 1, w - init_sz - 1)
    sy = rng.randint(init_sz + 1, h - init_sz - 1)
    for y in range(sy - init_sz, sy + init_sz):
        for x in range(sx - init_sz, sx + init_sz):
            dungeon.tiles[y * w + x] = FLOOR


def _check_inverse_args(w: int, h: int, init_sz: int, max_steps: int) -> None:
    if init_sz < 1:
        raise ValueError("init_sz must be at least 1")
    if max_steps < 1:
        raise ValueError("max_steps must be at least 1")
    if w < 2 * init_sz + 2 or h < 2 * init_sz + 2:
        raise ValueError("dungeon is too small for the initial room")


def gen_inv_dungeon(
    w: int,
    h: int,
    max_excavations: int,
    init_sz: int,
    max_steps: int,
    rng: Optional[random.Random] = None,
) -> DungeonData:
    """Grow a cave from a square room by walkers that dig where they first touch open floor."""
    rng = rng or random.Random()
    _check_inverse_args(w, h, init_sz, max_steps)
    dungeon = _walls(w, h)
    tiles = dungeon.tiles
    _dig_initial_room(dungeon, init_sz, rng)

    for _ in range(max_excavations):
        should_excavate = False
        while not should_excavate:
            x = rng.randint(1, w - 2)
            y = rng.randint(1, h - 2)
            dx, dy = _DIRS8[rng.randint(0, 7)]
            for _step in range(max_steps):
                x = _clamp(x + dx, 1, w - 2)
                y = _clamp(y + dy, 1, h - 2)
                should_excavate = any(
                    tiles[yy * w + xx] != WALL
                    for yy in range(max(y, 1) - 1, min(h - 2, y) + 2)
                    for xx in range(max(x, 1) - 1, min(w - 2, x) + 2)
                )
                if should_excavate:
                    break
            if should_excavate:
                tiles[y * w + x] = FLOOR
    return dungeon


def gen_inv_room_dungeon(
    w: int,
    h: int,
    max_excavations: int,
    init_sz: int,
    max_steps: int,
    rng: Optional[random.Random] = None,
) -> DungeonData:
    """Grow a dungeon by stamping 5x5 room patterns where a walker's room would overlap open floor."""
    rng = rng or random.Random()
    _check_inverse_args(w, h, init_sz, max_steps)
    dungeon = _walls(w, h)
    tiles = dungeon.tiles
    _dig_initial_room(dungeon, init_sz, rng)

    def in_bounds(x: int, y: int) -> bool:
        return 0 <= x < w and 0 <= y < h

    offsets = [(xx, yy) for yy in range(-2, 3) for xx in range(-2, 3)]

    for _ in range(max_excavations):
        should_excavate = False
        while not should_excavate:
            x = rng.randint(1, w - 2)
            y = rng.randint(1, h - 2)
            room = _ROOMS[rng.randint(0, len(_ROOMS) - 1)]
            dx, dy = _DIRS8[rng.randint(0, 7)]
            for _step in range(max_steps):
                x = _clamp(x + dx, 1, w - 2)
                y = _clamp(y + dy, 1, h - 2)
                should_excavate = any(
                    tiles[(y + oy) * w + x + ox] != WALL
                    for ox, oy in offsets
                    if room[(oy + 2) * 5 + ox + 2] != WALL and in_bounds(x + ox, y + oy)
                )
                if should_excavate:
                    break
            if should_excavate:
                for ox, oy in offsets:
                    if not in_bounds(x + ox, y + oy):
                        continue
                    coord = (y + oy) * w + x + ox
                    if tiles[coord] == WALL:
                        tiles[coord] = room[(oy + 2) * 5 + ox + 2]
    return dungeon


def _count_walls(tiles: Sequence[str], w: int, h: int, x: int, y: int, radius: int) -> int:
    """Count walls in the square around (x, y); cells off the map count as walls."""
    return sum(
        1
        for yy in range(y - radius, y + radius + 1)
        for xx in range(x - radius, x + radius + 1)
        if not (0 <= xx < w and 0 <= yy < h) or tiles[yy * w + xx] == WALL
    )


def run_cellular(dungeon: DungeonData, num_iter: int) -> None:
    """Smooth the map in place with a cave-forming cellular automaton.

    A tile becomes wall when at least 5 of its 3x3 neighbourhood are walls, or when
    its 5x5 neighbourhood holds no wall at all; iteration stops early once stable.
    """
    w, h = dungeon.width, dungeon.height
    for _ in range(num_iter):
        tiles = dungeon.tiles
        scratch = list(tiles)
        changed = False
        for y in range(h):
            for x in range(w):
                should_be_wall = (
                    _count_walls(tiles, w, h, x, y, 1) >= 5
                    or _count_walls(tiles, w, h, x, y, 2) < 1
                )
                if should_be_wall != (tiles[y * w + x] == WALL):
                    scratch[y * w + x] = WALL if should_be_wall else FLOOR
                    changed = True
        dungeon.tiles[:] = scratch
        if not changed:
            break


def gen_cellular_dungeon(
    w: int,
    h: int,
    fillrate: float,
    num_iter: int,
    rng: Optional[random.Random] = None,
) -> DungeonData:
    """Fill the map with random walls at the given rate, then smooth it."""
    rng = rng or random.Random()
    dungeon = DungeonData(
        w, h, [WALL if rng.random() < fillrate else FLOOR for _ in range(w * h)]
    )
    run_cellular(dungeon, num_iter)
    return dungeon