"""A* search on the tile grid and precomputation of portals between map chunks."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from .components import WALL, DungeonData
from .vecmath import IVec2

_NO_DIST = 0xFFFFFFFF
_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class PortalConnection:
    """A link to another portal in the same chunk with the path length between them."""

    conn_idx: int
    score: float


@dataclass
class PathPortal:
    """An open span across a chunk border, spanning the tiles on both sides."""

    start_x: int
    start_y: int
    end_x: int
    end_y: int
    conns: List[PortalConnection] = field(default_factory=list)


@dataclass
class DungeonPortals:
    """Portals of a dungeon split into square chunks of tile_split tiles."""

    tile_split: int
    portals: List[PathPortal]
    tile_portals_indices: List[List[int]]


def heuristic(lhs: IVec2, rhs: IVec2) -> float:
    """Straight-line distance between two tiles."""
    return math.hypot(float(lhs.x - rhs.x), float(lhs.y - rhs.y))


def _reconstruct_path(prev: Dict[IVec2, IVec2], goal: IVec2) -> List[IVec2]:
    path = [goal]
    cur = goal
    while cur in prev:
        cur = prev[cur]
        path.append(cur)
    path.reverse()
    return path


def find_path_a_star(
    dungeon: DungeonData,
    start: IVec2,
    goal: IVec2,
    lim_min: Optional[IVec2] = None,
    lim_max: Optional[IVec2] = None,
) -> List[IVec2]:
    """Find a shortest 4-connected path from start to goal, both ends included.

    Only tiles with lim_min <= (x, y) < lim_max are entered; the whole map by
    default. An empty list means there is no path or start is off the map.
    """
    w, h = dungeon.width, dungeon.height
    if not (0 <= start.x < w and 0 <= start.y < h):
        return []
    lo = lim_min or IVec2(0, 0)
    hi = lim_max or IVec2(w, h)
    min_x, min_y = max(lo.x, 0), max(lo.y, 0)
    max_x, max_y = min(hi.x, w), min(hi.y, h)

    g: Dict[IVec2, float] = {start: 0.0}
    f: Dict[IVec2, float] = {start: heuristic(start, goal)}
    prev: Dict[IVec2, IVec2] = {}

    open_list: List[IVec2] = [start]
    open_set = {start}
    closed = set()

    while open_list:
        cur = min(open_list, key=lambda p: f.get(p, math.inf))
        if cur == goal:
            return _reconstruct_path(prev, goal)
        open_list.remove(cur)
        open_set.discard(cur)
        if cur in closed:
            continue
        closed.add(cur)
        for dx, dy in _NEIGHBOURS:
            p = IVec2(cur.x + dx, cur.y + dy)
            if not (min_x <= p.x < max_x and min_y <= p.y < max_y):
                continue
            if dungeon.tiles[p.y * w + p.x] == WALL:
                continue
            score = g[cur] + 1.0
            if score < g.get(p, math.inf):
                prev[p] = cur
                g[p] = score
                f[p] = score + heuristic(p, goal)
            if p not in open_set:
                open_list.append(p)
                open_set.add(p)
    return []


def _border_portals(
    dungeon: DungeonData,
    split: int,
    tx: int,
    ty: int,
    direction: Tuple[int, int],
    offset: Tuple[int, int],
) -> List[PathPortal]:
    """Collect open spans along one border of chunk (tx, ty)."""
    dir_x, dir_y = direction
    offs_x, offs_y = offset
    base_x, base_y = tx * split, ty * split
    w = dungeon.width
    portals: List[PathPortal] = []

    def make(span_from: int, span_to: int) -> PathPortal:
        return PathPortal(
            base_x + span_from * dir_x + offs_x,
            base_y + span_from * dir_y + offs_y,
            base_x + span_to * dir_x,
            base_y + span_to * dir_y,
        )

    span_from: Optional[int] = None
    span_to = 0
    for i in range(split):
        x, y = base_x + i * dir_x, base_y + i * dir_y
        nx, ny = x + offs_x, y + offs_y
        if dungeon.tiles[y * w + x] != WALL and dungeon.tiles[ny * w + nx] != WALL:
            if span_from is None:
                span_from = i
            span_to = i
        elif span_from is not None:
            portals.append(make(span_from, span_to))
            span_from = None
    if span_from is not None:
        portals.append(make(span_from, span_to))
    return portals


def _cells_in(portal: PathPortal, lim_min: IVec2, lim_max: IVec2) -> List[IVec2]:
    return [
        IVec2(x, y)
        for y in range(max(portal.start_y, lim_min.y), min(portal.end_y, lim_max.y - 1) + 1)
        for x in range(max(portal.start_x, lim_min.x), min(portal.end_x, lim_max.x - 1) + 1)
    ]


def _portal_distance(
    dungeon: DungeonData,
    first: PathPortal,
    second: PathPortal,
    lim_min: IVec2,
    lim_max: IVec2,
) -> Optional[int]:
    """Shortest path length between two portals inside a chunk, or None if unreachable."""
    best = _NO_DIST
    targets: Sequence[IVec2] = _cells_in(second, lim_min, lim_max)
    for src in _cells_in(first, lim_min, lim_max):
        for dst in targets:
            path = find_path_a_star(dungeon, src, dst, lim_min, lim_max)
            if not path and src != dst:
                return None
            best = min(best, len(path))
    return best


def prebuild_map(dungeon: DungeonData, split_tiles: int = 10) -> DungeonPortals:
    """Split the map into chunks, find the portals between them and link portals per chunk."""
    if split_tiles < 1:
        raise ValueError("split_tiles must be at least 1")
    width = dungeon.width // split_tiles
    height = dungeon.height // split_tiles

    portals: List[PathPortal] = []
    tile_indices: List[List[int]] = []

    def push(x: int, y: int, offs_x: int, offs_y: int, new_portals: List[PathPortal]) -> None:
        for portal in new_portals:
            idx = len(portals)
            portals.append(portal)
            tile_indices[y * width + x].append(idx)
            tile_indices[(y + offs_y) * width + x + offs_x].append(idx)

    for y in range(height):
        for x in range(width):
            tile_indices.append([])
            if y > 0:
                push(x, y, 0, -1, _border_portals(dungeon, split_tiles, x, y, (1, 0), (0, -1)))
            if x > 0:
                push(x, y, -1, 0, _border_portals(dungeon, split_tiles, x, y, (0, 1), (-1, 0)))

    for tidx, indices in enumerate(tile_indices):
        x, y = tidx % width, tidx // width
        lim_min = IVec2(x * split_tiles, y * split_tiles)
        lim_max = IVec2((x + 1) * split_tiles, (y + 1) * split_tiles)
        for i, first_idx in enumerate(indices):
            first = portals[first_idx]
            for second_idx in indices[i + 1:]:
                second = portals[second_idx]
                distance = _portal_distance(dungeon, first, second, lim_min, lim_max)
                if distance is None:
                    continue
                first.conns.append(PortalConnection(second_idx, float(distance)))
                second.conns.append(PortalConnection(first_idx, float(distance)))

    return DungeonPortals(split_tiles, portals, tile_indices)