import pytest

from rogueai.components import FLOOR, WALL, DungeonData
from rogueai.pathfinder import (
    DungeonPortals,
    PathPortal,
    find_path_a_star,
    heuristic,
    prebuild_map,
)
from rogueai.vecmath import IVec2


def make_dungeon(*rows):
    return DungeonData(len(rows[0]), len(rows), list("".join(rows)))


def open_dungeon(w, h):
    return DungeonData(w, h, [FLOOR] * (w * h))


def assert_valid_path(dungeon, path, start, goal):
    assert path[0] == start
    assert path[-1] == goal
    for a, b in zip(path, path[1:]):
        assert abs(a.x - b.x) + abs(a.y - b.y) == 1
    for p in path[1:]:
        assert dungeon.tile(p.x, p.y) == FLOOR


def test_heuristic_is_euclidean():
    assert heuristic(IVec2(0, 0), IVec2(3, 4)) == pytest.approx(5.0)
    assert heuristic(IVec2(2, 7), IVec2(2, 7)) == 0.0
    assert heuristic(IVec2(1, 2), IVec2(5, 9)) == heuristic(IVec2(5, 9), IVec2(1, 2))


def test_straight_path_in_open_room():
    d = open_dungeon(6, 3)
    path = find_path_a_star(d, IVec2(0, 1), IVec2(5, 1), IVec2(0, 0), IVec2(6, 3))
    assert_valid_path(d, path, IVec2(0, 1), IVec2(5, 1))
    assert len(path) == 6


def test_path_length_is_manhattan_in_open_room():
    d = open_dungeon(8, 8)
    start, goal = IVec2(1, 2), IVec2(6, 7)
    path = find_path_a_star(d, start, goal)
    assert_valid_path(d, path, start, goal)
    assert len(path) == abs(goal.x - start.x) + abs(goal.y - start.y) + 1


def test_path_goes_around_wall():
    d = make_dungeon(
        "     ",
        " ### ",
        " # # ",
        "     ",
    )
    start, goal = IVec2(0, 2), IVec2(4, 2)
    path = find_path_a_star(d, start, goal)
    assert_valid_path(d, path, start, goal)
    assert all(d.tile(p.x, p.y) != WALL for p in path)


def test_start_equals_goal():
    d = open_dungeon(3, 3)
    assert find_path_a_star(d, IVec2(1, 1), IVec2(1, 1)) == [IVec2(1, 1)]


def test_blocked_goal_gives_empty_path():
    d = make_dungeon(
        "  #  ",
        "  #  ",
        "  #  ",
    )
    assert find_path_a_star(d, IVec2(0, 0), IVec2(4, 2)) == []


def test_start_off_map_gives_empty_path():
    d = open_dungeon(4, 4)
    assert find_path_a_star(d, IVec2(-1, 0), IVec2(2, 2)) == []
    assert find_path_a_star(d, IVec2(0, 4), IVec2(2, 2)) == []


def test_limits_restrict_search():
    d = open_dungeon(10, 10)
    assert find_path_a_star(d, IVec2(1, 1), IVec2(7, 1), IVec2(0, 0), IVec2(5, 5)) == []
    path = find_path_a_star(d, IVec2(1, 1), IVec2(4, 4), IVec2(0, 0), IVec2(5, 5))
    assert all(0 <= p.x < 5 and 0 <= p.y < 5 for p in path)
    assert_valid_path(d, path, IVec2(1, 1), IVec2(4, 4))


def test_prebuild_single_open_border():
    d = open_dungeon(20, 10)
    result = prebuild_map(d, 10)
    assert isinstance(result, DungeonPortals)
    assert result.tile_split == 10
    assert result.portals == [PathPortal(9, 0, 10, 9)]
    assert result.tile_portals_indices == [[0], [0]]


def test_prebuild_split_border_links_portals():
    tiles = [FLOOR] * 200
    tiles[5 * 20 + 9] = WALL
    d = DungeonData(20, 10, tiles)
    result = prebuild_map(d, 10)
    assert [(p.start_x, p.start_y, p.end_x, p.end_y) for p in result.portals] == [
        (9, 0, 10, 4),
        (9, 6, 10, 9),
    ]
    assert result.tile_portals_indices == [[0, 1], [0, 1]]
    first, second = result.portals
    assert [c.conn_idx for c in first.conns] == [1, 1]
    assert [c.conn_idx for c in second.conns] == [0, 0]
    assert [c.score for c in first.conns] == [c.score for c in second.conns]
    assert [c.score for c in first.conns] == [5.0, 3.0]


def test_prebuild_four_chunks_symmetric_connections():
    d = open_dungeon(20, 20)
    result = prebuild_map(d, 10)
    assert len(result.tile_portals_indices) == 4
    assert len(result.portals) == 4
    for tile in result.tile_portals_indices:
        assert len(tile) == 2
    for idx, portal in enumerate(result.portals):
        for conn in portal.conns:
            back = result.portals[conn.conn_idx].conns
            assert any(c.conn_idx == idx and c.score == conn.score for c in back)
            assert conn.score >= 1.0


def test_prebuild_wall_border_has_no_portals():
    tiles = [FLOOR] * 200
    for y in range(10):
        tiles[y * 20 + 10] = WALL
    d = DungeonData(20, 10, tiles)
    result = prebuild_map(d, 10)
    assert result.portals == []
    assert result.tile_portals_indices == [[], []]


def test_prebuild_all_walls():
    d = DungeonData(20, 20, [WALL] * 400)
    result = prebuild_map(d, 10)
    assert result.portals == []
    assert result.tile_portals_indices == [[], [], [], []]


def test_prebuild_rejects_zero_split():
    with pytest.raises(ValueError):
        prebuild_map(open_dungeon(10, 10), 0)