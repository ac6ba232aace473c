import math

import pytest

from rogueai.components import WHITE, MoveSpeed
from rogueai.objects import Position, Velocity, create_monster, create_player
from rogueai.steering import (
    Alignment,
    Cohesion,
    Evader,
    Fleer,
    Pursuer,
    Seeker,
    Separation,
    SteerAccel,
    SteerDir,
    SteerType,
    create_evader,
    create_fleer,
    create_pursuer,
    create_seeker,
    create_steer_beh,
    evade_force,
    flee_force,
    pursue_force,
    seek_force,
    update_steering,
)
from rogueai.vecmath import Vec2, length
from rogueai.world import World


def _monster(world, x=0.0, y=0.0):
    return create_monster(world, Vec2(x, y), WHITE, "minotaur_tex")


def test_create_seeker_adds_flocking_and_state():
    world = World()
    e = create_seeker(_monster(world))
    assert e.has(Seeker, Separation, Alignment, Cohesion)
    assert e.get(SteerDir) == SteerDir(0.0, 0.0)
    assert e.get(SteerAccel) == SteerAccel(1.0)


@pytest.mark.parametrize(
    "factory, tag",
    [
        (create_seeker, Seeker),
        (create_pursuer, Pursuer),
        (create_evader, Evader),
        (create_fleer, Fleer),
    ],
)
def test_factories_add_their_tag(factory, tag):
    world = World()
    e = factory(_monster(world))
    assert e.has(tag)
    others = {Seeker, Pursuer, Evader, Fleer} - {tag}
    assert not any(e.has(t) for t in others)


@pytest.mark.parametrize(
    "steer_type, tag",
    [
        (SteerType.SEEKER, Seeker),
        (SteerType.PURSUER, Pursuer),
        (SteerType.EVADER, Evader),
        (SteerType.FLEER, Fleer),
    ],
)
def test_create_steer_beh_dispatches(steer_type, tag):
    world = World()
    assert create_steer_beh(_monster(world), steer_type).has(tag)


def test_create_steer_beh_rejects_unknown_type():
    world = World()
    with pytest.raises(ValueError):
        create_steer_beh(_monster(world), 4)


def test_seek_from_rest_has_full_speed():
    force = seek_force(Vec2(0.0, 0.0), Vec2(0.0, 0.0), 10.0, Vec2(3.0, 4.0))
    assert math.isclose(length(force), 10.0)
    assert force.x > 0 and force.y > 0


def test_flee_is_opposite_of_seek_from_rest():
    pos, target = Vec2(1.0, 2.0), Vec2(7.0, -3.0)
    seek = seek_force(pos, Vec2(), 5.0, target)
    flee = flee_force(pos, Vec2(), 5.0, target)
    assert math.isclose(seek.x, -flee.x)
    assert math.isclose(seek.y, -flee.y)


def test_seek_subtracts_current_velocity():
    pos, target, vel = Vec2(0.0, 0.0), Vec2(10.0, 0.0), Vec2(2.0, 1.0)
    with_vel = seek_force(pos, vel, 5.0, target)
    at_rest = seek_force(pos, Vec2(), 5.0, target)
    assert with_vel == at_rest - vel


def test_pursue_static_target_equals_seek():
    pos, vel, target = Vec2(0.0, 0.0), Vec2(1.0, 0.0), Vec2(50.0, 20.0)
    assert pursue_force(pos, vel, 8.0, target, Vec2()) == seek_force(pos, vel, 8.0, target)


def test_pursue_leads_moving_target():
    pos, target = Vec2(0.0, 0.0), Vec2(100.0, 0.0)
    force = pursue_force(pos, Vec2(), 10.0, target, Vec2(0.0, 10.0))
    assert force.y > 0


def test_evade_static_target_equals_flee():
    pos, vel, target = Vec2(5.0, 5.0), Vec2(), Vec2(0.0, 0.0)
    evade = evade_force(pos, vel, 3.0, target, Vec2())
    flee = flee_force(pos, vel, 3.0, target)
    assert math.isclose(evade.x, flee.x)
    assert math.isclose(evade.y, flee.y)


def test_seeker_moves_towards_player():
    world = World()
    create_player(world, Vec2(0.0, 0.0), "swordsman_tex")
    seeker = create_seeker(_monster(world, 100.0, 0.0))

    update_steering(world, 0.1)
    assert seeker.get(Velocity) == Velocity(0.0, 0.0)
    assert seeker.get(SteerDir).x < 0

    update_steering(world, 0.1)
    vel = seeker.get(Velocity)
    assert vel.x < 0
    assert vel.y == 0.0


def test_velocity_is_truncated_to_move_speed():
    world = World()
    create_player(world, Vec2(0.0, 0.0), "swordsman_tex")
    seeker = create_seeker(_monster(world, 100.0, 0.0))
    speed = seeker.get(MoveSpeed).speed
    for _ in range(5):
        update_steering(world, 10.0)
        assert length(seeker.get(Velocity)) <= speed + 1e-9


def test_entities_without_steering_keep_velocity():
    world = World()
    create_player(world, Vec2(0.0, 0.0), "swordsman_tex")
    plain = _monster(world, 30.0, 0.0).set(Velocity(1.0, 2.0))
    update_steering(world, 1.0)
    assert plain.get(Velocity) == Velocity(1.0, 2.0)
    assert plain.get(Position) == Position(30.0, 0.0)


def test_steering_without_player_still_flocks():
    world = World()
    a = create_seeker(_monster(world, 0.0, 0.0))
    create_seeker(_monster(world, 200.0, 0.0))
    update_steering(world, 0.1)
    assert a.get(SteerDir).x > 0
    assert a.get(SteerDir).y == 0.0