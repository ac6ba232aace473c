"""Steering behaviours: seek, flee, pursue, evade and flocking forces."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, List, Tuple

from .components import Hitpoints, MoveSpeed
from .objects import IsPlayer, Position, Velocity
from .vecmath import Vec2, dot, length, length_sq, normalize, safeinv, truncate
from .world import Entity, World

_MAX_PREDICT_TIME = 4.0
_PURSUE_PREDICT_TIME = 4.0
_EVADE_INTERCEPT_MULT = 0.9
_SEPARATION_DIST = 70.0
_ALIGNMENT_DIST = 100.0
_ALIGNMENT_MULT = 0.8
_COHESION_DIST = 500.0
_COHESION_MULT = 100.0


class SteerType(IntEnum):
    SEEKER = 0
    PURSUER = 1
    EVADER = 2
    FLEER = 3


@dataclass(frozen=True)
class SteerDir(Vec2):
    """Accumulated steering force for the current frame."""


@dataclass
class SteerAccel:
    accel: float = 1.0


@dataclass
class Seeker:
    pass


@dataclass
class Pursuer:
    pass


@dataclass
class Evader:
    pass


@dataclass
class Fleer:
    pass


@dataclass
class Separation:
    pass


@dataclass
class Alignment:
    pass


@dataclass
class Cohesion:
    pass


def _create_steerer(entity: Entity) -> Entity:
    return entity.set(SteerDir(0.0, 0.0), SteerAccel(1.0)).add(
        Separation, Alignment, Cohesion
    )


def create_seeker(entity: Entity) -> Entity:
    return _create_steerer(entity).add(Seeker)


def create_pursuer(entity: Entity) -> Entity:
    return _create_steerer(entity).add(Pursuer)


def create_evader(entity: Entity) -> Entity:
    return _create_steerer(entity).add(Evader)


def create_fleer(entity: Entity) -> Entity:
    return _create_steerer(entity).add(Fleer)


_CREATORS: Dict[SteerType, Callable[[Entity], Entity]] = {
    SteerType.SEEKER: create_seeker,
    SteerType.PURSUER: create_pursuer,
    SteerType.EVADER: create_evader,
    SteerType.FLEER: create_fleer,
}


def create_steer_beh(entity: Entity, steer_type: SteerType) -> Entity:
    """Give the entity the steering behaviour of the given type."""
    return _CREATORS[SteerType(steer_type)](entity)


def seek_force(pos: Vec2, vel: Vec2, speed: float, target: Vec2) -> Vec2:
    """Force turning the velocity straight towards target at full speed."""
    return normalize(target - pos) * speed - vel


def flee_force(pos: Vec2, vel: Vec2, speed: float, target: Vec2) -> Vec2:
    """Force turning the velocity straight away from target at full speed."""
    return normalize(pos - target) * speed - vel


def pursue_force(
    pos: Vec2, vel: Vec2, speed: float, target: Vec2, target_vel: Vec2
) -> Vec2:
    """Seek the point the target will reach after a fixed prediction time."""
    predicted = target + target_vel * _PURSUE_PREDICT_TIME
    return seek_force(pos, vel, speed, predicted)


def evade_force(
    pos: Vec2, vel: Vec2, speed: float, target: Vec2, target_vel: Vec2
) -> Vec2:
    """Flee from where the target is predicted to be when it could intercept."""
    dpos = pos - target
    dvel = vel - target_vel
    closing = dot(dvel, dpos) * safeinv(length(dpos))
    intercept_time = closing * safeinv(length(dvel))
    predict_time = max(min(_MAX_PREDICT_TIME, intercept_time * _EVADE_INTERCEPT_MULT), 1.0)
    predicted = target + target_vel * predict_time
    return flee_force(pos, vel, speed, predicted)


def _add_steer(entity: Entity, force: Vec2) -> None:
    sd = entity.get(SteerDir)
    total = sd + force
    entity.set(SteerDir(total.x, total.y))


def update_steering(world: World, dt: float) -> None:
    """Run one frame of steering: apply last frame's forces, then compute new ones."""
    for ent, vel, ms, sd, sa in world.query(Velocity, MoveSpeed, SteerDir, SteerAccel):
        new_vel = truncate(vel + truncate(sd, ms.speed) * dt * sa.accel, ms.speed)
        ent.set(Velocity(new_vel.x, new_vel.y))

    for ent, _ in world.query(SteerDir):
        ent.set(SteerDir(0.0, 0.0))

    players: List[Tuple[Vec2, Vec2]] = [
        (pp, pvel) for _, pp, pvel, _ in world.query(Position, Velocity, IsPlayer)
    ]

    def each_agent(tag: type):
        for ent, ms, vel, p, _ in world.query(MoveSpeed, Velocity, Position, tag):
            if ent.has(SteerDir):
                yield ent, ms.speed, vel, p

    for ent, speed, vel, p in each_agent(Seeker):
        for pp, _ in players:
            _add_steer(ent, seek_force(p, vel, speed, pp))

    for ent, speed, vel, p in each_agent(Fleer):
        for pp, _ in players:
            _add_steer(ent, flee_force(p, vel, speed, pp))

    for ent, speed, vel, p in each_agent(Pursuer):
        for pp, pvel in players:
            _add_steer(ent, pursue_force(p, vel, speed, pp, pvel))

    for ent, speed, vel, p in each_agent(Evader):
        for pp, pvel in players:
            _add_steer(ent, evade_force(p, vel, speed, pp, pvel))

    sep_sq = _SEPARATION_DIST * _SEPARATION_DIST
    for ent, speed, vel, p in each_agent(Separation):
        for other, op, _ in world.query(Position, Hitpoints):
            if other is ent:
                continue
            d_sq = length_sq(op - p)
            if d_sq > sep_sq:
                continue
            _add_steer(ent, (p - op) * safeinv(d_sq) * speed * _SEPARATION_DIST - vel)

    align_sq = _ALIGNMENT_DIST * _ALIGNMENT_DIST
    for ent, _speed, _vel, p in each_agent(Alignment):
        for other, op, ovel in world.query(Position, Velocity):
            if other is ent:
                continue
            if length_sq(op - p) > align_sq:
                continue
            _add_steer(ent, ovel * _ALIGNMENT_MULT)

    coh_sq = _COHESION_DIST * _COHESION_DIST
    for ent, _speed, vel, p in each_agent(Cohesion):
        total = Vec2(0.0, 0.0)
        neighbours = 0
        for other, op, _ in world.query(Position, Hitpoints):
            if other is ent:
                continue
            if length_sq(op - p) > coh_sq:
                continue
            neighbours += 1
            total = total + op
        avg = total * safeinv(float(neighbours))
        _add_steer(ent, normalize(avg - p) * _COHESION_MULT - vel)