"""The shoot-'em-up world: dungeon setup, player control, spawning and the camera."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .components import (
    BLUE,
    FLOOR,
    GREEN,
    RED,
    WALL,
    WHITE,
    Color,
    DungeonData,
    MoveSpeed,
    PlayerInput,
)
from .dungeon_utils import find_walkable_tile
from .objects import (
    IsPlayer,
    MonsterSpawner,
    Position,
    TextureSource,
    Velocity,
    create_monster,
    create_player,
)
from .pathfinder import prebuild_map
from .steering import SteerType, create_steer_beh, update_steering
from .vecmath import Vec2, normalize
from .world import Entity, World

TILE_SIZE = 64.0

_SPAWN_COLORS: Dict[SteerType, Color] = {
    SteerType.SEEKER: WHITE,
    SteerType.PURSUER: RED,
    SteerType.EVADER: BLUE,
    SteerType.FLEER: GREEN,
}
_SPAWN_DISTANCES: Dict[SteerType, float] = {
    SteerType.SEEKER: 800.0,
    SteerType.PURSUER: 800.0,
    SteerType.EVADER: 300.0,
    SteerType.FLEER: 300.0,
}
_ANGLE_STEPS = 1 << 16
_CAMERA_FOLLOW = 0.1
_ZOOM_STEP = 0.1
_OPEN_FIELD_PLAYER_SPEED = 150.0
_OPEN_FIELD_SPAWN_INTERVAL = 0.1


@dataclass
class Camera:
    """A 2D camera following a target point."""

    target: Vec2 = field(default_factory=Vec2)
    offset: Vec2 = field(default_factory=Vec2)
    rotation: float = 0.0
    zoom: float = 1.0


@dataclass
class BackgroundTile:
    """Tag for map tiles drawn beneath every other sprite."""


def init_dungeon(world: World, dungeon: DungeonData) -> Entity:
    """Create the "dungeon" entity with its map and portals, and one tile entity per cell."""
    wall_tex = world.entity("wall_tex")
    floor_tex = world.entity("floor_tex")
    data = DungeonData(dungeon.width, dungeon.height, list(dungeon.tiles))
    holder = world.entity("dungeon").set(data)

    for idx, tile in enumerate(data.tiles):
        y, x = divmod(idx, data.width)
        tile_entity = (
            world.entity()
            .add(BackgroundTile)
            .set(Position(x * TILE_SIZE, y * TILE_SIZE), WHITE)
        )
        if tile == WALL:
            tile_entity.add(TextureSource, wall_tex)
        elif tile == FLOOR:
            tile_entity.add(TextureSource, floor_tex)

    holder.set(prebuild_map(data))
    return holder


def init_shoot_em_up(world: World, rng: Optional[random.Random] = None) -> Entity:
    """Create the sprite sources and the player.

    With a dungeon in the world the player starts on a random floor tile; without
    one the player starts at the origin of an open field with a monster spawner.
    """
    rng = rng or random.Random()
    world.entity("swordsman_tex")
    world.entity("minotaur_tex")

    dungeons = [dd for _, dd in world.query(DungeonData)]
    if dungeons:
        tile = find_walkable_tile(dungeons[0], rng)
        return create_player(world, tile * TILE_SIZE, "swordsman_tex")

    player = create_player(
        world, Vec2(0.0, 0.0), "swordsman_tex", speed=_OPEN_FIELD_PLAYER_SPEED
    )
    world.entity().set(MonsterSpawner(0.0, _OPEN_FIELD_SPAWN_INTERVAL))
    return player


def update_player_velocity(world: World, player_input: PlayerInput) -> None:
    """Point each player's velocity along the pressed directions at full speed."""
    direction = Vec2(
        (-1.0 if player_input.left else 0.0) + (1.0 if player_input.right else 0.0),
        (-1.0 if player_input.up else 0.0) + (1.0 if player_input.down else 0.0),
    )
    for ent, _vel, ms, _ in world.query(Velocity, MoveSpeed, IsPlayer):
        vel = normalize(direction) * ms.speed
        ent.set(Velocity(vel.x, vel.y), player_input)


def apply_velocity(world: World, dt: float) -> None:
    """Move every entity with a velocity by velocity * dt."""
    for ent, pos, vel in world.query(Position, Velocity):
        moved = pos + vel * dt
        ent.set(Position(moved.x, moved.y))


def update_spawners(
    world: World, dt: float, rng: Optional[random.Random] = None
) -> List[Entity]:
    """Count spawners down and spawn steering monsters around the player; return them."""
    rng = rng or random.Random()
    spawned: List[Entity] = []
    players = [pp for _, pp, _ in world.query(Position, IsPlayer)]
    for _, spawner in world.query(MonsterSpawner):
        if spawner.time_between_spawns <= 0.0:
            raise ValueError("time_between_spawns must be positive")
        for pp in players:
            spawner.time_to_spawn -= dt
            while spawner.time_to_spawn < 0.0:
                steer_type = SteerType(rng.randint(0, len(SteerType) - 1))
                distance = _SPAWN_DISTANCES[steer_type]
                angle = rng.randint(0, _ANGLE_STEPS) / _ANGLE_STEPS * math.pi * 2.0
                pos = Vec2(
                    pp.x + math.cos(angle) * distance,
                    pp.y + math.sin(angle) * distance,
                )
                monster = create_monster(
                    world, pos, _SPAWN_COLORS[steer_type], "minotaur_tex"
                )
                spawned.append(create_steer_beh(monster, steer_type))
                spawner.time_to_spawn += spawner.time_between_spawns
    return spawned


def update_camera(camera: Camera, world: World, wheel: float = 0.0) -> Camera:
    """Ease the camera towards the player and zoom by the mouse wheel amount."""
    for _, pos, _ in world.query(Position, IsPlayer):
        camera.target = camera.target + (pos - camera.target) * _CAMERA_FOLLOW
        camera.zoom *= 1.0 - wheel * _ZOOM_STEP
    return camera


def step(
    world: World,
    dt: float,
    player_input: Optional[PlayerInput] = None,
    rng: Optional[random.Random] = None,
) -> None:
    """Advance the simulation by one frame of dt seconds."""
    update_player_velocity(world, player_input or PlayerInput())
    apply_velocity(world, dt)
    update_spawners(world, dt, rng)
    update_steering(world, dt)