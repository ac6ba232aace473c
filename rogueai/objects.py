"""Factories for the player and monster entities and their position components."""

from __future__ import annotations

from dataclasses import dataclass

from .components import (
    WHITE,
    Actions,
    Color,
    Hitpoints,
    MeleeDamage,
    MoveSpeed,
    NumActions,
    PlayerInput,
    Team,
)
from .vecmath import Vec2
from .world import Entity, World


@dataclass(frozen=True)
class Position(Vec2):
    """World position of an entity."""


@dataclass(frozen=True)
class Velocity(Vec2):
    """Velocity of an entity in world units per second."""


class TextureSource:
    """Relation from a drawable entity to the entity holding its texture."""


@dataclass
class IsPlayer:
    """Tag marking the player-controlled entity."""


@dataclass
class MonsterSpawner:
    """Countdown that spawns a monster every time_between_spawns seconds."""

    time_to_spawn: float
    time_between_spawns: float


def create_monster(world: World, pos: Vec2, color: Color, texture_src: str) -> Entity:
    """Create a hostile monster at pos drawn with the named texture."""
    texture = world.entity(texture_src)
    return (
        world.entity()
        .set(
            Position(pos.x, pos.y),
            Velocity(0.0, 0.0),
            MoveSpeed(100.0),
            Hitpoints(100.0),
            Actions.NOP,
            color,
            Team(1),
            NumActions(1, 0),
            MeleeDamage(20.0),
        )
        .add(TextureSource, texture)
    )


def create_player(
    world: World, pos: Vec2, texture_src: str, speed: float = 350.0
) -> Entity:
    """Create (or reset) the entity named "player" at pos."""
    texture = world.entity(texture_src)
    return (
        world.entity("player")
        .set(
            Position(pos.x, pos.y),
            Velocity(0.0, 0.0),
            MoveSpeed(speed),
            Hitpoints(100.0),
            Actions.NOP,
            Team(0),
            PlayerInput(),
            NumActions(2, 0),
            WHITE,
            MeleeDamage(50.0),
        )
        .add(IsPlayer)
        .add(TextureSource, texture)
    )