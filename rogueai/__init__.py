"""Roguelike game AI: dungeon generation, pathfinding, steering and a headless simulation."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "components",
    "dungeon_gen",
    "dungeon_utils",
    "game",
    "objects",
    "pathfinder",
    "steering",
    "vecmath",
    "world",
]