"""Command-line dungeon generator printing the map as text."""

from __future__ import annotations

import argparse
import random
from typing import Callable, Dict, List, Optional

from .components import DungeonData
from .dungeon_gen import (
    gen_cellular_dungeon,
    gen_clamped_drunk_dungeon,
    gen_drunk_dungeon,
    gen_inv_dungeon,
    gen_inv_room_dungeon,
    run_cellular,
)

_Generator = Callable[[int, int, random.Random], DungeonData]

_GENERATORS: Dict[str, _Generator] = {
    "drunk": lambda w, h, rng: gen_drunk_dungeon(w, h, 1, 1000, rng),
    "clamped": lambda w, h, rng: gen_clamped_drunk_dungeon(w, h, rng),
    "inv": lambda w, h, rng: gen_inv_dungeon(w, h, 3000, 3, 20, rng),
    "cellular": lambda w, h, rng: gen_cellular_dungeon(w, h, 0.45, 10, rng),
    "room": lambda w, h, rng: gen_inv_room_dungeon(w, h, 200, 3, 20, rng),
}

ALGORITHMS = tuple(_GENERATORS)


def generate(
    algorithm: str, width: int, height: int, rng: Optional[random.Random] = None
) -> DungeonData:
    """Generate a dungeon with the named algorithm and its standard settings."""
    try:
        generator = _GENERATORS[algorithm]
    except KeyError:
        raise ValueError(
            f"unknown algorithm {algorithm!r}; choose from {', '.join(ALGORITHMS)}"
        ) from None
    return generator(width, height, rng or random.Random())


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a dungeon and print it.")
    parser.add_argument("algorithm", nargs="?", default="drunk", choices=ALGORITHMS)
    parser.add_argument("--width", type=int, default=130)
    parser.add_argument("--height", type=int, default=130)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--smooth", type=int, default=0, help="extra cellular smoothing passes"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)
    rng = random.Random(args.seed)
    try:
        dungeon = generate(args.algorithm, args.width, args.height, rng)
    except ValueError as exc:
        _parser().error(str(exc))
    if args.smooth > 0:
        run_cellular(dungeon, args.smooth)
    print(dungeon.render())
    return 0