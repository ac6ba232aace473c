# rogueai

Building blocks for roguelike game AI in plain Python, with no runtime
dependencies.

- **Dungeon generation** (`rogueai.dungeon_gen`):
  - `gen_drunk_dungeon(w, h, num_iter, max_excavations, rng)`: drunkard's
    walks that wrap around the map edges, each start joined to its nearest
    later start by a corridor.
  - `gen_clamped_drunk_dungeon(w, h, rng)`: 48 walks of 50 tiles each, kept
    off the border. Each start is joined to its closest later start and to
    the one that was closest before it.
  - `gen_inv_dungeon(w, h, max_excavations, init_sz, max_steps, rng)`: grows
    a cave outward from a square starting room.
  - `gen_inv_room_dungeon(...)`: the same growth, stamping 5x5 room patterns.
  - `gen_cellular_dungeon(w, h, fillrate, num_iter, rng)` and
    `run_cellular(dungeon, num_iter)`: random fill, then in-place
    cellular-automaton smoothing.

  Arguments that cannot fit the map raise `ValueError`.
- **Map data** (`rogueai.components`): `DungeonData` keeps the tiles row by
  row, walls as `#` (`WALL`) and floor as a space (`FLOOR`). It has
  `tile(x, y)`, `rows()` and `render()`. The module also holds the plain
  component dataclasses (`MoveSpeed`, `Hitpoints`, `Team`, `Color`, ...) and
  the `Actions` enum.
- **Dungeon queries** (`rogueai.dungeon_utils`): `walkable_tiles`,
  `find_walkable_tile` (raises `ValueError` on a map with no floor) and
  `is_tile_walkable`.
- **Pathfinding** (`rogueai.pathfinder`):
  - `find_path_a_star` runs 4-connected A* and can be limited to a box.
  - `prebuild_map(dungeon, split_tiles=10)` splits the map into square
    chunks. It finds the open spans (`PathPortal`) across chunk borders and
    links the portals of each chunk with their path lengths
    (`PortalConnection`). The result is a `DungeonPortals`.
- **Vectors** (`rogueai.vecmath`): `Vec2` and `IVec2`, plus `length`,
  `normalize`, `truncate`, `dot`, `dist` and related helpers.
- **Entity-component world** (`rogueai.world`): `World` and `Entity`. You
  can set components by type, add tags and `(relation, target)` pairs, look
  entities up by name and query by component types.
- **Objects** (`rogueai.objects`): `create_player`, `create_monster`,
  `Position`, `Velocity`, `MonsterSpawner`.
- **Steering** (`rogueai.steering`):
  - Pure force functions: `seek_force`, `flee_force`, `pursue_force` and
    `evade_force`.
  - `create_steer_beh` with a `SteerType` turns an entity into a seeker,
    pursuer, evader or fleer. Each of these also flocks by separation,
    alignment and cohesion.
  - `update_steering(world, dt)` runs one frame of steering.
- **Simulation** (`rogueai.game`):
  - `init_dungeon` adds the map, one tile entity per cell and the portal
    data to the world.
  - `init_shoot_em_up` places the player. With a dungeon in the world the
    player starts on a random floor tile. Without one the player starts at
    the origin, and a monster spawner is added.
  - `step(world, dt, player_input, rng)` moves the player, applies
    velocities, spawns monsters and runs steering.
  - `update_camera` eases a `Camera` towards the player.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `rogueai` command generates a dungeon and prints it as text:

```
rogueai [drunk|clamped|inv|cellular|room] [--width N] [--height N] [--seed N] [--smooth N]
```

- **Defaults:** `drunk` on a 130x130 map.
- **`--seed`:** makes the output repeatable.
- **`--smooth`:** runs that many extra cellular passes over the result.

Each algorithm uses fixed settings:

| Algorithm  | Settings                                                  |
|------------|-----------------------------------------------------------|
| `drunk`    | one walk of 1000 tiles                                    |
| `clamped`  | 48 walks of 50 tiles                                      |
| `inv`      | 3000 excavations, starting room size 3, 20 steps per walker |
| `cellular` | fill rate 0.45, 10 passes                                 |
| `room`     | 200 stamps, starting room size 3, 20 steps per walker     |

Sizes too small for an algorithm are reported as a usage error.

## Library use

```python
import random

from rogueai.dungeon_gen import gen_cellular_dungeon
from rogueai.dungeon_utils import find_walkable_tile
from rogueai.pathfinder import prebuild_map

rng = random.Random(42)
dungeon = gen_cellular_dungeon(100, 100, 0.45, 10, rng)
print(dungeon.render())

start = find_walkable_tile(dungeon, rng)
portals = prebuild_map(dungeon, 10)
```

To run the simulation:

```python
import random

from rogueai.components import PlayerInput
from rogueai.dungeon_gen import gen_drunk_dungeon
from rogueai.game import init_dungeon, init_shoot_em_up, step
from rogueai.world import World

rng = random.Random(1)
world = World()
init_dungeon(world, gen_drunk_dungeon(100, 100, 48, 50, rng))
init_shoot_em_up(world, rng)
for _ in range(60):
    step(world, 1 / 60, PlayerInput(right=True), rng)
```

Every function that uses randomness takes an optional `random.Random`, so a
fixed seed gives the same result each time.

## What it does not do

The simulation runs headless. There is no window, no drawing, no keyboard or
mouse handling and no image loading. Texture entities such as
`"swordsman_tex"` are only named entities that sprites point to. Player
input is passed in as a `PlayerInput`, and the mouse-wheel zoom is passed to
`update_camera` as a number. The command line prints a generated map; it
does not display it or let you play it.