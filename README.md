# quadsandbox

A collection of small, self-contained simulation models for games and
experiments. Each module holds the state and the rules of one model as plain
Python objects; you step them forward yourself and draw them however you like.

The package needs nothing beyond the standard library and supports Python 3.11
and later.

## Modules

| Module | What it models |
| --- | --- |
| `quadsandbox.transnet` | `Node`, `Edge`, `Graph` and `GraphPos`: a network of straight edges and positions that move along a route of edge ids |
| `quadsandbox.fluid` | `UniverseBuilder` and `Universe`: a grid of densities and velocities with Gauss–Seidel diffusion; `add_particles` injects density around a cell |
| `quadsandbox.world_map` | `Tile` and `WorldMap`: a grid of walkable and blocked tiles, built from text or from a list of flags |
| `quadsandbox.pathfinding` | `find_path`: A* search over a `WorldMap` |
| `quadsandbox.rts` | `Unit` and `Universe`: units that step towards a destination, with a planned path |
| `quadsandbox.life` | `Cell`, `Universe`, `SimParams`, `load_params`: Conway's Game of Life on a wrapping grid, parameters read from TOML |
| `quadsandbox.balls` | `Ball` and `Universe`: balls bouncing inside a box; `speed_color_index` |
| `quadsandbox.clock` | `GameTime` and `TimeSpeed`: game time that can be paused or sped up |
| `quadsandbox.flappy` | `State`, `Player`, `Obstacle`, `GameMode`: Flappy Dragon game state and scoring |
| `quadsandbox.keymap` | `Action`, `Key`, `Input`: which keys trigger which actions |
| `quadsandbox.glider` | `Glider` and `FlyingField`: a glider flying over a triangle of turnpoints, plus panel text helpers |
| `quadsandbox.viewport` | `MapView` (pan and zoom with limits) and `CameraView` (camera target and zoom) |
| `quadsandbox.railroads` | `TileMap`, `Track`, `World`, `Train`: track pieces laid on tiles; `init_world` |
| `quadsandbox.trains` | `World` and `Train`: trains following schedules over a `transnet.Graph`; `init_world` |
| `quadsandbox.sprites` | `Frames`, `FrameSeq`, `Sprite`, `GridFrames`, `Rect`: which area of a sprite sheet to show |
| `quadsandbox.inventory` | `Data`, `Slot` and the commands `Fit`, `Unfit`, `Refit` for moving items between slots |

## Examples

A map from text and a path across it. Spaces are walkable, every other
character is blocked, and anything outside the map counts as blocked:

```python
from quadsandbox.world_map import WorldMap
from quadsandbox.pathfinding import find_path

world_map = WorldMap.from_string("""
    ##########
    #        #
    #  ##    #
    #        #
    ##########
""")

print(world_map.width, world_map.height)   # 10 5
print(world_map.at(0, 0).is_blocked)       # True
print(world_map.at(1, 1).is_blocked)       # False

path = find_path(world_map, (1, 1), (8, 3))
print(path[0], path[-1])                   # (1, 1) (8, 3)
```

`find_path` returns an empty list when the goal cannot be reached.

A unit sent across the map:

```python
from quadsandbox.rts import Universe

universe = Universe(world_map)
universe.add_unit(1, 1)        # placed at the cell centre (1.5, 1.5)
universe.move_to(8, 3)         # plans universe.path and sets the destination
for _ in range(10):
    universe.tick()            # each tick moves 0.1 towards the destination
```

A fluid grid built step by step, then left to diffuse:

```python
from quadsandbox.fluid import UniverseBuilder, Vec2d, add_particles

universe = (
    UniverseBuilder(20, 20)
    .with_velocity(Vec2d(0.8, 0.0))
    .with_density(0.0)
    .with_diffusion_rate(0.001)
    .build()
)
add_particles(universe, 0.5, 10, 10)
universe.diffuse(0.016)
print(universe.density_at(10, 10))
```

Density in a cell saturates at 1, and cells outside the grid read as 0.

A blinker in the Game of Life:

```python
from quadsandbox.life import Cell, Universe

life = Universe(5, 5)
for col in (1, 2, 3):
    life.set_cell(2, col, Cell.ALIVE)
life.tick()
print([life.cell_at(row, 2) is Cell.ALIVE for row in (1, 2, 3)])   # [True, True, True]
print(life)                                                        # ◻ for dead, ◼ for alive
```

`load_params(path)` reads `width`, `height` and `prob` from a TOML file and
raises `ValueError` when one is missing or has the wrong type;
`Universe.random(width, height, prob, rng)` makes a cell alive when a random
draw exceeds `prob`.

Game time that advances with frame time:

```python
from quadsandbox.clock import GameTime, TimeSpeed

time = GameTime()
time.tick(3725.0)
print(time)                    # 1:02:05
time.speed = TimeSpeed.PAUSE
time.tick(10.0)
print(time)                    # 1:02:05
```

Trains on a track network:

```python
from quadsandbox.trains import init_world

world = init_world()
world.update(0.5)
for location in world.train_locations():
    print(location.x, location.y)
```

Actions resolved against the keys held down:

```python
from quadsandbox.keymap import Action, Input, Key

keys = Input()
print(keys.is_action_pressed(Action.QUIT, {Key.ESCAPE}))   # True
print(keys.is_action_pressed(Action.LEFT, {Key.D}))        # False
```

Fitting items into slots (the default slots have ids 1 to 7):

```python
from quadsandbox.inventory import Data, Fit, Refit

data = Data()
data.apply(Fit(target_slot=1, item="sword"))
data.apply(Refit(target_slot=2, origin_slot=1))
print(data.item_in(1), data.item_in(2))   # None sword
```

## What the package does not do

quadsandbox has no window, no drawing, no sound and no commands to run. It
does not read the keyboard or mouse: `keymap.Input` and `flappy.State.tick`
take the pressed keys as arguments. It loads no images or fonts: `sprites`
works out rectangles on a sheet of a size you give it. It does not generate
maps; build a `WorldMap` from text or from a list of blocked flags. The fluid
model diffuses density but does not move it along the velocity field.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
directory.