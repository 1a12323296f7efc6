# Missile Commander

A small missile-defence arcade game. Enemy missiles fall from the top of
the screen towards your city. Click anywhere to launch a defensive missile
from your battery near the lower-left corner. When it reaches the spot you
clicked, it bursts into an explosion that grows to a radius of 20 pixels,
shrinks again and then disappears. Any missile that flies into an explosion
is destroyed.

Each enemy missile that strikes a building knocks that building down. The
game ends, and the window closes, when no buildings are left standing.

## Installing

```
pip install .
```

The game draws its window with pygame, which is installed along with it.

## Playing

```
missile-commander
```

- **Left click**: fire a missile at the cursor position.
- Close the window to quit.

Options:

- `--width` — window width in pixels (default 800)
- `--height` — window height in pixels (default 450)
- `--fps` — target frames per second (default 60)

A new enemy missile appears every 120 frames (two seconds at 60 frames per
second). It starts from a random point along the top edge and heads for a
random point on the ground. The current frame rate is shown in the top-left
corner.

## Using the pieces

The game logic does not depend on a display and can be driven directly.
`World` takes an optional random source: a callable `rand(low, high)` that
returns an integer in the inclusive range.

```python
import random

from missile_commander.geometry import Vector2
from missile_commander.world import World

world = World(800, 450, random.Random(1).randint)
world.step(Vector2(400.0, 200.0))  # a frame with a click at (400, 200)
for _ in range(120):
    world.step(None)                 # frames without a click
print(len(world.missiles), len(world.buildings), world.over)
```

`World.step` returns `False` once every building has been destroyed.

- `missile_commander.geometry` holds `Vector2`, `Color`, the colour
  constants and the helpers used for movement and hit tests (`move_towards`,
  `vectors_equal`, `clamp`, `point_in_rect`, `point_in_circle`).
- `missile_commander.entities` holds the game objects: `Missile`,
  `Explosion`, `Rectangle2D` and their bases `Line2D` and `Circle2D`.
- `missile_commander.world` holds the per-frame rules: `update_missiles`,
  `update_explosions`, `apply_collisions`, building placement
  (`place_buildings`, `setup_big_buildings`, `setup_small_buildings`),
  missile creation (`make_player_missile`, `make_enemy_missile`) and the
  `World` class that ties them together.
- `missile_commander.rng` provides `get(low, high)`, a random integer from a
  generator seeded from the clock and the operating system.
- `missile_commander.app` opens the window, runs the frame loop (`main`) and
  renders a `World` onto a pygame surface (`draw`).

## What it does not do

There is no score, no level progression, no sound and no limit on how many
missiles you may fire. The game has no pause or restart; when the city is
gone the window simply closes.

## Running the tests

```
pip install ".[test]"
pytest
```