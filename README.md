# moonlander

You fly a lander over a wide moonscape that is generated for each game.
The terrain comes from layered one-dimensional Perlin noise, and flat
landing pads are placed at random along it. Behind it sits a generated
starfield with a galactic plane, a central bulge, two spiral arms, star
clusters and scattered background stars. Everything is drawn with pygame.

## Installing

```
pip install .
```

## Playing

```
moonlander
moonlander --assets-dir path/to/assets
```

The game reads `spaceship.bmp`, `spacestation.bmp` and `Arial.ttf` from the
assets directory. By default this is `assets`, relative to the current
directory. These files do not come with the package. Cyan pixels
(0, 255, 255) in the images are drawn as transparent. If the images or the
font cannot be loaded, the command logs the error and exits with status 1.

Controls:

| Key           | Action                                                  |
|---------------|---------------------------------------------------------|
| Left / Right  | Rotate the lander one degree per frame                  |
| Space (held)  | Build up thrust; it dies away again once released       |
| R             | Make a new world and respawn, also after a crash        |
| Close window  | Quit                                                    |

Gravity always pulls the lander down. Thrust pushes along the nose and goes
up to four times the pull of gravity. The lander stays inside the edges of
the world. Touching rock destroys it, and after that only R or closing the
window does anything. Touching a landing pad undoes the last move and stops
the lander.

The camera follows the lander and stops at the edges of the world. The
starfield scrolls with a small parallax. A display in the top right shows
the nose angle, position, velocity and thrust, and is updated every 500 ms.
The window title shows the frame rate. Progress messages are logged to
standard error.

## What it does not do

There is no score and no successful landing. Setting down on a pad only
stops the lander. There is no crash animation and no game-over screen; a
destroyed lander simply disappears until R is pressed.

## Using the pieces

None of the simulation needs a window:

- `moonlander.vector2d.Vector2D`: a mutable 2-D vector. It has
  `magnitude`, and `angle_degrees`, which is measured clockwise from
  screen-up (negative y). It also has `set_magnitude`, `rotate_to` and the
  arithmetic operators. A negative magnitude raises `ValueError`.
- `moonlander.perlin.PerlinNoise1D(seed)`: seeded noise with `noise(x)`,
  which is zero at every integer, and
  `octave_noise(x, octaves, persistence=0.5, frequency=1.0)`.
- `moonlander.terrain.TerrainGenerator(seed).generate_terrain(config, average_landing_pads)`:
  takes a `TerrainGenerationConfig` and returns a grid of rows indexed
  `[y][x]`. Each cell holds `TERRAIN_VACUUM`, `TERRAIN_ROCK` or
  `TERRAIN_LANDING_PAD` from `moonlander.constants`. `horizon_points(terrain)`
  splits the solid cells into horizon and foreground points, and
  `draw_terrain(surface, terrain)` paints them onto a pygame surface.
- `moonlander.starfield.StarfieldGenerator(seed)`: calling
  `generate_starfield(width, height, target_stars=2000)` returns at most
  `target_stars` `Star` records and keeps them in `stars`.
  `draw_starfield(surface)` paints them. A fixed seed gives the same
  sequence of starfields.
- `moonlander.spaceship.Spaceship`: handles rotation, thrust build-up and
  decay, and per-frame physics. It has `flight_stats()` and the bounding
  boxes `draw_bounds()` and `collision_bounds()`, which take their size from
  the texture's `width` and `height`. It also handles collisions with the
  world edges (`handle_boundary_collision`) and with a terrain grid
  (`handle_terrain_collision`).
- `moonlander.timer.Timer(interval_ms, clock)`: reports when an interval
  has passed on a millisecond clock.
- `moonlander.hud.format_float(value)`: formats a value with two decimals.
  `HeadsUpDisplay.lines` holds the text the display last rendered.

`moonlander.base_engine.BaseEngine` is the window and frame loop that the
game, `moonlander.game.LunarLanderEngine`, is built on.

## Running the tests

```
pip install ".[test]"
pytest
```