"""Game-wide settings for the lunar lander."""

# Screen/viewport dimensions (what the player sees)
SCREEN_WIDTH = 1350
SCREEN_HEIGHT = 900
DISPLAY_TITLE = "Lunar Lander"

# World dimensions (the actual game world size)
WORLD_WIDTH = SCREEN_WIDTH * 10
WORLD_HEIGHT = int(SCREEN_HEIGHT * 1.5)
STARFIELD_PARALLAX_RATIO = 1.0 / 50.0

# Flight parameters
ROTATION_SPEED = 1.0
ALIGNMENT_SPEED = 0.0
GRAVITY = 0.01
MAX_THRUST = 4 * GRAVITY
THRUST_UNIT = 0.1 * MAX_THRUST

# Terrain generation
TERRAIN_START_HEIGHT = 0.35  # fraction of WORLD_HEIGHT where terrain starts
TERRAIN_HEIGHT_VARIATION = 0.35  # fraction of WORLD_HEIGHT used for relief
PERLIN_OCTAVES = 4
PERLIN_PERSISTENCE = 0.5
PERLIN_FREQUENCY = 0.0025

# Terrain cell values
TERRAIN_VACUUM = 0
TERRAIN_ROCK = 1
TERRAIN_LANDING_PAD = 2

# Landing pads
MIN_LANDING_PAD_WIDTH = 50
MAX_LANDING_PAD_WIDTH = 100

# Texture asset names
SPACESHIP_TEXTURE = "spaceship.bmp"
SPACESTATION_TEXTURE = "spacestation.bmp"