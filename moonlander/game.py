"""The lunar lander game: terrain, starfield, lander and heads-up display."""

from __future__ import annotations

import argparse
import logging
import random
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple

import pygame

from moonlander.base_engine import BaseEngine, EngineError
from moonlander.constants import (
    ALIGNMENT_SPEED,
    DISPLAY_TITLE,
    GRAVITY,
    MAX_THRUST,
    PERLIN_FREQUENCY,
    PERLIN_OCTAVES,
    PERLIN_PERSISTENCE,
    ROTATION_SPEED,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SPACESHIP_TEXTURE,
    SPACESTATION_TEXTURE,
    STARFIELD_PARALLAX_RATIO,
    TERRAIN_HEIGHT_VARIATION,
    TERRAIN_START_HEIGHT,
    THRUST_UNIT,
    WORLD_HEIGHT,
    WORLD_WIDTH,
)
from moonlander.hud import HeadsUpDisplay
from moonlander.spaceship import Spaceship
from moonlander.starfield import StarfieldGenerator
from moonlander.terrain import TerrainGenerationConfig, TerrainGenerator, draw_terrain
from moonlander.timer import Timer

logger = logging.getLogger(__name__)

TERRAIN_KEY = "terrain"
STARFIELD_KEY = "starfield"
STARFIELD_STAR_COUNT = 1500
HUD_UPDATE_INTERVAL_MS = 500
DEFAULT_ASSETS_DIR = "assets"

_SPACE_COLOUR = (0, 0, 0, 255)


class GameState(Enum):
    """What the game loop is doing this frame."""

    PLAYING = auto()
    DEATH = auto()


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if high < value:
        return high
    return value


def _random_seed() -> int:
    return random.SystemRandom().getrandbits(32)


def camera_offset(
    player_x: float,
    player_y: float,
    screen_width: int,
    screen_height: int,
    world_width: int,
    world_height: int,
) -> Tuple[float, float]:
    """World position of the screen's top-left corner.

    The camera centres on the player but never shows anything outside
    the world.
    """
    camera_x = player_x - screen_width // 2
    camera_y = player_y - screen_height // 2
    return (
        float(_clamp(camera_x, 0.0, float(world_width - screen_width))),
        float(_clamp(camera_y, 0.0, float(world_height - screen_height))),
    )


class LunarLanderEngine(BaseEngine):
    """Fly the lander over generated terrain; touching rock destroys it.

    ``R`` regenerates the world at any time.
    """

    def __init__(self, assets_dir: str = DEFAULT_ASSETS_DIR) -> None:
        super().__init__(SCREEN_HEIGHT, SCREEN_WIDTH, DISPLAY_TITLE, assets_dir)
        self.world_width = WORLD_WIDTH
        self.world_height = WORLD_HEIGHT
        self.terrain: List[List[int]] = []
        self.player = Spaceship()
        self.terrain_generator = TerrainGenerator(_random_seed())
        self.starfield_generator = StarfieldGenerator()
        self.hud = HeadsUpDisplay()
        self.state = GameState.PLAYING
        self._hud_update_timer = Timer(HUD_UPDATE_INTERVAL_MS)

    def load_media(self) -> None:
        """Load the lander and space station images."""
        self.textures.clear()
        self.load_texture(SPACESHIP_TEXTURE)
        self.load_texture(SPACESTATION_TEXTURE)

    def create(self) -> None:
        """Start a new game: fresh terrain, starfield, lander and display."""
        self.state = GameState.PLAYING
        self._generate_terrain()
        self._generate_background()
        self._spawn_player()
        self._create_heads_up_display()

    def update(self) -> None:
        """Handle input and advance the current state by one frame."""
        if self.state is GameState.PLAYING:
            self._update_playing()
        else:
            self._update_death()

    def render(self) -> None:
        """Draw the world as seen by a camera following the lander."""
        camera_x, camera_y = camera_offset(
            self.player.pos_x,
            self.player.pos_y,
            self.screen_width,
            self.screen_height,
            self.world_width,
            self.world_height,
        )
        terrain_screen_x = -int(camera_x)
        terrain_screen_y = -int(camera_y)
        player_screen_x = int(self.player.pos_x - camera_x)
        player_screen_y = int(self.player.pos_y - camera_y)

        self.screen.fill(_SPACE_COLOUR)

        self.textures[STARFIELD_KEY].render(
            int(terrain_screen_x * STARFIELD_PARALLAX_RATIO),
            int(terrain_screen_y * STARFIELD_PARALLAX_RATIO),
        )
        self.textures[TERRAIN_KEY].render(terrain_screen_x, terrain_screen_y)

        station_world_x = self.world_width / 2.0
        station_world_y = self.world_height * (1.0 - TERRAIN_START_HEIGHT)
        self.textures[SPACESTATION_TEXTURE].render(
            int(station_world_x - camera_x), int(station_world_y - camera_y)
        )
        self.player.render(player_screen_x, player_screen_y)
        self.hud.render()

    def _poll_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                self.create()

    def _update_playing(self) -> None:
        self._poll_events()
        if self.state is not GameState.PLAYING:
            return

        keys: Sequence[bool] = pygame.key.get_pressed()
        left = keys[pygame.K_LEFT]
        right = keys[pygame.K_RIGHT]
        if left:
            self.player.rotate(-ROTATION_SPEED)
        if right:
            self.player.rotate(ROTATION_SPEED)
        if not left and not right:
            self.player.align_vertical(ALIGNMENT_SPEED)

        if keys[pygame.K_SPACE]:
            self.player.thrust_increase()
        else:
            self.player.thrust_decay()

        self.player.update_physics()
        self.player.handle_boundary_collision(self.world_width, self.world_height)

        if self.player.handle_terrain_collision(self.terrain):
            self.player.destroy()
            self.state = GameState.DEATH

        if self._hud_update_timer.should_update():
            self.hud.update(self.player.flight_stats())

    def _update_death(self) -> None:
        self._poll_events()

    def _generate_terrain(self) -> None:
        config = TerrainGenerationConfig(
            world_width=self.world_width,
            world_height=self.world_height,
            height_variation=int(self.world_height * TERRAIN_HEIGHT_VARIATION),
            start_height=int(self.world_height * TERRAIN_START_HEIGHT),
            octaves=PERLIN_OCTAVES,
            persistence=PERLIN_PERSISTENCE,
            scale=PERLIN_FREQUENCY,
        )
        logger.info("Generating terrain")
        self.terrain_generator = TerrainGenerator(_random_seed())
        self.terrain = self.terrain_generator.generate_terrain(
            config, int(self.world_width / self.screen_width)
        )
        texture = self.create_target_texture(
            TERRAIN_KEY, len(self.terrain[0]), len(self.terrain)
        )
        draw_terrain(texture.surface, self.terrain)

    def _generate_background(self) -> None:
        width = int(self.screen_width * (1 + STARFIELD_PARALLAX_RATIO))
        height = int(self.screen_height * (1 + STARFIELD_PARALLAX_RATIO))
        logger.info("Generating starfield background")
        self.starfield_generator.generate_starfield(width, height, STARFIELD_STAR_COUNT)
        texture = self.create_target_texture(STARFIELD_KEY, width, height)
        self.starfield_generator.draw_starfield(texture.surface)

    def _spawn_player(self) -> None:
        logger.info("Spawning player")
        self.player = Spaceship(
            self.world_width // 2,
            self.world_height // 2,
            self.textures[SPACESHIP_TEXTURE],
            GRAVITY,
            THRUST_UNIT,
            MAX_THRUST,
        )

    def _create_heads_up_display(self) -> None:
        logger.info("Creating heads up display")
        self.hud = HeadsUpDisplay(
            self.screen_height, self.screen_width, self.screen, self.font
        )
        self.hud.update(self.player.flight_stats())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="moonlander", description="Lunar lander game.")
    parser.add_argument(
        "--assets-dir",
        default=DEFAULT_ASSETS_DIR,
        help="directory holding the images and font (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    game = LunarLanderEngine(args.assets_dir)
    try:
        return game.run()
    except EngineError as exc:
        logger.error("Failed to start: %s", exc)
        return 1