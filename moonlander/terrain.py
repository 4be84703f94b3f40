"""Procedural lunar terrain: a height map of rock with flat landing pads."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import pygame

from moonlander.constants import (
    MAX_LANDING_PAD_WIDTH,
    MIN_LANDING_PAD_WIDTH,
    TERRAIN_LANDING_PAD,
    TERRAIN_ROCK,
    TERRAIN_VACUUM,
)
from moonlander.perlin import PerlinNoise1D

logger = logging.getLogger(__name__)

Point = Tuple[int, int]
TerrainGrid = List[List[int]]

_FOREGROUND_COLOUR = (0, 0, 0, 255)
_HORIZON_COLOUR = (255, 255, 255, 255)
_TRANSPARENT = (0, 0, 0, 0)


@dataclass(frozen=True)
class TerrainGenerationConfig:
    """Dimensions and noise parameters for one terrain generation."""

    world_width: int
    world_height: int
    height_variation: int
    start_height: int
    octaves: int
    persistence: float
    scale: float


class TerrainGenerator:
    """Builds terrain grids from seeded Perlin noise and random landing pads."""

    def __init__(self, seed: int) -> None:
        self._noise = PerlinNoise1D(seed)
        self._rng = random.Random(seed)

    def generate_terrain(
        self, config: TerrainGenerationConfig, average_landing_pads: int
    ) -> TerrainGrid:
        """Return a grid indexed ``[y][x]`` of terrain cell values.

        Each column is filled from the bottom up. On average
        ``average_landing_pads`` flat pads are placed across the width; the
        noise coordinate pauses over a pad so the ground either side of it
        joins up smoothly.
        """
        probability = average_landing_pads / config.world_width
        terrain = [
            [TERRAIN_VACUUM] * config.world_width for _ in range(config.world_height)
        ]

        noise_x = 0
        terrain_x = 0
        terrain_height = config.start_height
        while terrain_x < config.world_width:
            if (
                self._should_add_landing_pad(probability)
                and terrain_x + MAX_LANDING_PAD_WIDTH < config.world_width
            ):
                terrain_x += self._add_landing_pad(terrain, terrain_height, terrain_x)
            else:
                noise_value = self._noise.octave_noise(
                    noise_x, config.octaves, config.persistence, config.scale
                )
                terrain_height = config.start_height + int(
                    noise_value * config.height_variation
                )
                _fill_column(terrain, terrain_height, terrain_x, TERRAIN_ROCK)
                terrain_x += 1
                noise_x += 1

        logger.info("World size x=%d y=%d", config.world_width, config.world_height)
        return terrain

    def _should_add_landing_pad(self, probability: float) -> bool:
        return self._rng.random() < probability

    def _add_landing_pad(self, terrain: TerrainGrid, height: int, x_pos: int) -> int:
        pad_width = self._rng.randint(MIN_LANDING_PAD_WIDTH, MAX_LANDING_PAD_WIDTH)
        for x in range(x_pos, x_pos + pad_width):
            _fill_column(terrain, height, x, TERRAIN_LANDING_PAD)
        return pad_width


def _fill_column(terrain: TerrainGrid, height: int, x_pos: int, value: int) -> None:
    """Fill the bottom ``height - 1`` cells of column ``x_pos`` with ``value``."""
    world_height = len(terrain)
    for row in terrain[max(world_height - height + 1, 0):]:
        row[x_pos] = value


def horizon_points(terrain: Sequence[Sequence[int]]) -> Tuple[List[Point], List[Point]]:
    """Split the solid cells of ``terrain`` into horizon and foreground points.

    The topmost solid cell of each column is on the horizon; landing pads
    get an extra horizon pixel below it on every other column. Every other
    solid cell is foreground. Points are ``(x, y)`` ordered column by column.
    """
    horizon: List[Point] = []
    foreground: List[Point] = []
    height = len(terrain)
    for x, column in enumerate(zip(*terrain)):
        reached_foreground = False
        for y, cell in enumerate(column):
            if cell not in (TERRAIN_ROCK, TERRAIN_LANDING_PAD):
                continue
            if reached_foreground:
                foreground.append((x, y))
                continue
            horizon.append((x, y))
            reached_foreground = True
            if cell == TERRAIN_LANDING_PAD and y + 1 < height and x % 2 == 0:
                horizon.append((x, y + 1))
    return horizon, foreground


def draw_terrain(surface: pygame.Surface, terrain: Sequence[Sequence[int]]) -> None:
    """Paint ``terrain`` onto ``surface``: transparent sky, black ground, white horizon."""
    horizon, foreground = horizon_points(terrain)
    surface.fill(_TRANSPARENT)
    for point in foreground:
        surface.set_at(point, _FOREGROUND_COLOUR)
    for point in horizon:
        surface.set_at(point, _HORIZON_COLOUR)