"""Procedural starfield shaped loosely like a view along a galactic plane."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

import pygame

from moonlander.perlin import PerlinNoise1D

logger = logging.getLogger(__name__)

_TRANSPARENT = (0, 0, 0, 0)
_BLOOM_THRESHOLD = 200


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass(frozen=True)
class Star:
    """A single star: pixel position, brightness (100-255) and size."""

    x: int
    y: int
    brightness: int
    size: float


class StarfieldGenerator:
    """Scatters stars among a galactic plane, centre, arms, clusters and background.

    Each call to :meth:`generate_starfield` draws a fresh generation seed
    from the generator's own seed source, so a fixed ``seed`` gives a
    reproducible sequence of starfields.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = random.SystemRandom().getrandbits(32)
        self._seeds = random.Random(seed)
        self._rng = random.Random(seed)
        self._large_scale_noise = PerlinNoise1D(seed)
        self._medium_scale_noise = PerlinNoise1D(seed + 1)
        self._small_scale_noise = PerlinNoise1D(seed + 2)
        self._variation_noise = PerlinNoise1D(seed + 3)
        self._width = 0
        self._height = 0
        self._center_x = 0
        self._center_y = 0
        self._plane_y = 0
        self._stars: List[Star] = []

    @property
    def stars(self) -> Tuple[Star, ...]:
        """The stars of the most recent generation."""
        return tuple(self._stars)

    def generate_starfield(
        self, width: int, height: int, target_stars: int = 2000
    ) -> Tuple[Star, ...]:
        """Replace the stars with a new field of at most ``target_stars``."""
        seed = self._seeds.getrandbits(32)
        self._large_scale_noise = PerlinNoise1D(seed)
        self._medium_scale_noise = PerlinNoise1D(seed + 1)
        self._small_scale_noise = PerlinNoise1D(seed + 2)
        self._variation_noise = PerlinNoise1D(seed + 3)
        self._rng.seed(seed)

        self._width = width
        self._height = height
        self._center_x = int(width * 0.3)
        self._center_y = int(height * 0.35)
        self._plane_y = int(height * 0.45)
        self._stars = []

        plane_stars = int(target_stars * 0.25)
        center_stars = int(target_stars * 0.15)
        spiral_stars = int(target_stars * 0.25)
        cluster_stars = int(target_stars * 0.20)
        background_stars = target_stars - (
            plane_stars + center_stars + spiral_stars + cluster_stars
        )

        logger.info("Generating realistic starfield with %d stars:", target_stars)
        logger.info("  Galactic plane: %d stars", plane_stars)
        logger.info("  Galactic center: %d stars", center_stars)
        logger.info("  Spiral arms: %d stars", spiral_stars)
        logger.info("  Star clusters: %d stars", cluster_stars)
        logger.info("  Background: %d stars", background_stars)

        self._generate_galactic_plane(plane_stars)
        self._generate_galactic_center(center_stars)
        self._generate_spiral_arms(spiral_stars)
        self._generate_local_clusters(cluster_stars)
        self._generate_background_stars(background_stars)

        logger.info("Generated %d total stars", len(self._stars))
        return self.stars

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _generate_galactic_plane(self, star_count: int) -> None:
        rng = self._rng
        placed = 0
        attempts = 0
        max_attempts = star_count * 3
        while placed < star_count and attempts < max_attempts:
            x = rng.randint(0, self._width - 1)
            x_noise = self._large_scale_noise.octave_noise(x * 0.003, 3, 0.5, 1.0)
            local_variation = self._variation_noise.noise(x * 0.02)
            density = (x_noise * 0.7 + local_variation * 0.3 + 1.0) * 0.5

            y = int(rng.gauss(self._plane_y, self._height * 0.08))
            y = _clamp(y, 0, self._height - 1)

            plane_distance = abs(y - self._plane_y) / self._height
            plane_probability = math.exp(-plane_distance * plane_distance * 8.0)
            probability = density * plane_probability * 0.8

            if rng.random() < probability:
                self._add_star(x, y, density, 1.0)
                placed += 1
            attempts += 1

    def _generate_galactic_center(self, star_count: int) -> None:
        rng = self._rng
        placed = 0
        attempts = 0
        max_attempts = star_count * 4
        while placed < star_count and attempts < max_attempts:
            x = int(rng.gauss(self._center_x, self._width * 0.15))
            y = int(rng.gauss(self._center_y, self._height * 0.12))
            if not self._in_bounds(x, y):
                attempts += 1
                continue

            distance = math.hypot(x - self._center_x, y - self._center_y)
            central_noise = self._medium_scale_noise.octave_noise(
                distance * 0.01, 2, 0.6, 1.0
            )
            distance_factor = math.exp(-distance * distance * 0.00001)
            probability = (central_noise + 1.0) * 0.5 * distance_factor * 1.2

            if rng.random() < probability:
                self._add_star(x, y, probability, 1.2)
                placed += 1
            attempts += 1

    def _generate_spiral_arms(self, star_count: int) -> None:
        rng = self._rng
        arm_count = 2
        stars_per_arm = star_count // arm_count
        for arm in range(arm_count):
            arm_offset = arm * math.pi
            placed = 0
            attempts = 0
            max_attempts = stars_per_arm * 3
            while placed < stars_per_arm and attempts < max_attempts:
                radius = rng.uniform(self._width * 0.1, self._width * 0.4)
                angle = arm_offset + radius * 0.008
                x = self._center_x + int(radius * math.cos(angle))
                y = self._center_y + int(radius * math.sin(angle) * 0.7)
                if not self._in_bounds(x, y):
                    attempts += 1
                    continue

                spiral_noise = self._medium_scale_noise.octave_noise(
                    radius * 0.005, 2, 0.5, 1.0
                )
                local_noise = self._small_scale_noise.noise(radius * 0.02)
                density = (spiral_noise * 0.8 + local_noise * 0.2 + 1.0) * 0.5

                y += int(rng.gauss(0.0, self._height * 0.03))
                y = _clamp(y, 0, self._height - 1)

                if rng.random() < density * 0.6:
                    self._add_star(x, y, density, 1.0)
                    placed += 1
                attempts += 1

    def _generate_local_clusters(self, star_count: int) -> None:
        rng = self._rng
        cluster_count = 8
        stars_per_cluster = star_count // cluster_count
        for _ in range(cluster_count):
            cluster_x = rng.randint(self._width // 6, 5 * self._width // 6)
            cluster_y = rng.randint(self._height // 6, 5 * self._height // 6)

            cluster_seed = cluster_x * 0.001 + cluster_y * 0.001
            density = (self._small_scale_noise.noise(cluster_seed) + 1.0) * 0.5
            if density < 0.3:
                continue

            for _ in range(int(stars_per_cluster * density)):
                x = int(rng.gauss(cluster_x, self._width * 0.025))
                y = int(rng.gauss(cluster_y, self._height * 0.025))
                if self._in_bounds(x, y):
                    self._add_star(x, y, density, 0.9)

    def _generate_background_stars(self, star_count: int) -> None:
        rng = self._rng
        for _ in range(star_count):
            x = rng.randint(0, self._width - 1)
            y = rng.randint(0, self._height - 1)
            variation = self._variation_noise.noise((x + y) * 0.001)
            intensity = (variation + 1.0) * 0.25 + 0.3
            self._add_star(x, y, intensity, 0.8)

    def _add_star(self, x: int, y: int, intensity: float, base_size: float) -> None:
        x = _clamp(x, 0, self._width - 1)
        y = _clamp(y, 0, self._height - 1)
        brightness = _clamp(int(100 + intensity * 155), 100, 255)
        size = base_size * (0.8 + intensity * 0.4)
        self._stars.append(Star(x, y, brightness, size))

    def draw_starfield(self, surface: pygame.Surface) -> None:
        """Paint the stars onto a transparent ``surface``, blooming bright ones."""
        surface.fill(_TRANSPARENT)
        for star in self._stars:
            level = star.brightness
            surface.set_at((star.x, star.y), (level, level, level, 255))
            if level > _BLOOM_THRESHOLD:
                glow = level // 3
                colour = (glow, glow, glow, 255)
                for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
                    surface.set_at((star.x + dx, star.y + dy), colour)