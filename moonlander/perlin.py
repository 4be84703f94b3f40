"""One-dimensional Perlin noise."""

from __future__ import annotations

import logging
import math
import random

logger = logging.getLogger(__name__)

_PERMUTATION_SIZE = 256


def _fade(t: float) -> float:
    """Smooth step 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _grad(hash_value: int, x: float) -> float:
    return x if hash_value & 1 else -x


class PerlinNoise1D:
    """Seeded 1D gradient noise with values in roughly [-1, 1]."""

    def __init__(self, seed: int) -> None:
        logger.info("Initializing Perlin Noise 1D generation with seed: %s", seed)
        values = list(range(_PERMUTATION_SIZE))
        random.Random(seed).shuffle(values)
        # Doubled so that looking up index + 1 never runs off the end.
        self._permutation = tuple(values + values)

    def noise(self, x: float) -> float:
        """Noise value at ``x``; zero at every integer."""
        cell = math.floor(x)
        index = cell & (_PERMUTATION_SIZE - 1)
        offset = x - cell
        u = _fade(offset)
        a = self._permutation[index]
        b = self._permutation[index + 1]
        return _lerp(_grad(a, offset), _grad(b, offset - 1.0), u)

    def octave_noise(
        self,
        x: float,
        octaves: int,
        persistence: float = 0.5,
        frequency: float = 1.0,
    ) -> float:
        """Sum ``octaves`` layers of noise, normalised to about [-1, 1].

        Each layer doubles the frequency and scales the amplitude by
        ``persistence``.
        """
        if octaves < 1:
            raise ValueError(f"octaves must be at least 1, got {octaves}")
        value = 0.0
        amplitude = 1.0
        max_value = 0.0
        for _ in range(octaves):
            value += self.noise(x * frequency) * amplitude
            max_value += amplitude
            amplitude *= persistence
            frequency *= 2.0
        return value / max_value