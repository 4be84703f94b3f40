"""A mutable two-dimensional vector using screen coordinates.

Angles are measured in degrees clockwise from "up", where up is the
negative y direction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vector2D:
    """A 2D vector whose angle is measured clockwise from screen-up."""

    x: float
    y: float

    @property
    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    @property
    def angle_degrees(self) -> float:
        """Heading in degrees in the range [0, 360), 0 pointing up."""
        degrees = math.degrees(math.atan2(self.x, -self.y))
        return degrees if degrees >= 0.0 else degrees + 360.0

    def set_magnitude(self, magnitude: float) -> None:
        """Scale to ``magnitude`` keeping the heading.

        A zero vector has no heading, so it is pointed up (0 degrees).
        """
        if magnitude < 0.0:
            raise ValueError(f"magnitude must not be negative, got {magnitude}")
        if self.magnitude > 0.0:
            radians = math.radians(self.angle_degrees)
            self.x = magnitude * math.sin(radians)
            self.y = -magnitude * math.cos(radians)
        else:
            self.x = 0.0
            self.y = -magnitude

    def rotate_to(self, degrees: float) -> None:
        """Point the vector at ``degrees`` keeping its length."""
        magnitude = self.magnitude
        radians = math.radians(degrees)
        self.x = magnitude * math.sin(radians)
        self.y = -magnitude * math.cos(radians)

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x / scalar, self.y / scalar)

    def __iadd__(self, other: Vector2D) -> Vector2D:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector2D) -> Vector2D:
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar: float) -> Vector2D:
        self.x *= scalar
        self.y *= scalar
        return self

    def __itruediv__(self, scalar: float) -> Vector2D:
        self.x /= scalar
        self.y /= scalar
        return self