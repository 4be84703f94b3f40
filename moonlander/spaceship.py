"""The player's lander: flight physics and collision handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from moonlander.constants import (
    GRAVITY,
    MAX_THRUST,
    TERRAIN_LANDING_PAD,
    TERRAIN_ROCK,
    THRUST_UNIT,
)
from moonlander.vector2d import Vector2D

COLLISION_BOX_MARGIN = 4


@dataclass(frozen=True)
class FlightStats:
    """A snapshot of the lander's flight state."""

    nose_angle: float
    x_pos: float
    y_pos: float
    x_vel: float
    y_vel: float
    x_accel: float
    y_accel: float
    thrust_units: float


@dataclass(frozen=True)
class Bounds:
    """An integer rectangle: top-left corner, width and height."""

    x: int
    y: int
    w: int
    h: int


class Spaceship:
    """A lander steered by rotating its nose and firing its thruster.

    ``texture`` needs ``width``, ``height`` and a
    ``render(x, y, clip, angle)`` method.
    """

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        texture: Any = None,
        gravity: float = GRAVITY,
        thrust_unit: float = THRUST_UNIT,
        max_thrust: float = MAX_THRUST,
    ) -> None:
        self._nose_angle = 0.0
        self._thrust_unit = thrust_unit
        self._max_thrust = max_thrust
        self._position = Vector2D(float(x), float(y))
        self._velocity = Vector2D(0.0, 0.0)
        self._acceleration = Vector2D(0.0, 0.0)
        self._thrust = Vector2D(0.0, 0.0)
        self._gravity = Vector2D(0.0, gravity)
        self._texture = texture
        self._destroyed = False

    @property
    def pos_x(self) -> float:
        return self._position.x

    @property
    def pos_y(self) -> float:
        return self._position.y

    @property
    def vel_x(self) -> float:
        return self._velocity.x

    @property
    def vel_y(self) -> float:
        return self._velocity.y

    @property
    def nose_angle(self) -> float:
        return self._nose_angle

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def flight_stats(self) -> FlightStats:
        """Current flight state."""
        return FlightStats(
            nose_angle=self._nose_angle,
            x_pos=self._position.x,
            y_pos=self._position.y,
            x_vel=self._velocity.x,
            y_vel=self._velocity.y,
            x_accel=self._acceleration.x,
            y_accel=self._acceleration.y,
            thrust_units=self._thrust.magnitude,
        )

    def rotate(self, angle: float) -> None:
        """Turn the nose by ``angle`` degrees, wrapping into [0, 360)."""
        if not -360.0 <= angle <= 360.0:
            raise ValueError(f"rotation must be within [-360, 360], got {angle}")
        self._nose_angle += angle
        if self._nose_angle >= 360.0:
            self._nose_angle -= 360.0
        if self._nose_angle < 0.0:
            self._nose_angle += 360.0
        self._thrust.rotate_to(self._nose_angle)

    def align_vertical(self, angle: float) -> None:
        """Turn the nose up to ``angle`` degrees towards upright, the short way."""
        if abs(self._nose_angle) <= angle:
            self.rotate(-self._nose_angle)
        elif self._nose_angle > 180.0:
            self.rotate(abs(angle))
        else:
            self.rotate(-abs(angle))

    def thrust_increase(self) -> None:
        """Add one thrust unit along the nose, up to the maximum thrust."""
        current = self._thrust.magnitude
        if current < self._thrust_unit:
            self._thrust.set_magnitude(self._thrust_unit)
            self._thrust.rotate_to(self._nose_angle)
        else:
            self._thrust.set_magnitude(current + self._thrust_unit)
        if self._thrust.magnitude > self._max_thrust:
            self._thrust.set_magnitude(self._max_thrust)

    def thrust_decay(self) -> None:
        """Remove one thrust unit, never going below zero."""
        current = self._thrust.magnitude
        if current > self._thrust_unit:
            self._thrust.set_magnitude(current - self._thrust_unit)
        else:
            self._thrust.set_magnitude(0.0)

    def update_physics(self) -> None:
        """Advance one frame: apply gravity and thrust, then move."""
        self._acceleration = self._gravity + self._thrust
        self._velocity += self._acceleration
        self._position += self._velocity

    def _require_texture(self) -> Any:
        if self._texture is None:
            raise RuntimeError("spaceship has no texture to take its size from")
        return self._texture

    def draw_bounds(self) -> Bounds:
        """The rectangle the texture is drawn into."""
        texture = self._require_texture()
        return Bounds(
            int(self._position.x),
            int(self._position.y),
            texture.width,
            texture.height,
        )

    def collision_bounds(self) -> Bounds:
        """The draw rectangle shrunk by the collision margin on each side."""
        draw = self.draw_bounds()
        return Bounds(
            draw.x + COLLISION_BOX_MARGIN,
            draw.y + COLLISION_BOX_MARGIN,
            draw.w - 2 * COLLISION_BOX_MARGIN,
            draw.h - 2 * COLLISION_BOX_MARGIN,
        )

    def handle_boundary_collision(self, world_width: int, world_height: int) -> bool:
        """Keep the lander inside the world, stopping motion into a wall.

        Returns True if any wall was hit.
        """
        bounds = self.draw_bounds()
        collision = False
        if bounds.x < 0:
            self._position.x = 0.0
            self._velocity.x = 0.0
            collision = True
        if bounds.x + bounds.w >= world_width:
            self._position.x = float(world_width - bounds.w - 1)
            self._velocity.x = 0.0
            collision = True
        if bounds.y < 0:
            self._position.y = 0.0
            self._velocity.y = 0.0
            collision = True
        if bounds.y + bounds.h >= world_height:
            self._position.y = float(world_height - bounds.h - 1)
            self._velocity.y = 0.0
            collision = True
        return collision

    def handle_terrain_collision(self, terrain: Sequence[Sequence[int]]) -> bool:
        """Check the collision box against a grid of terrain cells.

        Touching rock undoes the last move and returns True (a crash).
        Touching only landing pad undoes the last move and returns False.
        """
        bounds = self.collision_bounds()
        start_x = max(0, bounds.x)
        start_y = max(0, bounds.y)
        end_x = min(len(terrain[0]), bounds.x + bounds.w)
        end_y = min(len(terrain), bounds.y + bounds.h)

        hit_landing_pad = False
        for row in terrain[start_y:end_y]:
            for cell in row[start_x:end_x]:
                if cell == TERRAIN_ROCK:
                    self._reset_velocity()
                    return True
                if cell == TERRAIN_LANDING_PAD:
                    hit_landing_pad = True
        if hit_landing_pad:
            self._reset_velocity()
        return False

    def render(self, x: int, y: int) -> None:
        """Draw the lander at screen position (x, y) unless destroyed."""
        if not self._destroyed:
            self._require_texture().render(x, y, None, self._nose_angle)

    def destroy(self) -> None:
        self._destroyed = True

    def _reset_velocity(self) -> None:
        self._position += self._velocity * -1.0
        self._velocity.x = 0.0
        self._velocity.y = 0.0