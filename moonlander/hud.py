"""The heads-up display of flight readings in the top-right corner."""

from __future__ import annotations

from typing import Optional, Tuple

import pygame

from moonlander.spaceship import FlightStats
from moonlander.texture import Texture

DISPLAY_NAMES = (
    "Angle: ",
    "X Pos: ",
    "Y Pos: ",
    "X Vel: ",
    "Y Vel: ",
    "Thrust: ",
)

X_PIXELS_PER_CHAR = 12
Y_PIXELS_PER_CHAR = 24
# Longest name plus room for the value, times an estimated glyph width.
X_DISPLAY_OFFSET = (len(DISPLAY_NAMES[0]) + 5) * X_PIXELS_PER_CHAR
Y_DISPLAY_OFFSET = 1 * Y_PIXELS_PER_CHAR

BACKGROUND_COLOUR = (0, 0, 0, 255)
TEXT_COLOUR = (255, 255, 255, 255)


def format_float(value: float) -> str:
    """Fixed-point text with two decimals."""
    return f"{value:.2f}"


class HeadsUpDisplay:
    """One line of text per flight reading, stacked down the right edge."""

    def __init__(
        self,
        screen_height: int = 0,
        screen_width: int = 0,
        screen: Optional[pygame.Surface] = None,
        font: Optional[pygame.font.Font] = None,
    ) -> None:
        self._screen_height = screen_height
        self._screen_width = screen_width
        self._textures = [Texture(screen, font) for _ in DISPLAY_NAMES]
        self._lines: Tuple[str, ...] = tuple("" for _ in DISPLAY_NAMES)

    @property
    def lines(self) -> Tuple[str, ...]:
        """The text currently shown, top line first."""
        return self._lines

    def update(self, stats: FlightStats) -> None:
        """Re-render every line from ``stats``."""
        values = (
            stats.nose_angle,
            stats.x_pos,
            stats.y_pos,
            stats.x_vel,
            stats.y_vel,
            stats.thrust_units,
        )
        lines = tuple(
            name + format_float(value) for name, value in zip(DISPLAY_NAMES, values)
        )
        for texture, line in zip(self._textures, lines):
            texture.load_from_rendered_text(line, TEXT_COLOUR, BACKGROUND_COLOUR)
        self._lines = lines

    def render(self) -> None:
        """Draw the lines down from the top of the screen's right side."""
        x = self._screen_width - X_DISPLAY_OFFSET
        y = 1
        for texture in self._textures:
            texture.render(x, y)
            y += Y_DISPLAY_OFFSET