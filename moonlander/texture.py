"""An image that can be drawn onto a screen surface."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple, Union

import pygame

Colour = Union[pygame.Color, Tuple[int, int, int], Tuple[int, int, int, int]]
ClipRect = Union[pygame.Rect, Sequence[int]]

COLOUR_KEY = (0, 255, 255)


class TextureError(Exception):
    """Raised when an image cannot be loaded, rendered or drawn."""


class Texture:
    """Holds an image surface and draws it onto ``screen``.

    ``font`` is needed only to render text into the texture.
    """

    def __init__(
        self,
        screen: Optional[pygame.Surface] = None,
        font: Optional[pygame.font.Font] = None,
    ) -> None:
        self._screen = screen
        self._font = font
        self._surface: Optional[pygame.Surface] = None
        self._width = 0
        self._height = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def surface(self) -> Optional[pygame.Surface]:
        """The image held, or None when empty."""
        return self._surface

    def set_surface(
        self, surface: Optional[pygame.Surface], width: int, height: int
    ) -> None:
        """Hold ``surface``, drawn at ``width`` by ``height``."""
        self._surface = surface
        self._width = width
        self._height = height

    def load_from_file(self, path: str) -> None:
        """Load the image at ``path``; cyan pixels become transparent."""
        try:
            loaded = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise TextureError(f"Unable to load image {path}: {exc}") from exc
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            loaded = loaded.convert()
        loaded.set_colorkey(COLOUR_KEY)
        self.set_surface(loaded, loaded.get_width(), loaded.get_height())

    def load_from_rendered_text(
        self, text: str, text_colour: Colour, background_colour: Colour
    ) -> None:
        """Render ``text`` in the texture's font on a solid background."""
        if self._font is None:
            raise TextureError("Unable to render text: texture has no font")
        try:
            rendered = self._font.render(text, True, text_colour, background_colour)
        except pygame.error as exc:
            raise TextureError(f"Unable to render text surface: {exc}") from exc
        self.set_surface(rendered, rendered.get_width(), rendered.get_height())

    def reset(self) -> None:
        """Drop the image."""
        self.set_surface(None, 0, 0)

    def render(
        self, x: int, y: int, clip: Optional[ClipRect] = None, angle: float = 0.0
    ) -> None:
        """Draw at (x, y), optionally a ``clip`` region, turned ``angle`` degrees clockwise.

        Rotation is about the centre of the destination rectangle. An empty
        texture draws nothing.
        """
        if self._surface is None:
            return
        if self._screen is None:
            raise TextureError("Unable to draw texture: it has no screen")

        if clip is not None:
            image = self._surface.subsurface(pygame.Rect(clip))
            width, height = image.get_size()
        else:
            image = self._surface
            width, height = self._width, self._height
            if image.get_size() != (width, height):
                image = pygame.transform.scale(image, (width, height))

        if angle:
            rotated = pygame.transform.rotate(image, -angle)
            destination = rotated.get_rect(center=(x + width // 2, y + height // 2))
            self._screen.blit(rotated, destination)
        else:
            self._screen.blit(image, (x, y))