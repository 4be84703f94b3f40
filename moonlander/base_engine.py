"""A game loop on pygame that concrete games fill in."""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import Dict, Optional

import pygame

from moonlander.texture import Texture, TextureError
from moonlander.timer import Timer

logger = logging.getLogger(__name__)

BACKGROUND_COLOUR = (250, 250, 250, 255)
TEXT_COLOUR = (0, 0, 0, 255)
BOTTOM_BAR_HEIGHT = 24
FONT_SIZE = 18
FONT_ARIAL = "Arial.ttf"

_CLEAR_COLOUR = (255, 255, 255, 255)
_FRAME_RATE = 60


class EngineError(Exception):
    """Raised when the engine cannot start or load its media."""


class BaseEngine(ABC):
    """Owns the window, textures and font, and runs the frame loop.

    Subclasses implement :meth:`load_media`, :meth:`create`,
    :meth:`update` and :meth:`render`; setting ``quit`` ends the loop.
    """

    def __init__(
        self,
        screen_height: int,
        screen_width: int,
        display_title: str,
        assets_dir: str,
    ) -> None:
        self.screen_height = screen_height
        self.screen_width = screen_width
        self.display_title = display_title
        self.assets_dir = assets_dir
        self.screen: Optional[pygame.Surface] = None
        self.textures: Dict[str, Texture] = {}
        self.font: Optional[pygame.font.Font] = None
        self.quit = False
        self.playing = True
        self.frame_count = 0
        self.score = 0
        self.fps = 0
        self._fps_update_timer = Timer(1000)

    @abstractmethod
    def load_media(self) -> None:
        """Load the textures the game needs."""

    @abstractmethod
    def create(self) -> None:
        """Build the game state."""

    @abstractmethod
    def update(self) -> None:
        """Advance the game state by one frame."""

    @abstractmethod
    def render(self) -> None:
        """Draw the game state onto the screen."""

    @property
    def window_title(self) -> str:
        """The display title followed by the current frame rate."""
        return f"{self.display_title} - FPS: {self.fps}"

    def run(self) -> int:
        """Start pygame, run the loop until ``quit`` is set, then shut down."""
        logger.info("Initialising engine")
        try:
            self._init()
            logger.info("Loading media")
            self.load_media()
            self.load_font(FONT_ARIAL)
            logger.info("Creating game state objects")
            self.create()
            logger.info("Starting engine loop")
            clock = pygame.time.Clock()
            while not self.quit:
                self.frame_count += 1
                if self._fps_update_timer.should_update():
                    self.fps = self.frame_count
                    self.frame_count = 0
                    pygame.display.set_caption(self.window_title)

                self.update()
                self.screen.fill(_CLEAR_COLOUR)
                self.render()
                pygame.display.flip()
                clock.tick(_FRAME_RATE)
        finally:
            logger.info("Shutting down engine")
            self._close()
        logger.info("Finished cleanly")
        return 0

    def create_target_texture(self, name: str, width: int, height: int) -> Texture:
        """Create, or replace, a transparent drawable texture under ``name``."""
        logger.info("Creating %d x %d texture with key %s", width, height, name)
        texture = Texture(self.screen)
        texture.set_surface(pygame.Surface((width, height), pygame.SRCALPHA), width, height)
        self.textures[name] = texture
        return texture

    def load_texture(self, file_name: str) -> Texture:
        """Load an image from the assets directory, keyed by ``file_name``."""
        file_path = os.path.join(self.assets_dir, file_name)
        logger.info("Loading %s", file_name)
        if file_name in self.textures:
            raise EngineError(f"Key {file_path} has already been loaded")
        texture = Texture(self.screen)
        try:
            texture.load_from_file(file_path)
        except TextureError as exc:
            raise EngineError(f"Failed to load {file_path} image") from exc
        self.textures[file_name] = texture
        return texture

    def load_font(self, file_name: str) -> pygame.font.Font:
        """Open a font from the assets directory at :data:`FONT_SIZE`."""
        font_path = os.path.join(self.assets_dir, file_name)
        logger.info("Loading %s", file_name)
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self.font = pygame.font.Font(font_path, FONT_SIZE)
        except (pygame.error, OSError) as exc:
            raise EngineError(f"Failed to load font {font_path}: {exc}") from exc
        return self.font

    def _init(self) -> None:
        logger.info("Initialising pygame")
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((self.screen_width, self.screen_height))
        except pygame.error as exc:
            raise EngineError(f"Window could not be created: {exc}") from exc
        pygame.display.set_caption(self.display_title)
        if not pygame.font.get_init():
            pygame.font.init()

    def _close(self) -> None:
        self.textures.clear()
        self.font = None
        self.screen = None
        pygame.quit()