import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from moonlander.texture import COLOUR_KEY, Texture, TextureError

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
BLACK = (0, 0, 0, 255)


@pytest.fixture
def font():
    pygame.font.init()
    return pygame.font.Font(None, 18)


def _solid(size, colour):
    surface = pygame.Surface(size)
    surface.fill(colour)
    return surface


def test_new_texture_is_empty():
    texture = Texture()
    assert (texture.width, texture.height) == (0, 0)
    assert texture.surface is None


def test_set_surface_and_reset():
    texture = Texture()
    surface = _solid((3, 4), RED)
    texture.set_surface(surface, 32, 32)
    assert (texture.width, texture.height) == (32, 32)
    assert texture.surface is surface
    texture.reset()
    assert (texture.width, texture.height) == (0, 0)
    assert texture.surface is None


def test_load_from_file_takes_image_size_and_colour_key(tmp_path):
    path = tmp_path / "image.bmp"
    pygame.image.save(_solid((5, 7), RED), str(path))
    texture = Texture()
    texture.load_from_file(str(path))
    assert (texture.width, texture.height) == (5, 7)
    assert tuple(texture.surface.get_colorkey())[:3] == COLOUR_KEY


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(TextureError):
        Texture().load_from_file(str(tmp_path / "missing.bmp"))


def test_rendered_text_without_font_raises():
    with pytest.raises(TextureError):
        Texture().load_from_rendered_text("Angle: ", (255, 255, 255), (0, 0, 0))


def test_rendered_text_matches_font_size(font):
    texture = Texture(font=font)
    texture.load_from_rendered_text("Thrust: 0.04", (255, 255, 255), (0, 0, 0))
    assert (texture.width, texture.height) == font.size("Thrust: 0.04")


def test_empty_texture_draws_nothing():
    screen = _solid((10, 10), BLACK)
    Texture(screen).render(2, 3)
    assert screen.get_at((2, 3)) == BLACK


def test_texture_without_screen_cannot_draw():
    texture = Texture()
    texture.set_surface(_solid((2, 2), RED), 2, 2)
    with pytest.raises(TextureError):
        texture.render(0, 0)


def test_render_places_image_at_position():
    screen = _solid((10, 10), BLACK)
    texture = Texture(screen)
    texture.set_surface(_solid((4, 4), RED), 4, 4)
    texture.render(2, 3)
    assert screen.get_at((2, 3)) == RED
    assert screen.get_at((5, 6)) == RED
    assert screen.get_at((6, 3)) == BLACK
    assert screen.get_at((1, 3)) == BLACK


def test_render_clip_draws_only_clipped_region():
    screen = _solid((10, 10), BLACK)
    image = _solid((4, 4), RED)
    image.fill(BLUE, pygame.Rect(2, 0, 2, 4))
    texture = Texture(screen)
    texture.set_surface(image, 4, 4)
    texture.render(0, 0, clip=pygame.Rect(2, 0, 2, 2))
    assert screen.get_at((0, 0)) == BLUE
    assert screen.get_at((1, 1)) == BLUE
    assert screen.get_at((2, 0)) == BLACK
    assert screen.get_at((0, 2)) == BLACK


def test_render_rotates_clockwise_about_centre():
    screen = _solid((30, 30), BLACK)
    image = _solid((2, 6), BLUE)
    image.fill(RED, pygame.Rect(0, 0, 2, 3))
    texture = Texture(screen)
    texture.set_surface(image, 2, 6)
    texture.render(10, 10, angle=90.0)
    # Top half turns to the right; the image now lies across its old centre.
    assert screen.get_at((13, 12)) == RED
    assert screen.get_at((8, 12)) == BLUE
    assert screen.get_at((10, 10)) == BLACK