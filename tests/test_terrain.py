import pygame
import pytest

from moonlander.constants import (
    TERRAIN_LANDING_PAD,
    TERRAIN_ROCK,
    TERRAIN_VACUUM,
)
from moonlander.terrain import (
    TerrainGenerationConfig,
    TerrainGenerator,
    draw_terrain,
    horizon_points,
)


def _config(width=300, height=200, variation=40, start=70):
    return TerrainGenerationConfig(
        world_width=width,
        world_height=height,
        height_variation=variation,
        start_height=start,
        octaves=4,
        persistence=0.5,
        scale=0.0025,
    )


def _column(terrain, x):
    return [row[x] for row in terrain]


def test_grid_has_configured_dimensions():
    config = _config()
    terrain = TerrainGenerator(1).generate_terrain(config, 1)
    assert len(terrain) == config.world_height
    assert all(len(row) == config.world_width for row in terrain)


def test_cells_hold_only_known_values():
    terrain = TerrainGenerator(2).generate_terrain(_config(), 3)
    values = {cell for row in terrain for cell in row}
    assert values <= {TERRAIN_VACUUM, TERRAIN_ROCK, TERRAIN_LANDING_PAD}


def test_same_seed_gives_same_terrain():
    config = _config()
    first = TerrainGenerator(42).generate_terrain(config, 2)
    second = TerrainGenerator(42).generate_terrain(config, 2)
    assert first == second


@pytest.mark.parametrize("seed", [0, 5, 99])
def test_each_column_is_solid_from_the_bottom_with_one_material(seed):
    config = _config()
    terrain = TerrainGenerator(seed).generate_terrain(config, 2)
    for x in range(config.world_width):
        column = _column(terrain, x)
        solid = [cell for cell in column if cell != TERRAIN_VACUUM]
        first_solid = len(column) - len(solid)
        assert column[first_solid:] == solid
        assert len(set(solid)) <= 1


def test_rock_heights_stay_within_variation():
    config = _config()
    terrain = TerrainGenerator(8).generate_terrain(config, 0)
    for x in range(config.world_width):
        filled = sum(1 for cell in _column(terrain, x) if cell != TERRAIN_VACUUM)
        assert filled <= config.start_height + config.height_variation


def test_zero_variation_without_pads_is_flat_rock():
    config = _config(variation=0)
    terrain = TerrainGenerator(3).generate_terrain(config, 0)
    for x in range(config.world_width):
        column = _column(terrain, x)
        solid = [cell for cell in column if cell != TERRAIN_VACUUM]
        assert len(solid) == config.start_height - 1
        assert set(solid) == {TERRAIN_ROCK}


def test_no_landing_pads_when_average_is_zero():
    terrain = TerrainGenerator(4).generate_terrain(_config(), 0)
    values = {cell for row in terrain for cell in row}
    assert values == {TERRAIN_VACUUM, TERRAIN_ROCK}


def test_certain_landing_pads_start_at_start_height():
    config = _config()
    terrain = TerrainGenerator(6).generate_terrain(config, config.world_width)
    first_column = [cell for cell in _column(terrain, 0) if cell != TERRAIN_VACUUM]
    assert first_column == [TERRAIN_LANDING_PAD] * (config.start_height - 1)
    # The last columns are too close to the edge for a pad to fit.
    assert terrain[-1][-1] == TERRAIN_ROCK


def test_horizon_points_splits_top_cells_from_foreground():
    terrain = [
        [0, 0, 0],
        [0, 2, 1],
        [1, 2, 1],
        [1, 2, 1],
    ]
    horizon, foreground = horizon_points(terrain)
    assert horizon == [(0, 2), (1, 1), (2, 1)]
    assert foreground == [(0, 3), (1, 2), (1, 3), (2, 2), (2, 3)]


def test_landing_pad_on_even_column_gets_thicker_horizon():
    terrain = [
        [0, 0],
        [2, 2],
        [2, 2],
    ]
    horizon, foreground = horizon_points(terrain)
    assert (0, 1) in horizon and (0, 2) in horizon
    assert (1, 2) not in horizon
    assert (0, 2) in foreground


def test_horizon_points_of_empty_sky():
    horizon, foreground = horizon_points([[0, 0], [0, 0]])
    assert horizon == [] and foreground == []


def test_draw_terrain_colours():
    terrain = [
        [0, 0, 0],
        [0, 1, 1],
        [1, 1, 1],
    ]
    surface = pygame.Surface((3, 3), pygame.SRCALPHA)
    draw_terrain(surface, terrain)
    assert tuple(surface.get_at((0, 0))) == (0, 0, 0, 0)
    assert tuple(surface.get_at((1, 1))) == (255, 255, 255, 255)
    assert tuple(surface.get_at((0, 2))) == (255, 255, 255, 255)
    assert tuple(surface.get_at((1, 2))) == (0, 0, 0, 255)