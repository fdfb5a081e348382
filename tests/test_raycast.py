import pytest

from moonbeam.player import Player
from moonbeam.raycast import (
    BASE_SHADE,
    BLACK,
    GRAY,
    OVERSCAN,
    Frame,
    cast_frame,
    cast_ray,
    parallax_bands,
    shade_level,
    wall_color,
)
from moonbeam.world import WorldMap, default_world

WIDTH, HEIGHT = 64, 48


@pytest.fixture
def player():
    p = Player()
    p.reset()
    return p


def test_shade_at_zero_distance():
    assert shade_level(0.0, 0) == BASE_SHADE
    assert shade_level(0.0, 1) == BASE_SHADE // 2


def test_shade_fades_out_completely():
    assert shade_level(16.0, 0) == 0
    assert shade_level(100.0, 1) == 0
    assert shade_level(float("inf"), 0) == 0
    assert shade_level(float("nan"), 0) == 0


def test_shade_never_increases_with_distance():
    levels = [shade_level(d / 4, 0) for d in range(80)]
    assert levels == sorted(levels, reverse=True)


@pytest.mark.parametrize(
    "tile, expected",
    [(1, (100, 0, 100, 255)), (2, (100, 0, 0, 255)), (3, (0, 100, 0, 255)), (4, (0, 0, 100, 255))],
)
def test_wall_colors(tile, expected):
    assert wall_color(tile, 100) == expected


def test_unknown_tile_is_purple():
    assert wall_color(9, 40) == wall_color(1, 40)
    assert wall_color(0, 40) == wall_color(1, 40)


def test_center_ray_hits_wall_ahead(player):
    column = cast_ray(player, default_world(), WIDTH // 2, WIDTH, HEIGHT)
    assert column.hit
    assert column.tile == 1
    assert column.side == 0
    assert column.distance == pytest.approx(2.0)
    assert column.height == HEIGHT // 2
    assert column.color == wall_color(1, shade_level(column.distance, 0))


def test_frame_has_one_column_per_pixel(player):
    frame = cast_frame(player, default_world(), WIDTH, HEIGHT)
    assert isinstance(frame, Frame)
    assert [c.x for c in frame.columns] == list(range(WIDTH))


def test_frame_min_height_is_shortest_column(player):
    frame = cast_frame(player, default_world(), WIDTH, HEIGHT)
    assert frame.min_height == min(HEIGHT, *(c.height for c in frame.columns))


def test_columns_are_clamped_to_screen(player):
    player.ang_z = HEIGHT
    frame = cast_frame(player, default_world(), WIDTH, HEIGHT)
    for column in frame.columns:
        assert column.start >= 0
        assert column.end <= HEIGHT - 1


def test_every_column_hits_in_walled_world(player):
    frame = cast_frame(player, default_world(), WIDTH, HEIGHT)
    assert all(c.hit and c.tile != 0 for c in frame.columns)


def test_ray_leaving_open_world_reports_no_hit():
    world = WorldMap([[0] * 4 for _ in range(4)])
    p = Player(pos_x=1.5, pos_y=1.5, ang_x=-1.0, plane_y=0.66)
    column = cast_ray(p, world, 10, WIDTH, HEIGHT)
    assert not column.hit
    assert column.tile == 0
    assert column.color == wall_color(1, shade_level(column.distance, column.side))


def test_parallax_fixed_edges(player):
    bands = parallax_bands(player, 20, WIDTH, HEIGHT)
    assert bands.ceiling_y == -OVERSCAN
    assert bands.floor_height == HEIGHT + OVERSCAN
    assert bands.width == WIDTH
    assert bands.ceiling_colors == (GRAY, BLACK)
    assert bands.floor_colors == (BLACK, GRAY)


def test_parallax_follows_vertical_aim(player):
    level = parallax_bands(player, 20, WIDTH, HEIGHT)
    player.ang_z = 10
    raised = parallax_bands(player, 20, WIDTH, HEIGHT)
    assert raised.ceiling_height - level.ceiling_height == 10
    assert raised.floor_y - level.floor_y == 10


def test_parallax_floor_starts_below_ceiling_end_minus_overscan(player):
    bands = parallax_bands(player, 30, WIDTH, HEIGHT)
    assert bands.floor_y >= bands.ceiling_height - OVERSCAN