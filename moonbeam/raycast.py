"""Grid raycasting (DDA) for wall columns, plus floor and ceiling bands."""

from __future__ import annotations

import math
from dataclasses import dataclass

from moonbeam.player import Player
from moonbeam.world import WorldMap

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 960
REFRESH_RATE = 60

BASE_SHADE = 0xA0
FADE_TILES = 16
OVERSCAN = 256

Color = tuple[int, int, int, int]

GRAY: Color = (130, 130, 130, 255)
BLACK: Color = (0, 0, 0, 255)


def _half(value: int) -> int:
    """Integer halving that truncates toward zero."""
    return int(value / 2)


def _inverse_abs(value: float) -> float:
    return math.inf if value == 0 else abs(1 / value)


@dataclass(frozen=True)
class Column:
    """One vertical wall slice of the screen."""

    x: int
    start: int
    end: int
    height: int
    distance: float
    side: int
    tile: int
    hit: bool
    color: Color


@dataclass(frozen=True)
class Frame:
    """All wall columns of a frame and the height of the shortest one."""

    columns: tuple[Column, ...]
    min_height: int


@dataclass(frozen=True)
class ParallaxBands:
    """Vertical gradient rectangles for the ceiling and floor."""

    width: int
    ceiling_y: int
    ceiling_height: int
    floor_y: int
    floor_height: int
    ceiling_colors: tuple[Color, Color] = (GRAY, BLACK)
    floor_colors: tuple[Color, Color] = (BLACK, GRAY)


def shade_level(distance: float, side: int) -> int:
    """Brightness of a wall at ``distance``; y-facing sides are half as bright."""
    shade = BASE_SHADE // 2 if side == 1 else BASE_SHADE
    fade = distance / FADE_TILES
    if not shade * fade <= shade:
        return 0
    return min(255, int(shade - shade * fade))


def wall_color(tile: int, level: int) -> Color:
    """Colour for a wall tile at the given brightness; unknown tiles are purple."""
    if tile == 2:
        return (level, 0, 0, 255)
    if tile == 3:
        return (0, level, 0, 255)
    if tile == 4:
        return (0, 0, level, 255)
    return (level, 0, level, 255)


def _line_height(distance: float, screen_height: int) -> int:
    if math.isnan(distance):
        return 0
    if distance <= 0:
        return screen_height
    ratio = screen_height / distance
    return int(ratio) if math.isfinite(ratio) else screen_height


def cast_ray(player: Player, world: WorldMap, x: int, screen_width: int, screen_height: int) -> Column:
    """Cast the ray for screen column ``x`` and return the wall slice it sees."""
    map_x, map_y = int(player.pos_x), int(player.pos_y)

    cam_x = 2 * x / screen_width - 1
    dir_x = player.ang_x + player.plane_x * cam_x
    dir_y = player.ang_y + player.plane_y * cam_x
    delta_x = _inverse_abs(dir_x)
    delta_y = _inverse_abs(dir_y)

    if dir_x < 0:
        step_x, side_x = -1, (player.pos_x - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - player.pos_x) * delta_x
    if dir_y < 0:
        step_y, side_y = -1, (player.pos_y - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - player.pos_y) * delta_y

    hit = False
    side = 0
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if not world.in_bounds(map_x, map_y):
            break
        if world[map_x, map_y] != 0:
            hit = True
            break

    distance = side_x - delta_x if side == 0 else side_y - delta_y
    height = _line_height(distance, screen_height)

    start = int(-_half(height) + _half(screen_height) + player.ang_z)
    end = int(_half(height) + _half(screen_height) + player.ang_z)
    start = max(start, 0)
    if end >= screen_height:
        end = screen_height - 1

    tile = world[map_x, map_y] if hit else 0
    color = wall_color(tile, shade_level(distance, side))
    return Column(x, start, end, height, distance, side, tile, hit, color)


def cast_frame(
    player: Player,
    world: WorldMap,
    screen_width: int = SCREEN_WIDTH,
    screen_height: int = SCREEN_HEIGHT,
) -> Frame:
    """Cast one ray per screen column."""
    columns = tuple(cast_ray(player, world, x, screen_width, screen_height) for x in range(screen_width))
    min_height = min([screen_height, *(column.height for column in columns)])
    return Frame(columns, min_height)


def parallax_bands(
    player: Player,
    min_height: int,
    screen_width: int = SCREEN_WIDTH,
    screen_height: int = SCREEN_HEIGHT,
) -> ParallaxBands:
    """Ceiling and floor gradients around the horizon, with overscan."""
    ceiling_end = int((_half(screen_height) + player.ang_z) - _half(min_height) + OVERSCAN)
    floor_start = (ceiling_end - OVERSCAN) + _half(min_height)
    return ParallaxBands(
        width=screen_width,
        ceiling_y=-OVERSCAN,
        ceiling_height=ceiling_end,
        floor_y=floor_start,
        floor_height=screen_height + OVERSCAN,
    )