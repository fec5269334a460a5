"""Grid raycasting: finding the distance to the nearest wall along a ray."""

import math
from dataclasses import dataclass

from .constants import (
    FOV,
    IS_EMPTY,
    IS_WALL,
    LONGER_PATH,
    MY_PI,
    NO_WALL_FOUND,
    NUM_RAYS,
    SHORTER_PATH,
    SIZE_X,
    TILE_SIZE,
)


@dataclass(frozen=True)
class RayHit:
    """Result of one ray: distance in pixels and which grid side was crossed last."""

    distance: float
    side: int

    @property
    def found(self):
        return self.distance != NO_WALL_FOUND


@dataclass(frozen=True)
class WallSlice:
    """One screen column of wall: corrected distance and projected height."""

    column: int
    distance: float
    height: float
    count: int


def normalize_angle(angle):
    """Bring ``angle`` into the range [0, 2*pi)."""
    angle = math.fmod(angle, 2 * MY_PI)
    if angle < 0:
        angle += 2 * MY_PI
    return angle


def _inverse_abs(value):
    return math.inf if value == 0 else abs(1.0 / value)


def _initial_step(position, cell, direction, delta):
    """Step direction and distance (in delta units) to the first grid line."""
    if direction < 0:
        return LONGER_PATH, (position - cell * TILE_SIZE) * delta / TILE_SIZE
    return SHORTER_PATH, ((cell + 1) * TILE_SIZE - position) * delta / TILE_SIZE


def cast_ray(game_map, x, y, angle):
    """Walk the grid from pixel position (x, y) along ``angle`` until a wall is hit."""
    angle = normalize_angle(angle)
    dir_x = math.cos(angle)
    dir_y = math.sin(angle)
    delta_x = _inverse_abs(dir_x)
    delta_y = _inverse_abs(dir_y)
    mx = int(x / TILE_SIZE)
    my = int(y / TILE_SIZE)
    step_x, side_x = _initial_step(x, mx, dir_x, delta_x)
    step_y, side_y = _initial_step(y, my, dir_y, delta_y)
    side = IS_EMPTY
    rows = game_map.rows
    cols = game_map.cols
    while True:
        if side_x < side_y:
            side_x += delta_x
            mx += step_x
            side = IS_EMPTY
        else:
            side_y += delta_y
            my += step_y
            side = IS_WALL
        if mx < 0 or my < 0 or mx >= cols or my >= rows:
            return RayHit(NO_WALL_FOUND, side)
        if game_map.tiles[my][mx] == IS_WALL:
            if side == IS_EMPTY:
                return RayHit((side_x - delta_x) * TILE_SIZE, side)
            return RayHit((side_y - delta_y) * TILE_SIZE, side)


def cast_all_rays(game_map, x, y, angle):
    """Cast one ray per screen column across the field of view."""
    step = FOV / NUM_RAYS
    start = angle - FOV / 2
    slices = []
    for column in range(NUM_RAYS):
        ray_angle = start + column * step
        hit = cast_ray(game_map, x, y, ray_angle)
        distance = hit.distance * math.cos(ray_angle - angle)
        height = math.inf if distance == 0 else (TILE_SIZE / distance) * (SIZE_X // 2)
        slices.append(WallSlice(column, distance, height, column + 1))
    return slices