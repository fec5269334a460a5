"""Drawing the scene: sky, floor, wall columns, enemies and the weapon."""

import math
import os
import sys
from dataclasses import dataclass, field

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .animation import Rect  # noqa: E402
from .constants import (  # noqa: E402
    BRICK_WALL_PATH,
    DARK,
    DARK_RAYS,
    EX_SIZE,
    GHOUL_PATH,
    MAX_LIGHT,
    MIDDLE,
    MY_PI,
    PATH_EX,
    PATH_SHOOTGUN,
    SHOOTGUN_SIZE,
    SIZE_X,
    SIZE_Y,
    SKY_PATH,
    TILE_SIZE,
    WEAPON_POS_HEIGHT,
)
from .enemies import project_enemy  # noqa: E402

_DEFAULT_SHADE = 255


def flashlight_shade(count_rays, flashlight):
    """Grey level for a wall column, or None to keep the previous one."""
    distance = abs(count_rays - MIDDLE)
    if distance >= DARK_RAYS:
        return DARK
    if flashlight:
        return min(DARK + DARK_RAYS - distance, MAX_LIGHT)
    return None


def sky_rects(angle, texture_width, texture_height):
    """Texture areas of the sky: the main part and, if needed, the wrapped part."""
    raw = int(angle * (texture_width / (2 * MY_PI)))
    offset = int(math.fmod(raw, texture_width))
    width = texture_width - offset
    left = offset + texture_width if offset < 0 else offset
    first = Rect(left, 0, width, texture_height)
    if first.width < SIZE_X:
        return first, Rect(0, 0, SIZE_X - first.width, texture_height)
    return first, None


def wall_rect(col, height, pitch):
    """Screen rectangle (left, top, width, height) of one wall column."""
    top = (SIZE_Y - height) / 2 + pitch
    return (float(col), top, 1.0, float(height))


def enemy_placement(enemy, screen_x, height, pitch):
    """Return (x, y, scale) placing the enemy sprite centred on ``screen_x``."""
    scale = height / enemy.rect.height
    x = screen_x - (enemy.rect.width * scale) / 2
    y = int((SIZE_Y - height) / 2) + pitch
    return x, y, scale


def weapon_positions(window_size, weapon_size):
    """Return the weapon position and the muzzle-flash position on screen."""
    win_w, win_h = window_size
    weapon_w, weapon_h = weapon_size
    x = (win_w - weapon_w) / 2.0
    y = win_h - weapon_h - WEAPON_POS_HEIGHT
    return (x, y), (int(win_w) // 2 - 50, y)


def load_image(path):
    """Load an image file, or return None if it cannot be loaded."""
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError):
        return None


@dataclass
class Assets:
    """Images used for drawing; any of them may be missing."""

    sky: object = None
    wall: object = None
    textures: dict = field(default_factory=dict)

    @classmethod
    def load(cls):
        """Load every game image from the assets directory."""
        wall = load_image(BRICK_WALL_PATH)
        if wall is None:
            print("Error: failed to load wall texture", file=sys.stderr)
        textures = {}
        for path in (PATH_SHOOTGUN, PATH_EX, GHOUL_PATH):
            image = load_image(path)
            if image is not None:
                textures[path] = image
        return cls(sky=load_image(SKY_PATH), wall=wall, textures=textures)


class Renderer:
    """Draws game state onto a pygame surface."""

    def __init__(self, surface, assets=None):
        self.surface = surface
        self.assets = assets if assets is not None else Assets()
        self._shade = _DEFAULT_SHADE
        self._wall_tint = (255, 255, 255)
        if self.assets.wall is not None:
            self._wall_tint = tuple(pygame.transform.average_color(self.assets.wall)[:3])

    def _blit_scaled(self, texture, area, x, y, scale_x, scale_y):
        """Blit ``area`` of ``texture`` scaled, scaling only the part on screen."""
        area = pygame.Rect(area).clip(texture.get_rect())
        if area.w <= 0 or area.h <= 0 or scale_x <= 0 or scale_y <= 0:
            return
        screen_w, screen_h = self.surface.get_size()
        left = max(x, 0)
        top = max(y, 0)
        right = min(x + area.w * scale_x, screen_w)
        bottom = min(y + area.h * scale_y, screen_h)
        if right <= left or bottom <= top:
            return
        src_left = area.x + int((left - x) / scale_x)
        src_top = area.y + int((top - y) / scale_y)
        src_right = area.x + min(area.w, math.ceil((right - x) / scale_x))
        src_bottom = area.y + min(area.h, math.ceil((bottom - y) / scale_y))
        if src_right <= src_left or src_bottom <= src_top:
            return
        part = texture.subsurface(
            (src_left, src_top, src_right - src_left, src_bottom - src_top))
        size = (max(1, round(part.get_width() * scale_x)),
                max(1, round(part.get_height() * scale_y)))
        scaled = pygame.transform.scale(part, size)
        dest = (round(x + (src_left - area.x) * scale_x),
                round(y + (src_top - area.y) * scale_y))
        self.surface.blit(scaled, dest)

    def draw_sky(self, player):
        """Draw the sky panorama scrolled by the player's angle."""
        sky = self.assets.sky
        if sky is None:
            return
        width, height = sky.get_size()
        first, second = sky_rects(player.angle, width, height)
        scale_y = (SIZE_Y / 2.0) / height
        self._blit_scaled(sky, (first.left, first.top, first.width, first.height),
                          0, player.pitch, 1.0, scale_y)
        if second is not None:
            self._blit_scaled(sky, (second.left, second.top, second.width, second.height),
                              first.width, player.pitch, 1.0, scale_y)

    def draw_floor(self, pitch):
        """Fill the lower half of the screen, shifted by ``pitch``, with black."""
        top = int(SIZE_Y / 2.0 + pitch)
        self.surface.fill((0, 0, 0), pygame.Rect(0, top, SIZE_X, SIZE_Y // 2))

    def draw_walls(self, slices, pitch, flashlight):
        """Draw one shaded column per wall slice."""
        screen_h = self.surface.get_height()
        for wall in slices:
            shade = flashlight_shade(wall.count, flashlight)
            if shade is not None:
                self._shade = shade
            left, top, width, height = wall_rect(wall.column, wall.height, pitch)
            if math.isfinite(height):
                start = max(0.0, top)
                end = min(float(screen_h), top + height)
            else:
                start, end = 0.0, float(screen_h)
            if end <= start:
                continue
            colour = tuple(self._shade * channel // 255 for channel in self._wall_tint)
            self.surface.fill(colour, pygame.Rect(int(left), int(start), int(width),
                                                  math.ceil(end) - int(start)))

    def draw_enemies(self, manager, player, z_buffer):
        """Draw enemies from farthest to nearest, hidden where a wall is closer."""
        for enemy in manager.draw_order(player):
            screen_x, distance = project_enemy(player, enemy)
            if distance < 0.5 or screen_x < 0 or screen_x >= SIZE_X:
                continue
            if distance >= z_buffer[int(screen_x)]:
                continue
            height = int(TILE_SIZE / distance * (SIZE_X // 2))
            x, y, scale = enemy_placement(enemy, int(screen_x), height, player.pitch)
            texture = self.assets.textures.get(enemy.texture_path)
            if texture is None:
                continue
            rect = enemy.rect
            self._blit_scaled(texture, (rect.left, rect.top, rect.width, rect.height),
                              x, y, scale, scale)

    def draw_weapon(self, weapon):
        """Draw the weapon at the bottom centre, with its flash while it plays."""
        if weapon is None:
            return
        frame = weapon.shoot_anim.current
        size = (frame.width * SHOOTGUN_SIZE, frame.height * SHOOTGUN_SIZE)
        (x, y), (ex_x, ex_y) = weapon_positions(self.surface.get_size(), size)
        flash = weapon.explosion_anim
        ex_texture = self.assets.textures.get(weapon.explosion_path)
        if flash.playing_ex and ex_texture is not None:
            ex = flash.current
            self._blit_scaled(ex_texture, (ex.left, ex.top, ex.width, ex.height),
                              ex_x, ex_y, EX_SIZE, EX_SIZE)
        texture = self.assets.textures.get(weapon.texture_path)
        if texture is not None:
            self._blit_scaled(texture, (frame.left, frame.top, frame.width, frame.height),
                              x, y, SHOOTGUN_SIZE, SHOOTGUN_SIZE)