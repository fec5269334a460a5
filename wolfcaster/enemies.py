"""Enemies: creation from the map, movement, animation, and being shot."""

import enum
import math
from dataclasses import dataclass, field, replace

from .animation import Rect
from .constants import (
    ANIMATION_SPEED,
    BULLET_DAMAGE,
    BULLET_RADIUS,
    BULLET_RANGE,
    ENEMY_ATTACK_RADIUS,
    ENEMY_CENTER_Z,
    FOV,
    GHOUL_DEATH_FRAMES,
    GHOUL_DEATH_HEIGHT,
    GHOUL_DEATH_SPEED,
    GHOUL_DEATH_TOP,
    GHOUL_FRAMES,
    GHOUL_HEIGHT,
    GHOUL_HP,
    GHOUL_HURT_TIME,
    GHOUL_HURTING,
    GHOUL_ID,
    GHOUL_LEFT_IDLE,
    GHOUL_PATH,
    GHOUL_SCORE,
    GHOUL_SPEED,
    GHOUL_TOP,
    GHOUL_WIDTH,
    MAX_ENEMIES,
    MAX_ENEMY_TYPES,
    MAX_PITCH,
    MY_PI,
    PLAYER_EYE_HEIGHT,
    SIZE_X,
    TILE_SIZE,
)
from .player import PLAYER_ID

_GHOUL_DEATH_WIDTHS = (38, 38, 38, 50, 49, 53, 62, 42)
_FRAME_GAP = 2


class EnemyState(enum.Enum):
    IDLE = enum.auto()
    MOVE = enum.auto()
    ATTACK = enum.auto()
    PAIN = enum.auto()
    DEAD = enum.auto()
    DEAD_ANIM_FINISHED = enum.auto()


@dataclass
class Enemy:
    """An enemy on the map; x and y are pixel positions."""

    id: int
    x: float
    y: float
    hp: int
    speed: float
    rect: Rect
    start_left: int
    frames: int
    texture_path: str
    score: int = 0
    z: float = 0.0
    timer: float = 0.0
    angle: float = 0.0
    death_frame: int = 0
    state: EnemyState = EnemyState.IDLE

    @property
    def position(self):
        return (self.x, self.y)

    def move_towards(self, player, delta_time, game_map):
        """Step toward the player unless the next position is inside a wall."""
        if self.state == EnemyState.DEAD:
            return
        dx = player.x - self.x
        dy = player.y - self.y
        move_x = move_y = 0.0
        if math.hypot(dx, dy) >= 0.1:
            self.angle = math.atan2(dy, dx)
            move_x = math.cos(self.angle) * self.speed * delta_time
            move_y = math.sin(self.angle) * self.speed * delta_time
        next_x = self.x + move_x
        next_y = self.y + move_y
        if game_map.is_wall(int(next_x), int(next_y)):
            return
        self.x = next_x
        self.y = next_y

    def handle_pain(self, delta_time):
        """Show the hurt frame until the hurt time has passed."""
        self.rect = replace(self.rect, left=GHOUL_HURTING)
        self.timer += delta_time
        if self.timer > GHOUL_HURT_TIME:
            self.state = EnemyState.IDLE
            self.timer = 0.0

    def animate(self, delta_time):
        """Advance the idle animation, or the pain animation when hurt."""
        if self.state == EnemyState.PAIN:
            if self.id < MAX_ENEMY_TYPES and self.id in _PAIN_HANDLED:
                self.handle_pain(delta_time)
            if self.state == EnemyState.PAIN:
                return
        self.timer += delta_time
        if self.timer < ANIMATION_SPEED:
            return
        self.timer = 0.0
        stride = self.rect.width + _FRAME_GAP
        left = self.rect.left + stride
        if left >= self.start_left + self.frames * stride:
            left = self.start_left
        self.rect = replace(self.rect, left=left)

    def animate_death(self, delta_time):
        """Advance the death animation; marks it finished after the last frame."""
        self.timer += delta_time
        if self.timer < GHOUL_DEATH_SPEED:
            return
        self.timer = 0.0
        frame = self.death_frame
        left = GHOUL_LEFT_IDLE + sum(
            width + _FRAME_GAP for width in _GHOUL_DEATH_WIDTHS[:frame]
        )
        self.rect = Rect(left, GHOUL_DEATH_TOP, _GHOUL_DEATH_WIDTHS[frame],
                         GHOUL_DEATH_HEIGHT)
        self.death_frame += 1
        if self.death_frame >= GHOUL_DEATH_FRAMES:
            self.death_frame = GHOUL_DEATH_FRAMES - 1
            self.state = EnemyState.DEAD_ANIM_FINISHED

    def is_hit_by_bullet(self, start, end):
        """Whether the segment from ``start`` to ``end`` (3D) passes near the enemy."""
        centre = (self.x, self.y, self.z + ENEMY_CENTER_Z)
        direction = [e - s for s, e in zip(start, end)]
        to_enemy = [c - s for s, c in zip(start, centre)]
        length_sq = sum(d * d for d in direction)
        t = 0.0
        if length_sq:
            t = sum(a * b for a, b in zip(to_enemy, direction)) / length_sq
            t = max(0.0, min(1.0, t))
        closest = [s + d * t for s, d in zip(start, direction)]
        dist_sq = sum((p - c) ** 2 for p, c in zip(closest, centre))
        return dist_sq < BULLET_RADIUS * BULLET_RADIUS


_PAIN_HANDLED = frozenset({GHOUL_ID})


def create_ghoul(position):
    """A ghoul standing at pixel ``position``."""
    x, y = position
    return Enemy(
        id=GHOUL_ID,
        x=float(x),
        y=float(y),
        hp=GHOUL_HP,
        speed=GHOUL_SPEED,
        rect=Rect(GHOUL_LEFT_IDLE, GHOUL_TOP, GHOUL_WIDTH, GHOUL_HEIGHT),
        start_left=GHOUL_LEFT_IDLE,
        frames=GHOUL_FRAMES,
        texture_path=GHOUL_PATH,
        score=GHOUL_SCORE,
    )


_ENEMY_TYPES = {GHOUL_ID: create_ghoul}


def create_enemy(tile_id, position):
    """The enemy for map tile ``tile_id``, or None if no enemy has that id."""
    factory = _ENEMY_TYPES.get(tile_id)
    return factory(position) if factory else None


def is_player_hit(enemy, player):
    """Whether the enemy is within attack range of the player."""
    if enemy is None:
        return False
    dx = enemy.x - player.x
    dy = enemy.y - player.y
    return dx * dx + dy * dy < ENEMY_ATTACK_RADIUS * ENEMY_ATTACK_RADIUS


def project_enemy(player, enemy):
    """Return (screen_x, distance) of the enemy as seen by the player."""
    dx = enemy.x - player.x
    dy = enemy.y - player.y
    angle = math.atan2(dy, dx) - player.angle
    angle = math.fmod(angle + 3 * MY_PI, 2 * MY_PI) - MY_PI
    distance = math.hypot(dx, dy)
    screen_x = (angle + FOV / 2) * SIZE_X / FOV
    return screen_x, distance


@dataclass
class EnemyManager:
    """Fixed slots of enemies; a removed enemy leaves its slot as None."""

    enemies: list = field(default_factory=list)

    @property
    def count(self):
        return len(self.enemies)

    def __iter__(self):
        return (enemy for enemy in self.enemies if enemy is not None)

    @classmethod
    def from_map(cls, game_map):
        """Create an enemy for every enemy tile of the map, up to MAX_ENEMIES."""
        manager = cls()
        for row, line in enumerate(game_map.tiles):
            for col, tile_id in enumerate(line):
                if tile_id == PLAYER_ID or tile_id <= 1:
                    continue
                if manager.count >= MAX_ENEMIES:
                    continue
                position = (col * TILE_SIZE + TILE_SIZE // 2,
                            row * TILE_SIZE + TILE_SIZE // 2)
                enemy = create_enemy(tile_id, position)
                if enemy is not None:
                    manager.enemies.append(enemy)
        return manager

    def update(self, player, delta_time, game_map):
        """Move and animate living enemies and let those in range hurt the player."""
        for enemy in self:
            if enemy.state != EnemyState.DEAD:
                enemy.move_towards(player, delta_time, game_map)
                enemy.animate(delta_time)
            if is_player_hit(enemy, player):
                player.take_damage()

    def draw_order(self, player):
        """Enemies sorted from farthest to nearest the player."""
        def distance_sq(enemy):
            return (enemy.x - player.x) ** 2 + (enemy.y - player.y) ** 2

        return sorted(self, key=distance_sq, reverse=True)

    def cleanup_dead(self):
        """Free the slots of enemies whose death animation is over; returns them."""
        removed = []
        for index, enemy in enumerate(self.enemies):
            if enemy is not None and enemy.state == EnemyState.DEAD_ANIM_FINISHED:
                removed.append(enemy)
                self.enemies[index] = None
        return removed


def shoot_bullet(player, manager):
    """Fire along the player's view; damages every enemy on the line and returns them."""
    vertical = MAX_PITCH * (MY_PI / 180.0)
    horizontal = player.angle
    direction = (
        math.cos(horizontal) * math.cos(vertical),
        math.sin(horizontal) * math.cos(vertical),
        math.sin(vertical),
    )
    start = (player.x, player.y, PLAYER_EYE_HEIGHT)
    end = tuple(s + d * BULLET_RANGE for s, d in zip(start, direction))
    hit = []
    for enemy in manager:
        if enemy.state == EnemyState.DEAD_ANIM_FINISHED:
            continue
        if not enemy.is_hit_by_bullet(start, end):
            continue
        hit.append(enemy)
        enemy.hp -= BULLET_DAMAGE
        if enemy.hp <= 0:
            enemy.state = EnemyState.DEAD
        else:
            enemy.state = EnemyState.PAIN
            enemy.timer = 0.0
    return hit