"""The player: position, view direction, movement and health."""

import enum
import math
from dataclasses import dataclass, field

from .animation import make_weapons
from .constants import (
    ENEMY_DAMAGE,
    MAX_PITCH,
    MIN_PITCH,
    MOVE_SPEED,
    MY_PI,
    PITCH_SPEED,
    PLAYER_DEAD,
    PLAYER_HP,
    PLAYER_INVINCIBILITY,
    ROT_SPEED,
)
from .save import SAVE_PATH, SaveData, SaveError, load_save

PLAYER_ID = 2


class Action(enum.Enum):
    """Player controls, in the order they are applied each frame."""

    MOVE_LEFT = enum.auto()
    MOVE_RIGHT = enum.auto()
    MOVE_FORWARD = enum.auto()
    MOVE_BACKWARD = enum.auto()
    ROTATE_LEFT = enum.auto()
    ROTATE_RIGHT = enum.auto()
    LOOK_UP = enum.auto()
    LOOK_DOWN = enum.auto()


@dataclass
class Player:
    """Player state; x and y are pixel positions on the map."""

    x: float
    y: float
    hp: int = PLAYER_HP
    score: int = 0
    angle: float = 0.0
    pitch: float = 0.0
    weapons: list = field(default_factory=list)
    invincibility_timer: float = PLAYER_INVINCIBILITY

    @property
    def weapon(self):
        """The weapon in hand, or None."""
        return self.weapons[0] if self.weapons else None

    def _try_move(self, direction, game_map):
        x = self.x + math.cos(direction) * MOVE_SPEED
        y = self.y + math.sin(direction) * MOVE_SPEED
        if not game_map.is_wall(x, y):
            self.x = x
            self.y = y

    def move_forward(self, game_map):
        self._try_move(self.angle, game_map)

    def move_backward(self, game_map):
        self._try_move(self.angle + MY_PI, game_map)

    def move_left(self, game_map):
        self._try_move(self.angle - MY_PI / 2, game_map)

    def move_right(self, game_map):
        self._try_move(self.angle + MY_PI / 2, game_map)

    def rotate_left(self):
        self.angle -= ROT_SPEED

    def rotate_right(self):
        self.angle += ROT_SPEED

    def look_up(self):
        self.pitch = min(self.pitch + PITCH_SPEED, MAX_PITCH)

    def look_down(self):
        self.pitch = max(self.pitch - PITCH_SPEED, MIN_PITCH)

    def wrap_angle(self):
        """Bring the angle back by one turn if it left [0, 2*pi]."""
        if self.angle < 0:
            self.angle += 2 * MY_PI
        elif self.angle > 2 * MY_PI:
            self.angle -= 2 * MY_PI

    def apply(self, action, game_map):
        """Perform one control action."""
        handlers = {
            Action.MOVE_LEFT: lambda: self.move_left(game_map),
            Action.MOVE_RIGHT: lambda: self.move_right(game_map),
            Action.MOVE_FORWARD: lambda: self.move_forward(game_map),
            Action.MOVE_BACKWARD: lambda: self.move_backward(game_map),
            Action.ROTATE_LEFT: self.rotate_left,
            Action.ROTATE_RIGHT: self.rotate_right,
            Action.LOOK_UP: self.look_up,
            Action.LOOK_DOWN: self.look_down,
        }
        handlers[action]()

    def update(self, actions, game_map, delta_time):
        """Apply the active actions in control order and tick the invincibility timer."""
        active = set(actions)
        for action in Action:
            if action in active:
                self.apply(action, game_map)
        if self.invincibility_timer > 0:
            self.invincibility_timer -= delta_time
        self.wrap_angle()

    def take_damage(self):
        """Lose health unless invincible; returns the remaining hp or PLAYER_DEAD."""
        if self.invincibility_timer <= 0:
            self.hp -= ENEMY_DAMAGE
            if self.hp == PLAYER_DEAD:
                return PLAYER_DEAD
            self.invincibility_timer = PLAYER_INVINCIBILITY
        return self.hp

    def to_save(self):
        return SaveData(hp=self.hp, score=self.score, x=self.x, y=self.y)


def create_player(game_map, save_path=SAVE_PATH):
    """Create the player from the save file, or at the map's start tile."""
    try:
        data = load_save(save_path)
    except SaveError:
        x, y = game_map.search_position(PLAYER_ID)
        data = SaveData(hp=PLAYER_HP, score=0, x=x, y=y)
    return Player(
        x=data.x,
        y=data.y,
        hp=data.hp,
        score=data.score,
        weapons=make_weapons(),
    )