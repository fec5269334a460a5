"""Weapon sprite-sheet animations and weapon construction."""

import enum
from dataclasses import dataclass, field

from .constants import (
    FRAME_SHOOTGUN_TIME,
    FRAMES_EX_TIME,
    NB_FRAMES_EX,
    NB_FRAMES_SHOOT,
    PATH_EX,
    PATH_SHOOTGUN,
    SHOOTGUN_HEIGHT,
    SHOOTGUN_LEFT,
    SHOOTGUN_TOP,
    SHOOTGUN_WIDTH,
    WEAPON_EX_HEIGHT,
    WEAPON_EX_WIDTH,
    WEAPON_NAMES,
)


@dataclass(frozen=True)
class Rect:
    """An area of a texture, in pixels."""

    left: int
    top: int
    width: int
    height: int


@dataclass
class Animation:
    """Frame sequence with timing state for the shot and the muzzle flash."""

    frames: list
    frame_duration: float
    current_frame: int = 0
    elapsed: float = 0.0
    playing: bool = False
    playing_ex: bool = False

    @property
    def frame_count(self):
        return len(self.frames)

    @property
    def current(self):
        """The frame currently shown."""
        return self.frames[self.current_frame]

    def start(self):
        """Restart from the first frame; returns that frame."""
        self.playing = True
        self.playing_ex = True
        self.current_frame = 0
        self.elapsed = 0.0
        return self.frames[0]

    def _advance(self, delta_time):
        self.elapsed += delta_time
        if self.elapsed < self.frame_duration:
            return False
        self.elapsed = 0.0
        self.current_frame += 1
        return True

    def update_shoot(self, delta_time):
        """Advance the shot animation; returns the frame to show, or None if idle."""
        if not self.playing:
            return None
        if self._advance(delta_time) and self.current_frame >= self.frame_count:
            self.current_frame = 0
            self.playing = False
        return self.current

    def update_explosion(self, delta_time):
        """Advance the flash animation; returns the frame to show, or None once done."""
        if not self.playing_ex:
            return None
        if self._advance(delta_time) and self.current_frame >= self.frame_count:
            self.current_frame = 0
            self.playing_ex = False
            return None
        return self.current


class WeaponState(enum.Enum):
    IDLE = enum.auto()
    SHOOTING = enum.auto()
    EXPLODING = enum.auto()


@dataclass
class Weapon:
    """A weapon with its textures and its two animations."""

    name: str
    texture_path: str
    explosion_path: str
    shoot_anim: Animation
    explosion_anim: Animation
    state: WeaponState = WeaponState.IDLE
    munitions: int = field(default=0)


def explosion_animation():
    """The muzzle-flash animation: frames side by side with a 1 px gap."""
    frames = [
        Rect(i * (WEAPON_EX_WIDTH + 1), 0, WEAPON_EX_WIDTH, WEAPON_EX_HEIGHT)
        for i in range(NB_FRAMES_EX)
    ]
    return Animation(frames, FRAMES_EX_TIME)


def shotgun_animation():
    """The shotgun animation: frames stacked vertically with a 1 px gap."""
    frames = [
        Rect(SHOOTGUN_LEFT, i * SHOOTGUN_TOP + i, SHOOTGUN_WIDTH, SHOOTGUN_HEIGHT)
        for i in range(NB_FRAMES_SHOOT)
    ]
    return Animation(frames, FRAME_SHOOTGUN_TIME)


def make_shotgun():
    return Weapon(
        name="shootgun",
        texture_path=PATH_SHOOTGUN,
        explosion_path=PATH_EX,
        shoot_anim=shotgun_animation(),
        explosion_anim=explosion_animation(),
    )


_FACTORY = {"shootgun": make_shotgun}


def make_weapons():
    """Build every known weapon, in the configured order."""
    return [_FACTORY[name]() for name in WEAPON_NAMES if name in _FACTORY]