"""Game-wide constants: screen, map, player, weapons and enemies."""

# Screen and map size
SIZE_X = 1920
SIZE_Y = 1080
DEFAULT_MAP = 8

# Raycasting
IS_WALL = 1
IS_EMPTY = 0
SHORTER_PATH = 1
LONGER_PATH = -1
MY_PI = 3.14159265
NO_WALL_FOUND = 2147483647
FOV = 60.0 * (MY_PI / 180.0)

# Map
MAP_WIDTH = 24
TILE_SIZE = 64
MAP_HEIGHT = 24
NUM_RAYS = SIZE_X
MAP_PATH = "map.txt"

# Player movement
MOVE_SPEED = 2
ROT_SPEED = 0.03

# Parsing
STR_SIZE = 64

# Effects
MUSIC_VOLUME = 20
MUSIC_PATH = "assets/music/doom.mp3"
SOUND_SHOOTGUN_PATH = "assets/sound/shootgun_sound.mp3"

# Weapons
NB_FRAMES_EX = 7
FRAMES_EX_TIME = 0.05
WEAPON_POS_HEIGHT = 0.0

EX_SIZE = 15
WEAPON_EX_TOP = 10
WEAPON_EX_LEFT = 10
WEAPON_EX_WIDTH = 31
WEAPON_EX_HEIGHT = 21

BULLET_DAMAGE = 5
SHOOTGUN_LEFT = 72
SHOOTGUN_TOP = 162
SHOOTGUN_SIZE = 4.1
NB_FRAMES_SHOOT = 8
BULLET_RADIUS = 10.0
SHOOTGUN_WIDTH = 232
SHOOTGUN_HEIGHT = 161
BULLET_RANGE = 1000.0
FRAME_SHOOTGUN_TIME = 0.1

NB_WEAPONS = 1
PATH_SHOOTGUN = "assets/weapons/shootgun.png"
PATH_EX = "assets/weapons/effects/weapon_explosion.png"
WEAPON_PATHS = (PATH_SHOOTGUN,)
WEAPON_NAMES = ("shootgun",)

# Walls
DARK = 50
MAX_LIGHT = 255
DARK_RAYS = 285
MIDDLE = 640
MIDDLE_R = 895
LIT_RAYS = 100
FADE_GAP = DARK_RAYS - LIT_RAYS
TEXTURE_WALL = "assets/walls/wall.png"
BRICK_WALL_PATH = "assets/walls/brick_wall.png"
SKY_PATH = "assets/background/sky.png"

# Player
PLAYER_EYE_HEIGHT = 0.5
PITCH_SPEED = 5
MIN_PITCH = -350
MAX_PITCH = 0
PLAYER_HP = 3
PLAYER_DEAD = -1
PLAYER_INVINCIBILITY = 2

# Enemies
ENEMY_HEIGHT = 1.0
ENEMY_CENTER_Z = ENEMY_HEIGHT / 2.0
MAX_ENEMY_TYPES = 4
ENEMY_ATTACK_RADIUS = 20.0
ENEMY_DAMAGE = 1
ANIMATION_SPEED = 0.2

# Ghoul
GHOUL_ID = 3
GHOUL_HP = 10
GHOUL_FRAMES = 3
MAX_ENEMIES = 10
GHOUL_SCORE = 10
GHOUL_SPEED = 20.0
GHOUL_HURT_TIME = 0.4
GHOUL_PATH = "assets/enemies/Ghoul.png"

GHOUL_DEATH = 0
GHOUL_HURTING = 296
GHOUL_LEFT_IDLE = 2
GHOUL_ATTACKING = 128

GHOUL_TOP = 16
GHOUL_WIDTH = 40
GHOUL_HEIGHT = 40

GHOUL_DEATH_TOP = 236
GHOUL_DEATH_FRAMES = 8
GHOUL_DEATH_HEIGHT = 63
GHOUL_DEATH_SPEED = 0.1