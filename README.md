# wolfcaster

A small first-person shooter drawn with a classic grid raycaster. You walk a
tile map, hunt ghouls with a shotgun, and can switch a flashlight on to light
the walls in front of you.

## Installing

```
pip install .
```

The game needs a graphical display: it refuses to start when the `DISPLAY`
environment variable is not set.

## Playing

```
wolfcaster
```

The command takes no arguments; given any, it prints a usage message and
exits with status 1.

| Key          | Action                      |
|--------------|-----------------------------|
| Z / S        | move forward / backward     |
| Q / D        | strafe left / right         |
| Left / Right | turn                        |
| Up / Down    | look up / down              |
| Left mouse   | fire the shotgun            |
| F            | toggle the flashlight       |
| P            | pause or resume the music   |
| Escape       | quit                        |

A shot can only be fired once the previous shot's animation has finished.
Each ghoul takes two shots; when its death animation ends, 10 points are added
to your score and `YOUR SCORE: <n>` is printed. A ghoul that comes within
reach takes one hit point from you, after which you are invincible for two
seconds.

## What the game does not do

There is no menu and no game-over screen: losing all your hit points does not
end the game. The only way out is Escape or closing the window.

## Maps

At start-up the game reads `map.txt` from the current directory. Each line is
one row of tiles written as numbers separated by commas or spaces; empty lines
and lines starting with `#` are skipped. The width of the map is the number of
numeric entries in its first row.

- `0`: empty floor
- `1`: wall
- `2`: the player's starting tile
- `3`: a ghoul (at most 10 are placed)

If `map.txt` is missing, cannot be read or holds no map rows, a built-in 8×8
map is used (`wolfcaster.mapdata.default_map`).

## Saves

When the game quits, your hit points, score and position are written to
`game.save` in the current directory:

```
#hp 3
#score 20
#position 96.00 352.00
```

The next start picks them up from there. If the file is missing or malformed,
you start with full health and no score on the map's start tile.

## Assets

Textures and sounds are loaded from an `assets/` directory in the directory
the game is started from: `assets/walls/brick_wall.png`,
`assets/background/sky.png`, `assets/enemies/Ghoul.png`,
`assets/weapons/shootgun.png`, `assets/weapons/effects/weapon_explosion.png`,
`assets/music/doom.mp3` and `assets/sound/shootgun_sound.mp3`. Any that are
missing are simply not drawn or played.

## Using the pieces

The game logic runs without a window. `wolfcaster.mapdata.load_map` builds a
`GameMap`, `wolfcaster.raycast.cast_ray` casts one ray through it and returns a
`RayHit`, `wolfcaster.player.create_player` places the player, and
`wolfcaster.enemies.EnemyManager.from_map` places the enemies the map
describes:

```python
from wolfcaster.mapdata import default_map
from wolfcaster.raycast import cast_ray

game_map = default_map()
hit = cast_ray(game_map, 96.0, 96.0, 0.0)
print(hit.distance)
```