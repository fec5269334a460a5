"""The game loop: window, input handling, per-frame update and shutdown."""

import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .constants import GHOUL_SCORE, MUSIC_PATH, MUSIC_VOLUME, SIZE_X, SIZE_Y  # noqa: E402
from .constants import SOUND_SHOOTGUN_PATH  # noqa: E402
from .enemies import EnemyManager, EnemyState, shoot_bullet  # noqa: E402
from .mapdata import load_map  # noqa: E402
from .player import Action, create_player  # noqa: E402
from .raycast import cast_all_rays  # noqa: E402
from .render import Assets, Renderer  # noqa: E402
from .save import SAVE_PATH, SaveError, write_save  # noqa: E402

_FRAMERATE = 60
_CAPTION = "wolfcaster"

_KEY_ACTIONS = {
    pygame.K_q: Action.MOVE_LEFT,
    pygame.K_d: Action.MOVE_RIGHT,
    pygame.K_z: Action.MOVE_FORWARD,
    pygame.K_s: Action.MOVE_BACKWARD,
    pygame.K_LEFT: Action.ROTATE_LEFT,
    pygame.K_RIGHT: Action.ROTATE_RIGHT,
    pygame.K_UP: Action.LOOK_UP,
    pygame.K_DOWN: Action.LOOK_DOWN,
}


def check_arguments(argv, environ):
    """Raise ValueError unless there are no arguments and a display is available."""
    if argv:
        raise ValueError(f"Usage: {_CAPTION} (no arguments expected)")
    if "DISPLAY" not in environ:
        raise ValueError("Error: DISPLAY environment variable is not set.")


class Game:
    """Everything one running game needs: map, player, enemies and drawing."""

    def __init__(self, game_map, player, enemies, surface=None, assets=None, *,
                 sound=None, music=False, save_path=SAVE_PATH, owns_display=False):
        self.game_map = game_map
        self.player = player
        self.enemies = enemies
        self.surface = surface if surface is not None else pygame.Surface((SIZE_X, SIZE_Y))
        self.renderer = Renderer(self.surface, assets)
        self.sound = sound
        self.music = music
        self.save_path = save_path
        self.flashlight = False
        self.running = True
        self.actions = set()
        self._owns_display = owns_display
        self._music_paused = False
        self._closed = False

    def handle_enemy_deaths(self, delta_time):
        """Play death animations and remove finished enemies, scoring each; returns them."""
        removed = []
        for index, enemy in enumerate(self.enemies.enemies):
            if enemy is None:
                continue
            if enemy.state == EnemyState.DEAD:
                enemy.animate_death(delta_time)
            if enemy.state == EnemyState.DEAD_ANIM_FINISHED:
                self.enemies.enemies[index] = None
                self.player.score += GHOUL_SCORE
                print(f"YOUR SCORE: {self.player.score}")
                removed.append(enemy)
        return removed

    def toggle_flashlight(self):
        """Switch the flashlight; returns whether it is now on."""
        self.flashlight = not self.flashlight
        return self.flashlight

    def fire(self):
        """Shoot if the weapon is ready; returns the enemies hit."""
        weapon = self.player.weapon
        if weapon is None or weapon.shoot_anim.playing:
            return []
        hit = shoot_bullet(self.player, self.enemies)
        weapon.shoot_anim.start()
        weapon.explosion_anim.start()
        if self.sound is not None:
            self.sound.play()
        return hit

    def _toggle_music(self):
        if not self.music:
            return
        if self._music_paused:
            pygame.mixer.music.unpause()
        else:
            pygame.mixer.music.pause()
        self._music_paused = not self._music_paused

    def handle_events(self):
        """Process pending window, keyboard and mouse events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_f:
                    self.toggle_flashlight()
                elif event.key == pygame.K_p:
                    self._toggle_music()
                action = _KEY_ACTIONS.get(event.key)
                if action is not None:
                    self.actions.add(action)
            elif event.type == pygame.KEYUP:
                action = _KEY_ACTIONS.get(event.key)
                if action is not None:
                    self.actions.discard(action)
            left_click = event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
            if left_click or pygame.mouse.get_pressed()[0]:
                self.fire()

    def frame(self, delta_time):
        """Update the game by ``delta_time`` seconds and draw the result."""
        player = self.player
        self.surface.fill((0, 0, 0))
        self.renderer.draw_sky(player)
        self.renderer.draw_floor(player.pitch)
        player.update(self.actions, self.game_map, delta_time)
        self.handle_enemy_deaths(delta_time)
        slices = cast_all_rays(self.game_map, player.x, player.y, player.angle)
        z_buffer = [wall.distance for wall in slices]
        self.renderer.draw_walls(slices, player.pitch, self.flashlight)
        self.enemies.update(player, delta_time, self.game_map)
        self.renderer.draw_enemies(self.enemies, player, z_buffer)
        self.enemies.cleanup_dead()
        weapon = player.weapon
        if weapon is not None:
            weapon.shoot_anim.update_shoot(delta_time)
            weapon.explosion_anim.update_explosion(delta_time)
            self.renderer.draw_weapon(weapon)

    def run(self):
        """Run frames until the window closes, then save and shut down."""
        clock = pygame.time.Clock()
        while self.running:
            delta_time = clock.tick(_FRAMERATE) / 1000.0
            self.handle_events()
            if not self.running:
                break
            self.frame(delta_time)
            if pygame.display.get_surface() is self.surface:
                pygame.display.flip()
        try:
            write_save(self.player.to_save(), self.save_path)
        except SaveError as exc:
            print(f"Error: {exc}", file=sys.stderr)
        self.close()

    def close(self):
        """Stop the game and release audio and the window."""
        self.running = False
        if self._closed:
            return
        self._closed = True
        if self.music and pygame.mixer.get_init():
            pygame.mixer.music.stop()
        if self._owns_display:
            pygame.quit()


def _start_music():
    if not pygame.mixer.get_init():
        return False
    try:
        pygame.mixer.music.load(MUSIC_PATH)
    except (pygame.error, OSError):
        return False
    pygame.mixer.music.set_volume(MUSIC_VOLUME / 100.0)
    pygame.mixer.music.play(-1)
    return True


def _load_sound():
    if not pygame.mixer.get_init():
        return None
    try:
        return pygame.mixer.Sound(SOUND_SHOOTGUN_PATH)
    except (pygame.error, OSError):
        return None


def _create_game():
    pygame.init()
    surface = pygame.display.set_mode((SIZE_X, SIZE_Y), pygame.RESIZABLE)
    pygame.display.set_caption(_CAPTION)
    assets = Assets.load()
    game_map = load_map()
    player = create_player(game_map)
    enemies = EnemyManager.from_map(game_map)
    return Game(game_map, player, enemies, surface, assets,
                sound=_load_sound(), music=_start_music(), owns_display=True)


def main(argv=None):
    """Start the game; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        check_arguments(args, os.environ)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    game = _create_game()
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())