import pygame
import pytest

from wolfcaster.animation import make_weapons
from wolfcaster.constants import BULLET_DAMAGE, GHOUL_HP, GHOUL_SCORE, ROT_SPEED
from wolfcaster.enemies import EnemyManager, EnemyState
from wolfcaster.game import Game, check_arguments, main
from wolfcaster.mapdata import default_map
from wolfcaster.player import Action, Player
from wolfcaster.save import load_save


class _CountingSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


@pytest.fixture
def game(tmp_path):
    game_map = default_map()
    player = Player(x=224.0, y=416.0, weapons=make_weapons())
    enemies = EnemyManager.from_map(game_map)
    return Game(game_map, player, enemies, sound=_CountingSound(),
                save_path=tmp_path / "game.save")


def _target(game):
    return max(game.enemies, key=lambda enemy: enemy.x)


@pytest.fixture
def display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    pygame.display.set_mode((64, 64))
    pygame.event.clear()
    yield
    pygame.display.quit()


def test_check_arguments_rejects_arguments():
    with pytest.raises(ValueError, match="no arguments expected"):
        check_arguments(["extra"], {"DISPLAY": ":0"})


def test_check_arguments_requires_display():
    with pytest.raises(ValueError, match="DISPLAY"):
        check_arguments([], {})


def test_main_fails_with_arguments(capsys):
    assert main(["extra"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_fails_without_display(monkeypatch, capsys):
    monkeypatch.delenv("DISPLAY", raising=False)
    assert main([]) == 1
    assert "DISPLAY environment variable is not set" in capsys.readouterr().err


def test_toggle_flashlight(game):
    assert game.flashlight is False
    assert game.toggle_flashlight() is True
    assert game.toggle_flashlight() is False


def test_fire_hits_enemy_in_front(game):
    target = _target(game)
    hit = game.fire()
    assert hit == [target]
    assert target.hp == GHOUL_HP - BULLET_DAMAGE
    assert target.state == EnemyState.PAIN
    assert game.sound.plays == 1
    assert game.player.weapon.shoot_anim.playing
    assert game.player.weapon.explosion_anim.playing_ex


def test_fire_waits_for_animation(game):
    game.fire()
    target = _target(game)
    hp = target.hp
    assert game.fire() == []
    assert target.hp == hp
    assert game.sound.plays == 1


def test_enemy_death_scores(game, capsys):
    target = _target(game)
    target.state = EnemyState.DEAD
    removed = []
    for _ in range(20):
        removed = game.handle_enemy_deaths(1.0)
        if removed:
            break
    assert removed == [target]
    assert game.player.score == GHOUL_SCORE
    assert target not in list(game.enemies)
    assert f"YOUR SCORE: {GHOUL_SCORE}" in capsys.readouterr().out


def test_frame_applies_actions(game):
    game.actions = {Action.ROTATE_RIGHT}
    timer = game.player.invincibility_timer
    game.frame(0.016)
    assert game.player.angle == pytest.approx(ROT_SPEED)
    assert game.player.invincibility_timer == pytest.approx(timer - 0.016)


def test_frame_moves_enemies_closer(game):
    target = _target(game)
    before = abs(target.x - game.player.x)
    game.frame(0.1)
    assert abs(target.x - game.player.x) < before


def test_frame_advances_weapon_animation(game):
    game.fire()
    anim = game.player.weapon.shoot_anim
    game.frame(anim.frame_duration)
    assert anim.current_frame == 1


def test_close_stops_running(game):
    game.close()
    assert game.running is False
    game.close()
    assert game.running is False


def test_run_writes_save(game):
    game.player.hp = 2
    game.player.score = 30
    game.close()
    game.run()
    assert load_save(game.save_path) == game.player.to_save()


def test_handle_events_quit(game, display):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.handle_events()
    assert game.running is False


def test_handle_events_escape(game, display):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    game.handle_events()
    assert game.running is False


def test_handle_events_flashlight_key(game, display):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_f))
    game.handle_events()
    assert game.flashlight is True


def test_handle_events_tracks_movement_keys(game, display):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_z))
    game.handle_events()
    assert game.actions == {Action.MOVE_FORWARD}
    pygame.event.post(pygame.event.Event(pygame.KEYUP, key=pygame.K_z))
    game.handle_events()
    assert game.actions == set()