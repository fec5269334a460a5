import pytest

from wolfcaster.constants import (
    MAX_PITCH,
    MIN_PITCH,
    MY_PI,
    PLAYER_DEAD,
    PLAYER_HP,
    PLAYER_INVINCIBILITY,
    ROT_SPEED,
    TILE_SIZE,
)
from wolfcaster.mapdata import default_map
from wolfcaster.player import PLAYER_ID, Action, Player, create_player
from wolfcaster.save import SaveData, write_save


@pytest.fixture
def game_map():
    return default_map()


@pytest.fixture
def player(game_map):
    x, y = game_map.search_position(PLAYER_ID)
    return Player(x=x, y=y)


def test_move_forward_east(player, game_map):
    x0, y0 = player.x, player.y
    player.move_forward(game_map)
    assert player.x > x0
    assert player.y == pytest.approx(y0)


def test_forward_backward_round_trip(player, game_map):
    x0, y0 = player.x, player.y
    player.move_forward(game_map)
    player.move_backward(game_map)
    assert (player.x, player.y) == pytest.approx((x0, y0))


def test_left_right_round_trip(player, game_map):
    player.angle = 0.7
    x0, y0 = player.x, player.y
    player.move_left(game_map)
    player.move_right(game_map)
    assert (player.x, player.y) == pytest.approx((x0, y0), abs=1e-6)


def test_wall_blocks_movement(player, game_map):
    player.angle = -MY_PI / 2
    for _ in range(100):
        player.move_forward(game_map)
    assert TILE_SIZE <= player.y < 2 * TILE_SIZE


def test_rotation_round_trip(player):
    player.rotate_left()
    assert player.angle == pytest.approx(-ROT_SPEED)
    player.rotate_right()
    assert player.angle == pytest.approx(0.0)


def test_pitch_is_clamped(player):
    for _ in range(10):
        player.look_up()
    assert player.pitch == MAX_PITCH
    for _ in range(200):
        player.look_down()
    assert player.pitch == MIN_PITCH


@pytest.mark.parametrize("angle", [-0.1, 7.0])
def test_wrap_angle(player, angle):
    player.angle = angle
    player.wrap_angle()
    assert 0 <= player.angle <= 2 * MY_PI
    assert player.angle == pytest.approx(angle % (2 * MY_PI))


def test_update_applies_actions_and_ticks_timer(player, game_map):
    player.update({Action.ROTATE_RIGHT, Action.LOOK_DOWN}, game_map, 0.5)
    assert player.angle == pytest.approx(ROT_SPEED)
    assert player.pitch < 0
    assert player.invincibility_timer == pytest.approx(PLAYER_INVINCIBILITY - 0.5)


def test_update_wraps_angle(player, game_map):
    player.update([Action.ROTATE_LEFT], game_map, 0.0)
    assert player.angle == pytest.approx(2 * MY_PI - ROT_SPEED)


def test_damage_blocked_while_invincible(player):
    assert player.take_damage() == PLAYER_HP
    assert player.hp == PLAYER_HP


def test_damage_when_vulnerable(player):
    player.invincibility_timer = 0
    assert player.take_damage() == PLAYER_HP - 1
    assert player.invincibility_timer == PLAYER_INVINCIBILITY


def test_damage_to_death(player):
    player.hp = 0
    player.invincibility_timer = 0
    assert player.take_damage() == PLAYER_DEAD
    assert player.invincibility_timer == 0


def test_create_player_without_save(game_map, tmp_path):
    player = create_player(game_map, tmp_path / "missing.save")
    assert (player.x, player.y) == game_map.search_position(PLAYER_ID)
    assert player.hp == PLAYER_HP
    assert player.score == 0
    assert player.weapon.name == "shootgun"
    assert player.invincibility_timer == PLAYER_INVINCIBILITY


def test_create_player_from_save(game_map, tmp_path):
    path = tmp_path / "game.save"
    write_save(SaveData(hp=2, score=40, x=100.5, y=200.25), path)
    player = create_player(game_map, path)
    assert player.to_save() == SaveData(hp=2, score=40, x=100.5, y=200.25)
    assert player.angle == 0.0
    assert player.pitch == 0.0