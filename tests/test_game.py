import pytest

from solong.game import Game, Key, Outcome, collision, list_collision
from solong.mapfile import Collectible, Point, parse_map


def make_game(*lines):
    return Game(parse_map(list(lines)))


def test_collision_same_and_different_cells():
    assert collision(2, 3, 2, 3) is True
    assert collision(2, 3, 3, 2) is False


def test_list_collision_returns_first_match():
    first = Collectible(1, 1)
    second = Collectible(1, 1)
    items = [Point(0, 0), first, second]
    assert list_collision(1, 1, items) is first
    assert list_collision(5, 5, items) is None


def test_raw_keysym_codes_drive_moves():
    game = make_game("11111", "10C01", "10P01", "10E01", "11111")
    assert game.move(119) is Outcome.MOVED
    assert game.player == Point(2, 1)
    assert game.move(65364) is Outcome.MOVED
    assert game.player == Point(2, 2)
    assert game.move(65307) is Outcome.QUIT


def test_move_onto_floor_counts_move():
    game = make_game("111111", "1P0CE1", "111111")
    assert game.move(Key.D) is Outcome.MOVED
    assert game.player == Point(2, 1)
    assert game.moves == 1


def test_move_into_wall_is_blocked():
    game = make_game("11111", "1PCE1", "11111")
    assert game.move(Key.UP) is Outcome.BLOCKED
    assert game.player == Point(1, 1)
    assert game.moves == 0


def test_unknown_key_ignored():
    game = make_game("11111", "1PCE1", "11111")
    assert game.move(ord("q")) is Outcome.IGNORED
    assert game.player == Point(1, 1)


def test_escape_quits():
    game = make_game("11111", "1PCE1", "11111")
    outcome = game.move(Key.ESCAPE)
    assert outcome is Outcome.QUIT
    assert outcome.terminal


def test_enemy_kills_player():
    game = make_game("111111", "1PXCE1", "111111")
    outcome = game.move(Key.RIGHT)
    assert outcome is Outcome.DIED
    assert game.moves == 0


def test_collecting_then_exit_wins():
    game = make_game("11111", "1PCE1", "11111")
    assert not game.ate_everything()
    assert game.move(Key.D) is Outcome.MOVED
    assert game.ate_everything()
    assert game.move(Key.D) is Outcome.WON
    assert game.moves == 1


def test_exit_without_collectibles_is_plain_move():
    game = make_game("11111", "1PEC1", "11111")
    assert game.move(Key.D) is Outcome.MOVED
    assert game.player == game.exit
    assert not Outcome.MOVED.terminal


def test_game_does_not_change_map_collectibles():
    game_map = parse_map(["11111", "1PCE1", "11111"])
    game = Game(game_map)
    game.move(Key.D)
    assert all(item.active for item in game_map.collectibles)
    assert game.ate_everything()


@pytest.mark.parametrize(
    "key, target",
    [(Key.W, Point(2, 1)), (Key.S, Point(2, 3)), (Key.A, Point(1, 2)), (Key.D, Point(3, 2))],
)
def test_each_direction(key, target):
    game = make_game("11111", "10C01", "10P01", "10E01", "11111")
    game.move(key)
    assert game.player == target