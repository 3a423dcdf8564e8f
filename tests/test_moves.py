"""Tests for movement, dice and turn-order rules."""

import random
from collections import Counter

from snakes_ladders.board import BOARD_SIZE, DEFAULT_LADDERS, DEFAULT_SNAKES, Ladder, Snake
from snakes_ladders.moves import (
    check_win_condition,
    move_player,
    next_player_index,
    roll_dice,
)
from snakes_ladders.players import Player, PlayerStats


def _player(position: int = 1, **kw) -> Player:
    return Player(id=1, name="Alice", position=position, **kw)


def _move(position: int, dice: int):
    return move_player(_player(position), dice, DEFAULT_SNAKES, DEFAULT_LADDERS)


# ── move_player ──────────────────────────────────────────────────────

def test_plain_move():
    r = _move(10, 2)
    assert r.player.position == 12
    assert not r.snake_bite
    assert not r.ladder_climb


def test_snake_bite():
    """95 + 3 = 98 → snake to 78."""
    r = _move(95, 3)
    assert r.player.position == 78
    assert r.snake_bite
    assert r.player.stats.snake_bites == 1


def test_ladder_climb():
    """1 + 3 = 4 → ladder to 14."""
    r = _move(1, 3)
    assert r.player.position == 14
    assert r.ladder_climb
    assert r.player.stats.ladder_climbs == 1


def test_overshoot_clamps_to_board_size():
    r = _move(97, 6)
    assert r.player.position == BOARD_SIZE


def test_clamped_move_ignores_transitions():
    """A snake on the last square is not taken when the move is clamped."""
    r = move_player(_player(97), 6, [Snake(100, 50)], [])
    assert r.player.position == BOARD_SIZE
    assert not r.snake_bite


def test_floor_clamp():
    r = _move(2, -5)
    assert r.player.position == 1


def test_zero_roll_at_start_stays_put():
    r = move_player(_player(1), 0, [], [])
    assert r.player.position == 1


def test_positions_stay_in_bounds():
    for p in range(1, BOARD_SIZE + 1):
        for d in range(-6, 7):
            pos = _move(p, d).player.position
            assert 1 <= pos <= BOARD_SIZE


def test_snake_then_ladder_chains():
    r = move_player(_player(10), 5, [Snake(15, 8)], [Ladder(8, 30)])
    assert r.player.position == 30
    assert r.snake_bite and r.ladder_climb
    assert r.player.stats.snake_bites == 1
    assert r.player.stats.ladder_climbs == 1


def test_ladder_onto_snake_does_not_chain():
    r = move_player(_player(10), 5, [Snake(30, 2)], [Ladder(15, 30)])
    assert r.player.position == 30
    assert r.ladder_climb
    assert not r.snake_bite


def test_first_matching_snake_wins():
    r = move_player(_player(10), 5, [Snake(15, 3), Snake(15, 9)], [])
    assert r.player.position == 3


def test_roll_counters_untouched():
    stats = PlayerStats(total_rolls=4, total_dice_value=13)
    r = move_player(_player(10, stats=stats), 3, DEFAULT_SNAKES, DEFAULT_LADDERS)
    assert r.player.stats.total_rolls == 4
    assert r.player.stats.total_dice_value == 13


def test_input_player_not_mutated():
    p = _player(95)
    move_player(p, 3, DEFAULT_SNAKES, DEFAULT_LADDERS)
    assert p.position == 95
    assert p.stats.snake_bites == 0


# ── win / turn order ─────────────────────────────────────────────────

def test_win_only_on_last_square():
    assert check_win_condition(_player(BOARD_SIZE))
    assert not check_win_condition(_player(BOARD_SIZE - 1))


def test_ladder_to_100_wins():
    assert check_win_condition(_move(77, 3).player)  # 80 → 100


def test_next_player_wraps():
    players = [_player(), _player(), _player()]
    assert next_player_index(0, players) == 1
    assert next_player_index(2, players) == 0


def test_next_player_does_not_skip_inactive():
    players = [_player(), _player(is_active=False), _player()]
    assert next_player_index(0, players) == 1


# ── dice ─────────────────────────────────────────────────────────────

def test_roll_dice_range_and_uniformity():
    rng = random.Random(7)
    counts = Counter(roll_dice(rng=rng) for _ in range(6000))
    assert set(counts) == {1, 2, 3, 4, 5, 6}
    for face in range(1, 7):
        assert 800 < counts[face] < 1200


def test_roll_dice_custom_range():
    rng = random.Random(8)
    assert {roll_dice(2, 3, rng=rng) for _ in range(200)} == {2, 3}
