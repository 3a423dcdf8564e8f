"""Tests for snakes_ladders.board."""

from snakes_ladders.board import (
    BOARD_SIZE,
    DEFAULT_LADDERS,
    DEFAULT_SNAKES,
    BoardConfig,
    Ladder,
    Snake,
    describe_board,
    is_ladder_position,
    is_snake_position,
    ladder_end_for,
    snake_end_for,
)
from snakes_ladders.generator import validate_configuration


# ── constants ────────────────────────────────────────────────────────

def test_default_board_has_10_snakes():
    assert len(DEFAULT_SNAKES) == 10
    assert all(s.end < s.start for s in DEFAULT_SNAKES)


def test_default_board_has_9_ladders():
    assert len(DEFAULT_LADDERS) == 9
    assert all(l.end > l.start for l in DEFAULT_LADDERS)


def test_all_squares_in_range():
    for el in DEFAULT_SNAKES + DEFAULT_LADDERS:
        assert 1 <= el.start <= BOARD_SIZE
        assert 1 <= el.end <= BOARD_SIZE


def test_default_board_is_valid():
    result = validate_configuration(DEFAULT_SNAKES, DEFAULT_LADDERS)
    assert result.is_valid, result.conflicts


def test_board_config_default():
    board = BoardConfig.default()
    assert board.snakes == DEFAULT_SNAKES
    assert board.ladders == DEFAULT_LADDERS


# ── queries ──────────────────────────────────────────────────────────

def test_is_snake_position():
    assert is_snake_position(16) is True     # 16 → 6
    assert is_snake_position(98) is True     # 98 → 78
    assert is_snake_position(50) is False
    assert is_snake_position(1) is False     # ladder, not snake


def test_is_ladder_position():
    assert is_ladder_position(1) is True     # 1 → 38
    assert is_ladder_position(28) is True    # 28 → 84
    assert is_ladder_position(50) is False
    assert is_ladder_position(16) is False   # snake, not ladder


def test_end_lookups():
    assert snake_end_for(98) == 78
    assert snake_end_for(50) is None
    assert ladder_end_for(80) == 100
    assert ladder_end_for(50) is None


def test_queries_on_custom_board():
    snakes = [Snake(30, 10)]
    ladders = [Ladder(5, 25)]
    assert is_snake_position(30, snakes)
    assert not is_snake_position(16, snakes)
    assert snake_end_for(30, snakes) == 10
    assert ladder_end_for(5, ladders) == 25
    assert ladder_end_for(4, ladders) is None


def test_describe_board_lists_every_element():
    text = describe_board(BoardConfig(snakes=(Snake(30, 10),), ladders=(Ladder(5, 25),)))
    assert "Snakes:" in text
    assert "30 → 10" in text
    assert "5 → 25" in text
