"""Tests for player records and roster setup."""

import dataclasses

import pytest

from snakes_ladders.players import (
    DEFAULT_COLORS,
    GameSettings,
    Player,
    PlayerStats,
    average_dice_value,
    players_from_settings,
)


def test_new_player_defaults():
    p = Player(id=1, name="Alice")
    assert p.position == 1
    assert p.is_winner is False
    assert p.is_active is True
    assert p.stats == PlayerStats()


def test_player_is_immutable():
    p = Player(id=1, name="Alice")
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.position = 5


def test_average_dice_value():
    p = Player(id=1, name="Alice", stats=PlayerStats(total_rolls=4, total_dice_value=14))
    assert average_dice_value(p) == 3.5


def test_average_dice_value_without_rolls():
    assert average_dice_value(Player(id=1, name="Alice")) == 0.0


def test_roster_humans_then_cpus():
    players = players_from_settings(GameSettings(player_count=3, cpu_count=2))
    assert [p.is_cpu for p in players] == [False, True, True]
    assert [p.name for p in players] == ["Player 1", "CPU 1", "CPU 2"]
    assert [p.id for p in players] == [1, 2, 3]


def test_roster_uses_given_names_and_colors():
    settings = GameSettings(
        player_count=2,
        player_names=["Ann", "Bob"],
        player_colors=["red"],
    )
    players = players_from_settings(settings)
    assert [p.name for p in players] == ["Ann", "Bob"]
    assert players[0].color == "red"
    assert players[1].color == DEFAULT_COLORS[1]
