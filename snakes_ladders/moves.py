"""Dice rolls and movement rules."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Sequence

from snakes_ladders.board import BOARD_SIZE, Ladder, Snake
from snakes_ladders.players import Player


@dataclass(frozen=True)
class MoveResult:
    """What happened after a roll."""

    player: Player
    snake_bite: bool = False
    ladder_climb: bool = False


def roll_dice(min_value: int = 1, max_value: int = 6, rng: random.Random | None = None) -> int:
    return (rng or random).randint(min_value, max_value)


def move_player(
    player: Player,
    dice_value: int,
    snakes: Sequence[Snake],
    ladders: Sequence[Ladder],
) -> MoveResult:
    """Compute where *player* ends up after rolling *dice_value*.

    Does NOT touch ``total_rolls`` / ``total_dice_value``; the caller
    records the roll itself.
    """
    target = player.position + dice_value
    snake_bite = False
    ladder_climb = False

    # Clamped moves never trigger a snake or ladder
    if target < 1:
        target = 1
    elif target > BOARD_SIZE:
        target = BOARD_SIZE
    else:
        snake = next((s for s in snakes if s.start == target), None)
        if snake is not None:
            target = snake.end
            snake_bite = True

        # Single pass: a snake may drop you onto a ladder, not the reverse
        ladder = next((l for l in ladders if l.start == target), None)
        if ladder is not None:
            target = ladder.end
            ladder_climb = True

    stats = replace(
        player.stats,
        snake_bites=player.stats.snake_bites + snake_bite,
        ladder_climbs=player.stats.ladder_climbs + ladder_climb,
    )
    return MoveResult(
        player=replace(player, position=target, stats=stats),
        snake_bite=snake_bite,
        ladder_climb=ladder_climb,
    )


def check_win_condition(player: Player) -> bool:
    return player.position == BOARD_SIZE


def next_player_index(current_index: int, players: Sequence[Player]) -> int:
    # Inactive players are not skipped
    return (current_index + 1) % len(players)
