"""CPU opponent: rolls after a difficulty-scaled pause."""

from __future__ import annotations

import asyncio
import random
from typing import Literal, Sequence

from snakes_ladders.board import BOARD_SIZE, Ladder, Snake
from snakes_ladders.moves import roll_dice
from snakes_ladders.players import Player

Difficulty = Literal["easy", "medium", "hard"]

# Delay bounds in milliseconds, drawn uniformly
CPU_DELAY_RANGES: dict[str, tuple[float, float]] = {
    "easy": (1000, 2000),
    "medium": (500, 1000),
    "hard": (200, 500),
}
DEFAULT_DELAY_MS = 500.0

AGGRESSION_THRESHOLDS: dict[str, int] = {
    "easy": 20,
    "medium": 30,
    "hard": 40,
}


def cpu_delay_ms(difficulty: Difficulty | str, rng: random.Random | None = None) -> float:
    bounds = CPU_DELAY_RANGES.get(difficulty)
    if bounds is None:
        return DEFAULT_DELAY_MS
    lo, hi = bounds
    return lo + (rng or random).random() * (hi - lo)


async def request_cpu_move(
    player: Player,
    snakes: Sequence[Snake],
    ladders: Sequence[Ladder],
    difficulty: Difficulty | str,
    *,
    dice_min: int = 1,
    dice_max: int = 6,
    rng: random.Random | None = None,
    time_scale: float = 1.0,
) -> int:
    """Wait out the CPU's "thinking" time, then roll.

    *snakes*, *ladders* and *player* are accepted so a smarter CPU can
    look at the board; the current one ignores them. *time_scale* of 0
    skips the wait (simulations, tests).
    """
    delay = cpu_delay_ms(difficulty, rng) * time_scale
    await asyncio.sleep(delay / 1000)
    return roll_dice(dice_min, dice_max, rng=rng)


def should_play_aggressively(player: Player, difficulty: Difficulty | str) -> bool:
    """Advisory only; nothing in the move rules reads it."""
    threshold = AGGRESSION_THRESHOLDS.get(difficulty)
    if threshold is None:
        return False
    return BOARD_SIZE - player.position <= threshold
