"""Random board generation and conflict validation."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Sequence

from snakes_ladders.board import BOARD_SIZE, BoardConfig, Ladder, Snake

MAX_ATTEMPTS = 50  # per element; after that the element is dropped

SNAKE_START_RANGE = (20, 95)
LADDER_START_RANGE = (1, 80)
MIN_DROP = 5
MAX_DROP = 40


@dataclass
class ValidationResult:
    is_valid: bool
    conflicts: list[str] = field(default_factory=list)


def _pick(
    rng: random.Random | None,
    start_range: tuple[int, int],
    end_bounds,
    used: set[int],
) -> tuple[int, int] | None:
    """Draw (start, end) candidates until one avoids *used*, or give up."""
    randint = (rng or random).randint
    for _ in range(MAX_ATTEMPTS):
        start = randint(*start_range)
        lo, hi = end_bounds(start)
        end = randint(lo, hi)
        if start == end or start in used or end in used:
            continue
        return start, end
    return None


def generate_snakes(count: int = 8, rng: random.Random | None = None) -> list[Snake]:
    """Best-effort: may return fewer than *count* snakes."""
    snakes: list[Snake] = []
    used: set[int] = set()

    def end_bounds(start: int) -> tuple[int, int]:
        return max(1, start - MAX_DROP), max(1, start - MIN_DROP)

    for _ in range(count):
        pair = _pick(rng, SNAKE_START_RANGE, end_bounds, used)
        if pair is None:
            continue
        snakes.append(Snake(*pair))
        used.update(pair)
    return snakes


def generate_ladders(
    count: int = 8,
    existing_snakes: Sequence[Snake] = (),
    rng: random.Random | None = None,
) -> list[Ladder]:
    """Like :func:`generate_snakes`, but never reusing a square of *existing_snakes*."""
    ladders: list[Ladder] = []
    used: set[int] = set()
    for s in existing_snakes:
        used.add(s.start)
        used.add(s.end)

    def end_bounds(start: int) -> tuple[int, int]:
        return min(BOARD_SIZE, start + MIN_DROP), min(BOARD_SIZE, start + MAX_DROP)

    for _ in range(count):
        pair = _pick(rng, LADDER_START_RANGE, end_bounds, used)
        if pair is None:
            continue
        ladders.append(Ladder(*pair))
        used.update(pair)
    return ladders


def validate_configuration(
    snakes: Sequence[Snake],
    ladders: Sequence[Ladder],
) -> ValidationResult:
    """Check that no square is shared and no element starts where it ends.

    Snakes are scanned before ladders, so a clash between the two is
    reported against the ladder.
    """
    conflicts: list[str] = []
    used: set[int] = set()

    for kind, elements in (("Snake", snakes), ("Ladder", ladders)):
        for i, el in enumerate(elements, start=1):
            if el.start in used:
                conflicts.append(
                    f"{kind} {i} start position {el.start} conflicts with another element"
                )
            if el.end in used:
                conflicts.append(
                    f"{kind} {i} end position {el.end} conflicts with another element"
                )
            if el.start == el.end:
                conflicts.append(
                    f"{kind} {i} has same start and end position: {el.start}"
                )
            used.add(el.start)
            used.add(el.end)

    return ValidationResult(is_valid=not conflicts, conflicts=conflicts)


def create_random_board(
    snake_count: int = 8,
    ladder_count: int = 8,
    rng: random.Random | None = None,
) -> BoardConfig:
    """Random layout, or the default board if the random one doesn't validate."""
    snakes = generate_snakes(snake_count, rng=rng)
    ladders = generate_ladders(ladder_count, snakes, rng=rng)

    if not validate_configuration(snakes, ladders).is_valid:
        return BoardConfig.default()
    return BoardConfig(snakes=tuple(snakes), ladders=tuple(ladders))
