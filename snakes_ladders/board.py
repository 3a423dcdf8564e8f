"""Board layout and position queries for Snakes & Ladders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

BOARD_SIZE = 100


@dataclass(frozen=True)
class Snake:
    """Moves a player backward: ``end < start``."""

    start: int
    end: int


@dataclass(frozen=True)
class Ladder:
    """Moves a player forward: ``end > start``."""

    start: int
    end: int


# fmt: off
DEFAULT_SNAKES: tuple[Snake, ...] = (
    Snake(16,  6), Snake(47, 26), Snake(49, 11), Snake(56, 53), Snake(62, 19),
    Snake(64, 60), Snake(87, 24), Snake(93, 73), Snake(95, 75), Snake(98, 78),
)

DEFAULT_LADDERS: tuple[Ladder, ...] = (
    Ladder( 1, 38), Ladder( 4, 14), Ladder( 9, 31), Ladder(21, 42), Ladder(28, 84),
    Ladder(36, 44), Ladder(51, 67), Ladder(71, 91), Ladder(80, 100),
)
# fmt: on


@dataclass(frozen=True)
class BoardConfig:
    """The snakes and ladders in play for one game."""

    snakes: tuple[Snake, ...] = DEFAULT_SNAKES
    ladders: tuple[Ladder, ...] = DEFAULT_LADDERS

    @classmethod
    def default(cls) -> BoardConfig:
        return cls()


def is_snake_position(position: int, snakes: Sequence[Snake] = DEFAULT_SNAKES) -> bool:
    return any(s.start == position for s in snakes)


def is_ladder_position(position: int, ladders: Sequence[Ladder] = DEFAULT_LADDERS) -> bool:
    return any(l.start == position for l in ladders)


def snake_end_for(position: int, snakes: Sequence[Snake] = DEFAULT_SNAKES) -> int | None:
    """Where a player landing on *position* slides to, or None."""
    for s in snakes:
        if s.start == position:
            return s.end
    return None


def ladder_end_for(position: int, ladders: Sequence[Ladder] = DEFAULT_LADDERS) -> int | None:
    """Where a player landing on *position* climbs to, or None."""
    for l in ladders:
        if l.start == position:
            return l.end
    return None


def describe_board(board: BoardConfig) -> str:
    """Human-readable listing, one transition per line."""
    lines = ["Snakes:"]
    lines += [f"  {s.start:3d} → {s.end}" for s in board.snakes]
    lines.append("Ladders:")
    lines += [f"  {l.start:3d} → {l.end}" for l in board.ladders]
    return "\n".join(lines)
