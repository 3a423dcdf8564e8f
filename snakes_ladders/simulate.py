"""Batch simulation of all-CPU games and aggregate statistics."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from snakes_ladders.game import GameResult, GameRunner, create_game_from_settings
from snakes_ladders.players import GameSettings


@dataclass
class Summary:
    """Aggregate over a batch of games. Per-player tables are keyed by id."""

    games: int = 0
    unfinished: int = 0
    names: dict[int, str] = field(default_factory=dict)
    wins: dict[int, int] = field(default_factory=dict)
    turn_counts: list[int] = field(default_factory=list)
    snake_bites: int = 0
    ladder_climbs: int = 0

    @property
    def mean_turns(self) -> float:
        return sum(self.turn_counts) / len(self.turn_counts) if self.turn_counts else 0.0

    @property
    def mean_snake_bites(self) -> float:
        return self.snake_bites / self.games if self.games else 0.0

    @property
    def mean_ladder_climbs(self) -> float:
        return self.ladder_climbs / self.games if self.games else 0.0


def summarize(results: list[GameResult]) -> Summary:
    summary = Summary()
    for result in results:
        summary.games += 1
        summary.turn_counts.append(result.turns)
        for p in result.state.players:
            summary.names.setdefault(p.id, p.name)
            summary.wins.setdefault(p.id, 0)
            summary.snake_bites += p.stats.snake_bites
            summary.ladder_climbs += p.stats.ladder_climbs
        if result.winner is None:
            summary.unfinished += 1
        else:
            summary.wins[result.winner.id] += 1
    return summary


async def simulate(
    settings: GameSettings,
    games: int,
    random_board: bool = False,
    max_turns: int = 1000,
    rng: random.Random | None = None,
) -> list[GameResult]:
    """Play *games* games back to back with no CPU delay."""
    results = []
    for _ in range(games):
        state = create_game_from_settings(settings, random_board=random_board, rng=rng)
        runner = GameRunner(state, max_turns=max_turns, rng=rng, time_scale=0)
        results.append(await runner.play())
    return results
