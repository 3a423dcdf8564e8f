"""CLI entry point: python -m snakes_ladders {board,play,simulate}."""

from __future__ import annotations

import argparse
import asyncio
import random
import sys

from snakes_ladders.board import BoardConfig, describe_board
from snakes_ladders.chart import make_length_histogram, make_race_chart
from snakes_ladders.game import GameRunner, PrintObserver, create_game_from_settings
from snakes_ladders.generator import (
    generate_ladders,
    generate_snakes,
    validate_configuration,
)
from snakes_ladders.players import GameSettings
from snakes_ladders.simulate import simulate, summarize


def _cpu_settings(args: argparse.Namespace) -> GameSettings:
    return GameSettings(
        player_count=args.players,
        cpu_count=args.players,
        snake_count=args.snakes,
        ladder_count=args.ladders,
    )


def _require_positive(value: int, what: str) -> None:
    if value < 1:
        print(f"{what} must be at least 1 (got {value}).", file=sys.stderr)
        sys.exit(1)


# ── board ────────────────────────────────────────────────────────────

def cmd_board(args: argparse.Namespace) -> None:
    """Generate a random board and show whether it validates.

    Mirrors create_random_board step by step so the conflicts behind a
    fallback to the default board can be shown.
    """
    rng = random.Random(args.seed)
    snakes = generate_snakes(args.snakes, rng=rng)
    ladders = generate_ladders(args.ladders, snakes, rng=rng)
    board = BoardConfig(snakes=tuple(snakes), ladders=tuple(ladders))
    print(describe_board(board))

    validation = validate_configuration(snakes, ladders)
    if validation.is_valid:
        print(f"\nValid: {len(snakes)} snakes, {len(ladders)} ladders")
        return

    print("\nConflicts:")
    for c in validation.conflicts:
        print(f"  {c}")
    print("\nFalling back to the default board:")
    print(describe_board(BoardConfig.default()))


# ── play ─────────────────────────────────────────────────────────────

def cmd_play(args: argparse.Namespace) -> None:
    """Play one all-CPU game and print every turn."""
    _require_positive(args.players, "--players")
    rng = random.Random(args.seed)
    state = create_game_from_settings(
        _cpu_settings(args), random_board=args.random_board, rng=rng,
    )

    observer = PrintObserver()
    runner = GameRunner(
        state,
        difficulty=args.difficulty,
        max_turns=args.max_turns,
        observer=observer,
        rng=rng,
        time_scale=0,
    )
    result = asyncio.run(runner.play())

    if result.winner is not None:
        print(f"\n{result.winner.name} wins after {result.turns} turns")
    else:
        print(f"\nNo winner after {result.turns} turns")
    for p in result.state.players:
        print(
            f"  {p.name:10s} square {p.position:3d}  "
            f"snakes {p.stats.snake_bites}  ladders {p.stats.ladder_climbs}"
        )

    if args.chart:
        make_race_chart(observer.entries, output_path=args.chart)
        print(f"Chart saved to {args.chart}")


# ── simulate ─────────────────────────────────────────────────────────

def cmd_simulate(args: argparse.Namespace) -> None:
    """Play many games and print aggregate statistics."""
    _require_positive(args.players, "--players")
    _require_positive(args.games, "--games")
    rng = random.Random(args.seed)

    results = asyncio.run(simulate(
        _cpu_settings(args),
        args.games,
        random_board=args.random_board,
        max_turns=args.max_turns,
        rng=rng,
    ))
    summary = summarize(results)

    print(f"\n{summary.games} games")
    print("=" * 40)
    for pid, wins in sorted(summary.wins.items(), key=lambda kv: kv[1], reverse=True):
        name = summary.names[pid]
        print(f"  {name:20s} {wins:5d} wins ({wins / summary.games:6.1%})")
    if summary.unfinished:
        print(f"  {'unfinished':20s} {summary.unfinished:5d}")
    print(f"\nMean turns per game:    {summary.mean_turns:.1f}")
    print(f"Mean snake bites/game:  {summary.mean_snake_bites:.2f}")
    print(f"Mean ladder climbs/game: {summary.mean_ladder_climbs:.2f}")

    if args.chart:
        make_length_histogram(summary.turn_counts, output_path=args.chart)
        print(f"Chart saved to {args.chart}")


# ── main ─────────────────────────────────────────────────────────────

def _add_board_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--snakes", type=int, default=8, help="Snakes to generate (default 8)")
    p.add_argument("--ladders", type=int, default=8, help="Ladders to generate (default 8)")
    p.add_argument("--seed", type=int, help="Random seed for reproducible runs")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="snakes_ladders",
        description="Snakes & Ladders rule engine",
    )
    sub = parser.add_subparsers(dest="command")

    p_board = sub.add_parser("board", help="Generate and validate a random board")
    _add_board_options(p_board)

    p_play = sub.add_parser("play", help="Play one all-CPU game")
    _add_board_options(p_play)
    p_play.add_argument("--players", type=int, default=2, help="Number of CPU players")
    p_play.add_argument("--random-board", action="store_true", help="Use a random board")
    p_play.add_argument("--difficulty", default="medium", choices=["easy", "medium", "hard"])
    p_play.add_argument("--max-turns", type=int, default=1000, help="Max turns per game")
    p_play.add_argument("--chart", help="Save a race chart to this PNG path")

    p_sim = sub.add_parser("simulate", help="Play many all-CPU games")
    _add_board_options(p_sim)
    p_sim.add_argument("--games", type=int, default=100, help="Games to play (default 100)")
    p_sim.add_argument("--players", type=int, default=2, help="Number of CPU players")
    p_sim.add_argument("--random-board", action="store_true", help="New random board per game")
    p_sim.add_argument("--max-turns", type=int, default=1000, help="Max turns per game")
    p_sim.add_argument("--chart", help="Save a game-length histogram to this PNG path")

    args = parser.parse_args(argv)
    if args.command == "board":
        cmd_board(args)
    elif args.command == "play":
        cmd_play(args)
    elif args.command == "simulate":
        cmd_simulate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
