"""Charts of played and simulated games."""

from __future__ import annotations

from typing import Sequence

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt

from snakes_ladders.board import BOARD_SIZE
from snakes_ladders.game import LogEntry


def make_race_chart(
    entries: Sequence[LogEntry],
    output_path: str = "race.png",
    title: str = "Snakes & Ladders Race",
) -> str:
    """Plot each player's square after every one of their turns.

    Returns the path to the saved PNG.
    """
    tracks: dict[str, tuple[list[int], list[int]]] = {}
    for e in entries:
        xs, ys = tracks.setdefault(e.player_name, ([0], [1]))
        xs.append(e.turn_number)
        ys.append(e.position_after)

    fig, ax = plt.subplots(figsize=(10, 5))
    for name, (xs, ys) in tracks.items():
        ax.step(xs, ys, where="post", label=name, linewidth=2)

    ax.set_xlabel("Turn")
    ax.set_ylabel("Square")
    ax.set_ylim(0, BOARD_SIZE + 2)
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.legend(loc="upper left")

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path


def make_length_histogram(
    turn_counts: Sequence[int],
    output_path: str = "game_lengths.png",
    title: str = "Game Length Distribution",
) -> str:
    """Histogram of how many turns each simulated game took."""
    fig, ax = plt.subplots(figsize=(10, 5))
    ax.hist(turn_counts, bins=min(30, max(1, len(set(turn_counts)))),
            color="#4A90D9", edgecolor="white")

    if turn_counts:
        mean = sum(turn_counts) / len(turn_counts)
        ax.axvline(mean, color="#E74C3C", linestyle="--", label=f"mean {mean:.1f}")
        ax.legend()

    ax.set_xlabel("Turns")
    ax.set_ylabel("Games")
    ax.set_title(title, fontsize=14, fontweight="bold")

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
