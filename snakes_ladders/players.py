"""Player records and roster setup."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_COLORS = ("#E74C3C", "#3498DB", "#2ECC71", "#F1C40F", "#9B59B6", "#E67E22")


@dataclass(frozen=True)
class PlayerStats:
    """Per-game counters. They only ever go up."""

    total_rolls: int = 0
    snake_bites: int = 0
    ladder_climbs: int = 0
    total_dice_value: int = 0


@dataclass(frozen=True)
class Player:
    id: int
    name: str
    color: str = DEFAULT_COLORS[0]
    is_cpu: bool = False
    position: int = 1
    is_winner: bool = False
    is_active: bool = True  # reserved: nothing eliminates players yet
    stats: PlayerStats = field(default_factory=PlayerStats)


@dataclass
class GameSettings:
    """What the host collects before a game starts."""

    player_count: int = 2
    cpu_count: int = 0
    player_names: list[str] = field(default_factory=list)
    player_colors: list[str] = field(default_factory=list)
    dice_min: int = 1
    dice_max: int = 6
    snake_count: int = 8
    ladder_count: int = 8


def players_from_settings(settings: GameSettings) -> list[Player]:
    """Build the roster: humans first, then the CPU seats.

    Missing names become "Player N" / "CPU N"; missing colors cycle
    through :data:`DEFAULT_COLORS`.
    """
    humans = max(0, settings.player_count - settings.cpu_count)
    players = []
    for i in range(settings.player_count):
        is_cpu = i >= humans
        if i < len(settings.player_names):
            name = settings.player_names[i]
        elif is_cpu:
            name = f"CPU {i - humans + 1}"
        else:
            name = f"Player {i + 1}"
        if i < len(settings.player_colors):
            color = settings.player_colors[i]
        else:
            color = DEFAULT_COLORS[i % len(DEFAULT_COLORS)]
        players.append(Player(id=i + 1, name=name, color=color, is_cpu=is_cpu))
    return players


def average_dice_value(player: Player) -> float:
    if player.stats.total_rolls == 0:
        return 0.0
    return player.stats.total_dice_value / player.stats.total_rolls
