"""Game state and the turn loop for a multi-player Snakes & Ladders game."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from typing import Literal, Protocol, Sequence, runtime_checkable

from snakes_ladders.board import BOARD_SIZE, BoardConfig, Ladder, Snake
from snakes_ladders.cpu import Difficulty, request_cpu_move
from snakes_ladders.generator import create_random_board
from snakes_ladders.moves import (
    check_win_condition,
    move_player,
    next_player_index,
    roll_dice,
)
from snakes_ladders.players import GameSettings, Player, PlayerStats, players_from_settings

GameStatus = Literal["setup", "playing", "finished"]


# ── State ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class GameState:
    """Snapshot of a game. Every turn produces a new one."""

    players: tuple[Player, ...]
    snakes: tuple[Snake, ...]
    ladders: tuple[Ladder, ...]
    current_player_index: int = 0
    dice_value: int = 0
    game_status: GameStatus = "playing"
    winner: Player | None = None
    board_size: int = BOARD_SIZE
    total_rolls: int = 0
    dice_min: int = 1
    dice_max: int = 6
    snake_count: int = 8
    ladder_count: int = 8


def _fresh(player: Player) -> Player:
    return replace(
        player,
        position=1,
        is_winner=False,
        is_active=True,
        stats=PlayerStats(),
    )


def create_game_state(
    players: Sequence[Player],
    board: BoardConfig | None = None,
    *,
    snake_count: int = 8,
    ladder_count: int = 8,
    dice_min: int = 1,
    dice_max: int = 6,
) -> GameState:
    board = board or BoardConfig.default()
    return GameState(
        players=tuple(_fresh(p) for p in players),
        snakes=tuple(board.snakes),
        ladders=tuple(board.ladders),
        game_status="playing",
        snake_count=snake_count,
        ladder_count=ladder_count,
        dice_min=dice_min,
        dice_max=dice_max,
    )


def create_default_game_state(players: Sequence[Player]) -> GameState:
    return create_game_state(players)


def create_random_game_state(
    players: Sequence[Player],
    snake_count: int = 8,
    ladder_count: int = 8,
    rng: random.Random | None = None,
    *,
    dice_min: int = 1,
    dice_max: int = 6,
) -> GameState:
    """Random board; counts are recorded as requested even if it fell back."""
    board = create_random_board(snake_count, ladder_count, rng=rng)
    return create_game_state(
        players, board,
        snake_count=snake_count, ladder_count=ladder_count,
        dice_min=dice_min, dice_max=dice_max,
    )


def create_game_from_settings(
    settings: GameSettings,
    random_board: bool = False,
    rng: random.Random | None = None,
) -> GameState:
    """Roster, dice range and board counts all come from *settings*.

    The snake and ladder counts only shape the board when *random_board*
    is set; the default board is used as is otherwise.
    """
    players = players_from_settings(settings)
    if random_board:
        return create_random_game_state(
            players, settings.snake_count, settings.ladder_count, rng=rng,
            dice_min=settings.dice_min, dice_max=settings.dice_max,
        )
    return create_game_state(
        players,
        snake_count=settings.snake_count,
        ladder_count=settings.ladder_count,
        dice_min=settings.dice_min,
        dice_max=settings.dice_max,
    )


def current_player(state: GameState) -> Player:
    return state.players[state.current_player_index]


# ── Turn step ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TurnResult:
    state: GameState
    player: Player | None = None
    dice_value: int = 0
    position_before: int = 0
    position_after: int = 0
    snake_bite: bool = False
    ladder_climb: bool = False
    won: bool = False


def take_turn(state: GameState, dice_value: int) -> TurnResult:
    """Apply one roll for the current player and return the next snapshot.

    Records the roll in the player's stats and on the state, then either
    finishes the game or passes the turn on. A finished game is left as is.
    """
    if state.game_status != "playing":
        return TurnResult(state=state)

    idx = state.current_player_index
    before = state.players[idx]
    move = move_player(before, dice_value, state.snakes, state.ladders)

    stats = replace(
        move.player.stats,
        total_rolls=move.player.stats.total_rolls + 1,
        total_dice_value=move.player.stats.total_dice_value + dice_value,
    )
    moved = replace(move.player, stats=stats)
    won = check_win_condition(moved)
    if won:
        moved = replace(moved, is_winner=True)

    players = state.players[:idx] + (moved,) + state.players[idx + 1:]
    changes: dict = {
        "players": players,
        "dice_value": dice_value,
        "total_rolls": state.total_rolls + 1,
    }
    if won:
        changes["game_status"] = "finished"
        changes["winner"] = moved
    else:
        changes["current_player_index"] = next_player_index(idx, players)

    return TurnResult(
        state=replace(state, **changes),
        player=moved,
        dice_value=dice_value,
        position_before=before.position,
        position_after=moved.position,
        snake_bite=move.snake_bite,
        ladder_climb=move.ladder_climb,
        won=won,
    )


# ── Roll source interface ────────────────────────────────────────────

@runtime_checkable
class RollProvider(Protocol):
    """Structural interface for whatever supplies a human player's roll."""

    async def roll(self, state: GameState, player: Player) -> int: ...


# ── Structured log ───────────────────────────────────────────────────

@dataclass
class LogEntry:
    """Record of a single turn."""

    turn_number: int
    player_id: int
    player_name: str
    dice_value: int
    position_before: int
    position_after: int
    snake_bite: bool = False
    ladder_climb: bool = False
    is_winning_move: bool = False

    def describe(self) -> str:
        msg = (
            f"Turn {self.turn_number}: {self.player_name} rolled {self.dice_value}, "
            f"{self.position_before} → {self.position_after}"
        )
        if self.snake_bite:
            msg += " (snake)"
        if self.ladder_climb:
            msg += " (ladder)"
        if self.is_winning_move:
            msg += ", wins!"
        return msg


@dataclass
class GameResult:
    winner: Player | None
    reason: str  # "win" | "max_turns"
    turns: int
    state: GameState


# ── Observers ────────────────────────────────────────────────────────

class GameObserver(Protocol):
    """Receives structured events as a game is played."""

    def on_turn(self, entry: LogEntry) -> None: ...


@dataclass
class ListObserver:
    """Default observer: collects entries into a list."""

    entries: list[LogEntry] = field(default_factory=list)

    def on_turn(self, entry: LogEntry) -> None:
        self.entries.append(entry)


@dataclass
class PrintObserver:
    """Prints one line per turn, keeping the entries as well."""

    entries: list[LogEntry] = field(default_factory=list)

    def on_turn(self, entry: LogEntry) -> None:
        self.entries.append(entry)
        print(entry.describe())


# ── Runner ───────────────────────────────────────────────────────────

class GameRunner:
    """Drive a game to completion, one awaited roll at a time."""

    def __init__(
        self,
        state: GameState,
        human_roll: RollProvider | None = None,
        difficulty: Difficulty | str = "medium",
        max_turns: int = 1000,
        observer: GameObserver | None = None,
        rng: random.Random | None = None,
        time_scale: float = 1.0,
    ):
        assert len(state.players) >= 1
        self.state = state
        self.human_roll = human_roll
        self.difficulty = difficulty
        self.max_turns = max_turns
        self.observer = observer or ListObserver()
        self.rng = rng
        self.time_scale = time_scale

    async def _next_roll(self) -> int:
        player = current_player(self.state)
        if player.is_cpu:
            return await request_cpu_move(
                player,
                self.state.snakes,
                self.state.ladders,
                self.difficulty,
                dice_min=self.state.dice_min,
                dice_max=self.state.dice_max,
                rng=self.rng,
                time_scale=self.time_scale,
            )
        if self.human_roll is not None:
            return await self.human_roll.roll(self.state, player)
        return roll_dice(self.state.dice_min, self.state.dice_max, rng=self.rng)

    async def play(self) -> GameResult:
        turns = 0
        while self.state.game_status == "playing" and turns < self.max_turns:
            dice_value = await self._next_roll()
            result = take_turn(self.state, dice_value)
            self.state = result.state
            turns += 1

            self.observer.on_turn(LogEntry(
                turn_number=turns,
                player_id=result.player.id,
                player_name=result.player.name,
                dice_value=dice_value,
                position_before=result.position_before,
                position_after=result.position_after,
                snake_bite=result.snake_bite,
                ladder_climb=result.ladder_climb,
                is_winning_move=result.won,
            ))

        if self.state.game_status == "finished":
            return GameResult(
                winner=self.state.winner, reason="win",
                turns=turns, state=self.state,
            )
        return GameResult(
            winner=None, reason="max_turns",
            turns=turns, state=self.state,
        )
