"""Snakes & Ladders rule engine."""

from snakes_ladders.board import (
    BOARD_SIZE,
    DEFAULT_LADDERS,
    DEFAULT_SNAKES,
    BoardConfig,
    Ladder,
    Snake,
    is_ladder_position,
    is_snake_position,
    ladder_end_for,
    snake_end_for,
)
from snakes_ladders.cpu import request_cpu_move, should_play_aggressively
from snakes_ladders.game import (
    GameRunner,
    GameState,
    create_default_game_state,
    create_game_from_settings,
    create_game_state,
    create_random_game_state,
    take_turn,
)
from snakes_ladders.generator import (
    ValidationResult,
    create_random_board,
    generate_ladders,
    generate_snakes,
    validate_configuration,
)
from snakes_ladders.moves import (
    MoveResult,
    check_win_condition,
    move_player,
    next_player_index,
    roll_dice,
)
from snakes_ladders.players import GameSettings, Player, PlayerStats, average_dice_value
