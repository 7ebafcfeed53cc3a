"""Rules engine for the two-player Sequence board game."""
from .board import BoardCell, Player, initialize_board
from .board_layout import BOARD_LAYOUT, card_positions
from .cards import Card, Rank, Suit, create_deck, is_jack, is_one_eyed_jack, is_two_eyed_jack, shuffle
from .config import GameConfig, load_config
from .engine import GameEngine, apply_move, initialize_game, reset, step
from .errors import EngineError, ErrorCode, GameAlreadyOver, InvalidCoordinate, InvalidMove
from .rules import can_place_chip, legal_targets, resolve_action
from .sequences import check_sequence, find_sequences
from .state import GameState, GameStatus, MoveKind, MoveRecord, SequenceRun

__all__ = [
    "BOARD_LAYOUT",
    "BoardCell",
    "Card",
    "EngineError",
    "ErrorCode",
    "GameAlreadyOver",
    "GameConfig",
    "GameEngine",
    "GameState",
    "GameStatus",
    "InvalidCoordinate",
    "InvalidMove",
    "MoveKind",
    "MoveRecord",
    "Player",
    "Rank",
    "SequenceRun",
    "Suit",
    "apply_move",
    "can_place_chip",
    "card_positions",
    "check_sequence",
    "create_deck",
    "find_sequences",
    "initialize_board",
    "initialize_game",
    "is_jack",
    "is_one_eyed_jack",
    "is_two_eyed_jack",
    "legal_targets",
    "load_config",
    "reset",
    "resolve_action",
    "shuffle",
    "step",
]
