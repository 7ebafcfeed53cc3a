# sequence/engine.py
"""
Turn controller for two-player Sequence.

State transitions are functions ``(GameState, move) -> GameState``: `step`
copies the incoming state, applies the move to the copy and returns it, so a
rejected move never leaves a partially updated state behind.  `GameEngine`
wraps these functions for callers (a UI event handler, typically) that prefer
to hold one mutable controller object.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from .board import Player, check_coordinate, initialize_board
from .cards import Card, create_deck
from .config import GameConfig
from .errors import EngineError, ErrorCode, GameAlreadyOver, InvalidMove
from .match_log import JSONLLogger
from .rules import legal_targets, resolve_action
from .sequences import find_sequences
from .state import GameState, GameStatus, MoveKind, MoveRecord, SequenceRun

logger = logging.getLogger(__name__)


def _make_rng(config: GameConfig, rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng(config.seed)


def initialize_game(config: Optional[GameConfig] = None, rng: Optional[np.random.Generator] = None) -> GameState:
    """Shuffle a fresh double deck and deal both hands, alternating players."""
    config = config or GameConfig()
    deck = create_deck(_make_rng(config, rng))

    player1_hand: List[Card] = []
    player2_hand: List[Card] = []
    for _ in range(config.hand_size):
        player1_hand.append(deck.pop())
        player2_hand.append(deck.pop())

    state = GameState(
        board=initialize_board(),
        deck=deck,
        player1_hand=player1_hand,
        player2_hand=player2_hand,
        current_player=Player.ONE,
        config=config,
    )
    logger.info("New game: %d cards in deck, %d per hand", len(deck), config.hand_size)
    return state


def reset(config: Optional[GameConfig] = None, rng: Optional[np.random.Generator] = None) -> GameState:
    return initialize_game(config, rng)


def _hand_index(hand: List[Card], card: Card) -> Optional[int]:
    for idx, held in enumerate(hand):
        if held == card:
            return idx
    return None


def _update_sequences(state: GameState) -> None:
    """Rescan the board for both players and settle the winner, if any."""
    state.sequences = [
        SequenceRun(player=player, cells=tuple(tuple(rc) for rc in cells))
        for player in Player
        for cells in find_sequences(state.board, player)
    ]
    needed = state.config.win_sequences_needed
    # Player.ONE is checked first and takes a simultaneous tie
    for player in Player:
        if len(state.sequences_for(player)) >= needed:
            state.status = GameStatus.GAME_OVER
            state.winner = player
            logger.info("Game over: player %d wins with %d sequences", player, len(state.sequences_for(player)))
            return


def step(state: GameState, card: Optional[Card], row: int, col: int) -> Tuple[GameState, MoveRecord]:
    """Play ``card`` from the current player's hand on (row, col).

    Returns the new state and a record of the move.  The given state is not
    modified.  Raises GameAlreadyOver, InvalidCoordinate or InvalidMove.
    """
    if state.game_over:
        raise GameAlreadyOver(details={"winner": int(state.winner) if state.winner is not None else None})
    check_coordinate(state.board, row, col)

    player = state.current_player
    kind = resolve_action(state.board, row, col, card, player)

    idx = _hand_index(state.current_hand, card)
    if idx is None:
        raise InvalidMove(ErrorCode.ERR_CARD_NOT_IN_HAND, details={"card": card.code, "cardId": card.id})

    new_state = state.copy()
    new_state.board[row][col].chip = player if kind is MoveKind.PLACE else None

    hand = new_state.hand_of(player)
    played = hand.pop(idx)
    drawn = new_state.deck.pop() if new_state.deck else None
    if drawn is not None:
        hand.append(drawn)
    new_state.discard_pile.append(played)

    new_state.current_player = player.opponent
    new_state.turn += 1
    _update_sequences(new_state)

    record = MoveRecord(
        player=player,
        kind=kind,
        card=played,
        row=row,
        col=col,
        drawn=drawn,
        turn=new_state.turn,
        winner=new_state.winner,
    )
    logger.debug("Player %d %s %s at (%d, %d)", player, kind.value, played.code, row, col)
    return new_state, record


def apply_move(state: GameState, card: Optional[Card], row: int, col: int) -> Tuple[GameState, bool]:
    """Like `step`, but rejected moves return ``(state, False)`` instead of raising.

    Off-board coordinates still raise InvalidCoordinate.
    """
    try:
        new_state, _ = step(state, card, row, col)
    except (InvalidMove, GameAlreadyOver) as exc:
        logger.debug("Move rejected: %s %s", exc.code.value, exc.details)
        return state, False
    return new_state, True


class GameEngine:
    """Stateful controller owning the current GameState of one table."""

    def __init__(self, config: Optional[GameConfig] = None):
        self.config: GameConfig = config or GameConfig()
        self.random_seed: Optional[int] = self.config.seed
        self.state: Optional[GameState] = None
        self.history: List[MoveRecord] = []
        self.last_error: Optional[EngineError] = None
        self._match_log: Optional[JSONLLogger] = None

    def seed(self, seed: Optional[int]) -> None:
        self.random_seed = seed

    def start_new(self, config: Optional[GameConfig] = None) -> GameState:
        if config is not None:
            self.config = config
            self.random_seed = config.seed
        self.close()
        self.state = initialize_game(self.config, rng=np.random.default_rng(self.random_seed))
        self.history = []
        self.last_error = None
        if self.config.match_log_path:
            self._match_log = JSONLLogger(self.config.match_log_path)
        return self.state

    def reset(self) -> GameState:
        return self.start_new()

    def _require_state(self) -> GameState:
        if self.state is None:
            raise RuntimeError("Game not started")
        return self.state

    def apply_move(self, card: Optional[Card], row: int, col: int) -> bool:
        """Apply a move to the current state; False (and `last_error`) when rejected."""
        state = self._require_state()
        try:
            new_state, record = step(state, card, row, col)
        except (InvalidMove, GameAlreadyOver) as exc:
            self.last_error = exc
            logger.debug("Move rejected: %s %s", exc.code.value, exc.details)
            return False

        self.state = new_state
        self.last_error = None
        self.history.append(record)
        if self._match_log is not None:
            self._match_log.log(record.turn, record.to_dict())
        return True

    def legal_targets(self, card: Card) -> List[Tuple[int, int]]:
        state = self._require_state()
        if state.game_over:
            return []
        return legal_targets(state.board, card, state.current_player)

    def is_terminal(self) -> bool:
        return self.state is not None and self.state.game_over

    def winner(self) -> Optional[Player]:
        return self.state.winner if self.state is not None else None

    def close(self) -> None:
        if self._match_log is not None:
            self._match_log.close()
            self._match_log = None

    def __enter__(self) -> "GameEngine":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
