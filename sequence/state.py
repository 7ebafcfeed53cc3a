# sequence/state.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .board import Board, Player, copy_board
from .cards import Card
from .config import GameConfig

Coord = Tuple[int, int]


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    GAME_OVER = "game_over"


class MoveKind(str, Enum):
    PLACE = "place"
    REMOVE = "remove"


@dataclass(frozen=True)
class SequenceRun:
    """Five aligned coordinates that all count for ``player``."""
    player: Player
    cells: Tuple[Coord, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"player": int(self.player), "cells": [list(rc) for rc in self.cells]}


@dataclass(frozen=True)
class MoveRecord:
    player: Player
    kind: MoveKind
    card: Card
    row: int
    col: int
    drawn: Optional[Card]
    turn: int
    winner: Optional[Player] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player": int(self.player),
            "type": self.kind.value,
            "card": self.card.code,
            "cardId": self.card.id,
            "target": {"r": self.row, "c": self.col},
            "drew": self.drawn is not None,
            "turn": self.turn,
            "winner": int(self.winner) if self.winner is not None else None,
        }


@dataclass
class GameState:
    """
    Runtime snapshot of one game.

    Every card is in exactly one of deck, player1_hand, player2_hand or
    discard_pile. The controller never mutates a state it was handed; it
    works on ``copy()`` and returns the result.
    """

    board: Board = field(default_factory=list)

    # Undealt cards; drawn from the end
    deck: List[Card] = field(default_factory=list)

    player1_hand: List[Card] = field(default_factory=list)
    player2_hand: List[Card] = field(default_factory=list)
    discard_pile: List[Card] = field(default_factory=list)

    current_player: Player = Player.ONE

    # Recomputed from the board after every accepted move
    sequences: List[SequenceRun] = field(default_factory=list)

    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Player] = None
    turn: int = 0

    config: GameConfig = field(default_factory=GameConfig)

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    @property
    def opponent(self) -> Player:
        return self.current_player.opponent

    def hand_of(self, player: Player) -> List[Card]:
        return self.player1_hand if player is Player.ONE else self.player2_hand

    @property
    def current_hand(self) -> List[Card]:
        return self.hand_of(self.current_player)

    def sequences_for(self, player: Player) -> List[SequenceRun]:
        return [s for s in self.sequences if s.player == player]

    def all_cards(self) -> List[Card]:
        return [*self.deck, *self.player1_hand, *self.player2_hand, *self.discard_pile]

    def copy(self) -> "GameState":
        """Copy the mutable parts; cards and sequence runs are immutable and shared."""
        return replace(
            self,
            board=copy_board(self.board),
            deck=list(self.deck),
            player1_hand=list(self.player1_hand),
            player2_hand=list(self.player2_hand),
            discard_pile=list(self.discard_pile),
            sequences=list(self.sequences),
        )
