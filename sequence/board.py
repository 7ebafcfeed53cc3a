"""Board model for Sequence.

A board is a 10x10 grid of :class:`BoardCell` records built from the static
layout in :mod:`sequence.board_layout`.  A cell's rank and suit never change
during a game; only its ``chip`` does.  The four corners are free spaces: they
carry no rank or suit, count for both players when forming sequences, and can
never be targeted.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import List, Optional

import numpy as np

from .board_layout import BOARD_LAYOUT, BONUS, Layout
from .cards import Card, Rank, Suit, parse_card_code
from .errors import InvalidCoordinate


class Player(IntEnum):
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE


@dataclass
class BoardCell:
    rank: Optional[Rank]
    suit: Optional[Suit]
    chip: Optional[Player] = None
    is_free_space: bool = False

    @property
    def is_empty(self) -> bool:
        return self.chip is None

    def matches(self, card: Card) -> bool:
        return not self.is_free_space and self.rank is card.rank and self.suit is card.suit

    def counts_for(self, player: Player) -> bool:
        return self.is_free_space or self.chip == player


Board = List[List[BoardCell]]


def initialize_board(layout: Layout = BOARD_LAYOUT) -> Board:
    """Fresh per-game cell records for ``layout``, with every chip cleared."""
    board: Board = []
    for row in layout:
        cells: List[BoardCell] = []
        for code in row:
            if code == BONUS:
                cells.append(BoardCell(rank=None, suit=None, is_free_space=True))
            else:
                rank, suit = parse_card_code(code)
                cells.append(BoardCell(rank=rank, suit=suit))
        board.append(cells)
    return board


def copy_board(board: Board) -> Board:
    return [[replace(cell) for cell in row] for row in board]


def in_bounds(board: Board, row: int, col: int) -> bool:
    return 0 <= row < len(board) and 0 <= col < (len(board[0]) if board else 0)


def _is_index(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def check_coordinate(board: Board, row: int, col: int) -> BoardCell:
    """Return the cell at (row, col) or raise InvalidCoordinate."""
    if not _is_index(row) or not _is_index(col) or not in_bounds(board, row, col):
        raise InvalidCoordinate(
            message=f"({row}, {col}) is outside the {len(board)}x{len(board[0]) if board else 0} board",
            details={"r": row, "c": col},
        )
    return board[row][col]


def chip_count(board: Board, player: Optional[Player] = None) -> int:
    """Number of chips on the board, optionally only those owned by ``player``."""
    return sum(
        1
        for row in board
        for cell in row
        if cell.chip is not None and (player is None or cell.chip == player)
    )

