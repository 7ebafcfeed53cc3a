"""Move validation for Sequence.

Three card categories act on the board differently:

* plain cards place a chip on an empty cell printed with the same rank and suit;
* two-eyed Jacks (hearts, diamonds) are wild and place a chip on any empty,
  non-free cell;
* one-eyed Jacks (clubs, spades) remove a chip owned by the opponent.

Nothing here mutates the board.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .board import Board, Player, check_coordinate
from .cards import Card, is_one_eyed_jack, is_two_eyed_jack
from .errors import ErrorCode, InvalidMove
from .state import MoveKind


def can_place_chip(board: Board, row: int, col: int, card: Card) -> bool:
    """True iff ``card`` places a chip on (row, col) by matching rank and suit."""
    cell = check_coordinate(board, row, col)
    if cell.chip is not None:
        return False
    if cell.is_free_space:
        return False
    return cell.rank is card.rank and cell.suit is card.suit


def resolve_action(board: Board, row: int, col: int, card: Optional[Card], player: Player) -> MoveKind:
    """Decide what ``card`` does when played by ``player`` on (row, col).

    Raises InvalidMove with a specific code when the combination is illegal
    and InvalidCoordinate when the target is off the board.
    """
    player = Player(player)
    cell = check_coordinate(board, row, col)
    details = {"r": row, "c": col, "card": card.code if card is not None else None}

    if card is None:
        raise InvalidMove(ErrorCode.ERR_NO_CARD, "No card selected", details)

    if is_two_eyed_jack(card):
        if cell.is_free_space:
            raise InvalidMove(ErrorCode.ERR_FREE_SPACE, "Cannot place chip on a free space", details)
        if cell.chip is not None:
            raise InvalidMove(ErrorCode.ERR_TARGET_OCCUPIED, "Cannot place chip here", details)
        return MoveKind.PLACE

    if is_one_eyed_jack(card):
        if cell.chip is None:
            raise InvalidMove(ErrorCode.ERR_NO_CHIP_TO_REMOVE, "Can only remove opponent chips", details)
        if cell.chip != player.opponent:
            raise InvalidMove(ErrorCode.ERR_CANNOT_REMOVE_OWN_CHIP, "Can only remove opponent chips", details)
        return MoveKind.REMOVE

    if can_place_chip(board, row, col, card):
        return MoveKind.PLACE
    if cell.is_free_space:
        raise InvalidMove(ErrorCode.ERR_FREE_SPACE, "Cannot place chip on a free space", details)
    if cell.chip is not None:
        raise InvalidMove(ErrorCode.ERR_TARGET_OCCUPIED, "Cannot place chip here", details)
    raise InvalidMove(ErrorCode.ERR_NOT_MATCHING_CARD, "Invalid move", details)


def is_legal(board: Board, row: int, col: int, card: Optional[Card], player: Player) -> bool:
    try:
        resolve_action(board, row, col, card, player)
    except InvalidMove:
        return False
    return True


def legal_targets(board: Board, card: Card, player: Player) -> List[Tuple[int, int]]:
    """Every coordinate ``card`` may legally act on, in row-major order."""
    return [
        (r, c)
        for r in range(len(board))
        for c in range(len(board[r]))
        if is_legal(board, r, c, card, player)
    ]


def has_legal_move(board: Board, hand: Iterable[Card], player: Player) -> bool:
    return any(legal_targets(board, card, player) for card in hand)
