# sequence/sequences.py
"""
Sequence (win-condition) detection.

Every window of five aligned cells is checked independently, so a single run
of six chips yields two overlapping sequences.  Overlapping windows count
separately toward the win threshold.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Tuple

from .board import Board, Player

SEQUENCE_LENGTH = 5

Coord = Tuple[int, int]
Line = Tuple[Coord, ...]


@lru_cache(maxsize=None)
def compute_lines(rows: int, cols: int, length: int = SEQUENCE_LENGTH) -> Tuple[Line, ...]:
    """All windows of ``length`` aligned cells, grouped by direction."""
    lines: List[Line] = []
    # Rows
    for r in range(rows):
        for c in range(cols - length + 1):
            lines.append(tuple((r, c + i) for i in range(length)))
    # Columns
    for c in range(cols):
        for r in range(rows - length + 1):
            lines.append(tuple((r + i, c) for i in range(length)))
    # Diagonal down-right (\)
    for r in range(rows - length + 1):
        for c in range(cols - length + 1):
            lines.append(tuple((r + i, c + i) for i in range(length)))
    # Diagonal down-left (/)
    for r in range(rows - length + 1):
        for c in range(length - 1, cols):
            lines.append(tuple((r + i, c - i) for i in range(length)))
    return tuple(lines)


def find_sequences(board: Board, player: Player) -> List[List[Coord]]:
    """Return every 5-cell window whose cells all count for ``player``.

    A cell counts when it holds ``player``'s chip or is a free space.
    """
    if not board:
        return []
    player = Player(player)
    found: List[List[Coord]] = []
    for line in compute_lines(len(board), len(board[0])):
        if all(board[r][c].counts_for(player) for r, c in line):
            found.append(list(line))
    return found


check_sequence = find_sequences


def sequence_counts(board: Board) -> Dict[Player, int]:
    return {player: len(find_sequences(board, player)) for player in Player}
