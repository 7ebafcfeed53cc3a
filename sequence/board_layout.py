# sequence/board_layout.py
"""
Loads the static card layout for the 10x10 Sequence board from JSON.
Each cell is a card code (e.g., '7H') or 'BONUS' for corner free spaces.
"""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .cards import Rank, Suit, parse_card_code

__all__ = ["BONUS", "BOARD_ROWS", "BOARD_COLS", "BOARD_LAYOUT", "load_board_layout", "card_positions"]

BONUS = "BONUS"
BOARD_ROWS = 10
BOARD_COLS = 10

Layout = Tuple[Tuple[str, ...], ...]


def _default_json_path() -> Path:
    # assets ship inside the package: sequence/assets/standard_10x10.json
    return Path(__file__).resolve().parent / "assets" / "standard_10x10.json"


def _load_board_layout_json(path: Optional[Path] = None) -> List[List[str]]:
    src = Path(path) if path else _default_json_path()
    with src.open("r", encoding="utf-8") as f:
        data = json.load(f)

    rows = int(data.get("rows", 0))
    cols = int(data.get("cols", 0))
    cells = data.get("cells", None)

    if rows != BOARD_ROWS or cols != BOARD_COLS:
        raise ValueError(f"Board JSON must be {BOARD_ROWS}x{BOARD_COLS}, got {rows}x{cols} at {src}")

    if not (isinstance(cells, list) and len(cells) == rows and all(isinstance(r, list) and len(r) == cols for r in cells)):
        raise ValueError(f"Invalid 'cells' shape in {src}")

    return cells


def _freeze(grid: List[List[str]]) -> Layout:
    return tuple(tuple(cell for cell in row) for row in grid)


def _validate(grid: List[List[str]]) -> None:
    last_r, last_c = len(grid) - 1, len(grid[0]) - 1
    corners = [(0, 0), (0, last_c), (last_r, 0), (last_r, last_c)]
    if any(grid[r][c] != BONUS for r, c in corners):
        raise ValueError("Corners must be 'BONUS'")

    flattened = [cell for row in grid for cell in row if cell != BONUS]
    if len(flattened) != 96:
        raise ValueError(f"Expected 96 non-BONUS cells, found {len(flattened)}")

    counts = Counter(parse_card_code(cell) for cell in flattened)
    # Jacks are never printed on the board; every other face appears twice
    bad = {f"{r.value}{s.letter}": n for (r, s), n in counts.items() if r is Rank.JACK or n != 2}
    if bad:
        raise ValueError(f"Card multiplicities invalid (expect each non-jack exactly twice): {bad}")
    if len(counts) != 48:
        raise ValueError(f"Expected 48 distinct faces, found {len(counts)}")

    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell != grid[last_r - r][last_c - c]:
                raise ValueError(f"Layout is not mirrored across the centre at ({r},{c})")


def load_board_layout(path: Optional[Path] = None) -> Layout:
    """Load, validate, and freeze a layout file."""
    grid = _load_board_layout_json(path)
    _validate(grid)
    return _freeze(grid)


def card_positions(layout: Layout) -> Dict[Tuple[Rank, Suit], List[Tuple[int, int]]]:
    """Map every (rank, suit) printed on the board to its coordinates. Corners are omitted."""
    positions: Dict[Tuple[Rank, Suit], List[Tuple[int, int]]] = {}
    for r, row in enumerate(layout):
        for c, code in enumerate(row):
            if code == BONUS:
                continue
            positions.setdefault(parse_card_code(code), []).append((r, c))
    return positions


BOARD_LAYOUT: Layout = load_board_layout()
