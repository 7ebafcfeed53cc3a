import json

import numpy as np
import pytest

from sequence.board import (
    Player, check_coordinate, chip_count, copy_board, initialize_board,
)
from sequence.board_layout import BOARD_LAYOUT, BONUS, card_positions, load_board_layout
from sequence.cards import Rank
from sequence.errors import ErrorCode, InvalidCoordinate

CORNERS = [(0, 0), (0, 9), (9, 0), (9, 9)]


def test_layout_integrity():
    assert len(BOARD_LAYOUT) == 10
    assert all(len(row) == 10 for row in BOARD_LAYOUT)
    for r, c in CORNERS:
        assert BOARD_LAYOUT[r][c] == BONUS
    positions = card_positions(BOARD_LAYOUT)
    assert len(positions) == 48
    assert all(len(coords) == 2 for coords in positions.values())
    assert not any(rank is Rank.JACK for rank, _ in positions)
    assert sum(len(coords) for coords in positions.values()) == 96


def test_layout_is_mirrored_across_centre():
    for (r1, c1), (r2, c2) in card_positions(BOARD_LAYOUT).values():
        assert (r1 + r2, c1 + c2) == (9, 9)


def test_initialize_board():
    board = initialize_board()
    assert chip_count(board) == 0
    for r, c in CORNERS:
        assert board[r][c].is_free_space
        assert board[r][c].rank is None and board[r][c].suit is None
    free = [(r, c) for r in range(10) for c in range(10) if board[r][c].is_free_space]
    assert sorted(free) == sorted(CORNERS)


def test_initialize_board_returns_fresh_cells():
    b1 = initialize_board(); b2 = initialize_board()
    b1[4][4].chip = Player.ONE
    assert b2[4][4].chip is None


def test_copy_board_is_independent():
    board = initialize_board()
    board[2][3].chip = Player.TWO
    clone = copy_board(board)
    clone[2][3].chip = None
    clone[5][5].chip = Player.ONE
    assert board[2][3].chip is Player.TWO
    assert board[5][5].chip is None


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (10, 0), (0, 10), (10, 10)])
def test_check_coordinate_out_of_range(row, col):
    with pytest.raises(InvalidCoordinate) as exc:
        check_coordinate(initialize_board(), row, col)
    assert exc.value.code is ErrorCode.ERR_INVALID_COORDINATE
    assert exc.value.to_dict()["details"] == {"r": row, "c": col}


@pytest.mark.parametrize("row,col", [(True, 0), (0, False), (1.0, 2)])
def test_check_coordinate_rejects_non_integers(row, col):
    with pytest.raises(InvalidCoordinate):
        check_coordinate(initialize_board(), row, col)


def test_check_coordinate_accepts_numpy_integers():
    check_coordinate(initialize_board(), np.int64(3), np.int32(9))


def test_chip_count_by_player():
    board = initialize_board()
    board[1][1].chip = Player.ONE
    board[1][2].chip = Player.ONE
    board[2][2].chip = Player.TWO
    assert chip_count(board) == 3
    assert chip_count(board, Player.ONE) == 2
    assert chip_count(board, Player.TWO) == 1


def test_load_rejects_bad_layouts(tmp_path):
    cells = [list(row) for row in BOARD_LAYOUT]
    cells[0][0] = "AS"
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"rows": 10, "cols": 10, "cells": cells}))
    with pytest.raises(ValueError):
        load_board_layout(path)

    path.write_text(json.dumps({"rows": 9, "cols": 10, "cells": cells[:9]}))
    with pytest.raises(ValueError):
        load_board_layout(path)

    cells = [list(row) for row in BOARD_LAYOUT]
    cells[1][0] = "JC"
    path.write_text(json.dumps({"rows": 10, "cols": 10, "cells": cells}))
    with pytest.raises(ValueError):
        load_board_layout(path)


def test_load_default_layout_round_trip(tmp_path):
    path = tmp_path / "copy.json"
    path.write_text(json.dumps({"rows": 10, "cols": 10, "cells": [list(r) for r in BOARD_LAYOUT]}))
    assert load_board_layout(path) == BOARD_LAYOUT
