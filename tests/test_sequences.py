from sequence.board import Player, initialize_board
from sequence.sequences import check_sequence, compute_lines, find_sequences, sequence_counts


def _board_with(player, cells):
    board = initialize_board()
    for r, c in cells:
        board[r][c].chip = player
    return board


def test_empty_board_has_no_sequences():
    board = initialize_board()
    assert find_sequences(board, Player.ONE) == []
    assert find_sequences(board, Player.TWO) == []


def test_exact_row():
    board = _board_with(Player.ONE, [(3, c) for c in range(2, 7)])
    found = find_sequences(board, Player.ONE)
    assert [(3, 2), (3, 3), (3, 4), (3, 5), (3, 6)] in found
    assert len(found) == 1
    assert find_sequences(board, Player.TWO) == []


def test_run_of_six_yields_two_overlapping_windows():
    board = _board_with(Player.ONE, [(3, c) for c in range(2, 8)])
    found = find_sequences(board, Player.ONE)
    assert found == [
        [(3, 2), (3, 3), (3, 4), (3, 5), (3, 6)],
        [(3, 3), (3, 4), (3, 5), (3, 6), (3, 7)],
    ]


def test_detect_all_directions():
    vertical = [(r, 2) for r in range(1, 6)]
    assert find_sequences(_board_with(Player.TWO, vertical), Player.TWO) == [vertical]

    down_right = [(i, i + 1) for i in range(5)]
    assert find_sequences(_board_with(Player.ONE, down_right), Player.ONE) == [down_right]

    down_left = [(i, 4 - i) for i in range(5)]
    assert find_sequences(_board_with(Player.ONE, down_left), Player.ONE) == [down_left]


def test_free_space_counts_for_both_players():
    cells = [(0, c) for c in range(1, 5)]
    expected = [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)]
    assert find_sequences(_board_with(Player.ONE, cells), Player.ONE) == [expected]
    assert find_sequences(_board_with(Player.TWO, cells), Player.TWO) == [expected]

    diagonal = [(i, i) for i in range(1, 5)]
    assert find_sequences(_board_with(Player.TWO, diagonal), Player.TWO) == [[(i, i) for i in range(5)]]


def test_opponent_chip_breaks_a_run():
    board = _board_with(Player.ONE, [(5, c) for c in range(0, 6)])
    board[5][2].chip = Player.TWO
    assert find_sequences(board, Player.ONE) == []


def test_detector_does_not_touch_the_board():
    board = _board_with(Player.ONE, [(3, c) for c in range(2, 7)])
    before = [[cell.chip for cell in row] for row in board]
    find_sequences(board, Player.ONE)
    assert [[cell.chip for cell in row] for row in board] == before


def test_window_count():
    # 60 horizontal + 60 vertical + 36 + 36 diagonal windows on a 10x10 board
    assert len(compute_lines(10, 10)) == 192


def test_check_sequence_alias_and_counts():
    board = _board_with(Player.TWO, [(7, c) for c in range(1, 7)])
    assert check_sequence(board, Player.TWO) == find_sequences(board, Player.TWO)
    assert sequence_counts(board) == {Player.ONE: 0, Player.TWO: 2}
