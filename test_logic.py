"""
Tests for the board, move validator and win checker.
"""

import itertools

import pytest

from logic.board import EMPTY, Board, IllegalMoveError, Player
from logic.game_state import GameState
from logic.move_validator import MoveValidator
from logic.win_checker import MatchResult, MatchStatus, WinChecker


LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
]


def _has_line(chars, mark):
    return any(all(chars[i] == mark for i in line) for line in LINES)


# ==================== BOARD ====================

def test_new_board_is_empty():
    board = Board()
    assert board.empty_indices() == list(range(9))
    assert not board.is_full()
    assert all(board.get(i) is None for i in range(9))


def test_place_and_query():
    board = Board()
    board.place(4, Player.X)
    assert board.get(4) == Player.X
    assert board.cell(1, 1) == Player.X
    assert not board.is_legal(4)
    assert 4 not in board.empty_indices()
    assert board.count(Player.X) == 1


def test_place_rejects_occupied_cell_without_changing_board():
    board = Board.from_string("X.. ... ...")
    before = board.snapshot()
    with pytest.raises(IllegalMoveError):
        board.place(0, Player.O)
    assert board.snapshot() == before


@pytest.mark.parametrize("index", [-1, 9, 100, 1.5, "3", None, True])
def test_is_legal_rejects_out_of_range(index):
    board = Board()
    assert not board.is_legal(index)
    with pytest.raises(IllegalMoveError):
        board.place(index, Player.X)


def test_illegal_move_error_is_value_error():
    assert issubclass(IllegalMoveError, ValueError)


def test_reset_clears_every_cell():
    board = Board.from_string("XOX OXO XOX")
    assert board.is_full()
    board.reset()
    assert board.empty_indices() == list(range(9))


def test_row_col_accessors_are_bounds_checked():
    board = Board()
    assert Board.to_index(2, 1) == 7
    assert Board.to_row_col(5) == (1, 2)
    with pytest.raises(IndexError):
        board.cell(3, 0)
    with pytest.raises(IndexError):
        board.get(9)
    with pytest.raises(IndexError):
        Board.to_row_col(-1)


def test_tentative_restores_cell_even_on_error():
    board = Board()
    with board.tentative(3, Player.O):
        assert board.get(3) == Player.O
    assert board.get(3) is None

    with pytest.raises(RuntimeError):
        with board.tentative(5, Player.X):
            raise RuntimeError("boom")
    assert board.get(5) is None


def test_cells_view_is_read_only():
    board = Board()
    with pytest.raises(ValueError):
        board.cells[0] = Player.X.value


def test_copy_is_independent():
    board = Board.from_string("X.. ... ...")
    clone = board.copy()
    clone.place(1, Player.O)
    assert board.get(1) is None
    assert clone != board
    assert board.copy() == board


def test_from_string_and_str():
    board = Board.from_string("xo- _.. ..o")
    assert board.get(0) == Player.X
    assert board.get(1) == Player.O
    assert board.get(8) == Player.O
    assert str(board) == "XO.\n...\n..O"
    with pytest.raises(ValueError):
        Board.from_string("XX")
    with pytest.raises(ValueError):
        Board.from_string("XX? ... ...")


# ==================== WIN CHECKER ====================

@pytest.mark.parametrize("line", LINES)
@pytest.mark.parametrize("player", list(Player))
def test_every_line_wins(line, player):
    board = Board()
    for index in line:
        board.place(index, player)
    checker = WinChecker()
    assert checker.winner(board, player)
    assert not checker.winner(board, player.opposite())
    assert checker.check_winner(board) == player
    assert checker.get_winning_line(board) == line


def test_winner_and_draw_on_every_board():
    checker = WinChecker()
    for chars in itertools.product("XO.", repeat=9):
        board = Board.from_string("".join(chars))
        x_wins = _has_line(chars, "X")
        o_wins = _has_line(chars, "O")
        full = "." not in chars

        assert checker.winner(board, Player.X) == x_wins
        assert checker.winner(board, Player.O) == o_wins
        assert board.is_full() == full
        assert checker.is_draw(board) == (full and not x_wins and not o_wins)


def test_full_board_without_line_is_draw():
    # A B A / A B B / B A A
    board = Board.from_string("XOX XOO OXX")
    checker = WinChecker()
    assert checker.is_draw(board)
    assert not checker.winner(board, Player.X)
    assert not checker.winner(board, Player.O)
    assert checker.check_winner(board) is None
    assert checker.get_winning_line(board) is None


def test_full_board_with_line_is_win_not_draw():
    board = Board.from_string("XOX OOX OXX")
    checker = WinChecker()
    assert not checker.is_draw(board)
    assert checker.classify(board, Player.X) == MatchStatus.WON


def test_classify_in_progress():
    board = Board.from_string("X.. .O. ...")
    assert WinChecker().classify(board, Player.O) == MatchStatus.IN_PROGRESS


def test_match_result():
    assert MatchResult().is_draw
    assert str(MatchResult()) == "Draw"
    assert not MatchResult(Player.O).is_draw
    assert str(MatchResult(Player.O)) == "O wins"


# ==================== MOVE VALIDATOR ====================

def test_validate_move():
    validator = MoveValidator()
    board = Board.from_string("X.. ... ...")

    assert validator.validate_move(board, 1).is_valid

    taken = validator.validate_move(board, 0)
    assert not taken.is_valid
    assert "taken" in taken.error_message

    out_of_range = validator.validate_move(board, 9)
    assert not out_of_range.is_valid
    assert "1-9" in out_of_range.error_message


@pytest.mark.parametrize("text, index", [("1", 0), (" 9 ", 8), ("5\n", 4)])
def test_validate_input_maps_display_numbers(text, index):
    result = MoveValidator().validate_input(Board(), text)
    assert result.is_valid
    assert result.index == index


@pytest.mark.parametrize("text", ["", "abc", "0", "10", "-3", "2.5"])
def test_validate_input_rejects_bad_text(text):
    result = MoveValidator().validate_input(Board(), text)
    assert not result.is_valid
    assert result.error_message
    assert result.index is None


def test_get_valid_moves():
    board = Board.from_string("XO. ... ..X")
    assert MoveValidator().get_valid_moves(board) == [2, 3, 4, 5, 6, 7]


def test_empty_constant_matches_fresh_state():
    state = GameState()
    assert all(v == EMPTY for v in state.board.snapshot())
