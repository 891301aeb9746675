import pytest

from noughts import rules
from noughts.board import Board
from noughts.marks import Mark
from noughts.rules import Outcome, Status


def test_win_lines_order():
    assert rules.WIN_LINES[:3] == ((0, 1, 2), (3, 4, 5), (6, 7, 8))
    assert rules.WIN_LINES[3:6] == ((0, 3, 6), (1, 4, 7), (2, 5, 8))
    assert rules.WIN_LINES[6:] == ((0, 4, 8), (2, 4, 6))


def test_completing_top_row():
    b = Board.from_string("XX.OO....")
    assert rules.winner(b) is None
    b.place(2, Mark.FIRST)
    assert rules.winner(b) == Mark.FIRST
    assert rules.winning_line(b) == (0, 1, 2)
    assert rules.outcome(b) == Outcome.won(Mark.FIRST)


@pytest.mark.parametrize("board,mark,line", [
    ("OOOXX.X..", Mark.SECOND, (0, 1, 2)),
    ("XO.XO.X..", Mark.FIRST, (0, 3, 6)),
    ("XO..XO..X", Mark.FIRST, (0, 4, 8)),
    ("XXO.O.OX.", Mark.SECOND, (2, 4, 6)),
])
def test_winner_and_line(board, mark, line):
    cells = Board.from_string(board)
    assert rules.winner(cells) == mark
    assert rules.winning_line(cells) == line


def test_two_lines_reports_first_in_canonical_order():
    # X completes row 0 and column 0 with the same move
    cells = Board.from_string("XXXXOOXOO")
    assert rules.winning_line(cells) == (0, 1, 2)
    assert rules.winner(cells) == Mark.FIRST


def test_one_empty_cell_left_is_not_yet_a_draw():
    b = Board.from_string("XOXXOOOX.")
    assert rules.winner(b) is None
    assert not rules.is_draw(b)
    assert rules.outcome(b).status is Status.IN_PROGRESS
    b.place(8, Mark.FIRST)
    assert rules.winner(b) is None
    assert rules.is_draw(b)
    assert rules.outcome(b) == Outcome.draw()


def test_full_board_with_winner_is_not_draw():
    cells = Board.from_string("XXXOOXOXO")
    assert rules.is_full(cells)
    assert not rules.is_draw(cells)


def test_works_on_plain_lists():
    assert rules.winner([1, 1, 1, 2, 2, 0, 0, 0, 0]) == Mark.FIRST
    assert rules.winner([0] * 9) is None


@pytest.mark.parametrize("board,expected", [
    ("000000000", True),
    ("100000000", True),
    ("120000000", True),
    ("200000000", False),   # O cannot move first
    ("110000000", False),   # X moved twice
    ("111222000", False),   # both sides won
    ("111220000", True),
    ("111022200", False),   # X won but O kept playing
])
def test_is_reachable(board, expected):
    assert rules.is_reachable(Board.from_string(board)) is expected


def test_outcome_str():
    assert str(Outcome.won(Mark.SECOND)) == "won(O)"
    assert str(Outcome.draw()) == "draw"
    assert not Outcome.in_progress().is_terminal
