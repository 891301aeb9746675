import numpy as np
import pytest

from noughts.board import Board, check_position
from noughts.errors import IllegalMove, InvalidPosition
from noughts.marks import Mark


def test_new_board_is_empty():
    b = Board()
    assert len(b) == 9
    assert b.empty_positions() == list(range(9))
    assert not b.is_full()
    assert b.side_to_move() == Mark.FIRST


def test_place_and_occupied_cell():
    b = Board()
    b.place(4, Mark.FIRST)
    assert b[4] == Mark.FIRST
    assert b.empty_positions() == [0, 1, 2, 3, 5, 6, 7, 8]
    with pytest.raises(IllegalMove):
        b.place(4, Mark.SECOND)
    assert b[4] == Mark.FIRST
    assert b.side_to_move() == Mark.SECOND


def test_place_after_win_is_illegal():
    b = Board.from_string("XXXOO....")
    with pytest.raises(IllegalMove):
        b.place(8, Mark.SECOND)
    assert b.serialize() == "111220000"


@pytest.mark.parametrize("bad", [-1, 9, 100, "4", 4.0, True, None, np.bool_(True), np.int64(9)])
def test_invalid_positions(bad):
    with pytest.raises(InvalidPosition):
        check_position(bad)
    with pytest.raises(InvalidPosition):
        Board().place(bad, Mark.FIRST)


@pytest.mark.parametrize("pos", [np.int64(4), np.int32(4), np.uint8(4)])
def test_numpy_integer_positions_accepted(pos):
    assert check_position(pos) == 4
    b = Board()
    b.place(pos, Mark.FIRST)
    assert b[pos] == Mark.FIRST
    assert b.serialize() == "000010000"


def test_invalid_position_is_a_value_error():
    with pytest.raises(ValueError):
        Board().place(12, Mark.FIRST)


def test_cannot_place_empty_mark():
    with pytest.raises(ValueError):
        Board().place(0, Mark.EMPTY)


def test_clone_is_independent():
    b = Board.from_string("100020000")
    c = b.clone()
    c.place(8, Mark.FIRST)
    assert b[8] == Mark.EMPTY
    assert c[8] == Mark.FIRST
    assert b != c


def test_full_board():
    b = Board.from_string("XOXXOOOXX")
    assert b.is_full()
    assert b.empty_positions() == []


@pytest.mark.parametrize("text,expected", [
    ("XX.OO....", "110220000"),
    ("xx_oo____", "110220000"),
    ("110|220|000", "110220000"),
    ("000000000", "000000000"),
    ("X   O    ", "100020000"),
    (" X O     ", "010200000"),
    ("         ", "000000000"),
])
def test_from_string_and_serialize(text, expected):
    assert Board.from_string(text).serialize() == expected


@pytest.mark.parametrize("bad", ["", "0000", "0000000000", "00000000z"])
def test_from_string_rejects_bad_input(bad):
    with pytest.raises(ValueError):
        Board.from_string(bad)


def test_wrong_cell_count():
    with pytest.raises(ValueError):
        Board([Mark.EMPTY] * 8)


def test_reset_and_snapshot():
    b = Board.from_string("120000000")
    snap = b.snapshot()
    b.reset()
    assert b.snapshot() == (Mark.EMPTY,) * 9
    assert snap[0] == Mark.FIRST and snap[1] == Mark.SECOND


def test_render():
    assert Board.from_string("XO.......").render() == "X O .\n. . .\n. . ."
