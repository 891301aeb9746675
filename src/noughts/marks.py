"""
Marks that can occupy a cell.
Encoding follows the 0/1/2 board strings: 0=empty, 1=X (moves first), 2=O.
"""
from __future__ import annotations

from enum import IntEnum


class Mark(IntEnum):
    EMPTY = 0
    FIRST = 1
    SECOND = 2

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    def opponent(self) -> "Mark":
        if self is Mark.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Mark.SECOND if self is Mark.FIRST else Mark.FIRST

    @classmethod
    def from_char(cls, ch: str) -> "Mark":
        try:
            return _CHARS[ch.upper()]
        except KeyError:
            raise ValueError(f"Unknown mark character: {ch!r}") from None


_SYMBOLS = {Mark.EMPTY: ".", Mark.FIRST: "X", Mark.SECOND: "O"}

_CHARS = {
    "0": Mark.EMPTY, ".": Mark.EMPTY, "_": Mark.EMPTY, " ": Mark.EMPTY,
    "1": Mark.FIRST, "X": Mark.FIRST,
    "2": Mark.SECOND, "O": Mark.SECOND,
}
