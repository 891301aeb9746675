"""
Board state: nine cells in row-major order and the single placement primitive.
Teaching notes:
- A live board only changes through place() and reset(); nothing is ever erased.
- Hypothetical play (search) works on a clone or a plain list copy, never on the
  board owned by a session.
"""
from __future__ import annotations

import operator
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from . import rules
from .errors import IllegalMove, InvalidPosition
from .marks import Mark

BOARD_SIZE = 9


def check_position(position: object) -> int:
    if isinstance(position, (bool, np.bool_)):
        raise InvalidPosition(f"Position must be an integer 0-8, got {position!r}")
    try:
        position = operator.index(position)
    except TypeError:
        raise InvalidPosition(f"Position must be an integer 0-8, got {position!r}") from None
    if not 0 <= position < BOARD_SIZE:
        raise InvalidPosition(f"Position {position} is outside 0-8")
    return position


class Board:
    __slots__ = ("_cells",)

    def __init__(self, cells: Optional[Iterable[Mark]] = None):
        if cells is None:
            self._cells: List[Mark] = [Mark.EMPTY] * BOARD_SIZE
        else:
            self._cells = [Mark(c) for c in cells]
            if len(self._cells) != BOARD_SIZE:
                raise ValueError(f"Board must have exactly {BOARD_SIZE} cells, got {len(self._cells)}")

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """Parse 9 characters of 0/1/2 or ./X/O; space and '_' are empty cells too.

        Row separators ('|', '/') and line breaks are ignored.
        """
        raw = [ch for ch in text if ch not in "|/\r\n"]
        if len(raw) != BOARD_SIZE:
            raise ValueError(f"Board string must contain exactly {BOARD_SIZE} cells: {text!r}")
        return cls(Mark.from_char(ch) for ch in raw)

    def serialize(self) -> str:
        return "".join(str(int(c)) for c in self._cells)

    def place(self, position: int, mark: Mark) -> None:
        position = check_position(position)
        if mark == Mark.EMPTY:
            raise ValueError("Cannot place an EMPTY mark")
        if rules.outcome(self._cells).is_terminal:
            raise IllegalMove("Game is already over")
        if self._cells[position] != Mark.EMPTY:
            raise IllegalMove(
                f"Cell {position} is already occupied by {self._cells[position].symbol}"
            )
        self._cells[position] = Mark(mark)

    def is_full(self) -> bool:
        return rules.is_full(self._cells)

    def empty_positions(self) -> List[int]:
        return [i for i, v in enumerate(self._cells) if v == Mark.EMPTY]

    def side_to_move(self) -> Mark:
        first, second = rules.mark_counts(self._cells)
        return Mark.FIRST if first == second else Mark.SECOND

    def clone(self) -> "Board":
        return Board(self._cells)

    def snapshot(self) -> Tuple[Mark, ...]:
        return tuple(self._cells)

    def reset(self) -> None:
        self._cells = [Mark.EMPTY] * BOARD_SIZE

    def render(self) -> str:
        rows = []
        for r in range(3):
            rows.append(" ".join(c.symbol for c in self._cells[r * 3:r * 3 + 3]))
        return "\n".join(rows)

    def __getitem__(self, position: int) -> Mark:
        return self._cells[check_position(position)]

    def __len__(self) -> int:
        return BOARD_SIZE

    def __iter__(self) -> Iterator[Mark]:
        return iter(self._cells)

    def __contains__(self, mark: object) -> bool:
        return mark in self._cells

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Board):
            return self._cells == other._cells
        return NotImplemented

    def __repr__(self) -> str:
        return f"Board({self.serialize()!r})"
