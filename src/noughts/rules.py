"""
Rules: win lines, winner/draw detection, outcome of a board.
Teaching notes:
- Lines are scanned in a fixed order (rows, columns, diagonals) so the reported
  winning line is reproducible when a move happens to complete two lines.
- Functions accept any sequence of 9 marks (a Board, a list, or a tuple).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from .marks import Mark

WinLine = Tuple[int, int, int]

WIN_LINES: Tuple[WinLine, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    status: Status
    winner: Optional[Mark] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(Status.IN_PROGRESS)

    @classmethod
    def won(cls, mark: Mark) -> "Outcome":
        return cls(Status.WON, mark)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(Status.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    def __str__(self) -> str:
        if self.status is Status.WON:
            return f"won({self.winner.symbol})"
        return self.status.value


def winning_line(cells: Sequence[Mark]) -> Optional[WinLine]:
    """First satisfied line in canonical order, or None."""
    for line in WIN_LINES:
        a, b, c = line
        v = cells[a]
        if v != Mark.EMPTY and v == cells[b] and v == cells[c]:
            return line
    return None


def winner(cells: Sequence[Mark]) -> Optional[Mark]:
    line = winning_line(cells)
    if line is None:
        return None
    return Mark(cells[line[0]])


def is_full(cells: Sequence[Mark]) -> bool:
    return Mark.EMPTY not in cells


def is_draw(cells: Sequence[Mark]) -> bool:
    return winner(cells) is None and is_full(cells)


def outcome(cells: Sequence[Mark]) -> Outcome:
    w = winner(cells)
    if w is not None:
        return Outcome.won(w)
    if is_full(cells):
        return Outcome.draw()
    return Outcome.in_progress()


def mark_counts(cells: Sequence[Mark]) -> Tuple[int, int]:
    return (
        sum(1 for v in cells if v == Mark.FIRST),
        sum(1 for v in cells if v == Mark.SECOND),
    )


def is_reachable(cells: Sequence[Mark]) -> bool:
    """True if the board can arise from alternating play with FIRST starting."""
    first, second = mark_counts(cells)
    if not (first == second or first == second + 1):
        return False

    def count_wins(m: Mark) -> int:
        return sum(1 for line in WIN_LINES if all(cells[i] == m for i in line))

    first_wins = count_wins(Mark.FIRST)
    second_wins = count_wins(Mark.SECOND)
    if first_wins and second_wins:
        return False
    if first_wins and first != second + 1:
        return False
    if second_wins and first != second:
        return False
    return True
