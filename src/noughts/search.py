"""
Exhaustive minimax search with alpha-beta pruning, from a fixed maximizer's perspective.
Scoring:
- Maximizer has won: WIN_SCORE - depth (prefer the quickest win).
- Minimizer has won: depth - WIN_SCORE (prefer the most delayed loss).
- Full board, no winner: 0.
Pruning only changes how many nodes are visited, never the value at a full window.
"""
from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List

from . import rules
from .errors import IllegalMove
from .marks import Mark

log = logging.getLogger(__name__)

WIN_SCORE = 10


@contextmanager
def _trial(cells: List[Mark], position: int, mark: Mark) -> Iterator[None]:
    cells[position] = mark
    try:
        yield
    finally:
        cells[position] = Mark.EMPTY


class SearchEngine:
    """Minimax over hypothetical copies of a board; the live board is never touched."""

    def __init__(self, maximizer: Mark = Mark.SECOND, prune: bool = True):
        if maximizer == Mark.EMPTY:
            raise ValueError("The maximizing side must be FIRST or SECOND")
        self.maximizer = Mark(maximizer)
        self.minimizer = self.maximizer.opponent()
        self.prune = prune
        self.last_nodes = 0

    def evaluate(
        self,
        board: Iterable[Mark],
        depth: int = 0,
        maximizing: bool = True,
        alpha: float = -math.inf,
        beta: float = math.inf,
    ) -> int:
        """Score `board` with the maximizer to move when `maximizing` is True."""
        self.last_nodes = 0
        return self._search(list(board), depth, maximizing, alpha, beta)

    def _search(self, cells: List[Mark], depth: int, maximizing: bool, alpha: float, beta: float) -> int:
        self.last_nodes += 1
        w = rules.winner(cells)
        if w == self.maximizer:
            return WIN_SCORE - depth
        if w == self.minimizer:
            return depth - WIN_SCORE
        if rules.is_full(cells):
            return 0

        if maximizing:
            best = -math.inf
            for pos in range(len(cells)):
                if cells[pos] != Mark.EMPTY:
                    continue
                with _trial(cells, pos, self.maximizer):
                    score = self._search(cells, depth + 1, False, alpha, beta)
                best = max(best, score)
                alpha = max(alpha, score)
                if self.prune and beta <= alpha:
                    break
        else:
            best = math.inf
            for pos in range(len(cells)):
                if cells[pos] != Mark.EMPTY:
                    continue
                with _trial(cells, pos, self.minimizer):
                    score = self._search(cells, depth + 1, True, alpha, beta)
                best = min(best, score)
                beta = min(beta, score)
                if self.prune and beta <= alpha:
                    break
        return int(best)

    def move_scores(self, board: Iterable[Mark]) -> Dict[int, int]:
        """Score of every empty position as the maximizer's move, in ascending order.

        Empty for finished boards.
        """
        cells = list(board)
        self.last_nodes = 0
        if rules.outcome(cells).is_terminal:
            return {}
        scores: Dict[int, int] = {}
        for pos in range(len(cells)):
            if cells[pos] != Mark.EMPTY:
                continue
            with _trial(cells, pos, self.maximizer):
                scores[pos] = self._search(cells, 0, False, -math.inf, math.inf)
        return scores

    def best_move(self, board: Iterable[Mark]) -> int:
        """Highest scoring move; ties go to the lowest position."""
        scores = self.move_scores(board)
        best_pos = pick_best(scores)
        best_score = scores[best_pos]
        log.debug(
            "searched %d nodes for %s, best=%d score=%d",
            self.last_nodes, self.maximizer.symbol, best_pos, best_score,
        )
        return best_pos


def pick_best(scores: Dict[int, int]) -> int:
    """Position with the strictly highest score, scanning in ascending order."""
    if not scores:
        raise IllegalMove("No legal moves: the game is over")
    best_pos = -1
    best_score = -math.inf
    for pos in sorted(scores):
        if scores[pos] > best_score:
            best_score = scores[pos]
            best_pos = pos
    return best_pos
