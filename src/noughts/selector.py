"""
Difficulty policy for the computer opponent.

Early in the game (more than `threshold` empty cells) the selector plays a
uniformly random empty cell with probability `probability`; otherwise it plays
the search-optimal move. Once the board narrows it never deviates from the search.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from . import rules
from .board import Board
from .errors import IllegalMove
from .marks import Mark
from .search import SearchEngine

log = logging.getLogger(__name__)

DEFAULT_RANDOM_MOVE_PROBABILITY = 0.3
DEFAULT_RANDOM_MOVE_THRESHOLD = 6


@dataclass(frozen=True)
class Decision:
    position: int
    source: str  # "random" or "search"
    draw: float


class MoveSelector:
    def __init__(
        self,
        engine: Optional[SearchEngine] = None,
        probability: float = DEFAULT_RANDOM_MOVE_PROBABILITY,
        threshold: int = DEFAULT_RANDOM_MOVE_THRESHOLD,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability must be within [0, 1], got {probability}")
        if not 0 <= threshold <= 9:
            raise ValueError(f"threshold must be within 0-9, got {threshold}")
        self.engine = engine if engine is not None else SearchEngine(Mark.SECOND)
        self.probability = probability
        self.threshold = threshold
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.last_decision: Optional[Decision] = None

    @property
    def mark(self) -> Mark:
        return self.engine.maximizer

    def choose_move(self, board: Iterable[Mark], rng: Optional[np.random.Generator] = None) -> int:
        cells = board if isinstance(board, Board) else Board(board)
        if rules.outcome(cells).is_terminal:
            raise IllegalMove("No legal moves: the game is over")
        empty = cells.empty_positions()
        gen = rng if rng is not None else self.rng
        draw = float(gen.random())
        if draw < self.probability and len(empty) > self.threshold:
            move = int(gen.choice(empty))
            source = "random"
        else:
            move = self.engine.best_move(cells)
            source = "search"
        self.last_decision = Decision(position=move, source=source, draw=draw)
        log.debug("selector picked %d (%s, draw=%.3f, empty=%d)", move, source, draw, len(empty))
        return move
