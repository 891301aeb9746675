"""
Self-play arena: the computer opponent against a scripted human side.

The human side (X) follows either a uniform random policy or perfect play;
the computer (O) uses the session's move selector. Games run through
GameSession so every move goes through the same legality checks as real play.
"""
from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass
from typing import Dict, Optional

import numpy as np

from .config import Settings
from .marks import Mark
from .search import SearchEngine
from .selector import MoveSelector
from .session import GameSession, Mode, ScoreTally

log = logging.getLogger(__name__)

OPPONENTS = ("random", "optimal")


@dataclass
class ArenaReport:
    games: int
    opponent: str
    tally: ScoreTally
    elapsed_s: float

    def to_dict(self) -> Dict[str, object]:
        d = asdict(self)
        d["tally"] = self.tally.as_dict()
        return d


def simulate(games: int = 100, opponent: str = "random", settings: Optional[Settings] = None) -> ArenaReport:
    if games < 0:
        raise ValueError(f"games must be non-negative, got {games}")
    if opponent not in OPPONENTS:
        raise ValueError(f"Unknown opponent {opponent!r} (choose from {', '.join(OPPONENTS)})")
    settings = settings or Settings()
    rng = np.random.default_rng(settings.seed)
    selector = MoveSelector(
        SearchEngine(Mark.SECOND),
        probability=settings.random_move_probability,
        threshold=settings.random_move_threshold,
        rng=rng,
    )
    human_engine = SearchEngine(Mark.FIRST)
    session = GameSession(Mode.AI, selector=selector)

    t0 = time.perf_counter()
    for _ in range(games):
        session.reset()
        while not session.outcome.is_terminal:
            if session.is_computer_turn:
                session.play_computer_move()
                continue
            board = session.get_board()
            if opponent == "random":
                empty = [i for i, v in enumerate(board) if v == Mark.EMPTY]
                move = int(rng.choice(empty))
            else:
                move = human_engine.best_move(board)
            session.submit_move(move)
    elapsed = time.perf_counter() - t0
    report = ArenaReport(games=games, opponent=opponent, tally=session.get_score_tally(), elapsed_s=elapsed)
    log.info("arena: %d games vs %s in %.2fs -> %s", games, opponent, elapsed, report.tally.as_dict())
    return report
