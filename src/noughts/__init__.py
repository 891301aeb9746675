"""noughts package.

Tic-tac-toe game engine with a minimax (alpha-beta) computer opponent,
a tunable difficulty policy, a game session with scoring, and a small CLI.

Convenience imports are exposed for common workflows.
"""

from .board import Board
from .errors import GameError, IllegalMove, InvalidPosition
from .marks import Mark
from .rules import WIN_LINES, Outcome, Status
from .search import SearchEngine
from .selector import MoveSelector
from .session import Controller, GameSession, Mode, MoveResult, ScoreTally

__all__ = [
    "Board",
    "Mark",
    "WIN_LINES",
    "Outcome",
    "Status",
    "SearchEngine",
    "MoveSelector",
    "GameSession",
    "Mode",
    "Controller",
    "MoveResult",
    "ScoreTally",
    "GameError",
    "IllegalMove",
    "InvalidPosition",
]
