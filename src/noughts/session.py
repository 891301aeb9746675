"""
Game session: turn order, move application, outcomes, and the running score.

State machine:
- AwaitingMove(side_to_move) while the outcome is in progress.
- Terminal(outcome) after a win or a draw; only reset() leaves it.

The session is synchronous. A presentation layer that wants a "thinking" pause
waits on its own and then calls play_computer_move() (or request_computer_move()
followed by submit_move()).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from . import rules
from .board import Board, check_position
from .config import Settings
from .errors import GameError, IllegalMove
from .marks import Mark
from .rules import Outcome, Status, WinLine
from .search import SearchEngine
from .selector import MoveSelector

log = logging.getLogger(__name__)


class Mode(str, Enum):
    PVP = "pvp"
    AI = "ai"


class Controller(Enum):
    HUMAN = "human"
    COMPUTER = "computer"


def assignment(mode: Mode) -> Dict[Mark, Controller]:
    mode = Mode(mode)
    if mode is Mode.AI:
        return {Mark.FIRST: Controller.HUMAN, Mark.SECOND: Controller.COMPUTER}
    return {Mark.FIRST: Controller.HUMAN, Mark.SECOND: Controller.HUMAN}


@dataclass
class ScoreTally:
    first_wins: int = 0
    second_wins: int = 0
    draws: int = 0

    def record(self, outcome: Outcome) -> None:
        if outcome.status is Status.DRAW:
            self.draws += 1
        elif outcome.winner == Mark.FIRST:
            self.first_wins += 1
        elif outcome.winner == Mark.SECOND:
            self.second_wins += 1

    def clear(self) -> None:
        self.first_wins = self.second_wins = self.draws = 0

    def as_dict(self) -> Dict[str, int]:
        return {"X": self.first_wins, "O": self.second_wins, "draw": self.draws}


@dataclass(frozen=True)
class MoveResult:
    accepted: bool
    outcome: Outcome
    side_to_move: Optional[Mark]  # None once the game is over
    position: Optional[int] = None
    error: Optional[str] = None


class GameSession:
    def __init__(
        self,
        mode: Mode = Mode.PVP,
        selector: Optional[MoveSelector] = None,
        settings: Optional[Settings] = None,
    ):
        if selector is None:
            settings = settings or Settings()
            selector = MoveSelector(
                SearchEngine(Mark.SECOND),
                probability=settings.random_move_probability,
                threshold=settings.random_move_threshold,
                seed=settings.seed,
            )
        self.selector = selector
        self._board = Board()
        self._scores = ScoreTally()
        self._mode = Mode(mode)
        self._players = assignment(self._mode)
        self._side_to_move: Optional[Mark] = Mark.FIRST
        self._outcome = Outcome.in_progress()

    # read-only views

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def side_to_move(self) -> Optional[Mark]:
        return self._side_to_move

    @property
    def is_computer_turn(self) -> bool:
        return self._side_to_move is not None and self._players[self._side_to_move] is Controller.COMPUTER

    def controller_of(self, mark: Mark) -> Controller:
        return self._players[Mark(mark)]

    def get_board(self) -> Tuple[Mark, ...]:
        return self._board.snapshot()

    def get_winning_line(self) -> Optional[WinLine]:
        if self._outcome.status is not Status.WON:
            return None
        return rules.winning_line(self._board.snapshot())

    def get_score_tally(self) -> ScoreTally:
        s = self._scores
        return ScoreTally(s.first_wins, s.second_wins, s.draws)

    # transitions

    def submit_move(self, position: int, player: Controller = Controller.HUMAN) -> MoveResult:
        try:
            position = check_position(position)
            if self._outcome.is_terminal or self._side_to_move is None:
                raise IllegalMove("Game is already over")
            mark = self._side_to_move
            if self._players[mark] is not player:
                raise IllegalMove(
                    f"It is {mark.symbol}'s turn ({self._players[mark].value}), "
                    f"not a {player.value} move"
                )
            self._board.place(position, mark)
        except GameError as exc:
            log.warning("rejected move %r: %s", position, exc)
            return MoveResult(False, self._outcome, self._side_to_move, position=None, error=str(exc))

        self._outcome = rules.outcome(self._board.snapshot())
        if self._outcome.is_terminal:
            self._side_to_move = None
            self._scores.record(self._outcome)
            log.info("game over: %s (score %s)", self._outcome, self._scores.as_dict())
        else:
            self._side_to_move = mark.opponent()
        return MoveResult(True, self._outcome, self._side_to_move, position=position)

    def request_computer_move(self) -> int:
        """Position the computer would play now. Does not change the session."""
        if self._outcome.is_terminal or self._side_to_move is None:
            raise IllegalMove("Game is already over")
        if self._side_to_move != self.selector.mark:
            raise IllegalMove(f"The computer plays {self.selector.mark.symbol}, not {self._side_to_move.symbol}")
        return self.selector.choose_move(self._board.clone())

    def play_computer_move(self) -> MoveResult:
        position = self.request_computer_move()
        return self.submit_move(position, player=Controller.COMPUTER)

    def reset(self) -> None:
        self._board.reset()
        self._side_to_move = Mark.FIRST
        self._outcome = Outcome.in_progress()
        log.info("board reset (%s mode)", self._mode.value)

    def reset_score(self) -> None:
        self._scores.clear()
        log.info("score reset")

    def set_mode(self, mode: Mode) -> None:
        self._mode = Mode(mode)
        self._players = assignment(self._mode)
        self.reset()
