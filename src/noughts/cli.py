from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from dataclasses import replace
from typing import Optional

import numpy as np

from . import rules
from .arena import OPPONENTS, simulate
from .board import Board
from .config import DIFFICULTY_PRESETS, ConfigError, Settings, preset
from .errors import GameError
from .search import SearchEngine, pick_best
from .session import Controller, GameSession, Mode

KEY_HELP = "keys: 1-9 place a mark, r reset board, m switch mode, s reset score, q quit"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="noughts", description="Tic-tac-toe with a minimax opponent")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--info", action="store_true", help="Print environment and dependency info and exit")
    p.add_argument("--seed", type=int, default=None, help="Seed for the computer's random moves")

    p_play = sub.add_parser("play", help="Play in the terminal")
    p_play.add_argument("--mode", choices=[m.value for m in Mode], default=Mode.AI.value,
                        help="pvp: two humans, ai: X is human and O is the computer (default: ai)")
    p_play.add_argument("--difficulty", choices=sorted(DIFFICULTY_PRESETS), default=None,
                        help="Computer difficulty preset (default: from environment, else normal)")
    p_play.add_argument("--no-delay", action="store_true", help="Skip the computer's thinking pause")

    p_best = sub.add_parser("best-move", help="Best move for the side to move")
    p_best.add_argument("--board", required=True,
                        help="Board string, 9 cells of 0/1/2 or ./X/O, e.g. 110220000")

    p_check = sub.add_parser("check", help="Report winner, winning line, or draw for a board")
    p_check.add_argument("--board", required=True, help="Board string, e.g. XXXOO....")

    p_sim = sub.add_parser("simulate", help="Play the computer against a scripted X and print a JSON report")
    p_sim.add_argument("--games", type=int, default=100, help="Number of games (default: 100)")
    p_sim.add_argument("--opponent", choices=OPPONENTS, default="random", help="Policy for X")
    p_sim.add_argument("--difficulty", choices=sorted(DIFFICULTY_PRESETS), default=None,
                       help="Computer difficulty preset")

    return p


def _print_info() -> None:
    import platform

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    print(f"numpy={np.__version__}")


def _resolve_settings(ns: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    difficulty = getattr(ns, "difficulty", None)
    if difficulty:
        probability, threshold = preset(difficulty)
        settings = replace(settings, random_move_probability=probability, random_move_threshold=threshold)
    if ns.seed is not None:
        settings = replace(settings, seed=ns.seed)
    return settings


def _parse_board(raw: str) -> Optional[Board]:
    try:
        board = Board.from_string(raw)
    except ValueError as exc:
        logging.error("Invalid board string: %s", exc)
        return None
    if not rules.is_reachable(board):
        logging.error("Board is not a valid reachable state.")
        return None
    return board


def _status_line(session: GameSession) -> str:
    outcome = session.outcome
    if outcome.status is rules.Status.DRAW:
        return "It's a draw!"
    if outcome.status is rules.Status.WON:
        if session.controller_of(outcome.winner) is Controller.COMPUTER:
            return f"AI wins! line={list(session.get_winning_line())}"
        return f"Player {outcome.winner.symbol} wins! line={list(session.get_winning_line())}"
    return f"Player {session.side_to_move.symbol}'s turn"


def _show(session: GameSession) -> None:
    print(Board(session.get_board()).render())
    score = session.get_score_tally().as_dict()
    print(f"[{session.mode.value}] {_status_line(session)}  score X={score['X']} O={score['O']} draw={score['draw']}")


def _play(ns: argparse.Namespace, settings: Settings) -> int:
    session = GameSession(Mode(ns.mode), settings=settings)
    delay_rng = np.random.default_rng(settings.seed)
    print(KEY_HELP)
    _show(session)
    while True:
        try:
            key = input("> ").strip().lower()
        except EOFError:
            return 0
        if not key:
            continue
        if key == "q":
            return 0
        if key == "r":
            session.reset()
        elif key == "m":
            session.set_mode(Mode.PVP if session.mode is Mode.AI else Mode.AI)
        elif key == "s":
            session.reset_score()
        elif len(key) == 1 and key in "123456789":
            result = session.submit_move(int(key) - 1)
            if not result.accepted:
                print(f"Rejected: {result.error}")
                continue
            if session.is_computer_turn:
                print("AI is thinking...")
                if not ns.no_delay:
                    time.sleep(float(delay_rng.uniform(settings.think_delay_min, settings.think_delay_max)))
                session.play_computer_move()
        else:
            print(KEY_HELP)
            continue
        _show(session)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("noughts"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    try:
        settings = _resolve_settings(ns)
    except ConfigError as exc:
        logging.error("%s", exc)
        return 2

    if ns.cmd == "play":
        return _play(ns, settings)

    if ns.cmd == "best-move":
        board = _parse_board(ns.board)
        if board is None:
            return 2
        to_move = board.side_to_move()
        engine = SearchEngine(to_move)
        scores = engine.move_scores(board)
        try:
            best = pick_best(scores)
        except GameError as exc:
            logging.error("%s", exc)
            return 2
        logging.info(
            "to_move=%s best=%d scores=%s nodes=%d",
            to_move.symbol,
            best,
            scores,
            engine.last_nodes,
        )
        return 0

    if ns.cmd == "check":
        board = _parse_board(ns.board)
        if board is None:
            return 2
        outcome = rules.outcome(board)
        line = rules.winning_line(board)
        logging.info(
            "outcome=%s winner=%s line=%s",
            outcome.status.value,
            outcome.winner.symbol if outcome.winner is not None else "-",
            list(line) if line is not None else "-",
        )
        return 0

    if ns.cmd == "simulate":
        if ns.games < 0:
            logging.error("--games must be non-negative")
            return 2
        report = simulate(ns.games, ns.opponent, settings)
        print(json.dumps(report.to_dict(), indent=2))
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
