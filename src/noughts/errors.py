"""Game errors. Both are recoverable: a session turns them into rejected moves."""


class GameError(Exception):
    """Base class for rule violations raised by the engine."""


class IllegalMove(GameError):
    """Occupied cell, finished game, or a move submitted out of turn."""


class InvalidPosition(GameError, ValueError):
    """Position outside 0..8."""
