"""Runtime settings for the computer opponent and the play loop.

Environment-first: every field can be set through a NOUGHTS_* variable and
falls back to the reference defaults when the variable is unset or empty.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Callable, Dict, Mapping, Optional, Tuple, TypeVar

from .selector import DEFAULT_RANDOM_MOVE_PROBABILITY, DEFAULT_RANDOM_MOVE_THRESHOLD

T = TypeVar("T")

ENV_PREFIX = "NOUGHTS_"

# difficulty -> (random move probability, empty-cell threshold)
DIFFICULTY_PRESETS: Dict[str, Tuple[float, int]] = {
    "easy": (0.6, 4),
    "normal": (DEFAULT_RANDOM_MOVE_PROBABILITY, DEFAULT_RANDOM_MOVE_THRESHOLD),
    "hard": (0.0, DEFAULT_RANDOM_MOVE_THRESHOLD),
}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    random_move_probability: float = DEFAULT_RANDOM_MOVE_PROBABILITY
    random_move_threshold: int = DEFAULT_RANDOM_MOVE_THRESHOLD
    think_delay_min: float = 0.5
    think_delay_max: float = 1.5
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.random_move_probability <= 1.0:
            raise ConfigError(
                f"random_move_probability must be within [0, 1], got {self.random_move_probability}"
            )
        if not 0 <= self.random_move_threshold <= 9:
            raise ConfigError(
                f"random_move_threshold must be within 0-9, got {self.random_move_threshold}"
            )
        if self.think_delay_min < 0 or self.think_delay_max < self.think_delay_min:
            raise ConfigError(
                f"think delay range is invalid: [{self.think_delay_min}, {self.think_delay_max}]"
            )

    @classmethod
    def for_difficulty(cls, name: str, **overrides) -> "Settings":
        probability, threshold = preset(name)
        return cls(random_move_probability=probability, random_move_threshold=threshold, **overrides)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        base = cls()
        difficulty = _read(env, "DIFFICULTY", str)
        if difficulty:
            probability, threshold = preset(difficulty)
            base = replace(base, random_move_probability=probability, random_move_threshold=threshold)
        overrides = {
            "random_move_probability": _read(env, "RANDOM_MOVE_PROBABILITY", float),
            "random_move_threshold": _read(env, "RANDOM_MOVE_THRESHOLD", int),
            "think_delay_min": _read(env, "THINK_DELAY_MIN", float),
            "think_delay_max": _read(env, "THINK_DELAY_MAX", float),
            "seed": _read(env, "SEED", int),
        }
        return replace(base, **{k: v for k, v in overrides.items() if v is not None})


def preset(name: str) -> Tuple[float, int]:
    try:
        return DIFFICULTY_PRESETS[name.strip().lower()]
    except KeyError:
        choices = ", ".join(sorted(DIFFICULTY_PRESETS))
        raise ConfigError(f"Unknown difficulty {name!r} (choose from {choices})") from None


def _read(env: Mapping[str, str], key: str, parse: Callable[[str], T]) -> Optional[T]:
    raw = env.get(ENV_PREFIX + key)
    if raw is None or not raw.strip():
        return None
    try:
        return parse(raw.strip())
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}{key} has an invalid value: {raw!r}") from None
