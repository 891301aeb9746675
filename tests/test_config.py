import pytest

from noughts.config import DIFFICULTY_PRESETS, ConfigError, Settings, preset
from noughts.session import GameSession

ENV_KEYS = [
    "NOUGHTS_DIFFICULTY",
    "NOUGHTS_RANDOM_MOVE_PROBABILITY",
    "NOUGHTS_RANDOM_MOVE_THRESHOLD",
    "NOUGHTS_THINK_DELAY_MIN",
    "NOUGHTS_THINK_DELAY_MAX",
    "NOUGHTS_SEED",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults_without_env(clean_env):
    s = Settings.from_env()
    assert s == Settings()
    assert s.random_move_probability == 0.3
    assert s.random_move_threshold == 6
    assert (s.think_delay_min, s.think_delay_max) == (0.5, 1.5)
    assert s.seed is None


def test_env_overrides(clean_env):
    clean_env.setenv("NOUGHTS_RANDOM_MOVE_PROBABILITY", "0.1")
    clean_env.setenv("NOUGHTS_RANDOM_MOVE_THRESHOLD", "5")
    clean_env.setenv("NOUGHTS_THINK_DELAY_MIN", "0")
    clean_env.setenv("NOUGHTS_THINK_DELAY_MAX", "0.2")
    clean_env.setenv("NOUGHTS_SEED", "42")
    s = Settings.from_env()
    assert s == Settings(0.1, 5, 0.0, 0.2, 42)


def test_blank_values_fall_back(clean_env):
    clean_env.setenv("NOUGHTS_SEED", "  ")
    assert Settings.from_env().seed is None


def test_difficulty_preset_and_explicit_override():
    s = Settings.from_env({"NOUGHTS_DIFFICULTY": "easy"})
    assert (s.random_move_probability, s.random_move_threshold) == DIFFICULTY_PRESETS["easy"]
    s = Settings.from_env({"NOUGHTS_DIFFICULTY": "Hard", "NOUGHTS_RANDOM_MOVE_THRESHOLD": "3"})
    assert s.random_move_probability == 0.0
    assert s.random_move_threshold == 3


@pytest.mark.parametrize("env", [
    {"NOUGHTS_RANDOM_MOVE_PROBABILITY": "lots"},
    {"NOUGHTS_RANDOM_MOVE_PROBABILITY": "1.5"},
    {"NOUGHTS_RANDOM_MOVE_THRESHOLD": "4.5"},
    {"NOUGHTS_RANDOM_MOVE_THRESHOLD": "12"},
    {"NOUGHTS_THINK_DELAY_MIN": "2", "NOUGHTS_THINK_DELAY_MAX": "1"},
    {"NOUGHTS_DIFFICULTY": "impossible"},
])
def test_invalid_env_raises(env):
    with pytest.raises(ConfigError):
        Settings.from_env(env)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        preset("nightmare")


def test_for_difficulty():
    s = Settings.for_difficulty("normal", seed=3)
    assert (s.random_move_probability, s.random_move_threshold, s.seed) == (0.3, 6, 3)


def test_session_uses_settings():
    session = GameSession(settings=Settings(random_move_probability=0.0, random_move_threshold=2))
    assert session.selector.probability == 0.0
    assert session.selector.threshold == 2
