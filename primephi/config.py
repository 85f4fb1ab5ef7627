# primephi/config.py
# Environment-driven defaults. Every knob has a PRIMEPHI_* variable.

from __future__ import annotations
import os
from dataclasses import dataclass

from .errors import ConfigError

DEFAULT_SIEVE_BOUND = 1_000_000
DEFAULT_SEED_BYTES = 256 // 8
DEFAULT_ENTROPY_PATH = "/dev/urandom"
DEFAULT_PREFILTER_ROUNDS = 5


@dataclass(frozen=True)
class Settings:
    sieve_bound: int = DEFAULT_SIEVE_BOUND
    seed_bytes: int = DEFAULT_SEED_BYTES
    entropy_path: str = DEFAULT_ENTROPY_PATH
    prefilter_rounds: int = DEFAULT_PREFILTER_ROUNDS
    search_max_seconds: float | None = None   # None => no deadline
    log_level: str = "WARNING"


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        val = int(raw.replace("_", ""))
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if val < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, got {val}")
    return val


def _env_seconds(name: str) -> float | None:
    s = os.getenv(name, "0").strip().lower()
    if s in ("", "0", "inf", "infinite", "none"):
        return None
    try:
        val = float(s)
    except ValueError:
        raise ConfigError(f"{name} must be a number of seconds, got {s!r}") from None
    if val <= 0:
        raise ConfigError(f"{name} must be positive, got {val}")
    return val


# ---------- per-field readers ----------
# Library code reads only the knobs it needs, so one malformed variable does
# not break callers that never consult it.

def seed_bytes() -> int:
    return _env_int("PRIMEPHI_SEED_BYTES", DEFAULT_SEED_BYTES)


def entropy_path() -> str:
    return os.getenv("PRIMEPHI_ENTROPY_PATH", "").strip() or DEFAULT_ENTROPY_PATH


def prefilter_rounds() -> int:
    return _env_int("PRIMEPHI_PREFILTER_ROUNDS", DEFAULT_PREFILTER_ROUNDS, minimum=1)


def search_max_seconds() -> float | None:
    return _env_seconds("PRIMEPHI_SEARCH_MAX_SECONDS")


def log_level() -> str:
    level = os.getenv("PRIMEPHI_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ConfigError(f"PRIMEPHI_LOG_LEVEL: unknown level {level!r}")
    return level


def load_settings() -> Settings:
    """Read PRIMEPHI_* variables; unset ones fall back to the defaults."""
    return Settings(
        sieve_bound=_env_int("PRIMEPHI_SIEVE_BOUND", DEFAULT_SIEVE_BOUND),
        seed_bytes=seed_bytes(),
        entropy_path=entropy_path(),
        prefilter_rounds=prefilter_rounds(),
        search_max_seconds=search_max_seconds(),
        log_level=log_level(),
    )
