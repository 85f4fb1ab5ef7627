# primephi/errors.py
# Exception types raised by the toolkit.

from __future__ import annotations


class PrimephiError(Exception):
    """Base class for every error raised by primephi."""


class SieveBoundsError(PrimephiError, IndexError):
    """Checked sieve lookup outside [0, bound)."""

    def __init__(self, n, bound: int):
        super().__init__(f"{n} is outside the sieve range [0, {bound})")
        self.n = n
        self.bound = bound


class TotientInvariantError(PrimephiError, AssertionError):
    """A composite inside the sieve bound had no sieved factor. Logic error."""


class SearchExhausted(PrimephiError):
    """Safe-prime search stopped by its attempt or time budget."""

    def __init__(self, attempts: int, elapsed_s: float):
        super().__init__(f"no safe prime after {attempts} candidates in {elapsed_s:.2f}s")
        self.attempts = attempts
        self.elapsed_s = elapsed_s


class ConfigError(PrimephiError, ValueError):
    """Malformed environment setting."""
