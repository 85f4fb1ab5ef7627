# primephi/sieve.py
# Sieve of Eratosthenes over [0, bound): one flag byte per integer plus the
# ascending tuple of primes found. Built once; read-only afterwards.

from __future__ import annotations
import logging, time
from bisect import bisect_right
from itertools import compress
from typing import Iterator

from .errors import SieveBoundsError
from .numeric import Int

log = logging.getLogger(__name__)


class PrimeSieve:
    """
    Primality table for every integer below ``bound``.

    ``is_prime`` is the unchecked lookup (meaningless outside the range,
    negative indices wrap); ``is_prime_checked`` raises SieveBoundsError.
    Concurrent readers are fine; construction and ``rebuild`` are not
    reentrant.
    """

    def __init__(self, bound: int):
        if isinstance(bound, bool) or not isinstance(bound, int) or bound < 0:
            raise ValueError(f"sieve bound must be a nonnegative int, got {bound!r}")
        self._bound = bound
        self._flags = bytearray()
        self._primes: tuple[int, ...] = ()
        self.rebuild()

    def rebuild(self) -> None:
        """Clear both structures and sieve again from scratch."""
        t0 = time.perf_counter()
        N = self._bound
        flags = bytearray(b"\x01") * N
        flags[0:2] = b"\x00" * min(N, 2)
        # Multiples of n below n*n were already cleared by smaller primes,
        # so starting there leaves the same table as starting at 2n.
        n = 2
        while n * n < N:
            if flags[n]:
                flags[n*n:N:n] = bytes(len(range(n*n, N, n)))
            n += 1
        self._flags = flags
        self._primes = tuple(compress(range(N), flags))
        log.debug("sieved [0, %d): %d primes in %.3fs", N, len(self._primes),
                  time.perf_counter() - t0)

    # ---------- lookups ----------

    @property
    def bound(self) -> int:
        return self._bound

    @property
    def largest(self) -> int | None:
        """Largest sieved prime, or None for an empty sieve."""
        return self._primes[-1] if self._primes else None

    @property
    def primes(self) -> tuple[int, ...]:
        return self._primes

    def is_prime(self, n: Int) -> bool:
        return self._flags[n] == 1

    def is_prime_checked(self, n: Int) -> bool:
        if not 0 <= n < self._bound:
            raise SieveBoundsError(n, self._bound)
        return self._flags[n] == 1

    def covers(self, n: Int) -> bool:
        return 0 <= n < self._bound

    def __contains__(self, n) -> bool:
        return self.covers(n) and self._flags[n] == 1

    # ---------- ordered prime list ----------

    def size(self) -> int:
        return len(self._primes)

    __len__ = size

    def first(self) -> int:
        """Position of the smallest prime (always 0)."""
        return 0

    def last(self) -> int:
        """One past the position of the largest prime."""
        return len(self._primes)

    def find(self, n: Int) -> int:
        """Position of the first sieved prime strictly greater than n."""
        return bisect_right(self._primes, n)

    def __getitem__(self, i):
        return self._primes[i]

    def __iter__(self) -> Iterator[int]:
        return iter(self._primes)

    def __repr__(self) -> str:
        return f"PrimeSieve(bound={self._bound}, primes={len(self._primes)})"
