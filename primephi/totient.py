# primephi/totient.py
# Euler's totient phi(n) by multiplicative decomposition.
# - sieve lookup short-cuts known primes (phi(p) = p-1)
# - even n peels halves: phi(2m) = 2 phi(m) for even m, phi(m) for odd m
# - odd n splits off its smallest prime p with the gcd correction
#     phi(ab) = phi(a) phi(b) gcd(a,b) / phi(gcd(a,b))
# - trial division past the sieve's largest prime when the sieve runs short

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .errors import TotientInvariantError
from .gcd import binary_gcd
from .numeric import Int, as_int, is_even, isqrt
from .sieve import PrimeSieve

log = logging.getLogger(__name__)


class Totient:
    """phi(n) backed by a caller-owned sieve.

    The decomposition runs as a loop over the pending cofactor with a running
    product, so stack depth does not grow with the exponent of n's factors.
    Sub-evaluations recurse only on primes and return after one level.
    """

    def __init__(self, sieve: PrimeSieve):
        self.sieve = sieve

    def __call__(self, n) -> Int:
        n = as_int(n)
        if n < 0:
            n = -n
        acc = 1
        while True:
            if n == 1:
                return acc
            if n < 2:
                return 0
            if self.sieve.covers(n) and self.sieve.is_prime(n):
                return acc * (n - 1)

            if is_even(n):
                m = n >> 1
                if is_even(m):
                    acc *= 2
                n = m
                continue

            p = self.smallest_factor(n)
            if p is None:
                return acc * (n - 1)
            o = n // p
            d = binary_gcd(p, o)
            if d == 1:
                acc *= self(p)
            else:
                acc = acc * self(p) * d // self(d)
            n = o

    def smallest_factor(self, n: Int) -> Optional[Int]:
        """Smallest prime factor of odd n > 1, or None when n is prime."""
        r = isqrt(n)
        for p in self.sieve:
            if p > r:
                break
            if n % p == 0:
                return p
        if self.sieve.covers(n):
            # every prime <= sqrt(n) is in the list, so a composite must have hit
            raise TotientInvariantError(
                f"{n} is composite per the sieve but has no sieved factor")

        # odd candidates from just above the largest sieved prime
        largest = self.sieve.largest or 1
        c = largest + 2 if largest & 1 else largest + 1
        while c <= r:
            if n % c == 0:
                log.debug("trial division: %d | %d (beyond sieve bound %d)",
                          c, n, self.sieve.bound)
                return c
            c += 2
        return None


def phi(n, sieve: PrimeSieve) -> Int:
    """Euler's totient of n using ``sieve`` as the primality oracle."""
    return Totient(sieve)(n)


# ---------- reference values and check driver ----------

TOTIENT_CHECKS: tuple[tuple[int, int], ...] = (
    (1, 1),
    (12, 4),
    (1234, 616),
    (12345, 6576),
    (123456, 41088),
    (1234567890, 329040288),
)

CHECK_BOUNDS: tuple[int, ...] = (10, 100, 1000, 10_000, 100_000, 1_000_000, 10_000_000)


@dataclass(frozen=True)
class CheckResult:
    n: int
    bound: int
    computed: int
    expected: int

    @property
    def ok(self) -> bool:
        return self.computed == self.expected


def check_totients(bounds: Iterable[int] = CHECK_BOUNDS,
                   cases: Iterable[tuple[int, int]] = TOTIENT_CHECKS) -> Iterator[CheckResult]:
    """Evaluate every (n, expected) case against a fresh sieve per bound."""
    cases = tuple(cases)
    for bound in bounds:
        f = Totient(PrimeSieve(bound))
        for n, expected in cases:
            yield CheckResult(n=n, bound=bound, computed=int(f(n)), expected=expected)


def totient_table(sieve: PrimeSieve, start: int, stop: int, step: int = 1) -> Iterator[tuple[int, Int]]:
    """(n, phi(n)) for n in range(start, stop, step)."""
    f = Totient(sieve)
    for n in range(start, stop, step):
        yield n, f(n)
