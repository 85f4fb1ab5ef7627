# primephi/miller_rabin.py
# Randomized Miller-Rabin compositeness test over arbitrary-precision n.
# True => probably prime (error <= 4**-rounds); False => definitely composite.

from __future__ import annotations
from typing import Optional

import gmpy2
from gmpy2 import mpz

from .numeric import split_pow2
from .random_source import RandomSource


def _witness_passes(a, d, s: int, n) -> bool:
    """One round with base a, where n-1 = d * 2**s and d is odd."""
    x = gmpy2.powmod(a, d, n)
    if x == 1 or x == n - 1:
        return True
    for _ in range(s - 1):
        x = gmpy2.powmod(x, 2, n)
        if x == 1:
            return False
        if x == n - 1:
            return True
    return False


def miller_rabin(n, rounds: int, rng: Optional[RandomSource] = None) -> bool:
    """
    Run ``rounds`` rounds with random witnesses drawn from ``rng``.

    Without ``rng`` each call makes and seeds its own RandomSource, which
    reads the entropy source again. Callers testing many numbers should
    pass one shared source.
    """
    if rounds < 1:
        raise ValueError("rounds must be >= 1")
    n = mpz(n)
    if n == 2 or n == 3:
        return True
    if n <= 1 or (n & 1) == 0:
        return False

    d, s = split_pow2(n - 1)
    if rng is None:
        rng = RandomSource()
    for _ in range(rounds):
        a = rng.sample_range(2, n - 1)   # a in [2, n-2]
        if not _witness_passes(a, d, s, n):
            return False
    return True


def miller_rabin_bases(n, bases) -> bool:
    """Same test with caller-chosen witnesses; each base is reduced into [2, n-2]."""
    n = mpz(n)
    if n == 2 or n == 3:
        return True
    if n <= 1 or (n & 1) == 0:
        return False
    d, s = split_pow2(n - 1)
    for a in bases:
        a = mpz(a) % n
        if a < 2 or a > n - 2:
            continue
        if not _witness_passes(a, d, s, n):
            return False
    return True
