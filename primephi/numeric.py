# primephi/numeric.py
# Small integer helpers shared by the sieve, totient and Miller-Rabin code.
# Arbitrary precision comes from gmpy2; plain ints are accepted everywhere.

from __future__ import annotations
from typing import Union

import gmpy2
from gmpy2 import mpz

Int = Union[int, mpz]


def as_int(n) -> Int:
    """Accept int, mpz or a decimal string; reject floats and bools."""
    if isinstance(n, bool):
        raise TypeError("bool is not an integer value here")
    if isinstance(n, (int, mpz)):
        return n
    if isinstance(n, str):
        try:
            return int(n.strip().replace("_", ""), 10)
        except ValueError:
            raise ValueError(f"not a decimal integer: {n!r}") from None
    raise TypeError(f"expected an integer, got {type(n).__name__}")


def is_even(n: Int) -> bool:
    return (n & 1) == 0


def isqrt(n: Int) -> Int:
    """Floor square root, keeping the integer flavour of the input."""
    r = gmpy2.isqrt(n)
    return r if isinstance(n, mpz) else int(r)


def split_pow2(n: Int) -> tuple[Int, int]:
    """Write n = d * 2**s with d odd (n > 0). Returns (d, s)."""
    s = 0
    while (n & 1) == 0:
        n >>= 1
        s += 1
    return n, s
