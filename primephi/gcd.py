# primephi/gcd.py
# Binary (Stein) GCD: shifts, compares and subtraction only, no division.
# Works unchanged on int and gmpy2.mpz operands.

from __future__ import annotations

from .numeric import Int


def binary_gcd(u: Int, v: Int) -> Int:
    """gcd(u, v) for nonnegative u, v. gcd(u, 0) == u."""
    if u < 0 or v < 0:
        raise ValueError("binary_gcd is defined for nonnegative operands only")
    shl = 0
    while u and v and u != v:
        eu = (u & 1) == 0
        ev = (v & 1) == 0
        if eu and ev:
            shl += 1
            u >>= 1
            v >>= 1
        elif eu:
            u >>= 1
        elif ev:
            v >>= 1
        elif u >= v:
            u = (u - v) >> 1
        else:
            u, v = (v - u) >> 1, u
    return (u if u else v) << shl
