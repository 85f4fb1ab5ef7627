# primephi/safe_prime.py
# Safe-prime pair search: random q of exact bit length with q and p = 2q+1
# both probable primes.
# - cheap low-round Miller-Rabin pre-filter on q
# - full-confidence test of q, then of p
# - optional attempt / wall-clock budget (SearchExhausted when spent)

from __future__ import annotations
import logging, time
from typing import NamedTuple, Optional

from gmpy2 import mpz

from . import config
from .errors import SearchExhausted
from .miller_rabin import miller_rabin
from .random_source import RandomSource

log = logging.getLogger(__name__)


class SafePrimePair(NamedTuple):
    q: mpz   # Sophie Germain prime
    p: mpz   # safe prime, p = 2q + 1


def find_safe_prime(bits: int, rounds: int, rng: Optional[RandomSource] = None, *,
                    prefilter_rounds: Optional[int] = None,
                    max_attempts: Optional[int] = None,
                    max_seconds: Optional[float] = None) -> SafePrimePair:
    """
    Search until a pair is found or the budget runs out.

    ``max_attempts`` counts sampled candidates. ``max_seconds`` defaults to
    PRIMEPHI_SEARCH_MAX_SECONDS; 0 means no deadline, as in the environment.
    Both unset means the loop is unbounded.
    """
    if bits < 2:
        raise ValueError("bits must be >= 2")
    if rounds < 1:
        raise ValueError("rounds must be >= 1")
    if max_attempts is not None and max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")
    if prefilter_rounds is not None and prefilter_rounds < 1:
        raise ValueError("prefilter_rounds must be >= 1")
    if max_seconds is not None and max_seconds < 0:
        raise ValueError("max_seconds must be >= 0")

    if prefilter_rounds is None:
        prefilter_rounds = config.prefilter_rounds()
    if max_seconds is None:
        max_seconds = config.search_max_seconds()
    elif max_seconds == 0:
        max_seconds = None
    if rng is None:
        rng = RandomSource()

    t0 = time.perf_counter()
    deadline = None if max_seconds is None else t0 + max_seconds
    attempts = 0
    while True:
        if max_attempts is not None and attempts >= max_attempts:
            raise SearchExhausted(attempts, time.perf_counter() - t0)
        if deadline is not None and time.perf_counter() >= deadline:
            raise SearchExhausted(attempts, time.perf_counter() - t0)
        attempts += 1

        q = rng.sample_bits(bits)
        if not miller_rabin(q, prefilter_rounds, rng):
            continue
        if not miller_rabin(q, rounds, rng):
            continue
        p = 2 * q + 1
        if miller_rabin(p, rounds, rng):
            log.info("safe prime pair (%d bits) after %d candidates in %.2fs",
                     bits, attempts, time.perf_counter() - t0)
            return SafePrimePair(q, p)
        log.debug("candidate %d: q prime, 2q+1 composite", attempts)
