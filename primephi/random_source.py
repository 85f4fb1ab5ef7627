# primephi/random_source.py
# Seedable uniform integer source over gmpy2's random state.
# One instance per caller (or per thread); instances are not thread-safe.

from __future__ import annotations
import logging, time
from typing import Optional

import gmpy2
from gmpy2 import mpz

from . import config
from .numeric import Int

log = logging.getLogger(__name__)


class RandomSource:
    """
    Uniform integers in [lo, hi) for witness picking and candidate sampling.

    Seeding is explicit (``seed_with`` / ``seed``) or lazy: the first sample
    drawn from an unseeded source reads ``entropy_bytes`` bytes from
    ``entropy_path``, falling back to the clock if that fails.
    """

    def __init__(self, seed: Optional[int] = None, *,
                 entropy_bytes: Optional[int] = None,
                 entropy_path: Optional[str] = None):
        if entropy_bytes is not None and entropy_bytes < 0:
            raise ValueError("entropy_bytes must be >= 0")
        # None => PRIMEPHI_SEED_BYTES / PRIMEPHI_ENTROPY_PATH, read at seed time
        self.entropy_bytes = entropy_bytes
        self.entropy_path = entropy_path
        self._state = None
        if seed is not None:
            self.seed_with(seed)

    @property
    def seeded(self) -> bool:
        return self._state is not None

    def seed_with(self, value: int) -> None:
        """Deterministic seed; same value => same sample sequence."""
        self._state = gmpy2.random_state(int(value))

    def seed(self, entropy_bytes: Optional[int] = None) -> int:
        """
        Seed from the OS entropy source, or from the clock if it can't be read.
        Returns the number of entropy bytes consumed (0 when the clock was used).
        """
        nbytes = entropy_bytes
        if nbytes is None:
            nbytes = config.seed_bytes() if self.entropy_bytes is None else self.entropy_bytes
        if nbytes > 0:
            path = config.entropy_path() if self.entropy_path is None else self.entropy_path
            try:
                with open(path, "rb") as f:
                    raw = f.read(nbytes)
            except OSError as e:
                log.warning("%s unreadable (%s); seeding from the clock", path, e)
            else:
                if len(raw) == nbytes:
                    self._state = gmpy2.random_state(int.from_bytes(raw, "big"))
                    return nbytes
                log.warning("short read from %s (%d of %d bytes); seeding from the clock",
                            path, len(raw), nbytes)
        self._state = gmpy2.random_state(time.time_ns())
        return 0

    # ---------- sampling ----------

    def sample_range(self, lo: Int, hi: Int) -> mpz:
        """Uniform integer in [lo, hi)."""
        if hi <= lo:
            raise ValueError(f"empty range [{lo}, {hi})")
        if self._state is None:
            self.seed()
        return gmpy2.mpz_random(self._state, mpz(hi) - lo) + lo

    def sample_bits(self, bits: int) -> mpz:
        """Uniform odd integer with exactly ``bits`` bits (top and bottom set)."""
        if bits < 2:
            raise ValueError("bits must be >= 2")
        lo = mpz(1) << (bits - 1)
        return self.sample_range(lo, lo << 1) | 1
