from .errors import (
    PrimephiError,
    SieveBoundsError,
    TotientInvariantError,
    SearchExhausted,
    ConfigError,
)
from .gcd import binary_gcd
from .sieve import PrimeSieve
from .totient import Totient, phi
from .random_source import RandomSource
from .miller_rabin import miller_rabin, miller_rabin_bases
from .safe_prime import SafePrimePair, find_safe_prime

__all__ = [
    "PrimephiError", "SieveBoundsError", "TotientInvariantError", "SearchExhausted", "ConfigError",
    "binary_gcd", "PrimeSieve", "Totient", "phi", "RandomSource",
    "miller_rabin", "miller_rabin_bases", "SafePrimePair", "find_safe_prime",
]
__version__ = "0.1.0"
