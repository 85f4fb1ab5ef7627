import pytest
from gmpy2 import mpz
from sympy import isprime

from primephi import RandomSource, miller_rabin, miller_rabin_bases

CARMICHAEL = [561, 1105, 1729, 2465, 2821, 6601, 8911]


def test_small_cases(rng):
    assert miller_rabin(2, 1, rng)
    assert miller_rabin(3, 1, rng)
    for n in (-7, 0, 1, 4, 100, 2**64):
        assert not miller_rabin(n, 10, rng)


def test_agrees_with_sieve_on_primes(sieve_10k, rng):
    for p in sieve_10k:
        assert miller_rabin(p, 1, rng), p


def test_composites_below_10k(rng):
    for n in range(5, 10_000, 2):
        if not isprime(n):
            assert not miller_rabin(n, 20, rng), n


def test_pseudoprime_341(rng):
    # 341 = 11 * 31 fools the base-2 Fermat test but not strong bases
    assert not miller_rabin_bases(341, [2])
    rejected = sum(not miller_rabin(341, 1, rng) for _ in range(500))
    assert rejected > 300
    assert all(not miller_rabin(341, 10, rng) for _ in range(200))


@pytest.mark.parametrize("n", CARMICHAEL)
def test_carmichael_numbers(n, rng):
    assert not miller_rabin(n, 20, rng)


def test_big_known_primes(rng):
    m127 = mpz(2) ** 127 - 1
    assert miller_rabin(m127, 40, rng)
    assert not miller_rabin(m127 * (mpz(2) ** 89 - 1), 40, rng)
    assert miller_rabin(2**521 - 1, 20, rng)


def test_deterministic_with_seed():
    a = [miller_rabin(n, 3, RandomSource(seed=7)) for n in range(3, 500, 2)]
    b = [miller_rabin(n, 3, RandomSource(seed=7)) for n in range(3, 500, 2)]
    assert a == b


def test_default_rng_is_created(tmp_path, monkeypatch):
    monkeypatch.setenv("PRIMEPHI_ENTROPY_PATH", str(tmp_path / "missing"))
    assert miller_rabin(7919, 5)
    assert not miller_rabin(7917, 5)


def test_rounds_must_be_positive(rng):
    with pytest.raises(ValueError):
        miller_rabin(97, 0, rng)


def test_fixed_bases():
    assert miller_rabin_bases(2047, [2])  # strong pseudoprime to base 2
    assert miller_rabin_bases(97, [2, 3, 5])
    assert not miller_rabin_bases(91, [2, 3])
