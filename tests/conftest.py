import pytest

from primephi import PrimeSieve, RandomSource


@pytest.fixture(scope="session")
def sieve100():
    return PrimeSieve(100)


@pytest.fixture(scope="session")
def sieve_10k():
    return PrimeSieve(10_000)


@pytest.fixture
def rng():
    return RandomSource(seed=0x5EED)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("PRIMEPHI_SIEVE_BOUND", "PRIMEPHI_SEED_BYTES", "PRIMEPHI_ENTROPY_PATH",
                 "PRIMEPHI_PREFILTER_ROUNDS", "PRIMEPHI_SEARCH_MAX_SECONDS", "PRIMEPHI_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
