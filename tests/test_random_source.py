import logging

import pytest

from primephi import RandomSource


@pytest.fixture
def entropy_file(tmp_path):
    path = tmp_path / "entropy"
    path.write_bytes(bytes(range(64)))
    return path


def test_seed_reads_requested_bytes(entropy_file):
    rs = RandomSource(entropy_path=str(entropy_file), entropy_bytes=16)
    assert not rs.seeded
    assert rs.seed() == 16
    assert rs.seed(32) == 32
    assert rs.seeded


def test_same_entropy_same_stream(entropy_file):
    a = RandomSource(entropy_path=str(entropy_file), entropy_bytes=32)
    b = RandomSource(entropy_path=str(entropy_file), entropy_bytes=32)
    a.seed(); b.seed()
    assert [a.sample_range(0, 10**30) for _ in range(5)] == [b.sample_range(0, 10**30) for _ in range(5)]


def test_missing_source_falls_back_to_clock(tmp_path, caplog):
    rs = RandomSource(entropy_path=str(tmp_path / "nope"), entropy_bytes=32)
    with caplog.at_level(logging.WARNING, logger="primephi.random_source"):
        assert rs.seed() == 0
    assert rs.seeded
    assert "seeding from the clock" in caplog.text


def test_short_read_falls_back(entropy_file):
    rs = RandomSource(entropy_path=str(entropy_file), entropy_bytes=128)
    assert rs.seed() == 0
    assert rs.seeded


def test_zero_bytes_uses_clock(entropy_file):
    rs = RandomSource(entropy_path=str(entropy_file))
    assert rs.seed(0) == 0


def test_lazy_seed_on_first_sample(entropy_file):
    rs = RandomSource(entropy_path=str(entropy_file), entropy_bytes=8)
    assert not rs.seeded
    rs.sample_range(0, 2)
    assert rs.seeded


def test_seed_from_settings(monkeypatch, entropy_file):
    monkeypatch.setenv("PRIMEPHI_ENTROPY_PATH", str(entropy_file))
    monkeypatch.setenv("PRIMEPHI_SEED_BYTES", "24")
    assert RandomSource().seed() == 24


def test_explicit_seed_is_reproducible():
    a, b = RandomSource(seed=42), RandomSource(seed=42)
    assert a.seeded
    assert [a.sample_range(2, 10**9) for _ in range(20)] == [b.sample_range(2, 10**9) for _ in range(20)]


def test_sample_range_bounds(rng):
    seen = {int(rng.sample_range(5, 9)) for _ in range(400)}
    assert seen == {5, 6, 7, 8}
    assert rng.sample_range(-3, -2) == -3
    with pytest.raises(ValueError):
        rng.sample_range(4, 4)


@pytest.mark.parametrize("bits", [2, 3, 16, 64, 257])
def test_sample_bits(bits, rng):
    for _ in range(50):
        x = rng.sample_bits(bits)
        assert x.bit_length() == bits
        assert x & 1


def test_sample_bits_too_small(rng):
    with pytest.raises(ValueError):
        rng.sample_bits(1)


def test_negative_entropy_bytes():
    with pytest.raises(ValueError):
        RandomSource(entropy_bytes=-1, entropy_path="/dev/urandom")


def test_seeded_source_ignores_bad_env(monkeypatch):
    monkeypatch.setenv("PRIMEPHI_LOG_LEVEL", "chatty")
    monkeypatch.setenv("PRIMEPHI_SEED_BYTES", "plenty")
    rs = RandomSource(seed=42)
    assert 0 <= rs.sample_range(0, 100) < 100


def test_explicit_entropy_args_ignore_bad_env(monkeypatch, entropy_file):
    monkeypatch.setenv("PRIMEPHI_SEED_BYTES", "plenty")
    rs = RandomSource(entropy_path=str(entropy_file), entropy_bytes=8)
    assert rs.seed() == 8


def test_env_read_at_seed_time(monkeypatch, entropy_file):
    rs = RandomSource()
    monkeypatch.setenv("PRIMEPHI_ENTROPY_PATH", str(entropy_file))
    monkeypatch.setenv("PRIMEPHI_SEED_BYTES", "12")
    assert rs.seed() == 12
