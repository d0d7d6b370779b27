import pytest

from rc6cipher import RC6
from rc6cipher.analysis import AvalancheResult, plaintext_avalanche, key_avalanche, flip_ratio


def test_flip_ratio():
    assert flip_ratio(b"\x00\x00", b"\x00\x00") == 0.0
    assert flip_ratio(b"\x00\x00", b"\xff\xff") == 1.0
    assert flip_ratio(b"\x0f", b"\x00") == 0.5
    assert flip_ratio(b"", b"") == 0.0
    with pytest.raises(ValueError):
        flip_ratio(b"\x00", b"\x00\x00")


def test_plaintext_avalanche():
    result = plaintext_avalanche(RC6(bytes(range(16))), trials=128, seed=1)
    assert result.trials == 128
    assert 0.4 < result.mean_flip_ratio < 0.6
    assert result.min_flip_ratio <= result.mean_flip_ratio <= result.max_flip_ratio


def test_plaintext_avalanche_is_reproducible():
    cipher = RC6(b"reproducible key")
    assert plaintext_avalanche(cipher, trials=8, seed=7) == plaintext_avalanche(cipher, trials=8, seed=7)


def test_key_avalanche():
    result = key_avalanche(trials=16, seed=3)
    assert result.trials == 16
    assert 0.4 < result.mean_flip_ratio < 0.6


def test_reduced_rounds_diffuse_poorly():
    result = plaintext_avalanche(RC6(bytes(16), rounds=1), trials=64, seed=5)
    assert result.mean_flip_ratio < 0.4


def test_passes_threshold():
    assert AvalancheResult(1, 0.5, 0.5, 0.5).passes
    assert not AvalancheResult(1, 0.3, 0.3, 0.3).passes


def test_trials_must_be_positive():
    with pytest.raises(ValueError):
        plaintext_avalanche(RC6(bytes(16)), trials=0)
    with pytest.raises(ValueError):
        key_avalanche(trials=0)


def test_key_size_must_be_positive():
    with pytest.raises(ValueError, match="key_size"):
        key_avalanche(key_size=0, trials=1)
