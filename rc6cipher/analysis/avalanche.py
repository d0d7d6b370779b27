"""
Avalanche Analysis

Measures diffusion of the RC6 block transform and key schedule: flipping a
single input bit should change close to half of the output bits.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from ..cipher import RC6
from ..config import RC6_DEFAULT_PARAMS
from ..key_schedule.rc6_key_schedule import expand_key
from ..key_schedule.words import words_to_bytes

logger = logging.getLogger(__name__)


@dataclass
class AvalancheResult:
    """Summary of an avalanche measurement."""
    trials: int
    mean_flip_ratio: float
    min_flip_ratio: float
    max_flip_ratio: float

    @property
    def passes(self) -> bool:
        """Mean flip ratio within 5% of the ideal 0.5."""
        return 0.45 <= self.mean_flip_ratio <= 0.55


def flip_ratio(a: bytes, b: bytes) -> float:
    """
    Fraction of bits that differ between two equal-length byte strings.

    Args:
        a: First byte string
        b: Second byte string

    Returns:
        Hamming distance divided by the bit length
    """
    if len(a) != len(b):
        raise ValueError("Byte strings must have same length")
    if not a:
        return 0.0
    diff = np.bitwise_xor(np.frombuffer(a, dtype=np.uint8), np.frombuffer(b, dtype=np.uint8))
    return float(np.unpackbits(diff).sum()) / (len(a) * 8)


def _flip_bit(data: bytes, bit: int) -> bytes:
    flipped = bytearray(data)
    flipped[bit // 8] ^= 1 << (bit % 8)
    return bytes(flipped)


def _summarise(ratios: List[float]) -> AvalancheResult:
    values = np.array(ratios, dtype=np.float64)
    return AvalancheResult(
        trials=len(ratios),
        mean_flip_ratio=float(values.mean()),
        min_flip_ratio=float(values.min()),
        max_flip_ratio=float(values.max()),
    )


def plaintext_avalanche(cipher: RC6, trials: int = 64, seed: Optional[int] = None) -> AvalancheResult:
    """
    Measure how many ciphertext bits change when one plaintext bit flips.

    Args:
        cipher: The keyed cipher to test
        trials: Number of random blocks to try
        seed: Seed for reproducible runs

    Returns:
        The avalanche summary
    """
    if trials < 1:
        raise ValueError("trials must be at least 1")
    rng = random.Random(seed)
    block_bits = RC6_DEFAULT_PARAMS['block_size'] * 8

    ratios = []
    for _ in range(trials):
        block = bytes(rng.getrandbits(8) for _ in range(RC6_DEFAULT_PARAMS['block_size']))
        flipped = _flip_bit(block, rng.randrange(block_bits))
        ratios.append(flip_ratio(cipher.encrypt_block(block), cipher.encrypt_block(flipped)))

    result = _summarise(ratios)
    logger.info("Plaintext avalanche: %.2f%% of bits changed", result.mean_flip_ratio * 100)
    return result


def key_avalanche(key_size: int = RC6_DEFAULT_PARAMS['key_size'],
                  rounds: int = RC6_DEFAULT_PARAMS['rounds'],
                  trials: int = 16,
                  seed: Optional[int] = None) -> AvalancheResult:
    """
    Measure how many key schedule bits change when one key bit flips.

    Args:
        key_size: Size of the random keys in bytes
        rounds: Number of rounds for the schedule
        trials: Number of random keys to try
        seed: Seed for reproducible runs

    Returns:
        The avalanche summary
    """
    if trials < 1:
        raise ValueError("trials must be at least 1")
    if key_size < 1:
        raise ValueError("key_size must be at least 1")
    rng = random.Random(seed)

    ratios = []
    for _ in range(trials):
        key =bytes(rng.getrandbits(8) for _ in range(key_size))
        modified_key = _flip_bit(key, rng.randrange(key_size * 8))
        ratios.append(flip_ratio(words_to_bytes(expand_key(key, rounds)),
                                 words_to_bytes(expand_key(modified_key, rounds))))

    result = _summarise(ratios)
    logger.info("Key schedule avalanche: %.2f%% of bits changed", result.mean_flip_ratio * 100)
    return result


if __name__ == "__main__":
    from ..config import configure_logging
    from ..key_schedule.rc6_key_schedule import generate_key

    configure_logging()

    block_result = plaintext_avalanche(RC6(generate_key()), trials=256)
    schedule_result = key_avalanche(trials=64)

    assert block_result.passes, f"Poor plaintext avalanche: {block_result}"
    assert schedule_result.passes, f"Poor key schedule avalanche: {schedule_result}"

    print("Avalanche tests passed!")
