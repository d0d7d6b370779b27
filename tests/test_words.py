import pytest

from rc6cipher.key_schedule.words import (
    bytes_to_words, words_to_bytes, rotate_left, rotate_right,
)


def test_bytes_to_words_little_endian():
    assert bytes_to_words(bytes.fromhex("0102030405060708")) == [0x04030201, 0x08070605]


def test_bytes_to_words_partial_trailing_word():
    assert bytes_to_words(b"\x01\x02\x03\x04\x05\x06") == [0x04030201, 0x0605]
    assert len(bytes_to_words(bytes(9))) == 3


def test_bytes_to_words_empty():
    assert bytes_to_words(b"") == []


def test_words_to_bytes_full_width():
    assert words_to_bytes([0x04030201, 0x5]) == b"\x01\x02\x03\x04\x05\x00\x00\x00"
    assert words_to_bytes([]) == b""


def test_words_round_trip_aligned():
    data = bytes(range(32))
    assert words_to_bytes(bytes_to_words(data)) == data


@pytest.mark.parametrize("shift", [0, 1, 3, 5, 31])
def test_rotations_are_inverse(shift):
    value = 0x89ABCDEF
    assert rotate_right(rotate_left(value, shift), shift) == value


def test_rotate_amount_taken_modulo_32():
    value = 0x80000001
    assert rotate_left(value, 1) == 0x00000003
    assert rotate_left(value, 33) == rotate_left(value, 1)
    assert rotate_left(value, 32) == value
    assert rotate_right(value, 1) == 0xC0000000
    assert rotate_right(value, 65) == rotate_right(value, 1)


def test_rotate_stays_within_32_bits():
    assert rotate_left(0xFFFFFFFF, 7) == 0xFFFFFFFF
    assert rotate_left(0x1_0000_0001, 4) == 0x10
