import base64
import logging

import pytest

from rc6cipher import RC6, OperationError, InvalidInputLength
from rc6cipher.operations import rc6_encrypt, rc6_decrypt, to_bytes, from_bytes

KEY_HEX = "000102030405060708090a0b0c0d0e0f"
KEY = bytes.fromhex(KEY_HEX)
IV = "0123456789abcdef"


def test_to_bytes_formats():
    assert to_bytes("de ad:be,ef", "Hex") == b"\xde\xad\xbe\xef"
    assert to_bytes("0xde 0xad", "hex") == b"\xde\xad"
    assert to_bytes("aGVsbG8=", "Base64") == b"hello"
    assert to_bytes("café", "UTF8") == "café".encode("utf-8")
    assert to_bytes("café", "Latin1") == b"caf\xe9"
    assert to_bytes(b"\x00\xff", "Raw") == b"\x00\xff"
    assert to_bytes("", "Hex") == b""


@pytest.mark.parametrize("value,fmt", [
    ("abc", "Hex"),
    ("zz", "Hex"),
    ("not base64!", "Base64"),
    ("€", "Latin1"),
    ("anything", "Octal"),
])
def test_to_bytes_rejects_malformed(value, fmt):
    with pytest.raises(OperationError):
        to_bytes(value, fmt)


def test_from_bytes_formats():
    assert from_bytes(b"\x01\xab", "Hex") == "01ab"
    assert from_bytes(b"hello", "Base64") == "aGVsbG8="
    assert from_bytes("café".encode("utf-8"), "UTF8") == "café"
    assert from_bytes(b"caf\xe9", "Latin1") == "café"
    assert from_bytes(b"\x00\xff", "Raw") == b"\x00\xff"
    with pytest.raises(OperationError):
        from_bytes(b"\xff\xfe", "UTF8")


def test_encrypt_ecb_matches_core():
    result = rc6_encrypt("Hello, World!", KEY_HEX, mode="ECB")
    assert result == RC6(KEY).encrypt_ecb(b"Hello, World!").hex()


def test_encrypt_cbc_matches_core():
    result = rc6_encrypt("Hello, World!", KEY_HEX, iv=IV, iv_format="UTF8",
                         output_format="Base64")
    expected = RC6(KEY).encrypt_cbc(b"Hello, World!", IV.encode())
    assert base64.b64decode(result) == expected


def test_round_trip_through_operations():
    plaintext = "flag{68f25cc8-1a9f-40e8-ac3b-a85982a52f8f}"
    key = "46535a33366633765538733504040404"
    ciphertext = rc6_encrypt(plaintext, key, iv="WcE4Bbm4kHYQsAcX", iv_format="UTF8",
                             output_format="Base64")
    assert len(base64.b64decode(ciphertext)) == 48
    decrypted = rc6_decrypt(ciphertext, key, iv="WcE4Bbm4kHYQsAcX", iv_format="UTF8",
                            input_format="Base64", output_format="UTF8")
    assert decrypted == plaintext


def test_hex_input_and_raw_output():
    ciphertext = rc6_encrypt("00ff10", KEY_HEX, mode="ECB", input_format="Hex")
    assert rc6_decrypt(ciphertext, KEY_HEX, mode="ECB") == b"\x00\xff\x10"


def test_utf8_key():
    ciphertext = rc6_encrypt("secret", "my key", key_format="UTF8", mode="ECB")
    assert ciphertext == RC6(b"my key").encrypt_ecb(b"secret").hex()


def test_empty_key_rejected():
    with pytest.raises(OperationError, match="Key cannot be empty"):
        rc6_encrypt("data", "")
    with pytest.raises(OperationError, match="Key cannot be empty"):
        rc6_decrypt("00" * 16, "", mode="ECB")


def test_empty_iv_defaults_to_null_bytes(caplog):
    with caplog.at_level(logging.WARNING, logger="rc6cipher.operations.rc6_operations"):
        ciphertext = rc6_encrypt("data", KEY_HEX, mode="CBC")
    assert ciphertext == RC6(KEY).encrypt_cbc(b"data", bytes(16)).hex()
    assert "null bytes" in caplog.text
    assert rc6_decrypt(ciphertext, KEY_HEX, mode="CBC") == b"data"


def test_ecb_ignores_iv():
    assert rc6_encrypt("data", KEY_HEX, iv="ab", mode="ECB") == rc6_encrypt("data", KEY_HEX, mode="ECB")


@pytest.mark.parametrize("iv", ["00", "00" * 15, "00" * 17])
def test_wrong_iv_length_rejected(iv):
    with pytest.raises(OperationError, match="IV must be 16 bytes for CBC mode"):
        rc6_encrypt("data", KEY_HEX, iv=iv)
    with pytest.raises(OperationError, match="IV must be 16 bytes for CBC mode"):
        rc6_decrypt("00" * 16, KEY_HEX, iv=iv)


def test_unsupported_mode():
    with pytest.raises(OperationError, match="Unsupported mode: CTR"):
        rc6_encrypt("data", KEY_HEX, mode="CTR")


def test_mode_is_case_insensitive():
    assert rc6_encrypt("data", KEY_HEX, mode="ecb") == rc6_encrypt("data", KEY_HEX, mode="ECB")


def test_bad_ciphertext_length_is_chained():
    with pytest.raises(OperationError) as excinfo:
        rc6_decrypt("00" * 15, KEY_HEX, mode="ECB")
    assert isinstance(excinfo.value.__cause__, InvalidInputLength)


def test_explicit_rounds():
    assert rc6_encrypt("data", KEY_HEX, mode="ECB", rounds=12) == RC6(KEY, 12).encrypt_ecb(b"data").hex()


def test_rounds_from_environment(monkeypatch):
    monkeypatch.setenv("RC6CIPHER_ROUNDS", "12")
    assert rc6_encrypt("data", KEY_HEX, mode="ECB") == RC6(KEY, 12).encrypt_ecb(b"data").hex()
