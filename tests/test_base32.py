import logging

import pytest

from totpcore import base32
from totpcore.errors import InvalidEncoding


@pytest.mark.parametrize("raw, text", [
    (b"", ""),
    (b"f", "MY"),
    (b"fo", "MZXQ"),
    (b"foo", "MZXW6"),
    (b"foob", "MZXW6YQ"),
    (b"fooba", "MZXW6YTB"),
    (b"foobar", "MZXW6YTBOI"),
])
def test_rfc4648_vectors(raw, text):
    assert base32.encode(raw) == text
    assert base32.decode(text) == raw


def test_encode_rfc_secret():
    assert base32.encode(b"12345678901234567890") == "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


def test_encode_never_pads():
    assert "=" not in base32.encode(b"\x00\xff\x10")


def test_encoded_length():
    for n in range(41):
        assert len(base32.encode(b"\xa5" * n)) == -(-8 * n // 5)


def test_round_trip_all_byte_values():
    data = bytes(range(256))
    assert base32.decode(base32.encode(data)) == data
    assert base32.decode(base32.encode(data[::-1])) == data[::-1]


def test_decode_accepts_padding_and_lower_case():
    assert base32.decode("MZXW6YQ=") == b"foob"
    assert base32.decode("mzxw6ytboi======") == b"foobar"


def test_decode_discards_trailing_bits():
    # "MZ" carries 10 bits, only the first 8 form a byte
    assert base32.decode("MZ") == b"f"


def test_permissive_decode_skips_foreign_characters(caplog):
    with caplog.at_level(logging.WARNING, logger="totpcore.base32"):
        assert base32.decode("MZ-XW 6YTB\nOI") == b"foobar"
    assert "Ignored 3 character(s)" in caplog.text


def test_strict_decode_rejects_foreign_characters():
    with pytest.raises(InvalidEncoding):
        base32.decode("MZ-XW6", strict=True)


@pytest.mark.parametrize("text", ["M", "MZX", "MZXW6Y"])
def test_strict_decode_rejects_impossible_lengths(text):
    with pytest.raises(InvalidEncoding):
        base32.decode(text, strict=True)


def test_strict_decode_accepts_valid_text():
    assert base32.decode("mzxw6ytboi======", strict=True) == b"foobar"


def test_invalid_encoding_is_a_value_error():
    with pytest.raises(ValueError):
        base32.decode("1", strict=True)
