import os

import pytest

from filecrypt.utils.hex_codec import HexCodec
from filecrypt.errors import InvalidHexError, KeyLengthMismatchError


def test_encode_lowercase():
    assert HexCodec.encode(b"\x00\xab\xff") == "00abff"
    assert HexCodec.encode(b"") == ""


def test_encode_length():
    data = os.urandom(37)
    assert len(HexCodec.encode(data)) == 74


def test_decode_any_case():
    assert HexCodec.decode("00ABff") == b"\x00\xab\xff"
    assert HexCodec.decode("  0a0b\n") == b"\x0a\x0b"


@pytest.mark.parametrize("bad", ["abc", "zz", "0g", "é0", "12 34"])
def test_decode_rejects(bad):
    with pytest.raises(InvalidHexError):
        HexCodec.decode(bad)


def test_decode_key_length():
    assert HexCodec.decode_key("11" * 32, 32) == b"\x11" * 32
    with pytest.raises(KeyLengthMismatchError):
        HexCodec.decode_key("11" * 31, 32)
    with pytest.raises(KeyLengthMismatchError):
        HexCodec.decode_key("11" * 33, 32)
