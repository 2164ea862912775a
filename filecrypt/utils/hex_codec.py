"""
Hex encoding for key material crossing the UI boundary.

Keys are always exchanged as hex text; bytes never leave the core.
"""

import binascii

from ..errors import InvalidHexError, KeyLengthMismatchError


class HexCodec:

    @staticmethod
    def encode(data: bytes) -> str:
        """Lowercase hex, no separators."""
        return binascii.hexlify(data).decode("ascii")

    @staticmethod
    def decode(text: str) -> bytes:
        """Decode hex text of any case.  Surrounding whitespace is ignored."""
        s = text.strip()
        if len(s) % 2:
            raise InvalidHexError(
                f"Hex string has odd length ({len(s)})"
            )
        try:
            return binascii.unhexlify(s)
        except (binascii.Error, ValueError):
            raise InvalidHexError("Hex string contains non-hex characters")

    @staticmethod
    def decode_key(text: str, expected_len: int,
                   label: str = "key") -> bytes:
        """Decode *text* and require exactly *expected_len* bytes."""
        key = HexCodec.decode(text)
        if len(key) != expected_len:
            raise KeyLengthMismatchError(
                f"{label} must be {expected_len} bytes "
                f"({expected_len * 2} hex chars), got {len(key)}"
            )
        return key
