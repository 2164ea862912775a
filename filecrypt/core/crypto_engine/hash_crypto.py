"""
Hashing, HMAC and constant-time comparison utilities.
"""

from cryptography.hazmat.primitives import constant_time, hashes, hmac

from ...errors import InvalidKeyLengthError


class HashCrypto:
    """Static helpers for SHA-256, HMAC-SHA256 and tag comparison."""

    DIGEST_SIZE = 32

    # ── hashes ───────────────────────────────────────────────────
    @staticmethod
    def sha256(data: bytes) -> bytes:
        d = hashes.Hash(hashes.SHA256())
        d.update(data)
        return d.finalize()

    @staticmethod
    def sha256_hex(data: bytes) -> str:
        return HashCrypto.sha256(data).hex()

    # ── HMAC ─────────────────────────────────────────────────────
    @staticmethod
    def hmac_sha256(key: bytes, data: bytes) -> bytes:
        if not key:
            raise InvalidKeyLengthError("HMAC key must not be empty")
        h = hmac.HMAC(key, hashes.SHA256())
        h.update(data)
        return h.finalize()

    # ── comparison ───────────────────────────────────────────────
    @staticmethod
    def constant_time_equal(a: bytes, b: bytes) -> bool:
        """
        Compare two byte strings without an early exit.

        Length is not treated as secret.  Equal-length inputs go to
        ``constant_time.bytes_eq``, whose running time does not depend on
        where the first difference sits.
        """
        if len(a) != len(b):
            return False
        return constant_time.bytes_eq(bytes(a), bytes(b))
