"""
AES-CBC with PKCS#7 padding, plus the IV || ciphertext artifact layout.

On-disk layout of an encryption artifact:

    [IV 16B][ciphertext, N bytes, N % 16 == 0]

There is no MAC and no length prefix: the format carries no integrity
protection.  A corrupted file decrypts to garbage or fails the padding
check with PaddingError.
"""

import logging

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives import padding as sym_padding

from .symmetric_base import BlockCipher
from ...errors import (
    InvalidKeyLengthError,
    InvalidIvLengthError,
    InvalidCiphertextLengthError,
    PaddingError,
    TooShortError,
)

logger = logging.getLogger("FileCrypt.AES")


class AESCBCCipher(BlockCipher):
    """
    AES in CBC mode (128 / 192 / 256 bit keys).

    Output of encrypt() is always a whole number of 16-byte blocks and
    strictly longer than the input, since 1..16 pad bytes are added.
    """
    IV_SIZE    = 16
    BLOCK_SIZE = 16
    BLOCK_BITS = 128
    KEY_SIZES  = (16, 24, 32)

    def encrypt(self, key: bytes, iv: bytes, plaintext: bytes) -> bytes:
        self._check_params(key, iv)
        padder = sym_padding.PKCS7(self.BLOCK_BITS).padder()
        padded = padder.update(plaintext) + padder.finalize()
        enc    = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
        ct     = enc.update(padded) + enc.finalize()
        logger.debug(
            "Encrypted %d bytes → %d bytes (%s)",
            len(plaintext), len(ct), self.name_for(key),
        )
        return ct

    def decrypt(self, key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
        self._check_params(key, iv)
        if not ciphertext or len(ciphertext) % self.BLOCK_SIZE:
            raise InvalidCiphertextLengthError(
                f"Ciphertext must be a non-empty multiple of "
                f"{self.BLOCK_SIZE} bytes, got {len(ciphertext)}"
            )
        dec    = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
        padded = dec.update(ciphertext) + dec.finalize()
        unpad  = sym_padding.PKCS7(self.BLOCK_BITS).unpadder()
        try:
            return unpad.update(padded) + unpad.finalize()
        except ValueError:
            raise PaddingError(
                "Invalid PKCS#7 padding: wrong key or corrupted data"
            )

    # ── artifact layout ──────────────────────────────────────────
    @staticmethod
    def pack(iv: bytes, ciphertext: bytes) -> bytes:
        return iv + ciphertext

    @classmethod
    def unpack(cls, blob: bytes,
               iv_len: int = IV_SIZE) -> tuple[bytes, bytes]:
        """Split an artifact into *(iv, ciphertext)*."""
        if len(blob) < iv_len:
            raise TooShortError(
                f"Input is {len(blob)} bytes, shorter than the "
                f"{iv_len}-byte IV"
            )
        return blob[:iv_len], blob[iv_len:]

    # ── validation ───────────────────────────────────────────────
    def _check_params(self, key: bytes, iv: bytes):
        if len(key) not in self.KEY_SIZES:
            raise InvalidKeyLengthError(
                f"AES key must be 16, 24, or 32 bytes, got {len(key)}"
            )
        if len(iv) != self.IV_SIZE:
            raise InvalidIvLengthError(
                f"AES-CBC IV must be {self.IV_SIZE} bytes, got {len(iv)}"
            )

    # ── metadata ─────────────────────────────────────────────────
    @staticmethod
    def name_for(key: bytes) -> str:
        return f"AES-{len(key) * 8}-CBC"

    @property
    def cipher_name(self) -> str:
        return "AES-CBC"

    @property
    def block_size(self) -> int:
        return self.BLOCK_SIZE

    @property
    def key_sizes(self) -> tuple[int, ...]:
        return self.KEY_SIZES
