"""
Abstract base class for block ciphers in FileCrypt.

Ciphers are stateless: key and IV are passed on every call, so a single
instance can serve any number of operations.
"""

from abc import ABC, abstractmethod


class BlockCipher(ABC):
    """
    Unified interface for block-mode symmetric encryption.

    encrypt() returns the raw padded ciphertext only; the caller decides
    how IV and ciphertext are laid out on disk (see AESCBCCipher.pack).
    """

    @abstractmethod
    def encrypt(self, key: bytes, iv: bytes, plaintext: bytes) -> bytes:
        """Pad and encrypt plaintext → ciphertext."""

    @abstractmethod
    def decrypt(self, key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
        """Decrypt and unpad ciphertext → plaintext."""

    @property
    @abstractmethod
    def cipher_name(self) -> str:
        """Human-readable name, e.g. 'AES-CBC'."""

    @property
    @abstractmethod
    def block_size(self) -> int:
        """Block size in bytes."""

    @property
    @abstractmethod
    def key_sizes(self) -> tuple[int, ...]:
        """Accepted key sizes in bytes."""

    @property
    def iv_size(self) -> int:
        return self.block_size

    def info(self) -> dict:
        """Return cipher metadata for display."""
        return {
            "name":       self.cipher_name,
            "key_bits":   [k * 8 for k in self.key_sizes],
            "block_bytes": self.block_size,
            "iv_bytes":   self.iv_size,
            "padding":    "PKCS#7",
        }
