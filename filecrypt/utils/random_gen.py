"""
Cryptographically-secure random value generators.
"""

import os


class SecureRandom:

    @staticmethod
    def generate_bytes(length: int) -> bytes:
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        return os.urandom(length)

    @staticmethod
    def generate_iv(length: int = 16) -> bytes:
        return SecureRandom.generate_bytes(length)

    @staticmethod
    def generate_key(length: int = 32) -> bytes:
        return SecureRandom.generate_bytes(length)
