"""
FileCrypt Crypto Engine — AES-CBC, SHA-256 / HMAC-SHA256 and plaintext
sniffing primitives.
"""

from .symmetric_base  import BlockCipher
from .aes_crypto      import AESCBCCipher
from .hash_crypto     import HashCrypto
from .content_sniffer import ContentSniffer, ContentKind, SniffResult

__all__ = [
    "BlockCipher", "AESCBCCipher", "HashCrypto",
    "ContentSniffer", "ContentKind", "SniffResult",
]
