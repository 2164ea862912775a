from .crypto_engine import AESCBCCipher, HashCrypto, ContentSniffer
from .session import (
    ProcessingSession, Operation, SessionState, OperationResult,
    BinaryOutput, TextOutput, KeyPair, KeyResolution, KeySource, Artifact,
)
from .. import errors

__all__ = [
    "AESCBCCipher", "HashCrypto", "ContentSniffer",
    "ProcessingSession", "Operation", "SessionState", "OperationResult",
    "BinaryOutput", "TextOutput", "KeyPair", "KeyResolution", "KeySource",
    "Artifact", "errors",
]
