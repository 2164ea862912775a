"""
Error taxonomy for the FileCrypt processing engine.

Every failure the engine can report derives from FileCryptError and
carries a short ``status`` line suitable for a status bar.  The classes
also inherit ValueError / OSError where that is the natural standard
exception, so callers catching those keep working.
"""


class FileCryptError(Exception):
    """Base class for all engine errors."""

    status = "Error during processing"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.status)


# ── key / encoding errors ────────────────────────────────────────

class InvalidHexError(FileCryptError, ValueError):
    """Text is not valid hex (odd length or non-hex characters)."""
    status = "Invalid hex string"


class KeyLengthMismatchError(FileCryptError, ValueError):
    """Decoded key does not have the configured length."""
    status = "Key has the wrong length"


class InvalidKeyLengthError(FileCryptError, ValueError):
    """Key length is not supported by the algorithm."""
    status = "Invalid key length"


class InvalidIvLengthError(FileCryptError, ValueError):
    """IV length is not the cipher block size."""
    status = "Invalid IV length"


class MissingKeyError(FileCryptError, ValueError):
    """Operation requires a caller-supplied key."""
    status = "Please provide symmetric key (hex) or click Generate Key."


# ── ciphertext errors ────────────────────────────────────────────

class InvalidCiphertextLengthError(FileCryptError, ValueError):
    """Ciphertext is empty or not a whole number of blocks."""
    status = "Ciphertext length is not a multiple of the block size"


class PaddingError(FileCryptError, ValueError):
    """PKCS#7 padding check failed: wrong key or corrupted data."""
    status = "Decryption failed: wrong key or corrupted data"


class TooShortError(FileCryptError, ValueError):
    """Input is shorter than the IV it must start with."""
    status = "Input too small to contain IV"


# ── session errors ───────────────────────────────────────────────

class UnimplementedOperationError(FileCryptError, ValueError):
    status = "Operation not implemented yet"


class NoInputError(FileCryptError, ValueError):
    status = "Please upload a file first."


class NothingToExportError(FileCryptError, ValueError):
    status = "No processed data to save. Run Process first."


class LossyExportError(FileCryptError, ValueError):
    """Text preview of a MAC result would not equal input || tag."""
    status = "HMAC preview is not a faithful copy of binary input; save the binary artifact"


# ── I/O ──────────────────────────────────────────────────────────

class IoFailureError(FileCryptError, OSError):
    status = "File I/O failed"
