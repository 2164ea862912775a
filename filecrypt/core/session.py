"""
Processing session — dispatches one operation at a time over an input
buffer and keeps the latest result for export.

Every operation returns an immutable OperationResult.  The session swaps
in the new input/output/state as a single assignment on success and
leaves everything untouched when an operation raises.
"""

import enum
import logging
import os
import threading
from dataclasses import dataclass

from ..config.settings import Settings, CryptoParams
from ..utils.hex_codec import HexCodec
from ..utils.random_gen import SecureRandom
from .crypto_engine import AESCBCCipher, HashCrypto, ContentSniffer
from ..errors import (
    MissingKeyError,
    NoInputError,
    NothingToExportError,
    LossyExportError,
    UnimplementedOperationError,
)

logger = logging.getLogger("FileCrypt.Session")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Operation identifiers & state
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Operation(enum.Enum):
    GENERATE_KEY = "generate-key"
    ENCRYPT      = "encrypt"
    DECRYPT      = "decrypt"
    DIGEST       = "sha256"
    MAC          = "hmac"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value) -> "Operation":
        """Accept an Operation, its value, or its UI label."""
        if isinstance(value, cls):
            return value
        for op in cls:
            if value in (op.value, op.label):
                return op
        raise UnimplementedOperationError(
            f"Operation not implemented yet: {value!r}"
        )


_LABELS = {
    Operation.GENERATE_KEY: "Generate Symmetric Key",
    Operation.ENCRYPT:      "AES Encrypt (file)",
    Operation.DECRYPT:      "AES Decrypt (file)",
    Operation.DIGEST:       "SHA-256 Digest (file)",
    Operation.MAC:          "HMAC-SHA256 (file)",
}

# suggested export extensions
_EXTENSIONS = {
    Operation.ENCRYPT: ".aescbc",
    Operation.DIGEST:  ".sha256",
    Operation.MAC:     ".hmac",
}


class SessionState(enum.Enum):
    NONE             = "none"
    GENERATED_KEY    = "generated-key"
    PROCESSED_DATA   = "processed-data"
    SHA_OR_HMAC_TEXT = "sha-or-hmac-text"


class KeySource(enum.Enum):
    SYMMETRIC = "symmetric"
    HMAC      = "hmac"
    GENERATED = "generated"


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Result values
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class InputBuffer:
    data: bytes
    name: str | None = None


@dataclass(frozen=True)
class BinaryOutput:
    data: bytes

    @property
    def export_bytes(self) -> bytes:
        return self.data

    is_text = False


@dataclass(frozen=True)
class TextOutput:
    """Decoded text plus the bytes it was decoded from.

    Export writes the UTF-8 encoding of ``text``, which differs from
    ``raw`` for UTF-16LE input.
    """
    text: str
    raw: bytes

    @property
    def encoded(self) -> bytes:
        return self.text.encode("utf-8")

    @property
    def export_bytes(self) -> bytes:
        return self.encoded

    is_text = True


ProcessedOutput = BinaryOutput | TextOutput


@dataclass(frozen=True)
class KeyPair:
    symmetric_key_hex: str
    hmac_key_hex: str

    def export_text(self) -> str:
        return (
            f"symmetric_key_hex:{self.symmetric_key_hex}\n"
            f"hmac_key_hex:{self.hmac_key_hex}\n"
        )


@dataclass(frozen=True)
class KeyResolution:
    """Which key an operation used and whether it was minted for it."""
    key_hex: str
    source: KeySource
    generated_now: bool


@dataclass(frozen=True)
class OperationResult:
    operation: Operation
    state: SessionState
    output: ProcessedOutput | None
    preview: str | None
    message: str
    status: str
    generated_keys: KeyPair | None = None
    key_resolution: KeyResolution | None = None
    mac_input_is_text: bool = False
    sequence: int = 0

    def display_text(self, limit: int) -> str:
        """Preview or message, cut to *limit* characters for display."""
        text = self.preview if self.preview is not None else self.message
        return text[:limit]


@dataclass(frozen=True)
class Artifact:
    data: bytes
    suggested_name: str
    is_text: bool


@dataclass(frozen=True)
class _Snapshot:
    input: InputBuffer | None
    result: OperationResult | None
    sequence: int

    @property
    def state(self) -> SessionState:
        return self.result.state if self.result else SessionState.NONE


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Session
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class ProcessingSession:
    """
    Orchestrates key generation, AES-CBC, SHA-256 and HMAC over one
    input buffer.

    The caller supplies input bytes, hex key strings and an operation;
    it gets back an OperationResult and may later ask for an Artifact to
    save.  Operations run synchronously on the calling thread; a lock
    keeps at most one in flight.
    """

    def __init__(self, params: CryptoParams | None = None):
        self.params   = params or Settings.load_crypto_params()
        self._cipher  = AESCBCCipher()
        self._sniffer = ContentSniffer(
            window=self.params.utf16_window,
            zero_threshold=self.params.utf16_zero_threshold,
        )
        self._snap = _Snapshot(input=None, result=None, sequence=0)
        self._lock = threading.Lock()

    # ── read-only views ──────────────────────────────────────────
    @property
    def state(self) -> SessionState:
        return self._snap.state

    @property
    def last_result(self) -> OperationResult | None:
        return self._snap.result

    @property
    def input(self) -> InputBuffer | None:
        return self._snap.input

    # ── input ────────────────────────────────────────────────────
    def load_input(self, data: bytes, name: str | None = None):
        """Replace the input buffer and reset state to NONE."""
        with self._lock:
            self._snap = _Snapshot(
                input=InputBuffer(bytes(data), name),
                result=None,
                sequence=self._snap.sequence,
            )
        logger.info("Loaded input %s (%d bytes)", name or "<memory>", len(data))

    # ── dispatch ─────────────────────────────────────────────────
    def process(self, operation, key_hex: str = "",
                hmac_key_hex: str = "") -> OperationResult:
        """
        Run *operation* and commit its result.

        Raises a FileCryptError subclass on failure; the session state is
        then exactly what it was before the call.
        """
        op = Operation.parse(operation)
        handlers = {
            Operation.GENERATE_KEY: self._generate_key,
            Operation.ENCRYPT:      self._encrypt,
            Operation.DECRYPT:      self._decrypt,
            Operation.DIGEST:       self._digest,
            Operation.MAC:          self._mac,
        }
        with self._lock:
            snap = self._snap
            seq  = snap.sequence + 1
            try:
                result = handlers[op](snap.input, key_hex or "",
                                      hmac_key_hex or "", seq)
            except Exception as exc:
                logger.warning("%s failed: %s", op.label, exc)
                raise
            self._snap = _Snapshot(input=snap.input, result=result,
                                   sequence=seq)
        logger.info("Status: %s", result.status)
        return result

    def generate_key_pair(self) -> OperationResult:
        return self.process(Operation.GENERATE_KEY)

    # ── operations ───────────────────────────────────────────────
    def _new_key_pair(self) -> KeyPair:
        sym  = SecureRandom.generate_key(self.params.aes_key_bytes)
        hkey = SecureRandom.generate_key(self.params.hmac_key_bytes)
        return KeyPair(HexCodec.encode(sym), HexCodec.encode(hkey))

    def _generate_key(self, inp, key_hex, hmac_key_hex,
                      seq) -> OperationResult:
        pair = self._new_key_pair()
        return OperationResult(
            operation=Operation.GENERATE_KEY,
            state=SessionState.GENERATED_KEY,
            output=None,
            preview=None,
            message="Symmetric and HMAC keys generated. "
                    "Click Download to save the key pair.",
            status="Generated symmetric key and HMAC key (shown in hex)",
            generated_keys=pair,
            sequence=seq,
        )

    def _encrypt(self, inp, key_hex, hmac_key_hex, seq) -> OperationResult:
        data = self._require_input(inp)
        pair = None
        if key_hex.strip():
            resolution = KeyResolution(key_hex.strip(),
                                       KeySource.SYMMETRIC, False)
        else:
            pair = self._new_key_pair()
            resolution = KeyResolution(pair.symmetric_key_hex,
                                       KeySource.GENERATED, True)
            logger.info("No symmetric key supplied — generated a new key pair")

        key = HexCodec.decode_key(resolution.key_hex,
                                  self.params.aes_key_bytes,
                                  "Symmetric key")
        iv  = SecureRandom.generate_iv(self.params.aes_iv_bytes)
        ct  = self._cipher.encrypt(key, iv, data)
        blob = AESCBCCipher.pack(iv, ct)

        return OperationResult(
            operation=Operation.ENCRYPT,
            state=SessionState.PROCESSED_DATA,
            output=BinaryOutput(blob),
            preview=None,
            message="Encryption successful. Ciphertext size "
                    f"(IV + ciphertext): {len(blob)} bytes",
            status="Encryption done (no HMAC)",
            generated_keys=pair,
            key_resolution=resolution,
            sequence=seq,
        )

    def _decrypt(self, inp, key_hex, hmac_key_hex, seq) -> OperationResult:
        data = self._require_input(inp)
        iv, ct = AESCBCCipher.unpack(data, self.params.aes_iv_bytes)
        if not key_hex.strip():
            raise MissingKeyError()
        key = HexCodec.decode_key(key_hex, self.params.aes_key_bytes,
                                  "Symmetric key")
        plaintext = self._cipher.decrypt(key, iv, ct)

        output: ProcessedOutput
        preview = None
        if not plaintext:
            output  = BinaryOutput(b"")
            message = "Decryption produced empty output"
        else:
            sniffed = self._sniffer.sniff(plaintext)
            if sniffed.is_text:
                output  = TextOutput(sniffed.text, plaintext)
                preview = sniffed.text
                message = (f"Decryption successful. Recovered "
                           f"{sniffed.kind.value} text "
                           f"({len(plaintext)} bytes)")
            else:
                output  = BinaryOutput(plaintext)
                message = ("Decryption successful. Plaintext size: "
                           f"{len(plaintext)} bytes")
            logger.debug("Recovered plaintext classified as %s",
                         sniffed.kind.value)

        return OperationResult(
            operation=Operation.DECRYPT,
            state=SessionState.PROCESSED_DATA,
            output=output,
            preview=preview,
            message=message,
            status="Decryption done",
            key_resolution=KeyResolution(key_hex.strip(),
                                         KeySource.SYMMETRIC, False),
            sequence=seq,
        )

    def _digest(self, inp, key_hex, hmac_key_hex, seq) -> OperationResult:
        data   = self._require_input(inp)
        digest = HashCrypto.sha256_hex(data)
        return OperationResult(
            operation=Operation.DIGEST,
            state=SessionState.SHA_OR_HMAC_TEXT,
            output=TextOutput(digest, digest.encode("ascii")),
            preview=digest,
            message=digest,
            status="SHA-256 generated",
            sequence=seq,
        )

    def _mac(self, inp, key_hex, hmac_key_hex, seq) -> OperationResult:
        data = self._require_input(inp)
        if hmac_key_hex.strip():
            resolution = KeyResolution(hmac_key_hex.strip(),
                                       KeySource.HMAC, False)
            key = HexCodec.decode_key(resolution.key_hex,
                                      self.params.hmac_key_bytes,
                                      "HMAC key")
        elif key_hex.strip():
            resolution = KeyResolution(key_hex.strip(),
                                       KeySource.SYMMETRIC, False)
            key = HexCodec.decode_key(resolution.key_hex,
                                      self.params.aes_key_bytes,
                                      "Symmetric key")
            logger.warning(
                "No HMAC key supplied — reusing the symmetric key for "
                "HMAC; use a separate HMAC key for authentication"
            )
        else:
            key = SecureRandom.generate_key(self.params.hmac_key_bytes)
            resolution = KeyResolution(HexCodec.encode(key),
                                       KeySource.GENERATED, True)
            logger.info("No HMAC key supplied — generated a new one")

        tag     = HashCrypto.hmac_sha256(key, data)
        tag_hex = HexCodec.encode(tag)
        # preview is lossy for non-UTF-8 input; the binary output is not
        preview = data.decode("utf-8", errors="replace") + tag_hex
        is_text = ContentSniffer.strict_utf8(data) is not None

        return OperationResult(
            operation=Operation.MAC,
            state=SessionState.SHA_OR_HMAC_TEXT,
            output=BinaryOutput(data + tag),
            preview=preview,
            message=preview,
            status="HMAC-SHA256 generated and appended",
            key_resolution=resolution,
            mac_input_is_text=is_text,
            sequence=seq,
        )

    @staticmethod
    def _require_input(inp: InputBuffer | None) -> bytes:
        if inp is None:
            raise NoInputError()
        return inp.data

    # ── export ───────────────────────────────────────────────────
    def export(self, as_text: bool = False) -> Artifact:
        """
        Build the artifact to save for the current state.

        *as_text* only matters after a MAC: it requests the text preview
        instead of ``input || tag`` and is refused when the input is not
        UTF-8, since the saved bytes would not match the binary artifact.
        """
        snap   = self._snap
        result = snap.result
        if result is None:
            raise NothingToExportError()

        if result.state is SessionState.GENERATED_KEY:
            base = self._base_name(snap.input, "keypair")
            return Artifact(
                data=result.generated_keys.export_text().encode("ascii"),
                suggested_name=base + ".keypair.hex",
                is_text=True,
            )

        base = self._base_name(snap.input, "output")
        op   = result.operation

        if op is Operation.MAC and as_text:
            if not result.mac_input_is_text:
                raise LossyExportError()
            return Artifact(result.preview.encode("utf-8"),
                            base + _EXTENSIONS[op], True)

        output = result.output
        if op is Operation.DECRYPT:
            ext = ".txt" if output.is_text else ".bin"
        else:
            ext = _EXTENSIONS[op]
        return Artifact(output.export_bytes, base + ext, output.is_text)

    @staticmethod
    def _base_name(inp: InputBuffer | None, default: str) -> str:
        if inp is None or not inp.name:
            return default
        stem = os.path.basename(inp.name)
        # completeBaseName: strip only the last suffix
        root, _ = os.path.splitext(stem)
        return root or default
