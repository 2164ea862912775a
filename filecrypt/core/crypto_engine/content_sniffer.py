"""
Best-effort classification of recovered plaintext for previewing.

This is a heuristic, not format detection: it decides whether decrypted
bytes are worth showing as text (UTF-8 or UTF-16LE) or should be treated
as opaque binary.  False positives and negatives are possible.
"""

import enum
from dataclasses import dataclass


class ContentKind(enum.Enum):
    UTF8_TEXT    = "utf-8"
    UTF16LE_TEXT = "utf-16-le"
    BINARY       = "binary"


@dataclass(frozen=True)
class SniffResult:
    kind: ContentKind
    text: str | None = None

    @property
    def is_text(self) -> bool:
        return self.kind is not ContentKind.BINARY


class ContentSniffer:
    """
    Ordered checks, first match wins:

    1. strict UTF-8 that re-encodes byte-for-byte
    2. UTF-16LE: BOM ``FF FE`` or more than *zero_threshold* zero bytes at
       odd offsets inside the first *window* bytes, and an even length
    3. binary
    """
    UTF16LE_BOM = b"\xff\xfe"

    def __init__(self, window: int = 200, zero_threshold: int = 3):
        self.window         = window
        self.zero_threshold = zero_threshold

    def sniff(self, data: bytes) -> SniffResult:
        text = self.strict_utf8(data)
        if text is not None:
            return SniffResult(ContentKind.UTF8_TEXT, text)

        if self.looks_utf16le(data) and len(data) % 2 == 0:
            text = data.decode("utf-16-le", errors="replace")
            if text.startswith("\ufeff"):
                text = text[1:]
            return SniffResult(ContentKind.UTF16LE_TEXT, text)

        return SniffResult(ContentKind.BINARY)

    def looks_utf16le(self, data: bytes) -> bool:
        if len(data) < 2:
            return False
        if data.startswith(self.UTF16LE_BOM):
            return True
        # last byte excluded so every inspected byte has its pair
        limit = min(len(data) - 1, self.window)
        zeros = sum(1 for i in range(1, limit, 2) if data[i] == 0)
        return zeros > self.zero_threshold

    @staticmethod
    def strict_utf8(data: bytes) -> str | None:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError:
            return None
        if text.encode("utf-8") != data:
            return None
        return text
