import os

from filecrypt.core.crypto_engine import ContentSniffer, ContentKind


def _random_binary(n: int = 200) -> bytes:
    # no zero bytes anywhere, and 0x80 first so it is neither UTF-8 nor a BOM
    data = bytearray(b or 1 for b in os.urandom(n))
    data[0] = 0x80
    return bytes(data)


def test_utf8_text():
    text = "Hello, wörld — ∑ 😀"
    result = ContentSniffer().sniff(text.encode("utf-8"))
    assert result.kind is ContentKind.UTF8_TEXT
    assert result.text == text
    assert result.text.encode("utf-8") == text.encode("utf-8")


def test_empty_is_utf8():
    result = ContentSniffer().sniff(b"")
    assert result.kind is ContentKind.UTF8_TEXT
    assert result.text == ""


def test_random_binary():
    result = ContentSniffer().sniff(_random_binary())
    assert result.kind is ContentKind.BINARY
    assert result.text is None
    assert not result.is_text


def test_utf16le_with_bom():
    data = b"\xff\xfe" + "héllo wörld".encode("utf-16-le")
    result = ContentSniffer().sniff(data)
    assert result.kind is ContentKind.UTF16LE_TEXT
    assert result.text == "héllo wörld"


def test_utf16le_odd_length_is_binary():
    data = b"\xff\xfe" + "hello".encode("utf-16-le") + b"\x80"
    assert ContentSniffer().sniff(data).kind is ContentKind.BINARY


def test_ascii_utf16le_without_bom_is_valid_utf8():
    # NUL bytes are valid UTF-8, so the UTF-8 check wins
    data = "hello world".encode("utf-16-le")
    assert ContentSniffer().sniff(data).kind is ContentKind.UTF8_TEXT


def test_zero_threshold():
    # four zeros at odd offsets 1, 3, 5, 7; the last byte is not inspected
    data = b"\x80\x00" * 5
    assert ContentSniffer().sniff(data).kind is ContentKind.UTF16LE_TEXT
    strict = ContentSniffer(zero_threshold=4)
    assert strict.sniff(data).kind is ContentKind.BINARY


def test_three_zeros_not_enough():
    data = b"\x80\x00" * 3 + b"\x80\x01\x80\x01"
    assert not ContentSniffer().looks_utf16le(data)


def test_window_limits_inspection():
    data = b"\x80\x01" * 100 + b"\x80\x00" * 10
    assert not ContentSniffer().looks_utf16le(data)
    assert ContentSniffer(window=400).looks_utf16le(data)


def test_threshold_zero_counts_single_zero():
    data = b"\x80\x00\x81\x01"
    assert ContentSniffer().sniff(data).kind is ContentKind.BINARY
    assert ContentSniffer(zero_threshold=0).looks_utf16le(data)
