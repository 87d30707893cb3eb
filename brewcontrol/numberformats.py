"""Conversion between byte strings and upper-case hexadecimal text."""

from __future__ import annotations

_HEX_DIGITS = frozenset("0123456789ABCDEFabcdef")


def parse_bytes(text: str) -> bytes:
    """Parse hexadecimal text, two digits per byte, into bytes."""
    if len(text) % 2:
        raise ValueError(f"hex text has odd length: {text!r}")
    bad = set(text) - _HEX_DIGITS
    if bad:
        raise ValueError(f"invalid hex digits in {text!r}: {''.join(sorted(bad))}")
    return bytes(int(text[pos:pos + 2], 16) for pos in range(0, len(text), 2))


def print_bytes(data: bytes) -> str:
    """Render bytes as upper-case hexadecimal text, two digits per byte."""
    return bytes(data).hex().upper()