"""Lenient decoding of hex-encoded byte strings found in test JSON files."""

from __future__ import annotations

import re

_HEX = re.compile(r"[0-9a-fA-F]*")


def _from_hex(text: str) -> bytes:
    if len(text) % 2 or not _HEX.fullmatch(text):
        return b""
    return bytes.fromhex(text)


def parse_bytes(value: str) -> bytes:
    """Decode an optionally 0x-prefixed hex string; malformed input gives b""."""
    if not isinstance(value, str):
        raise TypeError("expected a hex encoded string of bytes")
    if value.startswith("0x"):
        digits = value[2:]
        if len(digits) % 2:
            digits = "0" + digits
        return _from_hex(digits)
    return _from_hex(value)