"""Fixed-size hashes read leniently from hex strings in test JSON files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

_HEX = re.compile(r"[0-9a-fA-F]*")


@dataclass(frozen=True, order=True)
class FixedHash:
    """A fixed-length byte string; subclasses set SIZE."""

    data: bytes
    SIZE: ClassVar[int] = 0

    def __post_init__(self) -> None:
        if len(self.data) != self.SIZE:
            raise ValueError(
                f"{type(self).__name__} needs {self.SIZE} bytes, got {len(self.data)}"
            )

    def __bytes__(self) -> bytes:
        return self.data

    @classmethod
    def zero(cls):
        """The all-zero hash."""
        return cls(bytes(cls.SIZE))

    @classmethod
    def from_json(cls, value: str):
        """Read a hash from an optionally 0x-prefixed hex string; "" gives zero."""
        if not isinstance(value, str):
            raise TypeError("expected a 0x-prefixed hex-encoded hash")
        if value in ("", "0x"):
            return cls.zero()
        digits = value[2:] if value.startswith("0x") else value
        if not _HEX.fullmatch(digits):
            raise ValueError(f"Invalid hex value {value}: invalid hex character")
        if len(digits) != 2 * cls.SIZE:
            raise ValueError(f"Invalid hex value {value}: invalid hex length")
        return cls(bytes.fromhex(digits))

    def to_json(self) -> str:
        """The 0x-prefixed lower-case hex form."""
        return "0x" + self.data.hex()


@dataclass(frozen=True, order=True)
class H64(FixedHash):
    """An 8-byte hash."""

    SIZE: ClassVar[int] = 8


@dataclass(frozen=True, order=True)
class Address(FixedHash):
    """A 20-byte account address."""

    SIZE: ClassVar[int] = 20


@dataclass(frozen=True, order=True)
class H256(FixedHash):
    """A 32-byte hash."""

    SIZE: ClassVar[int] = 32


@dataclass(frozen=True, order=True)
class H520(FixedHash):
    """A 65-byte value."""

    SIZE: ClassVar[int] = 65


@dataclass(frozen=True, order=True)
class Bloom(FixedHash):
    """A 256-byte log bloom filter."""

    SIZE: ClassVar[int] = 256