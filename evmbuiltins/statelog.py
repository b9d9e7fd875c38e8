"""Log entries read from state test JSON."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .jsonbytes import parse_bytes
from .jsonhash import H256, Address, Bloom


@dataclass(frozen=True)
class Log:
    """A log emitted during execution."""

    address: Address
    topics: tuple[H256, ...]
    data: bytes
    bloom: Bloom

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Log":
        """Build a log from a decoded JSON object; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise TypeError("expected a JSON object for a log")
        for name in ("address", "topics", "data", "bloom"):
            if name not in data:
                raise ValueError(f"missing field `{name}`")
        topics = data["topics"]
        if not isinstance(topics, list):
            raise TypeError("log topics must be a list")
        return cls(
            address=Address.from_json(data["address"]),
            topics=tuple(H256.from_json(topic) for topic in topics),
            data=parse_bytes(data["data"]),
            bloom=Bloom.from_json(data["bloom"]),
        )