"""The BLAKE2b compression function F with a configurable number of rounds."""

from __future__ import annotations

from collections.abc import Sequence

_MASK = (1 << 64) - 1

SIGMA: tuple[tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
    (11, 8, 12, 0, 5, 2, 15, 13, 10, 14, 3, 6, 7, 1, 9, 4),
    (7, 9, 3, 1, 13, 12, 11, 14, 2, 6, 5, 10, 4, 0, 15, 8),
    (9, 0, 5, 7, 2, 4, 10, 15, 14, 1, 11, 12, 6, 8, 3, 13),
    (2, 12, 6, 10, 0, 11, 8, 3, 4, 13, 7, 5, 15, 14, 1, 9),
    (12, 5, 1, 15, 14, 13, 4, 10, 0, 7, 6, 3, 9, 2, 8, 11),
    (13, 11, 7, 14, 12, 1, 3, 9, 5, 0, 15, 4, 8, 6, 2, 10),
    (6, 15, 14, 9, 11, 3, 0, 8, 12, 2, 13, 7, 1, 4, 10, 5),
    (10, 2, 8, 4, 7, 6, 1, 5, 15, 11, 9, 14, 3, 12, 13, 0),
)

IV: tuple[int, ...] = (
    0x6A09E667F3BCC908,
    0xBB67AE8584CAA73B,
    0x3C6EF372FE94F82B,
    0xA54FF53A5F1D36F1,
    0x510E527FADE682D1,
    0x9B05688C2B3E6C1F,
    0x1F83D9ABFB41BD6B,
    0x5BE0CD19137E2179,
)

# Working-vector indices mixed by G: four columns, then four diagonals.
_LANES = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (64 - n))) & _MASK


def _g(v: list[int], a: int, b: int, c: int, d: int, x: int, y: int) -> None:
    v[a] = (v[a] + v[b] + x) & _MASK
    v[d] = _rotr(v[d] ^ v[a], 32)
    v[c] = (v[c] + v[d]) & _MASK
    v[b] = _rotr(v[b] ^ v[c], 24)

    v[a] = (v[a] + v[b] + y) & _MASK
    v[d] = _rotr(v[d] ^ v[a], 16)
    v[c] = (v[c] + v[d]) & _MASK
    v[b] = _rotr(v[b] ^ v[c], 63)


def _words(values: Sequence[int], count: int, name: str) -> list[int]:
    words = list(values)
    if len(words) != count:
        raise ValueError(f"{name} must hold {count} words, got {len(words)}")
    for word in words:
        if not 0 <= word <= _MASK:
            raise ValueError(f"{name} word {word!r} is not a 64-bit unsigned value")
    return words


def compress(
    state: Sequence[int],
    message: Sequence[int],
    counter: Sequence[int],
    final: bool,
    rounds: int,
) -> tuple[int, ...]:
    """Run F on an 8-word state and a 16-word block; return the new state."""
    h = _words(state, 8, "state")
    m = _words(message, 16, "message")
    t = _words(counter, 2, "counter")
    if rounds < 0:
        raise ValueError("rounds must not be negative")

    v = [*h, *IV]
    v[12] ^= t[0]
    v[13] ^= t[1]
    if final:
        v[14] ^= _MASK

    for i in range(rounds):
        s = SIGMA[i % 10]
        for (a, b, c, d), x, y in zip(_LANES, s[0::2], s[1::2]):
            _g(v, a, b, c, d, m[x], m[y])

    return tuple(word ^ low ^ high for word, low, high in zip(h, v[:8], v[8:]))