"""Gas pricing schemes for the built-in contracts."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

U256_MAX = (1 << 256) - 1
_U64_LIMIT = 1 << 64
_U32_MAX = (1 << 32) - 1

SERIALIZED_G1_POINT_BYTE_LENGTH = 128
SERIALIZED_G2_POINT_BYTE_LENGTH = 256
SCALAR_BYTE_LENGTH = 32

BLS12_G1_AND_G2_PAIR_LEN = SERIALIZED_G1_POINT_BYTE_LENGTH + SERIALIZED_G2_POINT_BYTE_LENGTH
BLS12_G1_MULTIEXP_PAIR_LEN = SERIALIZED_G1_POINT_BYTE_LENGTH + SCALAR_BYTE_LENGTH
BLS12_G2_MULTIEXP_PAIR_LEN = SERIALIZED_G2_POINT_BYTE_LENGTH + SCALAR_BYTE_LENGTH

BLS12_MULTIEXP_MAX_DISCOUNT = 174
BLS12_MULTIEXP_PAIRS_FOR_MAX_DISCOUNT = 128
BLS12_MULTIEXP_DISCOUNT_DIVISOR = 1000

# Discount for k pairs (k = 1..128) sits at index k - 1; normalised by the divisor.
BLS12_MULTIEXP_DISCOUNTS: tuple[int, ...] = (
    1200, 888, 764, 641, 594, 547, 500, 453, 438, 423, 408, 394, 379, 364, 349, 334,
    330, 326, 322, 318, 314, 310, 306, 302, 298, 294, 289, 285, 281, 277, 273, 269,
    268, 266, 265, 263, 262, 260, 259, 257, 256, 254, 253, 251, 250, 248, 247, 245,
    244, 242, 241, 239, 238, 236, 235, 233, 232, 231, 229, 228, 226, 225, 223, 222,
    221, 220, 219, 219, 218, 217, 216, 216, 215, 214, 213, 213, 212, 211, 211, 210,
    209, 208, 208, 207, 206, 205, 205, 204, 203, 202, 202, 201, 200, 199, 199, 198,
    197, 196, 196, 195, 194, 193, 193, 192, 191, 191, 190, 189, 188, 188, 187, 186,
    185, 185, 184, 183, 182, 182, 181, 180, 179, 179, 178, 177, 176, 176, 175, 174,
)


def _sat_mul(a: int, b: int) -> int:
    return min(a * b, U256_MAX)


def _sat_add(a: int, b: int) -> int:
    return min(a + b, U256_MAX)


def _word(data: bytes, offset: int, length: int = 32) -> bytes:
    """Read `length` bytes at `offset`, treating data as zero-extended."""
    return data[offset:offset + length].ljust(length, b"\0")


@dataclass(frozen=True)
class Linear:
    """A base cost plus a cost per 32-byte word of input."""

    base: int
    word: int

    def cost(self, data: bytes) -> int:
        return self.base + self.word * ((len(data) + 31) // 32)


@dataclass(frozen=True)
class Blake2FPricer:
    """A fixed cost per round, the round count being the input's first four bytes."""

    gas_per_round: int

    def cost(self, data: bytes) -> int:
        if len(data) < 4:
            return 0
        rounds = int.from_bytes(data[:4], "big")
        return self.gas_per_round * rounds


@dataclass(frozen=True)
class AltBn128PairingPricer:
    """A base cost plus a cost per 192-byte pair."""

    base: int
    pair: int

    def cost(self, data: bytes) -> int:
        return self.base + self.pair * (len(data) // 192)


@dataclass(frozen=True)
class AltBn128ConstOperations:
    """A fixed price for alt_bn128 addition and multiplication."""

    price: int

    def cost(self, data: bytes) -> int:
        return self.price


@dataclass(frozen=True)
class Bls12ConstOperations:
    """A fixed price for BLS12-381 additions, multiplications and mappings."""

    price: int

    def cost(self, data: bytes) -> int:
        return self.price


@dataclass(frozen=True)
class Bls12PairingPricer:
    """A base cost plus a cost per G1 and G2 point pair."""

    base: int
    pair: int

    def cost(self, data: bytes) -> int:
        return self.base + self.pair * (len(data) // BLS12_G1_AND_G2_PAIR_LEN)


@dataclass(frozen=True)
class Bls12MultiexpPricer:
    """Multi-exponentiation pricing with a discount that grows with the pair count."""

    base_price: int
    pair_length: int

    @classmethod
    def g1(cls, base: int) -> "Bls12MultiexpPricer":
        """Pricer for multi-exponentiation in G1."""
        return cls(base, BLS12_G1_MULTIEXP_PAIR_LEN)

    @classmethod
    def g2(cls, base: int) -> "Bls12MultiexpPricer":
        """Pricer for multi-exponentiation in G2."""
        return cls(base, BLS12_G2_MULTIEXP_PAIR_LEN)

    def cost(self, data: bytes) -> int:
        num_pairs = len(data) // self.pair_length
        if num_pairs == 0:
            return 0
        if num_pairs > BLS12_MULTIEXP_PAIRS_FOR_MAX_DISCOUNT:
            discount = BLS12_MULTIEXP_MAX_DISCOUNT
        else:
            discount = BLS12_MULTIEXP_DISCOUNTS[num_pairs - 1]
        return self.base_price * num_pairs * discount // BLS12_MULTIEXP_DISCOUNT_DIVISOR


@dataclass(frozen=True)
class ModexpPricer:
    """Pricing for modular exponentiation (EIP-198, or EIP-2565 when flagged)."""

    divisor: int
    is_eip_2565: bool = False

    def __post_init__(self) -> None:
        if self.divisor == 0:
            logger.warning("Zero modexp divisor specified. Falling back to default: 10.")
            object.__setattr__(self, "divisor", 10)

    def cost(self, data: bytes) -> int:
        base_len, exp_len, mod_len = self._read_lengths(data)
        if self.is_eip_2565:
            exponent = self._read_exp(data, base_len, exp_len)
            return self._eip_2565_cost(base_len, mod_len, exp_len, exponent)
        return self._legacy_cost(data, base_len, exp_len, mod_len)

    @staticmethod
    def _read_lengths(data: bytes) -> tuple[int, int, int]:
        return tuple(int.from_bytes(_word(data, offset), "big") for offset in (0, 32, 64))

    @staticmethod
    def _read_exp(data: bytes, base_len: int, exp_len: int) -> int:
        if base_len > _U32_MAX or base_len + 96 >= len(data):
            return 0
        length = min(exp_len, 32)
        return int.from_bytes(_word(data, 96 + base_len, length), "big")

    @staticmethod
    def _adjusted_exp_len(length: int, exp_low: int) -> int:
        bit_index = exp_low.bit_length() - 1 if exp_low else 0
        if length <= 32:
            return bit_index
        return 8 * (length - 32) + bit_index

    @staticmethod
    def _mult_complexity(x: int) -> int:
        if x <= 64:
            return x * x
        if x <= 1024:
            return (x * x) // 4 + 96 * x - 3072
        return (x * x) // 16 + 480 * x - 199_680

    def _legacy_cost(self, data: bytes, base_len: int, exp_len: int, mod_len: int) -> int:
        if mod_len == 0 and base_len == 0:
            return 0
        max_len = _U32_MAX // 2
        if base_len > max_len or mod_len > max_len or exp_len > max_len:
            return U256_MAX
        exp_low = self._read_exp(data, base_len, exp_len)
        adjusted = self._adjusted_exp_len(exp_len, exp_low)
        gas = self._mult_complexity(max(mod_len, base_len)) * max(adjusted, 1)
        if gas >= _U64_LIMIT:
            return U256_MAX
        return gas // self.divisor

    def _eip_2565_cost(self, base_len: int, mod_len: int, exp_len: int, exponent: int) -> int:
        words = -(-max(base_len, mod_len) // 8)
        complexity = _sat_mul(words, words)
        if exp_len <= 32:
            iterations = exponent.bit_length() - 1 if exponent else 0
        else:
            iterations = _sat_add(
                _sat_mul(8, exp_len - 32), max(exponent.bit_length() - 1, 0)
            )
        iterations = max(iterations, 1)
        return max(200, _sat_mul(complexity, iterations) // self.divisor)