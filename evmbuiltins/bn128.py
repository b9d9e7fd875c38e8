"""Arithmetic and pairing checks on the alt_bn128 (BN254) curve.

G1 points are ``(x, y)`` integer pairs, G2 points are
``((x_real, x_imag), (y_real, y_imag))`` with each coordinate an element
``real + imag * i`` of F_p^2 = F_p[i] / (i^2 + 1).  ``None`` stands for the
point at infinity in both groups.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional, Tuple

FIELD_MODULUS = 0x30644E72E131A029B85045B68181585D97816A916871CA8D3C208C16D87CFD47
CURVE_ORDER = 0x30644E72E131A029B85045B68181585D2833E84879B9709143E1F593F0000001

G1Point = Optional[Tuple[int, int]]
G2Point = Optional[Tuple[Tuple[int, int], Tuple[int, int]]]

G1: Tuple[int, int] = (1, 2)
G2: Tuple[Tuple[int, int], Tuple[int, int]] = (
    (
        10857046999023057135944570762232829481370756359578518086990519993285655852781,
        11559732032986387107991004021392285783925812861821192530917403151452391805634,
    ),
    (
        8495653923123431417604973247489272438418190587263600148770280649306958101930,
        4082367875863433681332203403145435568316851327593401208105741076214120093531,
    ),
)

_P = FIELD_MODULUS
_ATE_LOOP_COUNT = 29793968203157093288
_FINAL_EXPONENT = (_P ** 12 - 1) // CURVE_ORDER


class _Fq:
    """An element of the base field F_p."""

    __slots__ = ("v",)

    def __init__(self, v: int) -> None:
        self.v = v % _P

    def __add__(self, other: "_Fq") -> "_Fq":
        return _Fq(self.v + other.v)

    def __sub__(self, other: "_Fq") -> "_Fq":
        return _Fq(self.v - other.v)

    def __neg__(self) -> "_Fq":
        return _Fq(-self.v)

    def __mul__(self, other) -> "_Fq":
        if isinstance(other, int):
            return _Fq(self.v * other)
        return _Fq(self.v * other.v)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Fq) and self.v == other.v

    def __hash__(self) -> int:
        return hash(self.v)

    def is_zero(self) -> bool:
        return self.v == 0

    def inverse(self) -> "_Fq":
        return _Fq(pow(self.v, -1, _P))


class _Fq2:
    """An element ``re + im * i`` of F_p^2 with i^2 = -1."""

    __slots__ = ("re", "im")

    def __init__(self, re: int, im: int = 0) -> None:
        self.re = re % _P
        self.im = im % _P

    def __add__(self, other: "_Fq2") -> "_Fq2":
        return _Fq2(self.re + other.re, self.im + other.im)

    def __sub__(self, other: "_Fq2") -> "_Fq2":
        return _Fq2(self.re - other.re, self.im - other.im)

    def __neg__(self) -> "_Fq2":
        return _Fq2(-self.re, -self.im)

    def __mul__(self, other) -> "_Fq2":
        if isinstance(other, int):
            return _Fq2(self.re * other, self.im * other)
        return _Fq2(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def __pow__(self, exponent: int) -> "_Fq2":
        result = _Fq2(1)
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Fq2) and (self.re, self.im) == (other.re, other.im)

    def __hash__(self) -> int:
        return hash((self.re, self.im))

    def is_zero(self) -> bool:
        return self.re == 0 and self.im == 0

    def conjugate(self) -> "_Fq2":
        return _Fq2(self.re, -self.im)

    def inverse(self) -> "_Fq2":
        norm_inv = pow(self.re * self.re + self.im * self.im, -1, _P)
        return _Fq2(self.re * norm_inv, -self.im * norm_inv)


_XI = _Fq2(9, 1)
_B2 = _Fq2(3) * _XI.inverse()
_GAMMA2 = _XI ** ((_P - 1) // 3)
_GAMMA3 = _XI ** ((_P - 1) // 2)


def _ec_add(a, b):
    if a is None:
        return b
    if b is None:
        return a
    (x1, y1), (x2, y2) = a, b
    if x1 == x2:
        if y1 != y2 or y1.is_zero():
            return None
        slope = x1 * x1 * 3 * (y1 * 2).inverse()
    else:
        slope = (y2 - y1) * (x2 - x1).inverse()
    x3 = slope * slope - x1 - x2
    y3 = slope * (x1 - x3) - y1
    return x3, y3


def _ec_multiply(point, scalar: int):
    result = None
    addend = point
    while scalar:
        if scalar & 1:
            result = _ec_add(result, addend)
        addend = _ec_add(addend, addend)
        scalar >>= 1
    return result


def _in_range(*values: int) -> bool:
    return all(isinstance(v, int) and 0 <= v < _P for v in values)


def _g1_in(point: G1Point):
    if point is None:
        return None
    x, y = point
    return _Fq(x), _Fq(y)


def _g1_out(point) -> G1Point:
    if point is None:
        return None
    x, y = point
    return x.v, y.v


def _g2_in(point: G2Point):
    if point is None:
        return None
    (xr, xi), (yr, yi) = point
    return _Fq2(xr, xi), _Fq2(yr, yi)


def is_on_g1(point: G1Point) -> bool:
    """Whether the point lies on y^2 = x^3 + 3 with coordinates below p."""
    if point is None:
        return True
    x, y = point
    if not _in_range(x, y):
        return False
    return (y * y - x * x * x - 3) % _P == 0


def is_on_g2(point: G2Point) -> bool:
    """Whether the point lies on the twisted curve and in the order-n subgroup."""
    if point is None:
        return True
    (xr, xi), (yr, yi) = point
    if not _in_range(xr, xi, yr, yi):
        return False
    x, y = _g2_in(point)
    if y * y != x * x * x + _B2:
        return False
    return _ec_multiply((x, y), CURVE_ORDER) is None


def add(p1: G1Point, p2: G1Point) -> G1Point:
    """Sum of two G1 points; raises ValueError for a point not on the curve."""
    if not (is_on_g1(p1) and is_on_g1(p2)):
        raise ValueError("Invalid curve point")
    return _g1_out(_ec_add(_g1_in(p1), _g1_in(p2)))


def multiply(point: G1Point, scalar: int) -> G1Point:
    """A G1 point multiplied by a non-negative scalar."""
    if not is_on_g1(point):
        raise ValueError("Invalid curve point")
    if scalar < 0:
        raise ValueError("scalar must not be negative")
    return _g1_out(_ec_multiply(_g1_in(point), scalar))


# F_p^12 elements are 12 coefficients of a polynomial in w with w^12 = 18 w^6 - 82,
# where w^6 = 9 + i.
_ONE12 = (1,) + (0,) * 11


def _f12_mul(a: tuple[int, ...], b: tuple[int, ...]) -> tuple[int, ...]:
    product = [0] * 23
    for i, ai in enumerate(a):
        if ai:
            for j, bj in enumerate(b):
                product[i + j] += ai * bj
    for degree in range(22, 11, -1):
        top = product[degree] % _P
        if top:
            product[degree - 6] += 18 * top
            product[degree - 12] -= 82 * top
    return tuple(c % _P for c in product[:12])


def _f12_pow(a: tuple[int, ...], exponent: int) -> tuple[int, ...]:
    result = _ONE12
    for bit in bin(exponent)[2:]:
        result = _f12_mul(result, result)
        if bit == "1":
            result = _f12_mul(result, a)
    return result


def _embed(coeffs: list[int], value: _Fq2, shift: int) -> None:
    coeffs[shift] += value.re - 9 * value.im
    coeffs[shift + 6] += value.im


def _line(r, s, p: tuple[int, int]) -> tuple[int, ...]:
    """Line through twisted points r and s, evaluated at the G1 point p."""
    (x1, y1), (x2, y2) = r, s
    xt, yt = p
    coeffs = [0] * 12
    if x1 == x2 and y1 != y2:
        coeffs[0] = xt
        _embed(coeffs, -x1, 2)
    else:
        if x1 == x2:
            slope = x1 * x1 * 3 * (y1 * 2).inverse()
        else:
            slope = (y2 - y1) * (x2 - x1).inverse()
        coeffs[0] = -yt
        _embed(coeffs, slope * xt, 1)
        _embed(coeffs, y1 - slope * x1, 3)
    return tuple(c % _P for c in coeffs)


def _frobenius(q):
    x, y = q
    return x.conjugate() * _GAMMA2, y.conjugate() * _GAMMA3


def _miller_loop(q, p: tuple[int, int]) -> tuple[int, ...]:
    r = q
    f = _ONE12
    for bit in bin(_ATE_LOOP_COUNT)[3:]:
        f = _f12_mul(_f12_mul(f, f), _line(r, r, p))
        r = _ec_add(r, r)
        if bit == "1":
            f = _f12_mul(f, _line(r, q, p))
            r = _ec_add(r, q)
    q1 = _frobenius(q)
    x2, y2 = _frobenius(q1)
    neg_q2 = (x2, -y2)
    f = _f12_mul(f, _line(r, q1, p))
    r = _ec_add(r, q1)
    return _f12_mul(f, _line(r, neg_q2, p))


def pairing_product_is_one(pairs: Iterable[tuple[G1Point, G2Point]]) -> bool:
    """Whether the product of the pairings e(a, b) over all pairs is one.

    Raises ValueError when a G1 or G2 point is invalid; an empty input gives True.
    """
    f = _ONE12
    for a, b in pairs:
        if not is_on_g2(b):
            raise ValueError("Invalid b argument - not on curve")
        if not is_on_g1(a):
            raise ValueError("Invalid a argument - not on curve")
        if a is None or b is None:
            continue
        f = _f12_mul(f, _miller_loop(_g2_in(b), a))
    return _f12_pow(f, _FINAL_EXPONENT) == _ONE12