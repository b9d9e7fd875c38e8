import pytest

from evmbuiltins.pricing import (
    U256_MAX,
    AltBn128ConstOperations,
    AltBn128PairingPricer,
    Blake2FPricer,
    Bls12ConstOperations,
    Bls12MultiexpPricer,
    Bls12PairingPricer,
    Linear,
    ModexpPricer,
)


def h(text: str) -> bytes:
    return bytes.fromhex("".join(text.split()))


BLAKE2F_5_ROUNDS = h(
    "0000000548c9bdf267e6096a3ba7ca8485ae67bb2bf894fe72f36e3cf1361d5f3af54fa5d182e6ad7f520e51"
    "1f6c3e2b8c68059b6bbd41fbabd9831f79217e1319cde05b6162630000000000000000000000000000000000"
    "0000000000000000000000000000000000000000000000000000000000000000000000000000000000000000"
    "0000000000000000000000000000000000000000000000000000000000000000000000000000000000000000"
    "0000000000000000000000000000000000000000000300000000000000000000000000000001"
)

MODEXP_OVERFLOW = h(
    "0000000000000000000000000000000000000000000000000000000000000001"
    "000000000000000000000000000000000000000000000000000000003b27bafd"
    "00000000000000000000000000000000000000000000000000000000503c8ac3"
)

MODEXP_EXP_LEN_OVERFLOW = h(
    """
    00000000000000000000000000000000000000000000000000000000000000ff
    2a1e530000000000000000000000000000000000000000000000000000000000
    0000000000000000000000000000000000000000000000000000000000000000
    """
)

MODEXP_FERMAT = h(
    """
    0000000000000000000000000000000000000000000000000000000000000001
    0000000000000000000000000000000000000000000000000000000000000020
    0000000000000000000000000000000000000000000000000000000000000020
    03
    fffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2e
    fffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f
    """
)

MODEXP_ZERO_BASE = h(
    """
    0000000000000000000000000000000000000000000000000000000000000000
    0000000000000000000000000000000000000000000000000000000000000020
    0000000000000000000000000000000000000000000000000000000000000020
    fffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2e
    fffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f
    """
)

MODEXP_ZERO_PADDING = h(
    """
    0000000000000000000000000000000000000000000000000000000000000001
    0000000000000000000000000000000000000000000000000000000000000002
    0000000000000000000000000000000000000000000000000000000000000020
    03
    ffff
    80
    """
)

MODEXP_ZERO_MODULUS = h(
    """
    0000000000000000000000000000000000000000000000000000000000000001
    0000000000000000000000000000000000000000000000000000000000000002
    0000000000000000000000000000000000000000000000000000000000000000
    03
    ffff
    """
)


def test_blake2f_cost_per_round():
    assert len(BLAKE2F_5_ROUNDS) == 213
    assert Blake2FPricer(123).cost(BLAKE2F_5_ROUNDS) == 123 * 5


def test_blake2f_cost_on_invalid_length():
    assert Blake2FPricer(123).cost(h("00")) == 0


@pytest.mark.parametrize(
    "size, expected",
    [(0, 10), (1, 30), (32, 30), (33, 50)],
)
def test_linear(size, expected):
    assert Linear(base=10, word=20).cost(bytes(size)) == expected


def test_modexp_multiplication_overflow():
    assert ModexpPricer(20).cost(MODEXP_OVERFLOW) == U256_MAX


def test_modexp_exp_len_overflow():
    assert ModexpPricer(20).cost(MODEXP_EXP_LEN_OVERFLOW) == U256_MAX


@pytest.mark.parametrize(
    "data, expected",
    [
        (MODEXP_FERMAT, 13056),
        (MODEXP_ZERO_BASE, 13056),
        (MODEXP_ZERO_PADDING, 768),
        (MODEXP_ZERO_MODULUS, 0),
    ],
)
def test_modexp_eip_198_examples(data, expected):
    assert ModexpPricer(20).cost(data) == expected


def test_modexp_empty_input_is_free():
    assert ModexpPricer(20).cost(b"") == 0


def test_modexp_zero_divisor_falls_back_to_ten():
    pricer = ModexpPricer(0)
    assert pricer.divisor == 10
    assert pricer.cost(MODEXP_FERMAT) == ModexpPricer(10).cost(MODEXP_FERMAT)


@pytest.mark.parametrize("data", [MODEXP_FERMAT, MODEXP_ZERO_BASE])
def test_modexp_eip_2565_examples(data):
    assert ModexpPricer(3, is_eip_2565=True).cost(data) == 1360


def test_modexp_eip_2565_has_floor_of_200():
    pricer = ModexpPricer(3, is_eip_2565=True)
    assert pricer.cost(MODEXP_ZERO_MODULUS) == 200
    assert pricer.cost(b"") == 200


def test_modexp_eip_2565_is_cheaper_than_legacy_for_large_inputs():
    legacy = ModexpPricer(20).cost(MODEXP_FERMAT)
    repriced = ModexpPricer(3, is_eip_2565=True).cost(MODEXP_FERMAT)
    assert repriced < legacy


def test_alt_bn128_pairing_eip1108_transition():
    assert AltBn128PairingPricer(base=100_000, pair=80_000).cost(bytes(192 * 3)) == 340_000
    assert AltBn128PairingPricer(base=45_000, pair=34_000).cost(bytes(192 * 7)) == 283_000


def test_alt_bn128_pairing_ignores_partial_pair():
    assert AltBn128PairingPricer(base=5, pair=7).cost(bytes(191)) == 5


def test_const_operations_ignore_input():
    assert AltBn128ConstOperations(150).cost(bytes(192)) == 150
    assert AltBn128ConstOperations(6_000).cost(b"") == 6_000
    assert Bls12ConstOperations(1).cost(bytes(1000)) == 1


def test_bls12_pairing_counts_whole_pairs():
    pricer = Bls12PairingPricer(base=1, pair=1)
    assert pricer.cost(bytes(384 * 2)) == 3
    assert pricer.cost(bytes(383)) == 1


def test_bls12_multiexp_pair_lengths():
    assert Bls12MultiexpPricer.g1(12000).pair_length == 160
    assert Bls12MultiexpPricer.g2(55000).pair_length == 288


def test_bls12_multiexp_no_pairs_is_free():
    assert Bls12MultiexpPricer.g1(12000).cost(bytes(159)) == 0
    assert Bls12MultiexpPricer.g2(55000).cost(b"") == 0


def test_bls12_multiexp_single_pair_uses_first_discount():
    assert Bls12MultiexpPricer.g1(12000).cost(bytes(160)) == 14400
    assert Bls12MultiexpPricer.g2(55000).cost(bytes(288)) == 66000


def test_bls12_multiexp_discount_is_capped():
    pricer = Bls12MultiexpPricer.g1(1000)
    assert pricer.cost(bytes(160 * 128)) == 128 * 174
    assert pricer.cost(bytes(160 * 200)) == 200 * 174


def test_bls12_multiexp_per_pair_cost_never_increases():
    pricer = Bls12MultiexpPricer.g1(1000)
    per_pair = [pricer.cost(bytes(160 * n)) / n for n in range(1, 140)]
    assert all(later <= earlier for earlier, later in zip(per_pair, per_pair[1:]))