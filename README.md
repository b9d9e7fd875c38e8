# evmbuiltins

Pure-Python building blocks for Ethereum precompiled contracts: the BLAKE2b F
compression function, alt_bn128 curve arithmetic and pairing checks, the gas
pricing schemes of the precompiles, and lenient parsing of hex values found in
JSON test fixtures. It needs nothing beyond the standard library.

## Modules

- `evmbuiltins.blake2f` – `compress(state, message, counter, final, rounds)`
  runs the BLAKE2b F function (EIP-152) on an 8-word state and a 16-word
  message block with any number of rounds, and returns the new state as a
  tuple. Words that are not 64-bit unsigned values, wrong word counts and
  negative round counts raise `ValueError`.
- `evmbuiltins.pricing` – gas pricers, each with a `cost(data)` method:
  `Linear`, `ModexpPricer` (classic pricing, or EIP-2565 with
  `is_eip_2565=True`; a zero divisor falls back to 10), `Blake2FPricer`,
  `AltBn128PairingPricer`, `AltBn128ConstOperations`, `Bls12ConstOperations`,
  `Bls12PairingPricer` and `Bls12MultiexpPricer` (built with
  `Bls12MultiexpPricer.g1(base)` or `.g2(base)`).
- `evmbuiltins.bn128` – `is_on_g1`, `is_on_g2`, `add`, `multiply` and
  `pairing_product_is_one` on the alt_bn128 (BN254) curve. G1 points are
  `(x, y)` pairs, G2 points are `((x_re, x_im), (y_re, y_im))`, and `None` is
  the point at infinity. Invalid points raise `ValueError`.
- `evmbuiltins.jsonbytes` – `parse_bytes(value)` decodes an optionally
  `0x`-prefixed hex string; an odd digit count after `0x` is left-padded with a
  zero, and malformed input gives `b""`.
- `evmbuiltins.jsonhash` – fixed-size hashes `H64`, `Address`, `H256`, `H520`
  and `Bloom` (all `FixedHash` subclasses) with `from_json`, `to_json` and
  `zero`. An empty string or `"0x"` reads as the zero hash.
- `evmbuiltins.statelog` – `Log.from_json(data)` builds a log entry (address,
  topics, data, bloom) from a decoded JSON object.

## Installation

```
pip install .
```

## Examples

```python
from evmbuiltins.blake2f import compress

state = [
    0x6A09E667F2BDC948, 0xBB67AE8584CAA73B, 0x3C6EF372FE94F82B, 0xA54FF53A5F1D36F1,
    0x510E527FADE682D1, 0x9B05688C2B3E6C1F, 0x1F83D9ABFB41BD6B, 0x5BE0CD19137E2179,
]
message = [0x636261] + [0] * 15
print(hex(compress(state, message, (3, 0), True, 12)[0]))  # 0xd4d1c983fa580ba
```

```python
from evmbuiltins.pricing import Blake2FPricer, Linear

print(Linear(base=10, word=20).cost(b"\x00" * 33))         # 10 + 20 * 2 = 50
print(Blake2FPricer(123).cost(bytes.fromhex("00000005")))   # 123 * 5 = 615
```

```python
from evmbuiltins import bn128

print(bn128.add(bn128.G1, bn128.G1) == bn128.multiply(bn128.G1, 2))  # True
print(bn128.pairing_product_is_one([]))                               # True
```

```python
from evmbuiltins.jsonbytes import parse_bytes
from evmbuiltins.jsonhash import H256

print(parse_bytes("0x001"))                 # b'\x00\x01'
print(H256.from_json("") == H256.zero())    # True
```

## What this package does not do

It does not execute precompiled contracts: there is no identity, SHA-256,
RIPEMD-160, ecrecover, modexp, alt_bn128 or BLAKE2F contract that takes call
data and writes an output buffer, and no secp256k1 key recovery. Nor does it
pair pricers with activation blocks. BLS12-381 is covered by pricing only; the
package has no BLS12-381 curve arithmetic.

## Running the tests

```
pip install .[test]
pytest
```