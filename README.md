# p256curve

Pure Python group arithmetic on the NIST P-256 (secp256r1) elliptic curve.

The package has four modules:

- `p256curve.field` — `FieldElement`, integers modulo the field prime
  `MODULUS`, with `+`, `-`, `*`, negation, `double`, `square`, `pow_vartime`,
  `invert` and `sqrt`, and 32-byte big-endian `from_bytes` / `to_bytes`.
- `p256curve.affine` — `AffinePoint`, curve points in affine coordinates, and
  the curve coefficients `CURVE_EQUATION_A` and `CURVE_EQUATION_B`. SEC1
  encodings are read by `from_encoded_point` (identity `00`, compressed
  `02`/`03`, uncompressed `04`, compact `05`) and written by
  `to_encoded_point(compress)` and `to_compact_encoded_point()`.
  `from_bytes` / `to_bytes` use a fixed 33-byte form in which the identity is
  33 zero bytes.
- `p256curve.projective` — `ProjectivePoint`, curve points in projective
  coordinates, with complete addition (also with an `AffinePoint` on the
  right), subtraction, negation, `double`, and multiplication by a Python
  `int` reduced modulo the group order `ORDER`. `sum_points` adds up an
  iterable of points.
- `p256curve.hash2curve` — hash-to-curve with SHA-256 and the simplified SWU
  map (`P256_XMD:SHA-256_SSWU_RO_`): `expand_message_xmd`, `hash_to_field`,
  `map_to_curve`, `hash_from_bytes`, `hash_to_scalar`, `field_from_okm` and
  `scalar_from_okm`.

Invalid input raises: `ValueError` for bad encodings, values out of range,
points not on the curve and elements with no square root;
`ZeroDivisionError` for inverting zero.

## Examples

Field arithmetic:

```python
from p256curve.field import FieldElement

two = FieldElement.from_int(2)
four = two.square()
assert four.sqrt() == two
assert (two * two.invert()).to_int() == 1
```

Encoding and decoding points:

```python
from p256curve.affine import AffinePoint

g = AffinePoint.generator()
compressed = g.to_encoded_point(True)      # 33 bytes, starts with 0x02 or 0x03
assert AffinePoint.from_encoded_point(compressed) == g
assert -(-g) == g
```

Scalar multiplication and point addition:

```python
from p256curve.projective import ProjectivePoint, sum_points

g = ProjectivePoint.generator()
assert g + g == g.double()
assert sum_points([g, g, g]) == g * 3
print(g.double().to_affine().to_encoded_point(False).hex())
```

Hashing to the curve and to a scalar:

```python
from p256curve.hash2curve import hash_from_bytes, hash_to_scalar

dst = b"QUUX-V01-CS02-with-P256_XMD:SHA-256_SSWU_RO_"
point = hash_from_bytes([b"abc"], dst)
print(point.to_affine().to_encoded_point(True).hex())
print(hex(hash_to_scalar([b"abc"], dst)))
```

## What it does not do

- There is no signing or verification (no ECDSA), no key generation and no
  key-exchange helper; only the group arithmetic and encodings they build on.
- Scalars are plain Python integers; there is no separate scalar type.
- The code is written for clarity, not speed, and is not constant-time. Do
  not use it to protect secrets in production.

## Running the tests

```
pip install ".[test]"
pytest
```