"""Hashing to the NIST P-256 curve and its scalar field (P256_XMD:SHA-256_SSWU_RO_)."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable

from .affine import CURVE_EQUATION_A, CURVE_EQUATION_B, AffinePoint
from .field import MODULUS, FieldElement
from .projective import ORDER, ProjectivePoint

OKM_BYTES = 48
"""Bytes of uniform output consumed per field element or scalar."""

_HASH = hashlib.sha256
_B_IN_BYTES = _HASH().digest_size
_R_IN_BYTES = _HASH().block_size
_MAX_DST_BYTES = 255
_OVERSIZE_DST_PREFIX = b"H2C-OVERSIZE-DST-"

_Z = FieldElement.from_int(-10)
_X1_EXCEPTIONAL = CURVE_EQUATION_B * (_Z * CURVE_EQUATION_A).invert()
_MINUS_B_OVER_A = -CURVE_EQUATION_B * CURVE_EQUATION_A.invert()


def _dst_prime(dst: bytes) -> bytes:
    if not dst:
        raise ValueError("domain separation tag must not be empty")
    if len(dst) > _MAX_DST_BYTES:
        dst = _HASH(_OVERSIZE_DST_PREFIX + dst).digest()
    return dst + bytes([len(dst)])


def expand_message_xmd(messages: Iterable[bytes], dst: bytes, length: int) -> bytes:
    """Expand the concatenated messages to ``length`` uniform bytes with SHA-256."""
    if length <= 0 or length > 0xFFFF:
        raise ValueError("output length must be between 1 and 65535 bytes")
    ell = -(-length // _B_IN_BYTES)
    if ell > 255:
        raise ValueError("output length too large for SHA-256")
    dst_prime = _dst_prime(bytes(dst))

    b0_hash = _HASH(bytes(_R_IN_BYTES))
    for message in messages:
        b0_hash.update(bytes(message))
    b0_hash.update(length.to_bytes(2, "big") + b"\x00" + dst_prime)
    b0 = b0_hash.digest()

    blocks = [_HASH(b0 + b"\x01" + dst_prime).digest()]
    for index in range(2, ell + 1):
        mixed = bytes(a ^ b for a, b in zip(b0, blocks[-1]))
        blocks.append(_HASH(mixed + bytes([index]) + dst_prime).digest())
    return b"".join(blocks)[:length]


def _check_okm(data: bytes) -> int:
    data = bytes(data)
    if len(data) != OKM_BYTES:
        raise ValueError(f"expected {OKM_BYTES} bytes, got {len(data)}")
    return int.from_bytes(data, "big")


def field_from_okm(data: bytes) -> FieldElement:
    """Reduce 48 big-endian bytes modulo the field prime."""
    return FieldElement(_check_okm(data) % MODULUS)


def scalar_from_okm(data: bytes) -> int:
    """Reduce 48 big-endian bytes modulo the group order."""
    return _check_okm(data) % ORDER


def hash_to_field(
    messages: Iterable[bytes], dst: bytes, count: int
) -> list[FieldElement]:
    """Hash the messages to ``count`` field elements."""
    if count <= 0:
        raise ValueError("count must be positive")
    uniform = expand_message_xmd(messages, dst, count * OKM_BYTES)
    return [
        field_from_okm(uniform[start : start + OKM_BYTES])
        for start in range(0, len(uniform), OKM_BYTES)
    ]


def _curve_rhs(x: FieldElement) -> FieldElement:
    return x * x * x + CURVE_EQUATION_A * x + CURVE_EQUATION_B


def map_to_curve(u: FieldElement) -> ProjectivePoint:
    """Map a field element to a curve point with the simplified SWU map."""
    z_u2 = _Z * u.square()
    tv1 = z_u2.square() + z_u2
    if tv1.is_zero():
        x = _X1_EXCEPTIONAL
    else:
        x = _MINUS_B_OVER_A * (FieldElement.ONE + tv1.invert())
    try:
        y = _curve_rhs(x).sqrt()
    except ValueError:
        x = z_u2 * x
        y = _curve_rhs(x).sqrt()
    if y.is_odd() != u.is_odd():
        y = -y
    return ProjectivePoint.from_affine(AffinePoint(x, y))


def hash_from_bytes(messages: Iterable[bytes], dst: bytes) -> ProjectivePoint:
    """Hash the messages to a curve point (random-oracle construction)."""
    u0, u1 = hash_to_field(messages, dst, 2)
    # The cofactor of P-256 is one, so clearing it is the identity map.
    return map_to_curve(u0) + map_to_curve(u1)


def hash_to_scalar(messages: Iterable[bytes], dst: bytes) -> int:
    """Hash the messages to a scalar modulo the group order."""
    return scalar_from_okm(expand_message_xmd(messages, dst, OKM_BYTES))