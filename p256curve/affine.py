"""Points on the NIST P-256 curve y^2 = x^3 - 3x + b in affine coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from .field import FIELD_BYTES, MODULUS, FieldElement

CURVE_EQUATION_A = FieldElement.from_int(-3)
"""Curve coefficient a = -3."""

CURVE_EQUATION_B = FieldElement(
    0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B
)
"""Curve coefficient b."""

COMPRESSED_POINT_BYTES = FIELD_BYTES + 1
"""Length of a compressed (or compact) SEC1 point encoding."""

UNCOMPRESSED_POINT_BYTES = 2 * FIELD_BYTES + 1
"""Length of an uncompressed SEC1 point encoding."""


class Sec1Tag(IntEnum):
    """Leading byte of a SEC1 point encoding."""

    IDENTITY = 0x00
    COMPRESSED_EVEN_Y = 0x02
    COMPRESSED_ODD_Y = 0x03
    UNCOMPRESSED = 0x04
    COMPACT = 0x05


_EXPECTED_LENGTH = {
    Sec1Tag.IDENTITY: 1,
    Sec1Tag.COMPRESSED_EVEN_Y: COMPRESSED_POINT_BYTES,
    Sec1Tag.COMPRESSED_ODD_Y: COMPRESSED_POINT_BYTES,
    Sec1Tag.UNCOMPRESSED: UNCOMPRESSED_POINT_BYTES,
    Sec1Tag.COMPACT: COMPRESSED_POINT_BYTES,
}


def _curve_rhs(x: FieldElement) -> FieldElement:
    """Return x^3 + a*x + b."""
    return x * x * x + CURVE_EQUATION_A * x + CURVE_EQUATION_B


@dataclass(frozen=True)
class AffinePoint:
    """A P-256 point in affine coordinates, or the point at infinity."""

    x: FieldElement
    y: FieldElement
    infinity: bool = False

    IDENTITY: ClassVar[AffinePoint]
    GENERATOR: ClassVar[AffinePoint]

    @classmethod
    def identity(cls) -> AffinePoint:
        """Return the point at infinity."""
        return cls.IDENTITY

    @classmethod
    def generator(cls) -> AffinePoint:
        """Return the base point of P-256."""
        return cls.GENERATOR

    def is_identity(self) -> bool:
        return self.infinity

    def x_bytes(self) -> bytes:
        """Return the big-endian encoding of the x-coordinate."""
        return self.x.to_bytes()

    def __neg__(self) -> AffinePoint:
        return AffinePoint(self.x, -self.y, self.infinity)

    @classmethod
    def decompress(cls, x_bytes: bytes, y_is_odd: bool) -> AffinePoint:
        """Recover the point with the given x and y parity."""
        x = FieldElement.from_bytes(x_bytes)
        beta = _curve_rhs(x).sqrt()
        y = beta if beta.is_odd() == bool(y_is_odd) else -beta
        return cls(x, y)

    @classmethod
    def decompact(cls, x_bytes: bytes) -> AffinePoint:
        """Recover the point with the given x whose y is the smaller root."""
        x = FieldElement.from_bytes(x_bytes)
        y = _curve_rhs(x).sqrt().to_int()
        return cls(x, FieldElement(min(y, (MODULUS - y) % MODULUS)))

    @classmethod
    def from_encoded_point(cls, data: bytes) -> AffinePoint:
        """Parse a SEC1 encoding: identity, compressed, uncompressed or compact."""
        data = bytes(data)
        if not data:
            raise ValueError("empty point encoding")
        try:
            tag = Sec1Tag(data[0])
        except ValueError:
            raise ValueError(f"invalid SEC1 tag 0x{data[0]:02x}") from None
        if len(data) != _EXPECTED_LENGTH[tag]:
            raise ValueError(
                f"invalid length {len(data)} for SEC1 tag 0x{int(tag):02x}"
            )
        body = data[1:]
        if tag is Sec1Tag.IDENTITY:
            return cls.IDENTITY
        if tag is Sec1Tag.COMPACT:
            return cls.decompact(body)
        if tag in (Sec1Tag.COMPRESSED_EVEN_Y, Sec1Tag.COMPRESSED_ODD_Y):
            return cls.decompress(body, tag is Sec1Tag.COMPRESSED_ODD_Y)
        x = FieldElement.from_bytes(body[:FIELD_BYTES])
        y = FieldElement.from_bytes(body[FIELD_BYTES:])
        if y.square() != _curve_rhs(x):
            raise ValueError("point is not on the curve")
        return cls(x, y)

    def to_encoded_point(self, compress: bool) -> bytes:
        """Return the SEC1 encoding; the identity encodes as a single zero byte."""
        if self.infinity:
            return bytes([Sec1Tag.IDENTITY])
        if compress:
            tag = Sec1Tag.COMPRESSED_ODD_Y if self.y.is_odd() else Sec1Tag.COMPRESSED_EVEN_Y
            return bytes([tag]) + self.x.to_bytes()
        return bytes([Sec1Tag.UNCOMPRESSED]) + self.x.to_bytes() + self.y.to_bytes()

    def to_compact_encoded_point(self) -> bytes:
        """Return the compact encoding; only possible when y is the smaller root."""
        y = self.y.to_int()
        if MODULUS - y < y:
            raise ValueError("point has no compact encoding")
        return bytes([Sec1Tag.COMPACT]) + self.x.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> AffinePoint:
        """Parse a fixed-width 33-byte encoding; all zero bytes mean the identity."""
        data = bytes(data)
        if len(data) != COMPRESSED_POINT_BYTES:
            raise ValueError(
                f"expected {COMPRESSED_POINT_BYTES} bytes, got {len(data)}"
            )
        if not any(data):
            return cls.IDENTITY
        return cls.from_encoded_point(data)

    def to_bytes(self) -> bytes:
        """Return the compressed encoding padded with zeros to 33 bytes."""
        return self.to_encoded_point(True).ljust(COMPRESSED_POINT_BYTES, b"\x00")


AffinePoint.IDENTITY = AffinePoint(FieldElement.ZERO, FieldElement.ZERO, True)
AffinePoint.GENERATOR = AffinePoint(
    FieldElement(0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296),
    FieldElement(0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5),
)