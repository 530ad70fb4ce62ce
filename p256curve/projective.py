"""Points on the NIST P-256 curve in homogeneous projective coordinates."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from .affine import CURVE_EQUATION_B, AffinePoint
from .field import FieldElement

ORDER = 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551
"""Order n of the P-256 group; scalars are reduced modulo n."""

SCALAR_BITS = 256

_B = CURVE_EQUATION_B


@dataclass(frozen=True, eq=False)
class ProjectivePoint:
    """A P-256 point (X : Y : Z) with affine coordinates (X/Z, Y/Z).

    The group law uses the complete formulas of Renes, Costello and Batina
    (2015), so no input needs special handling.
    """

    x: FieldElement
    y: FieldElement
    z: FieldElement

    IDENTITY: ClassVar[ProjectivePoint]
    GENERATOR: ClassVar[ProjectivePoint]

    @classmethod
    def identity(cls) -> ProjectivePoint:
        """Return the point at infinity."""
        return cls.IDENTITY

    @classmethod
    def generator(cls) -> ProjectivePoint:
        """Return the base point of P-256."""
        return cls.GENERATOR

    @classmethod
    def from_affine(cls, point: AffinePoint) -> ProjectivePoint:
        """Lift an affine point; the affine identity maps to the identity."""
        if point.is_identity():
            return cls.IDENTITY
        return cls(point.x, point.y, FieldElement.ONE)

    def to_affine(self) -> AffinePoint:
        """Return the affine form; the identity when Z is zero."""
        if self.z.is_zero():
            return AffinePoint.IDENTITY
        z_inv = self.z.invert()
        return AffinePoint(self.x * z_inv, self.y * z_inv)

    def is_identity(self) -> bool:
        return self.z.is_zero()

    def double(self) -> ProjectivePoint:
        """Return 2 * self using the exception-free doubling formula."""
        xx = self.x.square()
        yy = self.y.square()
        zz = self.z.square()
        xy2 = (self.x * self.y).double()
        xz2 = (self.x * self.z).double()

        bzz_part = _B * zz - xz2
        bzz3_part = bzz_part.double() + bzz_part
        yy_m_bzz3 = yy - bzz3_part
        yy_p_bzz3 = yy + bzz3_part
        y_frag = yy_p_bzz3 * yy_m_bzz3
        x_frag = yy_m_bzz3 * xy2

        zz3 = zz.double() + zz
        bxz2_part = _B * xz2 - (zz3 + xx)
        bxz6_part = bxz2_part.double() + bxz2_part
        xx3_m_zz3 = xx.double() + xx - zz3

        y = y_frag + xx3_m_zz3 * bxz6_part
        yz2 = (self.y * self.z).double()
        x = x_frag - bxz6_part * yz2
        z = (yz2 * yy).double().double()
        return ProjectivePoint(x, y, z)

    def _add(self, other: ProjectivePoint) -> ProjectivePoint:
        xx = self.x * other.x
        yy = self.y * other.y
        zz = self.z * other.z
        xy_pairs = (self.x + self.y) * (other.x + other.y) - (xx + yy)
        yz_pairs = (self.y + self.z) * (other.y + other.z) - (yy + zz)
        xz_pairs = (self.x + self.z) * (other.x + other.z) - (xx + zz)

        bzz_part = xz_pairs - _B * zz
        bzz3_part = bzz_part.double() + bzz_part
        yy_m_bzz3 = yy - bzz3_part
        yy_p_bzz3 = yy + bzz3_part

        zz3 = zz.double() + zz
        bxz_part = _B * xz_pairs - (zz3 + xx)
        bxz3_part = bxz_part.double() + bxz_part
        xx3_m_zz3 = xx.double() + xx - zz3

        return ProjectivePoint(
            yy_p_bzz3 * xy_pairs - yz_pairs * bxz3_part,
            yy_p_bzz3 * yy_m_bzz3 + xx3_m_zz3 * bxz3_part,
            yy_m_bzz3 * yz_pairs + xy_pairs * xx3_m_zz3,
        )

    def _add_mixed(self, other: AffinePoint) -> ProjectivePoint:
        if other.is_identity():
            return self
        xx = self.x * other.x
        yy = self.y * other.y
        xy_pairs = (self.x + self.y) * (other.x + other.y) - (xx + yy)
        yz_pairs = other.y * self.z + self.y
        xz_pairs = other.x * self.z + self.x

        bz_part = xz_pairs - _B * self.z
        bz3_part = bz_part.double() + bz_part
        yy_m_bzz3 = yy - bz3_part
        yy_p_bzz3 = yy + bz3_part

        z3 = self.z.double() + self.z
        bxz_part = _B * xz_pairs - (z3 + xx)
        bxz3_part = bxz_part.double() + bxz_part
        xx3_m_zz3 = xx.double() + xx - z3

        return ProjectivePoint(
            yy_p_bzz3 * xy_pairs - yz_pairs * bxz3_part,
            yy_p_bzz3 * yy_m_bzz3 + xx3_m_zz3 * bxz3_part,
            yy_m_bzz3 * yz_pairs + xy_pairs * xx3_m_zz3,
        )

    def __add__(self, other: object) -> ProjectivePoint:
        if isinstance(other, ProjectivePoint):
            return self._add(other)
        if isinstance(other, AffinePoint):
            return self._add_mixed(other)
        return NotImplemented

    def __sub__(self, other: object) -> ProjectivePoint:
        if isinstance(other, ProjectivePoint):
            return self._add(-other)
        if isinstance(other, AffinePoint):
            return self._add_mixed(-other)
        return NotImplemented

    def __neg__(self) -> ProjectivePoint:
        return ProjectivePoint(self.x, -self.y, self.z)

    def __mul__(self, scalar: object) -> ProjectivePoint:
        """Return [k] self, with k reduced modulo the group order."""
        if not isinstance(scalar, int) or isinstance(scalar, bool):
            return NotImplemented
        k = scalar % ORDER
        result = ProjectivePoint.IDENTITY
        for bit in format(k, f"0{SCALAR_BITS}b"):
            result = result.double()
            if bit == "1":
                result = result + self
        return result

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProjectivePoint):
            return NotImplemented
        return self.to_affine() == other.to_affine()

    def __hash__(self) -> int:
        return hash(self.to_affine())

    @classmethod
    def from_bytes(cls, data: bytes) -> ProjectivePoint:
        """Parse a fixed-width 33-byte encoding; all zero bytes mean the identity."""
        return cls.from_affine(AffinePoint.from_bytes(data))

    def to_bytes(self) -> bytes:
        """Return the compressed encoding padded with zeros to 33 bytes."""
        return self.to_affine().to_bytes()

    @classmethod
    def from_encoded_point(cls, data: bytes) -> ProjectivePoint:
        """Parse any SEC1 point encoding."""
        return cls.from_affine(AffinePoint.from_encoded_point(data))

    def to_encoded_point(self, compress: bool) -> bytes:
        """Return the SEC1 encoding of the affine form."""
        return self.to_affine().to_encoded_point(compress)


ProjectivePoint.IDENTITY = ProjectivePoint(
    FieldElement.ZERO, FieldElement.ONE, FieldElement.ZERO
)
ProjectivePoint.GENERATOR = ProjectivePoint(
    AffinePoint.GENERATOR.x, AffinePoint.GENERATOR.y, FieldElement.ONE
)


def sum_points(points: Iterable[ProjectivePoint]) -> ProjectivePoint:
    """Return the sum of the points; the identity for an empty iterable."""
    total = ProjectivePoint.IDENTITY
    for point in points:
        total = total + point
    return total