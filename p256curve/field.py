"""Arithmetic in the NIST P-256 base field, integers modulo p = 2^256 - 2^224 + 2^192 + 2^96 - 1."""

from __future__ import annotations

from typing import ClassVar

MODULUS = 0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF
"""The field prime p."""

FIELD_BYTES = 32
"""Length of the big-endian SEC1 encoding of a field element."""

_SQRT_EXPONENT = (MODULUS + 1) // 4
_INVERT_EXPONENT = MODULUS - 2


class FieldElement:
    """An immutable element of the P-256 base field."""

    __slots__ = ("_value",)

    ZERO: ClassVar[FieldElement]
    ONE: ClassVar[FieldElement]

    def __init__(self, value: int = 0) -> None:
        if not 0 <= value < MODULUS:
            raise ValueError("field element out of range [0, p)")
        self._value = value

    @classmethod
    def from_bytes(cls, data: bytes) -> FieldElement:
        """Parse a 32-byte big-endian integer; it must lie in [0, p)."""
        data = bytes(data)
        if len(data) != FIELD_BYTES:
            raise ValueError(f"expected {FIELD_BYTES} bytes, got {len(data)}")
        value = int.from_bytes(data, "big")
        if value >= MODULUS:
            raise ValueError("encoded integer is not less than the field modulus")
        return cls(value)

    @classmethod
    def from_int(cls, value: int) -> FieldElement:
        """Return ``value`` reduced modulo p."""
        return cls(value % MODULUS)

    def to_bytes(self) -> bytes:
        """Return the 32-byte big-endian SEC1 encoding."""
        return self._value.to_bytes(FIELD_BYTES, "big")

    def to_int(self) -> int:
        """Return the canonical integer in [0, p)."""
        return self._value

    def is_zero(self) -> bool:
        return self._value == 0

    def is_odd(self) -> bool:
        """True when the canonical integer is odd (the SEC1 sense)."""
        return bool(self._value & 1)

    def double(self) -> FieldElement:
        return self + self

    def square(self) -> FieldElement:
        return self * self

    def pow_vartime(self, exponent: int) -> FieldElement:
        """Return ``self ** exponent``; variable time in the exponent."""
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        return FieldElement(pow(self._value, exponent, MODULUS))

    def invert(self) -> FieldElement:
        """Return the multiplicative inverse; zero has none."""
        if self.is_zero():
            raise ZeroDivisionError("zero has no multiplicative inverse")
        return self.pow_vartime(_INVERT_EXPONENT)

    def sqrt(self) -> FieldElement:
        """Return a square root, ``self ** ((p + 1) / 4)``, if one exists."""
        root = self.pow_vartime(_SQRT_EXPONENT)
        if root.square() != self:
            raise ValueError("element is not a quadratic residue")
        return root

    def __add__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement((self._value + other._value) % MODULUS)

    def __sub__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement((self._value - other._value) % MODULUS)

    def __mul__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement(self._value * other._value % MODULUS)

    def __neg__(self) -> FieldElement:
        return FieldElement(-self._value % MODULUS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((FieldElement, self._value))

    def __bool__(self) -> bool:
        return self._value != 0

    def __repr__(self) -> str:
        return f"FieldElement(0x{self._value:064x})"


FieldElement.ZERO = FieldElement(0)
FieldElement.ONE = FieldElement(1)