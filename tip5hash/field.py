"""Arithmetic in the prime field of order 2^64 - 2^32 + 1, in Montgomery form."""

from __future__ import annotations

from typing import ClassVar

_MASK64 = (1 << 64) - 1
_EPSILON = 0xFFFF_FFFF  # 2^64 mod P


def montyred(x: int) -> int:
    """Montgomery-reduce a 128-bit integer to a 64-bit one."""
    if not 0 <= x < 1 << 128:
        raise ValueError(f"montgomery reduction input out of range: {x}")
    xl = x & _MASK64
    xh = x >> 64
    total = xl + ((xl << 32) & _MASK64)
    a = total & _MASK64
    overflow = total >> 64
    b = (a - (a >> 32) - overflow) & _MASK64
    r = xh - b
    borrow = r < 0
    r &= _MASK64
    if borrow:
        r = (r - _EPSILON) & _MASK64
    return r


class BFieldElement:
    """Element of the field of order 2^64 - 2^32 + 1.

    The constructor takes the raw Montgomery representation; use
    :meth:`new` to build an element from its canonical value.
    """

    __slots__ = ("_raw",)

    BYTES: ClassVar[int] = 8
    P: ClassVar[int] = 0xFFFF_FFFF_0000_0001
    MAX: ClassVar[int] = P - 1
    _R2: ClassVar[int] = 0xFFFF_FFFE_0000_0001

    def __init__(self, raw: int = 0) -> None:
        if not 0 <= raw <= _MASK64:
            raise ValueError(f"raw representation out of 64-bit range: {raw}")
        self._raw = raw

    @classmethod
    def new(cls, value: int) -> BFieldElement:
        """Build the element whose canonical value is ``value`` mod P."""
        if not 0 <= value <= _MASK64:
            raise ValueError(f"value out of 64-bit range: {value}")
        return cls(montyred(value * cls._R2))

    @classmethod
    def zero(cls) -> BFieldElement:
        return cls.new(0)

    @classmethod
    def one(cls) -> BFieldElement:
        return cls.new(1)

    @classmethod
    def from_raw_u64(cls, raw: int) -> BFieldElement:
        """Wrap a raw Montgomery representation."""
        return cls(raw)

    @classmethod
    def from_raw_bytes(cls, data: bytes) -> BFieldElement:
        """Interpret 8 little-endian bytes as a raw Montgomery representation."""
        if len(data) != cls.BYTES:
            raise ValueError(f"expected {cls.BYTES} bytes, got {len(data)}")
        return cls(int.from_bytes(data, "little"))

    def value(self) -> int:
        """Canonical integer value in [0, P)."""
        return montyred(self._raw)

    def raw_u64(self) -> int:
        return self._raw

    def raw_bytes(self) -> bytes:
        """Little-endian bytes of the raw Montgomery representation."""
        return self._raw.to_bytes(self.BYTES, "little")

    def is_zero(self) -> bool:
        return self == _ZERO

    def is_one(self) -> bool:
        return self == _ONE

    def _square_n(self, times: int) -> BFieldElement:
        raw = self._raw
        for _ in range(times):
            raw = montyred(raw * raw)
        return BFieldElement(raw)

    def inverse(self) -> BFieldElement:
        """Multiplicative inverse; raises ZeroDivisionError for zero."""
        if self == _ZERO:
            raise ZeroDivisionError(
                "Attempted to find the multiplicative inverse of zero."
            )
        x = self
        bin_2_ones = x * x * x
        bin_3_ones = bin_2_ones * bin_2_ones * x
        bin_6_ones = bin_3_ones._square_n(3) * bin_3_ones
        bin_12_ones = bin_6_ones._square_n(6) * bin_6_ones
        bin_24_ones = bin_12_ones._square_n(12) * bin_12_ones
        bin_30_ones = bin_24_ones._square_n(6) * bin_6_ones
        bin_31_ones = bin_30_ones * bin_30_ones * x
        bin_31_ones_1_zero = bin_31_ones * bin_31_ones
        bin_32_ones = bin_31_ones * bin_31_ones * x
        return bin_31_ones_1_zero._square_n(32) * bin_32_ones

    def __add__(self, other: BFieldElement) -> BFieldElement:
        if not isinstance(other, BFieldElement):
            return NotImplemented
        x1 = self._raw - ((self.P - other._raw) & _MASK64)
        if x1 < 0:
            return BFieldElement((x1 + self.P) & _MASK64)
        return BFieldElement(x1)

    def __sub__(self, other: BFieldElement) -> BFieldElement:
        if not isinstance(other, BFieldElement):
            return NotImplemented
        x1 = self._raw - other._raw
        if x1 < 0:
            return BFieldElement((x1 - _EPSILON) & _MASK64)
        return BFieldElement(x1)

    def __mul__(self, other: BFieldElement) -> BFieldElement:
        if not isinstance(other, BFieldElement):
            return NotImplemented
        return BFieldElement(montyred(self._raw * other._raw))

    def __truediv__(self, other: BFieldElement) -> BFieldElement:
        if not isinstance(other, BFieldElement):
            return NotImplemented
        return other.inverse() * self

    def __neg__(self) -> BFieldElement:
        return _ZERO - self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BFieldElement):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return f"BFieldElement({self.value()})"


_ZERO = BFieldElement.new(0)
_ONE = BFieldElement.new(1)