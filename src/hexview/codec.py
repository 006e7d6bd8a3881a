# hexview/codec.py

"""Width-parametric numeric codec.

One decode path and one encode path serve every integer and float
representation:

    decode: bytes --transform--> BE bytes --> unsigned bits --> int / float
    encode: int / float --> unsigned bits --> BE bytes --transform--> bytes

Signed integers and floats are reinterpretations of the same bit pattern as
the unsigned value; nothing is arithmetically converted on the wire side.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union

from .byteorder import WIDTHS, Endianness, transform
from .errors import InvalidLengthError
from .logic import int_range_for

Number = Union[int, float]

FLOAT_WIDTHS = (4, 8)

_F32_SIGN = 0x80000000
_F32_EXP = 0x7F800000
_F32_MANT = 0x007FFFFF
_F32_QUIET = 0x00400000
_F64_EXP = 0x7FF0000000000000
_MANT_SHIFT = 52 - 23


class NumericKind(str, Enum):
    SIGNED = "signed"
    UNSIGNED = "unsigned"
    FLOAT = "float"

    def __str__(self) -> str:
        return self.value


def _check_width(width: int, kind: NumericKind) -> None:
    allowed = FLOAT_WIDTHS if kind is NumericKind.FLOAT else WIDTHS
    if width not in allowed:
        raise ValueError(f"{kind} width must be one of {allowed}, got {width}")


# ---------------- Bit patterns ----------------
def _int_to_bits(value: int, width: int, signed: bool) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Expected an integer, got {value!r}")
    lo, hi = int_range_for(width, signed)
    if not lo <= value <= hi:
        kind = "signed" if signed else "unsigned"
        raise ValueError(f"Value out of range for {width}-byte {kind}")
    return value & ((1 << (8 * width)) - 1)

def _bits_to_int(bits: int, width: int, signed: bool) -> int:
    if signed and bits & (1 << (8 * width - 1)):
        return bits - (1 << (8 * width))
    return bits

def _float_to_bits(value: float, width: int) -> int:
    value = float(value)
    double_bits = struct.unpack(">Q", struct.pack(">d", value))[0]
    if width == 8:
        return double_bits

    if math.isnan(value):
        # Narrow by hand: packing through "f" may quiet a signalling NaN.
        payload = (double_bits >> _MANT_SHIFT) & _F32_MANT or _F32_QUIET
        return (double_bits >> 32) & _F32_SIGN | _F32_EXP | payload
    try:
        packed = struct.pack(">f", value)
    except OverflowError:
        packed = struct.pack(">f", math.copysign(math.inf, value))
    return struct.unpack(">I", packed)[0]

def _bits_to_float(bits: int, width: int) -> float:
    if width == 8:
        return struct.unpack(">d", bits.to_bytes(8, "big"))[0]

    if bits & _F32_EXP == _F32_EXP and bits & _F32_MANT:
        # Widen NaNs by hand so the payload survives unchanged.
        double_bits = (bits & _F32_SIGN) << 32 | _F64_EXP | (bits & _F32_MANT) << _MANT_SHIFT
        return struct.unpack(">d", double_bits.to_bytes(8, "big"))[0]
    return struct.unpack(">f", bits.to_bytes(4, "big"))[0]

def _value_to_bits(value: Number, width: int, kind: NumericKind) -> int:
    if kind is NumericKind.FLOAT:
        return _float_to_bits(value, width)
    return _int_to_bits(value, width, kind is NumericKind.SIGNED)

def _bits_to_value(bits: int, width: int, kind: NumericKind) -> Number:
    if kind is NumericKind.FLOAT:
        return _bits_to_float(bits, width)
    return _bits_to_int(bits, width, kind is NumericKind.SIGNED)


# ---------------- Codec ----------------
def decode(
    data: bytes,
    width: int,
    kind: NumericKind | str,
    endianness: Endianness | str = Endianness.BE,
) -> Number:
    """Decode exactly ``width`` bytes laid out in ``endianness``.

    Raises ``InvalidLengthError`` if ``len(data) != width``; there is no
    implicit padding or truncation here.
    """
    kind = NumericKind(kind)
    _check_width(width, kind)
    data = bytes(data)
    if len(data) != width:
        raise InvalidLengthError(width, len(data))
    bits = int.from_bytes(transform(data, endianness), "big")
    return _bits_to_value(bits, width, kind)

def encode(
    value: Number,
    width: int,
    kind: NumericKind | str,
    endianness: Endianness | str = Endianness.BE,
) -> bytes:
    """Encode ``value`` as ``width`` bytes laid out in ``endianness``.

    Integers outside the range of the width raise ``ValueError``. Floats too
    large for binary32 become infinities, like a narrowing cast.
    """
    kind = NumericKind(kind)
    _check_width(width, kind)
    bits = _value_to_bits(value, width, kind)
    return transform(bits.to_bytes(width, "big"), endianness)

def decode_integer(data: bytes, width: int, signed: bool,
                   endianness: Endianness | str = Endianness.BE) -> int:
    kind = NumericKind.SIGNED if signed else NumericKind.UNSIGNED
    return decode(data, width, kind, endianness)

def decode_float(data: bytes, width: int,
                 endianness: Endianness | str = Endianness.BE) -> float:
    return decode(data, width, NumericKind.FLOAT, endianness)

def encode_integer(value: int, width: int, signed: bool,
                   endianness: Endianness | str = Endianness.BE) -> bytes:
    kind = NumericKind.SIGNED if signed else NumericKind.UNSIGNED
    return encode(value, width, kind, endianness)

def encode_float(value: float, width: int,
                 endianness: Endianness | str = Endianness.BE) -> bytes:
    return encode(value, width, NumericKind.FLOAT, endianness)


# ---------------- Display ----------------
def format_float(value: float, width: int = 8) -> str:
    """Render a decoded float: "NaN", "+Inf", "-Inf" or the shortest
    %g-style decimal that parses back to the same binary32/binary64 bits."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    target = _float_to_bits(value, width)
    for precision in range(1, 18):
        text = f"{value:.{precision}g}"
        if _float_to_bits(float(text), width) == target:
            return text
    return repr(value)

def format_value(value: Number, kind: NumericKind | str, width: int) -> str:
    if NumericKind(kind) is NumericKind.FLOAT:
        return format_float(value, width)
    return str(value)


# ---------------- Type table ----------------
@dataclass(frozen=True)
class NumericType:
    """A named (kind, width) pair, e.g. ``int32`` or ``float64``."""

    name: str
    width: int
    kind: NumericKind
    endiannesses: Tuple[Endianness, ...]

    def decode(self, data: bytes, endianness: Endianness | str = Endianness.BE) -> Number:
        return decode(data, self.width, self.kind, endianness)

    def encode(self, value: Number, endianness: Endianness | str = Endianness.BE) -> bytes:
        return encode(value, self.width, self.kind, endianness)

    def format(self, value: Number) -> str:
        return format_value(value, self.kind, self.width)

    def field_name(self, endianness: Endianness | str) -> str:
        return f"{self.name}{Endianness(endianness).value}"


def _build_numeric_types() -> Dict[str, NumericType]:
    table: Dict[str, NumericType] = {}
    for kind, prefix in ((NumericKind.SIGNED, "int"), (NumericKind.UNSIGNED, "uint")):
        for width in WIDTHS:
            # A single byte has no order to choose.
            orders = (Endianness.BE,) if width == 1 else tuple(Endianness)
            name = f"{prefix}{8 * width}"
            table[name] = NumericType(name, width, kind, orders)
    for width in FLOAT_WIDTHS:
        name = f"float{8 * width}"
        table[name] = NumericType(name, width, NumericKind.FLOAT, tuple(Endianness))
    return table


NUMERIC_TYPES: Dict[str, NumericType] = _build_numeric_types()
INT_TYPE_NAMES = tuple(n for n, t in NUMERIC_TYPES.items() if t.kind is not NumericKind.FLOAT)
FLOAT_TYPE_NAMES = tuple(n for n, t in NUMERIC_TYPES.items() if t.kind is NumericKind.FLOAT)
