# hexview/service.py

"""Build conversion records from user input.

Input is normalized once; a normalization failure aborts the request. Each
(type x endianness) field is then filled in or left as ``None`` when the
byte count does not match the type's width.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional

from .byteorder import Endianness
from .codec import (
    FLOAT_TYPE_NAMES,
    INT_TYPE_NAMES,
    NUMERIC_TYPES,
    Number,
    NumericType,
)
from .errors import EmptyInputError
from .logic import (
    bytes_to_ascii,
    bytes_to_binary_text,
    bytes_to_hex_text,
    parse_binary,
    parse_hex,
    parse_int_maybe,
    parse_registers,
    registers_to_bytes,
)

log = logging.getLogger(__name__)


@dataclass
class FieldValue:
    value: Number
    text: str
    hex: str


def _field_dict(fv: FieldValue) -> dict:
    # JSON has no NaN or Inf; "text" still carries "NaN", "+Inf" or "-Inf".
    out = asdict(fv)
    if isinstance(fv.value, float) and not math.isfinite(fv.value):
        out["value"] = None
    return out


@dataclass
class ConversionResult:
    bytes_hex: str
    binary: str
    ascii: str
    fields: Dict[str, Optional[FieldValue]] = field(default_factory=dict)

    def present(self) -> Dict[str, FieldValue]:
        return {k: v for k, v in self.fields.items() if v is not None}

    def to_dict(self) -> dict:
        out = asdict(self)
        out["fields"] = {k: _field_dict(v) for k, v in self.present().items()}
        return out


@dataclass
class Register:
    index: int
    hex: str
    unsigned: int
    signed: int
    binary: str


@dataclass
class CombinedValue:
    register_start: int
    hex: str
    values: Dict[str, str] = field(default_factory=dict)


@dataclass
class RegisterResult:
    registers: List[Register]
    combined32: List[CombinedValue]
    combined64: List[CombinedValue]
    raw_hex: str
    ascii: str

    def to_dict(self) -> dict:
        return asdict(self)


# ---------------- helpers ----------------
def _all_fields() -> Dict[str, Optional[FieldValue]]:
    return {
        t.field_name(e): None
        for t in NUMERIC_TYPES.values()
        for e in t.endiannesses
    }

def _lookup_type(type_name: str, allowed: tuple) -> NumericType:
    key = (type_name or "").strip().lower()
    if key not in allowed:
        raise ValueError(f"Unsupported type: {type_name!r} (choose from {', '.join(allowed)})")
    return NUMERIC_TYPES[key]

def _decoded_field(ntype: NumericType, data: bytes, endianness: Endianness) -> FieldValue:
    value = ntype.decode(data, endianness)
    # Hex column shows the value's own bits, i.e. the bytes after reordering to BE.
    return FieldValue(value, ntype.format(value), bytes_to_hex_text(ntype.encode(value)))

def _encoded_field(ntype: NumericType, value: Number, endianness: Endianness) -> FieldValue:
    wire = ntype.encode(value, endianness)
    decoded = ntype.decode(wire, endianness)
    return FieldValue(decoded, ntype.format(decoded), bytes_to_hex_text(wire))

def _result_for_bytes(data: bytes) -> ConversionResult:
    return ConversionResult(
        bytes_hex=bytes_to_hex_text(data),
        binary=bytes_to_binary_text(data),
        ascii=bytes_to_ascii(data),
        fields=_all_fields(),
    )


# ---------------- conversions ----------------
def convert_bytes(data: bytes) -> ConversionResult:
    """Try every type and endianness against ``data``."""
    result = _result_for_bytes(data)
    for ntype in NUMERIC_TYPES.values():
        if ntype.width != len(data):
            log.debug("omitting %s: needs %d bytes, have %d", ntype.name, ntype.width, len(data))
            continue
        for endianness in ntype.endiannesses:
            result.fields[ntype.field_name(endianness)] = _decoded_field(ntype, data, endianness)
    return result

def convert_hex(text: str) -> ConversionResult:
    return convert_bytes(parse_hex(text))

def convert_binary(text: str) -> ConversionResult:
    return convert_bytes(parse_binary(text))

def convert_int(text: str, type_name: str) -> ConversionResult:
    """Encode an integer as ``type_name`` in each of that type's byte orders."""
    ntype = _lookup_type(type_name, INT_TYPE_NAMES)
    value = parse_int_maybe(text)

    result = _result_for_bytes(ntype.encode(value))
    for endianness in ntype.endiannesses:
        result.fields[ntype.field_name(endianness)] = _encoded_field(ntype, value, endianness)
    return result

def convert_float(text: str, type_name: str) -> ConversionResult:
    """Encode a float as ``type_name``; also show its bits as same-width ints."""
    ntype = _lookup_type(type_name, FLOAT_TYPE_NAMES)
    s = (text or "").strip()
    if not s:
        raise EmptyInputError("float input")
    try:
        value = float(s)
    except ValueError:
        raise ValueError(f"Invalid {ntype.name} value: {text!r}") from None

    data = ntype.encode(value)
    result = _result_for_bytes(data)
    for endianness in ntype.endiannesses:
        result.fields[ntype.field_name(endianness)] = _encoded_field(ntype, value, endianness)

    bits = 8 * ntype.width
    for int_type in (NUMERIC_TYPES[f"uint{bits}"], NUMERIC_TYPES[f"int{bits}"]):
        result.fields[int_type.field_name(Endianness.BE)] = _decoded_field(int_type, data, Endianness.BE)
    return result


# ---------------- registers ----------------
_REGISTER_WINDOWS = (
    (2, "combined32", ("uint32", "int32", "float32")),
    (4, "combined64", ("uint64", "int64", "float64")),
)

def _combine(registers: List[int], count: int, type_names: tuple) -> List[CombinedValue]:
    out: List[CombinedValue] = []
    for start in range(len(registers) - count + 1):
        data = registers_to_bytes(registers[start:start + count])
        combined = CombinedValue(register_start=start + 1, hex=bytes_to_hex_text(data))
        for name in type_names:
            ntype = NUMERIC_TYPES[name]
            for endianness in ntype.endiannesses:
                combined.values[ntype.field_name(endianness)] = ntype.format(ntype.decode(data, endianness))
        out.append(combined)
    return out

def convert_registers(text: str) -> RegisterResult:
    """Decode 16-bit register values and every 32/64-bit window over them."""
    registers = parse_registers(text)
    raw = registers_to_bytes(registers)

    int16 = NUMERIC_TYPES["int16"]
    rows = []
    for i, val in enumerate(registers):
        word = raw[2 * i:2 * i + 2]
        rows.append(Register(
            index=i + 1,
            hex=bytes_to_hex_text(word),
            unsigned=val,
            signed=int16.decode(word),
            binary=bytes_to_binary_text(word),
        ))

    windows = {}
    for count, key, type_names in _REGISTER_WINDOWS:
        windows[key] = _combine(registers, count, type_names)
        log.debug("%s: %d window(s) over %d register(s)", key, len(windows[key]), len(registers))

    return RegisterResult(
        registers=rows,
        combined32=windows["combined32"],
        combined64=windows["combined64"],
        raw_hex=" ".join(r.hex for r in rows),
        ascii=bytes_to_ascii(raw),
    )
