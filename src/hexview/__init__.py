# hexview/__init__.py

"""Hexview package.

Re-exports the codec and normalizer for convenient imports in tests or other code.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
)

from .byteorder import Endianness, transform
from .codec import (
    NUMERIC_TYPES,
    NumericKind,
    NumericType,
    decode,
    decode_float,
    decode_integer,
    encode,
    encode_float,
    encode_integer,
    format_float,
)
from .errors import (
    ConversionError,
    EmptyInputError,
    InvalidBinaryCharacterError,
    InvalidCharacterError,
    InvalidLengthError,
    InvalidRegisterError,
)
from .logic import (
    MAX_BYTES,
    bytes_to_ascii,
    bytes_to_binary_text,
    bytes_to_hex_text,
    int_range_for,
    parse_binary,
    parse_hex,
    parse_int_maybe,
    parse_registers,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE", "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR",
    # Normalizer
    "MAX_BYTES", "parse_hex", "parse_binary", "parse_registers", "parse_int_maybe",
    "int_range_for", "bytes_to_hex_text", "bytes_to_binary_text", "bytes_to_ascii",
    # Byte order / codec
    "Endianness", "transform",
    "NumericKind", "NumericType", "NUMERIC_TYPES",
    "decode", "encode", "decode_integer", "decode_float",
    "encode_integer", "encode_float", "format_float",
    # Errors
    "ConversionError", "EmptyInputError", "InvalidCharacterError",
    "InvalidBinaryCharacterError", "InvalidLengthError", "InvalidRegisterError",
]
