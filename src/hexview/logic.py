# hexview/logic.py

from __future__ import annotations

import re
from typing import Iterable, List, Tuple

from .errors import (
    ConversionError,
    EmptyInputError,
    InvalidBinaryCharacterError,
    InvalidCharacterError,
    InvalidRegisterError,
)

MAX_BYTES = 8
PRINTABLE_MIN = 32
PRINTABLE_MAX = 126
REGISTER_MAX = 0xFFFF

# Single-char digit match so "10x5" reads as 1, prefix, 5.
_HEX_TOKEN = re.compile(
    r"0[xX]|[xX]|[\s,:\-]+|(?P<digit>[0-9A-Fa-f])|(?P<bad>.)", re.DOTALL
)
_BIN_TOKEN = re.compile(r"[\s,:\-_]+|(?P<bits>[01]+)|(?P<bad>.)", re.DOTALL)
_REGISTER_SEP = re.compile(r"[\s,;:]+")
_DECIMAL = re.compile(r"[0-9]+")


# ---------------- Text → bytes ----------------
def parse_hex(text: str) -> bytes:
    """Parse loosely formatted hex text into bytes.

    Accepts:
      - "0x48656c6c6f" (single prefix)
      - "48 65 6c 6c 6f" / "48,65,6c" / "48:65:6C" / "48-65-6c" (separators)
      - "0xAB 0xFF", "xAB XCF" (per-token prefixes)
      - "123" (odd digit count, left-padded to "0123")

    Raises ``EmptyInputError`` when nothing but prefixes/separators remain and
    ``InvalidCharacterError`` for anything outside the hex alphabet; the
    reported position indexes the original ``text``.
    """
    if not text:
        raise EmptyInputError("hex input")

    digits: list[str] = []
    for m in _HEX_TOKEN.finditer(text):
        if m.group("digit"):
            digits.append(m.group("digit"))
        elif m.group("bad") is not None:
            raise InvalidCharacterError(m.group("bad"), m.start())

    if not digits:
        raise EmptyInputError("hex input")

    s = "".join(digits)
    if len(s) % 2:
        s = "0" + s
    return bytes.fromhex(s)

def parse_binary(text: str) -> bytes:
    """Parse bit text like "0000 1010" or "1_0101" into bytes.

    The bit string is left-padded with zeros to a whole number of bytes.
    """
    if not text:
        raise EmptyInputError("binary input")

    chunks: list[str] = []
    for m in _BIN_TOKEN.finditer(text):
        if m.group("bits"):
            chunks.append(m.group("bits"))
        elif m.group("bad") is not None:
            raise InvalidBinaryCharacterError(m.group("bad"), m.start())

    bits = "".join(chunks)
    if not bits:
        raise EmptyInputError("binary input")

    n_bytes = (len(bits) + 7) // 8
    bits = bits.zfill(n_bytes * 8)
    return bytes(int(bits[i:i + 8], 2) for i in range(0, len(bits), 8))

def parse_registers(text: str) -> list[int]:
    """Split register text into 16-bit values.

    Tokens are separated by whitespace, commas, semicolons or colons. A token
    like "d1234" is decimal; anything else is hex as understood by
    ``parse_hex`` ("0x1234", "1234", "12-34").
    """
    tokens = [t for t in _REGISTER_SEP.split(text or "") if t]
    if not tokens:
        raise EmptyInputError("register input")

    registers: list[int] = []
    for tok in tokens:
        if len(tok) > 1 and tok[0] in "dD":
            if not _DECIMAL.fullmatch(tok[1:]):
                raise InvalidRegisterError(tok, "not a decimal number")
            val = int(tok[1:])
        else:
            try:
                val = int.from_bytes(parse_hex(tok), "big")
            except ConversionError as exc:
                raise InvalidRegisterError(tok, str(exc)) from exc
        if val > REGISTER_MAX:
            raise InvalidRegisterError(tok, "exceeds 16-bit range")
        registers.append(val)
    return registers

def parse_int_maybe(text: str) -> int:
    """Parse an integer accepting 0x/0b/0o prefixes or decimal."""
    s = text.strip().replace("_", "")
    if not s:
        raise ValueError("Enter a number (e.g., 1234 or 0x4D2).")
    return int(s, 0)

def int_range_for(width: int, signed: bool) -> Tuple[int, int]:
    """
    Return inclusive (lo, hi) range for a given byte width and signedness.

    Unsigned:        [0, 2^n - 1]
    2's complement:  [-(2^(n-1)), 2^(n-1) - 1]
    """
    if width < 1 or width > MAX_BYTES:
        raise ValueError(f"width must be 1..{MAX_BYTES}")
    if signed:
        lo = -(1 << (8 * width - 1))
        hi = (1 << (8 * width - 1)) - 1
    else:
        lo = 0
        hi = (1 << (8 * width)) - 1
    return lo, hi


# ---------------- Bytes → text ----------------
def bytes_to_hex_text(data: Iterable[int]) -> str:
    return bytes(data).hex()

def bytes_to_binary_text(data: Iterable[int]) -> str:
    return " ".join(f"{b:08b}" for b in data)

def bytes_to_ascii(data: Iterable[int]) -> str:
    """Printable ASCII as-is, everything else as '.'."""
    return "".join(
        chr(b) if PRINTABLE_MIN <= b <= PRINTABLE_MAX else "." for b in data
    )

def registers_to_bytes(registers: List[int]) -> bytes:
    return b"".join(r.to_bytes(2, "big") for r in registers)
