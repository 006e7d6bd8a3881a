# hexview/byteorder.py

"""Byte-order permutations for 1/2/4/8-byte values.

Every ordering is expressed as a fixed permutation of the big-endian bytes,
so the codec only ever has to read and write big-endian. Two primitives cover
all four orderings: full reversal, and swapping adjacent blocks of a given
size (1 = swap bytes inside each 16-bit word, 2 = swap 16-bit words inside
each 32-bit half, 4 = swap the 32-bit halves).

For a value with BE bytes A B C D E F G H:

    width 4   BE ABCD    LE DCBA        BADC BADC        CDAB CDAB
    width 8   BE ABCDEFGH  LE HGFEDCBA  BADC EFGHABCD    CDAB CDABGHEF

All four permutations are their own inverse.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple, Union

WIDTHS = (1, 2, 4, 8)


class Endianness(str, Enum):
    BE = "BE"
    LE = "LE"
    BADC = "BADC"
    CDAB = "CDAB"

    def __str__(self) -> str:
        return self.value


_REVERSE = "reverse"

# (endianness, width) -> None (identity), _REVERSE, or a block size to swap.
_PERMUTATIONS: Dict[Tuple[Endianness, int], Optional[Union[int, str]]] = {}
for _w in WIDTHS:
    _PERMUTATIONS[(Endianness.BE, _w)] = None
    _PERMUTATIONS[(Endianness.LE, _w)] = _REVERSE if _w > 1 else None
_PERMUTATIONS.update({
    (Endianness.BADC, 1): None,
    (Endianness.BADC, 2): None,
    (Endianness.BADC, 4): 1,
    (Endianness.BADC, 8): 4,
    (Endianness.CDAB, 1): None,
    (Endianness.CDAB, 2): 1,
    (Endianness.CDAB, 4): 2,
    (Endianness.CDAB, 8): 2,
})


def swap_blocks(data: bytes, size: int) -> bytes:
    """Exchange each pair of adjacent ``size``-byte blocks.

    ``swap_blocks(b"ABCDEFGH", 2) == b"CDABGHEF"``
    """
    if size < 1 or len(data) % (2 * size):
        raise ValueError(f"cannot swap {size}-byte blocks in {len(data)} bytes")
    out = bytearray()
    for i in range(0, len(data), 2 * size):
        out += data[i + size:i + 2 * size]
        out += data[i:i + size]
    return bytes(out)

def transform(data: bytes, endianness: Endianness | str) -> bytes:
    """Permute ``data`` between BE order and ``endianness``.

    Applying the same transform twice returns the input, so this one function
    serves both directions.
    """
    endianness = Endianness(endianness)
    data = bytes(data)
    if len(data) not in WIDTHS:
        raise ValueError(f"byte-order transform needs 1, 2, 4 or 8 bytes, got {len(data)}")

    step = _PERMUTATIONS[(endianness, len(data))]
    if step is None:
        return data
    if step == _REVERSE:
        return data[::-1]
    return swap_blocks(data, step)
