from __future__ import annotations

import struct
from typing import Union

from .constants import (
    BEGIN_DELIMITER,
    BYTES_PER_GROUP,
    CHARS_PER_GROUP,
    DIGIT_BASE,
    END_DELIMITER,
    FIRST_DIGIT,
    POW85,
    ZERO_GROUP,
)

BytesLike = Union[bytes, bytearray, memoryview]

_WORD = struct.Struct(">L")


def encode(data: BytesLike, include_delimiters: bool = True) -> str:
    """Encode `data` as Adobe ASCII85 text.

    Each 4-byte big-endian word becomes 5 digits, or a single ``z`` when the
    word is zero. A trailing 1-3 byte group is zero-padded, encoded, and cut
    back to n+1 characters; it is never written as ``z``.
    """
    if isinstance(data, str):
        raise TypeError("encode() expects bytes-like data, not str")
    data = bytes(data)
    n = len(data)
    pad = -n % BYTES_PER_GROUP
    if pad:
        data += b"\x00" * pad
    words = len(data) // BYTES_PER_GROUP

    # Sized to the worst case (no zero groups) and trimmed afterwards
    out = bytearray(words * CHARS_PER_GROUP)
    w = 0
    for i, (value,) in enumerate(_WORD.iter_unpack(data)):
        # The padded final word must keep all its digits so trimming stays exact
        if value == 0 and not (pad and i == words - 1):
            out[w] = ZERO_GROUP
            w += 1
            continue
        for p in POW85:
            out[w] = (value // p) % DIGIT_BASE + FIRST_DIGIT
            w += 1
    w -= pad
    del out[w:]
    assert not (pad and out and out[-1] == ZERO_GROUP), "short group encoded as zero shorthand"

    text = out.decode("ascii")
    if include_delimiters:
        return BEGIN_DELIMITER + text + END_DELIMITER
    return text
