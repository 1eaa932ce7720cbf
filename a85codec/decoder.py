from __future__ import annotations

from typing import Union

from .constants import (
    BEGIN_DELIMITER,
    BYTES_PER_GROUP,
    CHARS_PER_GROUP,
    END_DELIMITER,
    FIRST_DIGIT,
    LAST_DIGIT,
    LAST_PRINTABLE,
    MAX_GROUP_VALUE,
    POW85,
    WHITESPACE,
    ZERO_GROUP_CHAR,
)
from .errors import DecodeError, EmbeddedZeroShorthand, GroupOverflow, InvalidCharacter
from .logutil import get_logger

log = get_logger(__name__)

TextLike = Union[str, bytes, bytearray, memoryview]

_DROP_TEXT = str.maketrans("", "", WHITESPACE)
_DROP_BYTES = WHITESPACE.encode("ascii")

# Pads a short final group; the maximum digit keeps the high-order bits intact
_PAD_CHAR = chr(LAST_DIGIT)


def _normalize(text: TextLike) -> str:
    if isinstance(text, str):
        return text.translate(_DROP_TEXT)
    # One character per byte
    return bytes(text).translate(None, _DROP_BYTES).decode("latin-1")


def _strip_delimiters(text: TextLike) -> TextLike:
    if isinstance(text, str):
        begin, end = BEGIN_DELIMITER, END_DELIMITER
    else:
        text = bytes(text)
        begin, end = BEGIN_DELIMITER.encode("ascii"), END_DELIMITER.encode("ascii")
    if len(text) >= len(begin) + len(end) and text.startswith(begin) and text.endswith(end):
        return text[len(begin):len(text) - len(end)]
    return text


def _fail(cls, message: str, offset: int, group: str) -> DecodeError:
    log.debug("ascii85 decode rejected (%s) at offset %d: %r", cls.kind, offset, group)
    return cls(message, offset=offset, group=group)


def _decode_group(group: str, offset: int) -> int:
    """Return the 32-bit value of a group of 1-5 characters, padding with `u`."""
    padded = group + _PAD_CHAR * (CHARS_PER_GROUP - len(group))
    value = 0
    above_alphabet = None
    for j, ch in enumerate(padded):
        if ch == ZERO_GROUP_CHAR:
            raise _fail(
                EmbeddedZeroShorthand,
                f"zero-group shorthand 'z' inside a group at offset {offset + j}",
                offset + j,
                group,
            )
        code = ord(ch)
        if code < FIRST_DIGIT or code > LAST_PRINTABLE:
            raise _fail(
                InvalidCharacter,
                f"character {ch!r} outside the ASCII85 alphabet at offset {offset + j}",
                offset + j,
                group,
            )
        if code > LAST_DIGIT and above_alphabet is None:
            above_alphabet = j
        value += (code - FIRST_DIGIT) * POW85[j]
    if value > MAX_GROUP_VALUE:
        raise _fail(
            GroupOverflow,
            f"group {group!r} at offset {offset} exceeds 2**32 - 1",
            offset,
            group,
        )
    if above_alphabet is not None:
        ch = padded[above_alphabet]
        raise _fail(
            InvalidCharacter,
            f"character {ch!r} outside the ASCII85 alphabet at offset {offset + above_alphabet}",
            offset + above_alphabet,
            group,
        )
    return value


def decode(text: TextLike) -> bytes:
    """Decode Adobe ASCII85 text back into bytes.

    A matching ``<~`` ... ``~>`` pair is stripped and all whitespace is
    ignored. ``z`` at a group boundary expands to four zero bytes. A short
    final group of m characters is padded with ``u`` and yields m-1 bytes.

    Raises a `DecodeError` subclass on malformed input; nothing is returned
    for a partially valid payload.
    """
    payload = _normalize(_strip_delimiters(text))
    n = len(payload)
    zeros = payload.count(ZERO_GROUP_CHAR)
    groups = -(-(n - zeros) // CHARS_PER_GROUP)
    out = bytearray((zeros + groups) * BYTES_PER_GROUP)
    w = 0
    pos = 0
    while pos < n:
        if payload[pos] == ZERO_GROUP_CHAR:
            # out is zero-filled already
            w += BYTES_PER_GROUP
            pos += 1
            continue
        group = payload[pos:pos + CHARS_PER_GROUP]
        pad = CHARS_PER_GROUP - len(group)
        value = _decode_group(group, pos)
        if value == 0 and not pad:
            raise _fail(
                EmbeddedZeroShorthand,
                f"zero group spelled out long-hand as {group!r} at offset {pos}; the 'z' shorthand is required",
                pos,
                group,
            )
        out[w:w + BYTES_PER_GROUP] = value.to_bytes(BYTES_PER_GROUP, "big")
        w += BYTES_PER_GROUP - pad
        pos += CHARS_PER_GROUP
    del out[w:]
    return bytes(out)
