from __future__ import annotations

import codecs
from typing import Optional, Tuple

from .decoder import TextLike, decode
from .encoder import BytesLike, encode
from .logutil import get_logger

log = get_logger(__name__)

CODEC_NAMES = ("ascii85", "a85")

_registered = False


class Ascii85Codec:
    def __init__(self, include_delimiters: bool = True):
        self.include_delimiters = include_delimiters

    def encode(self, data: BytesLike) -> str:
        return encode(data, include_delimiters=self.include_delimiters)

    def encode_bytes(self, data: BytesLike) -> bytes:
        return self.encode(data).encode("ascii")

    def decode(self, text: TextLike) -> bytes:
        # Wrapped and bare input are both accepted regardless of the setting
        return decode(text)

    def __repr__(self) -> str:
        return f"Ascii85Codec(include_delimiters={self.include_delimiters!r})"


def _check_errors(errors: str) -> None:
    if errors != "strict":
        raise ValueError(f"ascii85 codec only supports errors='strict', not {errors!r}")


def _codec_encode(data, errors: str = "strict") -> Tuple[bytes, int]:
    _check_errors(errors)
    return encode(data, include_delimiters=False).encode("ascii"), len(data)


def _codec_decode(data, errors: str = "strict") -> Tuple[bytes, int]:
    _check_errors(errors)
    return decode(data), len(data)


def lookup(name: str) -> Optional[codecs.CodecInfo]:
    """`codecs` search function for the ascii85 bytes-to-bytes codec."""
    if name.replace("-", "_") not in CODEC_NAMES:
        return None
    return codecs.CodecInfo(
        name="ascii85",
        encode=_codec_encode,
        decode=_codec_decode,
        _is_text_encoding=False,
    )


def register() -> None:
    """Make ``codecs.encode(data, "ascii85")`` and ``codecs.decode`` work."""
    global _registered
    if _registered:
        return
    codecs.register(lookup)
    _registered = True
    log.debug("registered codec names %s", ", ".join(CODEC_NAMES))
