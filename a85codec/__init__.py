"""
a85codec — Adobe ASCII85 (Base85) binary-to-text codec.

Features:

- encode(): 4 bytes per 5 printable characters ('!'..'u'), 'z' for an all-zero
  group, optional '<~' / '~>' wrapper.
- decode(): strips a matching wrapper, ignores whitespace, expands 'z', and
  rejects malformed groups with a DecodeError subclass (InvalidCharacter,
  EmbeddedZeroShorthand, GroupOverflow).
- Ascii85Codec and a `codecs` registration ("ascii85") for callers that want
  the codec as an object or through codecs.encode/codecs.decode.

The space-run 'y' extension and streaming interfaces are not supported.
"""

from .codec import Ascii85Codec, register
from .decoder import decode
from .encoder import encode
from .errors import (
    Ascii85Error,
    DecodeError,
    EmbeddedZeroShorthand,
    GroupOverflow,
    InvalidCharacter,
)

__version__ = "0.1"

__all__ = [
    "encode",
    "decode",
    "Ascii85Codec",
    "register",
    "Ascii85Error",
    "DecodeError",
    "InvalidCharacter",
    "EmbeddedZeroShorthand",
    "GroupOverflow",
]
