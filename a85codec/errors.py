from __future__ import annotations

from typing import Optional


class Ascii85Error(Exception):
    """Base class for a85codec errors."""


class DecodeError(Ascii85Error, ValueError):
    """Malformed ASCII85 input. Raised by decode only; encode cannot fail."""

    kind = "DecodeError"

    def __init__(self, message: str, *, offset: Optional[int] = None, group: Optional[str] = None):
        super().__init__(message)
        self.offset = offset
        self.group = group


class InvalidCharacter(DecodeError):
    kind = "InvalidCharacter"


class EmbeddedZeroShorthand(DecodeError):
    kind = "EmbeddedZeroShorthand"


class GroupOverflow(DecodeError):
    kind = "GroupOverflow"
