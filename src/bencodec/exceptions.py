"""Exception hierarchy for bencodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BencodeError for easy catching of any bencodec-specific error.

Decode failures form a closed set: every malformed input is reported as exactly one
of the DecodeError subclasses below, identified by its ``kind`` attribute.
"""

from __future__ import annotations

import enum
from typing import ClassVar


class DecodeErrorKind(enum.Enum):
    """Closed enumeration of the ways a byte buffer can fail to decode."""

    UNEXPECTED_EOF = "UnexpectedEof"
    INVALID_LENGTH = "InvalidLength"
    INVALID_INTEGER = "InvalidInteger"
    INVALID_TYPE_PREFIX = "InvalidTypePrefix"
    UNTERMINATED_CONTAINER = "UnterminatedContainer"
    NON_STRING_DICT_KEY = "NonStringDictKey"
    UNSORTED_OR_DUPLICATE_KEY = "UnsortedOrDuplicateKey"
    TRAILING_DATA = "TrailingData"
    NESTING_TOO_DEEP = "NestingTooDeep"


class BencodeError(Exception):
    """Base exception for all bencodec errors."""

    pass


class DecodeError(BencodeError, ValueError):
    """Raised when a byte buffer is not a well-formed bencoded value.

    Attributes:
        kind: Which rule of the grammar was violated
        position: Byte offset in the input where the problem was detected
    """

    kind: ClassVar[DecodeErrorKind]

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} (at byte {position})")
        self.position = position


class UnexpectedEof(DecodeError):
    """Input ended in the middle of a value.

    Examples:
        - Empty input
        - ``5:shor`` (declared length longer than the remaining bytes)
        - ``i42`` (integer without terminator)
    """

    kind = DecodeErrorKind.UNEXPECTED_EOF


class InvalidLength(DecodeError):
    """Malformed byte string length prefix (``03:abc``, ``3x:abc``)."""

    kind = DecodeErrorKind.INVALID_LENGTH


class InvalidInteger(DecodeError):
    """Malformed integer body: no digits, leading zero, ``-0`` or a stray byte."""

    kind = DecodeErrorKind.INVALID_INTEGER


class InvalidTypePrefix(DecodeError):
    """Lookahead byte does not start any value."""

    kind = DecodeErrorKind.INVALID_TYPE_PREFIX


class UnterminatedContainer(UnexpectedEof):
    """A list or dictionary ran out of input before its closing ``e``."""

    kind = DecodeErrorKind.UNTERMINATED_CONTAINER


class NonStringDictKey(DecodeError):
    """A dictionary key position holds something other than a byte string."""

    kind = DecodeErrorKind.NON_STRING_DICT_KEY


class UnsortedOrDuplicateKey(DecodeError):
    """Dictionary keys are not in strictly ascending byte order."""

    kind = DecodeErrorKind.UNSORTED_OR_DUPLICATE_KEY


class TrailingData(DecodeError):
    """Bytes remain after a complete top-level value."""

    kind = DecodeErrorKind.TRAILING_DATA


class NestingTooDeep(DecodeError):
    """Containers are nested deeper than the configured bound."""

    kind = DecodeErrorKind.NESTING_TOO_DEEP


class EncodeError(BencodeError, TypeError):
    """Raised when something that is not a value tree is handed to the encoder.

    Examples:
        - Passing a plain dict to encode() instead of a Dictionary
        - Converting a float or bool with from_python()
        - Dictionary keys that collide once converted to bytes
    """

    pass
