"""Bencode decoder.

This module provides the decode() function that parses a complete bencoded
byte buffer into a value tree. Parsing is single-pass recursive descent: one
byte of lookahead selects the production, and the cursor never rewinds.
"""

from __future__ import annotations

import logging

from ..exceptions import (
    DecodeError,
    InvalidInteger,
    InvalidLength,
    InvalidTypePrefix,
    NestingTooDeep,
    NonStringDictKey,
    TrailingData,
    UnexpectedEof,
    UnsortedOrDuplicateKey,
    UnterminatedContainer,
)
from ..models.values import ByteString, Dictionary, Integer, List, Value
from .config import DEFAULT_CONFIG, DecoderConfig
from .cursor import DIGITS, ByteCursor

logger = logging.getLogger(__name__)

_INTEGER = ord("i")
_LIST = ord("l")
_DICT = ord("d")
_END = ord("e")
_COLON = ord(":")
_MINUS = ord("-")


def decode(data: bytes | bytearray | memoryview, *, config: DecoderConfig | None = None) -> Value:
    """Decode a bencoded byte buffer into a value tree.

    The whole buffer must hold exactly one value. Decoding is all-or-nothing:
    the first violation raises and no partial tree is returned.

    Args:
        data: Complete bencoded input
        config: Decoder limits and policies (defaults to DEFAULT_CONFIG)

    Returns:
        Decoded value tree

    Raises:
        TypeError: If data is not a bytes-like object
        DecodeError: If data is not well-formed. The concrete subclass
            (UnexpectedEof, InvalidInteger, TrailingData, ...) tells which rule
            was broken and ``position`` where.

    Examples:
        ```python
        from bencodec import decode

        decode(b"4:spam")            # ByteString(b"spam")
        decode(b"i-10e")             # Integer(-10)
        decode(b"l4:spam4:eggse")    # List([ByteString(b"spam"), ByteString(b"eggs")])
        decode(b"d3:cow3:mooe")      # Dictionary({b"cow": ByteString(b"moo")})
        ```
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"decode() requires a bytes-like object, got {type(data).__name__}")

    config = config or DEFAULT_CONFIG
    cursor = ByteCursor(bytes(data))

    try:
        value = _decode_value(cursor, config, depth=0)
        if not cursor.at_end():
            raise TrailingData(
                f"{cursor.bytes_remaining()} unexpected bytes after top-level value",
                cursor.position(),
            )
    except DecodeError as e:
        logger.debug("Rejected %d byte input: %s at byte %d", len(data), e.kind.value, e.position)
        raise

    return value


def _decode_value(cursor: ByteCursor, config: DecoderConfig, depth: int) -> Value:
    """Decode the value starting at the cursor.

    Args:
        cursor: Input cursor, positioned on the value's first byte
        config: Decoder limits and policies
        depth: Nesting depth of the enclosing container (0 at top level)

    Returns:
        Decoded value
    """
    marker = cursor.peek()
    if marker is None:
        raise UnexpectedEof("Expected a value, found end of input", cursor.position())

    if marker in DIGITS:
        return _decode_string(cursor)
    if marker == _INTEGER:
        return _decode_integer(cursor)
    if marker == _LIST:
        return _decode_list(cursor, config, depth + 1)
    if marker == _DICT:
        return _decode_dict(cursor, config, depth + 1)

    raise InvalidTypePrefix(f"Byte {bytes([marker])!r} does not start a value", cursor.position())


def _decode_string(cursor: ByteCursor) -> ByteString:
    start = cursor.position()
    digits = cursor.read_digits()

    separator = cursor.peek()
    if separator is None:
        raise UnexpectedEof("Truncated byte string length", cursor.position())
    if separator != _COLON:
        raise InvalidLength(
            f"Expected ':' after byte string length, found {bytes([separator])!r}",
            cursor.position(),
        )
    if len(digits) > 1 and digits.startswith(b"0"):
        raise InvalidLength(f"Byte string length {digits!r} has a leading zero", start)

    try:
        length = int(digits)
    except ValueError as e:
        raise InvalidLength(f"Byte string length has too many digits ({len(digits)})", start) from e

    cursor.read_byte()  # ':'

    try:
        return ByteString(cursor.read_bytes(length))
    except IndexError as e:
        raise UnexpectedEof(f"Truncated byte string: {e}", cursor.position()) from e


def _decode_integer(cursor: ByteCursor) -> Integer:
    start = cursor.position()
    cursor.read_byte()  # 'i'

    negative = cursor.peek() == _MINUS
    if negative:
        cursor.read_byte()
    digits = cursor.read_digits()

    terminator = cursor.peek()
    if terminator is None:
        raise UnexpectedEof("Integer missing terminating 'e'", cursor.position())
    if terminator != _END:
        raise InvalidInteger(
            f"Unexpected byte {bytes([terminator])!r} in integer", cursor.position()
        )

    if not digits:
        raise InvalidInteger("Integer has no digits", start)
    if len(digits) > 1 and digits.startswith(b"0"):
        raise InvalidInteger(f"Integer {digits!r} has a leading zero", start)
    if negative and digits == b"0":
        raise InvalidInteger("Negative zero is not allowed", start)

    try:
        magnitude = int(digits)
    except ValueError as e:
        raise InvalidInteger(f"Integer has too many digits ({len(digits)})", start) from e

    cursor.read_byte()  # 'e'
    return Integer(-magnitude if negative else magnitude)


def _decode_list(cursor: ByteCursor, config: DecoderConfig, depth: int) -> List:
    _check_depth(cursor, config, depth)
    cursor.read_byte()  # 'l'

    items: list[Value] = []
    while True:
        marker = cursor.peek()
        if marker is None:
            raise UnterminatedContainer("List missing terminating 'e'", cursor.position())
        if marker == _END:
            cursor.read_byte()
            return List(items)
        items.append(_decode_value(cursor, config, depth))


def _decode_dict(cursor: ByteCursor, config: DecoderConfig, depth: int) -> Dictionary:
    _check_depth(cursor, config, depth)
    cursor.read_byte()  # 'd'

    entries: dict[bytes, Value] = {}
    previous_key: bytes | None = None
    while True:
        marker = cursor.peek()
        if marker is None:
            raise UnterminatedContainer("Dictionary missing terminating 'e'", cursor.position())
        if marker == _END:
            cursor.read_byte()
            return Dictionary(entries)
        if marker not in DIGITS:
            raise NonStringDictKey(
                f"Dictionary key must be a byte string, found {bytes([marker])!r}",
                cursor.position(),
            )

        key_position = cursor.position()
        key = _decode_string(cursor).value

        if key in entries:
            raise UnsortedOrDuplicateKey(f"Duplicate dictionary key {key!r}", key_position)
        if config.strict_key_order and previous_key is not None and key < previous_key:
            raise UnsortedOrDuplicateKey(
                f"Dictionary key {key!r} sorts before previous key {previous_key!r}",
                key_position,
            )

        if cursor.peek() == _END:
            raise InvalidTypePrefix(
                f"Dictionary key {key!r} has no value (odd number of dictionary elements)",
                cursor.position(),
            )

        entries[key] = _decode_value(cursor, config, depth)
        previous_key = key


def _check_depth(cursor: ByteCursor, config: DecoderConfig, depth: int) -> None:
    if depth > config.max_depth:
        raise NestingTooDeep(
            f"Nesting depth {depth} exceeds max_depth={config.max_depth}", cursor.position()
        )
