"""Canonical bencode encoder.

This module provides the encode() function that serializes a value tree to
bytes. Output is always canonical: minimal integers and dictionary keys in
ascending byte order, whatever order the dictionary was built in.
"""

from __future__ import annotations

import logging
from typing import Union

from ..exceptions import EncodeError
from ..models.values import VALUE_TYPES, ByteString, Dictionary, Integer, List, Value
from .cursor import ByteWriter

logger = logging.getLogger(__name__)

# Work items are either a value still to encode or a pre-encoded chunk.
_Pending = Union[Value, bytes]


def encode(value: Value) -> bytes:
    """Encode a value tree to canonical bencode.

    The tree is walked with an explicit work stack, so arbitrarily deep trees
    built by application code encode without hitting the recursion limit.

    Args:
        value: Root of the value tree

    Returns:
        Canonical bencoded bytes

    Raises:
        EncodeError: If value (or a node inside it) is not a value node

    Examples:
        ```python
        from bencodec import ByteString, Dictionary, encode

        d = Dictionary({b"spam": ByteString(b"eggs"), b"cow": ByteString(b"moo")})
        encode(d)  # b"d3:cow3:moo4:spam4:eggse"
        ```
    """
    # Raw bytes on the stack mean "already encoded", so they must not pass as a root
    if not isinstance(value, VALUE_TYPES):
        raise EncodeError(f"Expected a bencode value, got {type(value).__name__}")

    writer = ByteWriter()
    stack: list[_Pending] = [value]

    while stack:
        item = stack.pop()

        if isinstance(item, bytes):
            writer.write_bytes(item)
        elif isinstance(item, ByteString):
            _write_string(writer, item.value)
        elif isinstance(item, Integer):
            writer.write_marker(b"i")
            writer.write_decimal(item.value)
            writer.write_marker(b"e")
        elif isinstance(item, List):
            writer.write_marker(b"l")
            stack.append(b"e")
            stack.extend(reversed(item.items))
        elif isinstance(item, Dictionary):
            writer.write_marker(b"d")
            stack.append(b"e")
            for key, child in reversed(item.sorted_items()):
                stack.append(child)
                stack.append(_string_token(key))
        else:
            raise EncodeError(f"Expected a bencode value, got {type(item).__name__}")

    encoded = writer.to_bytes()
    logger.debug("Encoded %s into %d bytes", type(value).__name__, len(encoded))
    return encoded


def _write_string(writer: ByteWriter, data: bytes) -> None:
    writer.write_decimal(len(data))
    writer.write_marker(b":")
    writer.write_bytes(data)


def _string_token(data: bytes) -> bytes:
    """Return the full byte string encoding of data (length prefix included)."""
    writer = ByteWriter()
    _write_string(writer, data)
    return writer.to_bytes()
