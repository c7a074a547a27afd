"""Conversion between plain Python data and value trees.

These helpers let application code build a tree from ordinary ``bytes``,
``str``, ``int``, ``list`` and ``dict`` objects, and flatten a decoded tree
back into them.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from ..exceptions import EncodeError
from .values import VALUE_TYPES, ByteString, Dictionary, Integer, List, Value


def from_python(obj: Any) -> Value:
    """Build a value tree from plain Python data.

    Mapping rules:
        - bytes / bytearray -> ByteString
        - str -> ByteString (UTF-8 encoded)
        - int -> Integer (bool is rejected, it is not a bencode type)
        - list / tuple -> List
        - dict with bytes, str or ByteString keys -> Dictionary
        - an existing value node is returned unchanged

    Args:
        obj: Python object to convert

    Returns:
        Equivalent value tree

    Raises:
        EncodeError: If obj (or anything nested in it) has no bencode equivalent,
            or two dictionary keys collide once converted to bytes

    Example:
        >>> from_python({"cow": "moo", "n": [1, 2]})
        Dictionary(entries={b'cow': ByteString(value=b'moo'), b'n': List(...)})
    """
    if isinstance(obj, VALUE_TYPES):
        return obj

    if isinstance(obj, (bytes, bytearray)):
        return ByteString(bytes(obj))

    if isinstance(obj, str):
        return ByteString(obj.encode("utf-8"))

    # bool before int (bool is an int subclass)
    if isinstance(obj, bool):
        raise EncodeError("bool has no bencode representation; use an int explicitly")

    if isinstance(obj, int):
        try:
            return Integer(obj)
        except ValidationError as e:
            raise EncodeError(f"int too large to encode: {e.errors()[0]['msg']}") from e

    if isinstance(obj, (list, tuple)):
        return List(from_python(item) for item in obj)

    if isinstance(obj, dict):
        entries: dict[bytes, Value] = {}
        for key, item in obj.items():
            raw_key = _key_bytes(key)
            if raw_key in entries:
                raise EncodeError(f"Dictionary key {raw_key!r} appears more than once")
            entries[raw_key] = from_python(item)
        return Dictionary(entries)

    raise EncodeError(f"Cannot convert {type(obj).__name__} to a bencode value")


def to_python(value: Value) -> Any:
    """Flatten a value tree into plain Python data.

    ByteStrings become ``bytes``, Integers ``int``, Lists ``list`` and
    Dictionaries ``dict`` with ``bytes`` keys. Byte strings are never decoded
    as text, since the format does not say which of them are text.

    Raises:
        EncodeError: If value is not a value node
    """
    if isinstance(value, ByteString):
        return value.value
    if isinstance(value, Integer):
        return value.value
    if isinstance(value, List):
        return [to_python(item) for item in value.items]
    if isinstance(value, Dictionary):
        return {key: to_python(item) for key, item in value.entries.items()}

    raise EncodeError(f"Expected a bencode value, got {type(value).__name__}")


def _key_bytes(key: Any) -> bytes:
    if isinstance(key, bytes):
        return key
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, ByteString):
        return key.value
    raise EncodeError(f"Dictionary keys must be bytes or str, got {type(key).__name__}")
