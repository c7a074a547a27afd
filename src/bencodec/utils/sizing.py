"""Value tree size calculation utilities.

This module provides functions to measure a value tree without actually
encoding it: the exact encoded length, and the nesting depth that a
decoder's max_depth bound is checked against.
"""

from __future__ import annotations

from ..exceptions import EncodeError
from ..models.values import ByteString, Dictionary, Integer, List, Value


def encoded_size(value: Value) -> int:
    """Calculate the encoded size of a value tree in bytes.

    Args:
        value: Root of the value tree

    Returns:
        Length of encode(value), in bytes

    Raises:
        EncodeError: If value (or a node inside it) is not a value node

    Example:
        >>> encoded_size(ByteString(b"spam"))
        6  # b"4:spam"
        >>> encoded_size(List([Integer(-10)]))
        7  # b"li-10ee"
    """
    total = 0
    stack: list[Value] = [value]

    while stack:
        item = stack.pop()
        if isinstance(item, ByteString):
            total += _string_size(item.value)
        elif isinstance(item, Integer):
            # "i" + digits (and sign) + "e"
            total += len(str(item.value)) + 2
        elif isinstance(item, List):
            total += 2
            stack.extend(item.items)
        elif isinstance(item, Dictionary):
            total += 2
            for key, child in item.entries.items():
                total += _string_size(key)
                stack.append(child)
        else:
            raise EncodeError(f"Expected a bencode value, got {type(item).__name__}")

    return total


def nesting_depth(value: Value) -> int:
    """Calculate the container nesting depth of a value tree.

    Scalars have depth 0, a flat list or dictionary depth 1, and each level of
    nesting adds one. This is the measure DecoderConfig.max_depth bounds, so a
    tree with nesting_depth(value) <= max_depth round-trips under that config.

    Raises:
        EncodeError: If value (or a node inside it) is not a value node

    Example:
        >>> nesting_depth(Integer(1))
        0
        >>> nesting_depth(List([List([]), Integer(1)]))
        2
    """
    deepest = 0
    stack: list[tuple[Value, int]] = [(value, 0)]

    while stack:
        item, depth = stack.pop()
        if isinstance(item, (ByteString, Integer)):
            continue
        if isinstance(item, List):
            children = list(item.items)
        elif isinstance(item, Dictionary):
            children = list(item.entries.values())
        else:
            raise EncodeError(f"Expected a bencode value, got {type(item).__name__}")

        deepest = max(deepest, depth + 1)
        stack.extend((child, depth + 1) for child in children)

    return deepest


def _string_size(data: bytes) -> int:
    return len(str(len(data))) + 1 + len(data)
