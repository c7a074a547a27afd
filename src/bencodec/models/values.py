"""Value model shared by the encoder and decoder.

A value tree is built from exactly four immutable node types. Each node is a
frozen Pydantic model with strict validation, so a tree with the wrong payload
types (a ``str`` byte string, a ``bool`` integer, non-bytes dictionary keys)
cannot be constructed in the first place.
"""

from __future__ import annotations

import sys
from typing import Any, Iterable, Mapping, Union

from pydantic import BaseModel, ConfigDict, StrictBytes, StrictInt, field_validator


class BaseValue(BaseModel):
    """Common Pydantic configuration for all value nodes."""

    model_config = ConfigDict(
        # No coercion: b"1" is not an int, "abc" is not bytes
        strict=True,
        # Trees are treated as immutable data once built
        frozen=True,
        extra="forbid",
    )


class ByteString(BaseValue):
    """Opaque sequence of raw bytes.

    Example:
        >>> ByteString(b"spam")
        ByteString(value=b'spam')
    """

    value: StrictBytes

    def __init__(self, value: bytes, **kwargs: Any) -> None:
        super().__init__(value=value, **kwargs)

    def __bytes__(self) -> bytes:
        return self.value

    def __len__(self) -> int:
        return len(self.value)


def max_integer_digits() -> int:
    """Return the interpreter's int/str conversion digit limit (0 means unlimited)."""
    return sys.get_int_max_str_digits()


class Integer(BaseValue):
    """Signed whole number of arbitrary magnitude.

    The magnitude is bounded only by the interpreter's int/str conversion
    limit (``sys.get_int_max_str_digits()``, 4300 digits by default), so
    every Integer that can be built can also be encoded.

    Example:
        >>> Integer(-10)
        Integer(value=-10)
    """

    value: StrictInt

    def __init__(self, value: int, **kwargs: Any) -> None:
        super().__init__(value=value, **kwargs)

    @field_validator("value", mode="after")
    @classmethod
    def _validate_digits(cls, value: int) -> int:
        limit = max_integer_digits()
        # 2**(3 * (limit - 1)) has fewer than limit digits; skip the exact check below that
        if limit and value.bit_length() > 3 * (limit - 1) and abs(value) >= 10**limit:
            raise ValueError(f"Integer has more than {limit} decimal digits")
        return value

    def __int__(self) -> int:
        return self.value


class List(BaseValue):
    """Ordered sequence of values.

    Example:
        >>> List([ByteString(b"spam"), Integer(42)])
        List(items=(ByteString(value=b'spam'), Integer(value=42)))
    """

    items: tuple[Value, ...]

    def __init__(self, items: Iterable[Value] = (), **kwargs: Any) -> None:
        super().__init__(items=tuple(items), **kwargs)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]


class Dictionary(BaseValue):
    """Mapping from raw byte keys to values.

    Insertion order carries no meaning: two dictionaries with the same pairs
    compare equal and encode to the same bytes.

    Example:
        >>> d = Dictionary({b"spam": ByteString(b"eggs"), b"cow": ByteString(b"moo")})
        >>> [k for k, _ in d.sorted_items()]
        [b'cow', b'spam']
    """

    entries: dict[StrictBytes, Value]

    def __init__(self, entries: Mapping[bytes, Value] | None = None, **kwargs: Any) -> None:
        super().__init__(entries=dict(entries or {}), **kwargs)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, key: bytes) -> Value:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def sorted_items(self) -> list[tuple[bytes, Value]]:
        """Return (key, value) pairs in canonical ascending key order."""
        return sorted(self.entries.items(), key=lambda item: item[0])


Value = Union[ByteString, Integer, List, Dictionary]

VALUE_TYPES = (ByteString, Integer, List, Dictionary)

List.model_rebuild()
Dictionary.model_rebuild()
