"""bencodec: Canonical Bencode Codec

A Python library for the bencode serialization format: self-delimiting,
self-describing binary encoding of byte strings, integers, lists and
dictionaries.

Key Features:
- Pydantic-based immutable value model
- Strict decoder with a typed error for every kind of malformed input
- Canonical encoder (sorted dictionary keys, minimal integers)
- Configurable nesting bound against deeply nested hostile input

Quick Start:
    >>> from bencodec import ByteString, Dictionary, decode, encode
    >>>
    >>> d = Dictionary({b"spam": ByteString(b"eggs"), b"cow": ByteString(b"moo")})
    >>> data = encode(d)
    >>> data
    b'd3:cow3:moo4:spam4:eggse'
    >>> decode(data) == d
    True
"""

from __future__ import annotations

from .codec import DEFAULT_CONFIG, DecoderConfig, decode, encode
from .exceptions import (
    BencodeError,
    DecodeError,
    DecodeErrorKind,
    EncodeError,
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
from .models import ByteString, Dictionary, Integer, List, Value, from_python, to_python
from .utils import encoded_size, nesting_depth

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "DecoderConfig",
    "DEFAULT_CONFIG",
    # Value model
    "Value",
    "ByteString",
    "Integer",
    "List",
    "Dictionary",
    "from_python",
    "to_python",
    # Exceptions
    "BencodeError",
    "EncodeError",
    "DecodeError",
    "DecodeErrorKind",
    "UnexpectedEof",
    "InvalidLength",
    "InvalidInteger",
    "InvalidTypePrefix",
    "UnterminatedContainer",
    "NonStringDictKey",
    "UnsortedOrDuplicateKey",
    "TrailingData",
    "NestingTooDeep",
    # Sizing
    "encoded_size",
    "nesting_depth",
    # Version
    "__version__",
]
