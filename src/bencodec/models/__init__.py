"""Value model for bencodec.

This module provides the value node types and helpers for converting
plain Python data to and from value trees.
"""

from __future__ import annotations

from .convert import from_python, to_python
from .values import ByteString, Dictionary, Integer, List, Value

__all__ = [
    "Value",
    "ByteString",
    "Integer",
    "List",
    "Dictionary",
    "from_python",
    "to_python",
]
