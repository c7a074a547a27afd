"""Utility functions for bencodec."""

from __future__ import annotations

from .sizing import encoded_size, nesting_depth

__all__ = [
    "encoded_size",
    "nesting_depth",
]
