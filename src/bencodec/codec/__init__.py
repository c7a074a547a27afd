"""Bencode codec for bencodec.

This module provides the canonical encoder, the bounded recursive-descent
decoder and the decoder's configuration.
"""

from __future__ import annotations

from .config import DEFAULT_CONFIG, DecoderConfig
from .decoder import decode
from .encoder import encode

__all__ = [
    "encode",
    "decode",
    "DecoderConfig",
    "DEFAULT_CONFIG",
]
