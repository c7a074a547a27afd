"""Configuration for the decoder.

The decoder parses untrusted input, so its resource bound is explicit and
configurable rather than left to the interpreter's recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 64

# Comparing or printing a decoded tree recurses several interpreter frames per
# nesting level; trees this deep stay well clear of the default limit of 1000.
MAX_DEPTH_LIMIT = 128


@dataclass(frozen=True)
class DecoderConfig:
    """Decoder limits and policies.

    Attributes:
        max_depth: Maximum container nesting accepted (default 64).
            A top-level list or dictionary is depth 1, a list inside it depth 2,
            and so on. Scalars do not count. Input nested deeper is rejected
            with NestingTooDeep before the decoder recurses any further.
            Typical values:
            - Torrent metainfo, tracker responses: < 8
            - General application payloads: 16 - 64

        strict_key_order: Require dictionary keys in strictly ascending byte
            order (default True). With False, unsorted keys are accepted and
            re-sorted on the next encode, so the round trip is no longer
            byte-identical for such input. Duplicate keys are rejected in
            both modes.

    Examples:
        ```python
        from bencodec import DecoderConfig, decode

        # Shallow payloads only
        value = decode(data, config=DecoderConfig(max_depth=8))

        # Accept dictionaries written by non-canonical encoders
        value = decode(data, config=DecoderConfig(strict_key_order=False))
        ```
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    strict_key_order: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ValueError(f"max_depth must be an integer, got {self.max_depth!r}")

        if not 1 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(f"max_depth must be 1-{MAX_DEPTH_LIMIT}, got {self.max_depth}")


DEFAULT_CONFIG = DecoderConfig()
