#!/usr/bin/env python3
"""Basic usage example for bencodec.

This example demonstrates:
1. Building a value tree from plain Python data
2. Encoding to canonical bencode
3. Decoding back to a value tree
4. Handling malformed input
"""

from __future__ import annotations

from bencodec import (
    DecodeError,
    DecoderConfig,
    decode,
    encode,
    encoded_size,
    from_python,
    nesting_depth,
    to_python,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bencodec Basic Usage Example")
    print("=" * 60)
    print()

    # Build a tree; key order here does not matter
    print("1. Building a value tree...")
    value = from_python(
        {
            "spam": "eggs",
            "cow": "moo",
            "counts": [3, -1, 0],
        }
    )
    print(f"   Nesting depth: {nesting_depth(value)}")
    print(f"   Encoded size: {encoded_size(value)} bytes")
    print()

    print("2. Encoding to canonical bencode...")
    data = encode(value)
    print(f"   {data!r}")
    print()

    print("3. Decoding...")
    decoded = decode(data)
    print(f"   Equal to original: {decoded == value}")
    print(f"   As Python data: {to_python(decoded)}")
    print()

    print("4. Rejecting malformed input...")
    samples = [
        b"i03e",
        b"i-0e",
        b"5:shor",
        b"i1ei2e",
        b"d4:spam4:eggs3:cow3:mooe",
        b"l" * 100,
    ]
    config = DecoderConfig(max_depth=16)
    for sample in samples:
        try:
            decode(sample, config=config)
        except DecodeError as e:
            print(f"   {sample[:24]!r:30} -> {e.kind.value}: {e}")
    print()


if __name__ == "__main__":
    main()
