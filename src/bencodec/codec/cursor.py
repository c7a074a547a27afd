"""Byte-level reading and writing utilities.

This module provides the forward-only cursor the decoder reads from and the
append-only writer the encoder writes to. Both work on ASCII marker bytes
and raw payload bytes; neither knows the grammar.
"""

from __future__ import annotations

DIGITS = frozenset(b"0123456789")


class ByteCursor:
    """Reads bytes from a buffer with a single forward-only position.

    The cursor never rewinds. Reads past the end raise IndexError, which the
    decoder turns into a DecodeError.

    Example:
        >>> cursor = ByteCursor(b"i42e")
        >>> cursor.read_byte() == ord("i")
        True
        >>> cursor.read_digits()
        b'42'
        >>> cursor.bytes_remaining()
        1
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a cursor at the start of data.

        Args:
            data: Byte buffer to read
        """
        self._data = data
        self._position = 0

    def peek(self) -> int | None:
        """Return the next byte without consuming it, or None at end of input."""
        if self._position >= len(self._data):
            return None
        return self._data[self._position]

    def read_byte(self) -> int:
        """Consume and return the next byte.

        Raises:
            IndexError: If no more bytes are available
        """
        if self._position >= len(self._data):
            raise IndexError("Attempted to read past end of input")

        value = self._data[self._position]
        self._position += 1
        return value

    def read_bytes(self, num_bytes: int) -> bytes:
        """Consume exactly num_bytes bytes.

        Args:
            num_bytes: Number of bytes to read

        Returns:
            Bytes read from the buffer

        Raises:
            IndexError: If not enough bytes are available
        """
        if self._position + num_bytes > len(self._data):
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {self.bytes_remaining()}"
            )

        result = self._data[self._position : self._position + num_bytes]
        self._position += num_bytes
        return bytes(result)

    def read_digits(self) -> bytes:
        """Consume the longest run of ASCII decimal digits (possibly empty)."""
        start = self._position
        end = start
        while end < len(self._data) and self._data[end] in DIGITS:
            end += 1
        self._position = end
        return bytes(self._data[start:end])

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def at_end(self) -> bool:
        """Return True if every byte has been consumed."""
        return self._position >= len(self._data)

    def position(self) -> int:
        """Return the current read offset in bytes."""
        return self._position


class ByteWriter:
    """Accumulates encoded output.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_marker(b"i")
        >>> writer.write_decimal(-3)
        >>> writer.write_marker(b"e")
        >>> writer.to_bytes()
        b'i-3e'
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buffer = bytearray()

    def write_marker(self, marker: bytes) -> None:
        """Write a single-byte structural marker (``i``, ``l``, ``d``, ``e``, ``:``)."""
        if len(marker) != 1:
            raise ValueError(f"Marker must be exactly one byte, got {marker!r}")
        self._buffer += marker

    def write_decimal(self, value: int) -> None:
        """Write an integer in minimal base-10 ASCII form."""
        self._buffer += str(value).encode("ascii")

    def write_bytes(self, data: bytes) -> None:
        """Write raw payload bytes."""
        self._buffer += data

    def byte_length(self) -> int:
        """Return the number of bytes written so far."""
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return everything written as an immutable bytes object."""
        return bytes(self._buffer)
