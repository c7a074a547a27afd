"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from bencodec import ByteString, Dictionary, Integer, List


@pytest.fixture
def sample_dictionary() -> Dictionary:
    """The classic two-key dictionary, built in non-canonical order."""
    return Dictionary({b"spam": ByteString(b"eggs"), b"cow": ByteString(b"moo")})


@pytest.fixture
def sample_encoded() -> bytes:
    """Canonical encoding of sample_dictionary."""
    return b"d3:cow3:moo4:spam4:eggse"


@pytest.fixture
def metainfo() -> Dictionary:
    """A small torrent-style metainfo tree mixing every value type."""
    return Dictionary(
        {
            b"announce": ByteString(b"http://tracker.example:6969/announce"),
            b"creation date": Integer(1700000000),
            b"info": Dictionary(
                {
                    b"name": ByteString(b"example.iso"),
                    b"piece length": Integer(262144),
                    b"pieces": ByteString(bytes(range(40))),
                    b"files": List(
                        [
                            Dictionary(
                                {
                                    b"length": Integer(1024),
                                    b"path": List([ByteString(b"dir"), ByteString(b"a.bin")]),
                                }
                            ),
                            Dictionary(
                                {
                                    b"length": Integer(0),
                                    b"path": List([ByteString(b"")]),
                                }
                            ),
                        ]
                    ),
                }
            ),
            b"url-list": List([]),
        }
    )
