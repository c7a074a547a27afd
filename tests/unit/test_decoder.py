"""Unit tests for decoding."""

from __future__ import annotations

import pytest

from bencodec import (
    ByteString,
    DecodeError,
    DecodeErrorKind,
    DecoderConfig,
    Dictionary,
    Integer,
    InvalidInteger,
    InvalidLength,
    InvalidTypePrefix,
    List,
    NestingTooDeep,
    NonStringDictKey,
    TrailingData,
    UnexpectedEof,
    UnsortedOrDuplicateKey,
    UnterminatedContainer,
    Value,
    decode,
    encode,
    nesting_depth,
)
from bencodec.codec.config import MAX_DEPTH_LIMIT


class TestDecodeValues:
    """Test decoding of well-formed input."""

    def test_byte_string(self) -> None:
        """Test byte string decoding."""
        assert decode(b"4:spam") == ByteString(b"spam")

    def test_empty_byte_string(self) -> None:
        """Test zero-length byte string."""
        assert decode(b"0:") == ByteString(b"")

    def test_binary_byte_string(self) -> None:
        """Test byte strings are opaque, including markers and non-ASCII bytes."""
        assert decode(b"5:\x00e:\xffi") == ByteString(b"\x00e:\xffi")

    def test_multi_digit_length(self) -> None:
        """Test lengths of more than one digit."""
        payload = b"x" * 12
        assert decode(b"12:" + payload) == ByteString(payload)

    def test_negative_integer(self) -> None:
        """Test negative integer decoding."""
        assert decode(b"i-10e") == Integer(-10)

    def test_zero(self) -> None:
        """Test the literal zero."""
        assert decode(b"i0e") == Integer(0)

    def test_large_integers(self) -> None:
        """Test integers at and beyond the 64-bit range."""
        assert decode(b"i9223372036854775807e") == Integer(2**63 - 1)
        assert decode(b"i-9223372036854775808e") == Integer(-(2**63))
        assert decode(b"i18446744073709551616e") == Integer(2**64)

    def test_list(self) -> None:
        """Test list decoding preserves order."""
        assert decode(b"l4:spam4:eggse") == List([ByteString(b"spam"), ByteString(b"eggs")])

    def test_empty_list(self) -> None:
        """Test empty list."""
        assert decode(b"le") == List([])

    def test_nested_list(self) -> None:
        """Test nested lists with mixed items."""
        expected = List([List([ByteString(b"hello")]), Integer(-10)])
        assert decode(b"ll5:helloei-10ee") == expected

    def test_dictionary(self) -> None:
        """Test dictionary decoding."""
        expected = Dictionary({b"cow": ByteString(b"moo"), b"spam": ByteString(b"eggs")})
        assert decode(b"d3:cow3:moo4:spam4:eggse") == expected

    def test_empty_dictionary(self) -> None:
        """Test empty dictionary."""
        assert decode(b"de") == Dictionary({})

    def test_dictionary_with_container_values(self) -> None:
        """Test dictionary holding lists and dictionaries."""
        expected = Dictionary(
            {
                b"a": List([Integer(1), Integer(2)]),
                b"b": Dictionary({b"c": ByteString(b"d")}),
            }
        )
        assert decode(b"d1:ali1ei2ee1:bd1:c1:dee") == expected

    def test_key_ordering_is_bytewise(self) -> None:
        """Test keys compare as raw bytes (uppercase sorts before lowercase)."""
        value = decode(b"d1:Bi1e1:ai2ee")
        assert isinstance(value, Dictionary)
        assert set(value.entries) == {b"B", b"a"}

    def test_prefix_key_sorts_first(self) -> None:
        """Test a key sorts before any longer key it prefixes."""
        value = decode(b"d2:abi1e3:abci2ee")
        assert isinstance(value, Dictionary)
        assert value[b"ab"] == Integer(1)

    def test_accepts_bytearray_and_memoryview(self) -> None:
        """Test bytes-like inputs other than bytes."""
        assert decode(bytearray(b"i7e")) == Integer(7)
        assert decode(memoryview(b"i7e")) == Integer(7)


class TestDecodeErrors:
    """Test decoding error handling."""

    @pytest.mark.parametrize("data", [b"i03e", b"i-03e", b"i00e"])
    def test_leading_zero_integer(self, data: bytes) -> None:
        """Test leading zeros are rejected."""
        with pytest.raises(InvalidInteger, match="leading zero"):
            decode(data)

    def test_negative_zero(self) -> None:
        """Test -0 is rejected."""
        with pytest.raises(InvalidInteger, match="Negative zero"):
            decode(b"i-0e")

    @pytest.mark.parametrize("data", [b"ie", b"i-e"])
    def test_integer_without_digits(self, data: bytes) -> None:
        """Test integers with an empty body."""
        with pytest.raises(InvalidInteger, match="no digits"):
            decode(data)

    @pytest.mark.parametrize("data", [b"i1.5e", b"i--1e", b"i+1e", b"i 1e", b"i1-e"])
    def test_integer_with_stray_byte(self, data: bytes) -> None:
        """Test non-digit bytes inside an integer."""
        with pytest.raises(InvalidInteger, match="Unexpected byte"):
            decode(data)

    @pytest.mark.parametrize("data", [b"i", b"i42", b"i-"])
    def test_unterminated_integer(self, data: bytes) -> None:
        """Test integer missing its terminator."""
        with pytest.raises(UnexpectedEof):
            decode(data)

    def test_truncated_string(self) -> None:
        """Test declared length longer than the remaining bytes."""
        with pytest.raises(UnexpectedEof, match="[Tt]runcated"):
            decode(b"5:shor")

    def test_truncated_length(self) -> None:
        """Test input ending inside the length prefix."""
        with pytest.raises(UnexpectedEof):
            decode(b"12")

    def test_zero_padded_length(self) -> None:
        """Test length prefix with a leading zero."""
        with pytest.raises(InvalidLength, match="leading zero"):
            decode(b"03:abc")

    def test_length_with_stray_byte(self) -> None:
        """Test non-digit inside the length prefix."""
        with pytest.raises(InvalidLength, match="Expected ':'"):
            decode(b"3x:abc")

    def test_empty_input(self) -> None:
        """Test empty buffer."""
        with pytest.raises(UnexpectedEof):
            decode(b"")

    @pytest.mark.parametrize("data", [b"x", b"e", b"-1:a", b" i1e"])
    def test_invalid_type_prefix(self, data: bytes) -> None:
        """Test lookahead bytes that start no value."""
        with pytest.raises(InvalidTypePrefix):
            decode(data)

    def test_trailing_data(self) -> None:
        """Test extra bytes after a complete value."""
        with pytest.raises(TrailingData) as exc_info:
            decode(b"i1ei2e")
        assert exc_info.value.position == 3

    def test_trailing_newline(self) -> None:
        """Test even a single trailing byte is rejected."""
        with pytest.raises(TrailingData):
            decode(b"4:spam\n")

    @pytest.mark.parametrize("data", [b"l", b"l4:spam", b"li1e", b"d", b"d3:cow3:moo"])
    def test_unterminated_container(self, data: bytes) -> None:
        """Test containers missing their closing 'e'."""
        with pytest.raises(UnterminatedContainer):
            decode(data)

    def test_unterminated_container_is_eof(self) -> None:
        """Test unterminated containers are also reported as end of input."""
        with pytest.raises(UnexpectedEof):
            decode(b"l4:spam")

    @pytest.mark.parametrize("data", [b"di1e3:mooe", b"dle3:mooe", b"dde3:mooe"])
    def test_non_string_key(self, data: bytes) -> None:
        """Test dictionary keys that are not byte strings."""
        with pytest.raises(NonStringDictKey):
            decode(data)

    def test_unsorted_keys(self) -> None:
        """Test keys out of order are rejected."""
        with pytest.raises(UnsortedOrDuplicateKey, match="sorts before"):
            decode(b"d4:spam4:eggs3:cow3:mooe")

    def test_duplicate_keys(self) -> None:
        """Test repeated keys are rejected."""
        with pytest.raises(UnsortedOrDuplicateKey, match="Duplicate"):
            decode(b"d3:cow3:moo3:cow4:eggse")

    def test_nested_unsorted_keys(self) -> None:
        """Test key order is checked at every level."""
        with pytest.raises(UnsortedOrDuplicateKey):
            decode(b"ld1:bi1e1:ai2eee")

    def test_missing_dictionary_value(self) -> None:
        """Test a key immediately followed by the terminator."""
        with pytest.raises(InvalidTypePrefix, match="b'cow' has no value") as exc_info:
            decode(b"d3:cowe")
        assert exc_info.value.position == 6

    def test_missing_value_after_last_key(self) -> None:
        """Test a dangling key after complete pairs."""
        with pytest.raises(InvalidTypePrefix, match="odd number of dictionary elements"):
            decode(b"d3:cow3:moo4:spame")

    def test_rejects_str_input(self) -> None:
        """Test text input is a usage error, not a decode error."""
        with pytest.raises(TypeError):
            decode("4:spam")  # type: ignore[arg-type]


class TestDecodeErrorDetails:
    """Test the information carried by decode errors."""

    def test_kind_matches_class(self) -> None:
        """Test each error exposes its kind."""
        with pytest.raises(DecodeError) as exc_info:
            decode(b"i03e")
        assert exc_info.value.kind is DecodeErrorKind.INVALID_INTEGER

    def test_unterminated_kind(self) -> None:
        """Test a closed list with extra bytes differs from an unclosed list."""
        with pytest.raises(DecodeError) as exc_info:
            decode(b"le4")
        assert exc_info.value.kind is DecodeErrorKind.TRAILING_DATA

        with pytest.raises(DecodeError) as exc_info:
            decode(b"l")
        assert exc_info.value.kind is DecodeErrorKind.UNTERMINATED_CONTAINER

    def test_position_of_unsorted_key(self) -> None:
        """Test the position points at the offending key."""
        with pytest.raises(UnsortedOrDuplicateKey) as exc_info:
            decode(b"d4:spam4:eggs3:cow3:mooe")
        assert exc_info.value.position == 13

    def test_position_in_message(self) -> None:
        """Test the message mentions the byte offset."""
        with pytest.raises(InvalidTypePrefix, match="at byte 1"):
            decode(b"lxe")

    def test_decode_error_is_value_error(self) -> None:
        """Test callers catching ValueError also catch decode errors."""
        with pytest.raises(ValueError):
            decode(b"i-0e")


class TestNestingBound:
    """Test the nesting depth guard."""

    def test_unmatched_lists_within_bound(self) -> None:
        """Test open lists within the bound run out of input."""
        with pytest.raises(UnexpectedEof):
            decode(b"l" * 10, config=DecoderConfig(max_depth=10))

    def test_unmatched_lists_beyond_bound(self) -> None:
        """Test open lists beyond the bound are rejected early."""
        with pytest.raises(NestingTooDeep) as exc_info:
            decode(b"l" * 11, config=DecoderConfig(max_depth=10))
        assert exc_info.value.position == 10

    def test_huge_nesting_default_config(self) -> None:
        """Test hostile nesting never reaches the recursion limit."""
        with pytest.raises(NestingTooDeep):
            decode(b"l" * 100_000)

    def test_exactly_at_bound(self) -> None:
        """Test a tree exactly max_depth deep decodes."""
        data = b"l" * 5 + b"e" * 5
        value = decode(data, config=DecoderConfig(max_depth=5))
        assert isinstance(value, List)

        with pytest.raises(NestingTooDeep):
            decode(data, config=DecoderConfig(max_depth=4))

    def test_round_trip_at_depth_limit(self) -> None:
        """Test the deepest configurable tree decodes, compares and prints."""
        value: List = List([Integer(0)])
        for _ in range(MAX_DEPTH_LIMIT - 1):
            value = List([value])

        decoded = decode(encode(value), config=DecoderConfig(max_depth=MAX_DEPTH_LIMIT))

        assert decoded == value
        assert repr(decoded) == repr(value)

    def test_mixed_round_trip_at_depth_limit(self) -> None:
        """Test alternating dictionaries and lists at the deepest configurable bound."""
        value: Value = ByteString(b"leaf")
        for level in range(MAX_DEPTH_LIMIT):
            value = Dictionary({b"k": value}) if level % 2 else List([value])

        decoded = decode(encode(value), config=DecoderConfig(max_depth=MAX_DEPTH_LIMIT))

        assert nesting_depth(decoded) == MAX_DEPTH_LIMIT
        assert decoded == value

    def test_dictionaries_count_toward_depth(self) -> None:
        """Test dictionaries nest like lists."""
        data = b"d1:ad1:ad1:aleeee"
        assert isinstance(decode(data, config=DecoderConfig(max_depth=4)), Dictionary)
        with pytest.raises(NestingTooDeep):
            decode(data, config=DecoderConfig(max_depth=3))

    def test_scalars_do_not_count(self) -> None:
        """Test scalars inside the deepest container do not add depth."""
        assert decode(b"li1e4:spame", config=DecoderConfig(max_depth=1)) == List(
            [Integer(1), ByteString(b"spam")]
        )


class TestLenientKeyOrder:
    """Test decoding with strict_key_order disabled."""

    def test_accepts_unsorted_keys(self) -> None:
        """Test unsorted keys decode in lenient mode."""
        config = DecoderConfig(strict_key_order=False)
        value = decode(b"d4:spam4:eggs3:cow3:mooe", config=config)
        assert value == Dictionary({b"cow": ByteString(b"moo"), b"spam": ByteString(b"eggs")})

    def test_still_rejects_duplicates(self) -> None:
        """Test duplicate keys are rejected in lenient mode too."""
        config = DecoderConfig(strict_key_order=False)
        with pytest.raises(UnsortedOrDuplicateKey, match="Duplicate"):
            decode(b"d3:cow3:moo4:spam4:eggs3:cowi1ee", config=config)
