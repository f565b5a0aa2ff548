import pytest
from hypothesis import given
from hypothesis import strategies as st

from ixc.account_id import AccountID
from ixc.schema.buffer import Reader, ReverseWriter
from ixc.schema.coding import DecodeError, DecodeErrorKind, EncodeError, EncodeErrorKind
from ixc.schema.key_field import decode_key_field, encode_key_field, key_field_size
from ixc.schema.types import (
    ACCOUNT_ID,
    BOOL,
    BYTES,
    DURATION,
    I8,
    I16,
    I32,
    I64,
    I128,
    STR,
    TIME,
    U8,
    U16,
    U32,
    U64,
    U128,
    list_of,
    optional,
)
from ixc.simple_time import Duration, Time


def _encode(key_type, value, terminal=False):
    writer = ReverseWriter(key_field_size(key_type, value, terminal))
    encode_key_field(key_type, value, writer, terminal)
    return writer.finish()


CASES = [
    (U8, 200),
    (U16, 65535),
    (U32, 123456),
    (U64, (1 << 64) - 1),
    (U128, (1 << 100) + 7),
    (I8, -128),
    (I16, -2),
    (I32, 2147483647),
    (I64, -(1 << 63)),
    (I128, -12345678901234567890),
    (BOOL, True),
    (BOOL, False),
    (TIME, Time.from_unix_secs(1700000000)),
    (DURATION, -Duration.HOUR),
    (ACCOUNT_ID, AccountID(1234567890)),
    (STR, "héllo"),
    (STR, ""),
    (BYTES, b"\x00\x01\xff"),
    (BYTES, b""),
]


@pytest.mark.parametrize("terminal", [False, True])
@pytest.mark.parametrize("key_type,value", CASES)
def test_roundtrip(key_type, value, terminal):
    data = _encode(key_type, value, terminal)
    reader = Reader(data)
    assert decode_key_field(key_type, reader, terminal) == value
    assert len(reader) == 0


@pytest.mark.parametrize("key_type,value", CASES)
def test_non_terminal_segment_is_self_delimiting(key_type, value):
    data = _encode(key_type, value) + b"rest"
    reader = Reader(data)
    assert decode_key_field(key_type, reader) == value
    assert reader.remaining == b"rest"


def test_signed_zero_flips_sign_bit():
    assert _encode(I8, 0) == b"\x80"


def test_unsigned_is_big_endian():
    assert _encode(U16, 258) == b"\x01\x02"


def test_string_terminator_and_bytes_length():
    assert _encode(STR, "ab") == b"ab\x00"
    assert _encode(BYTES, b"xy") == b"\x00\x00\x00\x02xy"
    assert _encode(STR, "ab", terminal=True) == b"ab"


def test_sizes_differ_by_framing():
    assert key_field_size(STR, "abc") == key_field_size(STR, "abc", True) + 1
    assert key_field_size(BYTES, b"abc") == key_field_size(BYTES, b"abc", True) + 4


@given(st.integers(-(1 << 31), (1 << 31) - 1), st.integers(-(1 << 31), (1 << 31) - 1))
def test_i32_order_preserved(a, b):
    assert (a < b) == (_encode(I32, a) < _encode(I32, b))


@given(st.integers(-(1 << 127), (1 << 127) - 1), st.integers(-(1 << 127), (1 << 127) - 1))
def test_time_order_preserved(a, b):
    ta, tb = Time.from_unix_nanos(a), Time.from_unix_nanos(b)
    assert (ta < tb) == (_encode(TIME, ta) < _encode(TIME, tb))


def test_string_without_terminator_is_out_of_data():
    with pytest.raises(DecodeError) as info:
        decode_key_field(STR, Reader(b"abc"))
    assert info.value.kind is DecodeErrorKind.OUT_OF_DATA


def test_invalid_utf8():
    with pytest.raises(DecodeError) as info:
        decode_key_field(STR, Reader(b"\xff\xfe"), terminal=True)
    assert info.value.kind is DecodeErrorKind.INVALID_UTF8


def test_short_integer_is_out_of_data():
    with pytest.raises(DecodeError) as info:
        decode_key_field(U32, Reader(b"\x00\x01"))
    assert info.value.kind is DecodeErrorKind.OUT_OF_DATA


def test_short_bytes_payload_is_out_of_data():
    with pytest.raises(DecodeError) as info:
        decode_key_field(BYTES, Reader(b"\x00\x00\x00\x05ab"))
    assert info.value.kind is DecodeErrorKind.OUT_OF_DATA


def test_out_of_range_value():
    with pytest.raises(ValueError):
        key_field_size(U8, 256)
    with pytest.raises(ValueError):
        key_field_size(I8, 128)


def test_wrong_value_type():
    with pytest.raises(TypeError):
        key_field_size(TIME, 5)
    with pytest.raises(TypeError):
        key_field_size(U32, True)


@pytest.mark.parametrize("bad_type", [optional(U32), list_of(U32)])
def test_unsupported_key_types(bad_type):
    with pytest.raises(TypeError):
        key_field_size(bad_type, 1)


def test_nul_in_non_terminal_string_rejected():
    with pytest.raises(ValueError):
        key_field_size(STR, "a\x00b")


def test_writer_too_small():
    writer = ReverseWriter(2)
    with pytest.raises(EncodeError) as info:
        encode_key_field(U32, 1, writer)
    assert info.value.kind is EncodeErrorKind.OUT_OF_SPACE