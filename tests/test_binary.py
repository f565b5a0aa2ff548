from typing import Annotated, Optional

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ixc.schema.binary import NativeBinaryCodec, decode_value
from ixc.schema.coding import DecodeError, DecodeErrorKind
from ixc.schema.derive import schema_struct, value_type_of
from ixc.schema.types import (
    I8,
    I16,
    I32,
    I64,
    I128,
    STR,
    U8,
    U16,
    U32,
    U64,
    U128,
    list_of,
    optional,
)


@schema_struct(sealed=True)
class Coin:
    denom: str
    amount: Annotated[int, U128]


@schema_struct(sealed=False)
class Prims:
    a_u8: Annotated[int, U8]
    a_u16: Annotated[int, U16]
    a_u32: Annotated[int, U32]
    a_u64: Annotated[int, U64]
    a_u128: Annotated[int, U128]
    a_i8: Annotated[int, I8]
    a_i16: Annotated[int, I16]
    a_i32: Annotated[int, I32]
    a_i64: Annotated[int, I64]
    a_i128: Annotated[int, I128]
    a_bool: bool


@schema_struct(sealed=False)
class ABitOfEverything:
    primitives: Prims
    s: str
    v: bytes
    ls: Annotated[list, list_of(STR)]
    li: Annotated[list, list_of(I32)]
    lp: Annotated[list, list_of(value_type_of(Prims))]
    os: Annotated[Optional[str], optional(STR)]
    op: Annotated[Optional[Prims], optional(value_type_of(Prims))]


CODEC = NativeBinaryCodec()


def test_u32_decode():
    assert decode_value(CODEC, bytes([10, 0, 0, 0]), U32) == 10


def test_u32_encode():
    assert CODEC.encode_value(10, U32) == bytes([10, 0, 0, 0])


def test_decode_borrowed_string():
    assert decode_value(CODEC, "hello".encode(), STR) == "hello"


def test_decode_owned_string():
    assert CODEC.decode_value(bytearray(b"hello"), STR) == "hello"


def test_decode_short_input_is_out_of_data():
    with pytest.raises(DecodeError) as info:
        decode_value(CODEC, b"\x01\x02", U32)
    assert info.value.kind is DecodeErrorKind.OUT_OF_DATA


def test_coin():
    coin = Coin(denom="uatom", amount=1234567890)
    data = CODEC.encode_value(coin, value_type_of(Coin))
    assert decode_value(CODEC, data, value_type_of(Coin)) == coin


def test_coins():
    coins = [
        Coin(denom="uatom", amount=1234567890),
        Coin(denom="foo", amount=9876543210),
    ]
    list_type = list_of(value_type_of(Coin))
    data = CODEC.encode_value(coins, list_type)
    assert decode_value(CODEC, data, list_type) == coins


def test_codecs_compare_equal():
    assert NativeBinaryCodec() == CODEC


def _ints(bits, signed):
    if signed:
        half = 1 << (bits - 1)
        return st.integers(-half, half - 1)
    return st.integers(0, (1 << bits) - 1)


prims_strategy = st.builds(
    Prims,
    a_u8=_ints(8, False),
    a_u16=_ints(16, False),
    a_u32=_ints(32, False),
    a_u64=_ints(64, False),
    a_u128=_ints(128, False),
    a_i8=_ints(8, True),
    a_i16=_ints(16, True),
    a_i32=_ints(32, True),
    a_i64=_ints(64, True),
    a_i128=_ints(128, True),
    a_bool=st.booleans(),
)

everything_strategy = st.builds(
    ABitOfEverything,
    primitives=prims_strategy,
    s=st.text(max_size=20),
    v=st.binary(max_size=20),
    ls=st.lists(st.text(max_size=10), max_size=5),
    li=st.lists(_ints(32, True), max_size=5),
    lp=st.lists(prims_strategy, max_size=3),
    os=st.none() | st.text(max_size=10),
    op=st.none() | prims_strategy,
)


@settings(max_examples=50, deadline=None)
@given(everything_strategy)
def test_roundtrip(value):
    value_type = value_type_of(ABitOfEverything)
    data = CODEC.encode_value(value, value_type)
    assert decode_value(CODEC, data, value_type) == value