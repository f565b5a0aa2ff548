from typing import Annotated, List, Optional
from unittest.mock import Mock

import pytest

from ixc.schema.coding import (
    DecodeError,
    DecodeErrorKind,
    EncodeError,
    EncodeErrorKind,
    StructDecodeVisitor,
    StructEncodeVisitor,
)
from ixc.schema.derive import schema_struct, struct_type_of, value_type_of
from ixc.schema.field import Kind
from ixc.schema.types import I32, U128, list_of, optional


@schema_struct(sealed=True)
class Coin:
    denom: str
    amount: Annotated[int, U128]


@schema_struct(sealed=False)
class Wallet:
    owner: str
    main: Coin
    tags: Annotated[List[int], list_of(I32)]
    note: Annotated[Optional[int], optional(I32)]


class Plain:
    pass


def test_struct_type_describes_fields():
    st = struct_type_of(Coin)
    assert st.name == "Coin"
    assert st.sealed is True
    assert [f.name for f in st.fields] == ["denom", "amount"]
    assert [f.kind for f in st.fields] == [Kind.STRING, Kind.UINT_N]


def test_unsealed_struct_and_nested_kinds():
    st = struct_type_of(Wallet)
    assert st.sealed is False
    assert [f.kind for f in st.fields] == [Kind.STRING, Kind.STRUCT, Kind.LIST, Kind.INT32]
    assert st.fields[3].nullable is True


def test_defaults_follow_types():
    coin = value_type_of(Coin).referenced()
    assert coin.denom == ""
    assert coin.amount == 0
    wallet = value_type_of(Wallet).referenced()
    assert wallet.main == Coin()
    assert wallet.tags == []
    assert wallet.note is None


def test_list_defaults_are_not_shared():
    wallet_cls = value_type_of(Wallet).referenced
    first, second = wallet_cls(), wallet_cls()
    first.tags.append(1)
    assert second.tags == []


def test_value_type_of_refers_to_class():
    vt = value_type_of(Coin)
    assert vt.kind is Kind.STRUCT
    assert vt.referenced is Coin


def test_registered_as_visitors():
    coin = value_type_of(Coin).referenced("uatom", 5)
    assert isinstance(coin, StructEncodeVisitor)
    assert isinstance(coin, StructDecodeVisitor)
    assert coin.denom == "uatom"


def test_encode_field_uses_field_type():
    coin = value_type_of(Coin).referenced("uatom", 1234567890)
    encoder = Mock()
    coin.encode_field(0, encoder)
    encoder.encode_str.assert_called_once_with("uatom")
    coin.encode_field(1, encoder)
    encoder.encode_u128.assert_called_once_with(1234567890)


def test_encode_whole_struct_delegates_to_encoder():
    coin = value_type_of(Coin).referenced("uatom", 1)
    encoder = Mock()
    coin.encode(encoder)
    encoder.encode_struct.assert_called_once_with(coin, struct_type_of(Coin))


def test_decode_field_sets_attribute():
    coin = value_type_of(Coin).referenced()
    decoder = Mock()
    decoder.decode_str.return_value = "foo"
    decoder.decode_u128.return_value = 9876543210
    coin.decode_field(0, decoder)
    coin.decode_field(1, decoder)
    assert coin == Coin("foo", 9876543210)


def test_encode_field_out_of_range():
    coin = value_type_of(Coin).referenced()
    with pytest.raises(EncodeError) as info:
        coin.encode_field(2, Mock())
    assert info.value.kind is EncodeErrorKind.UNKNOWN_ERROR


def test_decode_field_out_of_range():
    coin = value_type_of(Coin).referenced()
    with pytest.raises(DecodeError) as info:
        coin.decode_field(5, Mock())
    assert info.value.kind is DecodeErrorKind.UNKNOWN_FIELD_NUMBER


def test_sealed_must_be_declared():
    with pytest.raises(TypeError):
        schema_struct(Plain)


def test_unannotatable_field_rejected():
    class Bad:
        count: int

    with pytest.raises(TypeError):
        schema_struct(Bad, sealed=True)


def test_string_annotation_rejected():
    class Deferred:
        name: "str"

    with pytest.raises(TypeError):
        schema_struct(Deferred, sealed=True)


def test_struct_type_of_rejects_plain_class():
    with pytest.raises(TypeError):
        struct_type_of(Plain)
    with pytest.raises(TypeError):
        value_type_of(Plain)