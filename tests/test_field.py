import dataclasses

import pytest

from ixc.schema.field import Field, Kind


def test_kind_explicit_values():
    assert Field("s", Kind.STRING).kind.value == 1
    assert Field("b", Kind.BYTES).kind.value == 2
    assert Field("u", Kind.UINT64).kind.value == 10


def test_kind_from_int():
    assert Kind(1) is Kind.STRING
    assert Kind(10) is Kind.UINT64


def test_kind_values_are_consecutive_and_unique():
    values = [k.value for k in Kind]
    assert values == list(range(1, len(values) + 1))
    assert [Kind(v) for v in values] == list(Kind)


def test_kind_unknown_value():
    with pytest.raises(ValueError):
        Kind(0)


def test_field_defaults():
    field = Field("x", Kind.UINT32)
    assert field.nullable is False
    assert field.element_kind is None
    assert field.referenced_type == ""


def test_with_name_returns_copy():
    field = Field("", Kind.LIST, nullable=True, element_kind=Kind.INT32)
    named = field.with_name("values")
    assert named.name == "values"
    assert field.name == ""
    assert named.kind is Kind.LIST
    assert named.nullable is True
    assert named.element_kind is Kind.INT32


def test_field_equality():
    assert Field("a", Kind.BOOL) == Field("a", Kind.BOOL)
    assert Field("a", Kind.BOOL) != Field("a", Kind.BOOL, nullable=True)


def test_field_is_frozen():
    field = Field("a", Kind.BOOL)
    with pytest.raises(dataclasses.FrozenInstanceError):
        field.name = "b"
    assert field.name == "a"
    assert field.with_name("b") == Field("b", Kind.BOOL)