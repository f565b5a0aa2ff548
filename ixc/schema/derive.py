"""Derivation of struct schemas and codecs from annotated classes."""

from __future__ import annotations

import dataclasses
import functools
from typing import (
    Annotated,
    Any,
    ClassVar,
    Dict,
    Optional,
    Tuple,
    get_args,
    get_origin,
)

from ..account_id import AccountID
from ..simple_time import Duration, Time
from .coding import (
    DecodeError,
    DecodeErrorKind,
    Decoder,
    EncodeError,
    EncodeErrorKind,
    Encoder,
    StructDecodeVisitor,
    StructEncodeVisitor,
)
from .schema_types import StructType
from .types import (
    ACCOUNT_ID,
    BOOL,
    BYTES,
    DURATION,
    STR,
    TIME,
    ValueType,
    struct_of,
    to_field,
)
from .value import decode_typed, default_value, encode_typed

_PLAIN_TYPES: Dict[Any, ValueType] = {
    str: STR,
    bytes: BYTES,
    bool: BOOL,
    AccountID: ACCOUNT_ID,
    Time: TIME,
    Duration: DURATION,
}

_FIELDS_ATTR = "_schema_fields"


def _is_schema_struct(obj: Any) -> bool:
    return (
        isinstance(obj, type)
        and isinstance(getattr(obj, "STRUCT_TYPE", None), StructType)
        and callable(getattr(obj, "decode_field", None))
        and callable(getattr(obj, "encode_field", None))
    )


def _check_hint(name: str, hint: Any) -> Any:
    if isinstance(hint, str):
        raise TypeError(
            f"field {name!r} has a string annotation; schema structs need "
            "annotations that are evaluated when the class is defined"
        )
    return hint


def _own_annotations(cls: type) -> Dict[str, Any]:
    return dict(cls.__dict__.get("__annotations__", {}))


def _is_class_var(hint: Any) -> bool:
    return hint is ClassVar or get_origin(hint) is ClassVar


def _resolve(name: str, hint: Any) -> ValueType:
    hint = _check_hint(name, hint)
    if get_origin(hint) is Annotated:
        for meta in hint.__metadata__:
            if isinstance(meta, ValueType):
                return meta
            if _is_schema_struct(meta):
                return struct_of(meta)
        hint = get_args(hint)[0]
    if isinstance(hint, ValueType):
        return hint
    if _is_schema_struct(hint):
        return struct_of(hint)
    try:
        return _PLAIN_TYPES[hint]
    except (KeyError, TypeError):
        raise TypeError(
            f"field {name!r} has no schema type; annotate it with Annotated[..., <ValueType>]"
        ) from None


def _derive(cls: type, sealed: bool) -> type:
    if not dataclasses.is_dataclass(cls):
        for name, hint in _own_annotations(cls).items():
            if isinstance(hint, str):
                _check_hint(name, hint)
            if _is_class_var(hint):
                continue
            if name not in cls.__dict__:
                value_type = _resolve(name, hint)
                setattr(
                    cls,
                    name,
                    dataclasses.field(default_factory=functools.partial(default_value, value_type)),
                )
        cls = dataclasses.dataclass(cls)

    specs: Tuple[Tuple[str, ValueType], ...] = tuple(
        (f.name, _resolve(f.name, f.type)) for f in dataclasses.fields(cls)
    )
    struct_type = StructType(
        name=cls.__name__,
        fields=tuple(to_field(value_type).with_name(name) for name, value_type in specs),
        sealed=sealed,
    )

    def encode_field(self: Any, index: int, encoder: Encoder) -> None:
        """Encode the field at ``index``."""
        if not 0 <= index < len(specs):
            raise EncodeError(EncodeErrorKind.UNKNOWN_ERROR)
        name, value_type = specs[index]
        encode_typed(value_type, getattr(self, name), encoder)

    def decode_field(self: Any, index: int, decoder: Decoder) -> None:
        """Decode the field at ``index``."""
        if not 0 <= index < len(specs):
            raise DecodeError(DecodeErrorKind.UNKNOWN_FIELD_NUMBER)
        name, value_type = specs[index]
        object.__setattr__(self, name, decode_typed(value_type, decoder))

    def encode(self: Any, encoder: Encoder) -> None:
        """Encode the whole struct."""
        encoder.encode_struct(self, struct_type)

    def decode(self: Any, decoder: Decoder) -> None:
        """Decode the whole struct into this instance."""
        decoder.decode_struct(self, struct_type)

    cls.STRUCT_TYPE = struct_type
    setattr(cls, _FIELDS_ATTR, specs)
    cls.encode_field = encode_field
    cls.decode_field = decode_field
    if "encode" not in cls.__dict__:
        cls.encode = encode
    if "decode" not in cls.__dict__:
        cls.decode = decode
    StructEncodeVisitor.register(cls)
    StructDecodeVisitor.register(cls)
    return cls


def schema_struct(
    cls: Optional[type] = None, *, sealed: Optional[bool] = None
) -> Any:
    """Make a class a schema struct.

    Each field is annotated with its schema type, either through
    ``Annotated[..., <ValueType>]``, as another schema struct, or as one of
    ``str``, ``bytes``, ``bool``, ``AccountID``, ``Time`` or ``Duration``.
    ``sealed`` must be given: a sealed struct cannot gain new fields, an
    unsealed (non-exhaustive) one can. The class becomes a dataclass whose
    fields default to the defaults of their types.
    """
    if sealed is None:
        raise TypeError(
            "struct must declare sealed=True or sealed=False to state whether "
            "adding new fields is a breaking change"
        )

    def wrap(target: type) -> type:
        if not isinstance(target, type):
            raise TypeError("schema_struct can only be applied to classes")
        return _derive(target, bool(sealed))

    if cls is None:
        return wrap
    return wrap(cls)


def struct_type_of(cls: type) -> StructType:
    """The struct schema of a schema struct class."""
    if not _is_schema_struct(cls):
        raise TypeError(f"{cls!r} is not a schema struct")
    return cls.STRUCT_TYPE


def value_type_of(cls: type) -> ValueType:
    """The value type of a schema struct class."""
    if not _is_schema_struct(cls):
        raise TypeError(f"{cls!r} is not a schema struct")
    return struct_of(cls)