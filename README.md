# ixc

Building blocks for account-based message passing, and a schema system with a compact native binary encoding. Everything is plain Python with no third-party dependencies.

## Installation

```
pip install ixc
```

The tests need the `test` extra:

```
pip install "ixc[test]"
pytest
```

## Message API

- `ixc.account_id.AccountID`: the unique unsigned 128-bit id of an account. Id zero is the null account: `AccountID(0).is_empty()` is true and `AccountID.EMPTY` holds it. `to_bytes()` and `AccountID.from_bytes()` convert to and from 16 little-endian bytes, and `int()` gives the number. `ixc.account_id.ROOT_ACCOUNT` is `AccountID(1)`.
- `ixc.code.SystemCode` and `ixc.code.ErrorCode`: `ErrorCode` is an exception holding a system code, a handler code (any enum whose values fit in a byte) or an unknown 16-bit code. `int(err)` gives its 16-bit value: system codes take 0 to 255, handler codes 256 to 511. `ErrorCode.from_u16(value, handler_codes=None)` turns a number back into an error code, and two error codes are equal when their numbers are. `SystemCode.valid_handler_code()` tells whether a handler may return a code directly (codes from 128 up).
- `ixc.gas.Gas`: a gas meter. `Gas.limited(n)` sets a limit (zero means none) and `Gas.unlimited()` only records consumption. `consume(amount)` adds to `consumed` and raises `ErrorCode(SystemCode.OUT_OF_GAS)` once the limit is passed; `limit` and `left` are `None` when there is no limit.
- `ixc.message`: `Param` is empty or carries bytes, a string, a u128 or an `AccountID` (`ParamKind` says which). Build one with `Param.of_bytes()`, `of_string()`, `of_u128()`, `of_account_id()`, `empty()` or `Param.from_value()`. Its `expect_bytes()`, `expect_string()`, `expect_u128()` and `expect_account_id()` raise an encoding `ErrorCode` when the kind does not match. `Request(selector, *inputs)` holds up to three inputs (`in1`, `in2`, `in3`), `Response(*outputs)` up to two (`out1`, `out2`); missing ones are empty and plain values are wrapped with `Param.from_value()`. `Message(target_account, request)` addresses a request to an account.
- `ixc.handler`: `RawHandler`, whose `handle_msg`, `handle_query` and `handle_system` raise `MESSAGE_NOT_HANDLED` unless overridden; the abstract `HostBackend` interface; and `InvokeParams`, which carries an optional `Gas` meter.
- `ixc.simple_time`: `Time` (nanoseconds since the Unix epoch) and `Duration` (nanoseconds). `Time + Duration`, `Time - Duration` and `Time - Time` work, as do `since()`, `until()`, negating a duration and multiplying it by an integer. `Duration.SECOND`, `MINUTE`, `HOUR`, `DAY` and `WEEK` are provided.

## Schema

- `ixc.schema.field`: `Kind` (the basic type of a field) and `Field`, with `with_name()`.
- `ixc.schema.schema_types`: `StructType`, `EnumType`, `EnumValueDefinition`, `OneOfType`, `OneOfCase`, `MessageDescriptor`, `StateObjectType` and `Schema`, plus `schema_type_name()`, `sort_schema_types()` (by name) and `unnamed_struct_type()`.
- `ixc.schema.types`: `ValueType` and the ready-made types `U8`, `U16`, `U32`, `U64`, `U128`, `I8`, `I16`, `I32`, `I64`, `I128`, `BOOL`, `STR`, `BYTES`, `ACCOUNT_ID`, `TIME` and `DURATION`; builders `uint_n()`, `int_n()`, `optional()`, `list_of()`, `struct_of()` and `enum_of()`; and `to_field()` and `fields_of()`. Single bytes and lists cannot be list elements.
- `ixc.schema.derive`: `schema_struct(sealed=...)` turns a class into a schema struct (a dataclass with `STRUCT_TYPE`, `encode_field` and `decode_field`). `sealed` must be given. Fields are annotated with `str`, `bytes`, `bool`, `AccountID`, `Time`, `Duration`, another schema struct, or `Annotated[..., <ValueType>]`; annotations must not be strings, so do not use `from __future__ import annotations` in the defining module. `struct_type_of()` and `value_type_of()` give a struct class's schema and value type.
- `ixc.schema.coding`: the `Encoder` and `Decoder` interfaces, `StructEncodeVisitor` and `StructDecodeVisitor`, and the exceptions `DecodeError` and `EncodeError`. Each exception has a `kind` and `to_error_code()`, which gives the message API's encoding error.
- `ixc.schema.value`: `encode_typed()`, `decode_typed()`, `decode_one()`, `default_value()`, `TypedValue`, `ListEncoder`, `ListBuilder`, `encode_optional_value()` and `decode_optional_value()`.
- `ixc.schema.buffer`: `ReverseWriter`, a fixed-size buffer filled from the end, and `Reader`.
- `ixc.schema.binary`: the `Codec` interface and `NativeBinaryCodec`. The lower-level pieces are `ixc.schema.binary_encoder` (`BinaryEncoder`, `SizeCounter`, `encoded_size()`, `encode_value()`) and `ixc.schema.binary_decoder` (`BinaryDecoder`, `decode_value()`).
- `ixc.schema.key` and `ixc.schema.key_field`: order-preserving encoding of state object keys. `ixc.schema.object_value`: `encode_object_value()`, `decode_object_value()` and `pseudo_type()` for state object values.

### The native binary format

Integers are little-endian, with their fixed width. Account ids, times and durations take 16 bytes. At the top level a string or byte string takes the rest of the input and an optional value is simply present or absent. Inside a struct or list, strings, byte strings, structs and lists carry a 32-bit length prefix, and optional values a one-byte presence flag. A list starts with its 32-bit element count.

### Key encoding

Key integers are big-endian, and signed ones have their sign bit flipped, so byte order matches numeric order. A string that is not the last field of a key ends with a zero byte; bytes that are not last carry a 32-bit big-endian length. The last field takes the rest of the key.

## Example

```python
from typing import Annotated

from ixc.schema import types
from ixc.schema.binary import NativeBinaryCodec
from ixc.schema.derive import schema_struct, value_type_of
from ixc.schema.key import decode_object_key, encode_object_key


@schema_struct(sealed=True)
class Coin:
    denom: str
    amount: Annotated[int, types.U128]


codec = NativeBinaryCodec()
coin = Coin(denom="uatom", amount=1234567890)
data = codec.encode_value(coin, value_type_of(Coin))
assert codec.decode_value(data, value_type_of(Coin)) == coin

coins = [coin, Coin(denom="foo", amount=9876543210)]
list_type = types.list_of(value_type_of(Coin))
assert codec.decode_value(codec.encode_value(coins, list_type), list_type) == coins

key = encode_object_key(b"\x01", (7, "alice"), [types.U32, types.STR])
assert key == b"\x01\x00\x00\x00\x07alice"
assert decode_object_key(key[1:], [types.U32, types.STR]) == (7, "alice")
```

## What it does not do

- There is only the native binary codec; there is no JSON encoding.
- `HostBackend` is an interface only. The package has no host that routes messages between accounts, runs handlers or stores state; `ixc.schema.key` and `ixc.schema.object_value` only turn keys and values into bytes and back.
- `Kind` lists decimals, floats, JSON, one-ofs and enum types, but values of those kinds, other than enums as 32-bit integers, cannot be encoded.