import pytest
from hypothesis import given
from hypothesis import strategies as st

from ixc.schema.buffer import Reader, ReverseWriter
from ixc.schema.coding import DecodeError, DecodeErrorKind, EncodeError, EncodeErrorKind


def test_writer_writes_in_reverse_order():
    writer = ReverseWriter(4)
    writer.write(b"ab")
    writer.write(b"cd")
    assert writer.finish() == b"cdab"


def test_writer_pos_moves_backwards():
    writer = ReverseWriter(5)
    assert writer.pos == 5
    writer.write(b"xyz")
    assert writer.pos == 2


def test_writer_out_of_space():
    writer = ReverseWriter(2)
    writer.write(b"a")
    with pytest.raises(EncodeError) as info:
        writer.write(b"bc")
    assert info.value.kind is EncodeErrorKind.OUT_OF_SPACE
    assert writer.finish() == b"a"


def test_writer_partial_fill_finish():
    writer = ReverseWriter(10)
    writer.write(b"hi")
    assert writer.finish() == b"hi"


@given(st.lists(st.binary(max_size=8), max_size=10))
def test_writer_matches_reversed_join(chunks):
    writer = ReverseWriter(sum(len(c) for c in chunks))
    for chunk in chunks:
        writer.write(chunk)
    assert writer.finish() == b"".join(reversed(chunks))
    assert writer.pos == 0


def test_reader_reads_sequentially():
    reader = Reader(b"hello")
    assert reader.read_bytes(2) == b"he"
    assert reader.remaining == b"llo"
    assert len(reader) == 3


def test_reader_out_of_data():
    reader = Reader(b"ab")
    with pytest.raises(DecodeError) as info:
        reader.read_bytes(3)
    assert info.value.kind is DecodeErrorKind.OUT_OF_DATA
    assert reader.remaining == b"ab"


def test_reader_is_done_with_leftovers():
    reader = Reader(b"ab")
    reader.read_bytes(1)
    with pytest.raises(DecodeError) as info:
        reader.is_done()
    assert info.value.kind is DecodeErrorKind.INVALID_DATA


@given(st.binary(), st.integers(min_value=0, max_value=64))
def test_reader_split_roundtrip(data, cut):
    cut = min(cut, len(data))
    reader = Reader(data)
    head = reader.read_bytes(cut)
    tail = reader.read_bytes(len(data) - cut)
    assert head + tail == data
    assert reader.is_done() is None
    assert reader.remaining == b""