from __future__ import annotations
import pytest

from rpmcodec.header import EntryType, int32_entry, binary_entry, string_array_entry


def test_string_array_double_nul():
    e = string_array_entry(["a", "bb"])
    assert e.type == EntryType.STRING_ARRAY == 8
    assert e.count == 2
    assert e.data == b"a\x00bb\x00\x00"


def test_string_array_empty_and_utf8():
    assert string_array_entry([]).data == b"\x00"
    assert string_array_entry([]).count == 0
    e = string_array_entry(["é"])
    assert e.data == "é".encode("utf-8") + b"\x00\x00"
    assert e.count == 1


def test_int32_big_endian_no_padding():
    e = int32_entry([1, -1, 0x01020304])
    assert e.type == EntryType.INT32 == 4
    assert e.count == 3
    assert e.data == b"\x00\x00\x00\x01" + b"\xff\xff\xff\xff" + b"\x01\x02\x03\x04"
    assert int32_entry([]).data == b""


def test_binary_passthrough():
    raw = b"\x00\x01raw\xff"
    e = binary_entry(raw)
    assert e.type == EntryType.BINARY == 7
    assert (e.count, e.data) == (len(raw), raw)


def test_entries_are_immutable():
    e = binary_entry(b"x")
    with pytest.raises(AttributeError):
        e.count = 2  # type: ignore[misc]


def test_alignment_only_for_int32():
    assert int32_entry([1]).alignment == 4
    assert binary_entry(b"x").alignment == 1
    assert string_array_entry(["x"]).alignment == 1


@pytest.mark.parametrize("v", [2**31, -(2**31) - 1])
def test_int32_out_of_range_raises(v):
    with pytest.raises(OverflowError):
        int32_entry([v])
    assert int32_entry([2**31 - 1, -(2**31)]).data == b"\x7f\xff\xff\xff\x80\x00\x00\x00"
