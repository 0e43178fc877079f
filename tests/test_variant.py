import io

import pytest

from cfl.variant import Variant, VariantType


@pytest.mark.parametrize("value, expected", [(True, "true"), (False, "false")])
def test_print_bool(value, expected):
    stream = io.StringIO()
    written = Variant.from_bool(value).write(stream)
    assert stream.getvalue() == expected
    assert written == len(expected)


def test_print_null():
    stream = io.StringIO()
    Variant.from_null().write(stream)
    assert stream.getvalue() == "null"


@pytest.mark.parametrize("value, expected", [(1, "1"), (0, "0"), (-123, "-123")])
def test_print_int64(value, expected):
    stream = io.StringIO()
    assert Variant.from_int64(value).write(stream) > 0
    assert stream.getvalue() == expected


@pytest.mark.parametrize(
    "value, expected",
    [(1, "1"), (0, "0"), (18446744073709551615, "18446744073709551615")],
)
def test_print_uint64(value, expected):
    stream = io.StringIO()
    assert Variant.from_uint64(value).write(stream) > 0
    assert stream.getvalue() == expected


@pytest.mark.parametrize("value, expected", [(1.0, "1.0"), (-12.3, "-12.3")])
def test_print_double(value, expected):
    stream = io.StringIO()
    assert Variant.from_double(value).write(stream) > 0
    assert expected in stream.getvalue()


@pytest.mark.parametrize("value, expected", [("hoge", '"hoge"'), ("aaa", '"aaa"')])
def test_print_string(value, expected):
    stream = io.StringIO()
    assert Variant.from_string(value).write(stream) > 0
    assert stream.getvalue() == expected


@pytest.mark.parametrize("value", ["hoge", "aaa"])
def test_string_size_matches_length(value):
    assert Variant.from_string(value).size == len(value)


def test_print_bytes():
    variant = Variant.from_bytes(bytes([0x1F, 0xAA, 0x0A, 0xFF]))
    stream = io.StringIO()
    assert variant.write(stream) > 0
    assert stream.getvalue() == "1faa0aff"
    assert variant.size == 4


def test_bytes_are_copied():
    source = bytearray(b"\x01\x02")
    variant = Variant.from_bytes(source)
    source[0] = 0xFF
    assert variant.format() == "0102"


def test_print_reference():
    stream = io.StringIO()
    assert Variant.from_reference(0x12345678).write(stream) > 0
    assert stream.getvalue() == "0x12345678"


def test_print_unknown():
    stream = io.StringIO()
    Variant().write(stream)
    assert "Unknown" in stream.getvalue()


def test_types_are_tagged():
    assert Variant.from_bool(1).type is VariantType.BOOL
    assert Variant.from_int64(5).type is VariantType.INT
    assert Variant.from_uint64(5).type is VariantType.UINT
    assert Variant.from_null().type is VariantType.NULL


def test_int64_out_of_range():
    with pytest.raises(OverflowError):
        Variant.from_int64(2**63)
    with pytest.raises(OverflowError):
        Variant.from_int64(-(2**63) - 1)


def test_uint64_out_of_range():
    with pytest.raises(OverflowError):
        Variant.from_uint64(-1)
    with pytest.raises(OverflowError):
        Variant.from_uint64(2**64)


def test_string_requires_str():
    with pytest.raises(TypeError):
        Variant.from_string(b"hoge")


def test_str_matches_format():
    variant = Variant.from_int64(-123)
    assert str(variant) == variant.format() == "-123"