import json

import pytest

from evmbuiltins.jsonbytes import parse_bytes


def test_bytes_deserialization():
    values = json.loads('["", "0x", "0x12", "1234", "0x001"]')
    assert [parse_bytes(v) for v in values] == [
        b"",
        b"",
        b"\x12",
        b"\x12\x34",
        b"\x00\x01",
    ]


def test_bytes_into():
    assert list(parse_bytes("0xff11")) == [0xFF, 0x11]


@pytest.mark.parametrize("value", ["zz", "0xzz", "123", "0X12", "12 34"])
def test_malformed_input_is_empty(value):
    assert parse_bytes(value) == b""


def test_uppercase_digits():
    assert parse_bytes("0xABcd") == b"\xab\xcd"


def test_non_string_raises():
    with pytest.raises(TypeError):
        parse_bytes(12)