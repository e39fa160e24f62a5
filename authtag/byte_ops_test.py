import sys

import pytest

import authtag.byte_ops as byte_ops


def test_as_bytes():
    assert byte_ops.as_bytes(b"abc") == b"abc"
    assert byte_ops.as_bytes(bytearray(b"abc")) == b"abc"
    assert type(byte_ops.as_bytes(bytearray(b"abc"))) is bytes
    assert byte_ops.as_bytes(memoryview(b"abc")) == b"abc"
    assert byte_ops.as_bytes("ü") == b"\xc3\xbc"
    with pytest.raises(TypeError, match="message"):
        byte_ops.as_bytes(1.5, "message")


def test_xor():
    assert byte_ops.byte_xor(b"\x0f\xf0", b"\xff\xff") == b"\xf0\x0f"
    assert byte_ops.byte_xor(b"\x01\x02\x03", b"\x01") == b"\x00"
    assert byte_ops.xor_with_byte(b"\x00\x5c\xff", 0x5c) == b"\x5c\x00\xa3"
    assert byte_ops.xor_with_byte(b"", 0x36) == b""


def test_zero_pad():
    assert byte_ops.zero_pad(b"", 4) == bytes(4)
    assert byte_ops.zero_pad(b"ab", 4) == b"ab\x00\x00"
    assert byte_ops.zero_pad(b"abcd", 4) == b"abcd"
    assert byte_ops.zero_pad(b"abcdef", 4) == b"abcdef"


def test_append():
    assert byte_ops.append() == b""
    assert byte_ops.append(b"a", b"", b"bc") == b"abc"


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
