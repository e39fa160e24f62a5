from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]


def as_bytes(data: BytesLike, name: str = "data") -> bytes:
    """
    Coerces hash input to `bytes`. Strings are encoded as UTF-8.

    Throws
    ----
    - `TypeError` if `data` is not bytes-like or a string.
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode('utf-8')
    raise TypeError(f"{name} must be bytes-like or str, not {type(data).__name__}")


def byte_xor(ba1: bytes, ba2: bytes) -> bytes:
    # Truncates to the shorter input
    return bytes([_a ^ _b for _a, _b in zip(ba1, ba2)])


def xor_with_byte(data: bytes, value: int) -> bytes:
    """XORs every byte of `data` with the single byte `value`."""
    return byte_xor(data, bytes([value]) * len(data))


def zero_pad(data: bytes, length: int) -> bytes:
    """
    Pads `data` on the right with zero bytes up to `length`.
    Data already at least `length` long is returned unchanged.
    """
    if len(data) >= length:
        return data
    return data + b'\x00' * (length - len(data))


def append(*parts: bytes) -> bytes:
    """Concatenates byte sequences, in order."""
    return b''.join(parts)
