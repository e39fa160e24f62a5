"""
HMAC-SHA1 as specified in RFC 2104.

https://datatracker.ietf.org/doc/html/rfc2104
"""

from authtag.byte_ops import BytesLike, append, as_bytes, xor_with_byte, zero_pad
from authtag.constants import BLOCK_SIZE, INNER_PAD_BYTE, OUTER_PAD_BYTE
from authtag.log import get_logger
from authtag.tag_hash import SHA1

logger = get_logger(__name__)


def normalize_key(key: bytes) -> bytes:
    """
    Computes the block sized key.

    Keys longer than the block size are shortened by hashing them, then
    keys shorter than the block size are padded with zeros on the right.

    Returns
    ----
    A 64-byte key.
    """
    if len(key) > BLOCK_SIZE:
        logger.debug("Hashing down long HMAC key", key_length=len(key))
        key = SHA1(key)
    return zero_pad(key, BLOCK_SIZE)


def key_pads(block_sized_key: bytes) -> tuple[bytes, bytes]:
    """
    Derives the outer and inner padded keys from a normalized key.

    Returns
    ----
    A tuple `(o_key_pad, i_key_pad)`, both 64 bytes.

    Throws
    ----
    - `ValueError` if `block_sized_key` is not exactly one block long.
    """
    if len(block_sized_key) != BLOCK_SIZE:
        raise ValueError(f"HMAC key must be normalized to {BLOCK_SIZE} bytes, got {len(block_sized_key)}.")
    o_key_pad = xor_with_byte(block_sized_key, OUTER_PAD_BYTE)
    i_key_pad = xor_with_byte(block_sized_key, INNER_PAD_BYTE)
    return o_key_pad, i_key_pad


def HMAC(key: BytesLike, data: BytesLike) -> bytes:
    """
    Calculates the HMAC-SHA1 tag for the provided data.

    Parameters
    ----
       - `key` - the shared key to use for the HMAC. May be any length, including empty.
       - `data` - the data to generate an HMAC for. May be any length.

    Strings are used as their UTF-8 encoding.

    Returns
    ----
    A 20-byte tag.

    Throws
    ----
    - `TypeError` if `key` or `data` is neither bytes-like nor a string.
    """
    key = as_bytes(key, "key")
    data = as_bytes(data, "data")

    o_key_pad, i_key_pad = key_pads(normalize_key(key))
    return SHA1(append(o_key_pad, SHA1(append(i_key_pad, data))))
