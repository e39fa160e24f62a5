"""
Contains the fixed parameters of SHA-1 and HMAC-SHA1.

https://datatracker.ietf.org/doc/html/rfc3174 \\
https://datatracker.ietf.org/doc/html/rfc2104
"""

BLOCK_SIZE = 64
"""Size in bytes of one SHA-1 message block, which is also the HMAC key size."""

DIGEST_SIZE = 20
"""Size in bytes of a SHA-1 digest (and so of an HMAC-SHA1 tag)."""

LENGTH_FIELD_SIZE = 8
"""The message bit length is appended as a 64-bit big-endian integer."""

LENGTH_FIELD_OFFSET = BLOCK_SIZE - LENGTH_FIELD_SIZE

SCHEDULE_LENGTH = 80

WORD_MASK = 0xFFFFFFFF
BIT_LENGTH_MASK = 0xFFFFFFFFFFFFFFFF

INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

# One per 20-round phase
ROUND_CONSTANTS = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)

OUTER_PAD_BYTE = 0x5C
INNER_PAD_BYTE = 0x36

PADDING_START = 0x80
