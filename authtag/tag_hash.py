"""
SHA-1 as specified in RFC 3174.

https://datatracker.ietf.org/doc/html/rfc3174
"""

from authtag.byte_ops import BytesLike, as_bytes
from authtag.constants import (BIT_LENGTH_MASK, BLOCK_SIZE, INITIAL_STATE, LENGTH_FIELD_OFFSET,
                               LENGTH_FIELD_SIZE, PADDING_START, ROUND_CONSTANTS, SCHEDULE_LENGTH, WORD_MASK)


def rotate_left(value: int, count: int) -> int:
    """Rotates a 32-bit word left by `count` bits."""
    return ((value << count) | (value >> (32 - count))) & WORD_MASK


def compress(state: list[int], block: bytes) -> None:
    """
    Runs the SHA-1 compression function over one block, updating `state` in place.

    Parameters
    ----
       - `state` - the five 32-bit hash words `h0..h4`
       - `block` - a single 64-byte (512-bit) block
    """
    # break chunk into sixteen 32-bit big-endian words w[i], 0 ≤ i ≤ 15
    w = [int.from_bytes(block[i:i + 4], 'big') for i in range(0, BLOCK_SIZE, 4)]

    # Message schedule: extend the sixteen 32-bit words into eighty 32-bit words:
    for i in range(16, SCHEDULE_LENGTH):
        w.append(rotate_left(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))

    # Initialize hash value for this chunk:
    a, b, c, d, e = state

    # Main loop:
    for i in range(SCHEDULE_LENGTH):
        if 0 <= i <= 19:
            f = (b & c) | (~b & d)
            k = ROUND_CONSTANTS[0]
        elif 20 <= i <= 39:
            f = b ^ c ^ d
            k = ROUND_CONSTANTS[1]
        elif 40 <= i <= 59:
            f = (b & c) | (b & d) | (c & d)
            k = ROUND_CONSTANTS[2]
        else:
            f = b ^ c ^ d
            k = ROUND_CONSTANTS[3]

        temp = (rotate_left(a, 5) + f + e + k + w[i]) & WORD_MASK
        e = d
        d = c
        c = rotate_left(b, 30)
        b = a
        a = temp

    # Add this chunk's hash to result so far:
    for i, v in enumerate((a, b, c, d, e)):
        state[i] = (state[i] + v) & WORD_MASK


class DigestState:
    """
    Running state of one SHA-1 computation.

    A state is used for exactly one message: `absorb` it (in as many pieces as convenient),
    then call `finalize` once. The pending buffer never holds a full block between calls.
    """

    def __init__(self):
        self.words = list(INITIAL_STATE)
        self.buffer = bytearray(BLOCK_SIZE)
        self.buffer_len = 0
        self.bit_length = 0
        self.finalized = False

    def absorb(self, data: bytes) -> None:
        """
        Appends `data` to the message, compressing each block as soon as it is full.

        Throws
        ----
        - `RuntimeError` if the state has already been finalized.
        """
        if self.finalized:
            raise RuntimeError("Cannot absorb into a finalized digest state.")

        view = memoryview(data)
        pos = 0
        while pos < len(view):
            take = min(BLOCK_SIZE - self.buffer_len, len(view) - pos)
            self.buffer[self.buffer_len:self.buffer_len + take] = view[pos:pos + take]
            self.buffer_len += take
            pos += take
            if self.buffer_len == BLOCK_SIZE:
                compress(self.words, self.buffer)
                self.bit_length += BLOCK_SIZE * 8
                self.buffer_len = 0

    def finalize(self) -> bytes:
        """
        Pads the message, processes the final block(s) and produces the digest.

        Returns
        ----
        A 20-byte (160-bit) digest.

        Throws
        ----
        - `RuntimeError` if the state has already been finalized.
        """
        if self.finalized:
            raise RuntimeError("Digest state has already been finalized.")
        self.finalized = True

        self.bit_length += self.buffer_len * 8
        block = self.buffer
        i = self.buffer_len
        block[i] = PADDING_START
        i += 1
        if self.buffer_len < LENGTH_FIELD_OFFSET:
            block[i:LENGTH_FIELD_OFFSET] = bytes(LENGTH_FIELD_OFFSET - i)
        else:
            # No room left for the length field, so it goes in an extra block
            block[i:] = bytes(BLOCK_SIZE - i)
            compress(self.words, block)
            block[:LENGTH_FIELD_OFFSET] = bytes(LENGTH_FIELD_OFFSET)

        block[LENGTH_FIELD_OFFSET:] = (self.bit_length & BIT_LENGTH_MASK).to_bytes(LENGTH_FIELD_SIZE, 'big')
        compress(self.words, block)
        self.buffer_len = 0

        # Produce the final hash value (big-endian) as a 160-bit number:
        return b''.join(word.to_bytes(4, 'big') for word in self.words)


def SHA1(data: BytesLike) -> bytes:
    """
    Calculates a SHA-1 hash for provided data.

    Parameters
    ----
       - `data` - the data to hash. May be any length. Strings are hashed as UTF-8.

    Returns
    ----
    A 20-byte (160-bit) hash.

    Throws
    ----
    - `TypeError` if `data` is neither bytes-like nor a string.
    """
    state = DigestState()
    state.absorb(as_bytes(data))
    return state.finalize()
