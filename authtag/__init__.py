"""
SHA-1 digests and HMAC-SHA1 authentication tags.

Example usage:
    import authtag

    digest = authtag.hash(b"abc")
    tag = authtag.hmac(b"key", b"The quick brown fox jumps over the lazy dog")
"""

from authtag.constants import BLOCK_SIZE, DIGEST_SIZE
from authtag.tag_hash import SHA1 as hash
from authtag.tag_hmac import HMAC as hmac

__all__ = ['hash', 'hmac', 'BLOCK_SIZE', 'DIGEST_SIZE']
__version__ = '1.0.0'
