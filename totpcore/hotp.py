"""
HMAC-based One-Time Password (RFC 4226)
https://en.wikipedia.org/wiki/HMAC-based_one-time_password
"""
import hashlib
import hmac
import struct

from .constants import DEFAULT_DIGITS, MAX_DIGITS
from .errors import InvalidSecret

COUNTER_LIMIT = 1 << 64


def int_to_bytes(counter: int) -> bytes:
    """
    Pack a counter into the 8-byte big-endian message fed to HMAC
    """
    if not 0 <= counter < COUNTER_LIMIT:
        raise ValueError("counter must be an unsigned 64-bit integer")
    return struct.pack(">Q", counter)


def truncate(digest: bytes) -> int:
    """
    Dynamic truncation: 31-bit integer read from the digest at the offset given by its last nibble
    """
    offset = digest[-1] & 0x0F
    return struct.unpack(">I", digest[offset:offset + 4])[0] & 0x7FFFFFFF


def hotp(secret: bytes, counter: int, digits: int = DEFAULT_DIGITS) -> str:
    if not secret:
        raise InvalidSecret("secret must not be empty")
    if not 1 <= digits <= MAX_DIGITS:
        raise ValueError(f"digits must be between 1 and {MAX_DIGITS}")
    # Generate HMAC-SHA1 from secret and counter.
    hmac_hash = hmac.new(bytes(secret), int_to_bytes(counter), hashlib.sha1).digest()
    code      = truncate(hmac_hash)
    return str(code % (10 ** digits)).zfill(digits)
