"""
Base32 codec (RFC 4648)

Output is never padded. Input may be lower case and may carry trailing `=`
padding. Characters outside the alphabet are skipped by default; pass
``strict=True`` to reject them instead.
"""
import logging

from .constants import BASE32_ALPHABET, BASE32_INDEX
from .errors import InvalidEncoding

logger = logging.getLogger(__name__)

# Unpadded lengths that no byte string can encode to
_IMPOSSIBLE_REMAINDERS = (1, 3, 6)


def encode(data: bytes) -> str:
    """
    Encode raw bytes as unpadded Base32 text, ceil(8 * len(data) / 5) characters long
    """
    out    = []
    buffer = 0
    bits   = 0
    for byte in bytes(data):
        # At most 4 leftover bits + 8 new ones are live
        buffer = ((buffer << 8) | byte) & 0xFFF
        bits  += 8
        while bits >= 5:
            out.append(BASE32_ALPHABET[(buffer >> (bits - 5)) & 0x1F])
            bits -= 5
    # Leftover 1-4 bits are filled with zeros on the right
    if bits > 0:
        out.append(BASE32_ALPHABET[(buffer << (5 - bits)) & 0x1F])
    return "".join(out)


def normalize(text: str, strict: bool = False) -> str:
    """
    Uppercase, drop trailing padding and filter the input down to alphabet characters
    """
    text  = text.upper().rstrip("=")
    clean = "".join(char for char in text if char in BASE32_INDEX)
    dropped = len(text) - len(clean)
    if strict:
        if dropped:
            raise InvalidEncoding(f"{dropped} character(s) outside the Base32 alphabet")
        if len(clean) % 8 in _IMPOSSIBLE_REMAINDERS:
            raise InvalidEncoding(f"{len(clean)} characters is not a valid Base32 length")
    elif dropped:
        logger.warning("Ignored %d character(s) outside the Base32 alphabet", dropped)
    return clean


def decode(text: str, strict: bool = False) -> bytes:
    """
    Decode Base32 text to raw bytes. Trailing bits that do not fill a byte are discarded.
    """
    out    = bytearray()
    buffer = 0
    bits   = 0
    for char in normalize(text, strict=strict):
        buffer = ((buffer << 5) | BASE32_INDEX[char]) & 0xFFF
        bits  += 5
        if bits >= 8:
            out.append((buffer >> (bits - 8)) & 0xFF)
            bits -= 8
    return bytes(out)
