"""
Base62 encoding for integers and byte buffers.

This module converts non-negative integers and big-endian byte buffers into
compact, URL-safe strings over the alphabet [0-9a-zA-Z]. Output length grows
with the numeric magnitude of the input, not with the byte count: a buffer
with leading zero bytes encodes shorter than one without. PaddingMode.FIXED
restores a width that depends only on the buffer length.
"""
import string
from enum import Enum

from slugger.exceptions import Base62Error


# Base62 character set: [0-9a-zA-Z]
BASE62_ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase
BASE = len(BASE62_ALPHABET)
ZERO_SYMBOL = BASE62_ALPHABET[0]

_INDEX = {char: index for index, char in enumerate(BASE62_ALPHABET)}


class PaddingMode(str, Enum):
    """How encode_bytes treats leading zero bytes."""

    VARIABLE = "variable"
    FIXED = "fixed"


def encode_integer(value: int) -> str:
    """
    Encode a non-negative integer to a base62 string.

    Args:
        value: Integer to encode

    Returns:
        Base62 encoded string, most significant symbol first

    Raises:
        Base62Error: If value is negative

    Examples:
        >>> encode_integer(12345)
        '3d7'
        >>> encode_integer(0)
        '0'
    """
    if value < 0:
        raise Base62Error(value, "value must be non-negative")
    if value == 0:
        return ZERO_SYMBOL

    encoded = []
    while value > 0:
        value, remainder = divmod(value, BASE)
        encoded.append(BASE62_ALPHABET[remainder])

    return "".join(reversed(encoded))


def natural_width(byte_count: int) -> int:
    """Return the encoded length of the largest value that fits in byte_count bytes."""
    if byte_count <= 0:
        return 0
    return len(encode_integer(256**byte_count - 1))


def encode_bytes(buffer: bytes, padding: PaddingMode = PaddingMode.VARIABLE) -> str:
    """
    Encode a byte buffer, read as a big-endian unsigned integer, to base62.

    Args:
        buffer: Bytes to encode (e.g. a hash digest)
        padding: VARIABLE drops leading zero bytes, FIXED left-pads the result
            with the zero symbol to natural_width(len(buffer))

    Returns:
        Base62 encoded string. In VARIABLE mode an empty or all-zero buffer
        has no significant digits and encodes to "".
    """
    num = int.from_bytes(buffer, byteorder="big")
    encoded = encode_integer(num) if num else ""

    if padding == PaddingMode.FIXED:
        return encoded.rjust(natural_width(len(buffer)), ZERO_SYMBOL)
    return encoded


def encode_fixed(value: int, width: int) -> str:
    """
    Encode value modulo 62**width as exactly width symbols.

    Examples:
        >>> encode_fixed(62, 4)
        '0010'
    """
    if width < 1:
        raise Base62Error(width, "width must be at least 1")
    return encode_integer(value % BASE**width).rjust(width, ZERO_SYMBOL)


def decode_integer(text: str) -> int:
    """
    Decode a base62 string back to the integer encode_integer produced it from.

    Raises:
        Base62Error: If text is empty or contains a character outside the alphabet
    """
    if not text:
        raise Base62Error(text, "empty string")

    value = 0
    for char in text:
        digit = _INDEX.get(char)
        if digit is None:
            raise Base62Error(text, f"character {char!r} is not in the base62 alphabet")
        value = value * BASE + digit
    return value
