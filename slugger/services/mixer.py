"""
Entropy mixing for obscured slugs.

Folds a millisecond timestamp and one random byte into the leading bytes of
a hash digest with XOR, so the encoded prefix of a slug cannot be recovered
from its generation time alone.
"""
from slugger.exceptions import MixerError

# Width of the XOR-mixed segment and of the full output buffer, in bytes
MIXED_WIDTH = 6
OUTPUT_WIDTH = 12

_MIXED_MASK = (1 << (8 * MIXED_WIDTH)) - 1


def mix(hash_digest: bytes, timestamp: int, random_byte: int) -> bytes:
    """
    Combine a hash digest with a timestamp and a random byte.

    Steps:
    1. mixed = timestamp * 256 + random_byte
    2. Serialize mixed to 6 big-endian bytes, keeping only the low 48 bits
    3. XOR those bytes with digest bytes 0-5
    4. Append digest bytes 6-11 unchanged

    Args:
        hash_digest: Digest of at least 12 bytes (normally 32-byte SHA-256)
        timestamp: Non-negative milliseconds since the epoch
        random_byte: Value in 0-255

    Returns:
        12-byte buffer

    Raises:
        MixerError: If any argument is out of range

    Notes:
        - Millisecond timestamps passed 2**40 in 2004, so step 2 already
          drops the high bits of every current timestamp. The low 40 bits of
          the timestamp and the random byte still reach the XOR.
    """
    if len(hash_digest) < OUTPUT_WIDTH:
        raise MixerError(
            f"Hash digest must be at least {OUTPUT_WIDTH} bytes (got {len(hash_digest)})"
        )
    if timestamp < 0:
        raise MixerError(f"Timestamp must be non-negative (got {timestamp})")
    if not 0 <= random_byte <= 255:
        raise MixerError(f"Random byte must be in 0-255 (got {random_byte})")

    mixed = (timestamp * 256 + random_byte) & _MIXED_MASK
    entropy_bytes = mixed.to_bytes(MIXED_WIDTH, byteorder="big")

    obscured = bytes(h ^ e for h, e in zip(hash_digest[:MIXED_WIDTH], entropy_bytes))
    return obscured + bytes(hash_digest[MIXED_WIDTH:OUTPUT_WIDTH])
