import hashlib
import uuid

from slugger.services.entropy import EntropySource

FIXED_UUID = uuid.UUID("12345678-1234-5678-1234-567812345678")


class FixedEntropySource(EntropySource):
    """
    Deterministic entropy source for tests.

    Digests are served from `digests` in order when given; otherwise the real
    SHA-256 of the identifier is returned. Identifier, random byte and
    timestamp stay fixed unless a test changes the attributes.
    """

    def __init__(
        self,
        identifier: uuid.UUID = FIXED_UUID,
        digests: list[bytes] | None = None,
        millis: int = 0,
        random_byte: int = 0,
    ):
        self.identifier = identifier
        self.digests = list(digests) if digests else []
        self.millis = millis
        self.byte = random_byte

    def random_identifier(self) -> uuid.UUID:
        return self.identifier

    def hash(self, identifier: uuid.UUID) -> bytes:
        if self.digests:
            return self.digests.pop(0)
        return hashlib.sha256(str(identifier).encode()).digest()

    def random_byte(self) -> int:
        return self.byte

    def now_millis(self) -> int:
        return self.millis


def digest_of(value: int) -> bytes:
    """Build a 32-byte digest holding `value` big-endian."""
    return value.to_bytes(32, byteorder="big")
