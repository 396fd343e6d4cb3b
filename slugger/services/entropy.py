"""
Entropy sources for slug generation.

This module defines the interface that slug generators draw randomness,
digests and time from, so tests can substitute fixed values for the
platform primitives.
"""
import hashlib
import secrets
import threading
import time
import uuid
from abc import ABC, abstractmethod


class EntropySource(ABC):
    """
    Abstract base class for entropy sources.

    Implementations must not fall back to an insecure random source when the
    platform one fails; errors propagate to the caller unchanged.
    """

    @abstractmethod
    def random_identifier(self) -> uuid.UUID:
        """
        Return a fresh, uniformly random 128-bit identifier.

        Returns:
            A random UUID
        """
        pass

    @abstractmethod
    def hash(self, identifier: uuid.UUID) -> bytes:
        """
        Hash an identifier.

        Args:
            identifier: Identifier returned by random_identifier()

        Returns:
            32-byte SHA-256 digest
        """
        pass

    @abstractmethod
    def random_byte(self) -> int:
        """Return a uniform random byte (0-255), independent of random_identifier()."""
        pass

    @abstractmethod
    def now_millis(self) -> int:
        """Return milliseconds since the Unix epoch, never decreasing between calls."""
        pass


class SystemEntropySource(EntropySource):
    """Entropy source backed by the OS CSPRNG, hashlib and the system clock."""

    def __init__(self):
        self._last_millis = 0
        self._lock = threading.Lock()

    def random_identifier(self) -> uuid.UUID:
        # uuid4 draws its 122 random bits from os.urandom
        return uuid.uuid4()

    def hash(self, identifier: uuid.UUID) -> bytes:
        # Canonical form: lowercase hyphenated string, UTF-8 encoded
        return hashlib.sha256(str(identifier).encode()).digest()

    def random_byte(self) -> int:
        return secrets.token_bytes(1)[0]

    def now_millis(self) -> int:
        millis = time.time_ns() // 1_000_000
        with self._lock:
            # Wall clock may step backwards; never report an earlier value
            if millis < self._last_millis:
                millis = self._last_millis
            self._last_millis = millis
        return millis
