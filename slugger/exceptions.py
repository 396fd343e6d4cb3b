"""
Slugger-specific exceptions.

Every exception here also derives from ValueError, since each one is raised
for a malformed argument rather than a platform failure.
"""


class SluggerError(Exception):
    """Base exception for slug generation."""

    pass


class Base62Error(SluggerError, ValueError):
    """Raised when a value cannot be encoded to or decoded from base62."""

    def __init__(self, value, reason: str):
        self.value = value
        super().__init__(f"Invalid base62 input {value!r}: {reason}")


class MixerError(SluggerError, ValueError):
    """Raised when the entropy mixer receives malformed input."""

    pass


class SlugLengthError(SluggerError, ValueError):
    """Raised when a requested slug length is below the policy minimum."""

    def __init__(self, length: int, minimum: int):
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"Slug length ({length}) is below the minimum allowed length ({minimum})"
        )
