"""
Slug generation policies.

A SlugGenerator turns entropy from an EntropySource into base62 slugs using
one of three policies:

- PLAIN: SHA-256 of a random UUID, base62 encoded and truncated.
- OBSCURED: the same digest mixed with the timestamp and a random byte
  (see slugger.services.mixer), base62 encoded and truncated.
- SAFE: a digest prefix followed by a 4-symbol timestamp suffix, always
  exactly the requested length.
"""
from enum import Enum

from slugger.config import settings
from slugger.exceptions import SlugLengthError
from slugger.logging_config import setup_logging
from slugger.services.entropy import EntropySource, SystemEntropySource
from slugger.services.mixer import mix
from slugger.utils.base62 import ZERO_SYMBOL, PaddingMode, encode_bytes, encode_fixed

logger = setup_logging()

# Number of trailing symbols the SAFE policy reserves for the timestamp
TIMESTAMP_SUFFIX_WIDTH = 4


class SlugPolicy(str, Enum):
    PLAIN = "plain"
    OBSCURED = "obscured"
    SAFE = "safe"


# Smallest length each policy accepts
MIN_LENGTHS = {
    SlugPolicy.PLAIN: 1,
    SlugPolicy.OBSCURED: 1,
    SlugPolicy.SAFE: TIMESTAMP_SUFFIX_WIDTH,
}

DEFAULT_LENGTHS = {
    SlugPolicy.PLAIN: 6,
    SlugPolicy.OBSCURED: 10,
    SlugPolicy.SAFE: 10,
}


class SlugGenerator:
    """
    Generate slugs from an injected entropy source.

    PLAIN and OBSCURED truncate the encoded digest to the requested length.
    With PaddingMode.VARIABLE a digest with leading zero bytes encodes
    shorter, so these policies may return fewer characters than requested;
    this is not an error. Use PaddingMode.FIXED or the SAFE policy when an
    exact length matters.
    """

    def __init__(
        self,
        entropy: EntropySource | None = None,
        padding: PaddingMode | None = None,
    ):
        self.entropy = entropy if entropy is not None else SystemEntropySource()
        self.padding = padding if padding is not None else settings.SLUG_PADDING

    def plain(self, length: int = DEFAULT_LENGTHS[SlugPolicy.PLAIN]) -> str:
        """Return the first `length` characters of the encoded digest of a random UUID."""
        self._check_length(length, SlugPolicy.PLAIN)
        digest = self._random_digest()
        return self._truncate(encode_bytes(digest, self.padding), length, SlugPolicy.PLAIN)

    def obscured(self, length: int = DEFAULT_LENGTHS[SlugPolicy.OBSCURED]) -> str:
        """
        Return a slug whose leading bytes are mixed with the current time.

        The 12-byte mixed buffer encodes to at most 17 characters, so longer
        requests are always returned short.
        """
        self._check_length(length, SlugPolicy.OBSCURED)
        digest = self._random_digest()
        buffer = mix(digest, self.entropy.now_millis(), self.entropy.random_byte())
        return self._truncate(encode_bytes(buffer, self.padding), length, SlugPolicy.OBSCURED)

    def safe(self, length: int = DEFAULT_LENGTHS[SlugPolicy.SAFE]) -> str:
        """
        Return a slug of exactly `length` characters.

        Layout: (length - 4) characters of the fixed-width encoded digest,
        then now_millis() mod 62**4 as 4 zero-padded characters. The suffix
        wraps roughly every 4.1 hours. Requests longer than the 43-character
        digest encoding are left-padded with the zero symbol.
        """
        self._check_length(length, SlugPolicy.SAFE)
        prefix_width = length - TIMESTAMP_SUFFIX_WIDTH
        encoded = encode_bytes(self._random_digest(), PaddingMode.FIXED)
        prefix = encoded[:prefix_width].rjust(prefix_width, ZERO_SYMBOL)
        suffix = encode_fixed(self.entropy.now_millis(), TIMESTAMP_SUFFIX_WIDTH)
        return prefix + suffix

    def generate(self, length: int | None = None, policy: SlugPolicy = SlugPolicy.PLAIN) -> str:
        """
        Generate a slug with the given policy.

        Args:
            length: Requested slug length (default depends on the policy)
            policy: PLAIN, OBSCURED or SAFE

        Returns:
            Base62 slug
        """
        policy = SlugPolicy(policy)
        if length is None:
            length = DEFAULT_LENGTHS[policy]

        if policy == SlugPolicy.OBSCURED:
            return self.obscured(length)
        if policy == SlugPolicy.SAFE:
            return self.safe(length)
        return self.plain(length)

    def _random_digest(self) -> bytes:
        return self.entropy.hash(self.entropy.random_identifier())

    @staticmethod
    def _check_length(length: int, policy: SlugPolicy) -> None:
        minimum = MIN_LENGTHS[policy]
        if length < minimum:
            raise SlugLengthError(length, minimum)

    @staticmethod
    def _truncate(encoded: str, length: int, policy: SlugPolicy) -> str:
        slug = encoded[:length]
        if len(slug) < length:
            logger.debug(
                f"{policy.value} slug shorter than requested: "
                f"requested={length}, returned={len(slug)}"
            )
        return slug


# Global generator used by the module-level functions
default_generator = SlugGenerator()


def generate_slug(length: int = 6) -> str:
    """Generate a PLAIN slug with the default generator."""
    return default_generator.plain(length)


def generate_obscured_slug(length: int = 10) -> str:
    """Generate an OBSCURED slug with the default generator."""
    return default_generator.obscured(length)


def generate_safe_slug(length: int = 10) -> str:
    """Generate a SAFE slug of exactly `length` characters with the default generator."""
    return default_generator.safe(length)
