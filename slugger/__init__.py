"""
Short, URL-safe, collision-resistant base62 slugs.

This package turns a random UUID, its SHA-256 digest and optionally the
current time into fixed-alphabet slugs for object keys and short links.
"""

from slugger.exceptions import (
    Base62Error,
    MixerError,
    SluggerError,
    SlugLengthError,
)
from slugger.services.entropy import EntropySource, SystemEntropySource
from slugger.services.mixer import mix
from slugger.services.slug import (
    SlugGenerator,
    SlugPolicy,
    generate_obscured_slug,
    generate_safe_slug,
    generate_slug,
)
from slugger.services.uniqueness import check_uniqueness
from slugger.utils.base62 import (
    BASE62_ALPHABET,
    PaddingMode,
    decode_integer,
    encode_bytes,
    encode_fixed,
    encode_integer,
)

__all__ = [
    "BASE62_ALPHABET",
    "Base62Error",
    "EntropySource",
    "MixerError",
    "PaddingMode",
    "SlugGenerator",
    "SlugLengthError",
    "SlugPolicy",
    "SluggerError",
    "SystemEntropySource",
    "check_uniqueness",
    "decode_integer",
    "encode_bytes",
    "encode_fixed",
    "encode_integer",
    "generate_obscured_slug",
    "generate_safe_slug",
    "generate_slug",
    "mix",
]
