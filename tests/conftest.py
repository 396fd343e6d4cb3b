import pytest

from slugger.services.slug import SlugGenerator
from slugger.utils.base62 import PaddingMode
from tests.fakes import FixedEntropySource


@pytest.fixture
def fixed_entropy():
    """Deterministic entropy source with the fixed UUID."""
    return FixedEntropySource()


@pytest.fixture
def fixed_generator(fixed_entropy):
    """Generator wired to the deterministic entropy source."""
    return SlugGenerator(entropy=fixed_entropy, padding=PaddingMode.VARIABLE)
