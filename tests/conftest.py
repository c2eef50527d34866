import random

import pytest

from unisim.utils.helpers import random_sentence


@pytest.fixture
def rng():
    return random.Random(1337)


@pytest.fixture
def random_text(rng):
    """Fifteen random words, the same ones on every run."""
    return random_sentence(15, rng=rng)
