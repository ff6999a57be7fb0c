import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from core import reset_round  # noqa: E402


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def state(rng):
    return reset_round(rng=rng)


class SequenceRng:
    """Feeds fixed values to code that expects a random.Random."""

    def __init__(self, values, uniform_value=None):
        self.values = list(values)
        self.uniform_value = uniform_value

    def random(self):
        return self.values.pop(0)

    def uniform(self, a, b):
        if self.uniform_value is None:
            return a
        return self.uniform_value


@pytest.fixture
def sequence_rng():
    return SequenceRng
