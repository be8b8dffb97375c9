import pytest

from game.marine.config import DiveConfig
from game.marine.session import Session


class SequenceSource:
    """Uniform source replaying fixed draws (cycled)"""

    def __init__(self, draws):
        self.draws = list(draws)
        self.i = 0

    def random(self) -> float:
        value = self.draws[self.i % len(self.draws)]
        self.i += 1
        return value


@pytest.fixture
def config():
    return DiveConfig()


@pytest.fixture
def session(config):
    s = Session(config, rng=SequenceSource([0.5]))
    s.activate()
    return s


@pytest.fixture
def draws():
    """Factory for a deterministic uniform source"""
    return SequenceSource
