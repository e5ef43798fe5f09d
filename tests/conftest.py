"""Pytest configuration and fixtures."""

import os
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

# Set test environment variables
os.environ["CONSENSUS_LOG_LEVEL"] = "WARNING"
os.environ.pop("CONSENSUS_SEED", None)


class FirstChoiceRandom(random.Random):
    """Random source that always draws the first remaining candidate."""

    def randrange(self, *args, **kwargs):
        return 0


@pytest.fixture
def rng():
    """Seeded random source for reproducible recruitment."""
    return random.Random(1234)


@pytest.fixture
def first_choice_rng():
    """Random source whose draws are fully predictable."""
    return FirstChoiceRandom()


@pytest.fixture
def constant():
    """Factory for likeability functions returning a fixed score."""

    def make(value):
        def score(obj):
            return value

        score.__name__ = f"constant_{value}"
        return score

    return make
