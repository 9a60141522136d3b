import os
import random
import sys
from pathlib import Path

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

# Ensure the project root is on the Python path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class FirstChoiceRandom(random.Random):
    """Random source that always picks the first option and never rolls high."""

    def choice(self, seq):
        return seq[0]

    def randrange(self, start, stop=None, step=1):
        return 0 if stop is None else start

    def random(self):
        return 0.0


class LastChoiceRandom(random.Random):
    """Random source that always picks the last option and always rolls high."""

    def choice(self, seq):
        return seq[-1]

    def randrange(self, start, stop=None, step=1):
        return start - 1 if stop is None else stop - 1

    def random(self):
        return 0.999


@pytest.fixture
def first_choice():
    return FirstChoiceRandom()


@pytest.fixture
def last_choice():
    return LastChoiceRandom()


@pytest.fixture
def seeded():
    return random.Random(1234)
