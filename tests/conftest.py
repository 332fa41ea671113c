import os

import pytest

# Qt tests never need a real display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FirstChoice:
    """Deterministic random source: always picks the first option."""

    def __init__(self):
        self.seen = []

    def choice(self, seq):
        self.seen.append(list(seq))
        return seq[0]


class LastChoice(FirstChoice):
    def choice(self, seq):
        self.seen.append(list(seq))
        return seq[-1]


@pytest.fixture
def first_choice():
    return FirstChoice()


@pytest.fixture
def last_choice():
    return LastChoice()


def play(engine, *moves):
    """Place marks in order, return the last result."""
    result = None
    for index in moves:
        result = engine.place_mark(index)
    return result
