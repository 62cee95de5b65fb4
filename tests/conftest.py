import itertools

import pytest

from wordle_entropy import EntropySolver

T_WORDS = ["thumb", "tulip", "toxic", "thing", "tonic", "tough", "think", "tight"]
OTHER_WORDS = ["tares", "crane", "stout", "blimp", "world", "pinky", "tread", "sassy", "class"]


def make_words(n):
    """n distinct synthetic 5-letter words."""
    return ["".join(p) for p in itertools.islice(itertools.product("abcdefghij", repeat=5), n)]


@pytest.fixture
def words():
    return T_WORDS + OTHER_WORDS


@pytest.fixture
def solver(words):
    return EntropySolver(words, seed=7)
