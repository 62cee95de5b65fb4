import numpy as np
import pytest

from wordle_entropy.candidates import CandidateStore
from wordle_entropy.sampling import reference_distribution, sample_size

from conftest import make_words


@pytest.mark.parametrize("n, expected", [
    (0, 250), (10, 250), (1000, 250), (1250, 250), (2000, 400), (14855, 2971),
])
def test_sample_size(n, expected):
    assert sample_size(n) == expected


@pytest.mark.parametrize("n", [10, 250, 251, 1000, 2000])
def test_reference_size_is_bounded(n):
    store = CandidateStore.from_words(make_words(n))
    reference = reference_distribution(store, rng=0)
    assert reference.shape == (min(n, max(250, n // 5)), 5)


def test_small_store_used_whole():
    store = CandidateStore.from_words(make_words(100))
    np.testing.assert_array_equal(reference_distribution(store), store.chars)


def test_sample_draws_distinct_store_words():
    store = CandidateStore.from_words(make_words(2000))
    reference = reference_distribution(store, rng=np.random.default_rng(3))
    rows = {tuple(r) for r in reference.tolist()}
    assert len(rows) == len(reference)
    assert rows <= {tuple(r) for r in store.chars.tolist()}


def test_seeded_sample_is_repeatable():
    store = CandidateStore.from_words(make_words(1000))
    a = reference_distribution(store, rng=42)
    b = reference_distribution(store, rng=42)
    np.testing.assert_array_equal(a, b)
