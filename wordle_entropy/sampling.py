"""
Sampling Controller
===================

Exact entropy tests every guess against every remaining word for each of
the 243 outcomes, which is far too slow while thousands of words remain.
Outcome probabilities are instead estimated from a random reference sample
of max(250, 20%) of the candidates. Once fewer than 250 words remain the
whole store is used and the estimate becomes exact.
"""

from typing import Optional, Union

import numpy as np

from .candidates import CandidateStore

SAMPLE_FLOOR = 250
SAMPLE_DIVISOR = 5

RandomSource = Optional[Union[int, np.random.Generator]]


def sample_size(n: int) -> int:
    """Number of reference words to draw for a store of `n` words."""
    return max(SAMPLE_FLOOR, n // SAMPLE_DIVISOR)


def reference_distribution(store: CandidateStore, rng: RandomSource = None) -> np.ndarray:
    """
    Pick the words used to estimate feedback-pattern probabilities.

    Args:
        store: the narrowed candidate store
        rng: numpy Generator, integer seed or None

    Returns:
        shape (m, 5) char code array with m = min(n, max(250, n // 5))
    """
    n = len(store)
    size = sample_size(n)
    if n <= size:
        return store.chars
    rng = np.random.default_rng(rng)
    idx = rng.choice(n, size=size, replace=False)
    return store.chars[idx]
