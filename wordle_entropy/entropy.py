"""
Entropy Scorer
==============

Expected information gain of a guess, in bits:

    H(guess) = sum over patterns p of  px * -log2(px) * weight(guess)

where px is the share of the reference distribution consistent with
pattern p. Patterns with px == 0 contribute nothing.
"""

import math
from typing import List, Sequence, Union

import numpy as np
from numba import jit, prange

from .candidates import Candidate, CandidateStore
from .feedback import ALL_PATTERNS, match_pattern, words_to_chars

Reference = Union[np.ndarray, Sequence[str]]


# ============================================================================
# NUMBA-ACCELERATED FUNCTIONS
# ============================================================================

@jit(nopython=True, cache=True)
def _pattern_probabilities(guess: np.ndarray, patterns: np.ndarray,
                           reference: np.ndarray) -> np.ndarray:
    """
    Share of reference words consistent with each outcome pattern.

    Args:
        guess: shape (5,) char codes of the guess
        patterns: shape (n_patterns, 5) outcome array
        reference: shape (m, 5) char codes of the reference words

    Returns:
        shape (n_patterns,) probabilities (all zero if m == 0)
    """
    n_patterns = patterns.shape[0]
    total = reference.shape[0]
    probs = np.zeros(n_patterns, dtype=np.float64)
    if total == 0:
        return probs
    for p in range(n_patterns):
        remaining = 0
        for r in range(total):
            if match_pattern(reference[r], guess, patterns[p]):
                remaining += 1
        probs[p] = remaining / total
    return probs


@jit(nopython=True, cache=True)
def _entropy_bits(probs: np.ndarray, weight: float) -> float:
    bits = 0.0
    for p in range(probs.shape[0]):
        px = probs[p]
        if px > 0.0:
            bits += px * -math.log2(px) * weight
    return bits


@jit(nopython=True, parallel=True, cache=True)
def score_guesses(guess_chars: np.ndarray, weights: np.ndarray,
                  patterns: np.ndarray, reference: np.ndarray) -> np.ndarray:
    """
    Score every guess against the same reference distribution in parallel.

    Each iteration only reads the shared arrays and writes its own slot.
    """
    n = guess_chars.shape[0]
    scores = np.zeros(n, dtype=np.float64)
    for i in prange(n):
        probs = _pattern_probabilities(guess_chars[i], patterns, reference)
        scores[i] = _entropy_bits(probs, weights[i])
    return scores


# ============================================================================
# PUBLIC API
# ============================================================================

def _as_chars(reference: Reference) -> np.ndarray:
    if isinstance(reference, np.ndarray):
        return reference
    return words_to_chars([w.lower() for w in reference])


def pattern_probabilities(guess: str, reference: Reference) -> np.ndarray:
    """Probability of each of the 243 outcome patterns for `guess`."""
    guess_chars = words_to_chars([guess.lower()])[0]
    return _pattern_probabilities(guess_chars, ALL_PATTERNS, _as_chars(reference))


def entropy_bits(probabilities: np.ndarray, weight: float = 1.0) -> float:
    return float(_entropy_bits(np.asarray(probabilities, dtype=np.float64), float(weight)))


def score(guess: str, reference: Reference, weight: float = 1.0) -> float:
    """Expected information gain, in bits, of guessing `guess`."""
    return entropy_bits(pattern_probabilities(guess, reference), weight)


def score_candidates(store: CandidateStore, reference: Reference) -> List[Candidate]:
    """
    Score every word in `store` (not just the reference sample).

    Returns:
        Candidates in store order with `score` filled in
    """
    scores = score_guesses(store.chars, store.weights, ALL_PATTERNS, _as_chars(reference))
    return [Candidate(word, float(s)) for word, s in zip(store.words, scores)]
