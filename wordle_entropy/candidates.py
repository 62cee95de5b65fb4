"""
Candidate Store and Elimination Engine
======================================

The working set of dictionary words still consistent with every feedback
record seen in the current request. A store is built fresh from the full
dictionary for each request and only ever shrinks.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

import numpy as np

from .feedback import Feedback, match_mask, words_to_chars

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT = 1.0


@dataclass
class Candidate:
    """A word and its information gain in bits."""
    word: str
    score: float = 0.0


class CandidateStore:
    """
    Words still in play, kept alongside their char codes and weights.

    Args:
        words: the candidate words
        chars: shape (n, 5) char code array matching `words`
        weights: shape (n,) per-word score multipliers
    """

    def __init__(self, words: Sequence[str], chars: np.ndarray, weights: np.ndarray):
        if not (len(words) == chars.shape[0] == weights.shape[0]):
            raise ValueError("words, chars and weights must have the same length")
        self.words = tuple(words)
        self.chars = chars
        self.weights = weights

    @classmethod
    def from_words(cls, words: Sequence[str],
                   weights: Optional[Dict[str, float]] = None) -> "CandidateStore":
        """
        Build a store from a dictionary.

        Words missing from `weights` (or every word, when no weights are
        given) get the neutral multiplier 1.0.
        """
        weights = {w.lower(): v for w, v in (weights or {}).items()}
        weight_arr = np.array([weights.get(w, DEFAULT_WEIGHT) for w in words], dtype=np.float64)
        return cls(words, words_to_chars(words), weight_arr)

    def subset(self, mask: np.ndarray) -> "CandidateStore":
        idx = np.flatnonzero(mask)
        return CandidateStore([self.words[i] for i in idx], self.chars[idx], self.weights[idx])

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[Candidate]:
        return (Candidate(w) for w in self.words)

    def __contains__(self, word: str) -> bool:
        return word in self.words

    def __repr__(self) -> str:
        return f"CandidateStore({len(self)} words)"


# ============================================================================
# ELIMINATION
# ============================================================================

def apply(store: CandidateStore, feedback: Feedback) -> CandidateStore:
    """Drop every word of `store` that is inconsistent with `feedback`."""
    guess, outcomes = feedback.arrays()
    narrowed = store.subset(match_mask(store.chars, guess, outcomes))
    logger.debug("%s: %d -> %d candidates", feedback, len(store), len(narrowed))
    return narrowed


def apply_history(store: CandidateStore, history: Iterable[Feedback]) -> CandidateStore:
    """
    Apply feedback records in order.

    Each record only removes words, so the result is the intersection of all
    constraints and does not depend on the order of `history`.
    """
    for feedback in history:
        store = apply(store, feedback)
    return store


def remaining_words(store: CandidateStore, limit: int = 10) -> List[str]:
    return list(store.words[:limit])
