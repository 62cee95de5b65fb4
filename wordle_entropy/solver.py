"""
Entropy Wordle Solver
=====================

Ranks next guesses for a 5-letter Wordle game by expected information gain.

Each request is stateless: the full feedback history is replayed against
the full dictionary, the surviving words are scored against a (possibly
sampled) reference distribution, and the 5 best guesses are returned.

The very first guess carries no information to narrow on, and scoring the
whole dictionary against itself always produces the same answer, so the
opening ranking is a fixed table instead of being recomputed.
"""

import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .candidates import CandidateStore, apply_history, remaining_words
from .entropy import score_candidates
from .feedback import Feedback, compute_feedback, is_valid_word
from .resources import ResourceUnavailable
from .sampling import reference_distribution
from .topk import TopK

logger = logging.getLogger(__name__)


# ============================================================================
# CONSTANTS
# ============================================================================

OPENING_GUESSES = ("tares", "lares", "rales", "rates", "teras")
TOP_K = 5
MAX_TURNS = 6

HistoryItem = Union[Feedback, Tuple[str, str]]


def _as_feedback(item: HistoryItem) -> Feedback:
    if isinstance(item, Feedback):
        return item
    word, hint = item
    return Feedback.from_hint(word, hint)


# ============================================================================
# SOLVER CLASS
# ============================================================================

class EntropySolver:
    """
    Greedy, single-ply information-gain solver.

    The solver only holds the pre-loaded dictionary and weights; it does no
    I/O and keeps no per-game state, so one instance can serve any number
    of independent requests.
    """

    def __init__(self, words: Sequence[str], weights: Optional[Dict[str, float]] = None,
                 opening: Sequence[str] = OPENING_GUESSES, top_k: int = TOP_K,
                 seed: Optional[int] = None):
        """
        Initialize solver with a dictionary.

        Args:
            words: valid 5-letter words
            weights: optional word -> frequency multiplier (missing words use 1.0)
            opening: fixed ranking returned when no feedback has been given
            top_k: number of guesses to return
            seed: seed for the reference sample (None draws a fresh sample each time)
        """
        if not words:
            raise ResourceUnavailable("Dictionary is empty")
        # case variants and repeated lines collapse to one entry, first one wins
        self.words = tuple(dict.fromkeys(w.lower() for w in words))
        bad = [w for w in self.words if not is_valid_word(w)]
        if bad:
            raise ValueError(f"Dictionary contains malformed words: {bad[:5]}")
        self.word_set = frozenset(self.words)
        self.opening = tuple(opening)
        self.top_k = top_k
        self.seed = seed
        self._dictionary = CandidateStore.from_words(self.words, weights)
        logger.debug("Solver ready with %d words (%s)", len(self.words),
                     "weighted" if weights else "unweighted")

    def narrow(self, history: Iterable[HistoryItem]) -> CandidateStore:
        """Words from the full dictionary consistent with every feedback record."""
        return apply_history(self._dictionary, [_as_feedback(h) for h in history])

    def best_guesses(self, history: Iterable[HistoryItem]) -> List[str]:
        """
        Rank the next guesses for a game.

        Args:
            history: every feedback record of the game so far, in order

        Returns:
            Up to `top_k` words, highest expected information gain first
        """
        history = [_as_feedback(h) for h in history]
        if not history:
            logger.debug("No feedback yet, using opening table")
            return list(self.opening[:self.top_k])

        start = time.time()
        store = self.narrow(history)
        reference = reference_distribution(store, self.seed)

        top = TopK(self.top_k)
        for candidate in score_candidates(store, reference):
            top.offer(candidate)
        guesses = top.drain_descending()

        logger.info("Ranked %d candidates against %d reference words after %d hints in %.3fs",
                    len(store), len(reference), len(history), time.time() - start)
        return guesses

    def solve(self, answer: str, verbose: bool = False) -> Tuple[int, List[str]]:
        """
        Play a game against a known answer, always taking the top guess.

        Args:
            answer: The target word
            verbose: Print progress

        Returns:
            (num_guesses, list_of_guesses); num_guesses is MAX_TURNS + 1 on failure
        """
        answer = answer.lower()
        if answer not in self.word_set:
            raise ValueError(f"Answer '{answer}' not in word list")

        history: List[Feedback] = []
        guesses = []

        for turn in range(MAX_TURNS):
            ranked = self.best_guesses(history)
            if not ranked:
                raise RuntimeError("No candidates remaining - bug in solver")

            guess = ranked[0]
            guesses.append(guess)
            feedback = compute_feedback(guess, answer)
            history.append(feedback)

            if verbose:
                print(f"  Turn {turn + 1}: {guess} -> {feedback.emoji}  (options: {', '.join(ranked)})")

            if feedback.solved:
                return len(guesses), guesses

            if verbose:
                store = self.narrow(history)
                print(f"        {len(store)} candidates remain")
                if len(store) <= 10:
                    print(f"        remaining: {remaining_words(store)}")

        return MAX_TURNS + 1, guesses


# ============================================================================
# BENCHMARK
# ============================================================================

@dataclass
class BenchmarkResult:
    """Guesses used per answer (MAX_TURNS + 1 means the game was lost)."""
    turns: Dict[str, int] = field(default_factory=dict)
    elapsed: float = 0.0

    @property
    def distribution(self) -> Counter:
        return Counter(self.turns.values())

    @property
    def average(self) -> float:
        return sum(self.turns.values()) / len(self.turns) if self.turns else 0.0

    @property
    def failed_words(self) -> List[str]:
        return [w for w, n in self.turns.items() if n > MAX_TURNS]


def benchmark(solver: EntropySolver, answers: Sequence[str] = None) -> BenchmarkResult:
    """Play one game per answer (default: the whole dictionary)."""
    answers = solver.words if answers is None else answers
    result = BenchmarkResult()
    start = time.time()
    for answer in answers:
        result.turns[answer], _ = solver.solve(answer)
        if len(result.turns) % 25 == 0:
            logger.info("Played %d/%d games, avg=%.4f", len(result.turns), len(answers), result.average)
    result.elapsed = time.time() - start
    return result


def format_results(result: BenchmarkResult) -> str:
    games = len(result.turns)
    lines = [
        f"{games} games in {result.elapsed:.1f}s, average guesses {result.average:.4f}",
    ]
    for n, count in sorted(result.distribution.items()):
        label = f"{n}" if n <= MAX_TURNS else "X"
        lines.append(f"  {label}: {count:5d} {'#' * round(40 * count / games)}")
    if result.failed_words:
        lines.append(f"lost: {', '.join(result.failed_words[:20])}")
    return "\n".join(lines)
