"""
Feedback Model
==============

One guessed word plus the per-letter outcome the game reported for it.

Outcomes travel over the wire as a 5-character hint string:
- 'G' = Correct (right letter, right position)
- 'y' = Present (letter is in the word, elsewhere)
- 'g' = Absent  (every occurrence of the letter is already accounted for)

The match predicate is a numba kernel so that elimination and entropy
scoring can call it in their inner loops.
"""

import itertools
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np
from numba import jit


# ============================================================================
# CONSTANTS
# ============================================================================

WORD_LENGTH = 5
ALPHABET = "abcdefghijklmnopqrstuvwxyz"

GRAY = 0
YELLOW = 1
GREEN = 2
N_PATTERNS = 243  # 3^5 possible feedback patterns


class Outcome(IntEnum):
    ABSENT = GRAY
    PRESENT = YELLOW
    CORRECT = GREEN


HINT_SYMBOLS = {"g": Outcome.ABSENT, "y": Outcome.PRESENT, "G": Outcome.CORRECT}
SYMBOL_FOR_OUTCOME = {outcome: symbol for symbol, outcome in HINT_SYMBOLS.items()}
EMOJI = ("⬛", "🟨", "🟩")

# Every outcome combination, lexicographic over (ABSENT, PRESENT, CORRECT).
ALL_PATTERNS = np.array(
    list(itertools.product((GRAY, YELLOW, GREEN), repeat=WORD_LENGTH)),
    dtype=np.int32,
)


class MalformedFeedback(ValueError):
    """Feedback with the wrong shape or an unknown outcome symbol."""


# ============================================================================
# NUMBA-ACCELERATED FUNCTIONS
# ============================================================================

@jit(nopython=True, cache=True)
def match_pattern(candidate: np.ndarray, guess: np.ndarray, outcomes: np.ndarray) -> bool:
    """
    Check whether a candidate word is consistent with one feedback record.

    Args:
        candidate: shape (5,) array of char codes
        guess: shape (5,) array of char codes of the guessed word
        outcomes: shape (5,) array of GRAY/YELLOW/GREEN

    Returns:
        True if the candidate could have produced this feedback
    """
    for i in range(5):
        letter = guess[i]
        outcome = outcomes[i]
        if outcome == GREEN:
            if candidate[i] != letter:
                return False
        elif outcome == YELLOW:
            if candidate[i] == letter:
                return False
            found = False
            for j in range(5):
                if candidate[j] == letter:
                    found = True
                    break
            if not found:
                return False
        else:
            # Occurrences confirmed by GREEN/YELLOW marks elsewhere in the guess
            confirmed = 0
            for j in range(5):
                if guess[j] == letter and outcomes[j] != GRAY:
                    confirmed += 1
            count = 0
            for j in range(5):
                if candidate[j] == letter:
                    count += 1
            if count != confirmed:
                return False
    return True


@jit(nopython=True, cache=True)
def match_mask(chars: np.ndarray, guess: np.ndarray, outcomes: np.ndarray) -> np.ndarray:
    """Boolean mask of the rows of `chars` consistent with one feedback record."""
    n = chars.shape[0]
    mask = np.zeros(n, dtype=np.bool_)
    for i in range(n):
        mask[i] = match_pattern(chars[i], guess, outcomes)
    return mask


# ============================================================================
# WORD ENCODING
# ============================================================================

def is_valid_word(word: str) -> bool:
    return len(word) == WORD_LENGTH and all(c in ALPHABET for c in word)


def words_to_chars(words: Sequence[str]) -> np.ndarray:
    """Convert words to an (n, 5) char code array (0-25 for a-z)."""
    arr = np.zeros((len(words), WORD_LENGTH), dtype=np.int32)
    for i, w in enumerate(words):
        for j, c in enumerate(w):
            arr[i, j] = ord(c) - ord('a')
    return arr


# ============================================================================
# FEEDBACK
# ============================================================================

def _parse_outcomes(outcomes: Union[str, Iterable]) -> Tuple[Outcome, ...]:
    if not isinstance(outcomes, (str, tuple, list)):
        raise MalformedFeedback(f"Outcomes must be a hint string or a sequence, got {outcomes!r}")
    parsed = []
    for symbol in outcomes:
        if isinstance(symbol, str):
            if symbol not in HINT_SYMBOLS:
                raise MalformedFeedback(f"Invalid hint symbol: {symbol!r}")
            parsed.append(HINT_SYMBOLS[symbol])
        else:
            try:
                parsed.append(Outcome(symbol))
            except ValueError:
                raise MalformedFeedback(f"Invalid outcome: {symbol!r}") from None
    return tuple(parsed)


@dataclass(frozen=True)
class Feedback:
    """
    A guessed word and the outcome reported for each of its letters.

    `outcomes` may be given as Outcome values, plain ints or a hint string
    such as "Gyggg"; it is always stored as a tuple of Outcome.
    """

    word: str
    outcomes: Tuple[Outcome, ...]

    def __post_init__(self):
        if not isinstance(self.word, str):
            raise MalformedFeedback(f"Guess must be a string, got {type(self.word).__name__}")
        word = self.word.lower()
        if len(word) != WORD_LENGTH:
            raise MalformedFeedback(f"Guess must have {WORD_LENGTH} letters: {self.word!r}")
        if not is_valid_word(word):
            raise MalformedFeedback(f"Guess must only contain letters a-z: {self.word!r}")
        outcomes = _parse_outcomes(self.outcomes)
        if len(outcomes) != WORD_LENGTH:
            raise MalformedFeedback(
                f"Expected {WORD_LENGTH} outcomes for {word!r}, got {len(outcomes)}"
            )
        object.__setattr__(self, "word", word)
        object.__setattr__(self, "outcomes", outcomes)

    @classmethod
    def from_hint(cls, word: str, hint: str) -> "Feedback":
        if not isinstance(hint, str):
            raise MalformedFeedback(f"Hint must be a string, got {type(hint).__name__}")
        return cls(word, hint)

    @property
    def hint(self) -> str:
        return "".join(SYMBOL_FOR_OUTCOME[o] for o in self.outcomes)

    @property
    def emoji(self) -> str:
        return "".join(EMOJI[o] for o in self.outcomes)

    @property
    def solved(self) -> bool:
        return all(o == Outcome.CORRECT for o in self.outcomes)

    def arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """(guess chars, outcomes) as int32 arrays for the numba kernels."""
        guess = words_to_chars([self.word])[0]
        outcomes = np.array([int(o) for o in self.outcomes], dtype=np.int32)
        return guess, outcomes

    def matches(self, candidate: str) -> bool:
        """True if `candidate` is consistent with this feedback."""
        candidate = candidate.lower()
        if not is_valid_word(candidate):
            return False
        guess, outcomes = self.arrays()
        return bool(match_pattern(words_to_chars([candidate])[0], guess, outcomes))

    def __str__(self) -> str:
        return f"{self.word} {self.hint}"


def enumerate_all_outcome_patterns(word: str) -> List[Feedback]:
    """All 243 feedback records that guessing `word` could produce."""
    return [Feedback(word, tuple(pattern)) for pattern in ALL_PATTERNS.tolist()]


def compute_feedback(guess: str, answer: str) -> Feedback:
    """
    Compute the feedback the game gives for `guess` when the answer is `answer`.

    Greens are marked first; yellows are then handed out against the answer's
    remaining letter counts, so a repeated letter is never over-reported.
    """
    guess = guess.lower()
    answer = answer.lower()
    outcomes = [Outcome.ABSENT] * WORD_LENGTH

    for i in range(WORD_LENGTH):
        if guess[i] == answer[i]:
            outcomes[i] = Outcome.CORRECT

    remaining = Counter(answer[i] for i in range(WORD_LENGTH) if outcomes[i] != Outcome.CORRECT)
    for i in range(WORD_LENGTH):
        if outcomes[i] == Outcome.ABSENT and remaining[guess[i]] > 0:
            outcomes[i] = Outcome.PRESENT
            remaining[guess[i]] -= 1

    return Feedback(guess, tuple(outcomes))
