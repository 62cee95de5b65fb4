"""
Wordle Entropy Solver
=====================

Ranks next Wordle guesses by expected information gain, given the
feedback received so far.
"""

__version__ = "1.0.0"

from .candidates import Candidate, CandidateStore, apply, apply_history
from .entropy import score, score_candidates
from .feedback import Feedback, MalformedFeedback, Outcome, compute_feedback, enumerate_all_outcome_patterns
from .resources import ResourceUnavailable, load_weights, load_words
from .sampling import reference_distribution, sample_size
from .solver import OPENING_GUESSES, BenchmarkResult, EntropySolver, benchmark, format_results
from .topk import TopK
