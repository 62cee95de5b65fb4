"""
Command-line harness for offline experiments.

    python -m wordle_entropy --hint tares:Ggggg --hint thump:Gyggg
    python -m wordle_entropy --solve crane -v
    python -m wordle_entropy --benchmark 50 --seed 42
"""

import argparse
import logging
import random
import sys

from .feedback import Feedback, MalformedFeedback
from .resources import ResourceUnavailable, load_weights, load_words
from .solver import EntropySolver, benchmark, format_results


def parse_hint(text: str) -> Feedback:
    word, sep, hint = text.partition(":")
    if not sep:
        raise MalformedFeedback(f"Expected WORD:HINT, got {text!r}")
    return Feedback.from_hint(word, hint)


def positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordle-entropy",
        description="Rank Wordle guesses by expected information gain. "
                    "Hints use G = correct, y = present, g = absent.",
    )
    parser.add_argument("--words", default="words.txt", help="Word list, one word per line")
    parser.add_argument("--weights", help="Optional JSON object of word -> frequency weight")
    parser.add_argument("--seed", type=int, help="Seed for the reference sample")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--hint", action="append", default=[], metavar="WORD:HINT",
                      help="Feedback for one guess (repeat in play order)")
    mode.add_argument("--solve", metavar="ANSWER", help="Play a game against a known answer")
    mode.add_argument("--benchmark", type=positive_int, metavar="N", help="Play N random answers")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        words = load_words(args.words)
        weights = load_weights(args.weights) if args.weights else None
    except ResourceUnavailable as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    solver = EntropySolver(words, weights=weights, seed=args.seed)

    if args.solve:
        try:
            n, guesses = solver.solve(args.solve, verbose=True)
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        status = f"Solved in {n} guesses" if n <= len(guesses) else "Failed"
        print(f"  -> {status}: {guesses}")
        return 0

    if args.benchmark is not None:
        rng = random.Random(args.seed)
        sample = rng.sample(solver.words, min(args.benchmark, len(solver.words)))
        print(format_results(benchmark(solver, sample)))
        return 0

    try:
        history = [parse_hint(h) for h in args.hint]
    except MalformedFeedback as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    for rank, word in enumerate(solver.best_guesses(history), 1):
        print(f"{rank}. {word}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
