"""
Request adapter for the best-guesses endpoint.

The request body is the full feedback history of a game:

    [{"word": "tares", "hint": "Ggggg"}, ...]

and the response lists up to 5 recommended guesses, best first:

    {"guesses": ["thump", ...]}

The transport in front of this (HTTP server, TLS, CORS) is not part of
this package.
"""

from typing import Any, Dict, List, Tuple

from .feedback import Feedback, MalformedFeedback
from .solver import EntropySolver


def parse_history(payload: Any) -> List[Feedback]:
    """Turn a request body into feedback records, rejecting anything malformed."""
    if not isinstance(payload, list):
        raise MalformedFeedback("Request body must be a list of {word, hint} objects")
    history = []
    for i, entry in enumerate(payload):
        if not isinstance(entry, dict) or "word" not in entry or "hint" not in entry:
            raise MalformedFeedback(f"Entry {i} must be an object with 'word' and 'hint'")
        history.append(Feedback.from_hint(entry["word"], entry["hint"]))
    return history


def best_guesses(solver: EntropySolver, payload: Any) -> Dict[str, List[str]]:
    return {"guesses": solver.best_guesses(parse_history(payload))}


def handle_request(solver: EntropySolver, payload: Any) -> Tuple[int, Dict[str, Any]]:
    """
    Serve one request.

    Returns:
        (status, body): 200 with the guesses, or 400 with an error message
        when the feedback history is malformed (no partial ranking)
    """
    try:
        return 200, best_guesses(solver, payload)
    except MalformedFeedback as e:
        return 400, {"error": str(e)}
