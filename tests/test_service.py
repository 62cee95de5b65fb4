import pytest

from wordle_entropy import OPENING_GUESSES
from wordle_entropy.feedback import MalformedFeedback
from wordle_entropy.service import best_guesses, handle_request, parse_history


def test_empty_request_returns_opening(solver):
    status, body = handle_request(solver, [])
    assert status == 200
    assert body == {"guesses": list(OPENING_GUESSES)}


def test_request_with_history(solver):
    status, body = handle_request(solver, [{"word": "tares", "hint": "Ggggg"}])
    assert status == 200
    assert len(body["guesses"]) == 5
    assert all(g.startswith("t") for g in body["guesses"])


@pytest.mark.parametrize("payload", [
    {"word": "tares", "hint": "Ggggg"},
    [{"word": "tares"}],
    [["tares", "Ggggg"]],
    [{"word": "tares", "hint": "GGGGGG"}],
    [{"word": "tare", "hint": "Ggggg"}],
    [{"word": "tares", "hint": "Ggggg"}, {"word": "thumb", "hint": "GxGxG"}],
])
def test_malformed_request_rejected(solver, payload):
    status, body = handle_request(solver, payload)
    assert status == 400
    assert "guesses" not in body
    assert body["error"]


def test_parse_history():
    history = parse_history([{"word": "TARES", "hint": "Gyggg"}])
    assert [str(fb) for fb in history] == ["tares Gyggg"]
    with pytest.raises(MalformedFeedback):
        parse_history(None)


def test_best_guesses_propagates_errors(solver):
    with pytest.raises(MalformedFeedback):
        best_guesses(solver, [{"word": "tares", "hint": 5}])
