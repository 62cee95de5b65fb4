import itertools

import numpy as np

from wordle_entropy.candidates import Candidate, CandidateStore, apply, apply_history
from wordle_entropy.feedback import Feedback, compute_feedback

from conftest import T_WORDS


def test_apply_keeps_only_consistent_words(words):
    store = CandidateStore.from_words(words)
    narrowed = apply(store, Feedback.from_hint("tares", "Ggggg"))
    assert list(narrowed.words) == T_WORDS
    assert narrowed.chars.shape == (len(T_WORDS), 5)
    assert len(store) == len(words)  # input store is not modified


def test_apply_matches_predicate(words):
    store = CandidateStore.from_words(words)
    fb = compute_feedback("crane", "thing")
    narrowed = apply(store, fb)
    assert set(narrowed.words) == {w for w in words if fb.matches(w)}


def test_apply_history_is_order_independent(words):
    store = CandidateStore.from_words(words)
    history = [
        Feedback.from_hint("tares", "Ggggg"),
        compute_feedback("pinky", "think"),
        compute_feedback("world", "think"),
    ]
    results = {apply_history(store, list(order)).words for order in itertools.permutations(history)}
    assert len(results) == 1
    assert "think" in results.pop()


def test_contradictory_history_empties_store(words):
    store = CandidateStore.from_words(words)
    store = apply_history(store, [
        Feedback.from_hint("tares", "Ggggg"),
        Feedback.from_hint("tares", "ggggg"),
    ])
    assert len(store) == 0
    assert list(store) == []


def test_empty_history_keeps_everything(words):
    store = CandidateStore.from_words(words)
    assert apply_history(store, []).words == tuple(words)


def test_weights_default_to_neutral():
    store = CandidateStore.from_words(["crane", "thing"], {"crane": 0.25})
    np.testing.assert_allclose(store.weights, [0.25, 1.0])
    assert CandidateStore.from_words(["crane"]).weights.tolist() == [1.0]


def test_weights_follow_elimination():
    store = CandidateStore.from_words(["crane", "thing", "tough"], {"tough": 3.0})
    narrowed = apply(store, Feedback.from_hint("tares", "Ggggg"))
    assert narrowed.words == ("thing", "tough")
    assert narrowed.weights.tolist() == [1.0, 3.0]


def test_store_iterates_candidates():
    store = CandidateStore.from_words(["crane", "thing"])
    assert list(store) == [Candidate("crane"), Candidate("thing")]
    assert "crane" in store
    assert "tough" not in store


def test_weight_keys_match_any_case():
    store = CandidateStore.from_words(["thumb", "crane"], {"THUMB": 0.0, "Crane": 2.0})
    assert store.weights.tolist() == [0.0, 2.0]
