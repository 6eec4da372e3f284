import math
from collections import Counter

import numpy as np
import pytest

from wordle_engine.entropy import entropy_from_counts, guess_entropy, score_guesses, top_ties
from wordle_engine.patterns import PatternTable, encode_pattern


def reference_entropy(guess, targets):
    counts = Counter(encode_pattern(guess, t) for t in targets)
    n = len(targets)
    return -sum(c / n * math.log2(c / n) for c in counts.values())


def test_entropy_from_counts():
    assert entropy_from_counts(np.array([4])) == 0.0
    assert entropy_from_counts(np.array([1, 1, 1, 1])) == pytest.approx(2.0)
    assert entropy_from_counts(np.array([2, 0, 2])) == pytest.approx(1.0)
    assert entropy_from_counts(np.array([0, 0])) == 0.0


def test_guess_entropy_empty_candidates():
    table = PatternTable.build(["arise", "raise"])
    assert guess_entropy(table.row(0), np.array([], dtype=np.intp)) == 0.0


def test_scores_match_reference(bundled_table):
    candidates = np.arange(len(bundled_table))
    scored = score_guesses(bundled_table, candidates)
    words = bundled_table.words

    assert len(scored) == len(words)
    for word, score in scored[:10]:
        assert score == pytest.approx(reference_entropy(word, words))
    assert all(a[1] >= b[1] for a, b in zip(scored, scored[1:]))


def test_ties_break_lexicographically():
    # No shared letters: every guess splits the rest identically.
    table = PatternTable.build(["pqrst", "abcde", "klmno", "fghij"])
    scored = score_guesses(table, np.arange(4))

    assert [word for word, _ in scored] == ["abcde", "fghij", "klmno", "pqrst"]
    assert len({score for _, score in scored}) == 1
    assert scored[0][1] == pytest.approx(reference_entropy("abcde", table.words))


def test_scoring_restricted_to_candidates(bundled_table):
    candidates = np.array([bundled_table.ordinal(w) for w in ["stone", "crane", "plant"]])
    scored = score_guesses(bundled_table, candidates)
    assert sorted(word for word, _ in scored) == ["crane", "plant", "stone"]


def test_scoring_is_deterministic(bundled_table):
    candidates = np.arange(len(bundled_table))
    assert score_guesses(bundled_table, candidates) == score_guesses(bundled_table, candidates)


def test_parallel_scoring_matches_serial(bundled_table):
    candidates = np.arange(len(bundled_table))
    serial = score_guesses(bundled_table, candidates)
    parallel = score_guesses(bundled_table, candidates, workers=2)
    assert parallel == serial


def test_top_ties():
    scored = [("abcde", 1.0), ("fghij", 1.0), ("klmno", 0.5)]
    assert top_ties(scored) == scored[:2]
    assert top_ties(scored[2:]) == scored[2:]
    assert top_ties([]) == []
