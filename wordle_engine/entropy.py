"""
entropy.py

Entropy scoring of guesses against the live candidate set.

A guess splits the candidates into at most 243 buckets, one per feedback
pattern. Its score is the Shannon entropy (bits) of that split: the
expected information the feedback will reveal.
"""

import logging

import numpy as np

from wordle_engine.patterns import PATTERN_BUCKETS, pool_context


log = logging.getLogger(__name__)

TIE_EPSILON = 1e-10

_SCORE_WORKER_STATE = {}


def entropy_from_counts(counts):
    """Compute Shannon entropy from bucket counts."""
    counts = np.asarray(counts)
    total = counts.sum()
    if total == 0:
        return 0.0
    # Summed in sorted order: equal partitions must score bit-identically.
    counts = np.sort(counts[counts > 0])
    probs = counts / total
    return float(np.sum(probs * np.log2(total / counts)))


def guess_entropy(row, candidates):
    """Entropy of one guess (its matrix row) over the candidate ordinals."""
    if len(candidates) == 0:
        return 0.0
    counts = np.bincount(row[candidates], minlength=PATTERN_BUCKETS)
    return entropy_from_counts(counts)


def _rank(scored):
    scored.sort(key=lambda item: (-item[1], item[0]))
    return scored


def _init_score_worker(table, candidates):
    _SCORE_WORKER_STATE["table"] = table
    _SCORE_WORKER_STATE["candidates"] = candidates


def _worker_score_chunk(guess_ordinals):
    table = _SCORE_WORKER_STATE["table"]
    candidates = _SCORE_WORKER_STATE["candidates"]
    return [
        (table.words[g], guess_entropy(table.matrix[g], candidates))
        for g in guess_ordinals
    ]


def score_guesses(table, candidates, workers=None):
    """
    Score every candidate as a guess, best first.

    Guesses are restricted to the candidates themselves (hard mode). Ties
    are broken by ascending word so the order is fully deterministic.
    """
    candidates = np.asarray(candidates, dtype=np.intp)
    worker_count = max(1, int(workers or 1))

    if worker_count == 1 or len(candidates) < 2 * worker_count:
        scored = [
            (table.words[g], guess_entropy(table.matrix[g], candidates))
            for g in candidates
        ]
        return _rank(scored)

    log.debug("Scoring %d guesses with %d worker(s)", len(candidates), worker_count)
    chunks = np.array_split(candidates, worker_count * 4)
    scored = []
    ctx = pool_context()
    with ctx.Pool(
        processes=worker_count,
        initializer=_init_score_worker,
        initargs=(table, candidates),
    ) as pool:
        for result in pool.imap_unordered(_worker_score_chunk, chunks):
            scored.extend(result)
    return _rank(scored)


def top_ties(scored, eps=TIE_EPSILON):
    """Leading run of suggestions scoring within eps of the best one."""
    if not scored:
        return []
    best = scored[0][1]
    end = 1
    while end < len(scored) and abs(scored[end][1] - best) <= eps:
        end += 1
    return scored[:end]
