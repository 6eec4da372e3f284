"""
patterns.py

Feedback oracle and the precomputed pattern matrix.

Each feedback pattern is an integer 0..242 encoding the 5-tile Wordle
feedback in base-3, position 0 being the least significant digit:

    0 = absent  (B)
    1 = present (Y)
    2 = correct (G)

The matrix holds the oracle result for every (guess, target) pair of the
vocabulary, so filtering and entropy scoring never re-run the oracle.
"""

from collections import Counter
import logging
import multiprocessing as mp

import numpy as np
from tqdm import tqdm

from wordle_engine.errors import InvalidResultsPattern
from wordle_engine.words import WORD_LENGTH


log = logging.getLogger(__name__)

PATTERN_BUCKETS = 3**WORD_LENGTH
ALL_GREEN = PATTERN_BUCKETS - 1

ABSENT, PRESENT, CORRECT = 0, 1, 2
PATTERN_CHARS = "BYG"

_ROW_WORKER_STATE = {}


def encode_pattern(guess: str, target: str) -> int:
    """
    Encode Wordle feedback for a (guess, target) pair as a base-3 integer.

    Duplicate letters follow the game's rules:

    1. First mark greens. Each green consumes one instance of that letter
       from the target.

    2. Then, left to right, mark yellows only while unused instances of
       that letter remain in the target.

    A single left-to-right pass would hand out yellows that a later green
    needs, e.g. "allee" against "apple" must be GYBBG, not GYYBG.
    """
    result = [ABSENT] * WORD_LENGTH
    counts = Counter(target)

    for i in range(WORD_LENGTH):
        if guess[i] == target[i]:
            result[i] = CORRECT
            counts[guess[i]] -= 1

    for i in range(WORD_LENGTH):
        if result[i] == ABSENT and counts[guess[i]] > 0:
            result[i] = PRESENT
            counts[guess[i]] -= 1

    code = 0
    for digit in reversed(result):
        code = code * 3 + digit
    return code


def parse_pattern(text: str) -> int:
    """Parse a G/Y/B string such as 'GYBBG' into a pattern code."""
    s = text.strip().upper()
    if len(s) != WORD_LENGTH or any(ch not in PATTERN_CHARS for ch in s):
        raise InvalidResultsPattern()

    code = 0
    for ch in reversed(s):
        code = code * 3 + PATTERN_CHARS.index(ch)
    return code


def pattern_to_string(code: int) -> str:
    if isinstance(code, bool) or not isinstance(code, (int, np.integer)):
        raise InvalidResultsPattern(f"Invalid results code: {code!r}")
    if not 0 <= code < PATTERN_BUCKETS:
        raise InvalidResultsPattern(f"Invalid results code: {code}")

    code = int(code)
    chars = []
    for _ in range(WORD_LENGTH):
        chars.append(PATTERN_CHARS[code % 3])
        code //= 3
    return "".join(chars)


def pattern_row(guess: str, words) -> np.ndarray:
    """Oracle results of one guess against every word, in word order."""
    row = np.empty(len(words), dtype=np.uint8)
    for j, target in enumerate(words):
        row[j] = encode_pattern(guess, target)
    return row


def _init_row_worker(words):
    _ROW_WORKER_STATE["words"] = words


def _worker_row(guess_idx):
    words = _ROW_WORKER_STATE["words"]
    return pattern_row(words[guess_idx], words)


def pool_context():
    start_methods = mp.get_all_start_methods()
    return mp.get_context("fork" if "fork" in start_methods else "spawn")


def build_matrix(words, workers=None, progress=False) -> np.ndarray:
    """
    Compute the full (N, N) pattern matrix from scratch.

    This is the most expensive step, but it runs once per word list.
    Rows are independent, so with workers > 1 they are spread over a
    process pool; each worker only ever produces its own row.
    """
    words = tuple(words)
    n = len(words)
    matrix = np.zeros((n, n), dtype=np.uint8)
    worker_count = max(1, int(workers or 1))

    log.info("Building %dx%d pattern matrix with %d worker(s)", n, n, worker_count)

    if worker_count == 1 or n < 2:
        for i in tqdm(range(n), desc="Pattern matrix", disable=not progress):
            matrix[i] = pattern_row(words[i], words)
    else:
        ctx = pool_context()
        chunk_size = max(1, n // (worker_count * 8))
        with ctx.Pool(
            processes=worker_count,
            initializer=_init_row_worker,
            initargs=(words,),
        ) as pool:
            rows = pool.imap(_worker_row, range(n), chunksize=chunk_size)
            for i, row in enumerate(
                tqdm(rows, total=n, desc="Pattern matrix", disable=not progress)
            ):
                matrix[i] = row

    matrix.flags.writeable = False
    return matrix


class PatternTable:
    """
    Vocabulary, word -> ordinal lookup and pattern matrix as one value.

    Built once per word list and shared by reference between every solver
    copy; nothing mutates it after construction.
    """

    __slots__ = ("words", "index", "matrix")

    def __init__(self, words, matrix):
        words = tuple(words)
        if matrix.shape != (len(words), len(words)):
            raise ValueError(
                f"matrix shape {matrix.shape} does not match {len(words)} words"
            )
        if matrix.flags.writeable:
            matrix = matrix.copy()
            matrix.flags.writeable = False
        self.words = words
        self.index = {word: i for i, word in enumerate(words)}
        self.matrix = matrix

    @classmethod
    def build(cls, words, workers=None, progress=False):
        words = tuple(words)
        if len(set(words)) != len(words):
            raise ValueError("word list contains duplicates")
        return cls(words, build_matrix(words, workers=workers, progress=progress))

    def __len__(self):
        return len(self.words)

    def __contains__(self, word):
        return word in self.index

    def ordinal(self, word):
        return self.index[word]

    def row(self, ordinal):
        return self.matrix[ordinal]
