"""
solver.py

The turn-by-turn solver engine.

A solver holds the shared PatternTable plus the ordinals of the words
still consistent with every feedback received so far. Applying a turn is
a single scan of one matrix row restricted to those ordinals.
"""

import enum
import logging

import numpy as np

from wordle_engine.entropy import score_guesses
from wordle_engine.errors import (
    GameOver,
    GuessNotInWordList,
    InconsistentFeedback,
    InvalidResultsPattern,
)
from wordle_engine.patterns import ALL_GREEN, PATTERN_BUCKETS, PatternTable, pattern_to_string
from wordle_engine.words import load_word_list, parse_word


log = logging.getLogger(__name__)

MAX_ATTEMPTS = 6


class GameStatus(enum.Enum):
    ONGOING = "ongoing"
    WON = "won"
    LOST = "lost"


class WordleSolver:
    """
    Candidate set and attempt counter over a shared pattern table.

    Candidates only ever shrink. A failed turn raises and leaves the
    solver exactly as it was.
    """

    def __init__(self, table: PatternTable, max_attempts: int = MAX_ATTEMPTS):
        self._table = table
        self._candidates = np.arange(len(table), dtype=np.intp)
        self._attempts = 0
        self._max_attempts = max_attempts
        self._status = GameStatus.ONGOING

    @classmethod
    def from_word_list(cls, words, workers=None, progress=False):
        return cls(PatternTable.build(words, workers=workers, progress=progress))

    @classmethod
    def from_file(cls, path, workers=None, progress=False):
        """Load a word list and build its pattern table. Raises LoadError."""
        return cls.from_word_list(load_word_list(path), workers=workers, progress=progress)

    def copy(self):
        """Independent solver sharing this one's pattern table."""
        clone = object.__new__(type(self))
        clone._table = self._table
        clone._candidates = self._candidates.copy()
        clone._attempts = self._attempts
        clone._max_attempts = self._max_attempts
        clone._status = self._status
        return clone

    __copy__ = copy

    @property
    def table(self) -> PatternTable:
        return self._table

    @property
    def words(self) -> tuple:
        return self._table.words

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def candidate_count(self) -> int:
        return len(self._candidates)

    def attempt_number(self) -> int:
        return self._attempts + 1

    def candidates(self) -> list[str]:
        words = self._table.words
        return [words[i] for i in self._candidates]

    def contains_word(self, word) -> bool:
        return word in self._table

    def scored_guesses(self, workers=None):
        return score_guesses(self._table, self._candidates, workers=workers)

    def apply_turn(self, guess, feedback) -> GameStatus:
        """
        Keep only the candidates that would have produced `feedback`.

        The guess may be any vocabulary word, not only a current candidate.
        """
        if self._status is not GameStatus.ONGOING:
            raise GameOver(f"Game is already {self._status.value}")
        if isinstance(feedback, bool) or not isinstance(feedback, (int, np.integer)):
            raise InvalidResultsPattern()
        if not 0 <= feedback < PATTERN_BUCKETS:
            raise InvalidResultsPattern()

        guess = parse_word(guess)
        try:
            guess_idx = self._table.ordinal(guess)
        except KeyError:
            raise GuessNotInWordList(guess) from None

        row = self._table.row(guess_idx)
        remaining = self._candidates[row[self._candidates] == feedback]
        if len(remaining) == 0:
            raise InconsistentFeedback()

        self._candidates = remaining
        self._attempts += 1
        self._status = self._check_status(feedback)
        log.debug(
            "Turn %d: %s %s -> %d candidates (%s)",
            self._attempts,
            guess,
            pattern_to_string(feedback),
            len(remaining),
            self._status.value,
        )
        return self._status

    def _check_status(self, feedback):
        if feedback == ALL_GREEN:
            return GameStatus.WON
        if self._attempts >= self._max_attempts:
            return GameStatus.LOST
        return GameStatus.ONGOING
