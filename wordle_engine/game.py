"""
game.py

Game mode: the engine holds a secret word and computes the feedback for
each guess itself.
"""

import random

from wordle_engine.errors import GuessNotInWordList
from wordle_engine.patterns import encode_pattern
from wordle_engine.session import GameSession
from wordle_engine.words import parse_word


def pick_secret(words, rng=None):
    rng = rng or random
    return rng.choice(list(words))


class WordleGame:
    def __init__(self, session: GameSession, secret: str):
        secret = parse_word(secret)
        if not session.solver.contains_word(secret):
            raise GuessNotInWordList(secret)
        self._session = session
        self._secret = secret

    @classmethod
    def from_file(cls, path, secret=None, rng=None, workers=None, progress=False):
        session = GameSession.from_file(path, workers=workers, progress=progress)
        if secret is None:
            secret = pick_secret(session.solver.words, rng)
        return cls(session, secret)

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def status(self):
        return self._session.status

    def guess(self, word):
        """Score `word` against the secret and apply it. Returns (feedback, status)."""
        word = parse_word(word)
        if not self._session.solver.contains_word(word):
            raise GuessNotInWordList(word)
        feedback = encode_pattern(word, self._secret)
        status = self._session.apply_turn(word, feedback)
        return feedback, status

    def undo(self) -> bool:
        return self._session.undo()

    def hints(self, n=5, workers=None):
        return self._session.solver.scored_guesses(workers=workers)[:n]
