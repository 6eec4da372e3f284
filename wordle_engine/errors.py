"""
errors.py

Exceptions raised by the engine.

Everything derives from WordleError so callers can catch the whole family.
Per-turn errors never leave a solver or session partially updated: the
caller can re-prompt and retry the same turn.
"""


class WordleError(Exception):
    """Base class for all engine errors."""


class LoadError(WordleError, ValueError):
    """Word list file is unreadable, malformed or empty."""

    def __init__(self, message, path=None, line_no=None):
        super().__init__(message)
        self.path = path
        self.line_no = line_no


class InvalidWord(WordleError, ValueError):
    """Token is not exactly five ASCII letters."""

    def __init__(self, text):
        super().__init__(f"Invalid word {text!r}: expected exactly 5 ASCII letters")
        self.text = text


class InvalidResultsPattern(WordleError, ValueError):
    def __init__(self, message="Invalid results: use exactly 5 characters from G, Y, and B"):
        super().__init__(message)


class GuessNotInWordList(WordleError, ValueError):
    def __init__(self, word):
        super().__init__(f"Guess '{word}' is not in the solver word list")
        self.word = word


class InconsistentFeedback(WordleError):
    def __init__(self):
        super().__init__(
            "Inconsistent feedback: no candidate matches that guess/pattern pair"
        )


class GameOver(WordleError):
    """A turn was applied after the game was already won or lost."""


class UndoError(WordleError):
    """Replaying the turn log failed; the session was left untouched."""
