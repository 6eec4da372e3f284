"""
session.py

Turn history on top of a solver, with undo.

Undo does not try to reverse filtering. It drops the last turn and
replays the rest from a pristine solver; with at most six turns that is
cheap and always exact.
"""

import logging
from typing import NamedTuple

from wordle_engine.errors import UndoError, WordleError
from wordle_engine.patterns import pattern_to_string
from wordle_engine.solver import GameStatus, WordleSolver
from wordle_engine.words import parse_word


log = logging.getLogger(__name__)


class Turn(NamedTuple):
    guess: str
    feedback: int

    @property
    def pattern(self) -> str:
        return pattern_to_string(self.feedback)


class GameSession:
    """
    Logged turns plus the solver state they produce.

    The session only uses the pattern table and attempt limit of the
    solver it is given; it keeps its own fresh solver, so turns applied
    through the caller's handle never leak into the log.
    """

    def __init__(self, solver: WordleSolver):
        if solver.attempts:
            raise ValueError("GameSession needs a solver with no turns applied")
        self._initial = WordleSolver(solver.table, solver.max_attempts)
        self._solver = self._initial.copy()
        self._turns = []

    @classmethod
    def from_file(cls, path, workers=None, progress=False):
        return cls(WordleSolver.from_file(path, workers=workers, progress=progress))

    @property
    def solver(self) -> WordleSolver:
        return self._solver

    @property
    def turns(self) -> tuple:
        return tuple(self._turns)

    @property
    def status(self) -> GameStatus:
        return self._solver.status

    def apply_turn(self, guess, feedback) -> GameStatus:
        """Apply one turn; only successful turns are logged."""
        status = self._solver.apply_turn(guess, feedback)
        self._turns.append(Turn(parse_word(guess), int(feedback)))
        return status

    def _replay(self, turns):
        rebuilt = self._initial.copy()
        for turn in turns:
            rebuilt.apply_turn(turn.guess, turn.feedback)
        return rebuilt

    def undo(self) -> bool:
        """
        Revert the last accepted turn.

        Returns False when there is nothing to undo. If replaying the
        remaining turns fails, the session is left as it was and UndoError
        is raised.
        """
        if not self._turns:
            return False

        popped = self._turns.pop()
        try:
            rebuilt = self._replay(self._turns)
        except WordleError as exc:
            self._turns.append(popped)
            raise UndoError(f"Could not undo turn {popped.guess}: {exc}") from exc

        self._solver = rebuilt
        log.debug("Undid %s %s, %d turn(s) left", popped.guess, popped.pattern, len(self._turns))
        return True
