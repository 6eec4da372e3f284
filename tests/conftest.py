import pytest

from wordle_engine.patterns import PatternTable
from wordle_engine.solver import WordleSolver
from wordle_engine.words import DEFAULT_WORDLIST, load_word_list


SCENARIO_WORDS = ["arise", "raise", "serai", "irate"]


@pytest.fixture(scope="session")
def bundled_words():
    return load_word_list(DEFAULT_WORDLIST)


@pytest.fixture(scope="session")
def bundled_table(bundled_words):
    return PatternTable.build(bundled_words)


@pytest.fixture
def bundled_solver(bundled_table):
    return WordleSolver(bundled_table)


@pytest.fixture
def scenario_solver():
    return WordleSolver.from_word_list(SCENARIO_WORDS)
