"""
words.py

Word codec and word list loading.

A word is a plain lowercase str of exactly five ASCII letters. Loading
validates every line instead of silently skipping bad ones, so a typo in
the word list is reported with its line number.
"""

import logging
from pathlib import Path

from wordle_engine.errors import InvalidWord, LoadError


log = logging.getLogger(__name__)

WORD_LENGTH = 5

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_WORDLIST = DATA_DIR / "wordlist.txt"


def parse_word(text: str) -> str:
    """Validate a token and normalize it to lowercase."""
    token = text.strip()
    if len(token) != WORD_LENGTH or not (token.isascii() and token.isalpha()):
        raise InvalidWord(text)
    return token.lower()


def render_word(word: str) -> str:
    return parse_word(word)


def load_word_list(path) -> list[str]:
    """
    Load a newline-separated word list.

    Every line must hold one valid word. Duplicates (case-insensitive) are
    dropped, keeping the first occurrence so ordinals stay stable.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = [line.rstrip("\r\n") for line in f]
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"Could not read word list {path}: {exc}", path=path) from exc

    seen = set()
    words = []
    for line_no, line in enumerate(lines, start=1):
        try:
            word = parse_word(line)
        except InvalidWord as exc:
            raise LoadError(
                f"Invalid word at line {line_no}: expected exactly 5 ASCII letters",
                path=path,
                line_no=line_no,
            ) from exc

        if word not in seen:
            seen.add(word)
            words.append(word)

    if not words:
        raise LoadError("Word list is empty after validation", path=path)

    dropped = len(lines) - len(words)
    log.info("Loaded %d words from %s (%d duplicates dropped)", len(words), path, dropped)
    return words
