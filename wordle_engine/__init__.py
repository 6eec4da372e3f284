"""Wordle solver engine: feedback oracle, pattern matrix, entropy ranking."""
