"""
wordle_entropy.py

Command line front end for the Wordle entropy engine.

Replays the turns given on the command line and prints the best next
guesses ranked by entropy.

Options:
-wordlist PATH: word list to load (default: the bundled list).
-turn GUESS PATTERN: one accepted turn, feedback as G/Y/B; repeatable.
-secret WORD: game mode; feedback for each -guess is computed against WORD.
-guess WORD: game-mode guess; repeatable, requires -secret.
-top N: number of suggestions to print.
-cands N: number of remaining candidates to print.
-workers N: worker processes for matrix build and scoring.
-progress: show a progress bar while building the matrix.
-verbose: log engine activity to stderr.
"""

import argparse
import logging
import sys

from wordle_engine.entropy import top_ties
from wordle_engine.errors import WordleError
from wordle_engine.game import WordleGame
from wordle_engine.patterns import parse_pattern, pattern_to_string
from wordle_engine.session import GameSession
from wordle_engine.solver import GameStatus
from wordle_engine.words import DEFAULT_WORDLIST


TOP_SUGGESTIONS = 10


def _count(minimum):
    def parse(text):
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
        if value < minimum:
            raise argparse.ArgumentTypeError(f"must be at least {minimum}, got {value}")
        return value

    return parse


def print_board(turns):
    if not turns:
        print("No turns yet.")
        return
    for n, turn in enumerate(turns, start=1):
        print(f"{n}. {turn.guess.upper()}  {turn.pattern}")


def print_suggestions(solver, top, workers):
    scored = solver.scored_guesses(workers=workers)
    if not scored:
        print("No suggestions available.")
        return

    ties = top_ties(scored)
    if len(ties) > 1:
        print(f"{len(ties)} guesses tie for best at {ties[0][1]:.4f} bits.")

    limit = min(top, len(scored))
    print(f"\nTop {limit} suggestions:")
    for rank, (word, score) in enumerate(scored[:limit], start=1):
        print(f"  {rank:>2}. {word}: {score:.4f} bits")


def print_candidates(solver, n):
    cands = solver.candidates()
    limit = min(n, len(cands))
    print(f"\nFirst {limit} of {len(cands)} candidates:")
    for rank, word in enumerate(cands[:limit], start=1):
        print(f"  {rank:>2}. {word}")


def print_status(session):
    solver = session.solver
    status = session.status
    if status is GameStatus.WON:
        print(f"\nSolved in {len(session.turns)} turns.")
    elif status is GameStatus.LOST:
        print("\nOut of turns.")
    else:
        print(
            f"\nTurn {solver.attempt_number()}/{solver.max_attempts} | "
            f"Remaining candidates: {solver.candidate_count}"
        )


def run_solver(args):
    session = GameSession.from_file(
        args.wordlist, workers=args.workers, progress=args.progress
    )
    for guess, pattern in args.turn or []:
        session.apply_turn(guess, parse_pattern(pattern))
    return session


def run_game(args):
    game = WordleGame.from_file(
        args.wordlist, secret=args.secret, workers=args.workers, progress=args.progress
    )
    for guess in args.guess or []:
        feedback, _ = game.guess(guess)
        print(f"{guess.upper()}: {pattern_to_string(feedback)}")
    return game.session


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Wordle entropy solver: rank next guesses by expected information."
    )
    parser.add_argument(
        "-wordlist",
        default=str(DEFAULT_WORDLIST),
        help="Newline-separated list of 5-letter words (default: bundled list).",
    )
    parser.add_argument(
        "-turn",
        nargs=2,
        action="append",
        metavar=("GUESS", "PATTERN"),
        help="Accepted guess and its G/Y/B feedback, e.g. -turn raise BYGBB.",
    )
    parser.add_argument(
        "-secret",
        default=None,
        help="Game mode: compute feedback against this word.",
    )
    parser.add_argument(
        "-guess",
        action="append",
        metavar="WORD",
        help="Game-mode guess; repeatable. Requires -secret.",
    )
    parser.add_argument(
        "-top",
        type=_count(1),
        default=TOP_SUGGESTIONS,
        help=f"Number of suggestions to print (default: {TOP_SUGGESTIONS}).",
    )
    parser.add_argument(
        "-cands",
        type=_count(0),
        default=0,
        help="Also print the first N remaining candidates.",
    )
    parser.add_argument(
        "-workers",
        type=_count(1),
        default=None,
        help="Worker processes for matrix build and scoring (default: 1).",
    )
    parser.add_argument(
        "-progress",
        action="store_true",
        help="Show a progress bar while building the pattern matrix.",
    )
    parser.add_argument(
        "-verbose",
        action="store_true",
        help="Log engine activity to stderr.",
    )
    args = parser.parse_args(argv)
    if args.guess and args.secret is None:
        parser.error("-guess requires -secret")
    if args.secret is not None and args.turn:
        parser.error("-turn cannot be combined with -secret; use -guess")
    return args


def main(argv=None):
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        session = run_game(args) if args.secret is not None else run_solver(args)
    except WordleError as exc:
        raise SystemExit(str(exc)) from exc

    print()
    print_board(session.turns)
    print_status(session)

    if session.status is GameStatus.ONGOING:
        print_suggestions(session.solver, args.top, args.workers)
    if args.cands:
        print_candidates(session.solver, args.cands)


if __name__ == "__main__":
    main()
