import pytest

from wordle_engine.errors import GuessNotInWordList, InconsistentFeedback, UndoError, WordleError
from wordle_engine.patterns import ALL_GREEN, encode_pattern, parse_pattern
from wordle_engine.session import GameSession, Turn
from wordle_engine.solver import GameStatus


def snapshot(session):
    solver = session.solver
    return (solver.candidates(), solver.attempt_number(), solver.status, session.turns)


@pytest.fixture
def session(bundled_solver):
    return GameSession(bundled_solver)


def test_apply_turn_logs_normalized_turn(session):
    feedback = encode_pattern("crane", "stone")
    status = session.apply_turn("CRANE", feedback)

    assert status is GameStatus.ONGOING
    assert session.turns == (Turn("crane", feedback),)
    assert session.turns[0].pattern == "BBBGG"


def test_failed_turn_is_not_logged(session):
    session.apply_turn("crane", encode_pattern("crane", "stone"))
    before = snapshot(session)

    with pytest.raises(InconsistentFeedback):
        session.apply_turn("crane", ALL_GREEN)
    with pytest.raises(GuessNotInWordList):
        session.apply_turn("zzzzz", 0)

    assert snapshot(session) == before


def test_undo_with_empty_log(session):
    before = snapshot(session)
    assert session.undo() is False
    assert snapshot(session) == before


def test_undo_inverts_each_turn(session):
    guesses = ["crane", "about", "plant"]
    history = [snapshot(session)]
    for guess in guesses:
        session.apply_turn(guess, encode_pattern(guess, "stone"))
        history.append(snapshot(session))

    for expected in reversed(history[:-1]):
        assert session.undo() is True
        assert snapshot(session) == expected

    assert session.undo() is False


def test_undo_reopens_a_won_game(session):
    session.apply_turn("crane", encode_pattern("crane", "stone"))
    assert session.apply_turn("stone", ALL_GREEN) is GameStatus.WON

    assert session.undo() is True
    assert session.status is GameStatus.ONGOING
    assert session.apply_turn("stone", ALL_GREEN) is GameStatus.WON


def test_undo_keeps_state_when_replay_fails(session, monkeypatch):
    session.apply_turn("crane", encode_pattern("crane", "stone"))
    session.apply_turn("about", encode_pattern("about", "stone"))
    before = snapshot(session)
    solver = session.solver

    def broken_replay(turns):
        raise WordleError("replay failed")

    monkeypatch.setattr(session, "_replay", broken_replay)

    with pytest.raises(UndoError):
        session.undo()
    assert session.solver is solver
    assert snapshot(session) == before


def test_from_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("arise\nraise\nserai\nirate\n", encoding="utf-8")

    session = GameSession.from_file(path)
    session.apply_turn("raise", parse_pattern("YYGGG"))
    assert session.solver.candidates() == ["arise"]


def test_session_rejects_solver_with_turns(bundled_solver):
    bundled_solver.apply_turn("crane", encode_pattern("crane", "stone"))
    with pytest.raises(ValueError):
        GameSession(bundled_solver)


def test_callers_solver_does_not_leak_into_session(bundled_solver):
    session = GameSession(bundled_solver)
    assert session.solver is not bundled_solver

    bundled_solver.apply_turn("crane", encode_pattern("crane", "stone"))
    assert session.solver.attempt_number() == len(session.turns) + 1
    assert session.solver.candidate_count == len(bundled_solver.words)

    session.apply_turn("about", encode_pattern("about", "stone"))
    assert session.undo() is True
    assert session.turns == ()
    assert session.solver.attempt_number() == 1
    assert session.solver.candidates() == list(bundled_solver.words)


def test_undo_reopens_a_lost_game(session):
    for guess in ["crane", "about", "black", "plant", "light", "music"]:
        status = session.apply_turn(guess, encode_pattern(guess, "stone"))
    assert status is GameStatus.LOST

    assert session.undo() is True
    assert session.status is GameStatus.ONGOING
    assert session.solver.attempt_number() == 6
