"""
Testing the session state machine
- Create a session, make guesses, and check status/attempts/history, etc.
"""

import pytest

from mastermind_client.errors import RemoteError, SessionStateError, TransportError, DecodeError
from mastermind_client.session import GameSession
from mastermind_client.validator import parse_guess
from fakes import FakeResponse, json_response


def created_session(api, http, settings, game_id="abc123") -> GameSession:
    http.push(json_response(200, {"game_id": game_id}))
    session = GameSession(api, settings)
    session.create()
    return session


def test_create_starts_in_progress(api, http, settings):
    http.push(json_response(200, {"game_id": "abc123"}))
    session = GameSession(api, settings)
    assert session.status == "uncreated"

    assert session.create() == "abc123"
    assert session.game_id == "abc123"
    assert session.status == "in_progress"
    assert session.attempts == 0


def test_create_failure_leaves_session_uncreated(api, http, settings, connection_error):
    http.push(connection_error)
    session = GameSession(api, settings)

    with pytest.raises(TransportError):
        session.create()
    assert session.status == "uncreated"
    assert session.game_id is None


def test_create_twice_is_rejected(api, http, settings):
    session = created_session(api, http, settings)
    with pytest.raises(SessionStateError):
        session.create()


def test_guess_before_create_is_rejected(api, settings):
    session = GameSession(api, settings)
    with pytest.raises(SessionStateError):
        session.submit_guess(parse_guess("1234"))


def test_partial_feedback_keeps_playing(api, http, settings):
    session = created_session(api, http, settings)
    http.push(json_response(200, {"black": 1, "white": 2}))

    feedback = session.submit_guess(parse_guess("1234"))

    assert feedback.render() == "BWW"
    assert session.status == "in_progress"
    assert session.attempts == 1
    assert session.attempts_left == 9
    assert [(h.guess, h.black, h.white) for h in session.history] == [("1234", 1, 2)]


def test_four_blacks_wins(api, http, settings):
    session = created_session(api, http, settings)
    http.push(json_response(200, {"black": 4, "white": 0}))

    feedback = session.submit_guess(parse_guess("1234"))

    assert feedback.render() == "BBBB"
    assert session.status == "won"
    with pytest.raises(SessionStateError):
        session.submit_guess(parse_guess("1234"))
    # no request was sent for the rejected guess
    assert http.paths("POST") == ["/game", "/guess"]


def test_not_found_abandons_session(api, http, settings):
    session = created_session(api, http, settings)
    http.push(json_response(404, {"error": "game not found"}))

    with pytest.raises(RemoteError):
        session.submit_guess(parse_guess("1234"))

    assert session.status == "abandoned"
    with pytest.raises(SessionStateError):
        session.submit_guess(parse_guess("1234"))


def test_other_errors_keep_session_but_use_attempt(api, http, settings):
    session = created_session(api, http, settings)
    http.push(FakeResponse(200, b"not json"))

    with pytest.raises(DecodeError):
        session.submit_guess(parse_guess("1234"))

    assert session.status == "in_progress"
    assert session.attempts == 1
    assert session.history == []


def test_attempt_budget_is_enforced(api, http, settings):
    session = created_session(api, http, settings)
    for _ in range(settings.max_attempts):
        http.push(json_response(200, {"black": 0, "white": 1}))
        session.submit_guess(parse_guess("1111"))

    assert session.attempts == settings.max_attempts
    with pytest.raises(SessionStateError):
        session.submit_guess(parse_guess("1111"))

    session.mark_exhausted()
    assert session.status == "exhausted"


def test_mark_exhausted_too_early(api, http, settings):
    session = created_session(api, http, settings)
    with pytest.raises(SessionStateError):
        session.mark_exhausted()


def test_delete_success(api, http, settings):
    session = created_session(api, http, settings)
    http.push(FakeResponse(204))

    assert session.delete() is True
    assert session.deleted
    # second call does not hit the server again
    assert session.delete() is True
    assert http.paths("DELETE") == ["/game/abc123"]


def test_delete_failure_never_raises(api, http, settings, connection_error, caplog):
    session = created_session(api, http, settings)
    http.push(connection_error)

    with caplog.at_level("WARNING"):
        assert session.delete() is False
    assert "Could not delete game session abc123" in caplog.text
    assert not session.deleted


def test_delete_remote_error_never_raises(api, http, settings):
    session = created_session(api, http, settings)
    http.push(json_response(404, {"error": "game not found"}))

    assert session.delete() is False


def test_delete_without_game_is_noop(api, http, settings):
    session = GameSession(api, settings)
    assert session.delete() is False
    assert http.calls == []
