from unittest.mock import MagicMock

import pytest
import requests

from pointbet.client import (
    FALLBACK_MESSAGE,
    NETWORK_MESSAGE,
    TIMEOUT_MESSAGE,
    ApiClient,
    ApiError,
)


def fake_response(status_code=200, json_body=None, text="", content_type="application/json"):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.headers = {"Content-Type": content_type}
    response.json.return_value = json_body
    response.text = text
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def api(session):
    return ApiClient("https://api.example.com/", timeout=5, session=session)


def test_builds_request_with_token_and_body(api, session):
    session.request.return_value = fake_response(json_body={"id": "bet-1"})

    result = api.bets.place("event-1", "a", 50, token="tok")

    assert result == {"id": "bet-1"}
    session.request.assert_called_once_with(
        "POST",
        "https://api.example.com/api/bets",
        json={"event_id": "event-1", "team": "a", "amount": 50},
        headers={"Content-Type": "application/json", "Authorization": "Bearer tok"},
        timeout=5,
    )


def test_login_sends_identifier(api, session):
    session.request.return_value = fake_response(json_body={"session": {"access_token": "x"}})

    api.auth.login("player_one", "Password123!")

    args, kwargs = session.request.call_args
    assert args == ("POST", "https://api.example.com/api/auth/login")
    assert kwargs["json"] == {"identifier": "player_one", "password": "Password123!"}
    assert "Authorization" not in kwargs["headers"]


def test_returns_text_for_non_json_responses(api, session):
    session.request.return_value = fake_response(text="pong", content_type="text/plain")

    assert api.request("/health") == "pong"


def test_raises_server_error_message(api, session):
    session.request.return_value = fake_response(401, json_body={"error": "Invalid token"})

    with pytest.raises(ApiError) as exc_info:
        api.auth.profile("bad")

    assert exc_info.value.message == "Invalid token"
    assert exc_info.value.status_code == 401


def test_raises_text_body_for_non_json_errors(api, session):
    session.request.return_value = fake_response(502, text="Bad Gateway", content_type="text/html")

    with pytest.raises(ApiError, match="Bad Gateway"):
        api.events.get_all("tok")


def test_falls_back_to_generic_message(api, session):
    session.request.return_value = fake_response(500, json_body={"detail": "nope"})

    with pytest.raises(ApiError, match=FALLBACK_MESSAGE):
        api.users.get_profile("tok")


def test_unparseable_json_error(api, session):
    response = fake_response(500)
    response.json.side_effect = ValueError("bad json")
    session.request.return_value = response

    with pytest.raises(ApiError, match="Failed to parse response"):
        api.events.get_by_id("event-1", "tok")


def test_timeout(api, session):
    session.request.side_effect = requests.Timeout()

    with pytest.raises(ApiError, match=TIMEOUT_MESSAGE):
        api.bets.get_by_user("tok")


def test_network_failure(api, session):
    session.request.side_effect = requests.ConnectionError("refused")

    with pytest.raises(ApiError) as exc_info:
        api.auth.register("player_one", "p@example.com", "Password123!")

    assert exc_info.value.message == NETWORK_MESSAGE
    assert exc_info.value.status_code is None
