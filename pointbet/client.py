"""HTTP client for the pointbet API.

Used by scripts and integration checks; it speaks the same JSON contract as
the web client::

    client = ApiClient("http://localhost:5000")
    session = client.auth.login("player_one", "Secret123!")["session"]
    events = client.events.get_all(session["access_token"])
"""

import requests

from pointbet.core.config import settings
from pointbet.core.logging import get_logger

logger = get_logger(__name__)

TIMEOUT_MESSAGE = "Request timed out. Please try again."
NETWORK_MESSAGE = "Network connection issue. Please check your internet connection and try again."
FALLBACK_MESSAGE = "Something went wrong"


class ApiError(Exception):
    def __init__(self, message, status_code=None, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


def _parse_body(response):
    content_type = response.headers.get("Content-Type", "")
    if "application/json" in content_type:
        try:
            return response.json()
        except ValueError:
            logger.error("api_response_parse_failed", status_code=response.status_code)
            return "Failed to parse response"
    return response.text


def _error_message(data):
    if isinstance(data, dict) and data.get("error"):
        return data["error"]
    if isinstance(data, str) and data:
        return data
    return FALLBACK_MESSAGE


class ApiClient:
    def __init__(self, base_url=None, timeout=None, session=None):
        self.base_url = (base_url or settings.API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.session = session or requests.Session()

        self.auth = AuthApi(self)
        self.events = EventsApi(self)
        self.bets = BetsApi(self)
        self.users = UsersApi(self)

    def request(self, endpoint, method="GET", body=None, token=None, headers=None):
        url = f"{self.base_url}/api{endpoint}"
        request_headers = {"Content-Type": "application/json"}
        request_headers.update(headers or {})
        if token:
            request_headers["Authorization"] = f"Bearer {token}"

        logger.debug("api_request", method=method, url=url, has_body=body is not None)
        try:
            response = self.session.request(
                method,
                url,
                json=body,
                headers=request_headers,
                timeout=self.timeout,
            )
        except requests.Timeout:
            logger.error("api_request_timeout", url=url, timeout=self.timeout)
            raise ApiError(TIMEOUT_MESSAGE)
        except requests.ConnectionError as e:
            logger.error("api_network_error", url=url, error=str(e))
            raise ApiError(NETWORK_MESSAGE)

        logger.debug("api_response", url=url, status_code=response.status_code)
        data = _parse_body(response)

        if not response.ok:
            message = _error_message(data)
            logger.error("api_request_failed", url=url, status_code=response.status_code, error=message)
            raise ApiError(message, status_code=response.status_code, payload=data)
        return data


class AuthApi:
    def __init__(self, client):
        self.client = client

    def login(self, identifier, password):
        return self.client.request(
            "/auth/login", method="POST", body={"identifier": identifier, "password": password}
        )

    def register(self, username, email, password):
        return self.client.request(
            "/auth/register",
            method="POST",
            body={"username": username, "email": email, "password": password},
        )

    def logout(self, token=None):
        return self.client.request("/auth/logout", method="POST", token=token)

    def profile(self, token):
        return self.client.request("/auth/profile", token=token)

    def update_profile(self, data, token):
        return self.client.request("/auth/profile", method="PUT", body=data, token=token)


class EventsApi:
    def __init__(self, client):
        self.client = client

    def get_all(self, token):
        return self.client.request("/events", token=token)

    def get_by_id(self, event_id, token):
        return self.client.request(f"/events/{event_id}", token=token)


class BetsApi:
    def __init__(self, client):
        self.client = client

    def place(self, event_id, team, amount, token):
        return self.client.request(
            "/bets",
            method="POST",
            body={"event_id": event_id, "team": team, "amount": amount},
            token=token,
        )

    def get_by_user(self, token):
        return self.client.request("/bets/user", token=token)


class UsersApi:
    def __init__(self, client):
        self.client = client

    def get_profile(self, token):
        return self.client.request("/users/profile", token=token)

    def update_profile(self, data, token):
        return self.client.request("/users/profile", method="PUT", body=data, token=token)
