"""Tests for the backend client (no network)."""

import pytest
import requests

from backend_client import BackendClient, BackendError
from config import Settings


class FakeResponse:
    def __init__(self, status_code=200, payload=None, reason="OK", json_error=False):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload
        self._json_error = json_error

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._json_error:
            raise ValueError("not json")
        return self._payload


class FakeSession:
    def __init__(self, health=None, post=None, get=None):
        self.health = health if health is not None else FakeResponse(payload={"status": "up"})
        self.post_result = post
        self.get_result = get
        self.calls = []

    def _answer(self, result):
        if isinstance(result, Exception):
            raise result
        return result

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append(("GET", url, params))
        if url.endswith("/chat"):
            return self._answer(self.get_result)
        return self._answer(self.health)

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append(("POST", url, json))
        return self._answer(self.post_result)


SETTINGS = Settings(backend_url="http://backend.test", request_timeout=5.0)


def _client(session):
    return BackendClient(SETTINGS, session=session)


class TestFetchOutput:

    def test_post_returns_output_untouched(self):
        output = [{"name": "A"}]
        session = FakeSession(post=FakeResponse(payload={"output": output}))
        assert _client(session).fetch_output("ml") == output
        assert session.calls == [
            ("GET", "http://backend.test/", None),
            ("POST", "http://backend.test/chat", {"query": "ml"}),
        ]

    def test_connection_error_falls_back_to_get(self):
        session = FakeSession(
            post=requests.ConnectionError("refused"),
            get=FakeResponse(payload={"output": "text answer"}),
        )
        assert _client(session).fetch_output("ml") == "text answer"
        assert session.calls[-1] == ("GET", "http://backend.test/chat", {"query": "ml"})

    def test_get_fallback_failure(self):
        session = FakeSession(post=requests.ConnectionError("refused"), get=requests.ConnectionError("still down"))
        with pytest.raises(BackendError):
            _client(session).fetch_output("ml")

    def test_timeout_is_wrapped(self):
        session = FakeSession(post=requests.ReadTimeout("slow"))
        with pytest.raises(BackendError, match="Backend request failed"):
            _client(session).fetch_output("ml")

    def test_health_check_failure(self):
        session = FakeSession(health=FakeResponse(status_code=503, reason="Unavailable"))
        with pytest.raises(BackendError, match="not available"):
            _client(session).fetch_output("ml")
        assert len(session.calls) == 1

    def test_health_check_unreachable(self):
        session = FakeSession(health=requests.ConnectionError("dns"))
        with pytest.raises(BackendError):
            _client(session).fetch_output("ml")

    def test_non_ok_status(self):
        session = FakeSession(post=FakeResponse(status_code=500, reason="Internal Server Error"))
        with pytest.raises(BackendError, match="API returned 500: Internal Server Error"):
            _client(session).fetch_output("ml")

    def test_non_json_body(self):
        session = FakeSession(post=FakeResponse(json_error=True))
        with pytest.raises(BackendError, match="non-JSON"):
            _client(session).fetch_output("ml")

    @pytest.mark.parametrize("body", [{}, {"output": ""}, {"output": None}, ["output"]])
    def test_missing_output(self, body):
        session = FakeSession(post=FakeResponse(payload=body))
        with pytest.raises(BackendError, match="No output received from API"):
            _client(session).fetch_output("ml")

    def test_empty_query_makes_no_request(self):
        session = FakeSession()
        with pytest.raises(BackendError):
            _client(session).fetch_output("   ")
        assert session.calls == []

    def test_backend_error_is_runtime_error(self):
        assert issubclass(BackendError, RuntimeError)
