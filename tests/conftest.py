"""Shared fixtures: a fake HTTP layer standing in for requests."""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from influxlite.session import Session
from influxlite.transport import Transport


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, content: bytes = b""):
        self.content = content
        self.closed = False

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class FakeHTTP:
    """Records every call and answers with queued bodies."""

    def __init__(self, *bodies: bytes, error: Exception = None):
        self.bodies = list(bodies)
        self.error = error
        self.calls = []
        self.responses = []

    def _answer(self, method, url, kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        response = FakeResponse(self.bodies.pop(0) if self.bodies else b"")
        self.responses.append(response)
        return response

    def post(self, url, **kwargs):
        return self._answer("POST", url, kwargs)

    def get(self, url, **kwargs):
        return self._answer("GET", url, kwargs)


@pytest.fixture
def session():
    return Session(host="db.example", database="metrics", username="root", password="secret")


@pytest.fixture
def fake_http():
    return FakeHTTP()


@pytest.fixture
def transport(fake_http):
    return Transport(http=fake_http)
