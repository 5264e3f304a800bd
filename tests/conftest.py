# Shared fakes for tests: HTTP responses and model clients, no network.

import pytest
import requests

_NO_JSON = object()


class FakeResponse:
    def __init__(self, status_code=200, json_data=_NO_JSON, text=""):
        self.status_code = status_code
        self._json = json_data
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._json is _NO_JSON:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._json

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error")


class RecordingModelClient:
    """Returns a canned reply and remembers what it was asked."""

    def __init__(self, reply="ok", error=None):
        self.model = "fake"
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, messages, params):
        self.calls.append((list(messages), params))
        if self.error is not None:
            raise self.error
        return self.reply, {"engine": "fake"}


class StubRetriever:
    def __init__(self, fragments=None, error=None):
        self.fragments = fragments or []
        self.error = error
        self.calls = []

    def retrieve(self, query, mode):
        self.calls.append((query, mode))
        if self.error is not None:
            raise self.error
        return list(self.fragments)


class PostRecorder:
    def __init__(self):
        self.response = FakeResponse(200, {})
        self.error = None
        self.calls = []

    def __call__(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_post(monkeypatch):
    """Patch requests.post; set `.response` or `.error` on the returned recorder."""
    rec = PostRecorder()
    monkeypatch.setattr(requests, "post", rec)
    return rec
