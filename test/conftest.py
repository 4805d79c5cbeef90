from __future__ import annotations

import logging

import requests
import pytest


def make_response(text: str, status_code: int = 200, content_type: str = "text/plain; charset=utf-8") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code == 200 else "Error"
    response._content = text.encode("utf-8")
    response.headers["Content-Type"] = content_type
    return response


class RecordingGet:
    """Stand-in for requests.get that remembers every call"""

    def __init__(self, response: requests.Response | None = None, error: BaseException | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    def __call__(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_get(monkeypatch):
    def install(
        text: str = "hello world",
        status_code: int = 200,
        error: BaseException | None = None,
        content_type: str = "text/plain; charset=utf-8",
    ) -> RecordingGet:
        recorder = RecordingGet(make_response(text, status_code, content_type), error)
        monkeypatch.setattr("hello_login.trigger.requests.get", recorder)
        return recorder

    return install


@pytest.fixture
def root_log_level():
    """Restore the root logger level after the CLI changes it"""
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)
