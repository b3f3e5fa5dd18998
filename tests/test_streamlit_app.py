"""Tests for the Streamlit sign-in page."""

import pytest
import requests
from streamlit.testing.v1 import AppTest

APP_PATH = "../frontend/streamlit_app.py"


class HealthResponse:
    """Stand-in for the /health response."""

    def __init__(self, status_code=200, body=None, json_error=None):
        self.status_code = status_code
        self._body = body if body is not None else {"status": "healthy"}
        self._json_error = json_error

    def json(self):
        if self._json_error:
            raise self._json_error
        return self._body


def run_page(monkeypatch, health):
    """Runs the page once with requests.get answering the health check."""

    def fake_get(url, timeout=None):
        if isinstance(health, Exception):
            raise health
        return health

    monkeypatch.setattr(requests, "get", fake_get)
    at = AppTest.from_file(APP_PATH)
    at.run()
    return at


def test_page_renders_form(monkeypatch):
    """A healthy API shows the form without warnings."""
    at = run_page(monkeypatch, HealthResponse())
    assert not at.exception
    assert len(at.warning) == 0
    assert [t.label for t in at.text_input] == ["Email", "Password"]
    assert at.checkbox[0].label == "Remember me"
    sign_in = [b for b in at.button if b.label == "Sign in"][0]
    assert sign_in.disabled is False


@pytest.mark.parametrize(
    "health",
    [
        requests.exceptions.Timeout("timed out"),
        requests.exceptions.ConnectionError("refused"),
        HealthResponse(json_error=ValueError("Expecting value")),
    ],
)
def test_unreachable_health_check_still_renders_form(monkeypatch, health):
    """A failing health check warns but never stops the form from rendering."""
    at = run_page(monkeypatch, health)
    assert not at.exception
    assert len(at.warning) == 1
    assert len(at.text_input) == 2


def test_sign_in_with_invalid_input_shows_field_errors(monkeypatch):
    """Client-side validation errors render under the fields."""
    at = run_page(monkeypatch, HealthResponse())
    at.text_input[0].input("not-an-email")
    at.text_input[1].input("123")
    [b for b in at.button if b.label == "Sign in"][0].click()
    at.run()
    assert not at.exception
    captions = [c.value for c in at.caption]
    assert any("valid email address" in c for c in captions)
    assert any("at least 6 characters" in c for c in captions)
