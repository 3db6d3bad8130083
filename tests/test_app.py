"""Tests for the Streamlit page."""

from streamlit.testing.v1 import AppTest


def _run() -> AppTest:
    at = AppTest.from_file("../app.py")
    at.run()
    return at


def test_slider_uses_configured_length(monkeypatch):
    monkeypatch.setenv("PASSMINT_DEFAULT_LENGTH", "24")
    at = _run()
    assert not at.exception
    assert at.slider[0].value == 24


def test_slider_length_clamped(monkeypatch):
    monkeypatch.setenv("PASSMINT_DEFAULT_LENGTH", "2")
    assert _run().slider[0].value == 4


def test_malformed_settings_fall_back(monkeypatch):
    monkeypatch.setenv("PASSMINT_DEFAULT_LENGTH", "sixteen")
    at = _run()
    assert not at.exception
    assert at.slider[0].value == 16
    assert any("PASSMINT_DEFAULT_LENGTH" in w.value for w in at.warning)
