"""
Tests for settings and serving mode resolution.
"""

import pytest

from deploydemo.config import (
    DEFAULT_API_URL,
    DEFAULT_PORT,
    ServerSettings,
    ServingMode,
    resolve_api_url,
)


@pytest.mark.parametrize(
    "environment, expected",
    [
        ("production", ServingMode.COMBINED),
        (" Production ", ServingMode.COMBINED),
        ("development", ServingMode.API_ONLY),
        ("staging", ServingMode.API_ONLY),
    ],
)
def test_serving_mode(environment, expected):
    assert ServerSettings(environment=environment).serving_mode is expected


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert ServerSettings().port == 8080


def test_port_default(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert ServerSettings().port == DEFAULT_PORT


def test_environment_variable_selects_mode(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    assert ServerSettings().serving_mode is ServingMode.COMBINED


class TestResolveApiUrl:
    def test_override_wins(self, monkeypatch):
        monkeypatch.setenv("API_URL", "http://from-env:9000")
        assert resolve_api_url("http://explicit:1234/") == "http://explicit:1234"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("API_URL", "https://api.example.com/")
        assert resolve_api_url() == "https://api.example.com"

    def test_default(self, monkeypatch):
        monkeypatch.delenv("API_URL", raising=False)
        assert resolve_api_url() == DEFAULT_API_URL == "http://localhost:3001"
