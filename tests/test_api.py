"""
FastAPI endpoint tests for the Number Words API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

import pytest
from api import app
from fastapi.testclient import TestClient

from number_words import __version__

client = TestClient(app)


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__
        assert data["languages_loaded"] == 16


class TestLanguagesEndpoint:
    def test_lists_every_language(self) -> None:
        data = client.get("/languages").json()
        assert len(data) == 16
        assert data[0]["code"] == "ar"
        assert {"code": "en", "name": "English"} in data


class TestConvertEndpoint:
    def test_defaults_to_english(self) -> None:
        resp = client.post("/convert", json={"number": "123.45"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["words"] == "one hundred twenty-three point four five"
        assert data["language"] == "en"
        assert data["is_supported"] is True

    def test_json_number_and_language(self) -> None:
        data = client.post("/convert", json={"number": 42, "language": "tr"}).json()
        assert data["words"] == "kırk iki"
        assert data["language"] == "tr"
        assert data["is_supported"] is True

    def test_unknown_language_falls_back(self) -> None:
        data = client.post("/convert", json={"number": 5, "language": "xx"}).json()
        assert data["words"] == "five"
        assert data["language"] == "en"
        assert data["is_supported"] is False

    def test_options(self) -> None:
        data = client.post(
            "/convert",
            json={"number": "1.5", "language": "az", "include_decimal_text": False, "capitalize": True},
        ).json()
        assert data["words"] == "Bir"

    def test_invalid_number_is_a_message_not_an_error(self) -> None:
        resp = client.post("/convert", json={"number": "abc"})
        assert resp.status_code == 200
        assert resp.json()["words"] == "The provided value is not a number"

    def test_too_large_number(self) -> None:
        data = client.post("/convert", json={"number": "1000000000000000", "language": "en"}).json()
        assert data["words"] == "Number too large: maximum 999 trillion is supported"

    def test_default_language_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NUMBER_WORDS_LANGUAGE", "de")
        data = client.post("/convert", json={"number": "1"}).json()
        assert data["words"] == "eins"
        assert data["language"] == "de"

    def test_explicit_language_beats_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NUMBER_WORDS_LANGUAGE", "de")
        data = client.post("/convert", json={"number": "1", "language": "fr"}).json()
        assert data["words"] == "un"


class TestRequestValidation:
    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/convert", json={})
        assert resp.status_code == 422

    def test_missing_content_type_returns_422(self) -> None:
        resp = client.post("/convert")
        assert resp.status_code == 422
