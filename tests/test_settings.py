from __future__ import annotations

from itinerary_planner.config import settings


def test_validate_api_keys_reports_missing_key(monkeypatch, caplog):
    monkeypatch.setattr(settings, "GEMINI_API_KEY", None)

    assert settings.validate_api_keys() is False
    assert "GEMINI_API_KEY" in caplog.text


def test_validate_api_keys_accepts_present_key(monkeypatch):
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "key")

    assert settings.validate_api_keys() is True


def test_storage_keys_match_web_front_end():
    assert settings.FORM_STATE_KEY == "formState"
    assert settings.HISTORY_KEY == "history"


def test_schema_requires_entries_array():
    assert settings.ITINERARY_SCHEMA["required"] == ["entries"]
    assert settings.ITINERARY_SCHEMA["properties"]["entries"]["type"] == "ARRAY"
