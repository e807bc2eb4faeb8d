from __future__ import annotations

import json

import pytest

from precis_ai.config import Settings, load_settings
from precis_ai.config.loader import merge_dicts


@pytest.fixture(autouse=True)
def clear_overrides(monkeypatch):
    monkeypatch.delenv("PRECIS_CONFIG_OVERRIDES", raising=False)


def test_defaults_without_config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    settings = load_settings()

    assert settings == Settings()
    assert settings.model.name == "gemini-2.0-flash"
    assert settings.model.temperature == 0.3
    assert settings.extraction.max_chars == 180_000
    assert settings.extraction.ocr_language == "eng"


def test_reads_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("model:\n  temperature: 0.5\nlogging:\n  level: DEBUG\n", encoding="utf-8")

    settings = load_settings(path)

    assert settings.model.temperature == 0.5
    assert settings.model.name == "gemini-2.0-flash"
    assert settings.logging.level == "DEBUG"


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.yaml")


def test_env_overrides_are_merged(tmp_path, monkeypatch):
    path = tmp_path / "settings.yaml"
    path.write_text("model:\n  name: gemini-a\n  temperature: 0.2\n", encoding="utf-8")
    monkeypatch.setenv("PRECIS_CONFIG_OVERRIDES", json.dumps({"model": {"name": "gemini-b"}}))

    settings = load_settings(path)

    assert settings.model.name == "gemini-b"
    assert settings.model.temperature == 0.2


def test_bad_override_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PRECIS_CONFIG_OVERRIDES", "{not json")

    with pytest.raises(ValueError):
        load_settings()


def test_invalid_values_raise_value_error(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("extraction:\n  max_chars: 0\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid configuration"):
        load_settings(path)


def test_merge_dicts_is_recursive():
    merged = merge_dicts({"a": {"b": 1, "c": 2}, "d": 1}, {"a": {"b": 3}})
    assert merged == {"a": {"b": 3, "c": 2}, "d": 1}
