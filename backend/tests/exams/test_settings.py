from __future__ import annotations

from pathlib import Path

import pytest

from exams.config import DEFAULT_GZIP_MINIMUM_SIZE, DEFAULT_PORT, get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    for name in ("HOST", "PORT", "EXAMS_ROOT", "STATIC_ROOT", "GZIP_MINIMUM_SIZE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("EXAMS_ROOT", "/data/exams")
    monkeypatch.setenv("GZIP_MINIMUM_SIZE", "0")

    settings = get_settings()

    assert settings.port == 9090
    assert settings.exams_root == Path("/data/exams")
    assert settings.gzip_minimum_size == 0


@pytest.mark.parametrize("name", ["HOST", "PORT", "EXAMS_ROOT", "STATIC_ROOT", "GZIP_MINIMUM_SIZE"])
def test_empty_variables_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch, name: str) -> None:
    monkeypatch.setenv(name, "")

    settings = get_settings()

    assert settings.host == "0.0.0.0"
    assert settings.port == DEFAULT_PORT
    assert settings.exams_root == Path("json")
    assert settings.static_root == Path(".")
    assert settings.gzip_minimum_size == DEFAULT_GZIP_MINIMUM_SIZE
