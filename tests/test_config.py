"""Testy konfiguracji CLI ze zmiennych środowiskowych."""

import pytest

from ja._config import load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("JA_LOG_LEVEL", "JA_CONSOLE_WIDTH", "JA_EVALUATOR"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.log_level == "WARNING"
    assert settings.console_width == 200
    assert settings.evaluator is None


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("JA_LOG_LEVEL", "debug")
    monkeypatch.setenv("JA_CONSOLE_WIDTH", "120")
    monkeypatch.setenv("JA_EVALUATOR", "my_solver:Evaluator")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.console_width == 120
    assert settings.evaluator == "my_solver:Evaluator"


@pytest.mark.parametrize("width", ["szeroko", "", "0", "-5", "12.5"])
def test_bad_console_width_falls_back(monkeypatch, width):
    monkeypatch.setenv("JA_CONSOLE_WIDTH", width)
    assert load_settings().console_width == 200


@pytest.mark.parametrize("level", ["GADATLIWY", "", "5"])
def test_bad_log_level_falls_back(monkeypatch, level):
    monkeypatch.setenv("JA_LOG_LEVEL", level)
    assert load_settings().log_level == "WARNING"
