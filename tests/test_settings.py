from __future__ import annotations

import pytest

from config import get_settings_module


def test_ponto_env_takes_precedence_over_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("PONTO_ENV", "prod")

    assert get_settings_module() == "config.production"


def test_defaults_to_development(monkeypatch):
    monkeypatch.delenv("PONTO_ENV", raising=False)
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "config.development"


def test_unknown_environment_is_rejected(monkeypatch):
    monkeypatch.delenv("PONTO_ENV", raising=False)
    monkeypatch.setenv("APP_ENV", "staging")

    with pytest.raises(ValueError):
        get_settings_module()
