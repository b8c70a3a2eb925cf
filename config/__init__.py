import os

_SETTINGS_BY_ENV = {
    "development": "config.development",
    "dev": "config.development",
    "testing": "config.testing",
    "test": "config.testing",
    "production": "config.production",
    "prod": "config.production",
}


def get_settings_module() -> str:
    """Settings module for ``PONTO_ENV`` (or ``APP_ENV``), development by default."""

    env = (os.getenv("PONTO_ENV") or os.getenv("APP_ENV") or "development").strip().lower()
    try:
        return _SETTINGS_BY_ENV[env]
    except KeyError:
        raise ValueError(
            f"Ambiente desconhecido {env!r}; use um de: {', '.join(sorted(set(_SETTINGS_BY_ENV)))}"
        ) from None
