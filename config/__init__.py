from __future__ import annotations

import os

_SETTINGS_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module(env: str | None = None) -> str:
    """Settings module for ``env`` (defaults to $APP_ENV); anything unknown is development."""
    env = (env or os.getenv("APP_ENV", "development")).strip().lower()
    return _SETTINGS_MODULES.get(env, "config.development")
