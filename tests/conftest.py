"""Shared pytest fixtures isolating tests from host environment configuration."""

from __future__ import annotations

import pytest

SETTINGS_ENVIRONMENT_VARIABLES = (
    "HOST",
    "APPLICATION_HOST",
    "PORT",
    "APPLICATION_PORT",
    "ENVIRONMENT_NAME",
    "APP_ENV",
    "NODE_ENV",
    "APP_VERSION",
    "POD_NAME",
    "HOSTNAME",
    "POD_NAMESPACE",
    "NAMESPACE",
    "SHUTDOWN_GRACE_SECONDS",
    "CORS_ALLOW_ORIGINS",
    "STATIC_DIRECTORY",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_settings_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Remove settings variables and run from an empty directory without `.env`."""

    for variable_name in SETTINGS_ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(variable_name, raising=False)
    monkeypatch.chdir(tmp_path)
