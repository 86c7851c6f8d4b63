"""Tests for environment-driven settings resolution and startup validation."""

import pytest
from pydantic import ValidationError

from app.config import AppSettings, SettingsLoadError, config_is_production_environment, config_load_settings


def test_config_load_settings_uses_documented_defaults_without_environment() -> None:
    """Resolve every setting to its default when no variables are present."""

    settings = config_load_settings()

    assert settings.application_host == "0.0.0.0"
    assert settings.application_port == 3000
    assert settings.environment_name == "development"
    assert settings.application_version == "1.0.0"
    assert settings.pod_name == "unknown"
    assert settings.pod_namespace == "default"
    assert settings.shutdown_grace_seconds == 10.0
    assert settings.cors_origin_list == ["*"]
    assert settings.is_production is False


def test_config_load_settings_reads_container_environment_names(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read the variable names injected by container runtimes and orchestrators."""

    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("NODE_ENV", "production")
    monkeypatch.setenv("APP_VERSION", "2.3.4")
    monkeypatch.setenv("HOSTNAME", "web-app-7d9f")
    monkeypatch.setenv("NAMESPACE", "apps")

    settings = config_load_settings()

    assert settings.application_port == 8080
    assert settings.application_host == "127.0.0.1"
    assert settings.environment_name == "production"
    assert settings.application_version == "2.3.4"
    assert settings.pod_name == "web-app-7d9f"
    assert settings.pod_namespace == "apps"
    assert settings.is_production is True


def test_config_load_settings_falls_back_when_variables_are_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    """Treat empty variables as absent."""

    monkeypatch.setenv("PORT", "")
    monkeypatch.setenv("APP_VERSION", "")

    settings = config_load_settings()

    assert settings.application_port == 3000
    assert settings.application_version == "1.0.0"


@pytest.mark.parametrize("port_value", ["not-a-port", "0", "70000"])
def test_config_load_settings_rejects_malformed_port(monkeypatch: pytest.MonkeyPatch, port_value: str) -> None:
    """Abort startup on a malformed port instead of coercing it."""

    monkeypatch.setenv("PORT", port_value)

    with pytest.raises(SettingsLoadError):
        config_load_settings()


def test_config_settings_snapshot_is_immutable() -> None:
    """Reject mutation of the settings snapshot after creation."""

    settings = AppSettings(environment_name="test")

    with pytest.raises(ValidationError):
        settings.environment_name = "production"


def test_config_settings_reads_dotenv_file(tmp_path) -> None:
    """Load values from a `.env` file in the working directory."""

    (tmp_path / ".env").write_text("APP_VERSION=9.9.9\nPOD_NAMESPACE=dotenv\n", encoding="utf-8")

    settings = config_load_settings()

    assert settings.application_version == "9.9.9"
    assert settings.pod_namespace == "dotenv"


@pytest.mark.parametrize(
    ("environment_name", "expected"),
    [("production", True), (" Production ", True), ("prod", True), ("development", False), ("staging", False)],
)
def test_config_is_production_environment(environment_name: str, expected: bool) -> None:
    """Classify production-equivalent environment labels."""

    assert config_is_production_environment(environment_name) is expected
