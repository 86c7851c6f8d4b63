"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTION_ENVIRONMENT_NAMES = frozenset({"production", "prod"})


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Immutable process configuration snapshot for the web service.

    Each field accepts several environment variable names so the service
    runs unchanged under plain containers and under an orchestrator that
    injects pod identity through the downward API. Empty values fall back
    to the field default.

    Attributes:
        application_host: Host interface for web server binding.
        application_port: Web server port.
        environment_name: Runtime environment label.
        application_version: Version string reported by status endpoints.
        pod_name: Pod identity reported by the info endpoint.
        pod_namespace: Pod namespace reported by the info endpoint.
        shutdown_grace_seconds: Upper bound for draining in-flight requests.
        cors_allow_origins: Comma-separated allowed CORS origins.
        static_directory: Directory served under `/static` when present.
        log_level: Minimum log level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
        populate_by_name=True,
        frozen=True,
    )

    application_host: str = Field(
        default="0.0.0.0",
        validation_alias=AliasChoices("HOST", "APPLICATION_HOST", "application_host"),
    )
    application_port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("PORT", "APPLICATION_PORT", "application_port"),
    )
    environment_name: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT_NAME", "APP_ENV", "NODE_ENV", "environment_name"),
    )
    application_version: str = Field(
        default="1.0.0",
        validation_alias=AliasChoices("APP_VERSION", "application_version"),
    )
    pod_name: str = Field(
        default="unknown",
        validation_alias=AliasChoices("POD_NAME", "HOSTNAME", "pod_name"),
    )
    pod_namespace: str = Field(
        default="default",
        validation_alias=AliasChoices("POD_NAMESPACE", "NAMESPACE", "pod_namespace"),
    )
    shutdown_grace_seconds: float = Field(
        default=10.0,
        ge=0,
        validation_alias=AliasChoices("SHUTDOWN_GRACE_SECONDS", "shutdown_grace_seconds"),
    )
    cors_allow_origins: str = Field(
        default="*",
        validation_alias=AliasChoices("CORS_ALLOW_ORIGINS", "cors_allow_origins"),
    )
    static_directory: str = Field(
        default="public",
        validation_alias=AliasChoices("STATIC_DIRECTORY", "static_directory"),
    )
    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
    )

    @field_validator("application_host", "environment_name", "application_version", "pod_name", "pod_namespace")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unsupported log level {value!r}")
        return normalized_value

    @property
    def cors_origin_list(self) -> list[str]:
        """Return configured CORS origins as a list without blanks."""

        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Return whether the configured environment is production-equivalent."""

        return config_is_production_environment(self.environment_name)


def config_is_production_environment(environment_name: str) -> bool:
    """Classify an environment label as production-equivalent.

    Args:
        environment_name: Environment label such as `production` or `staging`.

    Returns:
        bool: True when internal error detail must be redacted.
    """

    return environment_name.strip().lower() in PRODUCTION_ENVIRONMENT_NAMES


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are malformed, e.g. a non-numeric port.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
