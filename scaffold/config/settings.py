"""Typed runtime settings with dotenv support and startup validation."""

from typing import Final

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scaffold.domain import RESPONDER_PROFILES

_LOG_LEVEL_NAMES: Final[tuple[str, ...]] = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class ServiceSettings(BaseSettings):
    """Settings for the minimal service runtime and deployment smoke checks.

    Environment variable names map directly to field names in uppercase.
    Example: `port` reads from `PORT`.

    Attributes:
        service_profile: Static responder profile name.
        service_host: Host interface for web server binding.
        port: Optional listener port override, kept as the raw environment string.
        log_level: Root logging level name.
        smoke_retry_attempts: Number of smoke probe attempts.
        smoke_backoff_base_seconds: Base retry delay for exponential backoff.
        smoke_backoff_max_seconds: Maximum retry delay cap.
        smoke_request_timeout_seconds: Per-request smoke probe timeout.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    service_profile: str = Field(default="app-platform", min_length=1)
    service_host: str = Field(default="0.0.0.0", min_length=1)
    port: str | None = Field(default=None)
    log_level: str = Field(default="INFO")
    smoke_retry_attempts: int = Field(default=5, ge=1)
    smoke_backoff_base_seconds: float = Field(default=2.0, ge=0)
    smoke_backoff_max_seconds: float = Field(default=30.0, gt=0)
    smoke_request_timeout_seconds: float = Field(default=10.0, gt=0)

    @field_validator("service_profile", "service_host")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("service_profile")
    @classmethod
    def _validate_known_profile(cls, value: str) -> str:
        if value not in RESPONDER_PROFILES:
            known_names = ", ".join(sorted(RESPONDER_PROFILES))
            raise ValueError(f"unknown service profile: {value} (known: {known_names})")
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in _LOG_LEVEL_NAMES:
            raise ValueError(f"unknown log level: {value}")
        return normalized_value

    @field_validator("smoke_backoff_max_seconds")
    @classmethod
    def _validate_backoff_cap_bounds(cls, value: float, info) -> float:
        backoff_base_seconds = float(info.data.get("smoke_backoff_base_seconds", 2.0))
        if value < backoff_base_seconds:
            raise ValueError("smoke_backoff_max_seconds must be greater than or equal to smoke_backoff_base_seconds")
        return value

    @model_validator(mode="after")
    def _validate_port_for_profile(self) -> "ServiceSettings":
        # Fixed-port profiles ignore PORT entirely.
        if not RESPONDER_PROFILES[self.service_profile].reads_port_environment or not self.port:
            self.port = None
            return self
        if not self.port.isdigit() or not 1 <= int(self.port) <= 65535:
            raise ValueError("PORT must be a decimal integer between 1 and 65535")
        return self


def config_load_service_settings(service_profile: str | None = None) -> ServiceSettings:
    """Load and validate service settings from environment and dotenv.

    Args:
        service_profile: Optional profile override taking precedence over `SERVICE_PROFILE`.

    Returns:
        ServiceSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are missing or invalid.
    """

    try:
        if service_profile is None:
            return ServiceSettings()
        return ServiceSettings(service_profile=service_profile)
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
