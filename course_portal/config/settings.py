"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from course_portal.errors import CoursePortalError


# Level names understood by both `logging` and uvicorn.
SUPPORTED_LOG_LEVELS: tuple[str, ...] = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ALIASES: dict[str, str] = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class SettingsLoadError(CoursePortalError, RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the HTTP content server.

    Environment variable names map directly to field names in uppercase.
    Example: `application_port` reads from `APPLICATION_PORT`.

    Attributes:
        environment_name: Runtime environment label rendered into pages.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        static_directory: Directory holding page templates and static assets.
        log_level: Root log level name for the application loggers.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development", min_length=1)
    application_host: str = Field(default="0.0.0.0", min_length=1)
    application_port: int = Field(default=8080, ge=1, le=65535)
    static_directory: str = Field(default="static")
    log_level: str = Field(default="INFO")

    @field_validator("environment_name", "application_host", "static_directory")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_level = value.strip().upper()
        normalized_level = LOG_LEVEL_ALIASES.get(normalized_level, normalized_level)
        if normalized_level not in SUPPORTED_LOG_LEVELS:
            raise ValueError(f"unsupported log level: {value}")
        return normalized_level


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are missing or invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
