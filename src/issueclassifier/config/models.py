"""Configuration models using Pydantic for validation."""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Environment variables holding provider credentials
PRIMARY_API_KEY_ENV = "MOSAIA_API_KEY"
PRIMARY_AGENT_ID_ENV = "MOSAIA_AGENT_ID"
FALLBACK_API_KEY_ENV = "OPENROUTER_API_KEY"

DEFAULT_FALLBACK_MODEL = "mistralai/mistral-small-3.2-24b-instruct:free"


class ProviderCredentials(BaseModel):
    """Static API credentials for the primary and fallback providers."""

    model_config = ConfigDict(frozen=True)

    primary_api_key: str = Field(default="", description="API key for the primary provider")
    primary_agent_id: str = Field(default="", description="Agent identifier on the primary provider")
    fallback_api_key: str = Field(default="", description="API key for the fallback provider")

    @classmethod
    def from_env(cls, environ=None) -> "ProviderCredentials":
        """
        Read credentials from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            ProviderCredentials with any unset variable left empty.
        """
        env = os.environ if environ is None else environ
        return cls(
            primary_api_key=env.get(PRIMARY_API_KEY_ENV, ""),
            primary_agent_id=env.get(PRIMARY_AGENT_ID_ENV, ""),
            fallback_api_key=env.get(FALLBACK_API_KEY_ENV, ""),
        )

    def missing(self) -> list[str]:
        """Names of credential fields that are empty or whitespace."""
        return [
            name
            for name in ("primary_api_key", "primary_agent_id", "fallback_api_key")
            if not getattr(self, name).strip()
        ]

    def loaded(self) -> dict[str, bool]:
        """Map each environment variable name to whether its value is present."""
        return {
            PRIMARY_API_KEY_ENV: bool(self.primary_api_key.strip()),
            PRIMARY_AGENT_ID_ENV: bool(self.primary_agent_id.strip()),
            FALLBACK_API_KEY_ENV: bool(self.fallback_api_key.strip()),
        }


class ProviderSettings(BaseModel):
    """Endpoint description for one completion provider."""

    name: str = Field(description="Display name used in logs")
    base_url: str = Field(description="Base URL of the OpenAI-compatible API")
    model: str | None = Field(
        default=None, description="Fixed model identifier (None means use the agent id)"
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so paths can be appended."""
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got: {v!r}")
        return v


def _default_primary() -> ProviderSettings:
    return ProviderSettings(name="Mosaia", base_url="https://api.mosaia.ai/v1/agent")


def _default_fallback() -> ProviderSettings:
    return ProviderSettings(
        name="OpenRouter",
        base_url="https://openrouter.ai/api/v1",
        model=DEFAULT_FALLBACK_MODEL,
    )


class ClassifierSettings(BaseModel):
    """Settings for the issue classifier."""

    primary: ProviderSettings = Field(
        default_factory=_default_primary, description="Primary completion provider"
    )
    fallback: ProviderSettings = Field(
        default_factory=_default_fallback, description="Fallback completion provider"
    )
    max_tokens: int = Field(default=500, ge=1, description="Maximum tokens in a completion")
    request_timeout: float = Field(
        default=60.0, gt=0.0, description="Deadline in seconds for each provider request"
    )
    connect_timeout: float = Field(
        default=10.0, gt=0.0, description="Connection timeout in seconds"
    )
    validate_difficulty: bool = Field(
        default=False,
        description="Reject results whose difficulty is not easy, medium or difficult",
    )


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")
    max_bytes: int = Field(
        default=10 * 1024 * 1024, ge=1024, description="Max log file size before rotation (bytes)"
    )
    backup_count: int = Field(default=5, ge=1, description="Number of rotated log files to keep")
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=False, description="Enable file logging")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


class IssueClassifierConfig(BaseModel):
    """Main configuration for IssueClassifier."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    classifier: ClassifierSettings = Field(
        default_factory=ClassifierSettings, description="Classifier and provider settings"
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )
