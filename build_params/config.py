"""Library settings loaded from the environment.

These knobs only affect how the resolver logs. They never change the
parameter prefix or the parsing rules, which are fixed.

Prefix: BUILD_PARAMS_ (e.g., BUILD_PARAMS_LOG_LOOKUPS=true)
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ResolverSettings(BaseSettings):
    """Logging configuration for the build parameter resolver."""

    model_config = SettingsConfigDict(
        env_prefix="BUILD_PARAMS_",
        extra="ignore",
    )

    log_level: str = Field(
        default="WARNING",
        description="Level applied to the 'build_params' logger.",
    )
    log_lookups: bool = Field(
        default=False,
        description="Emit a DEBUG record for every parameter that resolves to a value.",
    )
    redact_sensitive: bool = Field(
        default=True,
        description=(
            "Replace values of secret-looking parameters (token, password, api_key, ...) "
            "with [REDACTED] in log records."
        ),
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = (value or "").strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls) -> "ResolverSettings":
        """Load settings from the live process environment."""
        return cls()
