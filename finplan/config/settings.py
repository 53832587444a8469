"""
Configuration Management for finplan

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Each concern gets its own settings class and env prefix, so a partially
configured environment still loads everything it can.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Where and how the ledger state is persisted."""

    model_config = SettingsConfigDict(
        env_prefix="FINPLAN_STORAGE_",
        extra="ignore"
    )

    backend: str = Field(
        default="json_file",
        pattern="^(json_file|memory)$",
        description="Persistence backend to use"
    )
    data_dir: Path = Field(
        default=Path("data"),
        description="Directory holding the state file"
    )
    file_name: str = Field(
        default="financeAppData.json",
        min_length=1,
        description="Name of the JSON state file"
    )
    max_write_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="How many times a failed write is attempted"
    )

    @property
    def state_path(self) -> Path:
        """Full path of the state file."""
        return self.data_dir / self.file_name


class FormattingSettings(BaseSettings):
    """Display formatting for amounts and dates."""

    model_config = SettingsConfigDict(
        env_prefix="FINPLAN_FORMAT_",
        extra="ignore"
    )

    currency_symbol: str = Field(
        default="₹",
        description="Symbol prefixed to every formatted amount"
    )
    date_format: str = Field(
        default="%b {day}, %Y",
        description="strftime pattern; {day} is replaced by the unpadded day"
    )


class CalculatorSettings(BaseSettings):
    """Defaults used by the financial calculators."""

    model_config = SettingsConfigDict(
        env_prefix="FINPLAN_CALC_",
        extra="ignore"
    )

    default_compounding_frequency: int = Field(
        default=12,
        ge=1,
        le=365,
        description="Compounding periods per year when none is given"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for the local structured log"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept level names the logging module knows."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def formatting(self) -> FormattingSettings:
        return FormattingSettings()

    @property
    def calculators(self) -> CalculatorSettings:
        return CalculatorSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, with a
    "<name>_error" entry for every section that failed.
    """
    results = {}

    settings = get_settings()

    for name in ("storage", "formatting", "calculators", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
