"""Configuration package."""

from finplan.config.settings import (
    AppSettings,
    CalculatorSettings,
    FormattingSettings,
    Settings,
    StorageSettings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "CalculatorSettings",
    "FormattingSettings",
    "Settings",
    "StorageSettings",
    "get_settings",
    "validate_all_settings",
]
