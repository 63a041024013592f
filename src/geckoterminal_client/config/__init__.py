"""Configuration exports: value objects and the YAML/env settings loader."""

from .settings import ClientSettings, LoggingSettings, SettingsLoader, get_settings
from .value_objects import (
    DEFAULT_ACCEPT_HEADER,
    DEFAULT_BASE_URL,
    GeckoTerminalConfig,
    HttpClientConfig,
    ValidationMode,
)

__all__ = [
    "ClientSettings",
    "LoggingSettings",
    "SettingsLoader",
    "get_settings",
    "GeckoTerminalConfig",
    "HttpClientConfig",
    "ValidationMode",
    "DEFAULT_BASE_URL",
    "DEFAULT_ACCEPT_HEADER",
]
