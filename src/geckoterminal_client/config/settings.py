"""
Client settings loaded from an optional YAML file with environment overrides.

Merges:
  1. Defaults (hardcoded on the pydantic models)
  2. YAML file (if given and present)
  3. Environment variable overrides
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from .value_objects import (
    DEFAULT_ACCEPT_HEADER,
    DEFAULT_BASE_URL,
    GeckoTerminalConfig,
    HttpClientConfig,
    ValidationMode,
)

logger = logging.getLogger(__name__)


# =============================================================================
# PYDANTIC MODELS - Type-Safe Configuration
# =============================================================================


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    json_logs: bool = Field(default=True)
    include_timestamp: bool = Field(default=True)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class ClientSettings(BaseModel):
    """Root settings for the GeckoTerminal client."""

    base_url: str = Field(default=DEFAULT_BASE_URL)
    accept_header: str = Field(default=DEFAULT_ACCEPT_HEADER)
    validation_mode: ValidationMode = Field(default=ValidationMode.ADVISORY)
    timeout: float = Field(default=30.0, gt=0)
    connect_timeout: float = Field(default=10.0, gt=0)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    def to_client_config(self) -> GeckoTerminalConfig:
        """Build the value object consumed by the client."""
        return GeckoTerminalConfig(
            base_url=self.base_url,
            accept_header=self.accept_header,
            validation_mode=self.validation_mode,
            http_config=HttpClientConfig(
                timeout=self.timeout,
                connect_timeout=self.connect_timeout,
            ),
        )


# =============================================================================
# SETTINGS LOADER
# =============================================================================


class SettingsLoader:
    """Load and validate client settings from YAML and the environment."""

    def __init__(self, config_path: str | Path | None = None):
        self.config_path = Path(config_path) if config_path else None

    def _load_yaml(self) -> dict[str, Any]:
        """Load the YAML file, or return an empty mapping if there is none."""
        if self.config_path is None:
            return {}

        if not self.config_path.exists():
            logger.debug(f"Settings file not found (using defaults): {self.config_path}")
            return {}

        with open(self.config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(
                f"Settings file {self.config_path} must contain a mapping, "
                f"got {type(data).__name__}"
            )
        return data

    def _apply_env_overrides(self, config: dict[str, Any]) -> dict[str, Any]:
        """Apply environment variable overrides to config."""
        if base_url := os.getenv("GECKOTERMINAL_BASE_URL"):
            config["base_url"] = base_url

        if accept := os.getenv("GECKOTERMINAL_ACCEPT"):
            config["accept_header"] = accept

        if mode := os.getenv("GECKOTERMINAL_VALIDATION_MODE"):
            config["validation_mode"] = mode.strip().lower()

        if timeout := os.getenv("GECKOTERMINAL_TIMEOUT"):
            config["timeout"] = float(timeout)

        if log_level := os.getenv("LOG_LEVEL"):
            config.setdefault("logging", {})["level"] = log_level

        if log_json := os.getenv("LOG_JSON"):
            config.setdefault("logging", {})["json_logs"] = log_json.strip().lower() in {
                "1",
                "true",
                "yes",
                "on",
            }

        return config

    def load(self) -> ClientSettings:
        """
        Load complete settings.

        Raises:
            pydantic.ValidationError: If the merged settings are invalid
        """
        config = self._apply_env_overrides(self._load_yaml())
        settings = ClientSettings(**config)
        logger.debug(
            f"Settings loaded: base_url={settings.base_url}, "
            f"validation_mode={settings.validation_mode.value}"
        )
        return settings


_settings: ClientSettings | None = None
_settings_path: Path | None = None


def get_settings(config_path: str | Path | None = None) -> ClientSettings:
    """Return process-wide settings, loading them on first use.

    Only the first call reads ``config_path``; later calls return the cached
    settings and warn if they name a different file. Use ``SettingsLoader``
    directly to load another file.
    """
    global _settings, _settings_path
    requested = Path(config_path) if config_path else None
    if _settings is None:
        _settings = SettingsLoader(requested).load()
        _settings_path = requested
    elif requested is not None and requested != _settings_path:
        logger.warning(
            f"Settings already loaded from {_settings_path}; ignoring {requested}"
        )
    return _settings
