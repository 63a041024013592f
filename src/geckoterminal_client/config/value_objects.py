"""Configuration value objects for dependency injection.

Instead of injecting a global settings object, inject specific configuration
dataclasses into each component. Enables:
- Easy testing with different configurations
- Clear constructor contracts
- Validation at composition root
"""

import enum
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.geckoterminal.com/api/v2"
DEFAULT_ACCEPT_HEADER = "application/json"


class ValidationMode(str, enum.Enum):
    """How parameter validation issues affect a call."""

    ADVISORY = "advisory"  # Report and send the request unchanged
    STRICT = "strict"  # Report and reject before any network call


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuration for HTTP client."""

    timeout: float = 30.0
    connect_timeout: float = 10.0


@dataclass(frozen=True)
class GeckoTerminalConfig:
    """Configuration for GeckoTerminal API client."""

    base_url: str = DEFAULT_BASE_URL
    accept_header: str = DEFAULT_ACCEPT_HEADER
    validation_mode: ValidationMode = ValidationMode.ADVISORY
    http_config: HttpClientConfig = None

    def __post_init__(self):
        """Set defaults for nested configs."""
        if self.http_config is None:
            object.__setattr__(self, "http_config", HttpClientConfig())
        if not isinstance(self.validation_mode, ValidationMode):
            object.__setattr__(
                self, "validation_mode", ValidationMode(self.validation_mode)
            )
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
