"""
Typed async client for the GeckoTerminal public API.
Modular layout with clean separation of concerns.

Modules:
- client: endpoint operations and the generic GET dispatcher
- validation: advisory/strict parameter checks against documented limits
- models: immutable response models (envelope + resources)
- connectors, ports: HTTP transport abstraction and aiohttp adapter
- config, infrastructure: settings and structured logging
"""

from geckoterminal_client.client import GeckoTerminalClient
from geckoterminal_client.config.value_objects import (
    GeckoTerminalConfig,
    HttpClientConfig,
    ValidationMode,
)
from geckoterminal_client.exceptions import (
    GeckoTerminalAPIError,
    GeckoTerminalError,
    ParameterValidationError,
    ResponseValidationError,
    TransportError,
)
from geckoterminal_client.options import OhlcvOptions
from geckoterminal_client.validation import IncludeCategory, ValidationIssue

__version__ = "0.1.0"

__all__ = [
    "GeckoTerminalClient",
    "GeckoTerminalConfig",
    "HttpClientConfig",
    "ValidationMode",
    "OhlcvOptions",
    "IncludeCategory",
    "ValidationIssue",
    "GeckoTerminalError",
    "GeckoTerminalAPIError",
    "ParameterValidationError",
    "ResponseValidationError",
    "TransportError",
    "__version__",
]
