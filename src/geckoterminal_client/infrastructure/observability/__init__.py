"""
Observability for the GeckoTerminal client: structlog configuration and
layer-specific logger factories.
"""

from .logging import (
    # Base logger factory
    get_logger,
    # Layer-specific logger factories
    get_client_logger,
    get_transport_logger,
    get_validation_logger,
    # Setup
    setup_logging,
)

__all__ = [
    # Setup
    "setup_logging",
    # Base
    "get_logger",
    # Layer-specific
    "get_client_logger",
    "get_transport_logger",
    "get_validation_logger",
]
