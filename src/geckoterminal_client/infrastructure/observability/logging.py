"""
Structured logging infrastructure for geckoterminal-client.
Provides consistent, machine-readable logs across all components.

Log Structure:
    {
        "app": "geckoterminal-client",  # Application identifier
        "layer": "client",               # Architectural layer
        "component": "api-client",       # Specific component
        "module": "...",                 # Python module (optional)
        "endpoint": "/networks",         # Domain context
        "event": "request_failed",       # What happened
        ...
    }

Architectural Layers:
    - client: Endpoint operations and response typing
    - validation: Parameter checks against documented API limits
    - transport: HTTP adapter (aiohttp)
    - config: Settings loading
"""

import logging
import sys
from typing import Any, Literal

import structlog
from structlog.types import EventDict

Layer = Literal["client", "validation", "transport", "config"]


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add application-wide context to every log entry."""
    event_dict["app"] = "geckoterminal-client"
    return event_dict


def add_severity_level(
    logger: Any, method_name: str, event_dict: EventDict
) -> EventDict:
    """
    Add severity level for cloud logging compatibility.
    Maps Python log levels to standard severity levels.
    """
    level = event_dict.get("level")
    if level:
        severity_map = {
            "debug": "DEBUG",
            "info": "INFO",
            "warning": "WARNING",
            "error": "ERROR",
            "critical": "CRITICAL",
        }
        event_dict["severity"] = severity_map.get(level, "INFO")
    return event_dict


def setup_logging(
    level: str = "INFO",
    json_logs: bool = True,
    include_timestamp: bool = True,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output JSON. If False, use human-readable format (dev mode).
        include_timestamp: Whether to include ISO timestamps in logs

    Usage:
        >>> from geckoterminal_client.infrastructure.observability import setup_logging
        >>> setup_logging(level="DEBUG", json_logs=False)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.root.setLevel(log_level)

    processors = [
        structlog.contextvars.merge_contextvars,
        add_app_context,
        structlog.stdlib.add_log_level,
        add_severity_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(
    name: str | None = None,
    layer: Layer | None = None,
    component: str | None = None,
    **initial_context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a configured logger instance with architectural context.

    Args:
        name: Logger name (typically __name__ of the calling module)
        layer: Architectural layer (client, validation, transport, config)
        component: Specific component within the layer
        **initial_context: Additional context key-value pairs to bind to logger

    Usage:
        >>> log = get_logger(__name__, layer="client", component="api-client")
        >>> log.info("request_sent", endpoint="/networks")
    """
    logger = structlog.get_logger(name)

    context = {}

    if layer:
        context["layer"] = layer

    if component:
        context["component"] = component

    if name:
        context["module"] = name

    context.update(initial_context)

    if context:
        logger = logger.bind(**context)

    return logger


def get_client_logger(
    component: str = "api-client",
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for the client layer (endpoint operations, response typing).

    Usage:
        >>> log = get_client_logger(base_url="https://api.geckoterminal.com/api/v2")
        >>> log.error("request_failed", endpoint="/networks", status_code=500)
    """
    return get_logger("client", layer="client", component=component, **context)


def get_validation_logger(
    component: str = "parameter-validator",
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for the validation layer.

    Usage:
        >>> log = get_validation_logger(mode="advisory")
        >>> log.warning("parameter_validation_issue", check="page", value=11)
    """
    return get_logger("validation", layer="validation", component=component, **context)


def get_transport_logger(
    component: str = "aiohttp-client",
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """Get a logger for the transport layer."""
    return get_logger("transport", layer="transport", component=component, **context)
