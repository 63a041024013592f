"""Dependency injection container for the GeckoTerminal client.

This is the single place where concrete implementations are chosen.

Usage:
    container = GeckoTerminalDependencyContainer.from_settings(get_settings())
    async with container.create_client() as client:
        pools = await client.network_pools("eth")
"""

from collections.abc import Callable

from geckoterminal_client.client import GeckoTerminalClient
from geckoterminal_client.config.settings import ClientSettings
from geckoterminal_client.config.value_objects import GeckoTerminalConfig
from geckoterminal_client.connectors.aiohttp_client import AiohttpClient
from geckoterminal_client.error_mapper import GeckoTerminalErrorMapper
from geckoterminal_client.infrastructure.observability import setup_logging
from geckoterminal_client.ports import IHttpClient
from geckoterminal_client.validation import ParameterValidator, ValidationIssue


class GeckoTerminalDependencyContainer:
    """Dependency injection container for the GeckoTerminal client.

    Responsible for:
    1. Choosing concrete implementations for each protocol
    2. Wiring dependencies together
    3. Providing factory methods for components

    Tests can subclass this and override methods to inject mocks.
    """

    def __init__(
        self,
        config: GeckoTerminalConfig | None = None,
        on_issue: Callable[[ValidationIssue], None] | None = None,
    ):
        """Initialize container with configuration.

        Args:
            config: Client configuration (optional, uses defaults)
            on_issue: Diagnostic callback for parameter validation issues
        """
        self.config = config or GeckoTerminalConfig()
        self.on_issue = on_issue

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        on_issue: Callable[[ValidationIssue], None] | None = None,
        configure_logging: bool = True,
    ) -> "GeckoTerminalDependencyContainer":
        """Build a container from loaded settings, optionally configuring logging."""
        if configure_logging:
            setup_logging(
                level=settings.logging.level,
                json_logs=settings.logging.json_logs,
                include_timestamp=settings.logging.include_timestamp,
            )
        return cls(settings.to_client_config(), on_issue=on_issue)

    def create_http_client(self) -> IHttpClient:
        """Create HTTP client implementation.

        Override this in tests to inject a mock HTTP client.
        """
        return AiohttpClient(self.config.http_config)

    def create_validator(self) -> ParameterValidator:
        return ParameterValidator(self.config.validation_mode, on_issue=self.on_issue)

    def create_error_mapper(self) -> GeckoTerminalErrorMapper:
        return GeckoTerminalErrorMapper()

    def create_client(self) -> GeckoTerminalClient:
        """Create fully-wired GeckoTerminalClient."""
        return GeckoTerminalClient(
            config=self.config,
            http_client=self.create_http_client(),
            validator=self.create_validator(),
            error_mapper=self.create_error_mapper(),
        )
