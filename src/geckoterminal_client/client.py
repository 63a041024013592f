"""Async client for the GeckoTerminal public API."""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from geckoterminal_client.config.value_objects import GeckoTerminalConfig
from geckoterminal_client.connectors.aiohttp_client import AiohttpClient
from geckoterminal_client.error_mapper import GeckoTerminalErrorMapper
from geckoterminal_client.exceptions import ResponseValidationError
from geckoterminal_client.infrastructure.observability import get_client_logger
from geckoterminal_client.models import (
    OHLCV,
    Dex,
    GeckoTerminalResponse,
    Network,
    Pool,
    Token,
    TokenInfo,
    TokenPrice,
    Trade,
)
from geckoterminal_client.options import OhlcvOptions
from geckoterminal_client.ports.http import IHttpClient
from geckoterminal_client.validation import (
    IncludeCategory,
    ParameterValidator,
    ValidationIssue,
    check_addresses,
    check_aggregate,
    check_currency,
    check_include,
    check_ohlcv_limit,
    check_page,
    check_timeframe,
    check_token,
)

ModelT = TypeVar("ModelT", bound=BaseModel)

NetworkList = GeckoTerminalResponse[list[Network]]
DexList = GeckoTerminalResponse[list[Dex]]
PoolItem = GeckoTerminalResponse[Pool]
PoolList = GeckoTerminalResponse[list[Pool]]
TokenItem = GeckoTerminalResponse[Token]
TokenList = GeckoTerminalResponse[list[Token]]
TokenInfoItem = GeckoTerminalResponse[TokenInfo]
TokenInfoList = GeckoTerminalResponse[list[TokenInfo]]
TokenPriceItem = GeckoTerminalResponse[TokenPrice]
TradeList = GeckoTerminalResponse[list[Trade]]
OHLCVItem = GeckoTerminalResponse[OHLCV]


def to_query_value(value: Any) -> str:
    """Encode a query parameter the way the API expects it (always a string)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _as_list(values: str | Sequence[str]) -> list[str]:
    """A bare string is one value, not a sequence of characters."""
    if isinstance(values, str):
        return [values]
    return list(values)


def _header(headers: Mapping[str, str], name: str) -> str | None:
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


class GeckoTerminalClient:
    """Async client for GeckoTerminal API.

    Single Responsibility: translate a logical query into one HTTP GET and a
    typed result.

    Dependencies injected (created from config when omitted):
    - http_client: Executes HTTP requests
    - validator: Reports parameter issues, rejects them in strict mode
    - error_mapper: Maps non-2xx responses to exceptions

    Every call is a single attempt: no retries, caching or pagination.
    """

    def __init__(
        self,
        config: GeckoTerminalConfig | None = None,
        http_client: IHttpClient | None = None,
        validator: ParameterValidator | None = None,
        error_mapper: GeckoTerminalErrorMapper | None = None,
        on_issue: Callable[[ValidationIssue], None] | None = None,
    ):
        """Initialize GeckoTerminalClient.

        Args:
            config: Base URL, Accept header, validation mode, HTTP settings
            http_client: HTTP client implementation (default AiohttpClient)
            validator: Parameter validator (default built from config.validation_mode)
            error_mapper: Status-to-exception mapper
            on_issue: Diagnostic callback for validation issues; ignored when
                ``validator`` is given
        """
        self.config = config or GeckoTerminalConfig()
        self.http_client = http_client or AiohttpClient(self.config.http_config)
        self.validator = validator or ParameterValidator(
            self.config.validation_mode, on_issue=on_issue
        )
        self.error_mapper = error_mapper or GeckoTerminalErrorMapper()
        self.base_url = self.config.base_url
        self.headers = {"Accept": self.config.accept_header}
        self._log = get_client_logger(base_url=self.base_url)

    async def __aenter__(self) -> "GeckoTerminalClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        """Release the underlying HTTP client."""
        await self.http_client.close()

    # ------------------------------------------------------------------
    # Generic dispatcher
    # ------------------------------------------------------------------

    async def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        response_model: type[ModelT] = GeckoTerminalResponse[Any],
    ) -> ModelT:
        """Send one GET request and parse the body into ``response_model``.

        Args:
            path: API path appended to the base URL (e.g. "/networks")
            params: Query parameters; values are string-encoded, None is dropped
            response_model: Model the JSON body must match

        Returns:
            Parsed response model

        Raises:
            GeckoTerminalAPIError: Non-2xx status (subclass chosen by status)
            ResponseValidationError: Body does not match ``response_model``
            TransportError: Connection failure or timeout
        """
        url = f"{self.base_url}{path}"
        query = {
            key: to_query_value(value)
            for key, value in (params or {}).items()
            if value is not None
        }

        self._log.debug("request_sent", endpoint=path, params=query)
        response = await self.http_client.get(
            url,
            params=query,
            headers=dict(self.headers),
            timeout=self.config.http_config.timeout,
        )

        if not response.ok:
            error = self.error_mapper.map_error(
                response.status_code,
                response.body,
                path,
                retry_after=_header(response.headers, "Retry-After"),
            )
            self._log.error(
                "request_failed",
                endpoint=path,
                status_code=response.status_code,
                error=str(error),
            )
            raise error

        try:
            return response_model.model_validate(response.body)
        except PydanticValidationError as e:
            self._log.error(
                "response_shape_mismatch",
                endpoint=path,
                model=response_model.__name__,
                errors=e.error_count(),
            )
            raise ResponseValidationError(
                f"Invalid response structure for {path}: {e}",
                status_code=response.status_code,
                endpoint=path,
            ) from e

    def _validate(self, path: str, *issue_lists: list[ValidationIssue]) -> None:
        issues = [issue for issues in issue_lists for issue in issues]
        if issues:
            self.validator.report(issues, endpoint=path)

    @staticmethod
    def _include(
        include: str | Sequence[str] | None, category: IncludeCategory
    ) -> list[str]:
        # Omitted include expands every related resource the endpoint supports
        if include is None:
            return list(category.allowed)
        return _as_list(include)

    # ------------------------------------------------------------------
    # Networks and DEXes
    # ------------------------------------------------------------------

    async def networks(self, page: int = 1) -> NetworkList:
        """Get all supported networks along with their network ID."""
        path = "/networks"
        self._validate(path, check_page(page))
        return await self.get(path, {"page": page}, NetworkList)

    async def network_dexes(self, network: str, page: int = 1) -> DexList:
        """Get all supported DEXes on a network along with their DEX ID."""
        path = f"/networks/{network}/dexes"
        self._validate(path, check_page(page))
        return await self.get(path, {"page": page}, DexList)

    # ------------------------------------------------------------------
    # Pools
    # ------------------------------------------------------------------

    async def trending_pools(
        self, include: str | Sequence[str] | None = None, page: int = 1
    ) -> PoolList:
        """Get trending pools across all networks.

        Args:
            include: Related resources to include: base_token, quote_token,
                dex, network (default all)
            page: Page number, at most 10
        """
        include = self._include(include, IncludeCategory.POOL)
        path = "/networks/trending_pools"
        self._validate(path, check_page(page), check_include(include, IncludeCategory.POOL))
        return await self.get(
            path, {"page": page, "include": ",".join(include)}, PoolList
        )

    async def network_trending_pools(
        self, network: str, include: str | Sequence[str] | None = None, page: int = 1
    ) -> PoolList:
        """Get trending pools on a network.

        Args:
            network: Network ID (e.g. "eth")
            include: Related resources to include: base_token, quote_token,
                dex (default all)
            page: Page number, at most 10
        """
        include = self._include(include, IncludeCategory.NETWORK_POOL)
        path = f"/networks/{network}/trending_pools"
        self._validate(
            path, check_page(page), check_include(include, IncludeCategory.NETWORK_POOL)
        )
        return await self.get(
            path, {"page": page, "include": ",".join(include)}, PoolList
        )

    async def network_pool_address(
        self, network: str, address: str, include: str | Sequence[str] | None = None
    ) -> PoolItem:
        """Get a specific pool on a network."""
        include = self._include(include, IncludeCategory.NETWORK_POOL)
        path = f"/networks/{network}/pools/{address}"
        self._validate(path, check_include(include, IncludeCategory.NETWORK_POOL))
        return await self.get(path, {"include": ",".join(include)}, PoolItem)

    async def network_pools_multi_address(
        self,
        network: str,
        addresses: str | Sequence[str],
        include: str | Sequence[str] | None = None,
    ) -> PoolList:
        """Get multiple pools on a network.

        Args:
            network: Network ID
            addresses: Pool addresses, at most 30; all of them are sent
            include: Related resources to include: base_token, quote_token,
                dex (default all)
        """
        addresses = _as_list(addresses)
        include = self._include(include, IncludeCategory.NETWORK_POOL)
        path = f"/networks/{network}/pools/multi/{','.join(addresses)}"
        self._validate(
            path,
            check_addresses(addresses),
            check_include(include, IncludeCategory.NETWORK_POOL),
        )
        return await self.get(path, {"include": ",".join(include)}, PoolList)

    async def network_pools(
        self, network: str, include: str | Sequence[str] | None = None, page: int = 1
    ) -> PoolList:
        """Get top pools on a network."""
        include = self._include(include, IncludeCategory.NETWORK_POOL)
        path = f"/networks/{network}/pools"
        self._validate(
            path, check_page(page), check_include(include, IncludeCategory.NETWORK_POOL)
        )
        return await self.get(
            path, {"include": ",".join(include), "page": page}, PoolList
        )

    async def network_dex_pools(
        self,
        network: str,
        dex: str,
        include: str | Sequence[str] | None = None,
        page: int = 1,
    ) -> PoolList:
        """Get top pools on a network's DEX.

        Args:
            network: Network ID
            dex: DEX ID (e.g. "sushiswap")
            include: Related resources to include: base_token, quote_token,
                dex (default all)
            page: Page number, at most 10
        """
        include = self._include(include, IncludeCategory.NETWORK_POOL)
        path = f"/networks/{network}/dexes/{dex}/pools"
        self._validate(
            path, check_include(include, IncludeCategory.NETWORK_POOL), check_page(page)
        )
        return await self.get(
            path, {"include": ",".join(include), "page": page}, PoolList
        )

    async def network_new_pools(
        self, network: str, include: str | Sequence[str] | None = None, page: int = 1
    ) -> PoolList:
        """Get the latest pools on a network."""
        include = self._include(include, IncludeCategory.NETWORK_POOL)
        path = f"/networks/{network}/new_pools"
        self._validate(
            path, check_include(include, IncludeCategory.NETWORK_POOL), check_page(page)
        )
        return await self.get(
            path, {"include": ",".join(include), "page": page}, PoolList
        )

    async def new_pools(
        self, include: str | Sequence[str] | None = None, page: int = 1
    ) -> PoolList:
        """Get the latest pools across all networks."""
        include = self._include(include, IncludeCategory.POOL)
        path = "/networks/new_pools"
        self._validate(path, check_include(include, IncludeCategory.POOL), check_page(page))
        return await self.get(
            path, {"include": ",".join(include), "page": page}, PoolList
        )

    async def search_network_pool(
        self,
        query: str,
        network: str | None = None,
        include: str | Sequence[str] | None = None,
        page: int = 1,
    ) -> PoolList:
        """Search pools by pool address, token address or token symbol.

        Args:
            query: Search string
            network: Restrict the search to one network; all networks when None
            include: Related resources to include: base_token, quote_token,
                dex (default all)
            page: Page number, at most 10
        """
        include = self._include(include, IncludeCategory.NETWORK_POOL)
        path = "/search/pools"
        self._validate(
            path, check_include(include, IncludeCategory.NETWORK_POOL), check_page(page)
        )
        params = {
            "query": query,
            "network": network,
            "include": ",".join(include),
            "page": page,
        }
        return await self.get(path, params, PoolList)

    async def network_pool_info(self, network: str, pool_address: str) -> TokenInfoList:
        """Get metadata for the base and quote tokens of a pool."""
        path = f"/networks/{network}/pools/{pool_address}/info"
        return await self.get(path, None, TokenInfoList)

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    async def network_addresses_token_price(
        self, network: str, addresses: str | Sequence[str]
    ) -> TokenPriceItem:
        """Get current USD prices of multiple tokens on a network."""
        addresses = _as_list(addresses)
        path = f"/simple/networks/{network}/token_price/{','.join(addresses)}"
        self._validate(path, check_addresses(addresses))
        return await self.get(path, None, TokenPriceItem)

    async def network_token_pools(
        self,
        network: str,
        token_address: str,
        include: str | Sequence[str] | None = None,
        page: int = 1,
    ) -> PoolList:
        """Get top pools for a token on a network."""
        include = self._include(include, IncludeCategory.NETWORK_POOL)
        path = f"/networks/{network}/tokens/{token_address}/pools"
        self._validate(
            path, check_include(include, IncludeCategory.NETWORK_POOL), check_page(page)
        )
        return await self.get(
            path, {"include": ",".join(include), "page": page}, PoolList
        )

    async def network_token(
        self, network: str, address: str, include: str | Sequence[str] | None = None
    ) -> TokenItem:
        """Get a specific token on a network.

        Args:
            network: Network ID
            address: Token address
            include: Related resources to include: top_pools (default all)
        """
        include = self._include(include, IncludeCategory.TOKEN)
        path = f"/networks/{network}/tokens/{address}"
        self._validate(path, check_include(include, IncludeCategory.TOKEN))
        return await self.get(path, {"include": ",".join(include)}, TokenItem)

    async def network_token_multi_address(
        self,
        network: str,
        addresses: str | Sequence[str],
        include: str | Sequence[str] | None = None,
    ) -> TokenList:
        """Get multiple tokens on a network."""
        addresses = _as_list(addresses)
        include = self._include(include, IncludeCategory.TOKEN)
        path = f"/networks/{network}/tokens/multi/{','.join(addresses)}"
        self._validate(
            path,
            check_addresses(addresses),
            check_include(include, IncludeCategory.TOKEN),
        )
        return await self.get(path, {"include": ",".join(include)}, TokenList)

    async def network_tokens_address_info(
        self, network: str, address: str
    ) -> TokenInfoItem:
        """Get metadata (socials, websites, description) for a token."""
        path = f"/networks/{network}/tokens/{address}/info"
        return await self.get(path, None, TokenInfoItem)

    async def token_info_recently_updated(
        self, include: str | Sequence[str] | None = None
    ) -> TokenInfoList:
        """Get the 100 most recently updated token infos across all networks.

        Args:
            include: Related resources to include: network (default all)
        """
        include = self._include(include, IncludeCategory.TOKEN_INFO)
        path = "/tokens/info_recently_updated"
        self._validate(path, check_include(include, IncludeCategory.TOKEN_INFO))
        return await self.get(path, {"include": ",".join(include)}, TokenInfoList)

    # ------------------------------------------------------------------
    # Trades and OHLCV
    # ------------------------------------------------------------------

    async def network_pool_trades(
        self,
        network: str,
        pool_address: str,
        trade_volume_in_usd_greater_than: float = 0,
    ) -> TradeList:
        """Get the last 300 trades of a pool from the past 24 hours.

        Args:
            network: Network ID
            pool_address: Pool address
            trade_volume_in_usd_greater_than: Only return trades above this USD volume
        """
        path = f"/networks/{network}/pools/{pool_address}/trades"
        params = {"trade_volume_in_usd_greater_than": trade_volume_in_usd_greater_than}
        return await self.get(path, params, TradeList)

    async def network_pool_ohlcv(
        self,
        network: str,
        pool_address: str,
        timeframe: str,
        options: OhlcvOptions | None = None,
    ) -> OHLCVItem:
        """Get OHLCV candles of a pool.

        Args:
            network: Network ID
            pool_address: Pool address
            timeframe: day, hour or minute
            options: aggregate, before_timestamp, limit, currency, token;
                defaults are 1, now, 100, "usd", "base"
        """
        options = options or OhlcvOptions()
        before_timestamp = options.resolved_before_timestamp()
        path = f"/networks/{network}/pools/{pool_address}/ohlcv/{timeframe}"
        self._validate(
            path,
            check_timeframe(timeframe),
            check_aggregate(options.aggregate, timeframe),
            check_ohlcv_limit(options.limit),
            check_currency(options.currency),
            check_token(options.token),
        )
        params = {
            "aggregate": options.aggregate,
            "before_timestamp": before_timestamp,
            "limit": options.limit,
            "currency": options.currency,
            "token": options.token,
        }
        return await self.get(path, params, OHLCVItem)
