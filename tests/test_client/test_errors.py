"""Failure surfacing: non-2xx statuses, shape mismatches and transport errors."""

import pytest
from structlog.testing import capture_logs

from geckoterminal_client.client import GeckoTerminalClient
from geckoterminal_client.exceptions import (
    BadRequestError,
    GeckoTerminalAPIError,
    NotFoundError,
    RateLimitError,
    ResponseValidationError,
    ServerError,
    TransportError,
)

ENDPOINT_CALLS = [
    ("networks", ()),
    ("network_dexes", ("eth",)),
    ("trending_pools", ()),
    ("network_trending_pools", ("eth",)),
    ("network_pool_address", ("eth", "0xpool")),
    ("network_pools_multi_address", ("eth", ["0x1", "0x2"])),
    ("network_pools", ("eth",)),
    ("network_dex_pools", ("eth", "uniswap_v3")),
    ("network_new_pools", ("eth",)),
    ("new_pools", ()),
    ("search_network_pool", ("WETH",)),
    ("network_pool_info", ("eth", "0xpool")),
    ("network_addresses_token_price", ("eth", ["0x1"])),
    ("network_token_pools", ("eth", "0xtoken")),
    ("network_token", ("eth", "0xtoken")),
    ("network_token_multi_address", ("eth", ["0x1"])),
    ("network_tokens_address_info", ("eth", "0xtoken")),
    ("token_info_recently_updated", ()),
    ("network_pool_trades", ("eth", "0xpool")),
    ("network_pool_ohlcv", ("eth", "0xpool", "day")),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("method,args", ENDPOINT_CALLS)
async def test_every_endpoint_raises_on_server_error(client, respond, method, args):
    respond({"errors": [{"status": "500", "title": "Internal Server Error"}]}, status_code=500)

    with pytest.raises(ServerError) as exc_info:
        await getattr(client, method)(*args)

    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_not_found_carries_endpoint_and_title(client, respond):
    respond({"errors": [{"status": "404", "title": "Not Found"}]}, status_code=404)

    with pytest.raises(NotFoundError) as exc_info:
        await client.network_pool_address("eth", "0xmissing")

    error = exc_info.value
    assert error.endpoint == "/networks/eth/pools/0xmissing"
    assert "Not Found" in str(error)


@pytest.mark.asyncio
async def test_bad_request(client, respond):
    respond({"error": "page is out of range"}, status_code=400)

    with pytest.raises(BadRequestError, match="page is out of range"):
        await client.networks(page=99)


@pytest.mark.asyncio
async def test_rate_limit_reads_retry_after(client, respond):
    respond("Too Many Requests", status_code=429, headers={"retry-after": "30"})

    with pytest.raises(RateLimitError) as exc_info:
        await client.networks()

    assert exc_info.value.retry_after == 30


@pytest.mark.asyncio
async def test_unexpected_status_maps_to_base_error(client, respond):
    respond("I'm a teapot", status_code=418)

    with pytest.raises(GeckoTerminalAPIError) as exc_info:
        await client.networks()

    assert type(exc_info.value) is GeckoTerminalAPIError
    assert exc_info.value.status_code == 418


@pytest.mark.asyncio
async def test_single_attempt_no_retry(client, http_client, respond):
    respond("unavailable", status_code=503)

    with pytest.raises(ServerError):
        await client.networks()

    assert http_client.get.await_count == 1


@pytest.mark.asyncio
async def test_shape_mismatch_raises_response_validation_error(client, respond):
    respond({"data": [{"id": "eth", "type": "network", "attributes": {}}]})

    with pytest.raises(ResponseValidationError) as exc_info:
        await client.networks()

    assert exc_info.value.endpoint == "/networks"


@pytest.mark.asyncio
async def test_wrong_type_tag_is_rejected(client, respond, payload):
    body = payload("dexes")
    respond(body)

    with pytest.raises(ResponseValidationError):
        await client.networks()


@pytest.mark.asyncio
async def test_single_resource_endpoint_rejects_list(client, respond, payload):
    respond(payload("pools"))

    with pytest.raises(ResponseValidationError):
        await client.network_pool_address("eth", "0xpool")


@pytest.mark.asyncio
async def test_transport_error_propagates(client, http_client):
    http_client.get.side_effect = TransportError("connection reset", url="https://x")

    with pytest.raises(TransportError):
        await client.networks()


@pytest.mark.asyncio
async def test_failure_is_logged(http_client, respond):
    respond("boom", status_code=502)

    with capture_logs() as logs:
        client = GeckoTerminalClient(http_client=http_client)
        with pytest.raises(ServerError):
            await client.networks()

    failures = [entry for entry in logs if entry["event"] == "request_failed"]
    assert len(failures) == 1
    assert failures[0]["status_code"] == 502
    assert failures[0]["log_level"] == "error"


@pytest.mark.asyncio
async def test_short_ohlcv_row_raises_response_validation_error(client, respond, payload):
    body = payload("ohlcv")
    body["data"]["attributes"]["ohlcv_list"][0] = [1703894400, 2280.1, 2295.0]
    respond(body)

    with pytest.raises(ResponseValidationError):
        await client.network_pool_ohlcv("eth", "0xpool", "hour")
