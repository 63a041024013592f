"""Path and query construction for every endpoint operation."""

import pytest

from geckoterminal_client.models import OHLCV, Dex, Network, Pool, Token, TokenInfo, TokenPrice, Trade

BASE_URL = "https://api.geckoterminal.com/api/v2"


def sent_request(http_client):
    """Return (url, params, headers) of the single GET sent."""
    http_client.get.assert_awaited_once()
    call = http_client.get.await_args
    return call.args[0], call.kwargs["params"], call.kwargs["headers"]


@pytest.mark.asyncio
async def test_networks(client, http_client, respond, payload):
    respond(payload("networks"))

    result = await client.networks()

    url, params, headers = sent_request(http_client)
    assert url == f"{BASE_URL}/networks"
    assert params == {"page": "1"}
    assert headers == {"Accept": "application/json"}
    assert all(isinstance(network, Network) for network in result.data)
    assert result.data[2].attributes.coingecko_asset_platform_id is None
    assert result.links.next.endswith("page=2")


@pytest.mark.asyncio
async def test_network_dexes(client, http_client, respond, payload):
    respond(payload("dexes"))

    result = await client.network_dexes("eth", page=2)

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/networks/eth/dexes"
    assert params == {"page": "2"}
    assert [dex.id for dex in result.data] == ["uniswap_v2", "sushiswap"]
    assert isinstance(result.data[0], Dex)


@pytest.mark.asyncio
async def test_trending_pools_defaults_to_all_pool_includes(client, http_client, respond, payload):
    respond(payload("pools"))

    result = await client.trending_pools()

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/networks/trending_pools"
    assert params == {"page": "1", "include": "base_token,quote_token,dex,network"}
    assert isinstance(result.data[0], Pool)


@pytest.mark.asyncio
async def test_network_trending_pools(client, http_client, respond, payload):
    respond(payload("pools"))

    await client.network_trending_pools("eth", include=["dex"], page=3)

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/networks/eth/trending_pools"
    assert params == {"page": "3", "include": "dex"}


@pytest.mark.asyncio
async def test_network_pool_address_path(client, http_client, respond, payload):
    pools = payload("pools")
    respond({"data": pools["data"][0], "included": pools["included"]})

    result = await client.network_pool_address("eth", "0xABC")

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/networks/eth/pools/0xABC"
    assert params == {"include": "base_token,quote_token,dex"}
    assert isinstance(result.data, Pool)


@pytest.mark.asyncio
async def test_network_pools_multi_address_joins_addresses(client, http_client, respond, payload):
    respond(payload("pools"))

    result = await client.network_pools_multi_address("eth", ["0x1", "0x2"], include=["base_token"])

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/networks/eth/pools/multi/0x1,0x2"
    assert params == {"include": "base_token"}
    assert len(result.data) == 2


@pytest.mark.asyncio
async def test_network_pools(client, http_client, respond, payload):
    respond(payload("pools"))

    await client.network_pools("bsc", page=2)

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/networks/bsc/pools"
    assert params == {"include": "base_token,quote_token,dex", "page": "2"}


@pytest.mark.asyncio
async def test_network_dex_pools(client, http_client, respond, payload):
    respond(payload("pools"))

    await client.network_dex_pools("eth", "sushiswap", include=["base_token", "quote_token"])

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/networks/eth/dexes/sushiswap/pools"
    assert params == {"include": "base_token,quote_token", "page": "1"}


@pytest.mark.asyncio
async def test_network_new_pools(client, http_client, respond, payload):
    respond(payload("pools"))

    await client.network_new_pools("eth")

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/networks/eth/new_pools"
    assert params["page"] == "1"


@pytest.mark.asyncio
async def test_new_pools(client, http_client, respond, payload):
    respond(payload("pools"))

    await client.new_pools(include=["network"])

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/networks/new_pools"
    assert params == {"include": "network", "page": "1"}


@pytest.mark.asyncio
async def test_search_network_pool(client, http_client, respond, payload):
    respond(payload("pools"))

    await client.search_network_pool("ETH", network="eth")

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/search/pools"
    assert params == {
        "query": "ETH",
        "network": "eth",
        "include": "base_token,quote_token,dex",
        "page": "1",
    }


@pytest.mark.asyncio
async def test_search_without_network_omits_param(client, http_client, respond, payload):
    respond(payload("pools"))

    await client.search_network_pool("WETH")

    _, params, _ = sent_request(http_client)
    assert "network" not in params


@pytest.mark.asyncio
async def test_network_pool_info(client, http_client, respond, payload):
    info = payload("token_info")
    respond({"data": [info["data"]]})

    result = await client.network_pool_info("eth", "0xpool")

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/networks/eth/pools/0xpool/info"
    assert params == {}
    assert isinstance(result.data[0], TokenInfo)


@pytest.mark.asyncio
async def test_network_addresses_token_price(client, http_client, respond, payload):
    respond(payload("token_price"))

    result = await client.network_addresses_token_price("eth", ["0xa", "0xb"])

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/simple/networks/eth/token_price/0xa,0xb"
    assert params == {}
    assert isinstance(result.data, TokenPrice)


@pytest.mark.asyncio
async def test_network_token_pools(client, http_client, respond, payload):
    respond(payload("pools"))

    await client.network_token_pools("eth", "0xtoken", page=4)

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/networks/eth/tokens/0xtoken/pools"
    assert params == {"include": "base_token,quote_token,dex", "page": "4"}


@pytest.mark.asyncio
async def test_network_token(client, http_client, respond, payload):
    respond(payload("token"))

    result = await client.network_token("eth", "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48")

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/networks/eth/tokens/0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
    assert params == {"include": "top_pools"}
    assert isinstance(result.data, Token)


@pytest.mark.asyncio
async def test_network_token_multi_address(client, http_client, respond, payload):
    respond({"data": [payload("token")["data"]]})

    result = await client.network_token_multi_address("eth", ["0x1", "0x2", "0x3"])

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/networks/eth/tokens/multi/0x1,0x2,0x3"
    assert params == {"include": "top_pools"}
    assert isinstance(result.data[0], Token)


@pytest.mark.asyncio
async def test_network_tokens_address_info(client, http_client, respond, payload):
    respond(payload("token_info"))

    result = await client.network_tokens_address_info("eth", "0xtoken")

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/networks/eth/tokens/0xtoken/info"
    assert params == {}
    assert result.data.attributes.twitter_handle == "circle"


@pytest.mark.asyncio
async def test_token_info_recently_updated(client, http_client, respond, payload):
    respond({"data": [payload("token_info")["data"]]})

    await client.token_info_recently_updated()

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/tokens/info_recently_updated"
    assert params == {"include": "network"}


@pytest.mark.asyncio
async def test_network_pool_trades(client, http_client, respond, payload):
    respond(payload("trades"))

    result = await client.network_pool_trades("eth", "0xpool", trade_volume_in_usd_greater_than=1000.0)

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/networks/eth/pools/0xpool/trades"
    assert params == {"trade_volume_in_usd_greater_than": "1000"}
    assert isinstance(result.data[0], Trade)
    assert result.data[0].attributes.block_number == 18912345


@pytest.mark.asyncio
async def test_network_pool_trades_default_threshold(client, http_client, respond, payload):
    respond(payload("trades"))

    await client.network_pool_trades("eth", "0xpool")

    _, params, _ = sent_request(http_client)
    assert params == {"trade_volume_in_usd_greater_than": "0"}


@pytest.mark.asyncio
async def test_network_pool_ohlcv_path(client, http_client, respond, payload):
    respond(payload("ohlcv"))

    result = await client.network_pool_ohlcv("eth", "0xpool", "hour")

    url, _, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/networks/eth/pools/0xpool/ohlcv/hour"
    assert isinstance(result.data, OHLCV)
    assert result.meta.base.symbol == "DAI"


@pytest.mark.asyncio
async def test_generic_get_returns_untyped_envelope(client, http_client, respond):
    respond({"data": {"anything": [1, 2, 3]}})

    result = await client.get("/custom", {"flag": True, "skip": None})

    url, params, _ = sent_request(http_client)
    assert url == f"{BASE_URL}/custom"
    assert params == {"flag": "true"}
    assert result.data == {"anything": [1, 2, 3]}
