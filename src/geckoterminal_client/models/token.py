from typing import Literal

from .base import GeckoModel, Relationship


class TokenVolumeUsd(GeckoModel):
    h24: str | None = None


class TokenAttributes(GeckoModel):
    address: str
    name: str
    symbol: str
    decimals: int
    total_supply: str
    volume_usd: TokenVolumeUsd
    image_url: str | None = None
    coingecko_coin_id: str | None = None
    price_usd: str | None = None
    fdv_usd: str | None = None
    total_reserve_in_usd: str | None = None
    market_cap_usd: str | None = None


class TokenRelationships(GeckoModel):
    top_pools: Relationship


class Token(GeckoModel):
    id: str
    type: Literal["token"]
    attributes: TokenAttributes
    relationships: TokenRelationships
