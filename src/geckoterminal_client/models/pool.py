"""Pool resource: prices, reserves and activity counters per time window."""

from typing import Literal

from .base import GeckoModel, Relationship


class PriceChangePercentage(GeckoModel):
    m5: str
    h1: str
    h6: str
    h24: str
    m15: str | None = None
    m30: str | None = None


class TransactionBucket(GeckoModel):
    """Buy/sell counts in one window; unique trader counts may be absent."""

    buys: int
    sells: int
    buyers: int | None = None
    sellers: int | None = None


class Transactions(GeckoModel):
    m5: TransactionBucket
    m15: TransactionBucket
    m30: TransactionBucket
    h1: TransactionBucket
    h24: TransactionBucket
    h6: TransactionBucket | None = None


class VolumeUsd(GeckoModel):
    m5: str
    h1: str
    h6: str
    h24: str
    m15: str | None = None
    m30: str | None = None


class PoolAttributes(GeckoModel):
    base_token_price_usd: str
    base_token_price_native_currency: str
    quote_token_price_usd: str
    quote_token_price_native_currency: str
    base_token_price_quote_token: str
    quote_token_price_base_token: str
    address: str
    name: str
    pool_created_at: str
    reserve_in_usd: str
    price_change_percentage: PriceChangePercentage
    transactions: Transactions
    volume_usd: VolumeUsd
    fdv_usd: str | None = None
    market_cap_usd: str | None = None
    token_price_usd: str | None = None


class PoolRelationships(GeckoModel):
    base_token: Relationship
    quote_token: Relationship
    dex: Relationship
    network: Relationship | None = None


class Pool(GeckoModel):
    id: str
    type: Literal["pool"]
    attributes: PoolAttributes
    relationships: PoolRelationships
