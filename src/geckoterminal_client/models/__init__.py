"""Response models mirroring the GeckoTerminal JSON:API shapes."""

from .base import GeckoModel, Relationship, ResourceRef, ResourceType
from .dex import Dex, DexAttributes
from .network import Network, NetworkAttributes
from .ohlcv import OHLCV, Candle, OHLCVAttributes
from .pool import (
    Pool,
    PoolAttributes,
    PoolRelationships,
    PriceChangePercentage,
    TransactionBucket,
    Transactions,
    VolumeUsd,
)
from .response import GeckoTerminalResponse, IncludedResource, Links, Meta, MetaToken
from .simple import TokenPrice, TokenPriceAttributes
from .token import Token, TokenAttributes, TokenRelationships, TokenVolumeUsd
from .token_info import TokenInfo, TokenInfoAttributes, TokenInfoRelationships
from .trade import Trade, TradeAttributes

__all__ = [
    "GeckoModel",
    "ResourceType",
    "ResourceRef",
    "Relationship",
    "GeckoTerminalResponse",
    "IncludedResource",
    "Links",
    "Meta",
    "MetaToken",
    "Network",
    "NetworkAttributes",
    "Dex",
    "DexAttributes",
    "Pool",
    "PoolAttributes",
    "PoolRelationships",
    "PriceChangePercentage",
    "TransactionBucket",
    "Transactions",
    "VolumeUsd",
    "Token",
    "TokenAttributes",
    "TokenRelationships",
    "TokenVolumeUsd",
    "TokenInfo",
    "TokenInfoAttributes",
    "TokenInfoRelationships",
    "Trade",
    "TradeAttributes",
    "OHLCV",
    "OHLCVAttributes",
    "Candle",
    "TokenPrice",
    "TokenPriceAttributes",
]
