"""Token metadata (socials, description, score).

The live API tags these resources ``token``; ``token_info`` is accepted too.
"""

from typing import Literal

from .base import GeckoModel, Relationship


class TokenInfoAttributes(GeckoModel):
    address: str
    name: str
    symbol: str
    websites: list[str] = []
    image_url: str | None = None
    coingecko_coin_id: str | None = None
    description: str | None = None
    gt_score: float | None = None
    discord_url: str | None = None
    telegram_handle: str | None = None
    twitter_handle: str | None = None


class TokenInfoRelationships(GeckoModel):
    network: Relationship


class TokenInfo(GeckoModel):
    id: str
    type: Literal["token_info", "token"]
    attributes: TokenInfoAttributes
    relationships: TokenInfoRelationships | None = None
