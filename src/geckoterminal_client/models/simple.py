from typing import Literal

from .base import GeckoModel


class TokenPriceAttributes(GeckoModel):
    # token address -> USD price; unknown tokens come back as null
    token_prices: dict[str, str | None]


class TokenPrice(GeckoModel):
    id: str
    type: Literal["simple_token_price"]
    attributes: TokenPriceAttributes
