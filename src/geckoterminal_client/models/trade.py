from typing import Literal

from .base import GeckoModel


class TradeAttributes(GeckoModel):
    block_number: int
    tx_hash: str
    tx_from_address: str
    from_token_amount: str
    to_token_amount: str
    price_from_in_currency_token: str
    price_to_in_currency_token: str
    price_from_in_usd: str
    price_to_in_usd: str
    block_timestamp: str
    kind: str
    volume_in_usd: str
    from_token_address: str
    to_token_address: str


class Trade(GeckoModel):
    id: str
    type: Literal["trade"]
    attributes: TradeAttributes
