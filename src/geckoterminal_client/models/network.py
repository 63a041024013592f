from typing import Literal

from .base import GeckoModel


class NetworkAttributes(GeckoModel):
    name: str
    coingecko_asset_platform_id: str | None = None


class Network(GeckoModel):
    id: str
    type: Literal["network"]
    attributes: NetworkAttributes
