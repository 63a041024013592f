"""Shared pydantic building blocks for GeckoTerminal response models."""

import enum

from pydantic import BaseModel, ConfigDict


class ResourceType(str, enum.Enum):
    """Closed set of resource type tags."""

    NETWORK = "network"
    DEX = "dex"
    POOL = "pool"
    TOKEN = "token"
    TOKEN_INFO = "token_info"
    TRADE = "trade"
    OHLCV = "ohlcv"
    SIMPLE_TOKEN_PRICE = "simple_token_price"


class GeckoModel(BaseModel):
    """Immutable model that keeps fields it does not declare."""

    model_config = ConfigDict(frozen=True, extra="allow")


class ResourceRef(GeckoModel):
    """Pointer to a resource, resolved through the envelope's ``included``."""

    id: str
    type: ResourceType


class Relationship(GeckoModel):
    """To-one (single ref) or to-many (list of refs) relationship."""

    data: ResourceRef | list[ResourceRef] | None = None

    @property
    def refs(self) -> list[ResourceRef]:
        if self.data is None:
            return []
        if isinstance(self.data, list):
            return list(self.data)
        return [self.data]
