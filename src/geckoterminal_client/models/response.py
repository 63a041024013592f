"""Top-level response envelope shared by every endpoint.

``data`` holds one resource or a list of them depending on the endpoint;
``included`` carries the related resources requested through ``include``.
"""

from typing import Any, Generic, TypeVar

from .base import GeckoModel, Relationship, ResourceRef, ResourceType

DataT = TypeVar("DataT")


class Links(GeckoModel):
    first: str | None = None
    prev: str | None = None
    next: str | None = None
    last: str | None = None


class MetaToken(GeckoModel):
    address: str
    name: str
    symbol: str
    coingecko_coin_id: str | None = None


class Meta(GeckoModel):
    base: MetaToken | None = None
    quote: MetaToken | None = None


class IncludedResource(GeckoModel):
    """Related resource expanded inline; attributes depend on ``type``."""

    id: str
    type: ResourceType
    attributes: dict[str, Any]
    relationships: dict[str, Relationship] | None = None


class GeckoTerminalResponse(GeckoModel, Generic[DataT]):
    data: DataT
    links: Links | None = None
    meta: Meta | None = None
    included: list[IncludedResource] | None = None

    def find_included(self, ref: ResourceRef) -> IncludedResource | None:
        """Resolve a relationship reference against ``included``."""
        for resource in self.included or ():
            if resource.id == ref.id and resource.type == ref.type:
                return resource
        return None
