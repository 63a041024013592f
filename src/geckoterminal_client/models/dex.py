from typing import Literal

from .base import GeckoModel


class DexAttributes(GeckoModel):
    name: str


class Dex(GeckoModel):
    id: str
    type: Literal["dex"]
    attributes: DexAttributes
