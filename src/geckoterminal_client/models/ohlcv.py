"""OHLCV candles for a pool.

The live API tags this resource ``ohlcv_request_response``; ``ohlcv`` is
accepted too.
"""

from typing import Literal, NamedTuple

from .base import GeckoModel


class Candle(NamedTuple):
    timestamp: int
    open: float
    high: float
    low: float
    close: float
    volume: float


class OHLCVAttributes(GeckoModel):
    # Each row: [timestamp, open, high, low, close, volume]
    ohlcv_list: list[tuple[float, float, float, float, float, float]]

    @property
    def candles(self) -> list[Candle]:
        return [
            Candle(int(row[0]), *row[1:])
            for row in self.ohlcv_list
        ]


class OHLCV(GeckoModel):
    id: str
    type: Literal["ohlcv", "ohlcv_request_response"]
    attributes: OHLCVAttributes
