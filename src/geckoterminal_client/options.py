"""Per-endpoint option objects with their documented defaults."""

import time
from dataclasses import dataclass


@dataclass(frozen=True)
class OhlcvOptions:
    """Query options for pool OHLCV candles.

    ``before_timestamp`` is a Unix timestamp in seconds; when left as None the
    current time at call time is sent.
    """

    aggregate: int = 1
    before_timestamp: int | None = None
    limit: int = 100
    currency: str = "usd"
    token: str = "base"

    def resolved_before_timestamp(self) -> int:
        if self.before_timestamp is None:
            return int(time.time())
        return self.before_timestamp
