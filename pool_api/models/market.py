from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Candle:
    """
    Candle (OHLC) for a fixed window (30 seconds by default).

    time: start of the window (epoch seconds); the window is [time, time + interval)
    open/high/low/close: first/max/min/last sampled price in the window
    """
    time: int
    open: float
    high: float
    low: float
    close: float

    def update(self, price: float) -> None:
        """Fold one more price into this candle."""
        self.high = max(self.high, price)
        self.low = min(self.low, price)
        self.close = price

    def to_dict(self) -> dict:
        return {
            "time": self.time,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
        }
