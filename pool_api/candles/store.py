from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pool_api.models.market import Candle


@dataclass
class CandleStore:
    """
    In-memory candle storage, keyed by token mint.

    history[mint]      -> closed candles, oldest first (latest N)
    last_fetched[mint] -> cursor: start of the next window to build (epoch seconds)

    Nothing is persisted; a restart starts every mint from scratch.
    """
    max_history: int = 500
    history: Dict[str, List[Candle]] = field(default_factory=dict)
    last_fetched: Dict[str, int] = field(default_factory=dict)

    def has_mint(self, mint: str) -> bool:
        return mint in self.last_fetched

    def start(self, mint: str, cursor: int) -> None:
        """Begin tracking a mint; no-op if it is already tracked."""
        if mint in self.last_fetched:
            return
        self.last_fetched[mint] = cursor
        self.history.setdefault(mint, [])

    def get_cursor(self, mint: str) -> Optional[int]:
        return self.last_fetched.get(mint)

    def advance(self, mint: str, cursor: int) -> None:
        """Move the cursor forward; it never goes back."""
        current = self.last_fetched.get(mint)
        if current is not None and cursor < current:
            raise ValueError(f"Cursor for {mint} cannot move back ({cursor} < {current})")
        self.last_fetched[mint] = cursor

    def append(self, mint: str, candle: Candle) -> None:
        hist = self.history.setdefault(mint, [])

        if hist and candle.time <= hist[-1].time:
            raise ValueError(
                f"Candle for {mint} out of order ({candle.time} <= {hist[-1].time})"
            )

        hist.append(candle)

        if len(hist) > self.max_history:
            del hist[:-self.max_history]

    def get_history(self, mint: str) -> List[Candle]:
        return self.history.get(mint, [])

    def mints(self) -> List[str]:
        return list(self.last_fetched)
