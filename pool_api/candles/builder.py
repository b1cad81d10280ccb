from __future__ import annotations

import logging
import threading
import time
from datetime import datetime, timezone
from typing import Callable, Optional

from pool_api.candles.store import CandleStore
from pool_api.models.market import Candle

log = logging.getLogger("candle_builder")

PriceSampler = Callable[[str], float]


def utc_iso(ts: int) -> str:
    return datetime.fromtimestamp(ts, tz=timezone.utc).isoformat()


class CandleBuilder:
    """
    Builds candles from polled pool prices.

    v1 approach:
    - each mint has a cursor (start of the next window to build)
    - a request catches the cursor up to "now", one interval at a time
    - each interval samples the price interval/step times and folds the samples into OHLC
    - windows where no sample succeeded are skipped (no candle), the cursor still advances
    """

    def __init__(
        self,
        store: CandleStore,
        sampler: PriceSampler,
        interval_seconds: int = 30,
        step_seconds: int = 3,
        lookback_seconds: int = 60,
    ):
        self.store = store
        self.sampler = sampler
        self.interval_seconds = interval_seconds
        self.step_seconds = step_seconds
        self.lookback_seconds = lookback_seconds
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _mint_lock(self, mint: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(mint)
            if lock is None:
                lock = self._locks[mint] = threading.Lock()
            return lock

    def generate(self, mint: str, now: Optional[int] = None) -> list[Candle]:
        """
        Catch up candles for one mint and return its full history.
        now: epoch seconds (defaults to the wall clock)
        """
        if now is None:
            now = int(time.time())

        # Serialized per mint; other mints keep sampling in parallel.
        with self._mint_lock(mint):
            if not self.store.has_mint(mint):
                self.store.start(mint, now - self.lookback_seconds)

            cursor = self._skip_unkept_windows(mint, self.store.get_cursor(mint), now)
            log.debug("Processing mint=%s now=%d cursor=%d", mint, now, cursor)

            while cursor + self.interval_seconds <= now:
                candle = self._build_window(mint, cursor)
                if candle is not None:
                    self.store.append(mint, candle)
                else:
                    log.warning(
                        "No prices for mint=%s window %s - %s",
                        mint,
                        utc_iso(cursor),
                        utc_iso(cursor + self.interval_seconds),
                    )

                cursor += self.interval_seconds
                self.store.advance(mint, cursor)

            return list(self.store.get_history(mint))

    def _skip_unkept_windows(self, mint: str, cursor: int, now: int) -> int:
        """
        Windows older than the newest max_history would be trimmed right after
        being sampled; jump the cursor past them (staying on the interval grid).
        """
        pending = (now - cursor) // self.interval_seconds
        excess = pending - self.store.max_history
        if excess <= 0:
            return cursor

        cursor += excess * self.interval_seconds
        self.store.advance(mint, cursor)
        log.info("Skipped %d windows for mint=%s, resuming at %s", excess, mint, utc_iso(cursor))
        return cursor

    def _build_window(self, mint: str, start: int) -> Candle | None:
        """Sample one window. Stops at the first failed fetch and keeps what it has."""
        candle: Candle | None = None

        for _ in range(start, start + self.interval_seconds, self.step_seconds):
            try:
                price = self.sampler(mint)
            except Exception as e:
                log.error("Price fetch failed for mint=%s error=%s", mint, repr(e))
                break

            if candle is None:
                candle = Candle(time=start, open=price, high=price, low=price, close=price)
            else:
                candle.update(price)

        return candle
