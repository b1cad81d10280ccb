from __future__ import annotations

import random
import time

from pool_api.candles.builder import CandleBuilder
from pool_api.candles.store import CandleStore


def run(mint: str = "SimMint1111111111111111111111111111111111", minutes: int = 5) -> None:
    """
    Builds candles for `minutes` of simulated time from a fake price feed.

    - The sampler is a random walk (moves up/down a bit on each sample).
    - No RPC node is needed; the builder only sees the sampler.
    - We call generate() once per simulated 30s window and print new candles.
    """
    store = CandleStore(max_history=500)

    price = 0.000028

    def sampler(_mint: str) -> float:
        nonlocal price
        price *= 1 + random.uniform(-0.01, 0.01)
        return price

    builder = CandleBuilder(store, sampler=sampler)

    now = int(time.time())
    end = now + minutes * 60
    seen = 0

    print(f"Simulating candles for {mint} over {minutes} minutes...\n")

    while now <= end:
        history = builder.generate(mint, now=now)
        for c in history[seen:]:
            print(f"[CANDLE] t={c.time} O={c.open:.10f} H={c.high:.10f} L={c.low:.10f} C={c.close:.10f}")
        seen = len(history)
        now += builder.interval_seconds

    print("\nDone.")
    print(f"Candles stored: {len(store.get_history(mint))}")


if __name__ == "__main__":
    run()
