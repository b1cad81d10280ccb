from __future__ import annotations

import asyncio
import logging
import traceback

from pool_api.candles.builder import CandleBuilder


async def candle_refresh_loop(mint: str, builder: CandleBuilder) -> None:
    """
    Background loop:
    periodically catch up candles for one mint so history builds up
    even when nobody is calling /candlestickdata.
    """
    log = logging.getLogger("candle_refresher")

    while True:
        try:
            # Sampling does blocking RPC calls; keep them off the event loop.
            candles = await asyncio.to_thread(builder.generate, mint)
            log.info("Refreshed candles mint=%s count=%d", mint, len(candles))
        except Exception as e:
            # Keep loop alive even if the RPC node temporarily fails, but log the error.
            log.error("Candle refresh failed for mint=%s error=%s", mint, repr(e))
            log.error(traceback.format_exc())

        # One pass per candle window.
        await asyncio.sleep(builder.interval_seconds)
