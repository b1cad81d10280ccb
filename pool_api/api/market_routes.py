from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse

from pool_api.candles.builder import CandleBuilder
from pool_api.services.pool_service import PoolService
from pool_api.state import get_candle_builder, get_pool_service

router = APIRouter()
log = logging.getLogger("market_routes")


@router.get("/candlestickdata/{tokenmint}")
def candlestick_data(
    tokenmint: str = Path(..., description="Token mint address"),
    builder: CandleBuilder = Depends(get_candle_builder),
):
    """
    Candle history for a mint:
    - first call starts tracking the mint (lookback window)
    - every call catches up any fully elapsed windows before returning
    """
    try:
        candles = builder.generate(tokenmint)
    except Exception as e:
        log.exception("candlestickdata failed mint=%s", tokenmint)
        return JSONResponse(status_code=500, content={"error": str(e)})

    return {"data": [c.to_dict() for c in candles]}


@router.get("/poolData/{tokenmint}")
def pool_data(
    tokenmint: str = Path(..., description="Token mint address"),
    service: PoolService = Depends(get_pool_service),
):
    """Current reserves and spot price of the mint's pool."""
    try:
        snapshot = service.fetch_pool_data(tokenmint)
    except Exception as e:
        log.exception("poolData failed mint=%s", tokenmint)
        return JSONResponse(status_code=500, content={"error": str(e)})

    return snapshot.to_dict()
