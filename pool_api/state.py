from functools import lru_cache

from pool_api.candles.builder import CandleBuilder
from pool_api.candles.store import CandleStore
from pool_api.chain.loader import get_program_client
from pool_api.config import get_settings
from pool_api.services.pool_service import PoolService

# Process-wide singletons for the running API.
# Built on first use so importing the app does not need chain config.


@lru_cache(maxsize=1)
def get_pool_service() -> PoolService:
    settings = get_settings()
    return PoolService(
        get_program_client(),
        token_decimals=settings.token_decimals,
        default_fee=settings.dex_fee,
    )


@lru_cache(maxsize=1)
def get_candle_store() -> CandleStore:
    return CandleStore(max_history=get_settings().candle_max_history)


@lru_cache(maxsize=1)
def get_candle_builder() -> CandleBuilder:
    settings = get_settings()
    return CandleBuilder(
        get_candle_store(),
        sampler=get_pool_service().pool_price,
        interval_seconds=settings.candle_interval_seconds,
        step_seconds=settings.candle_sample_step_seconds,
        lookback_seconds=settings.candle_lookback_seconds,
    )
