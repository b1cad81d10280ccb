import asyncio
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pool_api.api.market_routes import router as market_router
from pool_api.api.pool_routes import router as pool_router
from pool_api.config import get_cors_origins, get_settings
from pool_api.jobs.candle_refresher import candle_refresh_loop
from pool_api.state import get_candle_builder, get_candle_store, get_pool_service

app = FastAPI(title="Token Pool API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(pool_router)
app.include_router(market_router)

# Background refresh tasks, kept so they can be cancelled on shutdown
_refresh_tasks: list[asyncio.Task] = []


@app.on_event("startup")
async def _startup():
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Background candle refresh for mints listed in CANDLE_TRACKED_MINTS
    builder = get_candle_builder()
    for mint in settings.candle_tracked_mints:
        _refresh_tasks.append(asyncio.create_task(candle_refresh_loop(mint, builder)))


@app.on_event("shutdown")
async def _shutdown():
    for task in _refresh_tasks:
        task.cancel()
    await asyncio.gather(*_refresh_tasks, return_exceptions=True)
    _refresh_tasks.clear()

    if get_pool_service.cache_info().currsize:
        get_pool_service().client.close()


@app.get("/health")
def health():
    settings = get_settings()
    return {
        "status": "ok",
        "app_env": settings.app_env,
        "rpc_url": settings.rpc_url,
        "program_id": settings.program_id,
        "candle_mints": len(get_candle_store().mints()),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("pool_api.main:app", host="0.0.0.0", port=get_settings().port)
