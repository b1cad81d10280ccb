from __future__ import annotations

import logging
from typing import Callable, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from pool_api.api.schemas import (
    CreatePoolRequest,
    InitializeRequest,
    LiquidityRequest,
    RemoveLiquidityRequest,
    SellRequest,
    SwapRequest,
)
from pool_api.services.pool_service import PoolService
from pool_api.state import get_pool_service

router = APIRouter()
log = logging.getLogger("pool_routes")


def run_transaction(label: str, message: str, submit: Callable[[], str]) -> JSONResponse:
    """
    Single failure boundary for a transaction route:
    any error -> 500 {"error": <message>}.
    """
    try:
        signature = submit()
    except Exception as e:
        log.exception("%s failed", label)
        return JSONResponse(status_code=500, content={"error": str(e)})

    return JSONResponse(status_code=200, content={"message": message, "signature": signature})


@router.post("/initialize")
def initialize(
    req: Optional[InitializeRequest] = Body(None),
    service: PoolService = Depends(get_pool_service),
):
    """Create the global dex configuration account (admin = service wallet)."""
    fee = req.fee if req is not None else None
    return run_transaction("initialize", "Initialization successful", lambda: service.initialize(fee))


@router.post("/create-pool")
def create_pool(req: CreatePoolRequest, service: PoolService = Depends(get_pool_service)):
    return run_transaction(
        "create-pool",
        "Pool created successfully",
        lambda: service.create_pool(req.account_params()),
    )


@router.post("/add-liquidity")
def add_liquidity(req: LiquidityRequest, service: PoolService = Depends(get_pool_service)):
    return run_transaction(
        "add-liquidity",
        "Liquidity added successfully",
        lambda: service.add_liquidity(req.account_params()),
    )


@router.post("/remove-liquidity")
def remove_liquidity(req: RemoveLiquidityRequest, service: PoolService = Depends(get_pool_service)):
    return run_transaction(
        "remove-liquidity",
        "Liquidity removed successfully",
        lambda: service.remove_liquidity(req.account_params(), bump=req.bump),
    )


@router.post("/buy")
def buy(req: SwapRequest, service: PoolService = Depends(get_pool_service)):
    return run_transaction(
        "buy",
        "Buy transaction successful",
        lambda: service.buy(req.account_params(), req.amount),
    )


@router.post("/sell")
def sell(req: SellRequest, service: PoolService = Depends(get_pool_service)):
    return run_transaction(
        "sell",
        "Sell transaction successful",
        lambda: service.sell(req.account_params(), req.amount, bump=req.bump),
    )
