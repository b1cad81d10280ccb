from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

U64_MAX = 2**64 - 1


class CamelModel(BaseModel):
    """Request bodies use camelCase keys (tokenMint, poolSolVault, ...)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def account_params(self) -> dict[str, Optional[str]]:
        """snake_case account roles -> base58 address (None = derive)."""
        return {
            k: v
            for k, v in self.model_dump().items()
            if k not in ("amount", "bump", "fee")
        }


class InitializeRequest(CamelModel):
    fee: Optional[float] = Field(None, ge=0, description="Dex fee; defaults to DEX_FEE")


class CreatePoolRequest(CamelModel):
    token_mint: Optional[str] = None
    pool: Optional[str] = None
    pool_token_account: Optional[str] = None
    payer: Optional[str] = None


class LiquidityRequest(CamelModel):
    token_mint: Optional[str] = None
    pool: Optional[str] = None
    pool_token_account: Optional[str] = None
    user_token_account: Optional[str] = None
    pool_sol_vault: Optional[str] = None
    user: Optional[str] = None


class RemoveLiquidityRequest(LiquidityRequest):
    bump: Optional[int] = Field(None, ge=0, le=255, description="SOL vault bump; derived if omitted")


class SwapRequest(CamelModel):
    dex_configuration_account: Optional[str] = None
    token_mint: Optional[str] = None
    pool: Optional[str] = None
    pool_token_account: Optional[str] = None
    pool_sol_vault: Optional[str] = None
    user_token_account: Optional[str] = None
    user: Optional[str] = None
    amount: int = Field(..., ge=0, le=U64_MAX, description="Amount in base units")


class SellRequest(SwapRequest):
    bump: Optional[int] = Field(None, ge=0, le=255, description="SOL vault bump; derived if omitted")
