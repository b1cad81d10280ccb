from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from solders.pubkey import Pubkey


@dataclass(frozen=True)
class LiquidityPoolState:
    """
    On-chain LiquidityPool account, decoded.

    Reserves are raw base units (lamports / token base units).
    """
    creator: Pubkey
    token: Pubkey
    total_supply: int
    reserve_token: int
    reserve_sol: int
    bump: int

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> "LiquidityPoolState":
        return cls(
            creator=fields["creator"],
            token=fields["token"],
            total_supply=fields["total_supply"],
            reserve_token=fields["reserve_token"],
            reserve_sol=fields["reserve_sol"],
            bump=fields["bump"],
        )


@dataclass(frozen=True)
class PoolSnapshot:
    """
    Price view of a pool.

    reserve_sol: lamports held by the pool
    reserve_token: token reserve in whole tokens (floored)
    price: reserve_sol / reserve_token
    """
    reserve_sol: int
    reserve_token: int
    price: float

    def to_dict(self) -> dict:
        return {
            "reserveSol": self.reserve_sol,
            "reserveToken": self.reserve_token,
            "price": self.price,
        }
