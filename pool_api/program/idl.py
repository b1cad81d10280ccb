from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

# PDA seeds used by the pool program
CURVE_SEED = b"CurveConfiguration"
POOL_SEED_PREFIX = b"liquidity_pool"
LIQUIDITY_SEED = b"LiqudityProvider"  # sic, matches the deployed program
SOL_VAULT_PREFIX = b"liquidity_sol_vault"


@dataclass(frozen=True)
class AccountRole:
    """One account slot of an instruction, in interface order."""
    name: str
    writable: bool = False
    signer: bool = False


@dataclass(frozen=True)
class InstructionDef:
    """
    Instruction as published by the program interface.

    args: (name, borsh type) pairs, encoded in this order after the discriminator
    accounts: account slots, passed to the program in this order
    """
    name: str
    args: Tuple[Tuple[str, str], ...]
    accounts: Tuple[AccountRole, ...]


_SYSTEM_ACCOUNTS = (
    AccountRole("rent"),
    AccountRole("system_program"),
    AccountRole("token_program"),
    AccountRole("associated_token_program"),
)

_LIQUIDITY_ACCOUNTS = (
    AccountRole("pool", writable=True),
    AccountRole("token_mint", writable=True),
    AccountRole("pool_token_account", writable=True),
    AccountRole("user_token_account", writable=True),
    AccountRole("pool_sol_vault", writable=True),
    AccountRole("user", writable=True, signer=True),
) + _SYSTEM_ACCOUNTS

_SWAP_ACCOUNTS = (
    AccountRole("dex_configuration_account", writable=True),
    AccountRole("pool", writable=True),
    AccountRole("token_mint", writable=True),
    AccountRole("pool_token_account", writable=True),
    AccountRole("pool_sol_vault", writable=True),
    AccountRole("user_token_account", writable=True),
    AccountRole("user", writable=True, signer=True),
) + _SYSTEM_ACCOUNTS


INSTRUCTIONS: Dict[str, InstructionDef] = {
    "initialize": InstructionDef(
        name="initialize",
        args=(("fee", "f64"),),
        accounts=(
            AccountRole("dex_configuration_account", writable=True),
            AccountRole("admin", writable=True, signer=True),
            AccountRole("rent"),
            AccountRole("system_program"),
        ),
    ),
    "create_pool": InstructionDef(
        name="create_pool",
        args=(),
        accounts=(
            AccountRole("pool", writable=True),
            AccountRole("token_mint"),
            AccountRole("pool_token_account", writable=True),
            AccountRole("payer", writable=True, signer=True),
            AccountRole("token_program"),
            AccountRole("associated_token_program"),
            AccountRole("rent"),
            AccountRole("system_program"),
        ),
    ),
    "add_liquidity": InstructionDef(
        name="add_liquidity",
        args=(),
        accounts=_LIQUIDITY_ACCOUNTS,
    ),
    "remove_liquidity": InstructionDef(
        name="remove_liquidity",
        args=(("bump", "u8"),),
        accounts=_LIQUIDITY_ACCOUNTS,
    ),
    "buy": InstructionDef(
        name="buy",
        args=(("amount", "u64"),),
        accounts=_SWAP_ACCOUNTS,
    ),
    "sell": InstructionDef(
        name="sell",
        args=(("amount", "u64"), ("bump", "u8")),
        accounts=_SWAP_ACCOUNTS,
    ),
}


# Account layouts: (field, type) after the 8-byte discriminator
ACCOUNT_LAYOUTS: Dict[str, List[Tuple[str, str]]] = {
    "LiquidityPool": [
        ("creator", "pubkey"),
        ("token", "pubkey"),
        ("total_supply", "u64"),
        ("reserve_token", "u64"),
        ("reserve_sol", "u64"),
        ("bump", "u8"),
    ],
    "CurveConfiguration": [
        ("fees", "f64"),
    ],
}
