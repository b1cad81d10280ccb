from __future__ import annotations

from typing import Tuple

from solders.pubkey import Pubkey
from spl.token.instructions import get_associated_token_address

from pool_api.program.idl import CURVE_SEED, POOL_SEED_PREFIX, SOL_VAULT_PREFIX


def curve_config_address(program_id: Pubkey) -> Tuple[Pubkey, int]:
    """Global dex configuration account."""
    return Pubkey.find_program_address([CURVE_SEED], program_id)


def pool_address(program_id: Pubkey, mint: Pubkey) -> Tuple[Pubkey, int]:
    return Pubkey.find_program_address([POOL_SEED_PREFIX, bytes(mint)], program_id)


def sol_vault_address(program_id: Pubkey, mint: Pubkey) -> Tuple[Pubkey, int]:
    """
    Lamport vault of a pool.
    Its bump is the one remove_liquidity and sell expect.
    """
    return Pubkey.find_program_address([SOL_VAULT_PREFIX, bytes(mint)], program_id)


def token_account_address(owner: Pubkey, mint: Pubkey) -> Pubkey:
    """Associated token account; owner may be a PDA (off-curve)."""
    return get_associated_token_address(owner, mint)
