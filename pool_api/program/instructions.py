from __future__ import annotations

from typing import Any, Mapping, Optional

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from solders.system_program import ID as SYSTEM_PROGRAM_ID
from solders.sysvar import RENT
from spl.token.constants import ASSOCIATED_TOKEN_PROGRAM_ID, TOKEN_PROGRAM_ID

from pool_api.program.codec import encode_instruction_data
from pool_api.program.idl import INSTRUCTIONS

# Accounts every caller gets for free
FIXED_ACCOUNTS = {
    "rent": RENT,
    "system_program": SYSTEM_PROGRAM_ID,
    "token_program": TOKEN_PROGRAM_ID,
    "associated_token_program": ASSOCIATED_TOKEN_PROGRAM_ID,
}


def build_instruction(
    program_id: Pubkey,
    name: str,
    accounts: Mapping[str, Pubkey],
    args: Optional[Mapping[str, Any]] = None,
) -> Instruction:
    """
    Build one program instruction.

    accounts: role name -> address; fixed program/sysvar roles may be omitted
    args: instruction args by name
    """
    ix_def = INSTRUCTIONS.get(name)
    if ix_def is None:
        raise ValueError(f"Unknown instruction '{name}'")

    metas: list[AccountMeta] = []
    for role in ix_def.accounts:
        address = accounts.get(role.name)
        if address is None:
            address = FIXED_ACCOUNTS.get(role.name)
        if address is None:
            raise ValueError(f"Missing account '{role.name}' for {name}")
        metas.append(AccountMeta(pubkey=address, is_signer=role.signer, is_writable=role.writable))

    data = encode_instruction_data(ix_def, args or {})
    return Instruction(program_id, data, metas)


def initialize(program_id: Pubkey, accounts: Mapping[str, Pubkey], fee: float) -> Instruction:
    return build_instruction(program_id, "initialize", accounts, {"fee": float(fee)})


def create_pool(program_id: Pubkey, accounts: Mapping[str, Pubkey]) -> Instruction:
    return build_instruction(program_id, "create_pool", accounts)


def add_liquidity(program_id: Pubkey, accounts: Mapping[str, Pubkey]) -> Instruction:
    return build_instruction(program_id, "add_liquidity", accounts)


def remove_liquidity(program_id: Pubkey, accounts: Mapping[str, Pubkey], bump: int) -> Instruction:
    return build_instruction(program_id, "remove_liquidity", accounts, {"bump": bump})


def buy(program_id: Pubkey, accounts: Mapping[str, Pubkey], amount: int) -> Instruction:
    return build_instruction(program_id, "buy", accounts, {"amount": amount})


def sell(program_id: Pubkey, accounts: Mapping[str, Pubkey], amount: int, bump: int) -> Instruction:
    return build_instruction(program_id, "sell", accounts, {"amount": amount, "bump": bump})
