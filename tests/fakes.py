from __future__ import annotations

from typing import Dict, List, Optional

from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from pool_api.chain.base import ProgramClient
from pool_api.program.codec import encode_account
from pool_api.program.pda import pool_address

WALLET = Keypair.from_seed(bytes([1] * 32)).pubkey()
PROGRAM_ID = Keypair.from_seed(bytes([2] * 32)).pubkey()
MINT = Keypair.from_seed(bytes([3] * 32)).pubkey()
OTHER = Keypair.from_seed(bytes([4] * 32)).pubkey()


class FakeProgramClient(ProgramClient):
    """Records submitted instructions and serves account bytes from a dict."""

    def __init__(self, fail_with: Optional[Exception] = None):
        self.sent: List[Instruction] = []
        self.accounts: Dict[Pubkey, bytes] = {}
        self.fail_with = fail_with

    @property
    def wallet(self) -> Pubkey:
        return WALLET

    @property
    def program_id(self) -> Pubkey:
        return PROGRAM_ID

    def send_instruction(self, ix: Instruction) -> str:
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append(ix)
        return f"sig{len(self.sent)}"

    def get_account_data(self, address: Pubkey) -> Optional[bytes]:
        return self.accounts.get(address)

    def put_pool(self, mint: Pubkey, reserve_sol: int, reserve_token: int) -> Pubkey:
        pool, bump = pool_address(PROGRAM_ID, mint)
        self.accounts[pool] = encode_account(
            "LiquidityPool",
            {
                "creator": WALLET,
                "token": mint,
                "total_supply": 1_000_000_000 * 10**9,
                "reserve_token": reserve_token,
                "reserve_sol": reserve_sol,
                "bump": bump,
            },
        ) + bytes(16)
        return pool
