from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from solders.instruction import Instruction
from solders.pubkey import Pubkey

from pool_api.chain.base import ProgramClient
from pool_api.models.pool import LiquidityPoolState, PoolSnapshot
from pool_api.program import instructions
from pool_api.program.codec import decode_account
from pool_api.program.pda import (
    curve_config_address,
    pool_address,
    sol_vault_address,
    token_account_address,
)

log = logging.getLogger("pool_service")


def parse_pubkey(value: str, field: str) -> Pubkey:
    try:
        return Pubkey.from_string(value)
    except ValueError as e:
        raise ValueError(f"Invalid address for {field}: {value!r}") from e


class PoolService:
    """
    Forwards pool operations to the on-chain program.

    Every write resolves the instruction's accounts (caller-supplied addresses
    win, the rest are derived from the token mint and the service wallet),
    builds exactly one instruction and submits it through the client.
    """

    def __init__(self, client: ProgramClient, token_decimals: int = 9, default_fee: float = 0.01):
        self.client = client
        self.token_decimals = token_decimals
        self.default_fee = default_fee

    @property
    def program_id(self) -> Pubkey:
        return self.client.program_id

    # -------------------------
    # Account resolution
    # -------------------------
    def resolve_accounts(self, params: Mapping[str, Optional[str]]) -> Dict[str, Pubkey]:
        """
        params: snake_case role -> base58 address (None/missing = derive)

        token_mint has no derivation and is required.
        """
        raw_mint = params.get("token_mint")
        if not raw_mint:
            raise ValueError("tokenMint is required")
        mint = parse_pubkey(raw_mint, "tokenMint")

        def given(role: str, derive) -> Pubkey:
            raw = params.get(role)
            if not raw:
                return derive()
            return parse_pubkey(raw, role)

        wallet = self.client.wallet
        user = given("user", lambda: wallet)
        payer = given("payer", lambda: wallet)
        pool = given("pool", lambda: pool_address(self.program_id, mint)[0])

        return {
            "token_mint": mint,
            "user": user,
            "payer": payer,
            "admin": wallet,
            "pool": pool,
            "dex_configuration_account": given(
                "dex_configuration_account", lambda: curve_config_address(self.program_id)[0]
            ),
            "pool_sol_vault": given("pool_sol_vault", lambda: sol_vault_address(self.program_id, mint)[0]),
            "pool_token_account": given("pool_token_account", lambda: token_account_address(pool, mint)),
            "user_token_account": given("user_token_account", lambda: token_account_address(user, mint)),
        }

    def _vault_bump(self, accounts: Mapping[str, Pubkey], bump: Optional[int]) -> int:
        if bump is not None:
            return bump
        return sol_vault_address(self.program_id, accounts["token_mint"])[1]

    def _submit(self, ix: Instruction, label: str) -> str:
        log.info("Submitting %s program=%s", label, self.program_id)
        signature = self.client.send_instruction(ix)
        log.info("%s ok signature=%s", label, signature)
        return signature

    # -------------------------
    # Writes
    # -------------------------
    def initialize(self, fee: Optional[float] = None) -> str:
        fee = self.default_fee if fee is None else fee
        accounts = {
            "dex_configuration_account": curve_config_address(self.program_id)[0],
            "admin": self.client.wallet,
        }
        return self._submit(instructions.initialize(self.program_id, accounts, fee), "initialize")

    def create_pool(self, params: Mapping[str, Optional[str]]) -> str:
        accounts = self.resolve_accounts(params)
        return self._submit(instructions.create_pool(self.program_id, accounts), "create_pool")

    def add_liquidity(self, params: Mapping[str, Optional[str]]) -> str:
        accounts = self.resolve_accounts(params)
        return self._submit(instructions.add_liquidity(self.program_id, accounts), "add_liquidity")

    def remove_liquidity(self, params: Mapping[str, Optional[str]], bump: Optional[int] = None) -> str:
        accounts = self.resolve_accounts(params)
        ix = instructions.remove_liquidity(self.program_id, accounts, self._vault_bump(accounts, bump))
        return self._submit(ix, "remove_liquidity")

    def buy(self, params: Mapping[str, Optional[str]], amount: int) -> str:
        accounts = self.resolve_accounts(params)
        return self._submit(instructions.buy(self.program_id, accounts, amount), "buy")

    def sell(self, params: Mapping[str, Optional[str]], amount: int, bump: Optional[int] = None) -> str:
        accounts = self.resolve_accounts(params)
        ix = instructions.sell(self.program_id, accounts, amount, self._vault_bump(accounts, bump))
        return self._submit(ix, "sell")

    # -------------------------
    # Reads
    # -------------------------
    def fetch_pool_state(self, token_mint: str) -> LiquidityPoolState:
        mint = parse_pubkey(token_mint, "tokenMint")
        pool, _ = pool_address(self.program_id, mint)

        data = self.client.get_account_data(pool)
        if not data:
            raise LookupError(f"Account does not exist or has no data {pool}")

        return LiquidityPoolState.from_fields(decode_account("LiquidityPool", data))

    def fetch_pool_data(self, token_mint: str) -> PoolSnapshot:
        """
        Price = lamports per whole token.
        The token reserve is floored to whole tokens before dividing.
        """
        state = self.fetch_pool_state(token_mint)

        reserve_token = state.reserve_token // (10 ** self.token_decimals)
        if reserve_token == 0:
            raise ValueError(f"Pool for {token_mint} has no token reserve")

        snapshot = PoolSnapshot(
            reserve_sol=state.reserve_sol,
            reserve_token=reserve_token,
            price=state.reserve_sol / reserve_token,
        )
        log.debug("Pool data mint=%s price=%s", token_mint, snapshot.price)
        return snapshot

    def pool_price(self, token_mint: str) -> float:
        return self.fetch_pool_data(token_mint).price
