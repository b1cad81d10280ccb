from __future__ import annotations

import logging
from typing import Optional

from solana.rpc.api import Client
from solana.rpc.commitment import Commitment
from solana.rpc.types import TxOpts
from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.message import Message
from solders.pubkey import Pubkey
from solders.transaction import Transaction

from pool_api.chain.base import ProgramClient

log = logging.getLogger("solana_rpc")


class SolanaProgramClient(ProgramClient):
    """
    Solana JSON-RPC client bound to one wallet and one program.

    Writes:
    - one instruction per transaction, fee payer + only signer is the wallet
    - waits for the configured commitment before returning

    Reads:
    - raw account bytes at the configured commitment
    """

    def __init__(
        self,
        rpc_url: str,
        secret_key: bytes,
        program_id: str,
        commitment: str = "confirmed",
        timeout_s: float = 30.0,
    ) -> None:
        self._keypair = Keypair.from_bytes(secret_key)
        self._program_id = Pubkey.from_string(program_id)
        self._commitment = Commitment(commitment)
        self._client = Client(rpc_url, commitment=self._commitment, timeout=timeout_s)
        self.rpc_url = rpc_url

    @property
    def wallet(self) -> Pubkey:
        return self._keypair.pubkey()

    @property
    def program_id(self) -> Pubkey:
        return self._program_id

    def send_instruction(self, ix: Instruction) -> str:
        blockhash = self._client.get_latest_blockhash(commitment=self._commitment).value.blockhash

        msg = Message.new_with_blockhash([ix], self._keypair.pubkey(), blockhash)
        tx = Transaction([self._keypair], msg, blockhash)

        resp = self._client.send_transaction(
            tx,
            opts=TxOpts(skip_confirmation=False, preflight_commitment=self._commitment),
        )
        signature = str(resp.value)
        log.info("Transaction confirmed signature=%s", signature)
        return signature

    def get_account_data(self, address: Pubkey) -> Optional[bytes]:
        resp = self._client.get_account_info(address, commitment=self._commitment)
        if resp.value is None:
            return None
        return bytes(resp.value.data)

    def close(self) -> None:
        # The sync Client has no close(); its httpx session lives on the HTTP provider.
        self._client._provider.session.close()
