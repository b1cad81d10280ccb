from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from solders.instruction import Instruction
from solders.pubkey import Pubkey


class ProgramClient(ABC):
    """
    Chain client contract (interface).

    Any client must implement:
    - wallet: the signing wallet's public key
    - program_id: the pool program address
    - send_instruction(): sign + submit a transaction holding one instruction
    - get_account_data(): raw account bytes (None if the account is missing)
    """

    @property
    @abstractmethod
    def wallet(self) -> Pubkey:
        raise NotImplementedError

    @property
    @abstractmethod
    def program_id(self) -> Pubkey:
        raise NotImplementedError

    @abstractmethod
    def send_instruction(self, ix: Instruction) -> str:
        """Returns the transaction signature (base58)."""
        raise NotImplementedError

    @abstractmethod
    def get_account_data(self, address: Pubkey) -> Optional[bytes]:
        raise NotImplementedError

    def close(self) -> None:
        pass
