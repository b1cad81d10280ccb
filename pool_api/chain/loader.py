from pool_api.chain.base import ProgramClient
from pool_api.chain.solana_rpc import SolanaProgramClient
from pool_api.config import get_settings


def get_program_client() -> ProgramClient:
    """
    Client loader / factory.

    Reads chain config and returns a client bound to the service wallet.
    This is the single place that knows about concrete clients.
    """
    settings = get_settings()

    return SolanaProgramClient(
        rpc_url=settings.rpc_url,
        secret_key=settings.wallet_secret_key,
        program_id=settings.program_id,
        commitment=settings.commitment,
        timeout_s=settings.rpc_timeout_seconds,
    )
