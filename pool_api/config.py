# pool_api/config.py
import json
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

# Loads variables from a local .env file into environment variables (dev only).
load_dotenv()


@dataclass(frozen=True)
class Settings:
    # App config
    app_env: str
    log_level: str
    port: int

    # Chain config
    rpc_url: str
    commitment: str
    rpc_timeout_seconds: float
    wallet_secret_key: bytes
    program_id: str
    dex_fee: float
    token_decimals: int

    # Candle config
    candle_interval_seconds: int
    candle_sample_step_seconds: int
    candle_lookback_seconds: int
    candle_max_history: int
    candle_tracked_mints: list[str]


def _split_csv(raw: str) -> list[str]:
    return [s.strip() for s in raw.split(",") if s.strip()]


def get_cors_origins() -> list[str]:
    """
    CORS_ORIGINS is read apart from Settings: the middleware is wired when the
    app module is imported, before chain config is required.
    """
    return _split_csv(os.getenv("CORS_ORIGINS", "*"))


def _parse_secret_key(raw: str) -> bytes:
    """
    WALLET_PRIVATE_KEY is the JSON byte array written by `solana-keygen`,
    e.g. [12, 201, ...] (64 numbers).
    """
    try:
        values = json.loads(raw)
    except json.JSONDecodeError as e:
        raise RuntimeError(f"WALLET_PRIVATE_KEY is not a JSON array: {e}") from e

    if not isinstance(values, list) or len(values) != 64:
        raise RuntimeError("WALLET_PRIVATE_KEY must be a JSON array of 64 bytes")

    try:
        return bytes(values)
    except (TypeError, ValueError) as e:
        raise RuntimeError(f"WALLET_PRIVATE_KEY has a non-byte value: {e}") from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Reads env vars and returns a Settings object.
    """
    secret = os.getenv("WALLET_PRIVATE_KEY", "").strip()
    if not secret:
        raise RuntimeError("WALLET_PRIVATE_KEY is missing. Add it to .env")

    program_id = os.getenv("PROGRAM_ID", "").strip()
    if not program_id:
        raise RuntimeError("PROGRAM_ID is missing. Add it to .env")

    interval = int(os.getenv("CANDLE_INTERVAL_SECONDS", "30"))
    step = int(os.getenv("CANDLE_SAMPLE_STEP_SECONDS", "3"))
    if interval <= 0 or step <= 0:
        raise RuntimeError("CANDLE_INTERVAL_SECONDS and CANDLE_SAMPLE_STEP_SECONDS must be positive")

    return Settings(
        app_env=os.getenv("APP_ENV", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        port=int(os.getenv("PORT", "3000")),
        rpc_url=os.getenv("SOLANA_RPC_URL", "https://api.devnet.solana.com"),
        commitment=os.getenv("SOLANA_COMMITMENT", "confirmed"),
        rpc_timeout_seconds=float(os.getenv("SOLANA_TIMEOUT_SECONDS", "30")),
        wallet_secret_key=_parse_secret_key(secret),
        program_id=program_id,
        dex_fee=float(os.getenv("DEX_FEE", "0.01")),
        token_decimals=int(os.getenv("TOKEN_DECIMALS", "9")),
        candle_interval_seconds=interval,
        candle_sample_step_seconds=step,
        candle_lookback_seconds=int(os.getenv("CANDLE_LOOKBACK_SECONDS", "60")),
        candle_max_history=int(os.getenv("CANDLE_MAX_HISTORY", "500")),
        candle_tracked_mints=_split_csv(os.getenv("CANDLE_TRACKED_MINTS", "")),
    )
