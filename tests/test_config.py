import json
import os
import unittest
from unittest import mock

from pool_api.config import get_cors_origins, get_settings

SECRET = json.dumps(list(range(64)))
PROGRAM = "11111111111111111111111111111111"


class TestSettings(unittest.TestCase):
    def setUp(self):
        get_settings.cache_clear()

    def tearDown(self):
        get_settings.cache_clear()

    def test_defaults(self):
        env = {"WALLET_PRIVATE_KEY": SECRET, "PROGRAM_ID": PROGRAM}
        with mock.patch.dict(os.environ, env, clear=True):
            settings = get_settings()

        self.assertEqual(settings.wallet_secret_key, bytes(range(64)))
        self.assertEqual(settings.rpc_url, "https://api.devnet.solana.com")
        self.assertEqual(settings.commitment, "confirmed")
        self.assertEqual(settings.dex_fee, 0.01)
        self.assertEqual(settings.token_decimals, 9)
        self.assertEqual(settings.candle_interval_seconds, 30)
        self.assertEqual(settings.candle_sample_step_seconds, 3)
        self.assertEqual(settings.candle_lookback_seconds, 60)
        self.assertEqual(settings.candle_tracked_mints, [])
        self.assertEqual(settings.port, 3000)

    def test_tracked_mints_list(self):
        env = {
            "WALLET_PRIVATE_KEY": SECRET,
            "PROGRAM_ID": PROGRAM,
            "CANDLE_TRACKED_MINTS": " MintA, ,MintB ",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            self.assertEqual(get_settings().candle_tracked_mints, ["MintA", "MintB"])

    def test_missing_wallet(self):
        with mock.patch.dict(os.environ, {"PROGRAM_ID": PROGRAM}, clear=True):
            with self.assertRaises(RuntimeError) as ctx:
                get_settings()
        self.assertIn("WALLET_PRIVATE_KEY", str(ctx.exception))

    def test_missing_program_id(self):
        with mock.patch.dict(os.environ, {"WALLET_PRIVATE_KEY": SECRET}, clear=True):
            with self.assertRaises(RuntimeError) as ctx:
                get_settings()
        self.assertIn("PROGRAM_ID", str(ctx.exception))

    def test_bad_secret_key(self):
        env = {"WALLET_PRIVATE_KEY": "[1, 2, 3]", "PROGRAM_ID": PROGRAM}
        with mock.patch.dict(os.environ, env, clear=True):
            with self.assertRaises(RuntimeError):
                get_settings()


class TestCorsOrigins(unittest.TestCase):
    def test_default_allows_all(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(get_cors_origins(), ["*"])

    def test_origin_list(self):
        env = {"CORS_ORIGINS": "https://app.example, http://localhost:5173 ,"}
        with mock.patch.dict(os.environ, env, clear=True):
            self.assertEqual(get_cors_origins(), ["https://app.example", "http://localhost:5173"])


if __name__ == "__main__":
    unittest.main()
