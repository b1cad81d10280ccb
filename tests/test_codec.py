import hashlib
import struct
import unittest

from pool_api.program.codec import (
    account_discriminator,
    decode_account,
    encode_account,
    encode_instruction_data,
    instruction_discriminator,
)
from pool_api.program.idl import INSTRUCTIONS

from fakes import MINT, WALLET


class TestDiscriminators(unittest.TestCase):
    def test_instruction_discriminator_is_sha256_prefix(self):
        expected = hashlib.sha256(b"global:add_liquidity").digest()[:8]
        self.assertEqual(instruction_discriminator("add_liquidity"), expected)

    def test_account_discriminator_is_sha256_prefix(self):
        expected = hashlib.sha256(b"account:LiquidityPool").digest()[:8]
        self.assertEqual(account_discriminator("LiquidityPool"), expected)


class TestInstructionData(unittest.TestCase):
    def test_sell_packs_amount_then_bump(self):
        data = encode_instruction_data(INSTRUCTIONS["sell"], {"amount": 5_000_000, "bump": 254})

        self.assertEqual(len(data), 8 + 8 + 1)
        self.assertEqual(data[:8], instruction_discriminator("sell"))
        self.assertEqual(data[8:16], struct.pack("<Q", 5_000_000))
        self.assertEqual(data[16], 254)

    def test_initialize_fee_is_f64(self):
        data = encode_instruction_data(INSTRUCTIONS["initialize"], {"fee": 0.01})
        self.assertEqual(struct.unpack("<d", data[8:])[0], 0.01)

    def test_no_arg_instruction_is_only_discriminator(self):
        data = encode_instruction_data(INSTRUCTIONS["create_pool"], {})
        self.assertEqual(data, instruction_discriminator("create_pool"))

    def test_missing_argument(self):
        with self.assertRaises(ValueError) as ctx:
            encode_instruction_data(INSTRUCTIONS["buy"], {})
        self.assertIn("amount", str(ctx.exception))

    def test_out_of_range_argument(self):
        with self.assertRaises(ValueError):
            encode_instruction_data(INSTRUCTIONS["remove_liquidity"], {"bump": 256})
        with self.assertRaises(ValueError):
            encode_instruction_data(INSTRUCTIONS["buy"], {"amount": -1})


class TestAccountDecoding(unittest.TestCase):
    def _pool_bytes(self):
        return encode_account(
            "LiquidityPool",
            {
                "creator": WALLET,
                "token": MINT,
                "total_supply": 10**18,
                "reserve_token": 7 * 10**17,
                "reserve_sol": 30_000_000_000,
                "bump": 253,
            },
        )

    def test_decode_liquidity_pool_ignores_padding(self):
        fields = decode_account("LiquidityPool", self._pool_bytes() + bytes(32))

        self.assertEqual(fields["creator"], WALLET)
        self.assertEqual(fields["token"], MINT)
        self.assertEqual(fields["reserve_token"], 7 * 10**17)
        self.assertEqual(fields["reserve_sol"], 30_000_000_000)
        self.assertEqual(fields["bump"], 253)

    def test_wrong_discriminator(self):
        data = bytearray(self._pool_bytes())
        data[0] ^= 0xFF
        with self.assertRaises(ValueError):
            decode_account("LiquidityPool", bytes(data))

    def test_curve_configuration_is_not_a_pool(self):
        data = encode_account("CurveConfiguration", {"fees": 0.01})
        with self.assertRaises(ValueError):
            decode_account("LiquidityPool", data)

    def test_truncated_data(self):
        with self.assertRaises(ValueError):
            decode_account("LiquidityPool", self._pool_bytes()[:50])


if __name__ == "__main__":
    unittest.main()
