import unittest

from solders.pubkey import Pubkey
from spl.token.instructions import get_associated_token_address

from pool_api.program.pda import (
    curve_config_address,
    pool_address,
    sol_vault_address,
    token_account_address,
)

from fakes import MINT, OTHER, PROGRAM_ID


class TestProgramAddresses(unittest.TestCase):
    def test_curve_config_uses_fixed_seed(self):
        expected = Pubkey.find_program_address([b"CurveConfiguration"], PROGRAM_ID)
        self.assertEqual(curve_config_address(PROGRAM_ID), expected)

    def test_pool_and_vault_are_seeded_by_mint(self):
        pool, _ = pool_address(PROGRAM_ID, MINT)
        vault, _ = sol_vault_address(PROGRAM_ID, MINT)

        self.assertEqual(
            pool,
            Pubkey.find_program_address([b"liquidity_pool", bytes(MINT)], PROGRAM_ID)[0],
        )
        self.assertEqual(
            vault,
            Pubkey.find_program_address([b"liquidity_sol_vault", bytes(MINT)], PROGRAM_ID)[0],
        )
        self.assertNotEqual(pool, vault)
        self.assertNotEqual(pool, pool_address(PROGRAM_ID, OTHER)[0])

    def test_derivation_is_deterministic(self):
        self.assertEqual(pool_address(PROGRAM_ID, MINT), pool_address(PROGRAM_ID, MINT))

    def test_pool_token_account_allows_pda_owner(self):
        pool, _ = pool_address(PROGRAM_ID, MINT)
        self.assertFalse(pool.is_on_curve())
        self.assertEqual(token_account_address(pool, MINT), get_associated_token_address(pool, MINT))


if __name__ == "__main__":
    unittest.main()
