import argparse

from solders.pubkey import Pubkey

from pool_api.program.pda import (
    curve_config_address,
    pool_address,
    sol_vault_address,
    token_account_address,
)


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the program addresses of a token pool")
    parser.add_argument("--program-id", required=True, help="Pool program id (base58)")
    parser.add_argument("--mint", required=True, help="Token mint (base58)")
    parser.add_argument("--user", default="", help="Optional user wallet, prints its token account")
    args = parser.parse_args()

    program_id = Pubkey.from_string(args.program_id)
    mint = Pubkey.from_string(args.mint)

    config, config_bump = curve_config_address(program_id)
    pool, pool_bump = pool_address(program_id, mint)
    vault, vault_bump = sol_vault_address(program_id, mint)

    print(f"dexConfigurationAccount: {config} (bump {config_bump})")
    print(f"pool:                    {pool} (bump {pool_bump})")
    print(f"poolSolVault:            {vault} (bump {vault_bump})")
    print(f"poolTokenAccount:        {token_account_address(pool, mint)}")

    if args.user:
        user = Pubkey.from_string(args.user)
        print(f"userTokenAccount:        {token_account_address(user, mint)}")


if __name__ == "__main__":
    main()
