#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.horizon import HorizonClient, Network


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch a Stellar account via Horizon REST")
    p.add_argument("account_id")
    p.add_argument("network", nargs="?", default="PUBLIC", choices=["PUBLIC", "TESTNET"])
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with HorizonClient(network=Network[args.network]) as client:
        account = await client.account(args.account_id)

    print("=" * 65)
    print(f"Account    : {account.account_id}")
    print(f"Sequence   : {account.sequence}")
    print(f"Thresholds : {account.thresholds.low_threshold}/"
          f"{account.thresholds.med_threshold}/{account.thresholds.high_threshold}")
    print(f"Flags      : required={account.flags.auth_required} revocable={account.flags.auth_revocable}")
    print("=" * 65)
    print(f"{'Asset':60} | {'Balance':>20}")
    print("-" * 83)
    for line in account.balances:
        print(f"{str(line.asset):60} | {line.balance:>20}")
    print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
