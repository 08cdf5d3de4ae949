#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.horizon import BatchPolicy, HorizonClient, Network
from laakhay.horizon.core import Order
from laakhay.horizon.models import Payment, SetOptions


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List recent Stellar operations via Horizon REST")
    p.add_argument("account_id", nargs="?", default=None)
    p.add_argument("limit", nargs="?", type=int, default=10)
    p.add_argument("network", nargs="?", default="PUBLIC", choices=["PUBLIC", "TESTNET"])
    return p.parse_args()


def describe(detail) -> str:
    if isinstance(detail, Payment):
        return f"{detail.amount} {detail.asset} {detail.from_account[:6]} -> {detail.to[:6]}"
    if isinstance(detail, SetOptions):
        return f"signer {detail.signer_key[:6]} weight={detail.signer_weight}"
    return ""


async def main() -> None:
    args = parse_args()

    async with HorizonClient(network=Network[args.network]) as client:
        if args.account_id:
            batch = await client.account_operations(
                args.account_id, limit=args.limit, order=Order.DESC, policy=BatchPolicy.SKIP_INVALID
            )
        else:
            batch = await client.operations(
                limit=args.limit, order=Order.DESC, policy=BatchPolicy.SKIP_INVALID
            )

    print(f"{'ID':20} | {'Type':22} | Detail")
    print("-" * 83)
    for op in batch:
        label = op.type if op.is_known else f"unknown({op.type_i})"
        print(f"{op.id or '':20} | {label or '':22} | {describe(op.detail)}")
    for error in batch.errors:
        print(f"skipped record {error.index}: {error}")


if __name__ == "__main__":
    asyncio.run(main())
