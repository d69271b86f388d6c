#!/usr/bin/env python3
"""
Account Balance Example (API v2)

Reads the API key from the WT_KEY environment variable (or a .env file)
and prints the balance of every currency.
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from walutomat_client import WalutomatV2Client


async def main():
    async with WalutomatV2Client.from_env() as client:
        envelope = await client.account_balance()

    if not envelope.success:
        for message in envelope.error_messages():
            print(f"❌ {message}")
        return 1

    for balance in envelope.result:
        print(f"{balance.currency} {balance.balance_total} (blocked {balance.balance_reserved})")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
