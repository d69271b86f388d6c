"""
Depth Monitor (API v1)

Prints best ask / best bid base volume for every pair of EUR, GBP, USD, CHF
and PLN once per second.

No API keys required. Press Ctrl+C to stop.
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from walutomat_client import create_v1_client
from walutomat_client.utils import currency_pairs

CURRENCIES = ["EUR", "GBP", "USD", "CHF", "PLN"]
HEADER_EVERY = 20


def format_depth(orderbook) -> str:
    if not orderbook.asks or not orderbook.bids:
        return "n/a"
    return f"{orderbook.asks[0].base_volume}/{orderbook.bids[0].base_volume}"


async def main():
    pairs = currency_pairs(CURRENCIES)

    async with create_v1_client() as client:
        line = 0
        while True:
            if line == 0:
                print(" ".join(pairs))
            line = (line + 1) % HEADER_EVERY

            depths = []
            for pair in pairs:
                orderbook = await client.get_orderbook(pair)
                depths.append(format_depth(orderbook))
            print(" " + "  ".join(depths))
            await asyncio.sleep(1)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
