"""
Order Book Example (API v1)

Fetches the EUR_PLN order book and prints ask/bid prices side by side.

No API keys required.
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path to import walutomat_client
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from walutomat_client import create_v1_client


async def main():
    async with create_v1_client() as client:
        orderbook = await client.get_orderbook("EUR_PLN")

    print(orderbook.pair)
    for ask, bid in zip(orderbook.asks, orderbook.bids):
        print(f"{ask.price} {bid.price}")


if __name__ == "__main__":
    asyncio.run(main())
