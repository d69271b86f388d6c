"""
Spread Monitor (API v1)

Polls the order books of every pair of EUR, GBP, USD, CHF and PLN once per
second and prints the best ask minus best bid for each pair.

No API keys required. Press Ctrl+C to stop.
"""

import asyncio
import sys
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from walutomat_client import create_v1_client
from walutomat_client.utils import currency_pairs

CURRENCIES = ["EUR", "GBP", "USD", "CHF", "PLN"]
HEADER_EVERY = 20


def format_spread(orderbook) -> str:
    if not orderbook.asks or not orderbook.bids:
        return "n/a"
    spread = Decimal(orderbook.asks[0].price) - Decimal(orderbook.bids[0].price)
    return f"{spread:1.4f}"


async def main():
    pairs = currency_pairs(CURRENCIES)

    async with create_v1_client() as client:
        line = 0
        while True:
            if line == 0:
                print(" ".join(pairs))
            line = (line + 1) % HEADER_EVERY

            orderbooks = await asyncio.gather(*(client.get_orderbook(pair) for pair in pairs))
            print(" " + "  ".join(format_spread(book) for book in orderbooks))
            await asyncio.sleep(1)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
