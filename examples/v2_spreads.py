"""
Spread Monitor (API v2)

Polls best offers for every pair of EUR, GBP, USD, CHF and PLN once per
second and prints the best ask minus best bid.

No API keys required. Press Ctrl+C to stop.
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from walutomat_client import create_v2_client
from walutomat_client.utils import currency_pairs

CURRENCIES = ["EUR", "GBP", "USD", "CHF", "PLN"]
HEADER_EVERY = 20


def format_spread(envelope) -> str:
    if not envelope.success or envelope.result is None:
        return "n/a"
    best_offers = envelope.result
    if not best_offers.asks or not best_offers.bids:
        return "n/a"
    return f"{best_offers.asks[0].price - best_offers.bids[0].price:1.4f}"


async def main():
    pairs = currency_pairs(CURRENCIES, separator="")

    async with create_v2_client() as client:
        line = 0
        while True:
            if line == 0:
                print(" ".join(pairs))
            line = (line + 1) % HEADER_EVERY

            envelopes = await asyncio.gather(*(client.market_fx_best_offers(pair) for pair in pairs))
            print(" " + "  ".join(format_spread(envelope) for envelope in envelopes))
            await asyncio.sleep(1)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
