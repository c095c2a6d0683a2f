"""Dispatch tick runner for the Delivery domain.

Runs the periodic assign and move ticks against the configured database:
- assign: matches the oldest waiting order with the fastest free courier
- move: steps couriers towards their destinations and completes arrivals

Usage:
    python src/server.py                 # Run both ticks
    python src/server.py --tick assign   # Run only the assign tick
    python src/server.py --batch         # Assign every waiting order per tick
"""

import argparse
import asyncio
import signal

from delivery.dispatch.scheduler import DispatchScheduler
from delivery.domain import delivery


async def run(ticks, batch):
    delivery.init()
    scheduler = DispatchScheduler(delivery, batch=batch)

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, scheduler.stop)

    await scheduler.run(ticks)


def main():
    parser = argparse.ArgumentParser(description="Delivery dispatch tick runner")
    parser.add_argument(
        "--tick",
        choices=["assign", "move"],
        help="Run a single tick kind (default: run all)",
    )
    parser.add_argument(
        "--batch",
        action="store_true",
        help="Assign every waiting order on each assign tick",
    )
    args = parser.parse_args()

    ticks = [args.tick] if args.tick else ["assign", "move"]

    asyncio.run(run(ticks, args.batch))


if __name__ == "__main__":
    main()
