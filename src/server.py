"""Protean Engine runner for the Reviews domain.

Needed when PROTEAN_ENV=production switches event processing to async:
the Engine then delivers Review events to the notice dispatcher and
Ordering events to the purchased-orders handler.

Usage:
    PROTEAN_ENV=production python src/server.py
"""

import argparse
import asyncio

from protean.server.engine import Engine


def _get_domain(name):
    """Import and initialize a domain by name."""
    if name == "reviews":
        from reviews.domain import reviews

        reviews.init()
        return reviews
    raise ValueError(f"Unknown domain: {name}")


async def run(domain_names):
    engines = [Engine(_get_domain(name)) for name in domain_names]
    await asyncio.gather(*(engine.run() for engine in engines))


def main():
    parser = argparse.ArgumentParser(description="Storefront Reviews Engine runner")
    parser.add_argument(
        "--domain",
        choices=["reviews"],
        default="reviews",
        help="Domain whose engine to run",
    )
    args = parser.parse_args()

    asyncio.run(run([args.domain]))


if __name__ == "__main__":
    main()
