#!/usr/bin/env python3
"""
Affiliate administration from the command line.

Usage:
    python scripts/manage_affiliate.py activate AFF0042
    python scripts/manage_affiliate.py suspend AFF0042
    python scripts/manage_affiliate.py recompute AFF0042
"""

import argparse
import asyncio
import sys

from loguru import logger

from affiliates.config.database import async_engine, get_session
from affiliates.services import AffiliateProgram

logger.remove()
logger.add(sys.stderr, level="INFO")

ACTIONS = {
    "activate": "activate_affiliate",
    "suspend": "suspend_affiliate",
    "recompute": "recompute_aggregates",
}


async def run(action: str, affiliate_id: str) -> int:
    """Run one admin action; returns process exit code."""
    try:
        async with get_session() as session:
            program = AffiliateProgram(session)
            result = await getattr(program, ACTIONS[action])(affiliate_id)
    finally:
        await async_engine.dispose()

    if not result.success:
        logger.error(f"{action} {affiliate_id} failed: {result.error}")
        return 1

    logger.success(f"{action} {affiliate_id}: {result.data!r}")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("action", choices=sorted(ACTIONS))
    parser.add_argument("affiliate_id")
    args = parser.parse_args()
    sys.exit(asyncio.run(run(args.action, args.affiliate_id)))


if __name__ == "__main__":
    main()
